"""
User account endpoints, service and repository.
"""
