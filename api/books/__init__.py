"""
Book endpoints, service and repository.
"""
