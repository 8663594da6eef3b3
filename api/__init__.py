"""
FastAPI REST API for the library backend.

This package provides:
- Book listing and creation
- User registration, login, update and deletion
- MongoDB storage through Motor
"""
