"""
API models and schemas for the FastAPI application.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class BookCreateRequest(BaseModel):
    """Request body for creating a book."""
    title: Optional[str] = Field(None, description="Book title")


class BookResponse(BaseModel):
    """Book response model for API."""
    id: str = Field(..., description="Unique book identifier")
    title: str = Field(..., description="Book title")


class UserRecord(BaseModel):
    """User as stored, including the password hash. Never returned to clients."""
    id: str = Field(..., description="Unique user identifier")
    email: str = Field(..., description="Email address")
    full_name: str = Field(..., description="Full name")
    password: str = Field(..., description="Salted password hash")


class UserResponse(BaseModel):
    """User response model for API."""
    id: str = Field(..., description="Unique user identifier")
    email: str = Field(..., description="Email address")
    full_name: str = Field(..., description="Full name")

    @classmethod
    def from_record(cls, record: UserRecord) -> "UserResponse":
        return cls(id=record.id, email=record.email, full_name=record.full_name)


# Request bodies keep every field optional: the controllers own validation
# and its order.
class UserCreateRequest(BaseModel):
    """Request body for user registration."""
    email: Optional[str] = Field(None, description="Email address")
    password: Optional[str] = Field(None, description="Plain text password")
    full_name: Optional[str] = Field(None, description="Full name")
    confirm_password: Optional[str] = Field(None, description="Password confirmation")


class UserUpdateRequest(BaseModel):
    """Request body for updating a user."""
    email: Optional[str] = Field(None, description="Email address")
    full_name: Optional[str] = Field(None, description="Full name")


class UserLoginRequest(BaseModel):
    """Request body for login."""
    email: Optional[str] = Field(None, description="Email address")
    password: Optional[str] = Field(None, description="Plain text password")


class MessageResponse(BaseModel):
    """Plain message response."""
    message: str = Field(..., description="Result message")


class ErrorResponse(BaseModel):
    """Error response model."""
    error: str = Field(..., description="Error kind")
    message: str = Field(..., description="Error message")
    detail: Optional[str] = Field(None, description="Additional error details")
    status_code: int = Field(..., description="HTTP status code")


class HealthResponse(BaseModel):
    """Health check response model."""
    status: str = Field(..., description="Service status")
    timestamp: datetime = Field(..., description="Current timestamp")
    version: str = Field(..., description="API version")
    database_status: str = Field(..., description="Database connection status")
