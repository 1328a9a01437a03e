"""
Data Transfer Objects for authentication endpoints.
"""
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, ValidationInfo, field_validator
from src.models.identity import Identity


class LoginType(str, Enum):
    """Which trust store a login is checked against."""
    ADMIN = "admin"
    USER = "user"


class LoginRequest(BaseModel):
    """Request model for user login."""
    username: str = Field(..., max_length=128, description="Username")
    password: str = Field(..., max_length=256, repr=False, description="Password")
    login_type: LoginType = Field(..., alias="loginType", description="Login type: admin or user")

    @field_validator('username', 'password')
    @classmethod
    def validate_not_empty(cls, v: str, info: ValidationInfo) -> str:
        if not v or v.strip() == "":
            raise ValueError("Field cannot be empty")
        # passwords are compared byte for byte
        return v.strip() if info.field_name == 'username' else v


class UserInfo(BaseModel):
    """Public view of an authenticated user."""
    id: str
    username: str
    role: str
    name: Optional[str] = None
    email: Optional[str] = None
    department: Optional[str] = None
    position: Optional[str] = None

    @classmethod
    def from_identity(cls, identity: Identity) -> "UserInfo":
        return cls(
            id=identity.id,
            username=identity.username,
            role=identity.role,
            name=identity.name,
            email=identity.email,
            department=identity.department,
            position=identity.position
        )


class LoginResponse(BaseModel):
    """Response model for successful login."""
    success: bool = Field(default=True, description="Whether login succeeded")
    message: str = Field(default="Login successful", description="Status message")
    user: UserInfo = Field(..., description="Authenticated user")


class LogoutResponse(BaseModel):
    """Response model for logout."""
    success: bool = True
    message: str = "Logout successful"


class RouteStatusResponse(BaseModel):
    """Status check for an auth route."""
    status: str
    timestamp: str


class SessionCheckResponse(BaseModel):
    """Current session user, or null when anonymous."""
    user: Optional[UserInfo] = None
