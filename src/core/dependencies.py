"""
Dependency providers for FastAPI.
Objects are built once by create_app() and kept on app.state.
"""
from typing import Optional
from fastapi import Request
from src.core.config import Settings
from src.repositories.user_repository import UserRepository
from src.services.auth_service import AuthService


def get_settings(request: Request) -> Settings:
    """Get the application Settings instance."""
    return request.app.state.settings


def get_user_repository(request: Request) -> Optional[UserRepository]:
    """Get the user store, or None when no user store is configured."""
    return request.app.state.user_repository


def get_auth_service(request: Request) -> AuthService:
    """Get the AuthService instance with injected validator."""
    return request.app.state.auth_service
