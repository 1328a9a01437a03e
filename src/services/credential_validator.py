"""
Credential validators.

A validator turns a LoginRequest into an Identity or raises
AuthenticationException. Validators are built once by the application
factory and injected into AuthService.
"""
import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional
import bcrypt
from src.core.config import Settings
from src.core.exceptions import AuthenticationException, InternalException
from src.models.dto.auth_dto import LoginRequest, LoginType
from src.models.identity import Identity, LOGIN_TYPE_ADMIN, ROLE_ADMIN, ROLE_USER
from src.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid username or password"
INVALID_ADMIN_CREDENTIALS_MESSAGE = "Invalid administrator credentials"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a bcrypt hashed password.

    Args:
        plain_password: The plain text password to verify
        hashed_password: The bcrypt hashed password from the store

    Returns:
        True if password matches, False otherwise (including malformed hashes)
    """
    try:
        return bcrypt.checkpw(plain_password.encode('utf-8'), hashed_password.encode('utf-8'))
    except ValueError:
        return False


class CredentialValidator(ABC):
    """Capability interface: validate(credentials) -> Identity."""

    @abstractmethod
    def validate(self, credentials: LoginRequest) -> Identity:
        """
        Raises:
            AuthenticationException: If the credentials are rejected
        """
        pass


class AdminCredentialValidator(CredentialValidator):
    """Checks the single configured administrator account."""

    def __init__(self, username: str, password_hash: Optional[str], identity: Optional[Identity] = None):
        self.username = username
        self.password_hash = password_hash
        self.identity = identity or Identity(
            id="admin",
            username=username,
            role=ROLE_ADMIN,
            name="System Administrator",
            department="System",
            position="Administrator",
            login_type=LOGIN_TYPE_ADMIN
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "AdminCredentialValidator":
        return cls(settings.admin_username, settings.admin_password_hash, admin_identity(settings))

    def validate(self, credentials: LoginRequest) -> Identity:
        if not self.password_hash:
            logger.warning("Admin login attempted but ADMIN_PASSWORD_HASH is not set")
            raise AuthenticationException(INVALID_ADMIN_CREDENTIALS_MESSAGE)

        username_ok = credentials.username == self.username
        # bcrypt runs even when the username differs
        password_ok = verify_password(credentials.password, self.password_hash)
        if not (username_ok and password_ok):
            raise AuthenticationException(INVALID_ADMIN_CREDENTIALS_MESSAGE)

        return self.identity


class UserStoreCredentialValidator(CredentialValidator):
    """Checks regular accounts against the user store."""

    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    def validate(self, credentials: LoginRequest) -> Identity:
        user = self.user_repository.get_by_username(credentials.username)

        if not user or not user.get('is_active', True):
            raise AuthenticationException(INVALID_CREDENTIALS_MESSAGE)

        if not verify_password(credentials.password, user.get('password_hash', '')):
            raise AuthenticationException(INVALID_CREDENTIALS_MESSAGE)

        self.user_repository.record_login(user['username'])
        return user_to_identity(user)


class LoginTypeCredentialValidator(CredentialValidator):
    """Dispatches to a validator per login type."""

    def __init__(self, validators: Dict[LoginType, CredentialValidator]):
        self.validators = validators

    def validate(self, credentials: LoginRequest) -> Identity:
        validator = self.validators.get(credentials.login_type)
        if validator is None:
            raise InternalException(f"No credential validator configured for login type '{credentials.login_type.value}'")
        return validator.validate(credentials)


def admin_identity(settings: Settings) -> Identity:
    """Profile of the configured administrator account."""
    return Identity(
        id="admin",
        username=settings.admin_username,
        role=ROLE_ADMIN,
        name=settings.admin_name,
        email=settings.admin_email,
        department=settings.admin_department,
        position=settings.admin_position,
        login_type=LOGIN_TYPE_ADMIN
    )


def user_to_identity(user: dict) -> Identity:
    """Convert a user store item to an Identity."""
    return Identity(
        id=str(user.get('id') or user['username']),
        username=user['username'],
        role=user.get('role', ROLE_USER),
        name=user.get('name'),
        email=user.get('email'),
        department=user.get('department'),
        position=user.get('position')
    )


def build_credential_validator(settings: Settings, user_repository: Optional[UserRepository]) -> CredentialValidator:
    """Assemble the validator for both login types from configuration."""
    validators: Dict[LoginType, CredentialValidator] = {
        LoginType.ADMIN: AdminCredentialValidator.from_settings(settings)
    }
    if user_repository is not None:
        validators[LoginType.USER] = UserStoreCredentialValidator(user_repository)
    return LoginTypeCredentialValidator(validators)
