"""
Authentication service for login and session token management.
"""
import logging
import uuid
import jwt
from datetime import datetime, timedelta, timezone
from typing import Optional, Tuple
from src.core.config import Settings
from src.core.exceptions import AuthenticationException, InternalException, SessionAuthException
from src.models.dto.auth_dto import LoginRequest
from src.models.identity import Identity, LOGIN_TYPE_ADMIN
from src.models.session import SessionToken
from src.repositories.user_repository import UserRepository
from src.services.credential_validator import CredentialValidator, admin_identity, user_to_identity

logger = logging.getLogger(__name__)


def create_session_token(identity: Identity, settings: Settings) -> SessionToken:
    """
    Generate a signed session token for an authenticated identity.

    Args:
        identity: The identity to encode in the token
        settings: Signing configuration

    Returns:
        SessionToken holding the encoded JWT and its expiry
    """
    issued_at = datetime.now(timezone.utc)
    expiration = issued_at + timedelta(seconds=settings.session_max_age_seconds)

    payload = identity.to_claims()
    payload.update({
        "exp": expiration,
        "iat": issued_at,
        "jti": uuid.uuid4().hex
    })

    token = jwt.encode(payload, settings.signing_secret, algorithm=settings.jwt_algorithm)
    return SessionToken(value=token, expires_at=expiration)


def decode_session_token(value: str, settings: Settings) -> Identity:
    """
    Decode and verify a session token.

    Raises:
        AuthenticationException: If the token is expired, tampered or incomplete
    """
    try:
        claims = jwt.decode(value, settings.signing_secret, algorithms=[settings.jwt_algorithm])
    except jwt.ExpiredSignatureError:
        raise AuthenticationException("Session has expired")
    except jwt.InvalidTokenError:
        raise AuthenticationException("Invalid session")

    if not claims.get("sub") or not claims.get("username") or not claims.get("role"):
        raise AuthenticationException("Invalid session payload")

    return Identity.from_claims(claims)


class AuthService:
    """Service for login and session checks."""

    def __init__(
        self,
        credential_validator: CredentialValidator,
        settings: Settings,
        user_repository: Optional[UserRepository] = None
    ):
        self.credential_validator = credential_validator
        self.settings = settings
        self.user_repository = user_repository

    def login(self, credentials: LoginRequest) -> Tuple[Identity, SessionToken]:
        """
        Validate credentials and issue a session token.

        Raises:
            AuthenticationException: If the credentials are rejected
            InternalException: On any unexpected failure
        """
        try:
            identity = self.credential_validator.validate(credentials)
            session = create_session_token(identity, self.settings)
        except SessionAuthException:
            raise
        except Exception as e:
            raise InternalException(f"Unexpected error during login: {str(e)}") from e

        logger.info("Login succeeded for %s (%s)", identity.username, credentials.login_type.value)
        return identity, session

    def check_session(self, value: str) -> Identity:
        """
        Resolve a session cookie value to its current identity.

        Only the configured administrator is answered from configuration.
        Every other session is re-read from the user store, whatever its
        role, so deactivated or deleted accounts lose their session.

        Raises:
            AuthenticationException: If the session is not valid anymore
            InternalException: If the user store cannot be read
        """
        identity = decode_session_token(value, self.settings)

        if identity.login_type == LOGIN_TYPE_ADMIN:
            if (identity.id != "admin" or identity.username != self.settings.admin_username
                    or not self.settings.admin_password_hash):
                raise AuthenticationException("Administrator account has changed")
            return admin_identity(self.settings)

        if self.user_repository is None:
            raise AuthenticationException("User sessions are not supported")

        user = self.user_repository.get_by_username(identity.username)
        if not user or not user.get('is_active', True):
            raise AuthenticationException("User not found or inactive")
        return user_to_identity(user)
