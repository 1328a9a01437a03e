"""
Core configuration for the Session Auth API.
Manages environment variables and session signing settings.
"""
import logging
from typing import Optional
from pydantic_settings import BaseSettings
from src.core.exceptions import InternalException
from src.core.parameter_store import get_parameter, signing_secret_parameter_name

logger = logging.getLogger(__name__)

DEV_FALLBACK_SECRET = "dev-session-secret-change-in-production"


class Settings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    # AWS Configuration
    aws_region: str = "us-east-1"
    users_table_name: str = ""
    database_url: Optional[str] = None

    # API Configuration
    api_title: str = "Session Auth API"
    api_version: str = "1.0.0"
    log_level: str = "INFO"

    # Session
    jwt_secret: Optional[str] = None
    jwt_secret_parameter: Optional[str] = None
    jwt_algorithm: str = "HS256"
    session_cookie_name: str = "auth-session"
    session_max_age_seconds: int = 24 * 60 * 60

    # Administrator account
    admin_username: str = "admin"
    admin_password_hash: Optional[str] = None
    admin_name: str = "System Administrator"
    admin_email: Optional[str] = None
    admin_department: str = "System"
    admin_position: str = "Administrator"

    # Environment
    node_env: str = "development"

    class Config:
        env_file = ".env"
        case_sensitive = False

    @property
    def is_production(self) -> bool:
        return self.node_env == "production"

    @property
    def signing_secret(self) -> str:
        """
        Resolve the session signing secret.

        Order: JWT_SECRET, then the Parameter Store entry named by
        JWT_SECRET_PARAMETER (in production defaulting to
        /session-auth-api/<NODE_ENV>/jwt-secret), then a development fallback.

        Raises:
            InternalException: If no secret is available in production
        """
        if self.jwt_secret:
            return self.jwt_secret

        parameter_name = self.jwt_secret_parameter
        if not parameter_name and self.is_production:
            parameter_name = signing_secret_parameter_name(self.node_env)

        if parameter_name:
            try:
                return get_parameter(parameter_name, self.aws_region)
            except Exception as e:
                logger.error("Failed to read signing secret from Parameter Store: %s", e)

        if self.is_production:
            raise InternalException("Session signing secret is not configured")

        logger.warning("Using fallback session signing secret; set JWT_SECRET")
        return DEV_FALLBACK_SECRET
