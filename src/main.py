"""
Main FastAPI application entry point.
Configures and initializes the Session Auth API.
"""
import logging
from typing import Optional
from fastapi import FastAPI, Request
from src.core.config import Settings
from src.core.exception_handler import register_exception_handlers
from src.api.routes import auth_routes, diagnostics_routes, health_routes
from src.repositories.dynamo_user_repository import DynamoUserRepository
from src.repositories.user_repository import UserRepository
from src.services.auth_service import AuthService
from src.services.credential_validator import CredentialValidator, build_credential_validator

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def create_app(
    settings: Optional[Settings] = None,
    user_repository: Optional[UserRepository] = None,
    credential_validator: Optional[CredentialValidator] = None
) -> FastAPI:
    """
    Build the application and its collaborators.

    Anything not passed in is constructed from settings. The user store
    is only created when USERS_TABLE_NAME is configured.
    """
    settings = settings or Settings()

    if user_repository is None and settings.users_table_name:
        user_repository = DynamoUserRepository(settings)

    if credential_validator is None:
        credential_validator = build_credential_validator(settings, user_repository)

    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        description="Cookie-based session authentication service"
    )

    app.state.settings = settings
    app.state.user_repository = user_repository
    app.state.auth_service = AuthService(credential_validator, settings, user_repository)

    # Register exception handlers
    register_exception_handlers(app)

    # Register routes
    app.include_router(auth_routes.router)
    app.include_router(diagnostics_routes.router)
    app.include_router(health_routes.router)

    # Middleware to log request paths
    @app.middleware("http")
    async def log_request(request: Request, call_next):
        logger.info("%s %s", request.method, request.url.path)
        response = await call_next(request)
        return response

    logger.info(
        "Session Auth API configured (env=%s, user store=%s)",
        settings.node_env,
        "enabled" if user_repository is not None else "disabled"
    )
    return app


# For local development
if __name__ == "__main__":
    import uvicorn
    local_settings = Settings()
    configure_logging(local_settings.log_level)
    uvicorn.run(create_app(local_settings), host="0.0.0.0", port=8000)
