"""
Authentication API routes.
Session cookies are issued on login and deleted on logout.
"""
import logging
from datetime import datetime, timezone
from fastapi import APIRouter, Depends, Request, Response, status
from src.core.config import Settings
from src.core.dependencies import get_auth_service, get_settings
from src.core.exceptions import AuthenticationException, InternalException
from src.core.session_cookie import clear_session_cookie, read_session_cookie, set_session_cookie
from src.models.dto.auth_dto import (
    LoginRequest,
    LoginResponse,
    LogoutResponse,
    RouteStatusResponse,
    SessionCheckResponse,
    UserInfo
)
from src.services.auth_service import AuthService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["Authentication"])


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.post("/login", response_model=LoginResponse, status_code=status.HTTP_200_OK)
def login(
    request: LoginRequest,
    response: Response,
    auth_service: AuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings)
):
    """
    Authenticate a user and start a session.

    - **username**: User's username
    - **password**: User's password
    - **loginType**: `admin` or `user`

    Sets the `auth-session` cookie on success.
    """
    identity, session = auth_service.login(request)
    set_session_cookie(response, session, settings)

    return LoginResponse(
        success=True,
        message="Login successful",
        user=UserInfo.from_identity(identity)
    )


@router.get("/login", response_model=RouteStatusResponse)
async def login_status():
    """Status check for the login route."""
    return RouteStatusResponse(status="Login API is running", timestamp=_now())


@router.post("/logout", response_model=LogoutResponse)
async def logout(response: Response, settings: Settings = Depends(get_settings)):
    """
    End the current session.

    Always succeeds, with or without an existing session.
    """
    clear_session_cookie(response, settings)
    return LogoutResponse(success=True, message="Logout successful")


@router.get("/logout", response_model=RouteStatusResponse)
async def logout_status():
    """Status check for the logout route. Never touches cookies."""
    return RouteStatusResponse(status="Logout API is running", timestamp=_now())


@router.get("/check-session", response_model=SessionCheckResponse)
def check_session(
    request: Request,
    response: Response,
    auth_service: AuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings)
):
    """
    Return the user behind the session cookie, or null.

    A cookie that no longer resolves to a user is cleared.
    """
    value = read_session_cookie(request, settings)
    if value is None:
        return SessionCheckResponse(user=None)

    try:
        identity = auth_service.check_session(value)
    except AuthenticationException as e:
        logger.info("Session rejected: %s", e.message)
        clear_session_cookie(response, settings)
        return SessionCheckResponse(user=None)
    except InternalException as e:
        logger.error("Session check failed: %s", e.message, exc_info=e)
        clear_session_cookie(response, settings)
        return SessionCheckResponse(user=None)

    return SessionCheckResponse(user=UserInfo.from_identity(identity))
