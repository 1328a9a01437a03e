"""
Session cookie helpers.
Translate a SessionToken to and from the `auth-session` HTTP cookie.
"""
from typing import Optional
from fastapi import Request, Response
from src.core.config import Settings
from src.models.session import SessionToken

SESSION_COOKIE_PATH = "/"
SESSION_COOKIE_SAMESITE = "strict"


def read_session_cookie(request: Request, settings: Settings) -> Optional[str]:
    """Extract the session token value from request cookies."""
    value = request.cookies.get(settings.session_cookie_name)
    return value or None


def set_session_cookie(response: Response, session: SessionToken, settings: Settings) -> None:
    """
    Attach the session cookie to a response.

    HTTP-only, path `/`, and secure when running in production.
    """
    response.set_cookie(
        key=settings.session_cookie_name,
        value=session.value,
        max_age=session.max_age,
        expires=session.expires_at,
        path=SESSION_COOKIE_PATH,
        httponly=True,
        secure=settings.is_production,
        samesite=SESSION_COOKIE_SAMESITE
    )


def clear_session_cookie(response: Response, settings: Settings) -> None:
    """Expire the session cookie on the client."""
    response.delete_cookie(
        key=settings.session_cookie_name,
        path=SESSION_COOKIE_PATH,
        httponly=True,
        secure=settings.is_production,
        samesite=SESSION_COOKIE_SAMESITE
    )
