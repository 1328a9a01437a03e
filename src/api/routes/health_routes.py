"""
Health check routes for monitoring.
"""
from datetime import datetime, timezone
from typing import Optional
from fastapi import APIRouter, Depends
from src.core.config import Settings
from src.core.dependencies import get_settings, get_user_repository
from src.models.dto.diagnostics_dto import HealthResponse
from src.repositories.user_repository import UserRepository

router = APIRouter(prefix="/api", tags=["Health"])


@router.get("/health", response_model=HealthResponse)
def health_check(
    settings: Settings = Depends(get_settings),
    user_repository: Optional[UserRepository] = Depends(get_user_repository)
):
    """Health check endpoint for monitoring."""
    return HealthResponse(
        status="ok",
        environment=settings.node_env,
        has_db_url=bool(settings.database_url),
        db_connection=user_repository.ping() if user_repository is not None else False,
        timestamp=datetime.now(timezone.utc).isoformat()
    )
