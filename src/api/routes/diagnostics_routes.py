"""
Diagnostics routes for connectivity testing.
Report whether configuration is present, never what it is.
"""
from datetime import datetime, timezone
from fastapi import APIRouter, Depends
from src.core.config import Settings
from src.core.dependencies import get_settings
from src.models.dto.diagnostics_dto import DiagnosticsResponse, EnvironmentFlags, WriteCheckResponse

router = APIRouter(prefix="/api", tags=["Diagnostics"])


@router.get("/test", response_model=DiagnosticsResponse)
async def diagnostics(settings: Settings = Depends(get_settings)):
    """Configuration presence snapshot."""
    return DiagnosticsResponse(
        status="API route working",
        timestamp=datetime.now(timezone.utc).isoformat(),
        env=EnvironmentFlags(
            has_database=bool(settings.database_url),
            has_jwt=bool(settings.jwt_secret),
            node_env=settings.node_env
        )
    )


@router.post("/test", response_model=WriteCheckResponse)
async def diagnostics_write():
    """Confirms the route accepts writes. Changes nothing."""
    return WriteCheckResponse(status="POST working", message="API routes are functioning")
