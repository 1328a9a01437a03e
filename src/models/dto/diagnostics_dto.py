"""
Data Transfer Objects for diagnostics and health endpoints.
Only presence flags are exposed; configuration values never are.
"""
from pydantic import BaseModel, ConfigDict, Field


class EnvironmentFlags(BaseModel):
    """Presence of required configuration."""
    model_config = ConfigDict(populate_by_name=True)

    has_database: bool = Field(..., alias="hasDatabase")
    has_jwt: bool = Field(..., alias="hasJWT")
    node_env: str = Field(..., alias="nodeEnv")


class DiagnosticsResponse(BaseModel):
    """Response schema for GET /api/test."""
    status: str
    timestamp: str
    env: EnvironmentFlags


class WriteCheckResponse(BaseModel):
    """Response schema for POST /api/test."""
    status: str
    message: str


class HealthResponse(BaseModel):
    """Response schema for GET /api/health."""
    model_config = ConfigDict(populate_by_name=True)

    status: str
    environment: str
    has_db_url: bool = Field(..., alias="hasDbUrl")
    db_connection: bool = Field(..., alias="dbConnection")
    timestamp: str
