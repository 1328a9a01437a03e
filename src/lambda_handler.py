"""
AWS Lambda entry point.
Wraps the FastAPI application with Mangum.
"""
from typing import Optional
from mangum import Mangum
from src.core.config import Settings
from src.main import configure_logging, create_app


def create_handler(settings: Optional[Settings] = None) -> Mangum:
    """Build the Lambda handler from environment configuration."""
    settings = settings or Settings()
    configure_logging(settings.log_level)
    return Mangum(create_app(settings), lifespan="off")


handler = create_handler()
