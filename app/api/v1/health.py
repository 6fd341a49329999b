"""Health check endpoint with database and signing-secret status."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.v1.auth import get_token_config
from app.core.config import settings
from app.core.database import check_db_connected, get_db
from app.core.security import TokenConfig
from app.schemas.health import HealthResponse

router = APIRouter()


@router.get("/", response_model=HealthResponse)
def get_health(
    db: Annotated[Session, Depends(get_db)],
    config: Annotated[TokenConfig, Depends(get_token_config)],
) -> HealthResponse:
    """
    Return service health, database connectivity, and whether logins can mint tokens.
    Used by load balancers and monitoring.
    """
    return HealthResponse(
        status="ok",
        environment=settings.APP_ENV,
        database="connected" if check_db_connected(db) else "disconnected",
        token_signing="configured" if config.has_secret else "missing_secret",
    )
