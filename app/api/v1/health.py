"""Health check endpoint with database connectivity check."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.core.config import Settings
from app.core.database import MongoStore, get_app_settings, get_store
from app.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def get_health(
    store: Annotated[MongoStore, Depends(get_store)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> HealthResponse:
    """
    Return service health status and database connectivity.
    Used by load balancers and monitoring.
    """
    db_status = "connected" if store.is_connected() else "disconnected"

    return HealthResponse(
        status="ok",
        environment=settings.APP_ENV,
        database=db_status,
    )
