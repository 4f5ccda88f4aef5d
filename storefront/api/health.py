"""Health check endpoint: database connectivity and role table status."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from storefront.core.config import settings
from storefront.core.database import check_db_connected, get_db
from storefront.schemas.health import HealthResponse
from storefront.schemas.role import ALLOWED_ROLE_NAMES
from storefront.services.roles import list_roles

router = APIRouter()


@router.get("", response_model=HealthResponse)
def get_health(db: Annotated[Session, Depends(get_db)]) -> HealthResponse:
    """
    Report "ok" when the database answers and every built-in role is stored,
    otherwise "degraded". Used by load balancers and monitoring.
    """
    if not check_db_connected(db):
        return HealthResponse(
            status="degraded", environment=settings.APP_ENV, database="disconnected"
        )
    roles = [r.name for r in list_roles(db)]
    complete = set(ALLOWED_ROLE_NAMES).issubset(roles)
    return HealthResponse(
        status="ok" if complete else "degraded",
        environment=settings.APP_ENV,
        database="connected",
        roles=roles,
    )
