"""Health check: database connectivity and presence of the seeded OWNER role."""

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from petconnect.core.config import settings
from petconnect.core.database import check_db_connected, get_db
from petconnect.models import RoleKind
from petconnect.repositories import RoleRepository
from petconnect.schemas.health import HealthResponse

router = APIRouter()


@router.get("/", response_model=HealthResponse)
def get_health(db: Session = Depends(get_db)) -> HealthResponse:
    """
    Return service health, database connectivity and whether registration can
    succeed (the OWNER role must be seeded). Used by load balancers and monitoring.
    """
    if not check_db_connected(db):
        return HealthResponse(environment=settings.APP_ENV, database="disconnected")

    try:
        roles_seeded = RoleRepository(db).find_by_role_kind(RoleKind.OWNER) is not None
    except SQLAlchemyError:
        roles_seeded = None
    return HealthResponse(
        environment=settings.APP_ENV,
        database="connected",
        roles_seeded=roles_seeded,
    )
