"""Health check and service banner routes"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
import logging

from api.dependencies import get_database, get_settings
from api.responses import HealthResponse, RootResponse
from app.config import Settings
from domain.models import Database

router = APIRouter(tags=["Health"])
logger = logging.getLogger("nutribreak.api.health")


@router.get("/", response_model=RootResponse)
def root(settings: Settings = Depends(get_settings)):
    """Service banner"""
    return RootResponse(
        name=settings.app_name,
        version=settings.api_version,
        status="running",
        swagger=settings.docs_url if settings.docs_enabled else None,
    )


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"model": HealthResponse, "description": "Database unreachable"}},
)
def health_check(
    settings: Settings = Depends(get_settings),
    database: Database = Depends(get_database),
):
    """Liveness plus a database round trip"""
    if database.ping():
        return HealthResponse(
            status="ok",
            service=settings.app_name,
            version=settings.app_version,
            database="ok",
        )

    logger.error("health_check_failed database=unreachable")
    body = HealthResponse(
        status="unavailable",
        service=settings.app_name,
        version=settings.app_version,
        database="unreachable",
    )
    return JSONResponse(status_code=503, content=body.model_dump(mode="json"))
