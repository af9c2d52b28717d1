from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from core.config import settings
from core.logging import get_module_logger
from api.dependencies.rate_limits import get_limiter
from infrastructure.i18n import Surface
from infrastructure.services import get_translator

logger = get_module_logger()
router = APIRouter(tags=["System"])
limiter = get_limiter()


# Load balancer health checks hit these often, so the limits are generous
@router.get("/version")
@limiter.limit("50/minute")
def get_version(request: Request):  # pylint: disable=unused-argument
    """Get the version of the application."""
    return {"version": settings.GIT_SHA}


@router.get("/health")
@limiter.limit("50/minute")
def get_health(request: Request):  # pylint: disable=unused-argument
    """Liveness check."""
    return {"status": "ok"}


@router.get("/ready")
@limiter.limit("50/minute")
def get_ready(request: Request):  # pylint: disable=unused-argument
    """Readiness check: every surface translation table must load."""
    tables = {}
    for surface in Surface:
        try:
            tables[surface.value] = len(get_translator(surface).keys())
        except (FileNotFoundError, ValueError) as e:
            logger.error("translation_table_unavailable", surface=surface.value, error=str(e))
            return JSONResponse(
                status_code=503,
                content={"status": "unavailable", "surface": surface.value},
            )
    return {"status": "ok", "tables": tables}
