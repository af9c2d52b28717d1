from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from api.dependencies.rate_limits import setup_rate_limiter
from api.router import api_router
from core.config import settings
from core.logging import get_module_logger
from infrastructure.logging import bind_request_context
from server.lifespan import lifespan

logger = get_module_logger()


handler = FastAPI(title="FutureUp Localization", lifespan=lifespan)
setup_rate_limiter(handler)


allow_origins = ["*"] if settings.is_production else settings.server.ALLOWED_ORIGINS
handler.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@handler.middleware("http")
async def request_context_middleware(request: Request, call_next):
    """Bind correlation id and request metadata to every log of the request."""
    correlation_id = request.headers.get("x-correlation-id")
    with bind_request_context(
        correlation_id=correlation_id,
        request_path=request.url.path,
        request_method=request.method,
    ):
        response = await call_next(request)
        logger.debug("request_completed", status_code=response.status_code)
    if correlation_id:
        response.headers["X-Correlation-ID"] = correlation_id
    return response


handler.include_router(api_router)
