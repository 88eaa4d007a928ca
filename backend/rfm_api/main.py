"""Application entry point for the RFM segmentation API service."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from loguru import logger

from rfm_api.api.routes.rfm import router as rfm_router
from rfm_api.api.routes.selected_ids import router as selected_ids_router
from rfm_api.core.config import settings
from rfm_api.core.errors import init_error_handlers
from rfm_api.core.logging import setup_logging
from rfm_api.core.middleware import BodySizeLimitMiddleware, RequestContextLogMiddleware
from rfm_api.core.rate_limit import init_rate_limiter

setup_logging()

app = FastAPI(title=settings.APP_NAME, debug=settings.DEBUG)

init_rate_limiter(app)
init_error_handlers(app)

app.add_middleware(RequestContextLogMiddleware)


def _cors_origins() -> list[str]:
    if settings.ENV == "prod":
        if not settings.CORS_ALLOWED_ORIGINS:
            raise RuntimeError("CORS_ALLOWED_ORIGINS must be configured for prod")
        return settings.CORS_ALLOWED_ORIGINS
    return settings.CORS_ALLOWED_ORIGINS or ["http://localhost:3000"]


app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins(),
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "X-Request-ID"],
)

app.add_middleware(BodySizeLimitMiddleware)
app.add_middleware(GZipMiddleware, minimum_size=1000)


@app.on_event("startup")
async def startup_event():
    logger.bind(env=settings.ENV).info("rfm_api_started")


@app.get("/api/healthz", tags=["system"], summary="Liveness probe")
def healthz() -> dict[str, str]:
    """Simple liveness probe that load balancers and monitors can call."""

    return {"status": "ok"}


app.include_router(rfm_router, prefix="/api")
app.include_router(selected_ids_router, prefix="/api")
