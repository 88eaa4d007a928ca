"""Rate limiting for the generation and submission endpoints (SlowAPI)."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from loguru import logger
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

# Per-route limits are declared with ``@limiter.limit(settings.<NAME>_RATE)``.
limiter = Limiter(key_func=get_remote_address)


def init_rate_limiter(app: FastAPI) -> None:
    """Attach the limiter, its middleware and the 429 handler to ``app``."""

    app.state.limiter = limiter
    app.add_middleware(SlowAPIMiddleware)

    async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
        logger.bind(path=str(request.url.path), limit=str(exc.detail)).warning(
            "rate_limit_exceeded"
        )
        return JSONResponse(status_code=429, content={"detail": "Too many requests"})

    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
