import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from skistation.core.config import get_settings
from skistation.core.logging_config import configure_logging
from skistation.db.create_tables import create_all
from skistation.routers import course as course_router
from skistation.routers import instructor as instructor_router
from skistation.routers import piste as piste_router
from skistation.routers import registration as registration_router
from skistation.routers import skier as skier_router
from skistation.routers import subscription as subscription_router

logger = logging.getLogger(__name__)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Inject baseline security headers on every JSON response."""

    def __init__(self, app, *, enforce_hsts: bool) -> None:
        super().__init__(app)
        self._enforce_hsts = enforce_hsts

    async def dispatch(self, request, call_next):
        response = await call_next(request)
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("Referrer-Policy", "no-referrer")
        if self._enforce_hsts:
            response.headers.setdefault("Strict-Transport-Security", "max-age=31536000; includeSubDomains")
        return response


settings = get_settings()
configure_logging(settings.log_level)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    if get_settings().auto_create_tables:
        create_all()
    logger.info("Ski station API started (env=%s)", settings.app_env)
    yield


app = FastAPI(title="Ski Station API", lifespan=lifespan)

if settings.app_env != "prod":
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:8000",
            "http://127.0.0.1:8000",
            "http://localhost:4200",
            "http://127.0.0.1:4200",
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )
app.add_middleware(SecurityHeadersMiddleware, enforce_hsts=settings.app_env == "prod")

app.include_router(skier_router.router)
app.include_router(subscription_router.router)
app.include_router(instructor_router.router)
app.include_router(course_router.router)
app.include_router(piste_router.router)
app.include_router(registration_router.router)


def create_app() -> FastAPI:
    """Factory compatible with uvicorn/gunicorn."""
    return app
