from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api_routers.v1 import api_router
from app.features.waitlist.models.waitlist import WaitlistEntry  # noqa: F401 (registers the table)
from app.features.waitlist.services.dns_check import MXResolver
from app.platform.config import Settings, get_settings
from app.platform.db.session import Database
from app.platform.exceptions import add_exception_handlers
from app.platform.logger import get_logger

logger = get_logger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    database = Database(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if settings.DB_CREATE_SCHEMA:
            await database.create_schema()
        logger.info(
            f"{settings.APP_NAME} started (environment={settings.ENVIRONMENT}, "
            f"dns_check={settings.ENABLE_DNS_CHECK})"
        )
        yield
        await database.dispose()

    app = FastAPI(
        title=settings.APP_NAME,
        description="Waitlist signup API",
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database
    app.state.mx_resolver = MXResolver(timeout=settings.DNS_TIMEOUT_SECONDS)

    # Root endpoint, polled by the hosting platform for base uptime
    @app.get("/", tags=["Info"])
    def root():
        return {"status": "ok", "service": settings.APP_NAME, "version": settings.APP_VERSION}

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials="*" not in settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    add_exception_handlers(app)
    app.include_router(api_router, prefix=settings.API_V1_PREFIX)

    return app


app = create_app()
