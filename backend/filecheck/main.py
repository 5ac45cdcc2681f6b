import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from filecheck.api.routers import files as files_router
from filecheck.api.routers import health as health_router
from filecheck.core.config import Settings, get_settings
from filecheck.services.storage import StorageService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    logger.info(
        "Checking bucket %s in region %s", settings.bucket_name, settings.aws_region
    )
    yield
    app.state.storage.close()


def create_app(
    settings: Settings | None = None,
    storage: StorageService | None = None,
) -> FastAPI:
    """Build the application; raises StartupConfigError when unconfigured."""
    settings = settings or get_settings()
    app = FastAPI(
        debug=settings.debug,
        title="Bucket File Check API",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.storage = storage or StorageService(settings)

    app.include_router(health_router.router)
    app.include_router(files_router.router)

    return app
