import logging
import os
import sys
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Ensure project root is on sys.path
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from filecheck.core.config import Settings, get_settings
from filecheck.main import create_app
from filecheck.schemas import LookupResult, NotFound
from filecheck.services.storage import StorageService


class DummyStorage(StorageService):
    """In-memory stand-in that answers lookups from a prepared table."""

    def __init__(self, settings: Settings) -> None:  # type: ignore[super-init-not-called]
        self.settings = settings
        self.bucket = settings.bucket_name
        self.results: dict[str, LookupResult] = {}
        self.calls: list[str] = []
        self.closed = False

    async def head_object(self, key: str) -> LookupResult:  # type: ignore[override]
        self.calls.append(key)
        return self.results.get(key, NotFound(key=key))

    def close(self) -> None:  # type: ignore[override]
        self.closed = True


@pytest.fixture(scope="session", autouse=True)
def configure_environment():
    os.environ["BUCKET_NAME"] = "test-bucket"
    os.environ["AWS_REGION"] = "us-west-2"
    os.environ["AWS_ACCESS_KEY"] = "test"
    os.environ["AWS_SECRET_KEY"] = "test"
    os.environ.pop("S3_ENDPOINT_URL", None)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    return Settings(BUCKET_NAME="test-bucket", AWS_ACCESS_KEY="test", AWS_SECRET_KEY="test")


@pytest.fixture
def storage(settings) -> DummyStorage:
    return DummyStorage(settings)


@pytest.fixture
def app_instance(settings, storage):
    return create_app(settings=settings, storage=storage)


@pytest_asyncio.fixture
async def client(app_instance):
    transport = ASGITransport(app=app_instance)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client


@pytest.fixture
def restore_package_logger():
    logger = logging.getLogger("filecheck")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
