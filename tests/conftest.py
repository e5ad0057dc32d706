"""Shared test fixtures."""

import itertools
import threading
from collections.abc import Callable
from datetime import UTC, datetime

import pytest
from fastapi.testclient import TestClient

from photoflow.adapters.memory_commerce_repository import (
    InMemoryOrderRepository,
    InMemoryPackageRepository,
    InMemoryPaymentRepository,
)
from photoflow.adapters.memory_photo_repository import InMemoryPhotoRepository
from photoflow.adapters.memory_session_repository import InMemorySessionRepository
from photoflow.adapters.memory_watermark_repository import (
    InMemoryWatermarkRepository,
)
from photoflow.api.app import create_app
from photoflow.config import Settings
from photoflow.containers import AppContainer, build_container
from photoflow.domain.models import Photographer
from photoflow.domain.photos import PhotoRecord, PhotoUpload
from photoflow.domain.sessions import SessionRecord
from photoflow.services.commerce import CommerceService
from photoflow.services.sessions import SessionService
from photoflow.services.watermark import WatermarkService

PHOTOGRAPHER_TOKEN = "token-ana"
OTHER_TOKEN = "token-bruno"
PHOTOGRAPHER = Photographer(id=1, name="Ana Studio", email="ana@studio.com")
OTHER_PHOTOGRAPHER = Photographer(id=2, name="Bruno")


def sequential_codes(*codes: str) -> Callable[[int], str]:
    """Code factory yielding the given codes in order."""
    remaining = iter(codes)
    return lambda length: next(remaining)


def counting_codes() -> Callable[[int], str]:
    counter = itertools.count(1)
    return lambda length: f"C{next(counter):0{length - 1}d}"


def make_session(
    service: SessionService, photographer_id: int = 1, **kwargs: object
) -> SessionRecord:
    values: dict[str, object] = {
        "name": "Engagement shoot",
        "client_name": "Clara",
        "client_email": "clara@example.com",
        "session_date": datetime(2024, 12, 15, 14, 30, tzinfo=UTC),
    }
    values.update(kwargs)
    return service.create_session(photographer_id=photographer_id, **values)


def upload(
    service: SessionService, session: SessionRecord, *filenames: str
) -> list[PhotoRecord]:
    return service.record_photo_upload(
        session.id,
        session.photographer_id,
        [PhotoUpload(filename=name) for name in filenames],
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        photographer_tokens=(
            f"{PHOTOGRAPHER_TOKEN}=1:photographer:Ana Studio:ana@studio.com,"
            f"{OTHER_TOKEN}=2:photographer:Bruno"
        ),
    )


@pytest.fixture
def lock() -> threading.RLock:
    return threading.RLock()


@pytest.fixture
def photo_repository() -> InMemoryPhotoRepository:
    return InMemoryPhotoRepository()


@pytest.fixture
def session_service(
    photo_repository: InMemoryPhotoRepository, lock: threading.RLock
) -> SessionService:
    return SessionService(
        session_repository=InMemorySessionRepository(),
        photo_repository=photo_repository,
        lock=lock,
        code_factory=counting_codes(),
    )


@pytest.fixture
def commerce_service(lock: threading.RLock) -> CommerceService:
    return CommerceService(
        package_repository=InMemoryPackageRepository(),
        order_repository=InMemoryOrderRepository(),
        payment_repository=InMemoryPaymentRepository(),
        lock=lock,
    )


@pytest.fixture
def watermark_service(
    photo_repository: InMemoryPhotoRepository, lock: threading.RLock
) -> WatermarkService:
    return WatermarkService(
        repository=InMemoryWatermarkRepository(),
        photo_repository=photo_repository,
        lock=lock,
    )


@pytest.fixture
def container(settings: Settings) -> AppContainer:
    return build_container(settings)


@pytest.fixture
def client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))


@pytest.fixture
def auth_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {PHOTOGRAPHER_TOKEN}"}


@pytest.fixture
def other_auth_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {OTHER_TOKEN}"}
