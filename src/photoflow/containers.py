"""Dependency container wiring for the application."""

import threading
from dataclasses import dataclass

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
from photoflow.adapters.static_identity_provider import StaticIdentityProvider
from photoflow.config import Settings, parse_photographer_tokens
from photoflow.services.commerce import CommerceService
from photoflow.services.identity import IdentityProvider
from photoflow.services.sessions import SessionService
from photoflow.services.watermark import WatermarkService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    identity_provider: IdentityProvider
    session_service: SessionService
    commerce_service: CommerceService
    watermark_service: WatermarkService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default in-memory dependency container."""
    resolved_settings = settings or Settings()
    lock = threading.RLock()
    photo_repository = InMemoryPhotoRepository()
    session_service = SessionService(
        session_repository=InMemorySessionRepository(),
        photo_repository=photo_repository,
        lock=lock,
    )
    commerce_service = CommerceService(
        package_repository=InMemoryPackageRepository(),
        order_repository=InMemoryOrderRepository(),
        payment_repository=InMemoryPaymentRepository(),
        lock=lock,
        tax_rate=resolved_settings.tax_rate,
    )
    watermark_service = WatermarkService(
        repository=InMemoryWatermarkRepository(),
        photo_repository=photo_repository,
        lock=lock,
    )
    identity_provider = StaticIdentityProvider(
        parse_photographer_tokens(resolved_settings.photographer_tokens)
    )
    return AppContainer(
        settings=resolved_settings,
        identity_provider=identity_provider,
        session_service=session_service,
        commerce_service=commerce_service,
        watermark_service=watermark_service,
    )
