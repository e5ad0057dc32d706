"""Demo data mirroring a typical pre-wedding shoot."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime

from photoflow.containers import AppContainer
from photoflow.domain.commerce import (
    OrderItemRequest,
    OrderRecord,
    PackageRecord,
    PaymentRecord,
)
from photoflow.domain.photos import PhotoUpload, SelectionUpdate, SessionStats
from photoflow.domain.sessions import SessionRecord

logger = logging.getLogger(__name__)

DEMO_PHOTOGRAPHER_ID = 1

_LENSES = (
    "85mm f/1.4",
    "85mm f/1.4",
    "24-70mm f/2.8",
    "24-70mm f/2.8",
    "70-200mm f/2.8",
    "70-200mm f/2.8",
    "50mm f/1.4",
    "50mm f/1.4",
)

_SELECTIONS = {
    0: SelectionUpdate(for_album=True, client_notes="Perfect for the album cover!"),
    1: SelectionUpdate(for_editing=True, client_notes="Brighten the background"),
    2: SelectionUpdate(for_album=True, client_notes="We love this pose"),
    3: SelectionUpdate(for_editing=True, client_notes="Remove the passer-by"),
    4: SelectionUpdate(for_album=True),
    5: SelectionUpdate(by_client=True, client_notes="Really like this one!"),
    6: SelectionUpdate(by_client=True),
}


@dataclass(frozen=True)
class DemoData:
    """Everything created by the seed run."""

    session: SessionRecord
    stats: SessionStats
    packages: list[PackageRecord]
    order: OrderRecord
    payment: PaymentRecord


def seed_demo_data(
    container: AppContainer, photographer_id: int = DEMO_PHOTOGRAPHER_ID
) -> DemoData:
    """Create a session with photos, selections, packages and a paid order."""
    sessions = container.session_service
    commerce = container.commerce_service

    session = sessions.create_session(
        photographer_id=photographer_id,
        name="Ana & Carlos - Engagement",
        description="Pre-wedding shoot at Ibirapuera Park",
        client_name="Ana Silva",
        client_email="ana@email.com",
        session_date=datetime(2024, 12, 15, 14, 30, tzinfo=UTC),
        max_album_selections=25,
        max_editing_selections=8,
    )
    photos = sessions.record_photo_upload(
        session.id,
        photographer_id,
        [
            PhotoUpload(
                filename=f"ANA_CARLOS_{index:03d}.jpg",
                original_filename=f"DSC_{index:04d}.NEF",
                width=1920,
                height=1280,
                metadata={"camera": "Nikon D850", "lens": lens},
            )
            for index, lens in enumerate(_LENSES, start=1)
        ],
    )
    for position, update in _SELECTIONS.items():
        sessions.update_selection(photos[position].id, update)

    digital = commerce.create_package(
        photographer_id=photographer_id,
        name="Digital Premium Package",
        description="Every edited photo in high resolution",
        type="digital",
        price=299.90,
        options={"photo_count": "all_selected", "formats": ["JPG", "PNG"]},
    )
    album = commerce.create_package(
        photographer_id=photographer_id,
        name="Classic Album",
        description="25x25cm hardcover album with 15 pages",
        type="print",
        price=399.90,
        options={"size": "25x25cm", "pages": 15, "cover": "hardcover"},
    )
    extras = commerce.create_package(
        photographer_id=photographer_id,
        name="Extra Photos",
        description="Additional edited photos",
        type="extra_photo",
        price=35.00,
        options={"per_photo": True, "editing_included": True},
    )
    order = commerce.create_order(
        session,
        order_type="selection",
        items=[
            OrderItemRequest(package_id=digital.id, quantity=1),
            OrderItemRequest(package_id=extras.id, quantity=2),
        ],
        deadline_days=container.settings.internal_order_deadline_days,
        delivery_method="both",
    )
    payment, order = commerce.process_payment(
        order.id, method="credit_card", gateway="stripe"
    )
    stats = sessions.session_stats(session.id)
    logger.info(
        "Demo data seeded",
        extra={"access_code": session.access_code, "order_id": order.id},
    )
    return DemoData(
        session=session,
        stats=stats,
        packages=[digital, album, extras],
        order=order,
        payment=payment,
    )
