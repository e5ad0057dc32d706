"""Serializers shaping domain records into JSON payloads."""

from dataclasses import asdict

from photoflow.domain.commerce import OrderRecord, PackageRecord, PaymentRecord
from photoflow.domain.lightroom import LightroomFilters
from photoflow.domain.models import Photographer
from photoflow.domain.photos import PhotoRecord, SessionStats
from photoflow.domain.sessions import SessionRecord
from photoflow.domain.watermark import WatermarkedPhoto, WatermarkSettings

LIGHTROOM_STEPS = [
    "1. Open Adobe Lightroom with your RAW files",
    "2. In the filter bar above the grid, click the search field",
    '3. Choose "Filename" as the search target',
    "4. Paste the filter below into the search field",
    "5. Lightroom shows only the photos the client selected",
]


def photographer_view(photographer: Photographer) -> dict[str, object]:
    return {
        "id": photographer.id,
        "role": photographer.role,
        "name": photographer.name,
        "email": photographer.email,
    }


def session_view(session: SessionRecord) -> dict[str, object]:
    """Session fields safe to show a client holding the access code."""
    return {
        "id": session.id,
        "name": session.name,
        "description": session.description,
        "client_name": session.client_name,
        "session_date": session.session_date,
        "access_code": session.access_code,
        "status": session.status,
        "settings": asdict(session.settings),
        "created_at": session.created_at,
    }


def owner_session_view(session: SessionRecord) -> dict[str, object]:
    return {
        **session_view(session),
        "photographer_id": session.photographer_id,
        "client_email": session.client_email,
        "updated_at": session.updated_at,
    }


def stats_view(stats: SessionStats) -> dict[str, int]:
    return asdict(stats)


def client_photo_view(photo: PhotoRecord) -> dict[str, object]:
    return {
        "id": photo.id,
        "filename": photo.filename,
        "original_filename": photo.original_filename,
        "thumbnail_path": photo.thumbnail_path,
        "width": photo.width,
        "height": photo.height,
        "selected_by_client": photo.selection.by_client,
        "selected_for_album": photo.selection.for_album,
        "selected_for_editing": photo.selection.for_editing,
        "client_notes": photo.client_notes,
    }


def owner_photo_view(photo: PhotoRecord) -> dict[str, object]:
    return {
        **client_photo_view(photo),
        "session_id": photo.session_id,
        "file_path": photo.file_path,
        "file_size": photo.file_size,
        "metadata": photo.metadata,
        "created_at": photo.created_at,
    }


def filters_view(filters: LightroomFilters) -> dict[str, str]:
    return {
        "album": filters.album_filter,
        "editing": filters.editing_filter,
        "client": filters.client_filter,
        "all_selected": filters.all_selected_filter,
    }


def package_view(package: PackageRecord) -> dict[str, object]:
    return asdict(package)


def order_view(order: OrderRecord) -> dict[str, object]:
    return asdict(order)


def payment_view(payment: PaymentRecord) -> dict[str, object]:
    return asdict(payment)


def watermark_view(settings: WatermarkSettings) -> dict[str, object]:
    return asdict(settings)


def watermarked_photo_view(photo: WatermarkedPhoto) -> dict[str, object]:
    return asdict(photo)
