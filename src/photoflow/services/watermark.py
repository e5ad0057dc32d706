"""Watermark settings and simulated watermark application."""

import logging
import threading
from contextlib import AbstractContextManager
from dataclasses import dataclass, field, replace
from typing import Protocol

from photoflow.domain.errors import (
    AccessDeniedError,
    NoPhotosToProcessError,
    PhotoNotFoundError,
    SessionNotFoundError,
    ValidationError,
    WatermarkConfigNotFoundError,
    WatermarkDisabledError,
)
from photoflow.domain.models import Photographer
from photoflow.domain.photos import PhotoRecord
from photoflow.domain.watermark import (
    WATERMARKED_SUFFIX,
    WatermarkedPhoto,
    WatermarkSettings,
)
from photoflow.services.sessions import PhotoRepository

logger = logging.getLogger(__name__)

APPLY_TO_ALL = "all"
APPLY_TO_SELECTED = "selected"
APPLY_TO_UNPROCESSED = "unprocessed"

_FONT_SIZES = {"small": "12px", "medium": "18px", "large": "24px"}

_POSITION_STYLES: dict[str, dict[str, str]] = {
    "top-left": {"top": "10px", "left": "10px"},
    "top-center": {"top": "10px", "left": "50%", "transform": "translateX(-50%)"},
    "top-right": {"top": "10px", "right": "10px"},
    "middle-left": {"top": "50%", "left": "10px", "transform": "translateY(-50%)"},
    "center": {"top": "50%", "left": "50%", "transform": "translate(-50%, -50%)"},
    "middle-right": {"top": "50%", "right": "10px", "transform": "translateY(-50%)"},
    "bottom-left": {"bottom": "10px", "left": "10px"},
    "bottom-center": {
        "bottom": "10px",
        "left": "50%",
        "transform": "translateX(-50%)",
    },
    "bottom-right": {"bottom": "10px", "right": "10px"},
}


class WatermarkRepository(Protocol):
    """Persistence interface for watermark settings."""

    def get_settings(self, photographer_id: int) -> WatermarkSettings | None:
        """Return a photographer's settings, if configured."""

    def save_settings(self, settings: WatermarkSettings) -> WatermarkSettings:
        """Create or replace a photographer's settings."""


@dataclass(frozen=True)
class BatchWatermarkResult:
    """Outcome of watermarking a session's photos."""

    apply_to: str
    total_photos: int
    processed: list[WatermarkedPhoto]
    settings: WatermarkSettings


@dataclass(frozen=True)
class WatermarkPreview:
    """Settings plus CSS hints for rendering a preview overlay."""

    settings: WatermarkSettings
    css_styles: dict[str, object]

    @property
    def content(self) -> str | None:
        if self.settings.type == "text":
            return self.settings.text
        return self.settings.image_url


def default_settings(photographer: Photographer) -> WatermarkSettings:
    """Default text watermark signed with the photographer's name."""
    return WatermarkSettings(
        photographer_id=photographer.id,
        text=photographer.name or "PhotoFlow",
    )


@dataclass
class WatermarkService:
    """Application service for watermark configuration."""

    repository: WatermarkRepository
    photo_repository: PhotoRepository
    lock: AbstractContextManager = field(default_factory=threading.RLock)

    def get_settings(self, photographer: Photographer) -> WatermarkSettings:
        """Return stored settings, persisting the defaults on first access."""
        with self.lock:
            current = self.repository.get_settings(photographer.id)
            if current is not None:
                return current
            return self.repository.save_settings(default_settings(photographer))

    def update_settings(
        self, photographer: Photographer, changes: dict[str, object]
    ) -> WatermarkSettings:
        """Merge changes into the photographer's settings."""
        with self.lock:
            current = self.repository.get_settings(photographer.id)
            base = current or default_settings(photographer)
            updated = self.repository.save_settings(_merge(base, changes))
        logger.info(
            "Watermark settings updated",
            extra={"photographer_id": photographer.id},
        )
        return updated

    def apply_to_photo(
        self, photographer_id: int, photo_id: int, force_apply: bool = False
    ) -> tuple[WatermarkedPhoto, WatermarkSettings]:
        """Simulate watermarking one of the photographer's photos."""
        photo = self.photo_repository.get_photo(photo_id)
        if photo is None or photo.photographer_id != photographer_id:
            raise PhotoNotFoundError(photo_id)
        settings = self.repository.get_settings(photographer_id)
        if settings is None or not (settings.enabled or force_apply):
            raise WatermarkDisabledError()
        logger.info("Watermark applied", extra={"photo_id": photo.id})
        return _watermark(photo, settings), settings

    def apply_to_session(
        self,
        photographer_id: int,
        session_id: int,
        apply_to: str,
        override: dict[str, object] | None = None,
    ) -> BatchWatermarkResult:
        """Simulate watermarking a filtered set of a session's photos."""
        photos = self.photo_repository.list_by_session(session_id)
        if not photos:
            raise SessionNotFoundError(session_id)
        if photos[0].photographer_id != photographer_id:
            raise AccessDeniedError()

        targets = _filter_photos(photos, apply_to)
        if not targets:
            raise NoPhotosToProcessError()

        settings = self.repository.get_settings(photographer_id)
        if settings is not None and override:
            settings = _merge(settings, override)
        if settings is None or not settings.enabled:
            raise WatermarkDisabledError()

        processed = [_watermark(photo, settings) for photo in targets]
        logger.info(
            "Batch watermark applied",
            extra={"session_id": session_id, "count": len(processed)},
        )
        return BatchWatermarkResult(
            apply_to=apply_to,
            total_photos=len(photos),
            processed=processed,
            settings=settings,
        )

    def preview(self, photographer_id: int) -> WatermarkPreview:
        """Return the configured watermark with CSS positioning hints."""
        settings = self.repository.get_settings(photographer_id)
        if settings is None:
            raise WatermarkConfigNotFoundError()
        styles: dict[str, object] = {
            "position": "absolute",
            "opacity": settings.opacity,
            "color": settings.color,
            "fontSize": _FONT_SIZES.get(settings.size, _FONT_SIZES["medium"]),
        }
        styles.update(
            _POSITION_STYLES.get(settings.position, _POSITION_STYLES["bottom-right"])
        )
        return WatermarkPreview(settings=settings, css_styles=styles)


def _merge(
    settings: WatermarkSettings, changes: dict[str, object]
) -> WatermarkSettings:
    unknown = set(changes) - set(WatermarkSettings.__dataclass_fields__)
    if unknown or "photographer_id" in changes:
        raise ValidationError("Unsupported watermark setting")
    return replace(settings, **changes)


def _filter_photos(photos: list[PhotoRecord], apply_to: str) -> list[PhotoRecord]:
    if apply_to == APPLY_TO_ALL:
        return photos
    if apply_to == APPLY_TO_SELECTED:
        return [photo for photo in photos if photo.selection.any_selected]
    if apply_to == APPLY_TO_UNPROCESSED:
        return [photo for photo in photos if WATERMARKED_SUFFIX not in photo.file_path]
    raise ValidationError(f"Unknown watermark target: {apply_to}")


def _watermark(photo: PhotoRecord, settings: WatermarkSettings) -> WatermarkedPhoto:
    return WatermarkedPhoto(
        photo_id=photo.id,
        filename=photo.filename,
        original_path=photo.file_path,
        watermarked_path=settings.apply_to_path(photo.file_path),
    )
