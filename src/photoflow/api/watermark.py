"""Watermark configuration endpoints."""

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request

from photoflow.api.auth import require_photographer
from photoflow.api.request_models import (
    ApplyWatermarkRequest,
    BatchWatermarkRequest,
    WatermarkSettingsRequest,
)
from photoflow.api.views import watermark_view, watermarked_photo_view
from photoflow.domain.models import Photographer

if TYPE_CHECKING:
    from photoflow.containers import AppContainer

router = APIRouter(prefix="/api/watermark", tags=["watermark"])


@router.get("/settings")
async def get_settings(
    request: Request, photographer: Photographer = Depends(require_photographer)
) -> dict[str, object]:
    """Return watermark settings, creating defaults on first use."""
    container: AppContainer = request.app.state.container
    settings = container.watermark_service.get_settings(photographer)
    return {"settings": watermark_view(settings)}


@router.put("/settings")
async def update_settings(
    payload: WatermarkSettingsRequest,
    request: Request,
    photographer: Photographer = Depends(require_photographer),
) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    settings = container.watermark_service.update_settings(
        photographer, payload.changes()
    )
    return {"settings": watermark_view(settings)}


@router.post("/apply/{photo_id}")
async def apply_watermark(
    photo_id: int,
    request: Request,
    payload: ApplyWatermarkRequest | None = None,
    photographer: Photographer = Depends(require_photographer),
) -> dict[str, object]:
    """Simulate watermarking a single photo."""
    container: AppContainer = request.app.state.container
    force_apply = payload.force_apply if payload else False
    photo, settings = container.watermark_service.apply_to_photo(
        photographer.id, photo_id, force_apply=force_apply
    )
    return {
        "photo": watermarked_photo_view(photo),
        "settings": watermark_view(settings),
    }


@router.post("/batch/{session_id}")
async def batch_watermark(
    session_id: int,
    request: Request,
    payload: BatchWatermarkRequest | None = None,
    photographer: Photographer = Depends(require_photographer),
) -> dict[str, object]:
    """Simulate watermarking a session's photos."""
    container: AppContainer = request.app.state.container
    payload = payload or BatchWatermarkRequest()
    override = (
        payload.override_settings.changes() if payload.override_settings else None
    )
    result = container.watermark_service.apply_to_session(
        photographer.id, session_id, payload.apply_to, override=override
    )
    return {
        "message": f"Watermark applied to {len(result.processed)} photos",
        "processed_count": len(result.processed),
        "total_photos": result.total_photos,
        "apply_to": result.apply_to,
        "processed_photos": [
            {**watermarked_photo_view(photo), "status": "processed"}
            for photo in result.processed
        ],
        "watermark_settings": watermark_view(result.settings),
    }


@router.get("/preview")
async def preview(
    request: Request, photographer: Photographer = Depends(require_photographer)
) -> dict[str, object]:
    """Return the configured watermark with CSS positioning hints."""
    container: AppContainer = request.app.state.container
    result = container.watermark_service.preview(photographer.id)
    return {
        "settings": watermark_view(result.settings),
        "preview": {
            "type": result.settings.type,
            "content": result.content,
            "css_styles": result.css_styles,
        },
    }
