"""Gallery endpoints for photographers and clients."""

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request, status

from photoflow.api.auth import require_photographer
from photoflow.api.request_models import (
    AccessCode,
    PhotoUploadRequest,
    SelectPhotoRequest,
    SessionCreateRequest,
)
from photoflow.api.views import (
    client_photo_view,
    filters_view,
    owner_photo_view,
    owner_session_view,
    photographer_view,
    session_view,
    stats_view,
)
from photoflow.domain.models import Photographer

if TYPE_CHECKING:
    from photoflow.containers import AppContainer

router = APIRouter(prefix="/api/gallery", tags=["gallery"])


@router.get("/dashboard")
async def dashboard(
    request: Request, photographer: Photographer = Depends(require_photographer)
) -> dict[str, object]:
    """Return session and selection totals for the photographer."""
    container: AppContainer = request.app.state.container
    summary = container.session_service.dashboard(photographer.id)
    return {
        "photographer": photographer_view(photographer),
        "stats": {
            "total_sessions": summary.total_sessions,
            "active_sessions": summary.active_sessions,
            "total_photos": summary.total_photos,
            "selected_photos": summary.selected_photos,
        },
        "recent_sessions": [
            {**owner_session_view(session), "photo_stats": stats_view(stats)}
            for session, stats in summary.recent_sessions
        ],
    }


@router.post("/sessions", status_code=status.HTTP_201_CREATED)
async def create_session(
    payload: SessionCreateRequest,
    request: Request,
    photographer: Photographer = Depends(require_photographer),
) -> dict[str, object]:
    """Create a session and return its client access code."""
    container: AppContainer = request.app.state.container
    session = container.session_service.create_session(
        photographer_id=photographer.id,
        name=payload.name,
        description=payload.description,
        client_name=payload.client_name,
        client_email=str(payload.client_email),
        session_date=payload.session_date,
        max_album_selections=payload.max_album_selections,
        max_editing_selections=payload.max_editing_selections,
        allow_album_selection=payload.allow_album_selection,
        allow_editing_selection=payload.allow_editing_selection,
    )
    return {
        "session": owner_session_view(session),
        "access_code": session.access_code,
        "share_url": f"/gallery/{session.access_code}",
    }


@router.get("/sessions")
async def list_sessions(
    request: Request, photographer: Photographer = Depends(require_photographer)
) -> dict[str, object]:
    """Return the photographer's sessions with their selection counts."""
    container: AppContainer = request.app.state.container
    service = container.session_service
    sessions = [
        {
            **owner_session_view(session),
            "photo_stats": stats_view(service.session_stats(session.id)),
        }
        for session in service.list_sessions(photographer.id)
    ]
    return {"sessions": sessions, "total": len(sessions)}


@router.post("/sessions/{session_id}/photos", status_code=status.HTTP_201_CREATED)
async def upload_photos(
    session_id: int,
    payload: PhotoUploadRequest,
    request: Request,
    photographer: Photographer = Depends(require_photographer),
) -> dict[str, object]:
    """Record metadata for an uploaded batch of photos."""
    container: AppContainer = request.app.state.container
    service = container.session_service
    photos = service.record_photo_upload(
        session_id,
        photographer.id,
        [item.to_upload() for item in payload.photos],
    )
    session = service.get_owned_session(session_id, photographer.id)
    return {
        "session": owner_session_view(session),
        "photos": [owner_photo_view(photo) for photo in photos],
        "stats": stats_view(service.session_stats(session_id)),
    }


@router.get("/sessions/{session_id}/stats")
async def session_stats(
    session_id: int,
    request: Request,
    photographer: Photographer = Depends(require_photographer),
) -> dict[str, object]:
    """Return selection counts and current Lightroom filters."""
    container: AppContainer = request.app.state.container
    service = container.session_service
    session = service.get_owned_session(session_id, photographer.id)
    export = service.export_filters(session_id, photographer.id)
    return {
        "session": owner_session_view(session),
        "stats": stats_view(export.stats),
        "lightroom_filters": filters_view(export.filters),
    }


@router.get("/sessions/{session_id}/export")
async def export_filters(
    session_id: int,
    request: Request,
    photographer: Photographer = Depends(require_photographer),
) -> dict[str, object]:
    """Return per-category filenames ready to paste into Lightroom."""
    container: AppContainer = request.app.state.container
    service = container.session_service
    session = service.get_owned_session(session_id, photographer.id)
    export = service.export_filters(session_id, photographer.id)
    filters = export.filters
    return {
        "session": owner_session_view(session),
        "stats": stats_view(export.stats),
        "filters": {
            "album": filters.album,
            "editing": filters.editing,
            "client": filters.client,
            "all_selected": filters.all_selected,
        },
        "lightroom_text": filters_view(filters),
    }


@router.post("/sessions/{session_id}/archive")
async def archive_session(
    session_id: int,
    request: Request,
    photographer: Photographer = Depends(require_photographer),
) -> dict[str, object]:
    """Archive a session so its gallery becomes read-only."""
    container: AppContainer = request.app.state.container
    session = container.session_service.archive_session(session_id, photographer.id)
    return {"session": owner_session_view(session)}


@router.get("/session/{access_code}")
async def client_gallery(
    access_code: AccessCode, request: Request
) -> dict[str, object]:
    """Return the client-facing gallery for an access code."""
    container: AppContainer = request.app.state.container
    service = container.session_service
    session = service.find_by_access_code(access_code)
    photos = service.list_photos(session.id)
    settings = session.settings
    return {
        "session": session_view(session),
        "photos": [client_photo_view(photo) for photo in photos],
        "total_photos": len(photos),
        "instructions": {
            "album_selection": settings.allow_album_selection,
            "editing_selection": settings.allow_editing_selection,
            "max_album": settings.max_album_selections,
            "max_editing": settings.max_editing_selections,
        },
    }


@router.post("/session/{access_code}/select")
async def select_photo(
    access_code: AccessCode, payload: SelectPhotoRequest, request: Request
) -> dict[str, object]:
    """Toggle one selection category on a photo."""
    container: AppContainer = request.app.state.container
    photo, stats = container.session_service.select_photo(
        access_code,
        photo_id=payload.photo_id,
        selection_type=payload.selection_type,
        selected=payload.selected,
        client_notes=payload.client_notes,
    )
    return {"photo": client_photo_view(photo), "session_stats": stats_view(stats)}
