"""Client selection endpoints addressed by access code."""

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request

from photoflow.api.request_models import AccessCode
from photoflow.api.views import LIGHTROOM_STEPS, client_photo_view, session_view

if TYPE_CHECKING:
    from photoflow.containers import AppContainer

router = APIRouter(prefix="/api/client", tags=["client"])


@router.post("/{access_code}/finalize")
async def finalize_selection(
    access_code: AccessCode, request: Request
) -> dict[str, object]:
    """Freeze the selection and return the Lightroom filter."""
    container: AppContainer = request.app.state.container
    result = container.session_service.finalize(access_code)
    session = result.session
    return {
        "message": "Selection finalized",
        "filter_code": result.filter_code,
        "selected_count": result.selected_count,
        "total_photos": result.total_photos,
        "lightroom_filter": result.lightroom_filter,
        "instructions": {
            "title": "How to use in Adobe Lightroom",
            "steps": LIGHTROOM_STEPS,
            "filter": result.lightroom_filter,
            "filter_to_copy": result.lightroom_filter,
            "tip": "Copy the filter exactly as shown, including the OR between names",
        },
        "session_summary": {
            "client_name": session.client_name,
            "session_name": session.name,
            "selection_date": session.updated_at.isoformat(),
            "photographer_notification": (
                f"Client {session.client_name} finalized the photo selection "
                f'for session "{session.name}"'
            ),
        },
    }


@router.get("/{access_code}/summary")
async def selection_summary(
    access_code: AccessCode, request: Request
) -> dict[str, object]:
    """Return the selection overview shown before finalizing."""
    container: AppContainer = request.app.state.container
    summary = container.session_service.selection_summary(access_code)
    return {
        "session": session_view(summary.session),
        "selection_summary": {
            "total_photos": summary.stats.total,
            "selected_photos": len(summary.selected_photos),
            "selection_percentage": summary.selection_percentage,
            "can_finalize": summary.can_finalize,
            "status": summary.session.status,
        },
        "selected_photos": [client_photo_view(p) for p in summary.selected_photos],
    }


@router.post("/{access_code}/reset")
async def reset_selections(
    access_code: AccessCode, request: Request
) -> dict[str, object]:
    """Clear every selection in an active session."""
    container: AppContainer = request.app.state.container
    reset_count = container.session_service.reset_selections(access_code)
    return {
        "message": "All selections were cleared",
        "total_photos": reset_count,
        "reset_count": reset_count,
    }
