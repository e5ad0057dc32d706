"""Session lifecycle, photo selection and finalize flow."""

import logging
import secrets
import string
import threading
import time
from collections.abc import Callable
from contextlib import AbstractContextManager
from dataclasses import dataclass, field
from datetime import datetime
from typing import Protocol

from photoflow.domain.errors import (
    GalleryNotFoundError,
    InvalidStatusTransitionError,
    NoSelectionError,
    PhotoNotFoundError,
    SessionNotActiveError,
    SessionNotFoundError,
)
from photoflow.domain.lightroom import FilterExport, FinalizeResult
from photoflow.domain.photos import (
    PhotoRecord,
    PhotoSelection,
    PhotoUpload,
    SelectionUpdate,
    SessionStats,
    compute_stats,
)
from photoflow.domain.sessions import (
    ACCESS_CODE_LENGTH,
    SESSION_ACTIVE,
    SESSION_ARCHIVED,
    SESSION_COMPLETED,
    SessionRecord,
    SessionSettings,
    can_transition_session,
)
from photoflow.services.lightroom import build_filter, build_filters
from photoflow.services.selection import SelectionLimitEnforcer

logger = logging.getLogger(__name__)

ACCESS_CODE_ALPHABET = string.ascii_uppercase + string.digits
_MAX_CODE_ATTEMPTS = 100
_RECENT_SESSIONS = 5


class SessionRepository(Protocol):
    """Persistence interface for photo sessions."""

    def create_session(  # noqa: PLR0913
        self,
        photographer_id: int,
        name: str,
        description: str | None,
        client_name: str,
        client_email: str,
        session_date: datetime,
        access_code: str,
        settings: SessionSettings,
    ) -> SessionRecord:
        """Create an active session and return it."""

    def get_session(self, session_id: int) -> SessionRecord | None:
        """Return a session by id, if present."""

    def get_by_access_code(self, access_code: str) -> SessionRecord | None:
        """Return the session holding an (uppercase) access code, if any."""

    def list_by_photographer(self, photographer_id: int) -> list[SessionRecord]:
        """Return a photographer's sessions in creation order."""

    def update_status(self, session_id: int, status: str) -> SessionRecord:
        """Set a session status and return the updated session."""


class PhotoRepository(Protocol):
    """Persistence interface for session photos."""

    def create_photos(
        self, session_id: int, photographer_id: int, uploads: list[PhotoUpload]
    ) -> list[PhotoRecord]:
        """Create photo rows for an upload batch."""

    def get_photo(self, photo_id: int) -> PhotoRecord | None:
        """Return a photo by id, if present."""

    def list_by_session(self, session_id: int) -> list[PhotoRecord]:
        """Return a session's photos in upload order."""

    def update_selection(
        self, photo_id: int, selection: PhotoSelection, client_notes: str
    ) -> PhotoRecord:
        """Store new selection flags and notes for a photo."""


@dataclass(frozen=True)
class SelectionSummary:
    """Client-facing overview of the current selection."""

    session: SessionRecord
    stats: SessionStats
    selected_photos: list[PhotoRecord]

    @property
    def selection_percentage(self) -> int:
        if not self.stats.total:
            return 0
        return round(len(self.selected_photos) / self.stats.total * 100)

    @property
    def can_finalize(self) -> bool:
        return bool(self.selected_photos) and self.session.is_active


@dataclass(frozen=True)
class GalleryDashboard:
    """Totals across a photographer's sessions."""

    total_sessions: int
    active_sessions: int
    total_photos: int
    selected_photos: int
    recent_sessions: list[tuple[SessionRecord, SessionStats]]


def generate_access_code(length: int) -> str:
    """Return a random uppercase alphanumeric access code."""
    return "".join(secrets.choice(ACCESS_CODE_ALPHABET) for _ in range(length))


def normalize_access_code(access_code: str) -> str:
    """Access codes compare case-insensitively."""
    return access_code.strip().upper()


@dataclass
class SessionService:
    """Application service for sessions, photos and client selections."""

    session_repository: SessionRepository
    photo_repository: PhotoRepository
    lock: AbstractContextManager = field(default_factory=threading.RLock)
    code_factory: Callable[[int], str] = generate_access_code
    enforcer: SelectionLimitEnforcer = field(default_factory=SelectionLimitEnforcer)

    def create_session(  # noqa: PLR0913
        self,
        photographer_id: int,
        name: str,
        client_name: str,
        client_email: str,
        session_date: datetime,
        description: str | None = None,
        max_album_selections: int | None = None,
        max_editing_selections: int | None = None,
        allow_album_selection: bool = True,
        allow_editing_selection: bool = True,
    ) -> SessionRecord:
        """Create a session with a freshly generated unique access code."""
        settings = SessionSettings(
            allow_album_selection=allow_album_selection,
            allow_editing_selection=allow_editing_selection,
            max_album_selections=max_album_selections,
            max_editing_selections=max_editing_selections,
        )
        with self.lock:
            session = self.session_repository.create_session(
                photographer_id=photographer_id,
                name=name,
                description=description,
                client_name=client_name,
                client_email=client_email,
                session_date=session_date,
                access_code=self._allocate_access_code(),
                settings=settings,
            )
        logger.info(
            "Session created",
            extra={"session_id": session.id, "photographer_id": photographer_id},
        )
        return session

    def find_by_access_code(self, access_code: str) -> SessionRecord:
        """Return the session for an access code, whatever its status."""
        session = self.session_repository.get_by_access_code(
            normalize_access_code(access_code)
        )
        if session is None:
            raise GalleryNotFoundError(access_code)
        return session

    def get_owned_session(self, session_id: int, photographer_id: int) -> SessionRecord:
        """Return a session only if it belongs to the photographer."""
        session = self.session_repository.get_session(session_id)
        if session is None or session.photographer_id != photographer_id:
            raise SessionNotFoundError(session_id)
        return session

    def list_sessions(self, photographer_id: int) -> list[SessionRecord]:
        """Return a photographer's sessions."""
        return self.session_repository.list_by_photographer(photographer_id)

    def list_photos(self, session_id: int) -> list[PhotoRecord]:
        """Return a session's photos in upload order."""
        with self.lock:
            return self.photo_repository.list_by_session(session_id)

    def record_photo_upload(
        self, session_id: int, photographer_id: int, uploads: list[PhotoUpload]
    ) -> list[PhotoRecord]:
        """Store an upload batch for a session the photographer owns."""
        with self.lock:
            session = self.get_owned_session(session_id, photographer_id)
            photos = self.photo_repository.create_photos(
                session.id, photographer_id, uploads
            )
        logger.info(
            "Photos uploaded",
            extra={"session_id": session.id, "count": len(photos)},
        )
        return photos

    def update_selection(self, photo_id: int, update: SelectionUpdate) -> PhotoRecord:
        """Apply a partial selection change after checking category limits."""
        with self.lock:
            photo = self.photo_repository.get_photo(photo_id)
            if photo is None:
                raise PhotoNotFoundError(photo_id)
            session = self.session_repository.get_session(photo.session_id)
            if session is None:
                raise SessionNotFoundError(photo.session_id)
            return self._apply_selection(session, photo, update)

    def select_photo(
        self,
        access_code: str,
        photo_id: int,
        selection_type: str,
        selected: bool,
        client_notes: str | None = None,
    ) -> tuple[PhotoRecord, SessionStats]:
        """Set one selection category on a photo through the client gallery."""
        update = SelectionUpdate.for_category(selection_type, selected, client_notes)
        with self.lock:
            session = self.find_by_access_code(access_code)
            photo = self.photo_repository.get_photo(photo_id)
            if photo is None or photo.session_id != session.id:
                raise PhotoNotFoundError(photo_id)
            updated = self._apply_selection(session, photo, update)
            stats = self.session_stats(session.id)
        logger.info(
            "Photo %s by client",
            "selected" if selected else "unselected",
            extra={"photo_id": photo_id, "selection_type": selection_type},
        )
        return updated, stats

    def session_stats(self, session_id: int) -> SessionStats:
        """Return selection counts for a session."""
        with self.lock:
            photos = self.photo_repository.list_by_session(session_id)
        return compute_stats(photos)

    def export_filters(self, session_id: int, photographer_id: int) -> FilterExport:
        """Return per-category Lightroom filters for the photographer."""
        with self.lock:
            session = self.get_owned_session(session_id, photographer_id)
            photos = self.photo_repository.list_by_session(session.id)
        return FilterExport(filters=build_filters(photos), stats=compute_stats(photos))

    def finalize(self, access_code: str) -> FinalizeResult:
        """Freeze the client's selection and emit the Lightroom filter."""
        with self.lock:
            session = self.find_by_access_code(access_code)
            _ensure_active(session)
            photos = self.photo_repository.list_by_session(session.id)
            selected = [photo for photo in photos if photo.selection.any_selected]
            if not selected:
                raise NoSelectionError()
            completed = self._transition(session, SESSION_COMPLETED)
            result = FinalizeResult(
                filter_code=_build_filter_code(session.access_code),
                selected_count=len(selected),
                total_photos=len(photos),
                lightroom_filter=build_filter(selected),
                session=completed,
            )
        logger.info(
            "Selection finalized",
            extra={
                "session_id": session.id,
                "selected_count": result.selected_count,
                "filter_code": result.filter_code,
            },
        )
        return result

    def selection_summary(self, access_code: str) -> SelectionSummary:
        """Return the selection overview shown before finalizing."""
        with self.lock:
            session = self.find_by_access_code(access_code)
            photos = self.photo_repository.list_by_session(session.id)
        return SelectionSummary(
            session=session,
            stats=compute_stats(photos),
            selected_photos=[photo for photo in photos if photo.selection.any_selected],
        )

    def reset_selections(self, access_code: str) -> int:
        """Clear every flag and note in an active session."""
        with self.lock:
            session = self.find_by_access_code(access_code)
            _ensure_active(session)
            photos = self.photo_repository.list_by_session(session.id)
            for photo in photos:
                self.photo_repository.update_selection(
                    photo.id, PhotoSelection(), client_notes=""
                )
        logger.info(
            "Selections reset", extra={"session_id": session.id, "count": len(photos)}
        )
        return len(photos)

    def archive_session(self, session_id: int, photographer_id: int) -> SessionRecord:
        """Move a session to the terminal archived state."""
        with self.lock:
            session = self.get_owned_session(session_id, photographer_id)
            return self._transition(session, SESSION_ARCHIVED)

    def dashboard(self, photographer_id: int) -> GalleryDashboard:
        """Return session and photo totals for a photographer."""
        with self.lock:
            sessions = self.session_repository.list_by_photographer(photographer_id)
            stats = {session.id: self.session_stats(session.id) for session in sessions}
        return GalleryDashboard(
            total_sessions=len(sessions),
            active_sessions=sum(1 for session in sessions if session.is_active),
            total_photos=sum(item.total for item in stats.values()),
            selected_photos=sum(item.selected_by_client for item in stats.values()),
            recent_sessions=[
                (session, stats[session.id])
                for session in sessions[-_RECENT_SESSIONS:]
            ],
        )

    def _apply_selection(
        self, session: SessionRecord, photo: PhotoRecord, update: SelectionUpdate
    ) -> PhotoRecord:
        _ensure_active(session)
        session_photos = self.photo_repository.list_by_session(session.id)
        self.enforcer.check(session, photo, update, session_photos)
        notes = (
            photo.client_notes if update.client_notes is None else update.client_notes
        )
        return self.photo_repository.update_selection(
            photo.id, update.apply(photo.selection), client_notes=notes
        )

    def _transition(self, session: SessionRecord, status: str) -> SessionRecord:
        if not can_transition_session(session.status, status):
            raise InvalidStatusTransitionError("session", session.status, status)
        updated = self.session_repository.update_status(session.id, status)
        logger.info(
            "Session status changed",
            extra={"session_id": session.id, "from": session.status, "to": status},
        )
        return updated

    def _allocate_access_code(self) -> str:
        for _ in range(_MAX_CODE_ATTEMPTS):
            code = normalize_access_code(self.code_factory(ACCESS_CODE_LENGTH))
            if self.session_repository.get_by_access_code(code) is None:
                return code
        raise RuntimeError("Failed to allocate a unique access code")


def _ensure_active(session: SessionRecord) -> None:
    if session.status != SESSION_ACTIVE:
        raise SessionNotActiveError(session.status)


def _build_filter_code(access_code: str) -> str:
    """Session code plus a time-derived and a random suffix."""
    millis = str(time.time_ns() // 1_000_000)[-6:]
    return f"PHOTOFLOW_{access_code}_{millis}{secrets.token_hex(2).upper()}"
