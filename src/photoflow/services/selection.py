"""Selection limit enforcement."""

from dataclasses import dataclass

from photoflow.domain.errors import (
    SelectionLimitExceededError,
    SelectionNotAllowedError,
)
from photoflow.domain.photos import (
    CATEGORY_ALBUM,
    CATEGORY_EDITING,
    PhotoRecord,
    SelectionUpdate,
)
from photoflow.domain.sessions import SessionRecord


@dataclass(frozen=True)
class SelectionLimitEnforcer:
    """Validate capped selection categories before a photo is updated."""

    def check(
        self,
        session: SessionRecord,
        photo: PhotoRecord,
        update: SelectionUpdate,
        session_photos: list[PhotoRecord],
    ) -> None:
        """Raise when the update would push a capped category past its limit."""
        if update.for_album and not photo.selection.for_album:
            if not session.settings.allow_album_selection:
                raise SelectionNotAllowedError(CATEGORY_ALBUM)
            others = sum(
                1
                for other in session_photos
                if other.id != photo.id and other.selection.for_album
            )
            _ensure_within_limit(
                CATEGORY_ALBUM, others, session.settings.max_album_selections
            )

        if update.for_editing and not photo.selection.for_editing:
            if not session.settings.allow_editing_selection:
                raise SelectionNotAllowedError(CATEGORY_EDITING)
            others = sum(
                1
                for other in session_photos
                if other.id != photo.id and other.selection.for_editing
            )
            _ensure_within_limit(
                CATEGORY_EDITING, others, session.settings.max_editing_selections
            )


def _ensure_within_limit(category: str, current: int, limit: int | None) -> None:
    if limit is not None and current >= limit:
        raise SelectionLimitExceededError(category, limit)
