"""Domain models for photos and their selection state."""

from dataclasses import dataclass, field
from datetime import datetime

from photoflow.domain.errors import ValidationError

CATEGORY_ALBUM = "album"
CATEGORY_EDITING = "editing"
CATEGORY_GENERAL = "general"

SELECTION_CATEGORIES = (CATEGORY_ALBUM, CATEGORY_EDITING, CATEGORY_GENERAL)


@dataclass(frozen=True)
class PhotoSelection:
    """Independent selection flags; a photo may carry any subset."""

    by_client: bool = False
    for_album: bool = False
    for_editing: bool = False

    @property
    def any_selected(self) -> bool:
        return self.by_client or self.for_album or self.for_editing


@dataclass(frozen=True)
class SelectionUpdate:
    """Partial selection change; None leaves the current value untouched."""

    by_client: bool | None = None
    for_album: bool | None = None
    for_editing: bool | None = None
    client_notes: str | None = None

    @classmethod
    def for_category(
        cls, category: str, selected: bool, client_notes: str | None = None
    ) -> "SelectionUpdate":
        """Build an update for one selection category."""
        if category == CATEGORY_ALBUM:
            return cls(for_album=selected, client_notes=client_notes)
        if category == CATEGORY_EDITING:
            return cls(for_editing=selected, client_notes=client_notes)
        if category == CATEGORY_GENERAL:
            return cls(by_client=selected, client_notes=client_notes)
        raise ValidationError(f"Unknown selection type: {category}")

    def apply(self, current: PhotoSelection) -> PhotoSelection:
        """Return the selection that results from applying this update."""
        return PhotoSelection(
            by_client=current.by_client if self.by_client is None else self.by_client,
            for_album=current.for_album if self.for_album is None else self.for_album,
            for_editing=(
                current.for_editing if self.for_editing is None else self.for_editing
            ),
        )


@dataclass(frozen=True)
class PhotoUpload:
    """Metadata for a photo received in an upload batch."""

    filename: str
    original_filename: str | None = None
    file_path: str | None = None
    thumbnail_path: str | None = None
    file_size: int | None = None
    width: int | None = None
    height: int | None = None
    metadata: dict[str, object] = field(default_factory=dict)


@dataclass(frozen=True)
class PhotoRecord:
    """Represents a stored photo within a session."""

    id: int
    session_id: int
    photographer_id: int
    filename: str
    original_filename: str
    file_path: str
    thumbnail_path: str
    file_size: int | None
    width: int | None
    height: int | None
    selection: PhotoSelection
    client_notes: str
    metadata: dict[str, object]
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class SessionStats:
    """Selection counts for a session."""

    total: int
    selected_by_client: int
    selected_for_album: int
    selected_for_editing: int
    pending: int


def compute_stats(photos: list[PhotoRecord]) -> SessionStats:
    """Count selections; pending photos carry none of the three flags."""
    return SessionStats(
        total=len(photos),
        selected_by_client=sum(1 for photo in photos if photo.selection.by_client),
        selected_for_album=sum(1 for photo in photos if photo.selection.for_album),
        selected_for_editing=sum(
            1 for photo in photos if photo.selection.for_editing
        ),
        pending=sum(1 for photo in photos if not photo.selection.any_selected),
    )
