"""Domain models for Lightroom filter output."""

from dataclasses import dataclass

from photoflow.domain.photos import SessionStats
from photoflow.domain.sessions import SessionRecord

FILTER_SEPARATOR = " OR "


@dataclass(frozen=True)
class LightroomFilters:
    """Base filenames per selection category, in photo insertion order."""

    album: list[str]
    editing: list[str]
    client: list[str]
    all_selected: list[str]

    @property
    def album_filter(self) -> str:
        return FILTER_SEPARATOR.join(self.album)

    @property
    def editing_filter(self) -> str:
        return FILTER_SEPARATOR.join(self.editing)

    @property
    def client_filter(self) -> str:
        return FILTER_SEPARATOR.join(self.client)

    @property
    def all_selected_filter(self) -> str:
        return FILTER_SEPARATOR.join(self.all_selected)


@dataclass(frozen=True)
class FinalizeResult:
    """Outcome of a client finalizing their selection."""

    filter_code: str
    selected_count: int
    total_photos: int
    lightroom_filter: str
    session: SessionRecord


@dataclass(frozen=True)
class FilterExport:
    """Filters and counts exported for the photographer."""

    filters: LightroomFilters
    stats: SessionStats
