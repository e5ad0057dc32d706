"""Lightroom filename-search filter generation."""

from photoflow.domain.lightroom import FILTER_SEPARATOR, LightroomFilters
from photoflow.domain.photos import PhotoRecord

RAW_EXTENSIONS = ("NEF", "CR2", "ARW", "RAF", "ORF", "DNG", "RW2")
PROCESSED_EXTENSIONS = ("JPG", "JPEG", "PNG", "TIFF")

_STRIPPABLE_EXTENSIONS = frozenset(RAW_EXTENSIONS + PROCESSED_EXTENSIONS)


def strip_extension(filename: str) -> str:
    """Drop one known raw or processed extension, case-insensitively."""
    stem, dot, extension = filename.rpartition(".")
    if dot and stem and extension.upper() in _STRIPPABLE_EXTENSIONS:
        return stem
    return filename


def build_filter(photos: list[PhotoRecord]) -> str:
    """Join the base names of photos for pasting into Lightroom's search."""
    return FILTER_SEPARATOR.join(_base_names(photos))


def build_filters(photos: list[PhotoRecord]) -> LightroomFilters:
    """Partition photos by selection category and collect their base names.

    Photos keep the order they are given in, which callers take from
    storage insertion order so repeated calls yield identical output.
    """
    return LightroomFilters(
        album=_base_names([photo for photo in photos if photo.selection.for_album]),
        editing=_base_names(
            [photo for photo in photos if photo.selection.for_editing]
        ),
        client=_base_names([photo for photo in photos if photo.selection.by_client]),
        all_selected=_base_names(
            [photo for photo in photos if photo.selection.any_selected]
        ),
    )


def _base_names(photos: list[PhotoRecord]) -> list[str]:
    return [strip_extension(photo.original_filename) for photo in photos]
