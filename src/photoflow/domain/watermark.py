"""Domain models for watermark configuration."""

from dataclasses import dataclass

WATERMARK_POSITIONS = (
    "center",
    "top-left",
    "top-center",
    "top-right",
    "middle-left",
    "middle-right",
    "bottom-left",
    "bottom-center",
    "bottom-right",
)
WATERMARK_SIZES = ("small", "medium", "large")
WATERMARK_TYPES = ("text", "image", "both")

WATERMARKED_SUFFIX = "_watermarked"


@dataclass(frozen=True)
class WatermarkSettings:
    """Per-photographer watermark configuration."""

    photographer_id: int
    enabled: bool = True
    type: str = "text"
    text: str = "PhotoFlow"
    image_url: str | None = None
    position: str = "bottom-right"
    opacity: float = 0.7
    size: str = "medium"
    color: str = "#FFFFFF"
    apply_to_previews: bool = True
    apply_to_downloads: bool = False

    def apply_to_path(self, file_path: str) -> str:
        """Return the path a watermarked copy of the file would be written to."""
        directory, sep, name = file_path.rpartition("/")
        stem, dot, extension = name.rpartition(".")
        if not dot:
            stem, extension = name, ""
        watermarked = f"{stem}{WATERMARKED_SUFFIX}{dot}{extension}"
        return f"{directory}{sep}{watermarked}"


@dataclass(frozen=True)
class WatermarkedPhoto:
    """Result of a simulated watermark application."""

    photo_id: int
    filename: str
    original_path: str
    watermarked_path: str
