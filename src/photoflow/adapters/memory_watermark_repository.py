"""In-memory watermark settings repository."""

from dataclasses import dataclass, field

from photoflow.domain.watermark import WatermarkSettings
from photoflow.services.watermark import WatermarkRepository


@dataclass
class InMemoryWatermarkRepository(WatermarkRepository):
    """Watermark settings keyed by photographer id."""

    settings: dict[int, WatermarkSettings] = field(default_factory=dict)

    def get_settings(self, photographer_id: int) -> WatermarkSettings | None:
        return self.settings.get(photographer_id)

    def save_settings(self, settings: WatermarkSettings) -> WatermarkSettings:
        self.settings[settings.photographer_id] = settings
        return settings
