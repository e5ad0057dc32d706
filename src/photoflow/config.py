"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from photoflow.domain.models import ROLE_PHOTOGRAPHER, Photographer

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    photographer_tokens: str | None = None
    tax_rate: float = 0.10
    client_order_deadline_days: int = 7
    internal_order_deadline_days: int = 14
    log_level: str = "INFO"
    seed_demo_data: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_photographer_tokens(raw: str | None) -> dict[str, Photographer]:
    """Parse `token=id:role[:name[:email]]` entries separated by commas.

    Entries without a token or with a non-numeric id are skipped.
    """
    if raw is None:
        return {}
    tokens: dict[str, Photographer] = {}
    for chunk in raw.split(","):
        token, sep, identity = chunk.strip().partition("=")
        token = token.strip()
        if not sep or not token:
            continue
        parts = [part.strip() for part in identity.split(":", 3)]
        if not parts[0].isdigit():
            continue
        tokens[token] = Photographer(
            id=int(parts[0]),
            role=parts[1] if len(parts) > 1 and parts[1] else ROLE_PHOTOGRAPHER,
            name=parts[2] if len(parts) > 2 and parts[2] else None,  # noqa: PLR2004
            email=parts[3] if len(parts) > 3 and parts[3] else None,  # noqa: PLR2004
        )
    return tokens
