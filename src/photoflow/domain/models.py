"""Domain models for PhotoFlow identities."""

from dataclasses import dataclass

ROLE_PHOTOGRAPHER = "photographer"
ROLE_ADMIN = "admin"


@dataclass(frozen=True)
class Photographer:
    """An authenticated photographer resolved from a bearer token."""

    id: int
    role: str = ROLE_PHOTOGRAPHER
    name: str | None = None
    email: str | None = None
