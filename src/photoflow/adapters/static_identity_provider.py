"""Identity provider backed by a configured token map."""

from dataclasses import dataclass, field

from photoflow.domain.models import Photographer
from photoflow.services.identity import IdentityProvider


@dataclass
class StaticIdentityProvider(IdentityProvider):
    """Looks tokens up in a fixed mapping loaded from settings."""

    tokens: dict[str, Photographer] = field(default_factory=dict)

    def resolve(self, token: str) -> Photographer | None:
        return self.tokens.get(token)
