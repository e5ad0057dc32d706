"""Bearer token identity resolution."""

from typing import Protocol

from photoflow.domain.errors import TokenInvalidError, TokenRequiredError
from photoflow.domain.models import Photographer


class IdentityProvider(Protocol):
    """Resolves opaque bearer tokens to photographers."""

    def resolve(self, token: str) -> Photographer | None:
        """Return the photographer owning the token, if any."""


def authenticate(provider: IdentityProvider, token: str | None) -> Photographer:
    """Resolve a token or raise the matching auth error."""
    if not token:
        raise TokenRequiredError()
    photographer = provider.resolve(token)
    if photographer is None:
        raise TokenInvalidError()
    return photographer
