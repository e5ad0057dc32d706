"""Bearer token authentication for photographer endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Header, Request

from photoflow.domain.models import Photographer  # noqa: TC001
from photoflow.services.identity import authenticate

if TYPE_CHECKING:
    from photoflow.containers import AppContainer

_BEARER_PREFIX = "bearer "


def _bearer_token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    if not authorization.lower().startswith(_BEARER_PREFIX):
        return None
    return authorization[len(_BEARER_PREFIX) :].strip() or None


async def require_photographer(
    request: Request,
    authorization: str | None = Header(default=None),
) -> Photographer:
    """Resolve the calling photographer from the Authorization header."""
    container: AppContainer = request.app.state.container
    return authenticate(container.identity_provider, _bearer_token(authorization))
