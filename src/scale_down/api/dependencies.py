"""Request dependencies shared by the routers."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import Depends, Header, Request

from scale_down.errors import UnauthorizedError

if TYPE_CHECKING:
    from scale_down.containers import AppContainer

_BEARER_PREFIX = "bearer "


def get_container(request: Request) -> AppContainer:
    """Return the container attached to the running app."""
    return request.app.state.container


def optional_user_id(
    request: Request,
    authorization: str | None = Header(default=None),
) -> UUID | None:
    """Return the caller's user id when a bearer token is sent."""
    if authorization is None:
        return None
    if not authorization.lower().startswith(_BEARER_PREFIX):
        raise UnauthorizedError
    container = get_container(request)
    return container.token_service.verify(authorization[len(_BEARER_PREFIX) :])


def require_user_id(user_id: UUID | None = Depends(optional_user_id)) -> UUID:
    """Ensure the request is authenticated and return the user id."""
    if user_id is None:
        raise UnauthorizedError
    return user_id
