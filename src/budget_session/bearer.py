"""Bearer token extraction from HTTP headers."""

from __future__ import annotations

from collections.abc import Mapping

from .exceptions import AuthError
from .service import SessionService

AUTHORIZATION = "Authorization"
_SCHEME = "bearer"


def extract_bearer_token(headers: Mapping[str, str]) -> str | None:
    """Return the credential of a ``Authorization: Bearer <token>`` header.

    The header name and the scheme are matched case-insensitively. Returns
    None when the header is missing, uses another scheme or is empty.
    """
    value = headers.get(AUTHORIZATION)
    if value is None:
        value = next(
            (v for k, v in headers.items() if k.lower() == AUTHORIZATION.lower()),
            None,
        )
    if not value:
        return None
    parts = value.split(None, 1)
    if len(parts) != 2 or parts[0].lower() != _SCHEME:
        return None
    return parts[1].strip() or None


async def authenticate_headers(service: SessionService, headers: Mapping[str, str]) -> str:
    """Validate the bearer token carried by the headers and return the user id.

    Raises:
        AuthError: INVALID_TOKEN when no bearer token is present, otherwise
            whatever SessionService.validate raises.
    """
    token = extract_bearer_token(headers)
    if token is None:
        raise AuthError.invalid_token()
    return await service.validate(token)
