"""Session library exception types."""

from __future__ import annotations


class SessionError(Exception):
    """Base class for session library errors."""

    def __init__(
        self,
        code: str,
        message: str,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"{self.code}: {super().__str__()}"


class SessionErrorCodes:
    """SessionError code constants."""

    INVALID_TOKEN: str = "INVALID_TOKEN"
    EXPIRED: str = "EXPIRED"
    CONFLICT: str = "CONFLICT"
    NOT_FOUND: str = "NOT_FOUND"
    STORE_UNAVAILABLE: str = "STORE_UNAVAILABLE"
    ENTROPY_FAILURE: str = "ENTROPY_FAILURE"


class AuthError(SessionError):
    """A presented token does not authenticate.

    The code is either INVALID_TOKEN (no matching session) or EXPIRED
    (the session exists but its expiration has passed).
    """

    @classmethod
    def invalid_token(cls) -> AuthError:
        return cls(SessionErrorCodes.INVALID_TOKEN, "Invalid session token")

    @classmethod
    def expired(cls) -> AuthError:
        return cls(SessionErrorCodes.EXPIRED, "Session expired")

    @property
    def is_expired(self) -> bool:
        return self.code == SessionErrorCodes.EXPIRED


class ConflictError(SessionError):
    """An insert collided with an existing id or token."""

    def __init__(self, field: str) -> None:
        super().__init__(SessionErrorCodes.CONFLICT, f"Session {field} already exists")
        self.field = field


class NotFoundError(SessionError):
    """The targeted session id does not exist."""

    def __init__(self, session_id: str) -> None:
        super().__init__(SessionErrorCodes.NOT_FOUND, f"Session not found: {session_id}")
        self.session_id = session_id


class StoreUnavailableError(SessionError):
    """Transient backend failure. Callers may retry."""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(SessionErrorCodes.STORE_UNAVAILABLE, message, cause)


class TokenGenerationError(SessionError):
    """The entropy source failed. Not recoverable."""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(SessionErrorCodes.ENTROPY_FAILURE, message, cause)
