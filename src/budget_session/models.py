"""Session data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import StrEnum

DEFAULT_TTL = timedelta(days=14)
MIN_TOKEN_LENGTH = 255


class SessionState(StrEnum):
    """Validity of a stored session at a point in time."""

    ACTIVE = "active"
    EXPIRED = "expired"


class ExpirationPolicy(StrEnum):
    """How validation treats the expiration horizon."""

    SLIDING = "sliding"
    FIXED = "fixed"


@dataclass(frozen=True)
class Session:
    """One authenticated session.

    expiration is the only field that changes over a session's life, and
    only through SessionStore.update_expiration. The token is left out of
    repr so sessions can be logged safely.
    """

    id: str
    user_id: str
    token: str = field(repr=False)
    expiration: datetime

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("id cannot be empty")
        if not self.user_id:
            raise ValueError("user_id cannot be empty")
        if not self.token:
            raise ValueError("token cannot be empty")
        if self.expiration.tzinfo is None:
            raise ValueError("expiration must be timezone-aware")

    def is_expired(self, now: datetime) -> bool:
        """A session is valid iff now < expiration."""
        return self.expiration <= now

    def state(self, now: datetime) -> SessionState:
        return SessionState.EXPIRED if self.is_expired(now) else SessionState.ACTIVE


@dataclass
class SessionConfig:
    """Session issuance and validation policy."""

    ttl: timedelta = DEFAULT_TTL
    token_length: int = MIN_TOKEN_LENGTH
    policy: ExpirationPolicy = ExpirationPolicy.SLIDING
    delete_expired_on_validate: bool = False
    max_issue_attempts: int = 3

    def __post_init__(self) -> None:
        if self.ttl <= timedelta(0):
            raise ValueError("ttl must be positive")
        if self.token_length < MIN_TOKEN_LENGTH:
            raise ValueError(f"token_length must be at least {MIN_TOKEN_LENGTH}")
        if self.max_issue_attempts < 1:
            raise ValueError("max_issue_attempts must be at least 1")
