"""SessionStore abstract base class."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from .models import Session


class SessionStore(ABC):
    """Persistence for sessions.

    Implementations must make save, update_expiration and delete atomic
    per session, and must enforce uniqueness of both id and token on
    insert. Transient backend failures are raised as StoreUnavailableError.
    """

    @abstractmethod
    async def save(self, session: Session) -> None:
        """Insert a new session. Raises ConflictError if its id or token exists."""
        ...

    @abstractmethod
    async def find_by_id(self, session_id: str) -> Session | None:
        """Return the session with this id, or None."""
        ...

    @abstractmethod
    async def find_by_token(self, token: str) -> Session | None:
        """Return the session holding this token, or None."""
        ...

    @abstractmethod
    async def find_by_user(self, user_id: str) -> list[Session]:
        """Return every stored session owned by the user, in no particular order."""
        ...

    @abstractmethod
    async def update_expiration(self, session_id: str, expiration: datetime) -> Session:
        """Move the expiration forward and return the stored session.

        An expiration that is not later than the stored one is ignored.
        Raises NotFoundError if the id is absent.
        """
        ...

    @abstractmethod
    async def delete(self, session_id: str) -> bool:
        """Delete a session. Returns False when it did not exist."""
        ...

    @abstractmethod
    async def delete_expired(self, now: datetime) -> int:
        """Delete every session with expiration < now and return the count."""
        ...
