"""InMemorySessionStore implementation."""

from __future__ import annotations

import asyncio
import dataclasses
from datetime import datetime

from .exceptions import ConflictError, NotFoundError
from .models import Session
from .store import SessionStore


class InMemorySessionStore(SessionStore):
    """In-memory session store for tests and single-process deployments."""

    def __init__(self) -> None:
        self._sessions: dict[str, Session] = {}
        self._ids_by_token: dict[str, str] = {}
        self._lock = asyncio.Lock()

    async def save(self, session: Session) -> None:
        async with self._lock:
            if session.id in self._sessions:
                raise ConflictError("id")
            if session.token in self._ids_by_token:
                raise ConflictError("token")
            self._sessions[session.id] = session
            self._ids_by_token[session.token] = session.id

    async def find_by_id(self, session_id: str) -> Session | None:
        return self._sessions.get(session_id)

    async def find_by_token(self, token: str) -> Session | None:
        session_id = self._ids_by_token.get(token)
        if session_id is None:
            return None
        return self._sessions.get(session_id)

    async def find_by_user(self, user_id: str) -> list[Session]:
        return [s for s in self._sessions.values() if s.user_id == user_id]

    async def update_expiration(self, session_id: str, expiration: datetime) -> Session:
        async with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                raise NotFoundError(session_id)
            if expiration <= session.expiration:
                return session
            updated = dataclasses.replace(session, expiration=expiration)
            self._sessions[session_id] = updated
            return updated

    async def delete(self, session_id: str) -> bool:
        async with self._lock:
            return self._remove(session_id)

    async def delete_expired(self, now: datetime) -> int:
        async with self._lock:
            expired = [sid for sid, s in self._sessions.items() if s.expiration < now]
            for sid in expired:
                self._remove(sid)
            return len(expired)

    def all_sessions(self) -> list[Session]:
        return list(self._sessions.values())

    def _remove(self, session_id: str) -> bool:
        session = self._sessions.pop(session_id, None)
        if session is None:
            return False
        del self._ids_by_token[session.token]
        return True
