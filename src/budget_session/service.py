"""SessionService: issuance, validation and revocation of sessions."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

import structlog

from .exceptions import AuthError, ConflictError, NotFoundError
from .generator import SecureTokenGenerator, TokenGenerator
from .metrics import (
    session_issued_total,
    session_rejected_total,
    session_revoked_total,
    session_swept_total,
    session_validated_total,
)
from .models import ExpirationPolicy, Session, SessionConfig
from .store import SessionStore

logger = structlog.get_logger(__name__)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class SessionService:
    """Issues, validates and revokes server-side sessions.

    user_id is treated as an opaque foreign key: whether the user exists
    is the caller's concern. Store errors other than id/token collisions
    on insert are propagated unchanged.
    """

    def __init__(
        self,
        store: SessionStore,
        generator: TokenGenerator | None = None,
        config: SessionConfig | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._store = store
        self._generator = generator or SecureTokenGenerator()
        self._config = config or SessionConfig()
        self._clock = clock or _utcnow

    @property
    def config(self) -> SessionConfig:
        return self._config

    async def issue(self, user_id: str) -> str:
        """Create a new session for the user and return its bearer token."""
        session = await self.issue_session(user_id)
        return session.token

    async def issue_session(self, user_id: str) -> Session:
        """Create a new session for the user and return the full record.

        A ConflictError from the store is answered by generating a fresh id
        and token, up to config.max_issue_attempts times. The last conflict
        propagates once the attempts are used up.
        """
        if not user_id:
            raise ValueError("user_id cannot be empty")
        expiration = self._clock() + self._config.ttl
        attempt = 0
        while True:
            attempt += 1
            session = Session(
                id=self._generator.new_id(),
                user_id=user_id,
                token=self._generator.new_token(self._config.token_length),
                expiration=expiration,
            )
            try:
                await self._store.save(session)
            except ConflictError as e:
                if attempt >= self._config.max_issue_attempts:
                    raise
                logger.warning("session_conflict", field=e.field, attempt=attempt)
                continue
            break
        session_issued_total.add(1)
        logger.info("session_issued", session_id=session.id, user_id=user_id)
        return session

    async def validate(self, token: str) -> str:
        """Authenticate a bearer token and return the owning user id.

        Under the sliding policy a successful validation also pushes the
        expiration out to now + ttl.

        Raises:
            AuthError: INVALID_TOKEN if no session holds the token (unknown,
                malformed or revoked), EXPIRED if the session has expired.
        """
        now = self._clock()
        session = await self._resolve(token, now)
        if self._config.policy == ExpirationPolicy.SLIDING:
            session = await self._extend(session, now)
        session_validated_total.add(1)
        return session.user_id

    async def get_session(self, token: str) -> Session:
        """Return the active session holding the token without extending it."""
        return await self._resolve(token, self._clock())

    async def refresh(self, token: str) -> Session:
        """Push the session's expiration to now + ttl regardless of policy."""
        now = self._clock()
        session = await self._resolve(token, now)
        return await self._extend(session, now)

    async def revoke(self, token: str) -> None:
        """Delete the session holding the token. Unknown tokens are ignored."""
        if not token:
            return
        session = await self._store.find_by_token(token)
        if session is None:
            return
        await self.revoke_by_id(session.id)

    async def revoke_by_id(self, session_id: str) -> None:
        """Delete a session by its id. Unknown ids are ignored."""
        if await self._store.delete(session_id):
            session_revoked_total.add(1)
            logger.info("session_revoked", session_id=session_id)

    async def revoke_all_for_user(self, user_id: str) -> int:
        """Delete every session of the user and return how many were removed."""
        count = 0
        for session in await self._store.find_by_user(user_id):
            if await self._store.delete(session.id):
                count += 1
        if count:
            session_revoked_total.add(count)
        logger.info("sessions_revoked_for_user", user_id=user_id, count=count)
        return count

    async def list_sessions(self, user_id: str) -> list[Session]:
        """Return the user's sessions that have not yet expired."""
        now = self._clock()
        return [s for s in await self._store.find_by_user(user_id) if not s.is_expired(now)]

    async def sweep_expired(self, now: datetime | None = None) -> int:
        """Remove every session whose expiration is before now."""
        if now is None:
            now = self._clock()
        count = await self._store.delete_expired(now)
        if count:
            session_swept_total.add(count)
        logger.info("sessions_swept", count=count)
        return count

    async def _resolve(self, token: str, now: datetime) -> Session:
        if not token or not token.strip():
            raise self._reject(AuthError.invalid_token())
        session = await self._store.find_by_token(token)
        if session is None:
            raise self._reject(AuthError.invalid_token())
        if session.is_expired(now):
            if self._config.delete_expired_on_validate:
                await self._store.delete(session.id)
            raise self._reject(AuthError.expired(), session_id=session.id)
        return session

    async def _extend(self, session: Session, now: datetime) -> Session:
        expiration = now + self._config.ttl
        if expiration <= session.expiration:
            return session
        try:
            return await self._store.update_expiration(session.id, expiration)
        except NotFoundError as e:
            # revoked between lookup and update
            raise self._reject(AuthError.invalid_token(), session_id=session.id) from e

    def _reject(self, error: AuthError, session_id: str | None = None) -> AuthError:
        session_rejected_total.add(1, {"reason": error.code})
        logger.info("session_rejected", reason=error.code, session_id=session_id)
        return error
