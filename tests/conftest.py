"""Shared fixtures for budget_session tests."""

from __future__ import annotations

import itertools
from collections.abc import Iterable
from datetime import UTC, datetime, timedelta

import pytest

from budget_session import (
    InMemorySessionStore,
    SessionConfig,
    SessionService,
    TokenGenerator,
)

START = datetime(2024, 1, 1, 12, 0, tzinfo=UTC)


class ManualClock:
    """Clock that only moves when told to."""

    def __init__(self, now: datetime = START) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now += delta


class SequentialTokenGenerator(TokenGenerator):
    """Deterministic generator. Scripted values are handed out first."""

    def __init__(self, ids: Iterable[str] = (), tokens: Iterable[str] = ()) -> None:
        self._ids = iter(ids)
        self._tokens = iter(tokens)
        self._counter = itertools.count(1)

    def new_id(self) -> str:
        return next(self._ids, None) or f"session-{next(self._counter)}"

    def new_token(self, length: int = 255) -> str:
        return next(self._tokens, None) or f"token-{next(self._counter)}".ljust(length, "x")


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def store() -> InMemorySessionStore:
    return InMemorySessionStore()


@pytest.fixture
def generator() -> SequentialTokenGenerator:
    return SequentialTokenGenerator()


@pytest.fixture
def service(
    store: InMemorySessionStore,
    generator: SequentialTokenGenerator,
    clock: ManualClock,
) -> SessionService:
    return SessionService(store, generator=generator, config=SessionConfig(), clock=clock)
