"""Build a ready-to-run session runtime from SessionSettings."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

import structlog

from .config import SessionSettings, load
from .generator import TokenGenerator
from .logger import new_logger
from .memory import InMemorySessionStore
from .service import SessionService
from .store import SessionStore
from .sweeper import SessionSweeper


@dataclass
class SessionRuntime:
    """Service, sweeper and logger built from one set of settings."""

    settings: SessionSettings
    service: SessionService
    sweeper: SessionSweeper
    logger: structlog.stdlib.BoundLogger


def create_runtime(
    settings: SessionSettings | None = None,
    store: SessionStore | None = None,
    generator: TokenGenerator | None = None,
    clock: Callable[[], datetime] | None = None,
) -> SessionRuntime:
    """Configure logging and wire a SessionService and its SessionSweeper.

    The sweeper is created but not started. Without a store an
    InMemorySessionStore is used.
    """
    settings = settings or SessionSettings()
    logger = new_logger(level=settings.log.level, format=settings.log.format)
    service = SessionService(
        store or InMemorySessionStore(),
        generator=generator,
        config=settings.to_session_config(),
        clock=clock,
    )
    sweeper = SessionSweeper(service, interval_seconds=settings.sweep.interval_seconds)
    logger.info(
        "session_runtime_created",
        policy=str(settings.session.policy),
        ttl_days=settings.session.ttl_days,
        sweep_interval_seconds=settings.sweep.interval_seconds,
    )
    return SessionRuntime(settings=settings, service=service, sweeper=sweeper, logger=logger)


def runtime_from_files(
    base_path: Path,
    *override_paths: Path | None,
    store: SessionStore | None = None,
) -> SessionRuntime:
    """load() the YAML settings and pass them to create_runtime."""
    return create_runtime(load(base_path, *override_paths), store=store)
