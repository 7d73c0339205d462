"""YAML configuration loading (pydantic BaseModel)."""

from __future__ import annotations

from datetime import timedelta
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError

from .models import MIN_TOKEN_LENGTH, ExpirationPolicy, SessionConfig


class ConfigError(Exception):
    """Configuration loading error."""

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


class ConfigErrorCodes:
    """ConfigError code constants."""

    READ_FILE: str = "READ_FILE_ERROR"
    PARSE_YAML: str = "PARSE_YAML_ERROR"
    VALIDATION: str = "VALIDATION_ERROR"


class SessionSection(BaseModel):
    """Session issuance and validation settings."""

    ttl_days: float = Field(default=14, gt=0)
    token_length: int = Field(default=MIN_TOKEN_LENGTH, ge=MIN_TOKEN_LENGTH)
    policy: ExpirationPolicy = ExpirationPolicy.SLIDING
    delete_expired_on_validate: bool = False
    max_issue_attempts: int = Field(default=3, ge=1)


class SweepSection(BaseModel):
    """Expired session sweep settings."""

    interval_seconds: float = Field(default=3 * 60 * 60, gt=0)


class LogSection(BaseModel):
    """Log settings."""

    level: str = "INFO"
    format: Literal["json", "text"] = "json"


class SessionSettings(BaseModel):
    """Top level settings."""

    session: SessionSection = Field(default_factory=SessionSection)
    sweep: SweepSection = Field(default_factory=SweepSection)
    log: LogSection = Field(default_factory=LogSection)

    def to_session_config(self) -> SessionConfig:
        return SessionConfig(
            ttl=timedelta(days=self.session.ttl_days),
            token_length=self.session.token_length,
            policy=self.session.policy,
            delete_expired_on_validate=self.session.delete_expired_on_validate,
            max_issue_attempts=self.session.max_issue_attempts,
        )


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Return base updated with override. Nested dicts merge, anything else is replaced."""
    merged = {**base, **override}
    for key in base.keys() & override.keys():
        if isinstance(base[key], dict) and isinstance(override[key], dict):
            merged[key] = deep_merge(base[key], override[key])
    return merged


def _read_mapping(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(
            code=ConfigErrorCodes.READ_FILE,
            message=f"Failed to read config file: {path}",
            cause=e,
        ) from e
    except yaml.YAMLError as e:
        raise ConfigError(
            code=ConfigErrorCodes.PARSE_YAML,
            message=f"Failed to parse YAML: {path}",
            cause=e,
        ) from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            code=ConfigErrorCodes.PARSE_YAML,
            message=f"Config root must be a mapping: {path}",
        )
    return data


def load(base_path: Path, *override_paths: Path | None) -> SessionSettings:
    """Load settings from base_path.

    Each existing override file is deep-merged over the result in order, so
    ``load(base, env)`` gives the environment file the last word. Missing
    override files are skipped; a missing base file is an error.
    """
    data = _read_mapping(base_path)
    for path in override_paths:
        if path is not None and path.exists():
            data = deep_merge(data, _read_mapping(path))
    try:
        return SessionSettings.model_validate(data)
    except ValidationError as e:
        raise ConfigError(
            code=ConfigErrorCodes.VALIDATION,
            message=f"Config validation failed: {e}",
            cause=e,
        ) from e
