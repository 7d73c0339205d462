"""Server-side session management for the budget server."""

from .bearer import AUTHORIZATION, authenticate_headers, extract_bearer_token
from .config import ConfigError, ConfigErrorCodes, SessionSettings, load
from .exceptions import (
    AuthError,
    ConflictError,
    NotFoundError,
    SessionError,
    SessionErrorCodes,
    StoreUnavailableError,
    TokenGenerationError,
)
from .factory import SessionRuntime, create_runtime, runtime_from_files
from .generator import (
    DEFAULT_ALPHABET,
    DEFAULT_TOKEN_LENGTH,
    SecureTokenGenerator,
    TokenGenerator,
)
from .logger import new_logger
from .memory import InMemorySessionStore
from .models import MIN_TOKEN_LENGTH, ExpirationPolicy, Session, SessionConfig, SessionState
from .service import SessionService
from .store import SessionStore
from .sweeper import SessionSweeper

__all__ = [
    "AUTHORIZATION",
    "AuthError",
    "ConfigError",
    "ConfigErrorCodes",
    "ConflictError",
    "DEFAULT_ALPHABET",
    "DEFAULT_TOKEN_LENGTH",
    "ExpirationPolicy",
    "InMemorySessionStore",
    "MIN_TOKEN_LENGTH",
    "NotFoundError",
    "SecureTokenGenerator",
    "Session",
    "SessionConfig",
    "SessionError",
    "SessionErrorCodes",
    "SessionRuntime",
    "SessionService",
    "SessionSettings",
    "SessionState",
    "SessionStore",
    "SessionSweeper",
    "StoreUnavailableError",
    "TokenGenerationError",
    "TokenGenerator",
    "authenticate_headers",
    "create_runtime",
    "extract_bearer_token",
    "load",
    "new_logger",
    "runtime_from_files",
]
