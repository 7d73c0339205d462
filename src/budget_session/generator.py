"""Session id and bearer token generation."""

from __future__ import annotations

import secrets
import string
import uuid
from abc import ABC, abstractmethod

from .exceptions import TokenGenerationError

DEFAULT_ALPHABET = string.ascii_letters + string.digits
DEFAULT_TOKEN_LENGTH = 255


class TokenGenerator(ABC):
    """Source of session ids and opaque bearer tokens."""

    @abstractmethod
    def new_id(self) -> str:
        """Return a unique, unpredictable primary key."""
        ...

    @abstractmethod
    def new_token(self, length: int = DEFAULT_TOKEN_LENGTH) -> str:
        """Return a random token of at least ``length`` characters."""
        ...


class SecureTokenGenerator(TokenGenerator):
    """TokenGenerator backed by the operating system CSPRNG."""

    def __init__(self, alphabet: str = DEFAULT_ALPHABET) -> None:
        if len(set(alphabet)) < 2:
            raise ValueError("alphabet must contain at least two distinct characters")
        self._alphabet = alphabet

    def new_id(self) -> str:
        try:
            return str(uuid.uuid4())
        except (OSError, NotImplementedError) as e:
            raise TokenGenerationError("Failed to generate session id", cause=e) from e

    def new_token(self, length: int = DEFAULT_TOKEN_LENGTH) -> str:
        if length < 1:
            raise ValueError("length must be at least 1")
        try:
            return "".join(secrets.choice(self._alphabet) for _ in range(length))
        except (OSError, NotImplementedError) as e:
            raise TokenGenerationError("Failed to generate session token", cause=e) from e
