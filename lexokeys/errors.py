"""Errors raised by the key engine.

Every failure is a ``LexoRankError`` carrying a stable ``code``; callers can
catch the base class or one of the specific kinds below.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from .schemas import ErrorEnvelope


class LexoRankError(ValueError):
    code = "lexorank_error"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_envelope(self) -> ErrorEnvelope:
        return ErrorEnvelope(code=self.code, message=self.message, details=self.details or None)


class ConfigurationError(LexoRankError):
    """Invalid character set, initial key or bucket settings."""

    code = "invalid_configuration"


class OrderingError(LexoRankError):
    """Bounds that cannot be ordered: ``prev >= next``."""

    code = "invalid_ordering"


class MalformedKeyError(OrderingError):
    """A key that cannot be interpreted: foreign characters or a missing separator."""

    code = "malformed_key"


class BucketMismatchError(LexoRankError):
    code = "bucket_mismatch"


class ExhaustionError(LexoRankError):
    """No character is left to move the key in the requested direction."""

    code = "key_space_exhausted"
