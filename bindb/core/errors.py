"""
Exceptions raised while decoding a binary database.

Every error derives from ``DecodeError`` which itself is a ``ValueError``, so
callers that already guard parsing with ``except ValueError`` keep working.
"""
from __future__ import annotations

from typing import Optional


class DecodeError(ValueError):
    """Base class for all decoding failures."""

    def __init__(self, message: str, offset: Optional[int] = None) -> None:
        if offset is not None:
            message = f"{message} (at offset {offset})"
        super().__init__(message)
        self.offset = offset


class TruncatedInput(DecodeError):
    """Fewer bytes remain than the current decode step requires."""

    def __init__(self, needed: int, available: int, offset: int, what: str = "data") -> None:
        super().__init__(f"Truncated {what}: needed {needed} bytes, {available} available", offset)
        self.needed = needed
        self.available = available


class UnknownTypeTag(DecodeError):
    def __init__(self, tag: int, offset: int) -> None:
        super().__init__(f"Unknown type tag {tag}", offset)
        self.tag = tag


class TrailingBytes(DecodeError):
    def __init__(self, remaining: int, offset: int) -> None:
        super().__init__(f"{remaining} trailing bytes after last complete record", offset)
        self.remaining = remaining


class InvalidValue(DecodeError):
    """Payload is well framed but not acceptable under the active settings."""
