"""Error types raised while building the card registry.

Every failure here is fatal to startup. Queries against a built registry
never raise; they return empty results or ``None``.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    CARDS_DIRECTORY_UNREADABLE = "CARDS_DIRECTORY_UNREADABLE"
    MANIFEST_INVALID = "MANIFEST_INVALID"
    CARD_LOAD_FAILED = "CARD_LOAD_FAILED"


class HashdoError(Exception):
    """Raised when the on-disk pack content cannot be indexed."""

    def __init__(self, code: ErrorCode, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.path = path

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"
