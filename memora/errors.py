"""Memora error types.

Every error carries a human-readable message and, where there is one, the
lower-level exception that caused it.
"""

from __future__ import annotations


class MemoraError(Exception):
    """Base class for all Memora errors."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause is None:
            return self.message
        return f"{self.message} {self.cause}"


class MemoraIOError(MemoraError, OSError):
    """A file could not be opened, created, read or written."""


class ManifestIOError(MemoraIOError):
    """The manifest file could not be opened or read."""


class ManifestSyntaxError(MemoraError, ValueError):
    """The manifest file does not match the expected document schema."""
