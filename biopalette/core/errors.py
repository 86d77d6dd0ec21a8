"""Error taxonomy for palette creation, compilation and retrieval."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional


class PaletteError(Exception):
    """Base class for every error raised by the palette store."""


class ValidationError(PaletteError):
    """Malformed caller input.

    ``value`` holds the offending input. ``suggestion`` is set when the
    request can be fixed by the caller, e.g. the category that actually
    contains a requested palette name.
    """

    def __init__(self, message: str, *, value: Any = None, suggestion: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.value = value
        self.suggestion = suggestion


class NotFoundError(PaletteError):
    def __init__(self, message: str, *, value: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.value = value


class StorageError(PaletteError):
    """Index or definition file missing, unreadable or corrupt."""

    def __init__(self, message: str, *, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path


__all__ = ["PaletteError", "ValidationError", "NotFoundError", "StorageError"]
