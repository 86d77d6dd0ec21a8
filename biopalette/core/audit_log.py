"""Append-only audit logs written next to the palette definitions.

These files are an audit trail for humans; they are separate from the
``logging`` output and a failure to write them never fails the caller.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Protocol, Sequence, Union

from ..storage import FSStorage, get_storage

logger = logging.getLogger(__name__)


def timestamp() -> str:
    return datetime.now().strftime("%Y-%m-%d %H:%M:%S")


def stamp(level: str, message: str) -> str:
    return f"[{timestamp()}] {level}: {message}"


class LogSink(Protocol):
    def append(self, lines: Sequence[str]) -> None:
        """Append ``lines`` to the log; must not raise."""


class FileLogSink:
    def __init__(self, path: Union[str, Path], storage: Optional[FSStorage] = None) -> None:
        self.path = Path(path)
        self.storage = storage or get_storage()

    def append(self, lines: Sequence[str]) -> None:
        try:
            written = self.storage.append_lines(self.path, lines)
        except OSError as exc:
            logger.error("Failed to append log %s: %s", self.path, exc)
            return
        logger.info("Log appended to: %s", written)


class MemoryLogSink:
    """Keeps lines in memory; handy when no audit file is wanted."""

    def __init__(self) -> None:
        self.lines: List[str] = []

    def append(self, lines: Sequence[str]) -> None:
        self.lines.extend(lines)


__all__ = ["FileLogSink", "LogSink", "MemoryLogSink", "stamp", "timestamp"]
