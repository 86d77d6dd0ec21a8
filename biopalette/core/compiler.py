"""Compile per-palette JSON definitions into one palette index.

Definitions live under ``<color_dir>/{sequential,diverging,qualitative}/*.json``.
Every run rebuilds the whole index; a bad definition is skipped with a
warning and never stops the run.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .. import settings
from ..color.hexcolor import invalid_colors
from ..models.palette import PaletteDefinition, PaletteIndex
from ..storage import FSStorage, get_storage
from .audit_log import FileLogSink, LogSink, stamp, timestamp
from .errors import StorageError, ValidationError
from .types import CATEGORIES

logger = logging.getLogger(__name__)

INDEX_FILENAME = "color_palettes.json"
LOG_FILENAME = "compile_palettes.log"
REQUIRED_FIELDS = ("name", "type", "colors")


@dataclass
class CompileOutcome:
    source: str
    status: str  # accepted | overwritten | skipped
    message: str
    name: Optional[str] = None
    category: Optional[str] = None


@dataclass
class CompileReport:
    output_path: Path
    outcomes: List[CompileOutcome] = field(default_factory=list)
    counts: Dict[str, int] = field(default_factory=lambda: {c: 0 for c in CATEGORIES})
    written: bool = False
    terminal: Optional[str] = None  # no_definitions | write_failed

    @property
    def skipped(self) -> List[CompileOutcome]:
        return [o for o in self.outcomes if o.status == "skipped"]

    @property
    def merged(self) -> List[CompileOutcome]:
        return [o for o in self.outcomes if o.status != "skipped"]

    def to_dict(self) -> dict:
        return {
            "output_path": None if self.terminal == "no_definitions" else str(self.output_path),
            "written": self.written,
            "terminal": self.terminal,
            "counts": dict(self.counts),
            "outcomes": [
                {"source": o.source, "status": o.status, "message": o.message}
                for o in self.outcomes
            ],
        }


def discover_definitions(color_dir: Union[str, Path]) -> List[Path]:
    """JSON files of the three category folders, in category then filename order."""
    root = Path(color_dir)
    found: List[Path] = []
    for category in CATEGORIES:
        subdir = root / category
        if not subdir.is_dir():
            continue
        found.extend(sorted(p for p in subdir.glob("*.json") if p.is_file()))
    return found


def parse_definition(record: Any, source: str = "<record>") -> PaletteDefinition:
    """Validate a raw JSON record; raises :class:`ValidationError` naming the problem."""
    if not isinstance(record, dict):
        raise ValidationError(f"Definition is not a JSON object, skipping: {source}", value=record)

    fields = dict(record)
    if "type" not in fields and "category" in fields:
        fields["type"] = fields["category"]

    missing = [name for name in REQUIRED_FIELDS if name not in fields]
    if missing:
        raise ValidationError(
            f"Missing required fields ({', '.join(missing)}) in JSON, skipping: {source}",
            value=missing,
        )

    category = fields["type"]
    if category not in CATEGORIES:
        raise ValidationError(f"Unknown color type '{category}', skipping: {source}", value=category)

    name = fields["name"]
    if not isinstance(name, str) or not name.strip():
        raise ValidationError(f"Invalid palette name {name!r}, skipping: {source}", value=name)

    colors = fields["colors"]
    if not isinstance(colors, list) or not colors:
        raise ValidationError(f"Palette colors must be a non-empty list, skipping: {source}", value=colors)
    bad = invalid_colors(colors)
    if bad:
        raise ValidationError(f"Invalid HEX color values {bad} in: {source}", value=bad)

    return PaletteDefinition(name=name, category=category, colors=colors)


class PaletteCompiler:
    def __init__(
        self,
        color_dir: Union[str, Path],
        output_path: Optional[Union[str, Path]] = None,
        log_sink: Optional[LogSink] = None,
        storage: Optional[FSStorage] = None,
    ) -> None:
        self.color_dir = Path(color_dir)
        self.output_path = Path(output_path) if output_path is not None else self.color_dir / INDEX_FILENAME
        self.storage = storage or get_storage()
        self.log_sink = log_sink if log_sink is not None else FileLogSink(self.color_dir / LOG_FILENAME, self.storage)

    def _merge(self, index: PaletteIndex, source: Path, lines: List[str]) -> CompileOutcome:
        try:
            definition = parse_definition(self.storage.load_json(source), str(source))
        except (StorageError, ValidationError) as exc:
            logger.warning(exc.message)
            lines.append(stamp("Warning", exc.message))
            return CompileOutcome(source=str(source), status="skipped", message=exc.message)

        name, category = definition.name, definition.category
        replaced = index.add(definition)
        if replaced:
            logger.warning("Duplicate palette name '%s' in type '%s', overwriting.", name, category)
            lines.append(stamp("Warning", f"Duplicate palette '{name}' (Type: {category}) was overwritten"))

        msg = f"Successfully merged palette '{name}' (Type: {category}, Colors: {len(definition.colors)})"
        logger.info(msg)
        lines.append(stamp("Success", msg))
        return CompileOutcome(
            source=str(source),
            status="overwritten" if replaced else "accepted",
            message=msg,
            name=name,
            category=category,
        )

    def run(self) -> CompileReport:
        report = CompileReport(output_path=self.output_path)
        logger.info("Starting color palette compilation (JSON -> index) in %s", self.color_dir)

        sources = discover_definitions(self.color_dir)
        if not sources:
            logger.warning("No JSON files found. Please check the directory: %s", self.color_dir)
            report.terminal = "no_definitions"
            return report

        lines = [f"=== [{timestamp()}] Compilation started ==="]
        index = PaletteIndex()
        for source in sources:
            report.outcomes.append(self._merge(index, source, lines))

        try:
            self.storage.save_json(self.output_path, index.to_dict())
        except (OSError, TypeError, ValueError) as exc:
            msg = f"Failed to save palette index: {exc}"
            logger.error(msg)
            lines.append(stamp("Error", msg))
            report.terminal = "write_failed"
        else:
            msg = f"All palettes saved to index file: {self.output_path}"
            logger.info(msg)
            lines.append(stamp("Completed", msg))
            report.written = True

        report.counts = index.counts()
        for category in CATEGORIES:
            logger.info("%s palettes: %d", category.capitalize(), report.counts[category])

        self.log_sink.append(lines)
        return report


def compile_palettes(
    color_dir: Optional[Union[str, Path]] = None,
    output_path: Optional[Union[str, Path]] = None,
    log_path: Optional[Union[str, Path]] = None,
    *,
    log_sink: Optional[LogSink] = None,
    storage: Optional[FSStorage] = None,
) -> Optional[Path]:
    """Compile ``color_dir`` into an index file.

    Returns the index path, or ``None`` when no definition files were
    found. A failed index write is logged and reported but the path is
    still returned. Without ``color_dir`` the configured palette
    directory, index and log paths are used.
    """
    if color_dir is None:
        color_dir = settings.PALETTE_DIR
        output_path = output_path or settings.PALETTE_INDEX
        log_path = log_path or settings.PALETTE_COMPILE_LOG
    if log_sink is None and log_path is not None:
        log_sink = FileLogSink(log_path, storage)

    report = PaletteCompiler(color_dir, output_path, log_sink=log_sink, storage=storage).run()
    if report.terminal == "no_definitions":
        return None
    return report.output_path


__all__ = [
    "CompileOutcome",
    "CompileReport",
    "PaletteCompiler",
    "compile_palettes",
    "discover_definitions",
    "parse_definition",
]
