"""Write new palette definitions as ``<color_dir>/<category>/<name>.json``."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence, Union

from .. import settings
from ..color.hexcolor import validate_category, validate_colors, validate_name
from ..models.palette import PaletteDefinition
from ..storage import FSStorage, get_storage
from .audit_log import FileLogSink, LogSink, timestamp
from .errors import StorageError, ValidationError

logger = logging.getLogger(__name__)

LOG_FILENAME = "palette_creation.log"


def definition_path(color_dir: Union[str, Path], category: str, name: str) -> Path:
    return Path(color_dir) / category / f"{name}.json"


def create_palette(
    name: str,
    colors: Sequence[str],
    category: str = "sequential",
    color_dir: Optional[Union[str, Path]] = None,
    log_path: Optional[Union[str, Path]] = None,
    *,
    log_sink: Optional[LogSink] = None,
    storage: Optional[FSStorage] = None,
) -> Optional[Path]:
    """Save a new palette definition.

    Existing definitions are never overwritten: if the file is already
    there a warning is logged and ``None`` is returned.
    """
    validate_category(category)
    validate_name(name)
    if any(sep in name for sep in ("/", "\\")) or name in (".", ".."):
        raise ValidationError(f"Palette name must not contain path separators: {name!r}", value=name)
    colors = validate_colors(colors)

    if color_dir is None:
        color_dir = settings.PALETTE_DIR
        log_path = log_path or settings.PALETTE_CREATION_LOG
    storage = storage or get_storage()
    if log_sink is None:
        log_sink = FileLogSink(log_path or Path(color_dir) / LOG_FILENAME, storage)

    definition = PaletteDefinition(name=name, category=category, colors=colors)
    path = definition_path(color_dir, category, name)

    palette_dir = storage.resolve(path).parent
    if not palette_dir.exists():
        palette_dir.mkdir(parents=True, exist_ok=True)
        logger.info("Directory automatically created: %s", palette_dir)

    if storage.exists(path):
        logger.warning("File already exists: %s, keeping the existing definition", path)
        return None

    try:
        written = storage.save_json(path, definition.to_record())
    except OSError as exc:
        logger.error("Failed to save JSON file %s: %s", path, exc)
        raise StorageError(f"Failed to save palette definition {path}: {exc}", path=path) from exc
    logger.info("Successfully created color palette JSON file: %s", written)

    log_sink.append([
        f"{timestamp()} | Type: {category} | Name: {name} | Number of colors: {len(colors)} | Path: {written}"
    ])
    return written


__all__ = ["create_palette", "definition_path"]
