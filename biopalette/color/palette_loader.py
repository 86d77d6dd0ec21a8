from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Union

from pydantic import ValidationError as SchemaError

from .. import settings
from ..core.errors import StorageError
from ..core.retriever import get_palette
from ..models.palette import PaletteIndex
from ..storage import FSStorage, get_storage


def load_index(path: Optional[Union[str, Path]] = None, storage: Optional[FSStorage] = None) -> PaletteIndex:
    """Read a compiled index; raises :class:`StorageError` if absent or corrupt."""
    path = Path(path) if path is not None else Path(settings.PALETTE_INDEX)
    storage = storage or get_storage()
    payload = storage.load_json(path)
    if not isinstance(payload, dict):
        raise StorageError(f"Palette index is not a JSON object: {path}", path=path)
    try:
        return PaletteIndex.model_validate(payload)
    except SchemaError as exc:
        raise StorageError(f"Corrupt palette index {path}: {exc.error_count()} invalid entries", path=path) from exc


def load_palette(
    name: str,
    category: str = "sequential",
    n: Optional[int] = None,
    index_path: Optional[Union[str, Path]] = None,
) -> List[str]:
    return get_palette(load_index(index_path), name, category, n)
