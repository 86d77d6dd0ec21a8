from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable

BLUES = ["#deebf7", "#9ecae1", "#3182bd"]
VIVIDSET = ["#E64B35", "#4DBBD5", "#00A087", "#3C5488", "#F39B7F"]
PIYG = ["#E64B35B2", "#00A087B2", "#3C5488B2"]


def write_raw(color_dir: Path, category: str, filename: str, payload: Any) -> Path:
    path = Path(color_dir) / category / filename
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(payload, str):
        path.write_text(payload, encoding="utf-8")
    else:
        path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def write_definition(
    color_dir: Path,
    category: str,
    name: str,
    colors: Iterable[str],
    *,
    filename: str | None = None,
    **extra: Any,
) -> Path:
    record = {"name": name, "type": category, "colors": list(colors), **extra}
    return write_raw(color_dir, category, filename or f"{name}.json", record)


def make_color_dir(root: Path) -> Path:
    """A small palette tree with one palette per category."""
    color_dir = Path(root) / "colors"
    write_definition(color_dir, "sequential", "blues", BLUES)
    write_definition(color_dir, "diverging", "piyg", PIYG)
    write_definition(color_dir, "qualitative", "vividset", VIVIDSET)
    return color_dir
