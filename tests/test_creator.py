from __future__ import annotations

import json

import pytest

from biopalette.core.audit_log import MemoryLogSink
from biopalette.core.compiler import compile_palettes
from biopalette.core.creator import create_palette
from biopalette.core.errors import StorageError, ValidationError
from biopalette.color.palette_loader import load_palette
from tests.utils import BLUES, PIYG


def test_create_writes_definition_and_log(tmp_path):
    color_dir = tmp_path / "colors"

    path = create_palette("blues", BLUES, "sequential", color_dir=color_dir)

    assert path == color_dir / "sequential" / "blues.json"
    assert json.loads(path.read_text(encoding="utf-8")) == {"name": "blues", "type": "sequential", "colors": BLUES}
    log = (color_dir / "palette_creation.log").read_text(encoding="utf-8")
    assert "| Type: sequential | Name: blues | Number of colors: 3 |" in log


def test_create_never_overwrites(tmp_path):
    color_dir = tmp_path / "colors"
    sink = MemoryLogSink()
    create_palette("piyg", PIYG, "diverging", color_dir=color_dir, log_sink=sink)

    assert create_palette("piyg", ["#000000"], "diverging", color_dir=color_dir, log_sink=sink) is None

    stored = json.loads((color_dir / "diverging" / "piyg.json").read_text(encoding="utf-8"))
    assert stored["colors"] == PIYG
    assert len(sink.lines) == 1


@pytest.mark.parametrize(
    "name, colors, category",
    [
        ("blues", ["#deebf7", "blue"], "sequential"),
        ("blues", [], "sequential"),
        ("blues", "#deebf7", "sequential"),
        ("", BLUES, "sequential"),
        ("../escape", BLUES, "sequential"),
        ("blues", BLUES, "spectral"),
    ],
)
def test_create_rejects_bad_input(tmp_path, name, colors, category):
    with pytest.raises(ValidationError):
        create_palette(name, colors, category, color_dir=tmp_path / "colors", log_sink=MemoryLogSink())
    assert not (tmp_path / "colors").exists()


def test_create_compile_get_roundtrip(tmp_path):
    color_dir = tmp_path / "colors"
    create_palette("blues", BLUES, "sequential", color_dir=color_dir)
    index_path = compile_palettes(color_dir)

    assert load_palette("blues", "sequential", n=3, index_path=index_path) == BLUES


def test_create_write_failure_raises_storage_error(tmp_path):
    color_dir = tmp_path / "colors"
    color_dir.mkdir()
    (color_dir / "sequential").write_text("a file where the category folder should be")
    sink = MemoryLogSink()

    with pytest.raises(StorageError) as err:
        create_palette("blues", BLUES, "sequential", color_dir=color_dir, log_sink=sink)

    assert err.value.path == color_dir / "sequential" / "blues.json"
    assert sink.lines == []
