from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from biopalette.api.deps import (
    get_compile_log_path,
    get_creation_log_path,
    get_index_path,
    get_palette_dir,
)
from biopalette.main import app

BLUES = ["#deebf7", "#9ecae1", "#3182bd"]
VIVIDSET = ["#E64B35", "#4DBBD5", "#00A087", "#3C5488", "#F39B7F"]


@pytest.fixture
def client(tmp_path: Path):
    color_dir = tmp_path / "colors"
    app.dependency_overrides[get_palette_dir] = lambda: color_dir
    app.dependency_overrides[get_index_path] = lambda: color_dir / "color_palettes.json"
    app.dependency_overrides[get_compile_log_path] = lambda: tmp_path / "logs" / "compile.log"
    app.dependency_overrides[get_creation_log_path] = lambda: tmp_path / "logs" / "creation.log"
    yield TestClient(app)
    app.dependency_overrides.clear()


def _seed(client: TestClient):
    for name, category, colors in (("blues", "sequential", BLUES), ("vividset", "qualitative", VIVIDSET)):
        resp = client.post("/api/v1/palettes", json={"name": name, "category": category, "colors": colors})
        assert resp.status_code == 201
    resp = client.post("/admin/compile")
    assert resp.status_code == 200
    return resp.json()


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_create_compile_and_get(client):
    summary = _seed(client)
    assert summary["written"] is True
    assert summary["counts"] == {"sequential": 1, "diverging": 0, "qualitative": 1}

    resp = client.get("/api/v1/palettes/sequential/blues", params={"n": 2})
    assert resp.status_code == 200
    assert resp.json() == {"name": "blues", "category": "sequential", "colors": BLUES[:2]}


def test_mismatch_and_missing(client):
    _seed(client)

    resp = client.get("/api/v1/palettes/sequential/vividset")
    assert resp.status_code == 422
    assert resp.json()["detail"]["suggestion"] == "qualitative"

    resp = client.get("/api/v1/palettes/sequential/nope")
    assert resp.status_code == 404

    resp = client.get("/api/v1/palettes/sequential/blues", params={"n": 9})
    assert resp.status_code == 422


def test_duplicate_create_conflicts(client):
    _seed(client)
    resp = client.post("/api/v1/palettes", json={"name": "blues", "category": "sequential", "colors": ["#000000"]})
    assert resp.status_code == 409


def test_list_and_gallery(client):
    _seed(client)
    items = client.get("/api/v1/palettes").json()
    assert [(i["category"], i["name"], i["count"]) for i in items] == [
        ("sequential", "blues", 3),
        ("qualitative", "vividset", 5),
    ]
    gallery = client.get("/api/v1/gallery", params={"category": "qualitative", "page_size": 1}).json()
    assert list(gallery["pages"]) == ["qualitative_page1"]
    assert gallery["total"] == 1


def test_missing_index_is_unavailable(client):
    assert client.get("/api/v1/palettes").status_code == 503


def test_compile_without_definitions(client):
    summary = client.post("/admin/compile").json()
    assert summary["written"] is False
    assert summary["terminal"] == "no_definitions"


def test_logs_go_to_configured_paths(client, tmp_path):
    _seed(client)

    logs = tmp_path / "logs"
    assert "Compilation started" in (logs / "compile.log").read_text(encoding="utf-8")
    assert "| Name: blues |" in (logs / "creation.log").read_text(encoding="utf-8")
    assert not (tmp_path / "colors" / "compile_palettes.log").exists()
    assert not (tmp_path / "colors" / "palette_creation.log").exists()


def test_log_dependencies_read_settings(monkeypatch, tmp_path):
    from biopalette import settings

    monkeypatch.setattr(settings, "PALETTE_COMPILE_LOG", str(tmp_path / "elsewhere" / "compile.log"))
    monkeypatch.setattr(settings, "PALETTE_CREATION_LOG", str(tmp_path / "elsewhere" / "creation.log"))

    assert get_compile_log_path() == tmp_path / "elsewhere" / "compile.log"
    assert get_creation_log_path() == tmp_path / "elsewhere" / "creation.log"
