"""Album Routes - tests for shape views, command batches and reset.

Tests cover:
    - POST /commands runs a script; 422 + BatchResult on halt
    - Shape list/detail return structured geometry plus canonical text
    - Unknown shape -> 404 envelope
    - DELETE /album resets shapes and snapshots
    - Request validation -> 400 envelope
    - Scripts over max_script_lines -> 400 FORMAT_ERROR, nothing applied
    - Domain error logs carry the error context fields
"""

import logging

import pytest

from photoalbum.config import Settings, get_settings
from photoalbum.core.errors import UnknownShapeError
from photoalbum.main import app


async def test_health(client):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_run_commands_completed(client, album):
    res = await client.post("/api/v1/album/commands", json={
        "script": "shape R rectangle 10 20 30 40 0 0 255\nsnapshot first",
    })
    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "completed"
    assert body["commands_executed"] == 2
    assert body["error"] is None
    assert len(album.get_snapshots()) == 1


async def test_run_commands_halted_returns_422(client, album):
    res = await client.post("/api/v1/album/commands", json={
        "script": "shape R rectangle 0 0 5 5 0 0 0\nmove ghost 1 1\nsnapshot never",
    })
    assert res.status_code == 422
    body = res.json()
    assert body["status"] == "halted"
    assert body["line_number"] == 2
    assert body["line"] == "move ghost 1 1"
    assert body["error"]["code"] == "UNKNOWN_SHAPE"
    # line 1 stays applied, line 3 never ran
    assert "R" in album.store
    assert album.get_snapshots() == []


async def test_blank_script_is_rejected(client):
    res = await client.post("/api/v1/album/commands", json={"script": "   "})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_list_shapes_structured(client, album):
    album.add_shape("R", "rectangle")
    album.move("R", 200, 200)
    album.add_shape("O", "oval")
    album.resize("O", 60, 30)

    res = await client.get("/api/v1/album/shapes")
    assert res.status_code == 200
    shapes = res.json()["shapes"]
    assert [s["name"] for s in shapes] == ["R", "O"]
    assert shapes[0]["geometry"] == {
        "type": "rectangle", "x": 200.0, "y": 200.0, "width": 50.0, "height": 50.0,
    }
    assert shapes[1]["geometry"] == {
        "type": "oval", "cx": 0.0, "cy": 0.0, "x_radius": 60.0, "y_radius": 30.0,
    }
    assert shapes[0]["color"] == {"r": 1.0, "g": 0.0, "b": 0.0}
    assert shapes[0]["text"] == album.get_shape("R").serialize()


async def test_get_shape(client, album):
    album.add_shape("O", "oval")
    res = await client.get("/api/v1/album/shapes/O")
    assert res.status_code == 200
    assert res.json()["type"] == "oval"


async def test_get_unknown_shape_is_404(client):
    res = await client.get("/api/v1/album/shapes/ghost")
    assert res.status_code == 404
    error = res.json()["error"]
    assert error["code"] == "UNKNOWN_SHAPE"
    assert error["context"]["shape_name"] == "ghost"


async def test_reset(client, album):
    album.add_shape("R", "rectangle")
    album.take_snapshot("before reset")

    res = await client.delete("/api/v1/album")
    assert res.status_code == 204
    assert album.get_snapshot_ids() == "[]"
    with pytest.raises(UnknownShapeError):
        album.get_shape("R")


async def test_script_over_line_limit_is_rejected(client, album):
    app.dependency_overrides[get_settings] = lambda: Settings(
        _env_file=None, max_script_lines=2,
    )
    res = await client.post("/api/v1/album/commands", json={
        "script": "shape R rectangle 0 0 5 5 0 0 0\nsnapshot a\nsnapshot b",
    })
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "FORMAT_ERROR"
    # rejected before any line ran
    assert "R" not in album.store
    assert album.get_snapshots() == []


async def test_script_at_line_limit_runs(client, album):
    app.dependency_overrides[get_settings] = lambda: Settings(
        _env_file=None, max_script_lines=2,
    )
    res = await client.post("/api/v1/album/commands", json={
        "script": "shape R rectangle 0 0 5 5 0 0 0\nsnapshot a",
    })
    assert res.status_code == 200
    assert len(album.get_snapshots()) == 1


async def test_domain_error_log_carries_context(client, caplog):
    with caplog.at_level(logging.WARNING, logger="photoalbum.api.error_handlers"):
        res = await client.get("/api/v1/album/shapes/ghost")
    assert res.status_code == 404
    (record,) = [
        r for r in caplog.records if r.name == "photoalbum.api.error_handlers"
    ]
    assert record.error_code == "UNKNOWN_SHAPE"
    assert record.shape_name == "ghost"
