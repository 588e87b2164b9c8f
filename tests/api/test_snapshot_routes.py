"""Snapshot Routes - tests for the read-only renderer API.

Tests cover:
    - Summaries oldest first
    - Snapshot detail keeps captured values after live mutation
    - /ids and /text return the core text forms verbatim
    - Unknown snapshot -> 404 envelope
"""


async def test_list_snapshots(client, album):
    album.add_shape("R", "rectangle")
    album.take_snapshot("one")
    album.add_shape("O", "oval")
    album.take_snapshot("two")

    res = await client.get("/api/v1/snapshots")
    assert res.status_code == 200
    summaries = res.json()["snapshots"]
    assert [s["description"] for s in summaries] == ["one", "two"]
    assert [s["shape_count"] for s in summaries] == [1, 2]
    assert summaries[0]["timestamp"] == "14-03-2026 15:09:26"


async def test_snapshot_detail_is_frozen(client, album):
    album.add_shape("R", "rectangle")
    album.move("R", 200, 200)
    snapshot_id = album.take_snapshot("pos 1")
    album.move("R", 300, 300)

    res = await client.get(f"/api/v1/snapshots/{snapshot_id}")
    assert res.status_code == 200
    body = res.json()
    assert body["id"] == snapshot_id
    assert body["shapes"][0]["geometry"]["x"] == 200.0
    assert "Min corner: (200.0,200.0)" in body["shapes"][0]["text"]


async def test_snapshot_ids_text(client, album):
    res = await client.get("/api/v1/snapshots/ids")
    assert res.status_code == 200
    assert res.text == "[]"

    first = album.take_snapshot()
    second = album.take_snapshot()
    res = await client.get("/api/v1/snapshots/ids")
    assert res.text == f"[{first}, {second}]"
    assert res.headers["content-type"].startswith("text/plain")


async def test_print_snapshots_text(client, album):
    album.add_shape("O", "oval")
    album.take_snapshot("After first selfie")
    res = await client.get("/api/v1/snapshots/text")
    assert res.status_code == 200
    assert res.text == album.print_snapshots()
    assert "Description: After first selfie" in res.text


async def test_unknown_snapshot_is_404(client):
    res = await client.get("/api/v1/snapshots/missing")
    assert res.status_code == 404
    error = res.json()["error"]
    assert error["code"] == "UNKNOWN_SNAPSHOT"
    assert error["context"]["snapshot_id"] == "missing"
