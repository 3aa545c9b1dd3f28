"""Contents Routes — end-to-end CRUD against an in-memory SQLite store.

Invariants:
    - Create returns 201 with a fresh integer id
    - Replace clears an omitted body; partial update leaves omitted keys alone
    - Deleted ids answer 404 on read and on a second delete
    - List is ordered by id, descending
"""

import pytest


async def _create(client, **payload):
    res = await client.post("/contents", json=payload)
    assert res.status_code == 201
    return res.json()


# ─── Create ─────────────────────────────────────────────────────

async def test_create_returns_201_with_assigned_id(client):
    res = await client.post("/contents", json={"title": "A", "body": "B"})
    assert res.status_code == 201
    data = res.json()
    assert isinstance(data["id"], int) and data["id"] > 0
    assert data["title"] == "A"
    assert data["body"] == "B"


async def test_create_assigns_new_ids(client):
    first = await _create(client, title="one")
    second = await _create(client, title="two")
    assert first["id"] != second["id"]


async def test_create_without_body_stores_null(client):
    data = await _create(client, title="only title")
    assert data["body"] is None


@pytest.mark.parametrize("payload", [{}, {"title": ""}, {"title": None}, {"body": "x"}])
async def test_create_requires_title(client, payload):
    res = await client.post("/contents", json=payload)
    assert res.status_code == 400
    assert res.json() == {"message": "title is required"}

    listing = await client.get("/contents")
    assert listing.json() == []


async def test_create_with_empty_body_requires_title(client):
    res = await client.post("/contents")
    assert res.status_code == 400
    assert res.json() == {"message": "title is required"}


async def test_create_accepts_urlencoded_form(client):
    res = await client.post("/contents", data={"title": "Form", "body": "posted"})
    assert res.status_code == 201
    assert res.json()["title"] == "Form"
    assert res.json()["body"] == "posted"


async def test_create_ignores_unknown_and_id_fields(client):
    res = await client.post(
        "/contents", json={"id": 999, "title": "A", "extra": True},
    )
    assert res.status_code == 201
    assert res.json()["id"] != 999
    assert "extra" not in res.json()


# ─── Read ───────────────────────────────────────────────────────

async def test_get_returns_created_record(client):
    created = await _create(client, title="A", body="B")
    res = await client.get(f"/contents/{created['id']}")
    assert res.status_code == 200
    assert res.json() == {"id": created["id"], "title": "A", "body": "B"}


async def test_get_missing_returns_404(client):
    res = await client.get("/contents/424242")
    assert res.status_code == 404
    assert res.json() == {"message": "not found"}


async def test_get_seeded_record(client, seed_content):
    res = await client.get(f"/contents/{seed_content.id}")
    assert res.json()["title"] == "Seeded"


async def test_get_accepts_whole_number_notation(client):
    created = await _create(client, title="A")
    res = await client.get(f"/contents/{created['id']}.0")
    assert res.status_code == 200
    assert res.json()["id"] == created["id"]


async def test_list_orders_by_id_descending(client):
    ids = [(await _create(client, title=f"t{i}"))["id"] for i in range(4)]
    res = await client.get("/contents")
    assert res.status_code == 200
    listed = [item["id"] for item in res.json()]
    assert listed == sorted(ids, reverse=True)


async def test_list_empty(client):
    res = await client.get("/contents")
    assert res.status_code == 200
    assert res.json() == []


# ─── Replace ────────────────────────────────────────────────────

async def test_replace_overwrites_both_fields(client):
    created = await _create(client, title="A", body="B")
    res = await client.put(
        f"/contents/{created['id']}", json={"title": "A2", "body": "B2"},
    )
    assert res.status_code == 200
    assert res.json() == {"id": created["id"], "title": "A2", "body": "B2"}


async def test_replace_without_body_clears_it(client):
    created = await _create(client, title="A", body="B")
    res = await client.put(f"/contents/{created['id']}", json={"title": "A2"})
    assert res.status_code == 200
    assert res.json()["body"] is None


async def test_replace_without_title_leaves_record_unchanged(client):
    created = await _create(client, title="A", body="B")
    res = await client.put(f"/contents/{created['id']}", json={"body": "Z"})
    assert res.status_code == 400
    assert res.json() == {"message": "title is required"}

    current = await client.get(f"/contents/{created['id']}")
    assert current.json() == {"id": created["id"], "title": "A", "body": "B"}


async def test_replace_missing_returns_404(client):
    res = await client.put("/contents/9999", json={"title": "A"})
    assert res.status_code == 404
    assert res.json() == {"message": "not found"}


# ─── Partial update ─────────────────────────────────────────────

async def test_patch_updates_only_supplied_fields(client):
    created = await _create(client, title="A", body="B")
    res = await client.patch(f"/contents/{created['id']}", json={"body": "C"})
    assert res.status_code == 200

    current = await client.get(f"/contents/{created['id']}")
    assert current.json() == {"id": created["id"], "title": "A", "body": "C"}


async def test_patch_title_keeps_body(client):
    created = await _create(client, title="A", body="B")
    res = await client.patch(f"/contents/{created['id']}", json={"title": "A2"})
    assert res.json() == {"id": created["id"], "title": "A2", "body": "B"}


async def test_patch_explicit_null_clears_body(client):
    created = await _create(client, title="A", body="B")
    res = await client.patch(f"/contents/{created['id']}", json={"body": None})
    assert res.status_code == 200
    assert res.json()["body"] is None


async def test_patch_empty_payload_is_noop(client):
    created = await _create(client, title="A", body="B")
    res = await client.patch(f"/contents/{created['id']}", json={})
    assert res.status_code == 200
    assert res.json() == created


async def test_patch_rejects_blank_title(client):
    created = await _create(client, title="A", body="B")
    res = await client.patch(f"/contents/{created['id']}", json={"title": ""})
    assert res.status_code == 400
    assert res.json() == {"message": "title is required"}


async def test_patch_missing_returns_404(client):
    res = await client.patch("/contents/9999", json={"body": "C"})
    assert res.status_code == 404
    assert res.json() == {"message": "not found"}


# ─── Delete ─────────────────────────────────────────────────────

async def test_delete_returns_204_and_removes_record(client):
    created = await _create(client, title="A")
    res = await client.delete(f"/contents/{created['id']}")
    assert res.status_code == 204
    assert res.content == b""

    after = await client.get(f"/contents/{created['id']}")
    assert after.status_code == 404


async def test_second_delete_returns_404(client):
    created = await _create(client, title="A")
    await client.delete(f"/contents/{created['id']}")
    res = await client.delete(f"/contents/{created['id']}")
    assert res.status_code == 404
    assert res.json() == {"message": "not found"}


async def test_ids_are_not_reused_after_delete(client):
    first = await _create(client, title="A")
    await client.delete(f"/contents/{first['id']}")
    second = await _create(client, title="B")
    assert second["id"] > first["id"]


# ─── Invalid ids ────────────────────────────────────────────────

@pytest.mark.parametrize(
    "raw_id", ["abc", "1.5", "%20", "1e400", "0x10", "%D9%A1%D9%A2"],
)
@pytest.mark.parametrize("method", ["get", "put", "patch", "delete"])
async def test_invalid_id_returns_400_without_store_call(
    client, spy_store, method, raw_id,
):
    kwargs = {"json": {"title": "A"}} if method in ("put", "patch") else {}
    res = await getattr(client, method)(f"/contents/{raw_id}", **kwargs)
    assert res.status_code == 400
    assert res.json() == {"message": "invalid id"}
    assert spy_store.calls == []


async def test_invalid_id_checked_before_title(client, spy_store):
    res = await client.put("/contents/abc", json={})
    assert res.json() == {"message": "invalid id"}
