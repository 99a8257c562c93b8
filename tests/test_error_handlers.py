"""Error handlers: malformed bodies give 400, bad path ids 404, crashes a bare 500."""

import pytest
from httpx import ASGITransport, AsyncClient

from record_store_api.app.main import create_app

SEED = [{"id": 1, "author": "Jane Doe"}, {"id": 2, "author": "Patrick Star"}]


@pytest.mark.parametrize(
    "payload",
    [
        {"author": "no id"},
        {"id": 4},
        {"id": -1, "author": "negative"},
        {"id": 2**32, "author": "too large"},
        {"id": "four", "author": "not a number"},
        {"id": "3", "author": "numeric string"},
        {"id": 3.0, "author": "float"},
        {"id": True, "author": "boolean"},
        {"id": 3, "author": 5},
    ],
)
async def test_invalid_create_payload_returns_400(client, payload):
    res = await client.post("/records", json=payload)
    assert res.status_code == 400
    body = res.json()
    assert body["err"] == "invalid request"
    assert body["details"]
    assert (await client.get("/records")).json() == SEED


async def test_malformed_json_returns_400(client):
    res = await client.post(
        "/records",
        content=b'{"id": 1, "author": ',
        headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json()["err"] == "invalid request"


@pytest.mark.parametrize("path", ["/records/abc", "/records/-1", f"/records/{2**32}"])
async def test_unparseable_path_id_returns_404(client, path):
    res = await client.get(path)
    assert res.status_code == 404
    fields = [d["field"] for d in res.json()["details"]]
    assert "path.record_id" in fields


async def test_unparseable_path_id_on_delete_changes_nothing(client):
    res = await client.delete("/records/1.5")
    assert res.status_code == 404
    assert (await client.get("/records")).json() == SEED


async def test_strict_id_is_not_coerced_on_update(client):
    res = await client.put("/records/1", json={"id": True, "author": "Jane"})
    assert res.status_code == 400
    assert (await client.get("/records/1")).json() == SEED[0]


async def test_invalid_update_body_leaves_record_untouched(client):
    res = await client.put("/records/1", json={"id": 1})
    assert res.status_code == 400
    assert (await client.get("/records/1")).json() == SEED[0]


async def test_unexpected_exception_returns_500_without_details():
    app = create_app()

    @app.get("/boom")
    async def boom():
        raise RuntimeError("secret internals")

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        res = await ac.get("/boom")

    assert res.status_code == 500
    assert res.json() == {"err": "internal error"}
    assert "secret" not in res.text
