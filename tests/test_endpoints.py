"""Tests for the HTTP API."""

import pytest

from random_redirect.core.exceptions import DatabaseError
from random_redirect.services.settings_store import SettingsStore


async def save_list(client, keyword, urls, weights=(), enabled=True, original_keyword=None):
    body = {
        "lists": [{
            "keyword": keyword,
            "original_keyword": original_keyword or keyword,
            "urls": list(urls),
            "weights": list(weights),
            "enabled": enabled,
        }]
    }
    response = await client.post("/admin/lists", json=body)
    assert response.status_code == 200
    return response.json()


@pytest.mark.asyncio
async def test_health(client):
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


@pytest.mark.asyncio
async def test_create_list_and_redirect(client):
    response = await client.post("/admin/lists", json={
        "new_list": {"keyword": "promo", "urls": ["https://a.com", "https://b.com"], "weights": ["50", "50"]},
    })
    assert response.status_code == 200
    assert response.json() == {
        "saved": ["promo"],
        "renamed": {},
        "created": 1,
        "updated": 0,
        "errors": [],
    }

    for _ in range(10):
        redirect = await client.get("/promo")
        assert redirect.status_code == 307
        assert redirect.headers["location"] in {"https://a.com", "https://b.com"}


@pytest.mark.asyncio
async def test_nested_keyword_redirect(client):
    await save_list(client, "promo/summer", ["https://summer.example.com"])

    response = await client.get("/promo/summer")
    assert response.status_code == 307
    assert response.headers["location"] == "https://summer.example.com"


@pytest.mark.asyncio
async def test_submission_reports_errors(client):
    response = await client.post("/admin/lists", json={
        "lists": [
            {"keyword": "bad keyword!", "original_keyword": "bad", "urls": ["https://a.com"]},
            {"keyword": "empty", "original_keyword": "empty", "urls": ["not-a-url"]},
        ],
    })
    assert response.status_code == 200
    body = response.json()
    assert body["saved"] == []
    assert len(body["errors"]) == 2


@pytest.mark.asyncio
async def test_list_and_get_lists(client):
    await save_list(client, "zeta", ["https://z.com"], weights=["abc"])
    await save_list(client, "alpha", ["https://a.com", "https://b.com"], weights=[70, 30])

    response = await client.get("/admin/lists")
    assert response.status_code == 200
    assert [item["keyword"] for item in response.json()] == ["alpha", "zeta"]

    response = await client.get("/admin/lists/alpha")
    assert response.status_code == 200
    assert response.json() == {
        "keyword": "alpha",
        "enabled": True,
        "entries": [
            {"url": "https://a.com", "weight": 70.0},
            {"url": "https://b.com", "weight": 30.0},
        ],
    }

    assert (await client.get("/admin/lists/missing")).status_code == 404


@pytest.mark.asyncio
async def test_disabled_list_falls_back_to_shortlink(client):
    await save_list(client, "promo", ["https://first.com", "https://second.com"], weights=[0, 100])
    await save_list(client, "promo", ["https://first.com", "https://second.com"], weights=[0, 100], enabled=False)

    response = await client.get("/promo")
    assert response.status_code == 302
    assert response.headers["location"] == "https://first.com"


@pytest.mark.asyncio
async def test_unknown_keyword(client):
    response = await client.get("/nothing-here")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_delete_list(client):
    await save_list(client, "promo", ["https://a.com"])

    response = await client.delete("/admin/lists/promo")
    assert response.status_code == 200
    assert response.json() == {"keyword": "promo", "deleted": True}

    assert (await client.delete("/admin/lists/promo")).status_code == 404
    assert (await client.delete("/admin/lists/bad!kw")).status_code == 400

    # Shortlink survives the deleted list
    response = await client.get("/promo")
    assert response.status_code == 302
    assert response.headers["location"] == "https://a.com"


@pytest.mark.asyncio
async def test_database_failure_returns_500(client, monkeypatch):
    async def failing_put(self, keyword, redirect_list):
        raise DatabaseError(f"Failed to save redirect list '{keyword}': disk I/O error")

    monkeypatch.setattr(SettingsStore, "put", failing_put)

    response = await client.post("/admin/lists", json={
        "new_list": {"keyword": "promo", "urls": ["https://a.com"]},
    })
    assert response.status_code == 500
    assert "disk I/O error" in response.json()["detail"]
