# tests/services/test_missionaries_api.py
from __future__ import annotations

import pytest

from heroes.common.settings import StorageConfig
from heroes.database.seed import seed_from_catalog

pytestmark = pytest.mark.db


@pytest.fixture()
def seeded(api_session, catalog):
    seed_from_catalog(api_session, catalog, StorageConfig())
    return api_session


def test_list_missionaries(api_client, seeded):
    r = api_client.get("/missionaries")
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["message"] == "Heroes of Faith Missionaries"
    assert body["count"] == 6
    ids = [m["id"] for m in body["missionaries"]]
    assert ids == [
        "william-carey",
        "alexander-duff",
        "hudson-taylor",
        "pandita-ramabai",
        "amy-carmichael",
        "ida-scudder",
    ]
    carey = body["missionaries"][0]
    assert carey["birth_year"] == 1761
    assert carey["century"] == 18
    assert carey["biography_sections_count"] == 5
    assert carey["timeline_events_count"] == 8
    assert len(carey["images"]) == 2
    assert all(isinstance(u, str) for u in carey["images"])


def test_list_missionaries_filters(api_client, seeded):
    body = api_client.get("/missionaries", params={"century": 18}).json()
    assert [m["id"] for m in body["missionaries"]] == ["william-carey"]

    body = api_client.get("/missionaries", params={"search": "india"}).json()
    assert body["count"] == 5

    body = api_client.get("/missionaries", params={"century": "nineteenth"}).json()
    assert body["count"] == 6


def test_get_missionary_detail(api_client, seeded):
    r = api_client.get("/missionaries/william-carey")
    assert r.status_code == 200, r.text
    m = r.json()
    assert m["name"] == "William Carey"
    assert [s["section_order"] for s in m["biography"]] == [0, 1, 2, 3, 4]
    assert [e["year"] for e in m["timeline"]] == [1761, 1792, 1793, 1800, 1801, 1818, 1821, 1834]
    assert m["images"][0]["is_primary"] is True
    assert m["images"][0]["image_type"] == "portrait"
    assert {i["image_type"] for i in m["images"]} == {"portrait", "ai_headshot"}
    assert m["quiz"][0]["correctIndex"] == 1
    assert len(m["locations"]) == 2


def test_get_missionary_not_found(api_client, seeded):
    r = api_client.get("/missionaries/nobody")
    assert r.status_code == 404
    assert r.json() == {"error": "Missionary not found"}


def test_stats(api_client, seeded):
    body = api_client.get("/stats").json()
    assert body["message"] == "Heroes of Faith Database Statistics"
    assert body["statistics"] == {
        "missionaries": 6,
        "biography_sections": 30,
        "timeline_events": 48,
        "images": 12,
    }


def test_headshots_fall_back_to_configured_list(api_client):
    body = api_client.get("/ai-headshots").json()
    assert body["message"] == "AI Enhanced Missionary Images"
    assert body["available_images"][0] == "alexander-duff-ai.jpg"
    assert len(body["available_images"]) == 6
    assert body["endpoints"][0] == "/ai-headshots/alexander-duff-ai.jpg"


def test_headshots_come_from_store_once_seeded(api_client, api_session, catalog):
    storage = StorageConfig(headshots={"ida-scudder": "ida.webp", "william-carey": "carey.webp"})
    seed_from_catalog(api_session, catalog, storage)
    body = api_client.get("/ai-headshots").json()
    assert body["available_images"] == ["ida.webp", "carey.webp"]
    assert body["endpoints"] == ["/ai-headshots/ida.webp", "/ai-headshots/carey.webp"]


def test_headshot_redirects_to_storage(api_client):
    r = api_client.get("/ai-headshots/william-carey-ai.jpg", follow_redirects=False)
    assert r.status_code == 302
    assert r.headers["location"] == (
        "https://pub-3f7f058fbc1f49f183815380bb719947.r2.dev/william-carey-ai.jpg"
    )


def test_api_index(api_client):
    body = api_client.get("/").json()
    assert body["message"] == "Heroes of Faith Missionaries API"
    assert body["database"] == "PostgreSQL"
    assert "/missionaries" in body["endpoints"]
    assert "century" in body["filters"]
