# tests/services/test_profiles_api.py
from __future__ import annotations

from starlette.testclient import TestClient

from heroes.services.api.app import create_app
from heroes.services.api.deps import get_catalog

ALL_IDS = [
    "william-carey",
    "hudson-taylor",
    "amy-carmichael",
    "ida-scudder",
    "alexander-duff",
    "pandita-ramabai",
]


def _ids(items) -> list[str]:
    return [x["id"] for x in items]


# ---------------------------- /api/profiles -----------------------------------

def test_list_profiles_defaults(client):
    r = client.get("/api/profiles")
    assert r.status_code == 200, r.text
    body = r.json()
    assert _ids(body["profiles"]) == ALL_IDS
    assert body["pagination"] == {"limit": 20, "offset": 0, "total": 6, "hasMore": False}
    assert body["category"] == "all"


def test_list_profiles_summary_shape(client):
    first = client.get("/api/profiles").json()["profiles"][0]
    assert set(first) == {"id", "name", "displayName", "dates", "image", "summary", "categories"}
    assert first["displayName"] == "William Carey - Father of Modern Missions"
    assert first["dates"] == {"birth": 1761, "death": 1834, "display": "1761-1834"}
    assert first["categories"] == ["missionary", "translator", "educator", "reformer"]


def test_list_profiles_window(client):
    body = client.get("/api/profiles", params={"limit": 2, "offset": 2}).json()
    assert _ids(body["profiles"]) == ["amy-carmichael", "ida-scudder"]
    assert body["pagination"] == {"limit": 2, "offset": 2, "total": 6, "hasMore": True}


def test_list_profiles_junk_params_fall_back_to_defaults(client):
    r = client.get("/api/profiles", params={"limit": "abc", "offset": "xyz"})
    assert r.status_code == 200
    assert r.json()["pagination"] == {"limit": 20, "offset": 0, "total": 6, "hasMore": False}


def test_list_profiles_reads_leading_integer(client):
    body = client.get("/api/profiles", params={"limit": "2abc", "offset": "1.9"}).json()
    assert _ids(body["profiles"]) == ["hudson-taylor", "amy-carmichael"]
    assert body["pagination"]["limit"] == 2
    assert body["pagination"]["offset"] == 1


def test_list_profiles_offset_past_end(client):
    body = client.get("/api/profiles", params={"offset": 100}).json()
    assert body["profiles"] == []
    assert body["pagination"]["total"] == 6
    assert body["pagination"]["hasMore"] is False


def test_list_profiles_by_category(client):
    body = client.get("/api/profiles", params={"category": "educator"}).json()
    assert _ids(body["profiles"]) == ["william-carey", "ida-scudder", "alexander-duff", "pandita-ramabai"]
    assert body["pagination"]["total"] == 4
    assert body["category"] == "educator"


def test_list_profiles_category_all(client):
    body = client.get("/api/profiles", params={"category": "all"}).json()
    assert _ids(body["profiles"]) == ALL_IDS


# ---------------------------- /api/profile/{id} -------------------------------

def test_get_profile_full(client):
    r = client.get("/api/profile/william-carey")
    assert r.status_code == 200, r.text
    p = r.json()
    assert p["id"] == "william-carey"
    assert p["sourceUrl"] == "https://en.wikipedia.org/wiki/William_Carey_(missionary)"
    assert p["lastModified"].startswith("2025-01-27T22:00:00")
    assert p["lang"] == "en"
    assert len(p["biography"]) == 5
    assert p["biography"][0]["title"] == "Early Life and Calling"
    assert [e["year"] for e in p["timeline"]] == sorted(e["year"] for e in p["timeline"])
    assert p["timeline"][0]["type"] == "birth"
    assert p["locations"][0]["type"] == "primary_ministry"
    assert p["locations"][0]["coordinates"] == [22.7488, 88.3426]
    assert p["quiz"][0]["correctIndex"] == 1
    assert p["quiz"][0]["options"][1] == "Shoemaker"
    assert p["images"] == [p["image"]]


def test_get_profile_not_found_lists_ids(client):
    r = client.get("/api/profile/does-not-exist")
    assert r.status_code == 404
    body = r.json()
    assert body["error"] == "Profile not found"
    assert "does-not-exist" in body["message"]
    assert body["available_ids"] == ALL_IDS


def test_get_profile_empty_id_lists_ids(client):
    r = client.get("/api/profile/")
    assert r.status_code == 404
    body = r.json()
    assert body["error"] == "Profile not found"
    assert body["available_ids"] == ALL_IDS


# ---------------------------- /api/search/{query} -----------------------------

def test_search_india(client):
    body = client.get("/api/search/india").json()
    assert body["query"] == "india"
    assert body["total_results"] == 5
    assert body["showing"] == 5
    assert "hudson-taylor" not in _ids(body["results"])


def test_search_limit(client):
    body = client.get("/api/search/india", params={"limit": 2}).json()
    assert body["total_results"] == 5
    assert body["showing"] == 2
    assert _ids(body["results"]) == ["william-carey", "amy-carmichael"]


def test_search_bad_limit_uses_default(client):
    body = client.get("/api/search/a", params={"limit": "lots"}).json()
    assert body["showing"] == min(10, body["total_results"])


def test_search_decodes_path(client):
    body = client.get("/api/search/China%20Inland").json()
    assert body["query"] == "China Inland"
    assert _ids(body["results"]) == ["hudson-taylor"]


def test_search_empty_query_matches_everything(client):
    r = client.get("/api/search/")
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["query"] == ""
    assert body["total_results"] == 6
    assert body["showing"] == 6
    assert _ids(body["results"]) == ALL_IDS


def test_search_empty_query_honours_limit(client):
    body = client.get("/api/search/", params={"limit": 2}).json()
    assert body["total_results"] == 6
    assert _ids(body["results"]) == ["william-carey", "hudson-taylor"]


def test_search_no_hits(client):
    body = client.get("/api/search/zzzzzz").json()
    assert body == {"query": "zzzzzz", "results": [], "total_results": 0, "showing": 0}


# ---------------------------- health / errors / CORS --------------------------

def test_health(client):
    body = client.get("/health").json()
    assert body["status"] == "healthy"
    assert body["profiles_count"] == 6
    assert body["version"] == "2.0.0"
    assert "/api/profiles" in body["endpoints"]


def test_unknown_endpoint(client):
    r = client.get("/api/nothing-here")
    assert r.status_code == 404
    body = r.json()
    assert body["error"] == "Endpoint not found"
    assert "/api/nothing-here" in body["message"]
    assert "/api/profiles" in body["available_endpoints"]
    assert "/api/profile/{profile_id}" in body["available_endpoints"]
    assert "/api/search/{query}" in body["available_endpoints"]
    assert "/health" in body["available_endpoints"]
    assert "/api/openapi.json" not in body["available_endpoints"]


def test_cors_preflight(client):
    r = client.options(
        "/api/profiles",
        headers={"Origin": "https://example.org", "Access-Control-Request-Method": "GET"},
    )
    assert r.status_code == 200
    assert r.headers["access-control-allow-origin"] == "*"


def test_unhandled_error_becomes_500_payload():
    app = create_app()

    def _broken():
        raise RuntimeError("catalog unavailable")

    app.dependency_overrides[get_catalog] = _broken
    with TestClient(app, raise_server_exceptions=False) as c:
        r = c.get("/api/profiles")
    assert r.status_code == 500
    body = r.json()
    assert body["error"] == "Internal server error"
    assert body["message"] == "catalog unavailable"
    assert "timestamp" in body


def test_store_routes_can_be_disabled(monkeypatch, catalog):
    from heroes.common import settings as s

    monkeypatch.setenv("FEATURES__STORE_ENABLED", "false")
    s.get_settings.cache_clear()
    try:
        app = create_app()
        app.dependency_overrides[get_catalog] = lambda: catalog
        with TestClient(app) as c:
            assert c.get("/stats").status_code == 404
            assert c.get("/api/profiles").status_code == 200
    finally:
        s.get_settings.cache_clear()


def test_unhandled_error_keeps_cors_header():
    app = create_app()

    def _broken():
        raise RuntimeError("catalog unavailable")

    app.dependency_overrides[get_catalog] = _broken
    with TestClient(app, raise_server_exceptions=False) as c:
        r = c.get("/api/profiles", headers={"Origin": "https://example.org"})
    assert r.status_code == 500
    assert r.headers["access-control-allow-origin"] == "*"


def test_prefix_and_limits_follow_settings(monkeypatch, catalog):
    from heroes.common import settings as s

    monkeypatch.setenv("API__PREFIX", "/v2")
    monkeypatch.setenv("CATALOG__DEFAULT_LIMIT", "4")
    monkeypatch.setenv("CATALOG__SEARCH_LIMIT", "3")
    s.get_settings.cache_clear()
    try:
        app = create_app()
        app.dependency_overrides[get_catalog] = lambda: catalog
        with TestClient(app) as c:
            assert c.get("/api/profiles").status_code == 404
            listing = c.get("/v2/profiles").json()
            assert listing["pagination"]["limit"] == 4
            assert len(listing["profiles"]) == 4
            assert c.get("/v2/search/india").json()["showing"] == 3
    finally:
        s.get_settings.cache_clear()


def test_main_serves_on_configured_host_and_port(monkeypatch):
    from heroes.common import settings as s
    from heroes.services.api import app as app_module

    calls = {}
    monkeypatch.setattr(app_module.uvicorn, "run", lambda target, **kw: calls.update(target=target, **kw))
    monkeypatch.setenv("API__HOST", "127.0.0.1")
    monkeypatch.setenv("API__PORT", "9001")
    s.get_settings.cache_clear()
    try:
        app_module.main()
    finally:
        s.get_settings.cache_clear()
    assert calls["target"] == "heroes.services.api.app:app"
    assert calls["host"] == "127.0.0.1"
    assert calls["port"] == 9001
