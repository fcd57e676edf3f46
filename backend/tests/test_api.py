import pytest
from fastapi.testclient import TestClient

from src.api.app import app


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def columns_payload():
    return [
        {"name": "RA", "ucd": "pos.eq.ra"},
        {"name": "Dec", "ucd": "pos.eq.dec"},
        {"name": "region", "ucd": "pos.outline;obs.field"},
        {"ID": "url", "ucd": "meta.ref.url"},
        {"name": "obs_id", "ucd": "meta.id"},
    ]


def test_health(client):
    r = client.get("/api/v1/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_list_fields(client):
    body = client.get("/api/v1/obscore/fields").json()
    assert len(body["fields"]) == 30
    assert body["critical"] == ["s_ra", "s_dec", "s_region", "access_url"]


def test_get_field(client):
    r = client.get("/api/v1/obscore/fields/t_exptime")
    assert r.status_code == 200
    assert r.json() == {
        "name": "t_exptime",
        "ucd": "time.duration;obs.exposure",
        "utype": "Char.TimeAxis.Coverage.Support.Extent",
        "unit": "s",
    }
    assert client.get("/api/v1/obscore/fields/nope").status_code == 404


def test_map(client, columns_payload):
    r = client.post("/api/v1/obscore/map", json={"columns": columns_payload})
    assert r.status_code == 200
    fields = r.json()["fields"]
    assert fields["s_ra"] == {"name": "RA", "idx": 0}
    assert fields["access_url"] == {"name": "url", "idx": 3}
    assert fields["obs_id"] == {"name": "obs_id", "idx": 4}


def test_map_with_hint(client, columns_payload):
    r = client.post("/api/v1/obscore/map", json={"columns": columns_payload, "hints": {"s_ra": 4}})
    assert r.status_code == 200
    assert r.json()["fields"]["s_ra"] == {"name": "obs_id", "idx": 4}


def test_map_rejects_hints_for_other_fields(client, columns_payload):
    r = client.post("/api/v1/obscore/map", json={"columns": columns_payload, "hints": {"t_min": 0}})
    assert r.status_code == 400


def test_map_missing_critical_field(client, columns_payload):
    cols = [c for c in columns_payload if c.get("name") != "region"]
    r = client.post("/api/v1/obscore/map", json={"columns": cols})
    assert r.status_code == 422
    assert r.json()["field"] == "s_region"


def test_resolve_by_catalog_field(client, columns_payload):
    r = client.post("/api/v1/obscore/resolve", json={"columns": columns_payload, "field": "s_dec"})
    assert r.status_code == 200
    assert r.json() == {"name": "Dec", "idx": 1}


def test_resolve_by_hint_and_ucd(client, columns_payload):
    r = client.post("/api/v1/obscore/resolve", json={"columns": columns_payload, "hint": "url"})
    assert r.json() == {"name": "url", "idx": 3}
    r = client.post("/api/v1/obscore/resolve", json={"columns": columns_payload, "ucd": "meta.id"})
    assert r.json() == {"name": "obs_id", "idx": 4}


def test_resolve_not_found(client, columns_payload):
    r = client.post("/api/v1/obscore/resolve", json={"columns": columns_payload, "hint": "flux", "ucd": "phot.flux"})
    assert r.status_code == 422
    assert r.json() == {"detail": "Mandatory field flux not found", "field": "flux"}


def test_resolve_needs_a_target(client, columns_payload):
    r = client.post("/api/v1/obscore/resolve", json={"columns": columns_payload})
    assert r.status_code == 422


def test_bool_hint_rejected(client):
    cols = [{"name": "RA", "ucd": "pos.eq.ra"}, {"name": "Dec", "ucd": "pos.eq.dec"}]
    r = client.post("/api/v1/obscore/resolve", json={"columns": cols, "hint": True, "ucd": "pos.eq.ra"})
    assert r.status_code == 422


def test_bool_map_hint_rejected(client, columns_payload):
    r = client.post("/api/v1/obscore/map", json={"columns": columns_payload, "hints": {"s_ra": True}})
    assert r.status_code == 422
