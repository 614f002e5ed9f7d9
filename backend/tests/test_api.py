import pytest
from fastapi.testclient import TestClient

from citysafety.main import app
from citysafety.services.catalog import SEED_CATALOG
from citysafety.services.utils import haversine_km, round_half_up


@pytest.fixture(scope="module")
def client():
    with TestClient(app) as c:
        yield c


def test_health_check(client):
    """Test health check endpoint"""
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["region_count"] >= len(SEED_CATALOG)


def test_heatmap_lists_seeded_regions(client):
    response = client.get("/api/v1/heatmap")
    assert response.status_code == 200
    body = response.json()
    assert "timestamp" in body
    names = {r["name"] for r in body["regions"]}
    assert {entry.name for entry in SEED_CATALOG} <= names
    for region in body["regions"]:
        assert 0 <= region["safety_score"] <= 100
        assert region["risk_level"] in {"Safe", "Moderate", "Unsafe"}


def test_get_region_by_id(client):
    region = client.get("/api/v1/regions").json()[0]
    response = client.get(f"/api/v1/regions/{region['id']}")
    assert response.status_code == 200
    assert response.json()["name"] == region["name"]


def test_get_unknown_region_returns_404(client):
    response = client.get("/api/v1/regions/00000000-0000-0000-0000-000000000000")
    assert response.status_code == 404


def test_create_and_update_region(client):
    payload = {
        "name": "Test Harbour",
        "latitude": 18.95,
        "longitude": 72.84,
        "safety_score": 55,
        "lighting": 40,
        "crowd_density": 20,
    }
    created = client.post("/api/v1/regions", json=payload)
    assert created.status_code == 201
    region = created.json()
    assert region["risk_level"] == "Moderate"

    updated = client.patch(f"/api/v1/regions/{region['id']}", json={"safety_score": 90})
    assert updated.status_code == 200
    assert updated.json()["safety_score"] == 90
    assert updated.json()["name"] == "Test Harbour"


def test_update_unknown_region_returns_404(client):
    response = client.patch(
        "/api/v1/regions/00000000-0000-0000-0000-000000000000", json={"safety_score": 10}
    )
    assert response.status_code == 404


def test_create_region_rejects_out_of_range_score(client):
    payload = {
        "name": "Bad", "latitude": 19.0, "longitude": 72.8,
        "safety_score": 101, "lighting": 50, "crowd_density": 10,
    }
    assert client.post("/api/v1/regions", json=payload).status_code == 422


def test_alerts_are_newest_first(client):
    client.post("/api/v1/alerts", json={"region_id": "r1", "severity": "info", "message": "first"})
    client.post("/api/v1/alerts", json={"region_id": "r1", "severity": "critical", "message": "second"})

    messages = [a["message"] for a in client.get("/api/v1/alerts").json()]
    assert messages.index("second") < messages.index("first")


def test_create_alert_rejects_unknown_severity(client):
    response = client.post(
        "/api/v1/alerts", json={"region_id": "r1", "severity": "panic", "message": "x"}
    )
    assert response.status_code == 422


def test_incident_report_raises_warning_alert(client):
    response = client.post(
        "/api/v1/user-reports",
        json={"location": "Gateway Plaza", "category": "incident", "description": "Broken streetlight and a fight"},
    )
    assert response.status_code == 201
    report = response.json()
    assert report["latitude"] == pytest.approx(19.0760)

    alerts = client.get("/api/v1/alerts").json()
    matching = [a for a in alerts if "Gateway Plaza" in a["message"]]
    assert len(matching) == 1
    assert matching[0]["severity"] == "warning"
    assert matching[0]["region_id"] == "user-report"

    fetched = client.get(f"/api/v1/user-reports/{report['id']}")
    assert fetched.status_code == 200


def test_report_missing_fields_returns_400(client):
    response = client.post("/api/v1/user-reports", json={"location": "Worli", "category": "other"})
    assert response.status_code == 400


def test_plan_route_between_catalog_regions(client):
    response = client.post("/api/v1/routing/plan", json={"source": "Colaba", "destination": "Fort"})
    assert response.status_code == 200
    route = response.json()

    colaba = next(e for e in SEED_CATALOG if e.name == "Colaba")
    fort = next(e for e in SEED_CATALOG if e.name == "Fort")
    expected = haversine_km(colaba.lat, colaba.lng, fort.lat, fort.lng)

    assert route["distance"] == pytest.approx(expected, abs=0.01)
    assert route["estimated_time"] == int(round_half_up(expected / 30 * 60))
    assert len(route["waypoints"]) == 6
    assert route["waypoints"][0] == [colaba.lat, colaba.lng]
    assert route["waypoints"][-1] == [fort.lat, fort.lng]
    assert 0 <= route["average_safety_score"] <= 100

    stored = client.get(f"/api/v1/routing/routes/{route['id']}")
    assert stored.status_code == 200


def test_plan_route_rejects_empty_source(client):
    response = client.post("/api/v1/routing/plan", json={"source": "", "destination": "Bandra West"})
    assert response.status_code == 400


def test_unknown_route_returns_404(client):
    assert client.get("/api/v1/routing/routes/00000000-0000-0000-0000-000000000000").status_code == 404


def test_realtime_sends_initial_snapshot(client):
    with client.websocket_connect("/api/v1/realtime/safety-updates") as websocket:
        message = websocket.receive_json()
        assert message["type"] == "regions_update"
        assert len(message["data"]["regions"]) >= len(SEED_CATALOG)
