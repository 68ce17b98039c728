"""Integration tests for the multi-city HTTP surface."""

from typing import Any

import pytest
from fastapi.testclient import TestClient

from backend.multicity.main import app


@pytest.fixture
def client() -> TestClient:
    """Create test client."""
    return TestClient(app)


@pytest.fixture
def cities(client: TestClient) -> dict[str, dict[str, Any]]:
    """Reference destinations keyed by id, as served by the API."""
    response = client.get("/multi-city/destinations")
    assert response.status_code == 200
    return {city["id"]: city for city in response.json()}


def _generate(client: TestClient, cities: dict[str, dict[str, Any]], /, **overrides: Any) -> dict[str, Any]:
    body: dict[str, Any] = {
        "cities": [cities["paris"], cities["rome"], cities["barcelona"]],
        "start_date": "2025-06-01",
        "end_date": "2025-06-10",
        "start_city": cities["paris"],
        "return_to_start": True,
    }
    body.update(overrides)
    response = client.post("/multi-city/trips", json=body)
    assert response.status_code == 200
    data: dict[str, Any] = response.json()
    return data


class TestHealth:
    """Liveness and catalog checks."""

    def test_health(self, client: TestClient) -> None:
        """Test /health always reports ok."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_healthz_reports_catalog(self, client: TestClient) -> None:
        """Test /healthz includes the destination count."""
        response = client.get("/healthz")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert "destinations" in data["components"]["catalog"]


class TestTrips:
    """Generate and mutate trips over HTTP."""

    def test_generate_round_trip(
        self, client: TestClient, cities: dict[str, dict[str, Any]]
    ) -> None:
        """Test a successful generation envelope."""
        data = _generate(client, cities)

        assert data["success"] is True
        trip = data["trip"]
        assert [s["city"]["id"] for s in trip["stops"]] == ["paris", "barcelona", "rome", "paris"]
        assert len(trip["transitions"]) == 3
        assert trip["transitions"][0]["train_number"].startswith("RE")
        assert trip["stats"]["total_nights"] == 6

    def test_generate_validation_failure_is_200(
        self, client: TestClient, cities: dict[str, dict[str, Any]]
    ) -> None:
        """Test that planning errors come back in the envelope."""
        data = _generate(client, cities, cities=[cities["paris"]])

        assert data["success"] is False
        assert data["trip"] is None
        assert data["error"] == "At least 2 cities are required"

    def test_malformed_request_is_422(self, client: TestClient) -> None:
        """Test request-shape errors are rejected by validation."""
        response = client.post("/multi-city/trips", json={"cities": []})

        assert response.status_code == 422

    def test_remove_city_round_trips_trip_json(
        self, client: TestClient, cities: dict[str, dict[str, Any]]
    ) -> None:
        """Test that a returned trip can be posted back for mutation."""
        trip = _generate(client, cities)["trip"]

        response = client.post("/multi-city/trips/remove-city", json={"trip": trip, "stop_index": 1})

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True, data["error"]
        assert [s["city"]["id"] for s in data["trip"]["stops"]] == ["paris", "rome", "paris"]
        assert data["trip"]["id"] == trip["id"]

    def test_add_city(self, client: TestClient, cities: dict[str, dict[str, Any]]) -> None:
        """Test inserting London after the origin."""
        trip = _generate(client, cities)["trip"]

        response = client.post(
            "/multi-city/trips/add-city",
            json={"trip": trip, "city": cities["london"], "after_stop_index": 0, "nights": 2},
        )

        data = response.json()
        assert data["success"] is True, data["error"]
        assert data["trip"]["stops"][1]["city"]["id"] == "london"
        assert "london" in data["trip"]["city_itineraries"]

    def test_reorder(self, client: TestClient, cities: dict[str, dict[str, Any]]) -> None:
        """Test moving a stop over HTTP."""
        trip = _generate(client, cities)["trip"]

        response = client.post(
            "/multi-city/trips/reorder", json={"trip": trip, "from_index": 2, "to_index": 1}
        )

        data = response.json()
        assert data["success"] is True, data["error"]
        assert [s["city"]["id"] for s in data["trip"]["stops"]] == ["paris", "rome", "barcelona", "paris"]


class TestTransportSearch:
    """Standalone transport search."""

    def test_search_by_name(self, client: TestClient) -> None:
        """Test a search with bare city names."""
        response = client.post(
            "/multi-city/transport/search",
            json={
                "from_city": "Paris",
                "to_city": "Rome",
                "departure_date": "2025-06-03",
                "travelers": {"adults": 2},
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert [o["transport_mode"] for o in data["options"]] == ["train", "flight"]
        assert data["recommended"]["transport_mode"] == "train"

    def test_search_unknown_city(self, client: TestClient) -> None:
        """Test an unknown city gives an empty result."""
        response = client.post(
            "/multi-city/transport/search",
            json={
                "from_city": "Paris",
                "to_city": "Atlantis",
                "departure_date": "2025-06-03",
                "travelers": {"adults": 1},
            },
        )

        assert response.status_code == 200
        assert response.json()["options"] == []


class TestMetrics:
    """Prometheus exposition."""

    def test_operations_are_counted(
        self, client: TestClient, cities: dict[str, dict[str, Any]]
    ) -> None:
        """Test that a generation shows up in /metrics."""
        _generate(client, cities)

        response = client.get("/metrics")

        assert response.status_code == 200
        assert "trip_operations_total" in response.text
        assert 'operation="generate"' in response.text
