"""Integration tests for the REST API."""

import pytest
from fastapi.testclient import TestClient

from shadesails.web import create_app

SQUARE_MM = {"AB": 4000, "BC": 4000, "CD": 4000, "DA": 4000, "AC": 5657, "BD": 5657}

pytestmark = pytest.mark.api


@pytest.fixture
def client() -> TestClient:
    """Create a test client for the API."""
    return TestClient(create_app())


def sail_config(**sail) -> dict:
    return {"schema_version": "1.0", "sail": sail}


class TestHealth:
    """Tests for the health endpoint."""

    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


class TestCalculateEndpoint:
    """Tests for POST /api/v1/calculate."""

    def test_square(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/calculate", json={"corners": 4, "measurements": SQUARE_MM}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["calculation"]["total_price"] == 2515
        assert data["calculation"]["formatted_total"] == "NZ$2515.00"
        assert data["can_submit"] is True

    def test_currency(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/calculate",
            json={
                "corners": 4,
                "measurements": SQUARE_MM,
                "currency": "USD",
            },
        )

        assert response.json()["calculation"]["total_price"] == 1678

    def test_typo_suggestion_reported(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/calculate",
            json={"corners": 3, "measurements": {"AB": 1500, "BC": 4000, "CA": 5000}},
        )

        data = response.json()
        assert data["typo_suggestions"] == {"AB": pytest.approx(15000)}
        assert data["can_submit"] is False

    def test_dismissed_suggestion(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/calculate",
            json={
                "corners": 3,
                "measurements": {"AB": 1500, "BC": 4000, "CA": 5000},
                "dismissed_suggestions": {"AB": 1500},
            },
        )

        assert response.json()["typo_suggestions"] == {}

    def test_incomplete_sail(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/calculate", json={"corners": 3, "measurements": {"AB": 3000}}
        )

        data = response.json()
        assert data["calculation"]["total_price"] == 0
        assert data["measurement_errors"]["BC"] == "Measurement required"

    def test_invalid_measurement_key(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/calculate", json={"corners": 3, "measurements": {"BD": 4000}}
        )

        assert response.status_code == 422
        data = response.json()
        assert data["error_type"] == "quote_input"
        assert "not valid for a 3-corner sail" in data["details"][0]["message"]

    def test_unknown_enum_rejected(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/calculate", json={"corners": 3, "fabric": "canvas"}
        )

        assert response.status_code == 422

    def test_corners_out_of_range(self, client: TestClient) -> None:
        response = client.post("/api/v1/calculate", json={"corners": 7})

        assert response.status_code == 422


class TestCalculateFromConfigEndpoint:
    """Tests for POST /api/v1/calculate/from-config."""

    def test_triangle(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/calculate/from-config",
            json={
                "config": sail_config(
                    corners=3,
                    measurements={"AB": 3000, "BC": 4000, "CA": 5000},
                    anchor_heights=[2400, 2400, 3000],
                )
            },
        )

        assert response.status_code == 200
        assert response.json()["calculation"]["total_price"] == 1824

    def test_invalid_config(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/calculate/from-config",
            json={"config": sail_config(corners=3, grommets=4)},
        )

        assert response.status_code == 422
        data = response.json()
        assert data["error_type"] == "validation"
        assert data["details"][0]["path"] == "sail.grommets"


class TestValidateEndpoint:
    """Tests for POST /api/v1/validate."""

    def test_valid(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/validate",
            json={"config": sail_config(corners=4, measurements=SQUARE_MM)},
        )

        data = response.json()
        assert data["is_valid"] is True
        assert data["exit_code"] == 0

    def test_missing_diagonals(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/validate",
            json={
                "config": sail_config(
                    corners=4,
                    measurements={"AB": 4000, "BC": 4000, "CD": 4000, "DA": 4000},
                )
            },
        )

        data = response.json()
        assert data["exit_code"] == 2
        assert [w["path"] for w in data["warnings"]] == [
            "sail.measurements.AC",
            "sail.measurements.BD",
        ]

    def test_suggestion(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/validate",
            json={
                "config": sail_config(
                    corners=3, measurements={"AB": 1500, "BC": 4000, "CA": 5000}
                )
            },
        )

        data = response.json()
        assert data["exit_code"] == 3
        assert data["suggestions"][0]["path"] == "sail.measurements.AB"
        assert data["suggestions"][0]["suggested_value"] == pytest.approx(15000)

    def test_geometry_error(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/validate",
            json={
                "config": sail_config(
                    corners=3, measurements={"AB": 2000, "BC": 2000, "CA": 5000}
                )
            },
        )

        data = response.json()
        assert data["is_valid"] is False
        assert data["exit_code"] == 1

    def test_unsupported_version(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/validate",
            json={"config": {"schema_version": "9.0", "sail": {"corners": 3}}},
        )

        assert response.status_code == 422


class TestMeasurementEndpoints:
    """Tests for the measurement helper endpoints."""

    def test_typo_suggestion(self, client: TestClient) -> None:
        response = client.post("/api/v1/measurements/typo", json={"value": 50})

        data = response.json()
        assert data["suggestion_mm"] == pytest.approx(5000)
        assert data["message"] == "Did you mean 5000mm?"
        assert data["error"] is None

    def test_typo_dismissed(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/measurements/typo", json={"value": 50, "dismissed_value": 50}
        )

        data = response.json()
        assert data["suggestion_mm"] is None
        assert data["error"].startswith("Too small (min 1000mm)")

    def test_plausible_value(self, client: TestClient) -> None:
        response = client.post("/api/v1/measurements/typo", json={"value": 5000})

        data = response.json()
        assert data["suggestion_mm"] is None
        assert data["message"] is None

    def test_keys(self, client: TestClient) -> None:
        response = client.get("/api/v1/measurements/keys/4")

        assert response.json() == {
            "corners": 4,
            "edges": ["AB", "BC", "CD", "DA"],
            "diagonals": ["AC", "BD"],
        }

    def test_keys_out_of_range(self, client: TestClient) -> None:
        response = client.get("/api/v1/measurements/keys/9")

        assert response.status_code == 422
