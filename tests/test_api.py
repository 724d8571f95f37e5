"""
Tests for FastAPI endpoints.

Uses TestClient to test API endpoints without running a server.
"""

import pytest
from fastapi.testclient import TestClient

from partymatch.api.server import app


@pytest.fixture
def client():
    """Create test client."""
    return TestClient(app)


@pytest.fixture
def example_input():
    """Example ranking request for testing."""
    return {
        "preferences": {
            "gathering_size": "party",
            "energy_level": "high_energy",
            "vibe_preferences": ["nightlife"],
        },
        "packages": [
            {
                "id": "quiet",
                "name": "Quiet Dinner",
                "ideal_gathering_size": ["intimate"],
                "ideal_energy_level": ["low_key"],
                "ideal_vibe": ["Food"],
                "rating": 4.9,
                "review_count": 12,
            },
            {
                "id": "club",
                "name": "Club Night",
                "ideal_gathering_size": ["party", "large"],
                "ideal_energy_level": ["high_energy"],
                "ideal_vibe": ["Nightlife"],
                "rating": 4.2,
                "review_count": 230,
            },
        ],
    }


class TestHealthEndpoint:
    """Tests for /health endpoint."""

    def test_health_returns_ok(self, client):
        """Test that health endpoint returns healthy status."""
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert "version" in data


class TestExampleEndpoint:
    """Tests for /example endpoint."""

    def test_example_returns_valid_request(self, client):
        """Test that example endpoint returns a usable request."""
        response = client.get("/example")

        assert response.status_code == 200
        data = response.json()
        assert "preferences" in data
        assert len(data["packages"]) == 3

    def test_example_can_be_ranked(self, client):
        """Test that the example feeds straight into /rank."""
        example = client.get("/example").json()

        response = client.post("/rank", json=example)

        assert response.status_code == 200
        assert response.json()["has_best_match"] is True


class TestCategoriesEndpoint:
    """Tests for /categories endpoint."""

    def test_categories_returns_scales(self, client):
        """Test that the ordered scales are listed."""
        response = client.get("/categories")

        assert response.status_code == 200
        data = response.json()
        assert data["gathering_sizes"] == ["intimate", "small_group", "party", "large"]
        assert data["energy_levels"] == ["low_key", "moderate", "high_energy"]
        assert data["best_match_threshold"] == 70


class TestScoreEndpoint:
    """Tests for /score and /breakdown endpoints."""

    def test_score_single_package(self, client, example_input):
        """Test scoring one package."""
        body = {
            "package": example_input["packages"][1],
            "preferences": example_input["preferences"],
        }

        response = client.post("/score", json=body)

        assert response.status_code == 200
        data = response.json()
        assert data["match_score"] == 100
        assert data["meets_best_match_threshold"] is True

    def test_score_without_preferences(self, client, example_input):
        """Test that omitted preferences score 0."""
        response = client.post("/score", json={"package": example_input["packages"][1]})

        assert response.status_code == 200
        assert response.json()["match_score"] == 0

    def test_breakdown(self, client, example_input):
        """Test the per-category breakdown."""
        body = {
            "package": example_input["packages"][0],
            "preferences": example_input["preferences"],
        }

        response = client.post("/breakdown", json=body)

        assert response.status_code == 200
        data = response.json()
        assert data == {
            "gathering_score": 12,
            "energy_score": 0,
            "vibe_score": 0,
            "total_score": 12,
        }

    def test_invalid_package_returns_error(self, client):
        """Test that invalid input returns 400 or 422."""
        response = client.post("/score", json={"package": {"rating": -1}})

        assert response.status_code in [400, 422]


class TestRankEndpoint:
    """Tests for /rank endpoint."""

    def test_rank_orders_packages(self, client, example_input):
        """Test that packages come back best first."""
        response = client.post("/rank", json=example_input)

        assert response.status_code == 200
        data = response.json()
        assert [p["id"] for p in data["packages"]] == ["club", "quiet"]
        assert data["packages"][0]["is_best_match"] is True
        assert data["packages"][1]["is_best_match"] is False
        assert data["best_match"]["id"] == "club"
        assert data["average_score"] == 56

    def test_rank_empty(self, client):
        """Test ranking an empty collection."""
        response = client.post("/rank", json={"packages": []})

        assert response.status_code == 200
        data = response.json()
        assert data["packages"] == []
        assert data["best_match"] is None
        assert data["has_best_match"] is False
        assert data["average_score"] == 0

    def test_rank_invalid_returns_error(self, client):
        """Test that a malformed package list is rejected."""
        response = client.post("/rank", json={"packages": "not-a-list"})

        assert response.status_code in [400, 422]
