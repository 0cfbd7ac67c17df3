"""
Tests for the Scoring API.

============================================================
PURPOSE
============================================================
1. Health and personality endpoints
2. Blend endpoint
3. Analyze endpoint and error mapping
4. API key guard
5. App construction

============================================================
"""

import importlib

import pytest
from fastapi.testclient import TestClient

import scoring_api.main
from decision_scoring import InvalidInputError, RiskPersonality, ScoringSettings, WeightVector
from scoring_api.main import create_app


# ============================================================
# FIXTURES
# ============================================================

@pytest.fixture
def client():
    return TestClient(create_app(ScoringSettings()))


@pytest.fixture
def guarded_client():
    return TestClient(create_app(ScoringSettings(api_key="s3cret")))


@pytest.fixture
def analyze_body():
    return {
        "personality": "balanced",
        "options": [
            {"id": "best", "label": "Best", "cost": 0, "time_required": 0,
             "risk_level": 0, "priority": 10, "reward_potential": 10},
            {"id": "worst", "label": "Worst", "cost": 1000, "time_required": 100,
             "risk_level": 10, "priority": 0, "reward_potential": 0},
        ],
    }


# ============================================================
# READ ENDPOINT TESTS
# ============================================================

class TestReadEndpoints:

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_personalities(self, client):
        response = client.get("/personalities")

        data = {p["personality"]: p["weights"] for p in response.json()["data"]}
        assert response.status_code == 200
        assert data["conservative"]["risk"] == 0.40
        assert set(data) == {"conservative", "balanced", "aggressive"}


# ============================================================
# BLEND TESTS
# ============================================================

class TestBlendEndpoint:

    def test_blend_with_zero_weights_returns_profile(self, client):
        response = client.post("/blend", json={
            "personality": "aggressive",
            "weights": {"cost": 0, "time": 0, "risk": 0, "priority": 0, "reward": 0},
        })

        data = response.json()
        assert response.status_code == 200
        assert data["personality"] == "aggressive"
        assert data["weights"]["reward"] == pytest.approx(0.30)

    def test_blend_uses_settings_defaults(self):
        settings = ScoringSettings(
            default_personality=RiskPersonality.CONSERVATIVE,
            user_weights=WeightVector(risk=1.0),
        )
        client = TestClient(create_app(settings))

        data = client.post("/blend", json={}).json()

        # risk: 0.6 * 1.0 + 0.4 * 0.40
        assert data["personality"] == "conservative"
        assert data["weights"]["risk"] == pytest.approx(0.76)

    def test_blend_rejects_negative_weights(self, client):
        response = client.post("/blend", json={"weights": {"cost": -1}})

        assert response.status_code == 422


# ============================================================
# ANALYZE TESTS
# ============================================================

class TestAnalyzeEndpoint:

    def test_analyze(self, client, analyze_body):
        response = client.post("/analyze", json=analyze_body)

        data = response.json()
        assert response.status_code == 200
        assert data["best_option_id"] == "best"
        assert data["confidence_percentage"] == 99.0
        assert data["risk_level"] == "low"
        assert data["recommendation"] == "Recommend **Best** with 99.0% confidence."
        assert data["alternative_suggestion"] == "**Worst** is a solid backup."
        assert [o["rank"] for o in data["breakdown"]] == [1, 2]
        assert data["breakdown"][0]["weighted_total"] == 100.0

    def test_analyze_requires_two_options(self, client, analyze_body):
        analyze_body["options"] = analyze_body["options"][:1]

        response = client.post("/analyze", json=analyze_body)

        assert response.status_code == 422
        assert "At least 2 options" in response.json()["detail"]

    def test_analyze_unknown_personality(self, client, analyze_body):
        analyze_body["personality"] = "reckless"

        response = client.post("/analyze", json=analyze_body)

        assert response.status_code == 422

    def test_analyze_zero_weights_use_personality(self, client, analyze_body):
        analyze_body["weights"] = {"cost": 0}

        response = client.post("/analyze", json=analyze_body)

        assert response.status_code == 200
        assert response.json()["weights"]["cost"] == pytest.approx(0.25)


# ============================================================
# API KEY TESTS
# ============================================================

class TestApiKeyGuard:

    def test_missing_key_is_forbidden(self, guarded_client):
        assert guarded_client.get("/personalities").status_code == 403

    def test_valid_key_is_accepted(self, guarded_client):
        response = guarded_client.get("/personalities", headers={"x-api-key": "s3cret"})

        assert response.status_code == 200

    def test_health_is_open(self, guarded_client):
        assert guarded_client.get("/health").status_code == 200


# ============================================================
# APP CONSTRUCTION TESTS
# ============================================================

class TestAppConstruction:

    @pytest.fixture
    def bad_environment(self, monkeypatch):
        monkeypatch.setattr("decision_scoring.config.load_dotenv", lambda: None)
        monkeypatch.setenv("DECISION_LOG_LEVEL", "LOUD")

    def test_import_does_not_read_settings(self, bad_environment):
        module = importlib.reload(scoring_api.main)

        assert not hasattr(module, "app")
        assert module.create_app(ScoringSettings()).state.settings == ScoringSettings()

    def test_factory_reads_environment_when_called(self, bad_environment):
        with pytest.raises(InvalidInputError):
            create_app()

    def test_analyze_report_keeps_stored_weights_apart(self, client, analyze_body):
        analyze_body["weights"] = {"risk": 1.0}

        data = client.post("/analyze", json=analyze_body).json()

        assert data["user_weights"]["risk"] == 1.0
        # risk: 0.6 * 1.0 + 0.4 * 0.25
        assert data["weights"]["risk"] == pytest.approx(0.70)
