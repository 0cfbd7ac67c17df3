"""
Tests for input handling: sanitization, stored weight preferences
and runtime settings.

============================================================
"""

import json

import pytest

from decision_scoring import (
    InvalidInputError,
    InvalidWeightsError,
    Option,
    RiskPersonality,
    WeightVector,
    collect_options,
    get_default_settings,
    load_settings,
    load_user_weights,
    parse_weight_string,
    sanitize_option,
    score_options,
    weights_from_percentages,
    weights_to_percentages,
)


# ============================================================
# SANITIZER TESTS
# ============================================================

class TestSanitizer:
    """Tests for per-option defaulting."""

    def test_defaults_for_missing_values(self):
        option = sanitize_option({"id": 7, "label": "Plan B"})

        assert option.option_id == "7"
        assert option.cost == 0.0
        assert option.time_required == 0.0
        assert option.risk_level == 5.0
        assert option.priority == 5.0
        assert option.reward_potential == 5.0
        assert option.feasibility is None

    def test_label_is_trimmed(self):
        assert sanitize_option({"label": "  Move abroad "}).label == "Move abroad"

    def test_non_finite_values_count_as_missing(self):
        option = sanitize_option(Option(label="x", cost=float("nan"), risk_level=float("inf")))

        assert option.cost == 0.0
        assert option.risk_level == 5.0

    def test_booleans_are_not_numbers(self):
        assert sanitize_option({"label": "x", "priority": True}).priority == 5.0

    def test_descriptive_fields_are_carried(self):
        option = sanitize_option({
            "label": "x", "description": "d", "feasibility": 12,
            "pros": ["cheap"], "cons": ["slow"],
        })

        assert option.description == "d"
        assert option.feasibility == 10.0
        assert option.pros == ("cheap",)
        assert option.cons == ("slow",)

    @pytest.mark.parametrize("record", [None, 5, "Plan B", ["label", "x"]])
    def test_non_object_records_are_rejected(self, record):
        with pytest.raises(InvalidInputError) as exc_info:
            collect_options([{"label": "Stay"}, record, {"label": "Leave"}])

        assert "must be objects" in str(exc_info.value)

    def test_engine_rejects_non_object_records(self):
        with pytest.raises(InvalidInputError):
            score_options([{"label": "Stay"}, None], WeightVector(cost=1.0))

    def test_collect_options_drops_blank_rows(self):
        rows = [
            {"label": "Stay"},
            {"label": ""},
            {"label": None, "cost": 10},
            {"label": "Leave", "cost": 10},
        ]

        options = collect_options(rows)

        assert [o.label for o in options] == ["Stay", "Leave"]
        assert [o.option_id for o in options] == ["option-1", "option-2"]


# ============================================================
# WEIGHT PREFERENCE TESTS
# ============================================================

class TestWeightPreferences:
    """Tests for stored weight preferences."""

    def test_percentages_must_total_100(self):
        with pytest.raises(InvalidWeightsError) as exc_info:
            weights_from_percentages({"cost": 50, "time": 20, "risk": 20})

        assert "currently 90%" in str(exc_info.value)

    def test_percentages_become_fractions(self):
        weights = weights_from_percentages(
            {"cost": 40, "time": 10, "risk": 30, "priority": 10, "reward": 10}
        )

        assert weights.cost == pytest.approx(0.40)
        assert weights.is_normalized()

    def test_percentages_round_trip_for_display(self):
        weights = WeightVector(cost=0.25, time=0.2, risk=0.25, priority=0.15, reward=0.15)

        assert weights_to_percentages(weights) == {
            "cost": 25, "time": 20, "risk": 25, "priority": 15, "reward": 15,
        }

    def test_parse_percent_string(self):
        weights = parse_weight_string("cost=40, time=10, risk=30, priority=10, reward=10")

        assert weights.risk == pytest.approx(0.30)

    def test_parse_fraction_string(self):
        weights = parse_weight_string("risk=0.7,reward=0.3")

        assert weights.risk == 0.7
        assert weights.cost == 0.0

    @pytest.mark.parametrize("text", ["", "cost", "luck=10", "cost=abc"])
    def test_parse_rejects_malformed_strings(self, text):
        with pytest.raises(InvalidWeightsError):
            parse_weight_string(text)

    def test_load_user_weights_none(self):
        assert load_user_weights(None) is None

    def test_load_user_weights_from_json_file(self, tmp_path):
        path = tmp_path / "weights.json"
        path.write_text(json.dumps({"cost": 30, "time": 20, "risk": 30, "priority": 10, "reward": 10}))

        weights = load_user_weights(path)

        assert weights.cost == pytest.approx(0.30)

    def test_load_user_weights_missing_file(self, tmp_path):
        assert load_user_weights(tmp_path / "absent.json") is None

    def test_load_user_weights_from_mapping(self):
        weights = load_user_weights({"cost": 0.5, "risk": 0.5})

        assert weights == WeightVector(cost=0.5, risk=0.5)


# ============================================================
# SETTINGS TESTS
# ============================================================

class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self):
        settings = load_settings({})

        assert settings == get_default_settings()
        assert settings.user_weights is None
        assert settings.default_personality == RiskPersonality.BALANCED

    def test_values_from_environment(self):
        settings = load_settings({
            "DECISION_DEFAULT_PERSONALITY": "Aggressive",
            "DECISION_USER_WEIGHTS": "cost=40,time=10,risk=30,priority=10,reward=10",
            "DECISION_LOG_LEVEL": "debug",
            "DECISION_LOG_FORMAT": "JSON",
            "DECISION_API_KEY": "secret",
            "DECISION_CORS_ORIGINS": "https://a.example, https://b.example",
        })

        assert settings.default_personality == RiskPersonality.AGGRESSIVE
        assert settings.user_weights.cost == pytest.approx(0.40)
        assert settings.log_level == "DEBUG"
        assert settings.log_format == "json"
        assert settings.api_key == "secret"
        assert settings.cors_origins == ("https://a.example", "https://b.example")
        assert settings.to_dict()["api_key_configured"] is True

    def test_invalid_personality(self):
        with pytest.raises(InvalidInputError):
            load_settings({"DECISION_DEFAULT_PERSONALITY": "yolo"})

    def test_invalid_log_level(self):
        with pytest.raises(InvalidInputError):
            load_settings({"DECISION_LOG_LEVEL": "LOUD"})

    def test_invalid_weights(self):
        with pytest.raises(InvalidWeightsError):
            load_settings({"DECISION_USER_WEIGHTS": "cost=50,time=20"})
