"""
Tests for the Decision Report and the CLI.

============================================================
"""

import json

import pytest

from decision_scoring import (
    DEFAULT_USER_WEIGHTS,
    RISK_ASSESSMENTS,
    RiskLevel,
    RiskPersonality,
    WeightVector,
    analyze_decision,
    build_decision_report,
)
from decision_scoring.cli import EXIT_INPUT_ERROR, EXIT_OK, EXIT_SCORING_ERROR, main


# ============================================================
# FIXTURES
# ============================================================

@pytest.fixture
def option_records():
    return [
        {"id": "rent", "label": "Rent", "cost": 1200, "time_required": 5,
         "risk_level": 2, "priority": 6, "reward_potential": 4},
        {"id": "buy", "label": "Buy", "cost": 9000, "time_required": 40,
         "risk_level": 6, "priority": 7, "reward_potential": 8},
        {"id": "wait", "label": "Wait", "cost": 0, "time_required": 0,
         "risk_level": 4, "priority": 2, "reward_potential": 2},
    ]


@pytest.fixture
def options_file(tmp_path, option_records):
    path = tmp_path / "options.json"
    path.write_text(json.dumps({"options": option_records}))
    return path


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in (
        "DECISION_DEFAULT_PERSONALITY",
        "DECISION_USER_WEIGHTS",
        "DECISION_LOG_LEVEL",
        "DECISION_LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("decision_scoring.config.load_dotenv", lambda: None)
    monkeypatch.setattr("decision_scoring.cli.setup_logging", lambda *args, **kwargs: None)


# ============================================================
# REPORT TESTS
# ============================================================

class TestDecisionReport:
    """Tests for build_decision_report()."""

    def test_recommendation_and_backup(self, option_records):
        result = analyze_decision(option_records, "conservative")

        report = build_decision_report(result, "conservative")

        assert report.best_option_id == result.best_option_id
        assert report.recommendation == (
            f"Recommend **{result.best.label}** with {result.confidence:.1f}% confidence."
        )
        assert report.alternative_suggestion == f"**{result.runner_up.label}** is a solid backup."
        assert report.risk_assessment == RISK_ASSESSMENTS[result.risk_level]
        assert report.decision_status == "analyzed"

    def test_report_serialization(self, option_records):
        result = analyze_decision(option_records, RiskPersonality.AGGRESSIVE)

        data = build_decision_report(result, RiskPersonality.AGGRESSIVE).to_dict()

        assert data["analysis_data"]["risk_personality"] == "aggressive"
        assert data["analysis_data"]["blended_weights"] == result.weights.as_dict()
        assert data["analysis_data"]["weights"] == DEFAULT_USER_WEIGHTS.as_dict()
        assert len(data["score_breakdown"]["breakdown"]) == 3
        assert data["confidence_percentage"] == result.confidence
        assert data["risk_level"] == result.risk_level.value

    def test_stored_user_weights_are_kept_apart_from_blend(self, option_records):
        stored = WeightVector(cost=0.4, time=0.1, risk=0.3, priority=0.1, reward=0.1)
        result = analyze_decision(option_records, "aggressive", stored)

        data = build_decision_report(result, "aggressive", stored).to_dict()

        assert data["analysis_data"]["weights"] == stored.as_dict()
        assert data["analysis_data"]["blended_weights"] == result.weights.as_dict()
        assert data["analysis_data"]["weights"] != data["analysis_data"]["blended_weights"]

    def test_stored_weights_accept_plain_mapping(self, option_records):
        result = analyze_decision(option_records)

        data = build_decision_report(result, user_weights={"risk": 1.0}).to_dict()

        assert data["analysis_data"]["weights"]["risk"] == 1.0
        assert data["analysis_data"]["weights"]["cost"] == 0.0

    def test_every_risk_level_has_an_assessment(self):
        assert set(RISK_ASSESSMENTS) == set(RiskLevel)


# ============================================================
# CLI TESTS
# ============================================================

class TestCli:
    """Tests for the decision-score command."""

    def test_text_output(self, options_file, capsys):
        exit_code = main(["--options", str(options_file)])

        out = capsys.readouterr().out
        assert exit_code == EXIT_OK
        assert "DECISION ANALYSIS" in out
        assert "Recommend **" in out

    def test_json_output(self, options_file, capsys):
        exit_code = main([
            "--options", str(options_file),
            "--personality", "aggressive",
            "--format", "json",
        ])

        data = json.loads(capsys.readouterr().out)
        assert exit_code == EXIT_OK
        assert data["analysis_data"]["risk_personality"] == "aggressive"
        assert 50.0 <= data["confidence_percentage"] <= 99.0

    def test_weights_flag(self, options_file, capsys):
        exit_code = main([
            "--options", str(options_file),
            "--weights", "cost=100",
            "--format", "json",
        ])

        data = json.loads(capsys.readouterr().out)
        assert exit_code == EXIT_OK
        assert data["best_option_id"] == "wait"

    def test_blank_rows_are_skipped_before_counting(self, tmp_path, capsys):
        path = tmp_path / "options.json"
        path.write_text(json.dumps([{"label": "Only"}, {"label": ""}]))

        exit_code = main(["--options", str(path)])

        assert exit_code == EXIT_SCORING_ERROR
        assert "At least 2 options" in capsys.readouterr().err

    def test_invalid_weights(self, options_file, capsys):
        exit_code = main(["--options", str(options_file), "--weights", "cost=60,time=20"])

        assert exit_code == EXIT_SCORING_ERROR
        assert "100%" in capsys.readouterr().err

    def test_missing_file(self, tmp_path, capsys):
        exit_code = main(["--options", str(tmp_path / "nope.json")])

        assert exit_code == EXIT_INPUT_ERROR

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "options.json"
        path.write_text("{not json")

        assert main(["--options", str(path)]) == EXIT_INPUT_ERROR

    @pytest.mark.parametrize("rows", [
        [{"label": "A"}, None, {"label": "B"}],
        [{"label": "A"}, {"label": "B"}, 5],
        [{"label": "A"}, "B"],
    ])
    def test_non_object_rows_are_input_errors(self, tmp_path, capsys, rows):
        path = tmp_path / "options.json"
        path.write_text(json.dumps(rows))

        exit_code = main(["--options", str(path)])

        assert exit_code == EXIT_INPUT_ERROR
        assert "must be a JSON object" in capsys.readouterr().err

    def test_json_output_records_stored_weights(self, options_file, capsys):
        exit_code = main([
            "--options", str(options_file),
            "--weights", "cost=40,time=10,risk=30,priority=10,reward=10",
            "--format", "json",
        ])

        data = json.loads(capsys.readouterr().out)
        assert exit_code == EXIT_OK
        assert data["analysis_data"]["weights"]["cost"] == pytest.approx(0.40)
        # 0.6 * 0.40 + 0.4 * 0.25
        assert data["analysis_data"]["blended_weights"]["cost"] == pytest.approx(0.34)
