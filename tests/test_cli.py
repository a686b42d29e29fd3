"""Tests for the zawaj-match command line."""

import json
import logging

import pytest

from tests.conftest import make_profile
from zawaj.cli import main
from zawaj.utils.logger import get_logger


def _write(tmp_path, name, payload):
    path = tmp_path / name
    path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")
    return str(path)


@pytest.fixture
def profile_files(tmp_path, male_profile):
    other = make_profile(basicInfo={"age": 33})
    return _write(tmp_path, "a.json", male_profile), _write(tmp_path, "b.json", other)


class TestCompatCommand:
    def test_json_output(self, profile_files, capsys):
        assert main(["--json", "compat", *profile_files]) == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["overallScore"] == 97
        assert payload["categoryScores"]["age"]["earnedPoints"] == 17

    def test_table_output(self, profile_files, capsys):
        assert main(["compat", *profile_files]) == 0
        assert "religious_commitment" in capsys.readouterr().out

    def test_missing_file(self, tmp_path, profile_files):
        assert main(["compat", str(tmp_path / "nope.json"), profile_files[1]]) == 1


class TestRankCommand:
    def test_json_output(self, tmp_path, male_profile, capsys):
        searcher = _write(tmp_path, "me.json", male_profile)
        candidates = _write(
            tmp_path,
            "candidates.json",
            [make_profile(basicInfo={"age": 45}), make_profile(), make_profile(basicInfo={"age": 32})],
        )
        assert main(["--json", "rank", searcher, candidates, "--limit", "2"]) == 0
        assert json.loads(capsys.readouterr().out) == [{"index": 1, "score": 100}, {"index": 2, "score": 98}]

    def test_candidates_must_be_list(self, tmp_path, male_profile):
        searcher = _write(tmp_path, "me.json", male_profile)
        assert main(["rank", searcher, searcher]) == 1

    def test_malformed_candidates_in_table(self, tmp_path, male_profile, capsys):
        searcher = _write(tmp_path, "me.json", male_profile)
        candidates = _write(tmp_path, "candidates.json", [{"basicInfo": "oops"}, None, make_profile()])
        assert main(["rank", searcher, candidates]) == 0
        out = capsys.readouterr().out
        assert "Ahmed" in out
        assert "3 candidates" in out

    def test_identical_candidates_keep_positions(self, tmp_path, male_profile, capsys):
        searcher = _write(tmp_path, "me.json", male_profile)
        candidates = _write(tmp_path, "candidates.json", [None, None])
        assert main(["--json", "rank", searcher, candidates]) == 0
        assert json.loads(capsys.readouterr().out) == [{"index": 0, "score": 0}, {"index": 1, "score": 0}]


class TestModerateCommand:
    def test_text(self, capsys):
        assert main(["--json", "moderate", "--text", "you idiot"]) == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["flaggedWords"] == ["idiot"]
        assert payload["needsReview"] is True

    def test_profile(self, tmp_path, capsys):
        path = _write(tmp_path, "p.json", make_profile(personalInfo={"about": "stupid"}))
        assert main(["--json", "moderate", "--profile", path]) == 0
        assert json.loads(capsys.readouterr().out)["flaggedFields"] == ["about"]

    def test_panel_output(self, capsys):
        assert main(["moderate", "--message", "salam"]) == 0
        assert "Needs review: False" in capsys.readouterr().out


class TestCompleteCommand:
    def test_json_output(self, tmp_path, male_profile, capsys):
        del male_profile["financialInfo"]
        path = _write(tmp_path, "p.json", male_profile)
        assert main(["--json", "complete", path]) == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["completeness"] == 91
        assert payload["missingFields"] == ["financialInfo.situation"]


# ─── Logging and failures ───────────────────────────────────────────────────


class TestLogging:
    def test_log_file_and_run_summary(self, tmp_path, male_profile):
        log_file = tmp_path / "logs" / "run.log"
        searcher = _write(tmp_path, "me.json", male_profile)
        candidates = _write(tmp_path, "candidates.json", [make_profile(basicInfo={"age": 60})])
        argv = ["--log-level", "DEBUG", "--log-file", str(log_file), "--json", "rank", searcher, candidates, "--min-score", "90"]
        assert main(argv) == 0

        summary = get_logger().get_error_summary()
        assert summary["total_errors"] == 0
        assert summary["total_warnings"] == 1

        text = log_file.read_text(encoding="utf-8")
        assert "Running rank" in text
        assert "Loaded JSON" in text
        assert "No candidates reached the minimum score [min_score=90 candidates=1]" in text
        assert "Finished rank [errors=0 warnings=1]" in text

    def test_log_level_applies_per_run(self, monkeypatch):
        monkeypatch.delenv("ZAWAJ_LOG_LEVEL", raising=False)
        assert main(["--log-level", "DEBUG", "--json", "moderate", "--text", "salam"]) == 0
        assert get_logger().logger.level == logging.DEBUG

        assert main(["--json", "moderate", "--text", "salam"]) == 0
        assert get_logger().logger.level == logging.WARNING
        assert get_logger().get_error_summary()["total_warnings"] == 0

    def test_malformed_config_yaml(self, config_dir, profile_files):
        (config_dir / "compatibility_weights.yaml").write_text("weights: [unclosed\n", encoding="utf-8")
        assert main(["compat", *profile_files]) == 1
        assert get_logger().get_error_summary()["total_errors"] == 1
