"""Tests for the codec self-test harness."""

import pytest

from bqc.core.codec import MAX_VALUE
from bqc.engine import validate
from bqc.engine.validate import (
    validate_roundtrip,
    validate_token_stability,
    validate_boundaries,
    validate_rejections,
    validate_exhaustive_quads,
    run_validation,
)


class TestChecks:
    def test_roundtrip_default_limit(self):
        result = validate_roundtrip()
        assert result["passed"], result["errors"]
        assert result["checked"] == 5001

    def test_roundtrip_small_limit(self):
        result = validate_roundtrip(10)
        assert result["passed"]
        assert result["checked"] == 11

    def test_token_stability_clamps_to_max(self):
        result = validate_token_stability(5000)
        assert result["passed"], result["errors"]
        assert result["checked"] == MAX_VALUE + 1

    def test_boundaries(self):
        result = validate_boundaries()
        assert result["passed"], result["errors"]

    def test_rejections(self):
        result = validate_rejections()
        assert result["passed"], result["errors"]

    @pytest.mark.slow
    def test_exhaustive_quads(self):
        result = validate_exhaustive_quads()
        assert result["passed"], result["errors"][:10]
        assert result["checked"] == 52 * 10 ** 4

    def test_rejections_report_wrong_error(self, monkeypatch):
        """A case that raises the wrong error kind is reported, not hidden."""
        monkeypatch.setattr(validate, "REQUIRED_REJECTIONS",
                            [("decode", "a0_0_0", validate.InvalidQuad)])
        result = validate_rejections()
        assert not result["passed"]
        assert "WRONG ERROR" in result["errors"][0]

    def test_rejections_report_accepted(self, monkeypatch):
        monkeypatch.setattr(validate, "REQUIRED_REJECTIONS",
                            [("decode", "a0_0_0_0", validate.InvalidQuad)])
        result = validate_rejections()
        assert not result["passed"]
        assert "ACCEPTED" in result["errors"][0]


class TestRunValidation:
    @pytest.mark.slow
    def test_all_pass(self, capsys):
        assert run_validation(100) is True
        out = capsys.readouterr().out
        assert "ALL VALIDATIONS PASSED" in out
        assert "--- Exhaustive Quads ---" in out

    @pytest.mark.slow
    def test_log_file(self, tmp_path):
        log_path = tmp_path / "bqc.log"
        run_validation(50, log_file=str(log_path))
        text = log_path.read_text()
        assert "=== Validating BQC codec (limit=50" in text
        assert "ALL VALIDATIONS PASSED" in text
