"""Tests for CLI commands."""

import json

import pytest
from typer.testing import CliRunner

from fedtax.cli import app

runner = CliRunner()


@pytest.fixture
def entries_file(tmp_path):
    path = tmp_path / "entries.json"
    path.write_text(json.dumps({
        "tax_year": 2025,
        "filing_status": "single",
        "w2": [{"employer_name": "Acme Corp", "box1_wages": "60000", "box2_federal_withheld": "6000"}],
    }))
    return path


@pytest.fixture
def paystub_file(tmp_path):
    path = tmp_path / "stubs.json"
    path.write_text(json.dumps({
        "tax_year": 2025,
        "paystubs": [{
            "label": "Globex",
            "pay_frequency": "biweekly",
            "pay_date": "2025-06-13",
            "ytd_taxable_wages": "20000",
            "ytd_federal_withheld": "2400",
            "current_taxable_wages": "2000",
            "current_federal_withheld": "240",
        }],
    }))
    return path


class TestCLI:
    def test_help(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "Federal income tax estimator" in result.output

    def test_no_command_shows_help(self):
        result = runner.invoke(app, [])
        assert result.exit_code == 0
        assert "estimate" in result.output

    @pytest.mark.parametrize("command", ["estimate", "brackets", "validate"])
    def test_command_help(self, command):
        result = runner.invoke(app, [command, "--help"])
        assert result.exit_code == 0


class TestEstimateCommand:
    def test_refund(self, entries_file):
        result = runner.invoke(app, ["estimate", str(entries_file)])
        assert result.exit_code == 0
        assert "=== Federal Tax Estimate: 2025 (Single) ===" in result.output
        assert "REFUND:" in result.output
        assert "5,168" in result.output
        assert "832" in result.output

    def test_filing_status_override(self, entries_file):
        result = runner.invoke(app, ["estimate", str(entries_file), "-s", "mfj"])
        assert result.exit_code == 0
        assert "(Married Filing Jointly)" in result.output
        assert "30,000" in result.output

    def test_year_override_unsupported(self, entries_file):
        result = runner.invoke(app, ["estimate", str(entries_file), "--year", "2019"])
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_bad_filing_status(self, entries_file):
        result = runner.invoke(app, ["estimate", str(entries_file), "-s", "HOH"])
        assert result.exit_code == 1

    def test_missing_tax_year(self, tmp_path):
        path = tmp_path / "noyear.json"
        path.write_text(json.dumps({"w2": [{"gross_wages": "1000", "federal_withheld": "0"}]}))
        result = runner.invoke(app, ["estimate", str(path)])
        assert result.exit_code == 1
        assert "No tax year given" in result.output

    def test_invalid_entry(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"tax_year": 2025, "w2": [{"gross_wages": "-1", "federal_withheld": "0"}]}))
        result = runner.invoke(app, ["estimate", str(path)])
        assert result.exit_code == 1
        assert "cannot be negative" in result.output

    def test_project(self, paystub_file):
        result = runner.invoke(app, ["estimate", str(paystub_file), "--project"])
        assert result.exit_code == 0
        assert "YEAR-END PROJECTION" in result.output
        assert "48,000" in result.output

    def test_summary(self, entries_file):
        result = runner.invoke(app, ["estimate", str(entries_file), "--summary"])
        assert result.exit_code == 0
        assert "1. Total wages" in result.output
        assert "ESTIMATED REFUND:" in result.output


class TestBracketsCommand:
    def test_brackets(self):
        result = runner.invoke(app, ["brackets", "2025"])
        assert result.exit_code == 0
        assert "$11,600" in result.output
        assert "Standard deduction: $15,000" in result.output

    def test_brackets_mfj(self):
        result = runner.invoke(app, ["brackets", "2026", "-s", "MFJ"])
        assert result.exit_code == 0
        assert "Standard deduction: $30,800" in result.output

    def test_unsupported_year(self):
        result = runner.invoke(app, ["brackets", "2030"])
        assert result.exit_code == 1


class TestValidateCommand:
    def test_valid_file(self, entries_file):
        result = runner.invoke(app, ["validate", str(entries_file)])
        assert result.exit_code == 0
        assert "1 W-2 and 0 paystub entries are valid." in result.output

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["validate", str(tmp_path / "missing.json")])
        assert result.exit_code == 1

    def test_directory_argument(self, tmp_path):
        result = runner.invoke(app, ["validate", str(tmp_path)])
        assert result.exit_code == 1
        assert "Error:" in result.output
