"""Integration tests for the quote, check-typo and diagonals CLI commands."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from shadesails.cli.main import app

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"

SQUARE_ARGS = [
    "-m", "AB=4000",
    "-m", "BC=4000",
    "-m", "CD=4000",
    "-m", "DA=4000",
    "-m", "AC=5657",
    "-m", "BD=5657",
]

pytestmark = pytest.mark.cli


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestQuoteCommand:
    """Tests for the quote command."""

    def test_direct_entry_summary(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["quote", "--corners", "4", *SQUARE_ARGS])

        assert result.exit_code == 0
        assert "SHADE SAIL QUOTE" in result.output
        assert "NZ$2515.00" in result.output

    def test_direct_entry_json(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["quote", "-n", "4", *SQUARE_ARGS, "--currency", "usd", "-f", "json"]
        )

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["calculation"]["total_price"] == 1678
        assert data["calculation"]["currency"] == "USD"

    def test_options(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app,
            [
                "quote", "-n", "4", *SQUARE_ARGS,
                "--edge", "cabled", "--option", "exact", "-f", "json",
            ],
        )

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["calculation"]["total_price"] == 2232
        assert data["calculation"]["wire_thickness"] == 4

    def test_imperial_entry(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app,
            [
                "quote", "-n", "3", "-u", "imperial",
                "-m", "AB=120", "-m", "BC=160", "-m", "CA=200", "-f", "json",
            ],
        )

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["calculation"]["adjusted_perimeter"] == 12.0
        assert data["sail"]["unit"] == "imperial"

    def test_config_file_uses_its_output_format(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["quote", "--config", str(FIXTURES_PATH / "valid_triangle.json")]
        )

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["calculation"]["total_price"] == 1824
        assert data["calculation"]["area"] == pytest.approx(6.0)

    def test_format_option_overrides_config(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app,
            ["quote", "-c", str(FIXTURES_PATH / "valid_triangle.json"), "-f", "summary"],
        )

        assert result.exit_code == 0
        assert "SHADE SAIL QUOTE" in result.output

    def test_incomplete_sail(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["quote", "-n", "3", "-m", "AB=3000"])

        assert result.exit_code == 0
        assert "incomplete" in result.output
        assert "Measurement required" in result.output

    def test_typo_shown(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["quote", "-n", "3", "-m", "AB=50", "-m", "BC=4000", "-m", "CA=5000"]
        )

        assert result.exit_code == 0
        assert "AB: did you mean 5000mm?" in result.output

    def test_dismissed_typo(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app,
            [
                "quote", "-n", "3",
                "-m", "AB=1500", "-m", "BC=4000", "-m", "CA=5000",
                "--dismiss", "AB=1500", "-f", "json",
            ],
        )

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["typo_suggestions"] == {}

    def test_missing_config_file(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["quote", "-c", str(FIXTURES_PATH / "nonexistent.json")]
        )

        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_requires_config_or_corners(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["quote"])

        assert result.exit_code == 1
        assert "Provide --config or --corners" in result.output

    def test_invalid_choice(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["quote", "-n", "3", "--currency", "jpy"])

        assert result.exit_code == 1
        assert "currency must be one of" in result.output

    def test_unknown_format(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["quote", "-n", "3", "-f", "pdf"])

        assert result.exit_code == 1
        assert "Unknown format" in result.output

    def test_malformed_measurement(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["quote", "-n", "3", "-m", "AB"])

        assert result.exit_code != 0


class TestCheckTypoCommand:
    """Tests for the check-typo command."""

    def test_suggestion(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["check-typo", "50"])

        assert result.exit_code == 0
        assert "Did you mean 5000mm?" in result.output

    def test_plausible(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["check-typo", "5000"])

        assert result.exit_code == 0
        assert "Looks good." in result.output

    def test_range_error(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["check-typo", "0.5"])

        assert result.exit_code == 0
        assert "Too small (min 1000mm)" in result.output

    def test_imperial(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["check-typo", "20", "--unit", "imperial"])

        assert 'Did you mean 240.0"?' in result.output

    def test_anchor_height(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["check-typo", "3", "--field", "anchor_height"])

        assert "Did you mean 3000mm?" in result.output

    def test_unknown_field(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["check-typo", "5", "--field", "wall"])

        assert result.exit_code == 1


class TestDiagonalsCommand:
    """Tests for the diagonals command."""

    def test_quadrilateral(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["diagonals", "4"])

        assert result.exit_code == 0
        assert "Edges:     AB, BC, CD, DA" in result.output
        assert "Diagonals: AC, BD" in result.output

    def test_triangle(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["diagonals", "3"])

        assert "Diagonals: none" in result.output

    def test_unsupported(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["diagonals", "9"])

        assert result.exit_code == 1
        assert "Corners must be one of" in result.output
