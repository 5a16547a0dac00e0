"""Integration tests for the validate CLI command.

These tests verify the validate command works correctly end-to-end,
including:
- Valid configuration files pass validation
- Invalid configuration files produce errors
- Missing diagonal warnings and typo suggestions are displayed
- Exit codes are correct
"""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from shadesails.cli.main import app

# Get path to test fixtures
FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"

pytestmark = pytest.mark.cli


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestValidateCommand:
    """Tests for the validate command."""

    def test_valid_square(self, runner: CliRunner) -> None:
        """Fully measured square passes with exit code 0."""
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "valid_square.json")])

        assert result.exit_code == 0
        assert "Validation passed. Configuration is valid." in result.output

    def test_output_includes_validating_message(self, runner: CliRunner) -> None:
        """Output should include 'Validating...' message."""
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "valid_square.json")])

        assert "Validating" in result.output

    def test_missing_diagonals_warn(self, runner: CliRunner) -> None:
        """Unmeasured diagonals give exit code 2 with suggestions."""
        result = runner.invoke(
            app, ["validate", str(FIXTURES_PATH / "missing_diagonals.json")]
        )

        assert result.exit_code == 2
        assert "Warnings:" in result.output
        assert "Diagonal AC has not been measured" in result.output
        assert "Suggestion:" in result.output
        assert "Validation passed with 2 warning(s)" in result.output

    def test_typo_suggestion(self, runner: CliRunner) -> None:
        """A suspected typo gives exit code 3."""
        result = runner.invoke(
            app, ["validate", str(FIXTURES_PATH / "typo_suggestion.json")]
        )

        assert result.exit_code == 3
        assert "Suggested corrections:" in result.output
        assert "sail.measurements.AB: Did you mean 15000mm?" in result.output
        assert "Validation needs review: 1 suggested correction(s)" in result.output

    def test_dismissed_typo(self, runner: CliRunner) -> None:
        """A dismissed suggestion no longer blocks."""
        result = runner.invoke(
            app, ["validate", str(FIXTURES_PATH / "typo_dismissed.json")]
        )

        assert result.exit_code == 0

    def test_invalid_geometry(self, runner: CliRunner) -> None:
        """Impossible triangle fails with exit code 1."""
        result = runner.invoke(
            app, ["validate", str(FIXTURES_PATH / "invalid_geometry.json")]
        )

        assert result.exit_code == 1
        assert "Errors:" in result.output
        assert "short by 1000mm" in result.output
        assert "Validation failed: 1 error(s), 0 warning(s)" in result.output

    def test_file_not_found(self, runner: CliRunner) -> None:
        """Non-existent file should fail with exit code 1."""
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "nonexistent.json")])

        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_invalid_json_syntax(self, runner: CliRunner) -> None:
        """Invalid JSON should fail with exit code 1."""
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "invalid_json.json")])

        assert result.exit_code == 1
        assert "Invalid JSON syntax" in result.output
        assert "Validation failed" in result.output

    def test_unknown_field_rejected(self, runner: CliRunner) -> None:
        """Unknown fields should cause validation failure."""
        result = runner.invoke(
            app, ["validate", str(FIXTURES_PATH / "unknown_field.json")]
        )

        assert result.exit_code == 1
        assert "sail.grommets" in result.output

    def test_wrong_measurement_key(self, runner: CliRunner) -> None:
        """A diagonal on a triangle is rejected by the schema."""
        result = runner.invoke(
            app, ["validate", str(FIXTURES_PATH / "wrong_measurement_key.json")]
        )

        assert result.exit_code == 1
        assert "not valid for a 3-corner sail" in result.output


class TestValidateCommandWithTempFiles:
    """Tests that create temporary files for validation."""

    def test_missing_required_field(self, runner: CliRunner, tmp_path: Path) -> None:
        """Missing corners should cause validation error."""
        config_path = tmp_path / "no_corners.json"
        config_path.write_text('{"schema_version": "1.0", "sail": {}}')

        result = runner.invoke(app, ["validate", str(config_path)])

        assert result.exit_code == 1
        assert "sail.corners" in result.output

    def test_range_error_shows_value(self, runner: CliRunner, tmp_path: Path) -> None:
        """Range errors echo the offending value."""
        config_path = tmp_path / "huge.json"
        config_path.write_text(
            '{"schema_version": "1.0", "sail": {"corners": 3, '
            '"measurements": {"AB": 2000000, "BC": 4000, "CA": 5000}}}'
        )

        result = runner.invoke(app, ["validate", str(config_path)])

        assert result.exit_code == 1
        assert "Too large (max 99999mm)" in result.output
        assert "Value: 2000000" in result.output
