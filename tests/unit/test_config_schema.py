"""Unit tests for configuration schema and loader.

These tests verify:
- Valid configurations are loaded correctly
- Unknown fields are rejected (extra="forbid")
- Measurement keys and anchor heights must fit the corner count
- Schema version pattern validation
- Loader error handling (file not found, JSON parse errors)
- Conversion to domain objects
"""

from pathlib import Path
from typing import Any

import pytest
from pydantic import ValidationError as PydanticValidationError

from shadesails.application.config import (
    SUPPORTED_VERSIONS,
    ConfigError,
    SailConfig,
    ShadeSailConfiguration,
    config_to_dismissed,
    config_to_sail,
    load_config,
    load_config_from_dict,
)
from shadesails.application.config.loader import _format_json_path
from shadesails.domain.value_objects import (
    Currency,
    EdgeType,
    FabricType,
    MeasurementOption,
    UnitSystem,
)


def make_config(**sail: Any) -> dict[str, Any]:
    sail.setdefault("corners", 3)
    return {"schema_version": "1.0", "sail": sail}


class TestSailConfig:
    """Tests for SailConfig model."""

    def test_defaults(self) -> None:
        sail = SailConfig(corners=3)
        assert sail.fabric == FabricType.MONOTEC_370
        assert sail.edge_type == EdgeType.WEBBING
        assert sail.measurement_option == MeasurementOption.ADJUST
        assert sail.unit == UnitSystem.METRIC
        assert sail.currency == Currency.NZD
        assert sail.measurements == {}

    def test_string_enums(self) -> None:
        sail = SailConfig(
            corners=4, fabric="shadetec320", edge_type="cabled", currency="GBP"
        )
        assert sail.fabric == FabricType.SHADETEC_320
        assert sail.edge_type == EdgeType.CABLED
        assert sail.currency == Currency.GBP

    @pytest.mark.parametrize("corners", [2, 7])
    def test_corner_range(self, corners: int) -> None:
        with pytest.raises(PydanticValidationError):
            SailConfig(corners=corners)

    def test_unknown_fabric(self) -> None:
        with pytest.raises(PydanticValidationError):
            SailConfig(corners=3, fabric="canvas")

    def test_negative_measurement(self) -> None:
        with pytest.raises(PydanticValidationError):
            SailConfig(corners=3, measurements={"AB": -1})

    def test_key_not_valid_for_corners(self) -> None:
        with pytest.raises(PydanticValidationError, match="not valid for a 3-corner"):
            SailConfig(corners=3, measurements={"AC": 4000})

    def test_too_many_heights(self) -> None:
        with pytest.raises(PydanticValidationError, match="at most 3 anchor heights"):
            SailConfig(corners=3, anchor_heights=[2400] * 4)

    def test_dismissed_keys_must_be_fields(self) -> None:
        SailConfig(corners=3, dismissed_suggestions={"AB": 50, "height_2": 3})
        with pytest.raises(PydanticValidationError, match="unknown fields"):
            SailConfig(corners=3, dismissed_suggestions={"height_3": 3})

    def test_extra_field_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            SailConfig(corners=3, grommets=6)


class TestShadeSailConfiguration:
    """Tests for the root configuration model."""

    def test_minimal(self) -> None:
        config = ShadeSailConfiguration.model_validate(make_config())
        assert config.schema_version == "1.0"
        assert config.output.format == "summary"

    def test_supported_versions(self) -> None:
        assert "1.0" in SUPPORTED_VERSIONS

    def test_newer_minor_version_accepted(self) -> None:
        data = make_config()
        data["schema_version"] = "1.3"
        assert ShadeSailConfiguration.model_validate(data).schema_version == "1.3"

    def test_unsupported_major_version(self) -> None:
        data = make_config()
        data["schema_version"] = "2.0"
        with pytest.raises(PydanticValidationError, match="Unsupported schema version"):
            ShadeSailConfiguration.model_validate(data)

    def test_version_pattern(self) -> None:
        data = make_config()
        data["schema_version"] = "one"
        with pytest.raises(PydanticValidationError):
            ShadeSailConfiguration.model_validate(data)

    def test_unknown_output_format(self) -> None:
        data = make_config()
        data["output"] = {"format": "pdf"}
        with pytest.raises(PydanticValidationError):
            ShadeSailConfiguration.model_validate(data)


class TestLoader:
    """Tests for load_config and load_config_from_dict."""

    def test_load_fixture(self, fixtures_path: Path) -> None:
        config = load_config(fixtures_path / "valid_square.json")
        assert config.sail.corners == 4
        assert config.sail.measurements["AC"] == 5657
        assert config.sail.fabric_color == "Charcoal"

    def test_file_not_found(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path / "missing.json")
        assert exc_info.value.error_type == "file_not_found"

    def test_invalid_json(self, fixtures_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(fixtures_path / "invalid_json.json")
        error = exc_info.value
        assert error.error_type == "json_parse"
        assert error.details[0]["line"] >= 1

    def test_validation_error_paths(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(make_config(measurements={"AB": -5}))
        error = exc_info.value
        assert error.error_type == "validation"
        assert error.details[0]["path"] == "sail.measurements.AB"
        assert "Configuration validation failed" in str(error)

    def test_unknown_field_fixture(self, fixtures_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(fixtures_path / "unknown_field.json")
        assert exc_info.value.details[0]["path"] == "sail.grommets"

    def test_format_json_path(self) -> None:
        assert _format_json_path(("sail", "measurements", "AB")) == "sail.measurements.AB"
        assert _format_json_path(("sail", "anchor_heights", 2)) == "sail.anchor_heights[2]"


class TestAdapter:
    """Tests for conversion to domain objects."""

    def test_config_to_sail(self, fixtures_path: Path) -> None:
        sail = config_to_sail(load_config(fixtures_path / "valid_triangle.json"))
        assert sail.corners == 3
        assert sail.measurements.get("CA") == 5000
        assert sail.anchor_heights == (2400, 2400, 3000)

    def test_config_to_dismissed(self, fixtures_path: Path) -> None:
        config = load_config(fixtures_path / "typo_dismissed.json")
        assert config_to_dismissed(config) == {"AB": 1500}
