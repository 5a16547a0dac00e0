"""Configuration schema for shade sail quote files.

A configuration file describes one sail: its corner count, fabric,
edge construction, manufacturing option, unit system, currency and the
measured lengths (always in millimeters). Pydantic validates structure
and ranges; measurement keys are checked against the corner count.
"""

from __future__ import annotations

import math
from typing import Annotated, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from shadesails.domain.measurements import measurement_keys_for
from shadesails.domain.services.measurement_review import height_key
from shadesails.domain.value_objects import (
    Currency,
    EdgeType,
    FabricType,
    MeasurementOption,
    UnitSystem,
)

# Supported schema versions for configuration files
# Version 1.0: Initial schema with sail measurements and pricing options
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})

Length = Annotated[float, Field(ge=0)]


def _check_finite(values: list[float]) -> None:
    for value in values:
        if not math.isfinite(value):
            raise ValueError("Lengths must be finite numbers")


class SailConfig(BaseModel):
    """Configuration for a single shade sail.

    Attributes:
        corners: Number of fixing points (3 to 6).
        fabric: Fabric type identifier.
        fabric_color: Fabric colour name (optional, carried for export).
        edge_type: "webbing" or "cabled".
        measurement_option: "adjust" or "exact".
        unit: Unit system the customer entered values in.
        currency: Currency code for the quote.
        measurements: Edge and diagonal lengths in millimeters, keyed by
            vertex pair (e.g. "AB", "AC").
        anchor_heights: Fixing point heights in millimeters, in corner order.
        dismissed_suggestions: Field key to the value at which a typo
            suggestion was dismissed.
    """

    model_config = ConfigDict(extra="forbid")

    corners: int = Field(..., ge=3, le=6)
    fabric: FabricType = FabricType.MONOTEC_370
    fabric_color: str | None = None
    edge_type: EdgeType = EdgeType.WEBBING
    measurement_option: MeasurementOption = MeasurementOption.ADJUST
    unit: UnitSystem = UnitSystem.METRIC
    currency: Currency = Currency.NZD
    measurements: dict[str, Length] = Field(default_factory=dict)
    anchor_heights: list[Length] = Field(default_factory=list, max_length=6)
    dismissed_suggestions: dict[str, float] = Field(default_factory=dict)

    @field_validator("measurements")
    @classmethod
    def validate_measurements_finite(cls, v: dict[str, float]) -> dict[str, float]:
        _check_finite(list(v.values()))
        return v

    @field_validator("anchor_heights")
    @classmethod
    def validate_heights_finite(cls, v: list[float]) -> list[float]:
        _check_finite(v)
        return v

    @model_validator(mode="after")
    def validate_keys_match_corners(self) -> SailConfig:
        """Ensure measurement keys and heights fit the corner count."""
        allowed = measurement_keys_for(self.corners)
        unknown = sorted(set(self.measurements) - set(allowed))
        if unknown:
            raise ValueError(
                f"Measurements {unknown} are not valid for a {self.corners}-corner "
                f"sail. Valid keys: {allowed}"
            )
        if len(self.anchor_heights) > self.corners:
            raise ValueError(
                f"Expected at most {self.corners} anchor heights, "
                f"got {len(self.anchor_heights)}"
            )
        dismissible = set(allowed) | {height_key(i) for i in range(self.corners)}
        stray = sorted(set(self.dismissed_suggestions) - dismissible)
        if stray:
            raise ValueError(f"Dismissed suggestions for unknown fields: {stray}")
        return self


class OutputConfig(BaseModel):
    """Configuration for quote output.

    Attributes:
        format: "summary" for a text summary, "json" for a JSON document.
    """

    model_config = ConfigDict(extra="forbid")

    format: Literal["summary", "json"] = "summary"


class ShadeSailConfiguration(BaseModel):
    """Root configuration model for a shade sail quote.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        sail: Sail options and measurements
        output: Output format configuration

    Example:
        >>> config = ShadeSailConfiguration(
        ...     schema_version="1.0",
        ...     sail=SailConfig(corners=3, measurements={"AB": 3000}),
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    sail: SailConfig
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported.

        Newer minor versions of a supported major version are accepted.
        """
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )


__all__ = [
    "SUPPORTED_VERSIONS",
    "OutputConfig",
    "SailConfig",
    "ShadeSailConfiguration",
]
