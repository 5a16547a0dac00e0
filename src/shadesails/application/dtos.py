"""Data Transfer Objects for the application layer."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from shadesails.domain import (
    MeasurementSet,
    SailConfiguration,
    ShadeCalculation,
    measurement_keys_for,
)
from shadesails.domain.measurements import SUPPORTED_CORNERS
from shadesails.domain.services import MeasurementReview, to_canonical_mm
from shadesails.domain.services.measurement_review import height_key
from shadesails.domain.value_objects import (
    Currency,
    EdgeType,
    FabricType,
    MeasurementOption,
    UnitSystem,
)


def _choices(enum_type: type) -> list[str]:
    return [member.value for member in enum_type]


@dataclass
class QuoteInput:
    """Input DTO for a quote entered directly rather than from a file.

    Lengths are in the display unit of ``unit``: millimeters for metric,
    inches for imperial.

    ``dismissed_suggestions`` maps a field key (``AB`` or ``height_0``) to
    the value, in the same unit, at which its typo suggestion was dismissed.
    """

    corners: int
    measurements: dict[str, float] = field(default_factory=dict)
    unit: str = UnitSystem.METRIC.value
    fabric: str = FabricType.MONOTEC_370.value
    edge_type: str = EdgeType.WEBBING.value
    measurement_option: str = MeasurementOption.ADJUST.value
    currency: str = Currency.NZD.value
    anchor_heights: list[float] = field(default_factory=list)
    fabric_color: str | None = None
    dismissed_suggestions: dict[str, float] = field(default_factory=dict)

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        if self.corners not in SUPPORTED_CORNERS:
            errors.append(
                f"Corners must be one of {list(SUPPORTED_CORNERS)}, got {self.corners}"
            )
        for name, value, enum_type in (
            ("unit", self.unit, UnitSystem),
            ("fabric", self.fabric, FabricType),
            ("edge_type", self.edge_type, EdgeType),
            ("measurement_option", self.measurement_option, MeasurementOption),
            ("currency", self.currency, Currency),
        ):
            choices = _choices(enum_type)
            if value not in choices:
                errors.append(f"{name} must be one of: {', '.join(choices)}")
        if self.corners in SUPPORTED_CORNERS:
            allowed = measurement_keys_for(self.corners)
            for key in self.measurements:
                if key not in allowed:
                    errors.append(
                        f"Measurement '{key}' is not valid for a {self.corners}-corner "
                        f"sail (valid: {', '.join(allowed)})"
                    )
            if len(self.anchor_heights) > self.corners:
                errors.append(f"At most {self.corners} anchor heights allowed")
            height_keys = [height_key(i) for i in range(self.corners)]
            for key in self.dismissed_suggestions:
                if key not in allowed and key not in height_keys:
                    errors.append(f"Cannot dismiss a suggestion for unknown field '{key}'")
        for key, value in self.measurements.items():
            if not math.isfinite(value) or value < 0:
                errors.append(f"Measurement '{key}' must be a non-negative number")
        for value in self.anchor_heights:
            if not math.isfinite(value) or value < 0:
                errors.append("Anchor heights must be non-negative numbers")
                break
        return errors

    def to_sail_configuration(self) -> SailConfiguration:
        """Convert to a SailConfiguration with lengths in millimeters.

        Call ``validate()`` first; invalid input raises ValueError.
        """
        unit = UnitSystem(self.unit)
        measurements = MeasurementSet(
            corners=self.corners,
            values={
                key: to_canonical_mm(value, unit)
                for key, value in self.measurements.items()
            },
        )
        return SailConfiguration(
            corners=self.corners,
            fabric=FabricType(self.fabric),
            edge_type=EdgeType(self.edge_type),
            measurement_option=MeasurementOption(self.measurement_option),
            unit=unit,
            currency=Currency(self.currency),
            measurements=measurements,
            anchor_heights=tuple(
                to_canonical_mm(height, unit) for height in self.anchor_heights
            ),
            fabric_color=self.fabric_color,
        )

    def dismissed_mm(self) -> dict[str, float]:
        """Dismissed suggestion values converted to millimeters."""
        unit = UnitSystem(self.unit)
        return {
            key: to_canonical_mm(value, unit)
            for key, value in self.dismissed_suggestions.items()
        }


@dataclass
class QuoteOutput:
    """Output DTO containing a calculated quote.

    Attributes:
        calculation: Price, area, weight and sizes. All zero until every
            edge is measured.
        configuration: The sail the quote was computed for, if the input
            was usable.
        geometry_errors: Triangle and diagonal problems. They do not stop
            pricing but must be fixed before the order can be submitted.
        review: Typo suggestions and range errors for entered fields.
        errors: Input errors that prevented a calculation.
    """

    calculation: ShadeCalculation
    configuration: SailConfiguration | None = None
    geometry_errors: list[str] = field(default_factory=list)
    review: MeasurementReview = field(default_factory=MeasurementReview)
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the quote was calculated."""
        return len(self.errors) == 0

    @property
    def can_submit(self) -> bool:
        """True when the quote is priced and nothing blocks ordering."""
        return (
            self.is_valid
            and self.calculation.is_priced
            and not self.geometry_errors
            and not self.review.is_blocked
        )
