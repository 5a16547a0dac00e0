"""Whole-form review of entered measurements.

Aggregates per-field typo suggestions and range errors for a
Measurement Set and for anchor heights, and answers whether the
customer may proceed. Suggestions are advisory but still block
progression until they are accepted, dismissed or the value changes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Sequence

from shadesails.domain.measurements import MeasurementSet, measurement_keys_for
from shadesails.domain.services.typo_detection import (
    TypoDetectionConfig,
    validate_measurement_field,
)
from shadesails.domain.value_objects import FieldClass, UnitSystem

MAX_PERIMETER_M: float = 50.0
METERS_TO_FEET: float = 3.28084

MEASUREMENT_REQUIRED = "Measurement required"
HEIGHT_REQUIRED = "Height measurement required"
HEIGHTS_INCOMPLETE = "All anchor point heights are required"
PENDING_SUGGESTIONS = "Please address all suggested corrections before continuing."

PERIMETER_KEY = "perimeter"
ANCHOR_HEIGHTS_KEY = "anchor_heights"


def height_key(index: int) -> str:
    """Field key for the anchor height at a zero-based corner index."""
    return f"height_{index}"


@dataclass(frozen=True)
class MeasurementReview:
    """Errors and typo suggestions for a set of fields.

    Attributes:
        errors: Field key to blocking error message.
        suggestions: Field key to suggested corrected value in millimeters.
    """

    errors: Mapping[str, str] = field(default_factory=dict, hash=False)
    suggestions: Mapping[str, float] = field(default_factory=dict, hash=False)

    @property
    def is_blocked(self) -> bool:
        """True when any error or pending suggestion prevents progression."""
        return bool(self.errors) or bool(self.suggestions)

    @property
    def messages(self) -> list[str]:
        """Human-readable messages, including the pending-suggestions notice."""
        messages = [f"{key}: {message}" for key, message in self.errors.items()]
        if self.suggestions:
            messages.append(PENDING_SUGGESTIONS)
        return messages

    def merge(self, other: MeasurementReview) -> MeasurementReview:
        return MeasurementReview(
            errors={**self.errors, **other.errors},
            suggestions={**self.suggestions, **other.suggestions},
        )


def perimeter_error(perimeter_m: float, unit: UnitSystem) -> str | None:
    """Message for a sail whose perimeter exceeds the manufacturable maximum."""
    if perimeter_m <= MAX_PERIMETER_M:
        return None
    if unit == UnitSystem.IMPERIAL:
        perimeter_ft = perimeter_m * METERS_TO_FEET
        max_ft = MAX_PERIMETER_M * METERS_TO_FEET
        return (
            f"Shade sail is too large ({perimeter_ft:.1f}ft perimeter). "
            f"Maximum allowed is {max_ft:.0f}ft. Please re-check your measurements."
        )
    return (
        f"Shade sail is too large ({perimeter_m:.1f}m perimeter). "
        f"Maximum allowed is {MAX_PERIMETER_M:.0f}m. Please re-check your measurements."
    )


def review_measurements(
    measurements: MeasurementSet,
    unit: UnitSystem,
    dismissed: Mapping[str, float] | None = None,
    config: TypoDetectionConfig | None = None,
) -> MeasurementReview:
    """Review every edge and diagonal of a Measurement Set.

    Args:
        measurements: The entered lengths.
        unit: Unit system the customer entered values in.
        dismissed: Field key to the value at which the customer dismissed
            a typo suggestion.
        config: Typo rule tables.

    Returns:
        A MeasurementReview with range errors, typo suggestions, a
        "Measurement required" error per missing edge and, when the
        perimeter exceeds 50 m, a ``perimeter`` error.
    """
    dismissed = dismissed or {}
    errors: dict[str, str] = {}
    suggestions: dict[str, float] = {}

    perimeter_message = perimeter_error(measurements.perimeter_mm / 1000, unit)
    if perimeter_message:
        errors[PERIMETER_KEY] = perimeter_message

    for key in measurement_keys_for(measurements.corners):
        check = validate_measurement_field(
            measurements.get(key),
            unit,
            FieldClass.EDGE,
            dismissed_value=dismissed.get(key),
            config=config,
        )
        if check.suggestion is not None:
            suggestions[key] = check.suggestion
        elif check.error:
            errors[key] = check.error

    for key in measurements.missing_edges():
        errors[key] = MEASUREMENT_REQUIRED

    return MeasurementReview(errors=errors, suggestions=suggestions)


def review_anchor_heights(
    heights: Sequence[float],
    corners: int,
    unit: UnitSystem,
    dismissed: Mapping[str, float] | None = None,
    config: TypoDetectionConfig | None = None,
) -> MeasurementReview:
    """Review anchor heights, one per corner, keyed ``height_<index>``."""
    dismissed = dismissed or {}
    errors: dict[str, str] = {}
    suggestions: dict[str, float] = {}

    for index, height in enumerate(heights):
        key = height_key(index)
        check = validate_measurement_field(
            height,
            unit,
            FieldClass.ANCHOR_HEIGHT,
            dismissed_value=dismissed.get(key),
            config=config,
        )
        if check.suggestion is not None:
            suggestions[key] = check.suggestion
        elif check.error:
            errors[key] = check.error

    if len(heights) != corners:
        errors[ANCHOR_HEIGHTS_KEY] = HEIGHTS_INCOMPLETE
    else:
        for index, height in enumerate(heights):
            if height <= 0:
                errors[height_key(index)] = HEIGHT_REQUIRED

    return MeasurementReview(errors=errors, suggestions=suggestions)
