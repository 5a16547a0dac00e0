"""Validation structures and measurement checks for quote configurations.

Schema validation (types, ranges, keys) is handled by Pydantic. This
module adds the checks that need domain knowledge: typo suggestions and
hard range errors per field, missing edges, the maximum perimeter,
anchor heights and geometric feasibility.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from shadesails.application.config.adapter import config_to_dismissed, config_to_sail
from shadesails.application.config.schema import ShadeSailConfiguration
from shadesails.domain.measurements import diagonal_keys_for
from shadesails.domain.services import (
    GeometryConfig,
    MeasurementReview,
    TypoDetectionConfig,
    format_length,
    review_anchor_heights,
    review_measurements,
    validate_polygon,
)
from shadesails.domain.services.measurement_review import (
    ANCHOR_HEIGHTS_KEY,
    PENDING_SUGGESTIONS,
    PERIMETER_KEY,
    height_key,
)
from shadesails.domain.value_objects import UnitSystem

MEASUREMENTS_PATH = "sail.measurements"
ANCHOR_HEIGHTS_PATH = "sail.anchor_heights"


@dataclass
class ValidationError:
    """Represents a blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "sail.measurements.AB")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """Represents a non-blocking validation warning.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class TypoSuggestion:
    """A suspected unit-entry typo awaiting the customer's decision.

    Attributes:
        path: JSON path to the field
        value: Entered value in millimeters
        suggested_value: Suggested corrected value in millimeters
        message: Human-readable prompt
    """

    path: str
    value: float
    suggested_value: float
    message: str


@dataclass
class ValidationResult:
    """Container for validation errors, warnings and typo suggestions.

    Attributes:
        errors: List of blocking validation errors
        warnings: List of non-blocking validation warnings
        suggestions: List of pending typo suggestions
    """

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)
    suggestions: list[TypoSuggestion] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the configuration has no blocking errors."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def has_suggestions(self) -> bool:
        return len(self.suggestions) > 0

    @property
    def exit_code(self) -> int:
        """Get the CLI exit code based on validation status.

        Returns:
            0 if valid with no warnings or suggestions
            1 if there are errors
            2 if valid but has warnings
            3 if valid but typo suggestions are pending
        """
        if self.errors:
            return 1
        if self.suggestions:
            return 3
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> ValidationResult:
        """Add a validation error and return self for chaining."""
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> ValidationResult:
        """Add a validation warning and return self for chaining."""
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def add_suggestion(
        self, path: str, value: float, suggested_value: float, message: str
    ) -> ValidationResult:
        """Add a typo suggestion and return self for chaining."""
        self.suggestions.append(
            TypoSuggestion(
                path=path, value=value, suggested_value=suggested_value, message=message
            )
        )
        return self

    def merge(self, other: ValidationResult) -> ValidationResult:
        """Merge another ValidationResult into this one."""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        self.suggestions.extend(other.suggestions)
        return self


def suggestion_message(suggested_mm: float, unit: UnitSystem) -> str:
    """Prompt shown next to a field with a suspected typo."""
    shown = format_length(
        suggested_mm, unit, raw_inches_only=unit == UnitSystem.IMPERIAL
    )
    return f"Did you mean {shown}?"


def _field_path(key: str) -> str:
    if key == PERIMETER_KEY:
        return MEASUREMENTS_PATH
    if key == ANCHOR_HEIGHTS_KEY:
        return ANCHOR_HEIGHTS_PATH
    if key.startswith("height_"):
        return f"{ANCHOR_HEIGHTS_PATH}[{key.removeprefix('height_')}]"
    return f"{MEASUREMENTS_PATH}.{key}"


def review_to_result(
    review: MeasurementReview,
    values: dict[str, float],
    unit: UnitSystem,
) -> ValidationResult:
    """Convert a MeasurementReview into a ValidationResult.

    Args:
        review: Review of measurements and/or heights.
        values: Field key to entered value in millimeters.
        unit: Unit system the values were entered in.
    """
    result = ValidationResult()
    for key, message in review.errors.items():
        result.add_error(_field_path(key), message, values.get(key))
    for key, suggested in review.suggestions.items():
        result.add_suggestion(
            _field_path(key),
            values.get(key, 0.0),
            suggested,
            suggestion_message(suggested, unit),
        )
    return result


def check_missing_diagonals(config: ShadeSailConfiguration) -> ValidationResult:
    """Warn about diagonals that were not measured.

    Area is computed from the fan diagonals; without them the area (and
    so the shipping weight) is under-estimated and the sail shape cannot
    be confirmed.
    """
    result = ValidationResult()
    sail = config.sail
    for key in diagonal_keys_for(sail.corners):
        if sail.measurements.get(key, 0) <= 0:
            result.add_warning(
                path=f"{MEASUREMENTS_PATH}.{key}",
                message=f"Diagonal {key} has not been measured",
                suggestion="Measure all diagonals so the sail shape can be confirmed",
            )
    return result


def validate_config(
    config: ShadeSailConfiguration,
    typo_config: TypoDetectionConfig | None = None,
    geometry_config: GeometryConfig | None = None,
) -> ValidationResult:
    """Perform full validation of a shade sail configuration.

    Args:
        config: A ShadeSailConfiguration instance (already validated by Pydantic)
        typo_config: Typo rule tables
        geometry_config: Geometric validation tolerances

    Returns:
        ValidationResult containing errors, warnings and typo suggestions
    """
    sail = config_to_sail(config)
    dismissed = config_to_dismissed(config)

    review = review_measurements(
        sail.measurements, sail.unit, dismissed=dismissed, config=typo_config
    )
    values: dict[str, float] = sail.measurements.as_dict()
    if sail.anchor_heights:
        review = review.merge(
            review_anchor_heights(
                sail.anchor_heights,
                sail.corners,
                sail.unit,
                dismissed=dismissed,
                config=typo_config,
            )
        )
        values.update(
            {height_key(i): height for i, height in enumerate(sail.anchor_heights)}
        )

    result = review_to_result(review, values, sail.unit)

    geometry = validate_polygon(sail.measurements, sail.corners, geometry_config)
    for message in geometry.errors:
        result.add_error(MEASUREMENTS_PATH, message)

    result.merge(check_missing_diagonals(config))
    return result


__all__ = [
    "PENDING_SUGGESTIONS",
    "TypoSuggestion",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "check_missing_diagonals",
    "review_to_result",
    "suggestion_message",
    "validate_config",
]
