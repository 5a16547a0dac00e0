"""Typo heuristics for measurement entry.

Customers regularly type centimeters or meters into a millimeter field,
or feet into an inch field. Each field class has a plausible range and
an ordered table of candidate corrections; the first rule whose input
band contains the value and whose corrected value lands inside the
rule's target range produces a suggestion.

Metric rules operate on the millimeter value as entered. Imperial rules
operate on the value in inches and their suggestion is converted back
to millimeters.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from shadesails.domain.services.units import INCHES_TO_MM, format_length
from shadesails.domain.value_objects import FieldCheck, FieldClass, UnitSystem

MIN_MEASUREMENT_MM: float = 1000
MAX_MEASUREMENT_MM: float = 99999

# Plausible ranges per field class
TYPICAL_EDGE_MM: tuple[float, float] = (1800, 15000)
TYPICAL_HEIGHT_MM: tuple[float, float] = (900, 8000)
TYPICAL_EDGE_INCHES: tuple[float, float] = (79, 591)
TYPICAL_HEIGHT_INCHES: tuple[float, float] = (79, 315)


@dataclass(frozen=True)
class TypoRule:
    """One candidate correction.

    The rule applies when the value lies inside ``[minimum, maximum]``
    (bounds optionally exclusive, ``maximum=None`` for unbounded) and the
    corrected value ``value * multiplier / divisor`` lies inside
    ``[target_min, target_max]``.

    Attributes:
        minimum: Lower bound of the input band.
        maximum: Upper bound of the input band, or None.
        multiplier: Factor applied to the value.
        divisor: Divisor applied to the value.
        target_min: Lowest acceptable corrected value.
        target_max: Highest acceptable corrected value.
        minimum_inclusive: Whether ``minimum`` itself is in the band.
        maximum_inclusive: Whether ``maximum`` itself is in the band.
    """

    minimum: float
    maximum: float | None
    target_min: float
    target_max: float
    multiplier: float = 1.0
    divisor: float = 1.0
    minimum_inclusive: bool = True
    maximum_inclusive: bool = True

    def __post_init__(self) -> None:
        if self.multiplier <= 0 or self.divisor <= 0:
            raise ValueError("multiplier and divisor must be positive")
        if self.maximum is not None and self.maximum < self.minimum:
            raise ValueError("maximum must not be less than minimum")
        if self.target_max < self.target_min:
            raise ValueError("target_max must not be less than target_min")

    def matches(self, value: float) -> bool:
        """True when ``value`` lies inside the rule's input band."""
        if self.minimum_inclusive:
            if value < self.minimum:
                return False
        elif value <= self.minimum:
            return False
        if self.maximum is None:
            return True
        if self.maximum_inclusive:
            return value <= self.maximum
        return value < self.maximum

    def correct(self, value: float) -> float:
        return value * self.multiplier / self.divisor

    def apply(self, value: float) -> float | None:
        """Return the corrected value, or None when the rule does not fire."""
        if not self.matches(value):
            return None
        corrected = self.correct(value)
        if self.target_min <= corrected <= self.target_max:
            return corrected
        return None


def _metric_rules(low: float, high: float, div_from: float) -> tuple[TypoRule, ...]:
    return (
        TypoRule(100000, None, low, high, divisor=100),
        TypoRule(1, 9, low, high, multiplier=1000),
        TypoRule(10, 99, low, high, multiplier=100),
        TypoRule(100, low, low, high, multiplier=10, maximum_inclusive=False),
        TypoRule(100000, None, low, MAX_MEASUREMENT_MM, divisor=10),
        TypoRule(div_from, 99999, low, MAX_MEASUREMENT_MM, divisor=10),
    )


DEFAULT_TYPO_RULES: dict[tuple[UnitSystem, FieldClass], tuple[TypoRule, ...]] = {
    (UnitSystem.METRIC, FieldClass.EDGE): _metric_rules(*TYPICAL_EDGE_MM, div_from=16000),
    (UnitSystem.METRIC, FieldClass.ANCHOR_HEIGHT): _metric_rules(
        *TYPICAL_HEIGHT_MM, div_from=9000
    ),
    (UnitSystem.IMPERIAL, FieldClass.EDGE): (
        TypoRule(10000, None, *TYPICAL_EDGE_INCHES, divisor=100),
        TypoRule(1, 9, *TYPICAL_EDGE_INCHES, multiplier=12),
        TypoRule(10, 50, *TYPICAL_EDGE_INCHES, multiplier=12),
        TypoRule(1000, None, *TYPICAL_EDGE_INCHES, divisor=10, minimum_inclusive=False),
        TypoRule(600, 999, *TYPICAL_EDGE_INCHES, divisor=10),
        TypoRule(51, 78, *TYPICAL_EDGE_INCHES, multiplier=10),
    ),
    (UnitSystem.IMPERIAL, FieldClass.ANCHOR_HEIGHT): (
        TypoRule(10000, None, *TYPICAL_HEIGHT_INCHES, divisor=100),
        TypoRule(1, 9, *TYPICAL_HEIGHT_INCHES, multiplier=12),
        TypoRule(10, 30, *TYPICAL_HEIGHT_INCHES, multiplier=12),
        TypoRule(500, None, *TYPICAL_HEIGHT_INCHES, divisor=10, minimum_inclusive=False),
        TypoRule(316, 499, *TYPICAL_HEIGHT_INCHES, divisor=10),
        TypoRule(31, 78, *TYPICAL_HEIGHT_INCHES, multiplier=10),
    ),
}


@dataclass(frozen=True)
class TypoDetectionConfig:
    """Thresholds and rule tables for typo detection.

    Attributes:
        rules: Ordered correction rules per (unit system, field class).
        min_measurement_mm: Smallest accepted length when no typo is suspected.
        max_measurement_mm: Largest accepted length when no typo is suspected.
    """

    rules: Mapping[tuple[UnitSystem, FieldClass], tuple[TypoRule, ...]] = field(
        default_factory=lambda: dict(DEFAULT_TYPO_RULES), hash=False
    )
    min_measurement_mm: float = MIN_MEASUREMENT_MM
    max_measurement_mm: float = MAX_MEASUREMENT_MM

    def __post_init__(self) -> None:
        if self.min_measurement_mm <= 0:
            raise ValueError("min_measurement_mm must be positive")
        if self.max_measurement_mm <= self.min_measurement_mm:
            raise ValueError("max_measurement_mm must exceed min_measurement_mm")

    def rules_for(self, unit: UnitSystem, field_class: FieldClass) -> tuple[TypoRule, ...]:
        return tuple(self.rules.get((unit, field_class), ()))


DEFAULT_TYPO_CONFIG = TypoDetectionConfig()


def _entered_inches(value_mm: float) -> float:
    # Recover the figure the customer typed before it was stored as mm
    return round(value_mm / INCHES_TO_MM, 6)


def detect_typo(
    value_mm: float,
    unit: UnitSystem,
    field_class: FieldClass,
    config: TypoDetectionConfig | None = None,
) -> float | None:
    """Suggest a corrected length for an implausible entry.

    Args:
        value_mm: Stored value in millimeters.
        unit: Unit system the value was entered in.
        field_class: Edge/diagonal or anchor height.
        config: Rule tables; defaults to the built-in tables.

    Returns:
        The suggested value in millimeters, or None when the entry looks
        plausible (or is not entered).

    Examples:
        >>> detect_typo(50, UnitSystem.METRIC, FieldClass.EDGE)
        5000.0
        >>> detect_typo(5000, UnitSystem.METRIC, FieldClass.EDGE) is None
        True
    """
    if value_mm is None or value_mm <= 0:
        return None
    config = config or DEFAULT_TYPO_CONFIG
    if unit == UnitSystem.IMPERIAL:
        value = _entered_inches(value_mm)
    else:
        value = value_mm
    for rule in config.rules_for(unit, field_class):
        corrected = rule.apply(value)
        if corrected is not None:
            if unit == UnitSystem.IMPERIAL:
                return corrected * INCHES_TO_MM
            return corrected
    return None


def range_error(
    value_mm: float, unit: UnitSystem, config: TypoDetectionConfig | None = None
) -> str | None:
    """Hard range message for a value outside the accepted band, else None."""
    config = config or DEFAULT_TYPO_CONFIG
    imperial = unit == UnitSystem.IMPERIAL
    if value_mm < config.min_measurement_mm:
        if imperial:
            minimum = format_length(config.min_measurement_mm, UnitSystem.IMPERIAL)
            return f"Too small (min {minimum}) - Did you enter feet instead of inches?"
        minimum = format_length(config.min_measurement_mm, UnitSystem.METRIC)
        return f"Too small (min {minimum}) - Did you enter cm instead of mm?"
    if value_mm > config.max_measurement_mm:
        maximum = format_length(config.max_measurement_mm, unit)
        return f"Too large (max {maximum}) - Check your measurement"
    return None


def validate_measurement_field(
    value_mm: float | None,
    unit: UnitSystem,
    field_class: FieldClass,
    dismissed_value: float | None = None,
    config: TypoDetectionConfig | None = None,
) -> FieldCheck:
    """Check one entered value for typos and hard range violations.

    A suggestion suppresses the range error. When ``dismissed_value``
    equals the current value the customer has already rejected the
    suggestion for it, so only the range check applies.

    Non-positive values count as "not entered" and pass.
    """
    if value_mm is None or value_mm <= 0:
        return FieldCheck()
    if dismissed_value is None or dismissed_value != value_mm:
        suggestion = detect_typo(value_mm, unit, field_class, config)
        if suggestion is not None:
            return FieldCheck(suggestion=suggestion)
    return FieldCheck(error=range_error(value_mm, unit, config))
