"""Unit conversion and length/area display strings.

All functions are pure and total over finite non-negative numbers.
Validation of the inputs is the caller's responsibility.
"""

from __future__ import annotations

import math

from shadesails.domain.value_objects import UnitSystem

MM_TO_INCHES: float = 0.0393701
INCHES_TO_MM: float = 25.4
INCHES_PER_FOOT: int = 12
SQ_INCHES_PER_SQ_FOOT: int = 144
MM2_PER_M2: float = 1_000_000.0


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves rounding up."""
    return math.floor(value + 0.5)


def to_display_unit(mm: float, system: UnitSystem) -> float:
    """Convert millimeters to the display unit (mm or inches)."""
    if system == UnitSystem.IMPERIAL:
        return mm * MM_TO_INCHES
    return mm


def to_canonical_mm(value: float, system: UnitSystem) -> float:
    """Convert a value entered in the display unit to millimeters."""
    if system == UnitSystem.IMPERIAL:
        return value * INCHES_TO_MM
    return value


def _feet_and_inches(inches: float) -> str:
    if inches < INCHES_PER_FOOT:
        return f'{inches:.1f}"'
    feet = math.floor(inches / INCHES_PER_FOOT)
    remainder = inches % INCHES_PER_FOOT
    rendered = f"{remainder:.1f}"
    if float(rendered) > 0:
        return f"{feet}'{rendered}\""
    return f"{feet}'"


def format_length(mm: float, system: UnitSystem, raw_inches_only: bool = False) -> str:
    """Render a length for display.

    Metric renders whole millimeters. Imperial renders feet and inches
    (``5'3.2"``), or plain inches when ``raw_inches_only`` is set, which
    is how typo suggestions are presented.

    Examples:
        >>> format_length(4000, UnitSystem.METRIC)
        '4000mm'
        >>> format_length(1000, UnitSystem.IMPERIAL)
        '3\\'3.4"'
    """
    if system == UnitSystem.IMPERIAL:
        inches = mm * MM_TO_INCHES
        if raw_inches_only:
            return f'{inches:.1f}"'
        return _feet_and_inches(inches)
    return f"{round_half_up(mm)}mm"


def format_area(mm2: float, system: UnitSystem) -> str:
    """Render an area given in square millimeters.

    Metric renders square meters to two decimals. Imperial renders
    square feet, or square inches below one square foot.
    """
    if system == UnitSystem.IMPERIAL:
        sq_inches = mm2 * (MM_TO_INCHES * MM_TO_INCHES)
        sq_feet = sq_inches / SQ_INCHES_PER_SQ_FOOT
        if sq_feet >= 1:
            return f"{sq_feet:.1f} ft²"
        return f"{round_half_up(sq_inches)} in²"
    return f"{mm2 / MM2_PER_M2:.2f} m²"


def format_dual_length(mm: float, original_unit: UnitSystem) -> str:
    """Render a length in both systems for fulfilment records.

    Metric comes first. A trailing ``*`` marks the system the customer
    originally entered the value in when that was imperial.

    Examples:
        >>> format_dual_length(4000, UnitSystem.IMPERIAL)
        '4000mm (13\\'1.5" *)'
    """
    marker = " *" if original_unit == UnitSystem.IMPERIAL else ""
    imperial = _feet_and_inches(mm * MM_TO_INCHES)
    return f"{round_half_up(mm)}mm ({imperial}{marker})"


def dual_length_values(mm: float) -> dict[str, str | float]:
    """Both renderings of a length plus their raw numeric values."""
    inches = mm * MM_TO_INCHES
    metric_raw = round_half_up(mm)
    return {
        "metric": f"{metric_raw}mm",
        "imperial": _feet_and_inches(inches),
        "metric_raw": metric_raw,
        "imperial_raw": round(inches, 2),
    }
