"""Geometric validation and area for 3-6 corner shade sails.

A sail is triangulated as a fan from vertex A using the measured
diagonals (ABC, ACD, ADE, AEF). Each wedge is checked with the triangle
inequality and its area computed with Heron's formula. Quadrilaterals
are additionally checked across the BD diagonal, and every diagonal is
checked against the range its neighbouring edge chains allow.

The triangulation tables are fixed per corner count. This is not a
general polygon algorithm.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Mapping

from shadesails.domain.measurements import SUPPORTED_CORNERS, edge_keys_for, length_of
from shadesails.domain.services.units import MM2_PER_M2
from shadesails.domain.value_objects import (
    DiagonalCheck,
    DiagonalRange,
    GeometryCheck,
    TriangleCheck,
)

# (wedge name, (side, side, side)) in the order the sides are checked
AREA_WEDGES: dict[int, tuple[tuple[str, tuple[str, str, str]], ...]] = {
    3: (("ABC", ("AB", "BC", "CA")),),
    4: (
        ("ABC", ("AB", "BC", "AC")),
        ("ACD", ("AC", "CD", "DA")),
    ),
    5: (
        ("ABC", ("AB", "BC", "AC")),
        ("ACD", ("AC", "CD", "AD")),
        ("ADE", ("AD", "DE", "EA")),
    ),
    6: (
        ("ABC", ("AB", "BC", "AC")),
        ("ACD", ("AC", "CD", "AD")),
        ("ADE", ("AD", "DE", "AE")),
        ("AEF", ("AE", "EF", "FA")),
    ),
}

VALIDATION_WEDGES: dict[int, tuple[tuple[str, tuple[str, str, str]], ...]] = {
    **AREA_WEDGES,
    4: AREA_WEDGES[4]
    + (
        ("ABD", ("BD", "AB", "DA")),
        ("BCD", ("BD", "BC", "CD")),
    ),
}

# Diagonal -> (adjacent side 1, adjacent side 2, opposite 1, opposite 2).
# Each entry is an edge chain whose lengths are summed.
Chain = tuple[str, ...]
DIAGONAL_CHAINS: dict[int, tuple[tuple[str, tuple[Chain, Chain, Chain, Chain]], ...]] = {
    3: (),
    4: (
        ("AC", (("AB",), ("BC",), ("CD",), ("DA",))),
        ("BD", (("BC",), ("CD",), ("DA",), ("AB",))),
    ),
    5: (
        ("AC", (("AB",), ("BC",), ("DE",), ("EA",))),
        ("AD", (("AB",), ("BC", "CD"), ("DE",), ("EA",))),
        ("BD", (("BC",), ("CD",), ("EA",), ("AB",))),
        ("BE", (("BC",), ("CD", "DE"), ("EA",), ("AB",))),
        ("CE", (("CD",), ("DE",), ("AB",), ("BC",))),
    ),
    6: (
        ("AC", (("AB",), ("BC",), ("DE",), ("EF", "FA"))),
        ("AD", (("AB",), ("BC", "CD"), ("DE",), ("EF", "FA"))),
        ("AE", (("AB",), ("BC", "CD", "DE"), ("EF",), ("FA",))),
        ("BD", (("BC",), ("CD",), ("EF",), ("FA", "AB"))),
        ("BE", (("BC",), ("CD", "DE"), ("EF",), ("FA", "AB"))),
        ("BF", (("BC",), ("CD", "DE", "EF"), ("FA",), ("AB",))),
        ("CE", (("CD",), ("DE",), ("FA",), ("AB", "BC"))),
        ("CF", (("CD",), ("DE", "EF"), ("FA",), ("AB", "BC"))),
        ("DF", (("DE",), ("EF",), ("AB",), ("BC", "CD"))),
    ),
}

INVALID_CORNERS = "Invalid number of corners"


@dataclass(frozen=True)
class GeometryConfig:
    """Tolerances for geometric validation.

    Attributes:
        triangle_tolerance: Fraction by which the longest side may exceed
            the sum of the other two before a wedge is rejected.
        diagonal_tolerance: Fraction by which a diagonal may fall outside
            its feasible range before it is rejected.
    """

    triangle_tolerance: float = 0.0
    diagonal_tolerance: float = 0.05

    def __post_init__(self) -> None:
        if not 0 <= self.triangle_tolerance < 1:
            raise ValueError("triangle_tolerance must be in [0, 1)")
        if not 0 <= self.diagonal_tolerance < 1:
            raise ValueError("diagonal_tolerance must be in [0, 1)")


DEFAULT_GEOMETRY_CONFIG = GeometryConfig()


def triangle_area(a: float, b: float, c: float) -> float:
    """Area of a triangle from its side lengths (Heron's formula).

    Returns 0 for non-positive sides, sides violating the triangle
    inequality, or a negative radicand from rounding. Never negative.

    Examples:
        >>> triangle_area(3000, 4000, 5000)
        6000000.0
    """
    if a <= 0 or b <= 0 or c <= 0:
        return 0.0
    if a + b <= c or a + c <= b or b + c <= a:
        return 0.0
    s = (a + b + c) / 2
    radicand = s * (s - a) * (s - b) * (s - c)
    if radicand < 0:
        return 0.0
    return math.sqrt(radicand)


def validate_triangle(
    a: float, b: float, c: float, tolerance: float = 0.0
) -> TriangleCheck:
    """Check the triangle inequality for three side lengths.

    Args:
        a: First side in millimeters.
        b: Second side in millimeters.
        c: Third side in millimeters.
        tolerance: Fractional slack on the longest side. A violation is
            reported only when a pair sums to no more than
            ``side * (1 - tolerance)``.

    Returns:
        TriangleCheck naming the violated inequality and the shortfall.
    """
    if a <= 0 or b <= 0 or c <= 0:
        return TriangleCheck(is_valid=False, error="All sides must be positive")

    factor = 1 - tolerance
    for x, y, z in ((a, b, c), (a, c, b), (b, c, a)):
        if x + y <= z * factor:
            return TriangleCheck(
                is_valid=False,
                error=(
                    f"Triangle inequality violated: {x:.0f} + {y:.0f} = {x + y:.0f} "
                    f"≤ {z:.0f} (short by {z - (x + y):.0f}mm)"
                ),
            )
    return TriangleCheck(is_valid=True)


def diagonal_range(
    side1: float,
    side2: float,
    opposite1: float,
    opposite2: float,
    side2_edges: int = 1,
) -> DiagonalRange:
    """Feasible range for a diagonal given its adjacent and opposite chains.

    The diagonal is at most the sum of the adjacent chains and at most the
    sum of the opposite chains. When both adjacent sides are single edges
    they close a triangle with the diagonal, so it is at least their
    difference. A chain of several edges can fold, which only bounds the
    diagonal below by ``side1 - side2``.
    """
    if side2_edges > 1:
        minimum = max(0.0, side1 - side2)
    else:
        minimum = abs(side1 - side2)
    return DiagonalRange(
        min=minimum,
        max=min(side1 + side2, opposite1 + opposite2),
    )


def validate_diagonal(
    diagonal: float,
    side1: float,
    side2: float,
    opposite1: float,
    opposite2: float,
    name: str,
    tolerance: float = 0.05,
    side2_edges: int = 1,
) -> DiagonalCheck:
    """Check a diagonal against the range allowed by its edge chains."""
    if diagonal <= 0:
        return DiagonalCheck(is_valid=False, error="Diagonal must be positive")

    feasible = diagonal_range(side1, side2, opposite1, opposite2, side2_edges)
    if diagonal < feasible.min * (1 - tolerance):
        return DiagonalCheck(
            is_valid=False,
            error=(
                f"Diagonal {name} ({diagonal:.0f}mm) is too short. With your edge "
                f"measurements, it should be at least {feasible.min:.0f}mm."
            ),
            suggested_range=feasible,
        )
    if diagonal > feasible.max * (1 + tolerance):
        return DiagonalCheck(
            is_valid=False,
            error=(
                f"Diagonal {name} ({diagonal:.0f}mm) is too long. With your edge "
                f"measurements, it cannot exceed {feasible.max:.0f}mm."
            ),
            suggested_range=feasible,
        )
    return DiagonalCheck(is_valid=True)


def _chain_length(measurements: Mapping[str, float], chain: Chain) -> float:
    return sum(length_of(measurements, key) for key in chain)


def _all_present(measurements: Mapping[str, float], keys: tuple[str, ...]) -> bool:
    return all(length_of(measurements, key) > 0 for key in keys)


def validate_polygon(
    measurements: Mapping[str, float],
    corners: int,
    config: GeometryConfig | None = None,
) -> GeometryCheck:
    """Check a sail's measurements for geometric feasibility.

    Diagonals are checked first, each only once it and every edge have
    been entered. Then each triangulation wedge whose three lengths are
    present is checked; wedges with missing data are skipped.

    Args:
        measurements: Measurement key to length in millimeters. Accepts a
            plain mapping or a MeasurementSet.
        corners: Number of sail corners.
        config: Validation tolerances.

    Returns:
        GeometryCheck with messages in check order. Wedge messages are
        prefixed with the wedge name, e.g. ``"Triangle ABC: ..."``.
    """
    if corners not in SUPPORTED_CORNERS:
        return GeometryCheck(errors=(INVALID_CORNERS,))
    config = config or DEFAULT_GEOMETRY_CONFIG
    errors: list[str] = []

    edges_present = _all_present(measurements, tuple(edge_keys_for(corners)))
    for name, chains in DIAGONAL_CHAINS[corners]:
        diagonal = length_of(measurements, name)
        if diagonal <= 0 or not edges_present:
            continue
        lengths = [_chain_length(measurements, chain) for chain in chains]
        check = validate_diagonal(
            diagonal,
            *lengths,
            name=name,
            tolerance=config.diagonal_tolerance,
            side2_edges=len(chains[1]),
        )
        if not check.is_valid:
            errors.append(check.error or f"Diagonal {name} is invalid")

    for name, sides in VALIDATION_WEDGES[corners]:
        if not _all_present(measurements, sides):
            continue
        a, b, c = (length_of(measurements, key) for key in sides)
        check = validate_triangle(a, b, c, tolerance=config.triangle_tolerance)
        if not check.is_valid:
            errors.append(f"Triangle {name}: {check.error}")

    return GeometryCheck(errors=tuple(errors))


def polygon_area_mm2(measurements: Mapping[str, float], corners: int) -> float:
    """Sum of fan wedge areas in square millimeters."""
    if corners not in SUPPORTED_CORNERS:
        return 0.0
    total = 0.0
    for _, sides in AREA_WEDGES[corners]:
        if _all_present(measurements, sides):
            total += triangle_area(*(length_of(measurements, key) for key in sides))
    return total


def polygon_area(measurements: Mapping[str, float], corners: int) -> float:
    """Sail area in square meters.

    Wedges lacking a length contribute 0, so a partially measured sail
    yields an under-estimate rather than an error.

    Examples:
        >>> polygon_area({"AB": 3000, "BC": 4000, "CA": 5000}, 3)
        6.0
    """
    return polygon_area_mm2(measurements, corners) / MM2_PER_M2
