"""Value objects for the shade sail domain.

This module provides the enums and immutable result types used
throughout the measurement, geometry and pricing services.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class UnitSystem(str, Enum):
    """Unit system used to display and enter measurements.

    Storage is always millimeters; the unit system only affects
    conversion of raw input and rendering of lengths.
    """

    METRIC = "metric"
    IMPERIAL = "imperial"


class FieldClass(str, Enum):
    """Class of a measurement field, selecting its plausible range."""

    EDGE = "edge"
    ANCHOR_HEIGHT = "anchor_height"


class FabricType(str, Enum):
    """Shade cloth fabrics offered by the configurator."""

    MONOTEC_370 = "monotec370"
    EXTRABLOCK_330 = "extrablock330"
    SHADETEC_320 = "shadetec320"


class EdgeType(str, Enum):
    """Edge construction of the sail."""

    WEBBING = "webbing"
    CABLED = "cabled"


class MeasurementOption(str, Enum):
    """Manufacturing option for the finished sail.

    Attributes:
        ADJUST: Sail is made undersized for on-site tensioning and ships
            with tensioning hardware.
        EXACT: Sail is made to the stated dimensions; no hardware.
    """

    ADJUST = "adjust"
    EXACT = "exact"


class Currency(str, Enum):
    """Currencies a quote can be priced in. NZD is the base currency."""

    NZD = "NZD"
    USD = "USD"
    AUD = "AUD"
    GBP = "GBP"
    EUR = "EUR"
    CAD = "CAD"
    AED = "AED"


@dataclass(frozen=True)
class FabricSpec:
    """Catalog entry for a fabric.

    Attributes:
        fabric_type: Fabric identifier.
        label: Display name.
        weight_per_sqm: Fabric weight in grams per square meter.
    """

    fabric_type: FabricType
    label: str
    weight_per_sqm: float

    def __post_init__(self) -> None:
        if self.weight_per_sqm <= 0:
            raise ValueError("weight_per_sqm must be positive")


@dataclass(frozen=True)
class FieldCheck:
    """Outcome of checking a single measurement field.

    At most one of ``error`` and ``suggestion`` is set: a typo
    suggestion always suppresses the hard range error.

    Attributes:
        error: Blocking range error message, if any.
        suggestion: Suggested corrected value in millimeters, if any.
    """

    error: str | None = None
    suggestion: float | None = None

    def __post_init__(self) -> None:
        if self.error is not None and self.suggestion is not None:
            raise ValueError("A field cannot carry both an error and a suggestion")

    @property
    def ok(self) -> bool:
        """True when the field has neither an error nor a pending suggestion."""
        return self.error is None and self.suggestion is None

    @property
    def has_suggestion(self) -> bool:
        return self.suggestion is not None


@dataclass(frozen=True)
class TriangleCheck:
    """Result of a triangle inequality check."""

    is_valid: bool
    error: str | None = None


@dataclass(frozen=True)
class DiagonalRange:
    """Feasible length range for a diagonal, in millimeters."""

    min: float
    max: float


@dataclass(frozen=True)
class DiagonalCheck:
    """Result of checking a diagonal against its edge chains."""

    is_valid: bool
    error: str | None = None
    suggested_range: DiagonalRange | None = None


@dataclass(frozen=True)
class GeometryCheck:
    """Aggregated geometric validation result for a polygon.

    Attributes:
        errors: Wedge-level and diagonal-level messages, in check order.
    """

    errors: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_valid(self) -> bool:
        return not self.errors
