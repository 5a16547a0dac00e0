"""Domain layer - measurement, geometry and pricing logic."""

from .entities import SailConfiguration
from .measurements import (
    MeasurementSet,
    diagonal_keys_for,
    edge_keys_for,
    measurement_keys_for,
)
from .services import (
    ShadeCalculation,
    ShadeCalculator,
    compute_shade_calculation,
    detect_typo,
    format_area,
    format_length,
    polygon_area,
    validate_measurement_field,
    validate_polygon,
)
from .value_objects import (
    Currency,
    EdgeType,
    FabricType,
    FieldClass,
    MeasurementOption,
    UnitSystem,
)

__all__ = [
    "Currency",
    "EdgeType",
    "FabricType",
    "FieldClass",
    "MeasurementOption",
    "MeasurementSet",
    "SailConfiguration",
    "ShadeCalculation",
    "ShadeCalculator",
    "UnitSystem",
    "compute_shade_calculation",
    "detect_typo",
    "diagonal_keys_for",
    "edge_keys_for",
    "format_area",
    "format_length",
    "measurement_keys_for",
    "polygon_area",
    "validate_measurement_field",
    "validate_polygon",
]
