"""Domain services for shade sail measurement, geometry and pricing.

This package provides:
- Unit conversion and display formatting
- Typo heuristics and whole-form measurement review
- Geometric validation and fan-triangulated area
- The pricing engine and the calculation orchestrator
"""

from .calculator import ShadeCalculator, compute_shade_calculation
from .geometry import (
    GeometryConfig,
    diagonal_range,
    polygon_area,
    triangle_area,
    validate_diagonal,
    validate_polygon,
    validate_triangle,
)
from .measurement_review import (
    MeasurementReview,
    review_anchor_heights,
    review_measurements,
)
from .pricing import PricingConfig, PricingEngine, ShadeCalculation, WeightEstimator
from .typo_detection import (
    TypoDetectionConfig,
    TypoRule,
    detect_typo,
    validate_measurement_field,
)
from .units import (
    dual_length_values,
    format_area,
    format_dual_length,
    format_length,
    to_canonical_mm,
    to_display_unit,
)

__all__ = [
    "GeometryConfig",
    "MeasurementReview",
    "PricingConfig",
    "PricingEngine",
    "ShadeCalculation",
    "ShadeCalculator",
    "TypoDetectionConfig",
    "TypoRule",
    "WeightEstimator",
    "compute_shade_calculation",
    "detect_typo",
    "diagonal_range",
    "dual_length_values",
    "format_area",
    "format_dual_length",
    "format_length",
    "polygon_area",
    "review_anchor_heights",
    "review_measurements",
    "to_canonical_mm",
    "to_display_unit",
    "triangle_area",
    "validate_diagonal",
    "validate_measurement_field",
    "validate_polygon",
    "validate_triangle",
]
