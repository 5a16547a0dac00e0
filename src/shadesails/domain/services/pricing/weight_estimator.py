"""Shipping weight estimation."""

from __future__ import annotations

from shadesails.domain.services.units import round_half_up
from shadesails.domain.value_objects import EdgeType, FabricType, MeasurementOption

from .constants import (
    ADJUST_HARDWARE_WEIGHT_G,
    CORNER_WEIGHT_G,
    EDGE_WEIGHT_G_PER_M,
    get_fabric,
)


class WeightEstimator:
    """Estimates the packed weight of a finished sail.

    Weight is the sum of:
        - fabric weight per square meter times area
        - 200 g per corner fixing
        - edge weight per whole meter of perimeter (100 g/m webbing,
          140 g/m cabled), perimeter rounded half-up
        - 380 g per corner of tensioning hardware for the adjust option
    """

    def estimate(
        self,
        area_m2: float,
        perimeter_m: float,
        corners: int,
        fabric: FabricType,
        edge_type: EdgeType,
        measurement_option: MeasurementOption,
    ) -> float:
        """Return the estimated weight in grams."""
        fabric_weight = get_fabric(fabric).weight_per_sqm * area_m2
        corner_weight = corners * CORNER_WEIGHT_G
        edge_weight = round_half_up(perimeter_m) * EDGE_WEIGHT_G_PER_M[edge_type]
        hardware_weight = (
            corners * ADJUST_HARDWARE_WEIGHT_G
            if measurement_option == MeasurementOption.ADJUST
            else 0
        )
        return fabric_weight + corner_weight + edge_weight + hardware_weight
