"""Calculation orchestrator.

Turns a SailConfiguration into a ShadeCalculation by running the area
engine, the pricing engine and the weight estimator. Pure: the result
depends only on the configuration and the pricing config.
"""

from __future__ import annotations

from shadesails.domain.entities import SailConfiguration

from .geometry import polygon_area
from .pricing import (
    PricingConfig,
    PricingEngine,
    ShadeCalculation,
    WeightEstimator,
    adjust_perimeter,
)

MM_PER_M: float = 1000.0


class ShadeCalculator:
    """Computes the full calculation snapshot for a sail.

    Args:
        pricing_config: Markups and exchange rates for the pricing engine.
    """

    def __init__(self, pricing_config: PricingConfig | None = None) -> None:
        self.pricing_engine = PricingEngine(pricing_config)
        self.weight_estimator = WeightEstimator()

    def calculate(self, config: SailConfiguration) -> ShadeCalculation:
        """Compute area, perimeter, price, sizes and weight.

        Returns an all-zero result until every edge has a positive
        length. Diagonals only affect area; a quadrilateral without AC
        prices normally with a partial (under-estimated) area.
        """
        measurements = config.measurements
        if not measurements.is_complete_for_pricing:
            return ShadeCalculation.zero(config.currency)

        area = polygon_area(measurements, config.corners)
        perimeter_m = measurements.perimeter_mm / MM_PER_M
        adjusted = adjust_perimeter(perimeter_m)

        breakdown = self.pricing_engine.price(
            adjusted,
            config.fabric,
            config.edge_type,
            config.measurement_option,
            config.corners,
            config.currency,
        )
        weight = self.weight_estimator.estimate(
            area,
            perimeter_m,
            config.corners,
            config.fabric,
            config.edge_type,
            config.measurement_option,
        )

        return ShadeCalculation(
            area=area,
            perimeter=perimeter_m,
            adjusted_perimeter=adjusted,
            fabric_cost=breakdown.fabric_cost,
            edge_cost=breakdown.edge_cost,
            hardware_cost=breakdown.hardware_cost,
            total_price=breakdown.total_price,
            webbing_width=self.pricing_engine.webbing_width(adjusted, config.edge_type),
            wire_thickness=self.pricing_engine.wire_thickness(adjusted, config.edge_type),
            total_weight_grams=weight,
            currency=config.currency,
        )


def compute_shade_calculation(
    config: SailConfiguration, pricing_config: PricingConfig | None = None
) -> ShadeCalculation:
    """Compute the calculation snapshot for ``config``.

    Convenience wrapper around ShadeCalculator.
    """
    return ShadeCalculator(pricing_config).calculate(config)
