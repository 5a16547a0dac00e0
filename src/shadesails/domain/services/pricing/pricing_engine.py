"""Pricing engine: perimeter to manufacturing cost in the customer's currency."""

from __future__ import annotations

import math

from shadesails.domain.value_objects import (
    Currency,
    EdgeType,
    FabricType,
    MeasurementOption,
)

from .config import PricingConfig
from .constants import (
    CORNER_COSTS,
    HARDWARE_COSTS,
    PERIMETER_STEP_M,
    get_webbing_width,
    get_wire_thickness,
)
from .models import PriceBreakdown
from .price_tables import fabric_price


def adjust_perimeter(perimeter_m: float) -> float:
    """Round a perimeter half-up to the nearest 0.5 m.

    Examples:
        >>> adjust_perimeter(16.24)
        16.0
        >>> adjust_perimeter(16.25)
        16.5
    """
    return math.floor(perimeter_m / PERIMETER_STEP_M + 0.5) * PERIMETER_STEP_M


class PricingEngine:
    """Converts sail geometry into a price.

    All table values are in the base currency (NZD). Each cost gets the
    base markup, then the sum gets the currency markup and is converted
    at the configured exchange rate. The total is rounded up to a whole
    currency unit; the reported component costs are not rounded.

    Args:
        config: Markups and exchange rates. Defaults to the standard
            price list.
    """

    def __init__(self, config: PricingConfig | None = None) -> None:
        self.config = config or PricingConfig()

    def corner_cost(self, edge_type: EdgeType, corners: int) -> float:
        """Corner fixing cost in NZD."""
        return CORNER_COSTS.get((edge_type, corners), 0.0)

    def hardware_cost(
        self, edge_type: EdgeType, corners: int, measurement_option: MeasurementOption
    ) -> float:
        """Tensioning hardware cost in NZD; 0 unless the sail is made to adjust."""
        if measurement_option != MeasurementOption.ADJUST:
            return 0.0
        return HARDWARE_COSTS.get((edge_type, corners), 0.0)

    def price(
        self,
        adjusted_perimeter_m: float,
        fabric: FabricType,
        edge_type: EdgeType,
        measurement_option: MeasurementOption,
        corners: int,
        currency: Currency,
    ) -> PriceBreakdown:
        """Price a sail.

        Args:
            adjusted_perimeter_m: Perimeter already rounded to 0.5 m.
            fabric: Fabric column of the price table.
            edge_type: Selects the price table and corner cost schedule.
            measurement_option: Hardware is charged only for ``adjust``.
            corners: Number of corners.
            currency: Target currency.

        Returns:
            PriceBreakdown in the target currency.
        """
        base_markup = self.config.base_markup
        fabric_nzd = fabric_price(adjusted_perimeter_m, fabric, edge_type) * base_markup
        edge_nzd = 0.0  # edge finishing is folded into the fabric price
        corner_nzd = self.corner_cost(edge_type, corners) * base_markup
        hardware_nzd = (
            self.hardware_cost(edge_type, corners, measurement_option) * base_markup
        )

        currency_markup = self.config.markup_for(currency)
        rate = self.config.rate_for(currency)
        total_nzd = (fabric_nzd + edge_nzd + corner_nzd + hardware_nzd) * currency_markup

        return PriceBreakdown(
            fabric_cost=fabric_nzd * currency_markup * rate,
            edge_cost=edge_nzd * currency_markup * rate,
            hardware_cost=(corner_nzd + hardware_nzd) * currency_markup * rate,
            total_price=math.ceil(total_nzd * rate),
            currency=currency,
        )

    def webbing_width(self, adjusted_perimeter_m: float, edge_type: EdgeType) -> int:
        """Webbing width in mm for webbing edges, 0 otherwise."""
        if edge_type != EdgeType.WEBBING:
            return 0
        return get_webbing_width(adjusted_perimeter_m)

    def wire_thickness(
        self, adjusted_perimeter_m: float, edge_type: EdgeType
    ) -> int | None:
        """Wire thickness in mm for cabled edges, None otherwise."""
        if edge_type != EdgeType.CABLED:
            return None
        return get_wire_thickness(adjusted_perimeter_m)
