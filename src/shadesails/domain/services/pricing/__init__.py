"""Pricing engine for shade sails.

This package provides:
- Perimeter-indexed fabric price tables with nearest-match lookup
- Corner and hardware cost schedules, markups and exchange rates
- PricingConfig for overriding markups and rates
- PricingEngine producing a PriceBreakdown in the target currency
- WeightEstimator for shipping weight
- ShadeCalculation, the immutable result of a full calculation
"""

from __future__ import annotations

from .config import PricingConfig
from .constants import (
    BASE_CURRENCY,
    BASE_PRICING_MARKUP,
    CORNER_COSTS,
    CURRENCY_MARKUPS,
    CURRENCY_NAMES,
    CURRENCY_SYMBOLS,
    EXCHANGE_RATES,
    FABRICS,
    HARDWARE_COSTS,
    get_fabric,
    get_webbing_width,
    get_wire_thickness,
)
from .models import PriceBreakdown, PriceRow, ShadeCalculation
from .price_tables import (
    CABLED_FABRIC_PRICES,
    WEBBING_FABRIC_PRICES,
    fabric_price,
    nearest_row,
)
from .pricing_engine import PricingEngine, adjust_perimeter
from .weight_estimator import WeightEstimator

__all__ = [
    # Constants
    "BASE_CURRENCY",
    "BASE_PRICING_MARKUP",
    "CORNER_COSTS",
    "CURRENCY_MARKUPS",
    "CURRENCY_NAMES",
    "CURRENCY_SYMBOLS",
    "EXCHANGE_RATES",
    "FABRICS",
    "HARDWARE_COSTS",
    "get_fabric",
    "get_webbing_width",
    "get_wire_thickness",
    # Tables
    "CABLED_FABRIC_PRICES",
    "WEBBING_FABRIC_PRICES",
    "fabric_price",
    "nearest_row",
    # Config and models
    "PricingConfig",
    "PriceBreakdown",
    "PriceRow",
    "ShadeCalculation",
    # Services
    "PricingEngine",
    "WeightEstimator",
    "adjust_perimeter",
]
