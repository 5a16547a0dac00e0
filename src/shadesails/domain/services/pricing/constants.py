"""Pricing constants: corner and hardware costs, currencies, fabrics, weights.

This module provides:
- Corner and tensioning hardware costs by edge type and corner count
- Base markup, per-currency markups and NZD exchange rates
- Currency symbols and display names
- Fabric catalog with weights per square meter
- Shipping weight factors
- Webbing width and wire thickness bands
"""

from __future__ import annotations

from shadesails.domain.value_objects import Currency, EdgeType, FabricSpec, FabricType

# Corner costs in NZD
# Key: (EdgeType, corner count)
CORNER_COSTS: dict[tuple[EdgeType, int], float] = {
    (EdgeType.WEBBING, 3): 268.74,
    (EdgeType.WEBBING, 4): 358.32,
    (EdgeType.WEBBING, 5): 447.90,
    (EdgeType.WEBBING, 6): 537.48,
    (EdgeType.CABLED, 3): 329.00,
    (EdgeType.CABLED, 4): 438.67,
    (EdgeType.CABLED, 5): 548.33,
    (EdgeType.CABLED, 6): 658.00,
}

# Tensioning hardware in NZD, charged only for the adjust option
HARDWARE_COSTS: dict[tuple[EdgeType, int], float] = {
    (EdgeType.WEBBING, 3): 222.52,
    (EdgeType.WEBBING, 4): 291.04,
    (EdgeType.WEBBING, 5): 359.57,
    (EdgeType.WEBBING, 6): 428.09,
    (EdgeType.CABLED, 3): 222.52,
    (EdgeType.CABLED, 4): 291.04,
    (EdgeType.CABLED, 5): 359.57,
    (EdgeType.CABLED, 6): 428.09,
}

BASE_PRICING_MARKUP: float = 1.40
BASE_CURRENCY: Currency = Currency.NZD

# Applied after the base markup
CURRENCY_MARKUPS: dict[Currency, float] = {
    Currency.NZD: 1.00,
    Currency.USD: 1.15,
    Currency.AUD: 1.10,
    Currency.GBP: 1.20,
    Currency.EUR: 1.18,
    Currency.CAD: 1.12,
    Currency.AED: 1.50,
}

# Units of currency per 1 NZD
EXCHANGE_RATES: dict[Currency, float] = {
    Currency.NZD: 1.0,
    Currency.USD: 0.58,
    Currency.AUD: 0.88,
    Currency.GBP: 0.43,
    Currency.EUR: 0.50,
    Currency.CAD: 0.81,
    Currency.AED: 2.19,
}

CURRENCY_SYMBOLS: dict[Currency, str] = {
    Currency.NZD: "NZ$",
    Currency.USD: "US$",
    Currency.AUD: "AU$",
    Currency.GBP: "£",
    Currency.EUR: "€",
    Currency.CAD: "CA$",
    Currency.AED: "AED",
}

CURRENCY_NAMES: dict[Currency, str] = {
    Currency.NZD: "New Zealand Dollar",
    Currency.USD: "US Dollar",
    Currency.AUD: "Australian Dollar",
    Currency.GBP: "British Pound",
    Currency.EUR: "Euro",
    Currency.CAD: "Canadian Dollar",
    Currency.AED: "UAE Dirham",
}

FABRICS: dict[FabricType, FabricSpec] = {
    FabricType.MONOTEC_370: FabricSpec(FabricType.MONOTEC_370, "Monotec 370", 370),
    FabricType.EXTRABLOCK_330: FabricSpec(
        FabricType.EXTRABLOCK_330, "Extrablock 330", 330
    ),
    FabricType.SHADETEC_320: FabricSpec(FabricType.SHADETEC_320, "Shadetec 320", 320),
}

# Shipping weight factors in grams
CORNER_WEIGHT_G: float = 200
ADJUST_HARDWARE_WEIGHT_G: float = 380  # per corner
EDGE_WEIGHT_G_PER_M: dict[EdgeType, float] = {
    EdgeType.WEBBING: 100,
    EdgeType.CABLED: 140,
}

# (upper adjusted perimeter in meters, size in mm); the last band is open
# Sizes stay at the largest band past the 50 m table end instead of
# dropping back to 50mm webbing / 4mm wire.
WEBBING_WIDTH_BANDS: tuple[tuple[float, int], ...] = ((34.5, 50),)
WEBBING_WIDTH_ABOVE: int = 63
WIRE_THICKNESS_BANDS: tuple[tuple[float, int], ...] = ((29.5, 4), (40.0, 5))
WIRE_THICKNESS_ABOVE: int = 6

PERIMETER_STEP_M: float = 0.5


def get_fabric(fabric: FabricType) -> FabricSpec:
    """Look up the catalog entry for a fabric."""
    return FABRICS[fabric]


def get_webbing_width(adjusted_perimeter_m: float) -> int:
    """Webbing width in mm for an adjusted perimeter."""
    for upper, width in WEBBING_WIDTH_BANDS:
        if adjusted_perimeter_m <= upper:
            return width
    return WEBBING_WIDTH_ABOVE


def get_wire_thickness(adjusted_perimeter_m: float) -> int:
    """Edge wire thickness in mm for an adjusted perimeter."""
    for upper, thickness in WIRE_THICKNESS_BANDS:
        if adjusted_perimeter_m <= upper:
            return thickness
    return WIRE_THICKNESS_ABOVE
