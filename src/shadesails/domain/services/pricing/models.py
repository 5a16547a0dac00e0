"""Data models for the pricing engine."""

from __future__ import annotations

from dataclasses import dataclass

from shadesails.domain.value_objects import Currency, FabricType


@dataclass(frozen=True)
class PriceRow:
    """One row of a fabric price table.

    Attributes:
        perimeter: Perimeter in meters this row prices.
        monotec370: Fabric cost in NZD for Monotec 370.
        extrablock330: Fabric cost in NZD for Extrablock 330.
        shadetec320: Fabric cost in NZD for Shadetec 320.
    """

    perimeter: float
    monotec370: float
    extrablock330: float
    shadetec320: float

    def price_for(self, fabric: FabricType) -> float:
        if fabric == FabricType.EXTRABLOCK_330:
            return self.extrablock330
        if fabric == FabricType.SHADETEC_320:
            return self.shadetec320
        return self.monotec370


@dataclass(frozen=True)
class PriceBreakdown:
    """Costs in the target currency after base and currency markups.

    Attributes:
        fabric_cost: Fabric cost, including edge finishing.
        edge_cost: Separate edge finishing cost; always 0.
        hardware_cost: Corner cost plus tensioning hardware (adjust only).
        total_price: Sum of the above, rounded up to a whole unit.
        currency: Currency the amounts are expressed in.
    """

    fabric_cost: float
    edge_cost: float
    hardware_cost: float
    total_price: int
    currency: Currency


@dataclass(frozen=True)
class ShadeCalculation:
    """Immutable snapshot of everything derived from a sail configuration.

    Recomputed from scratch on every change; never mutated.

    Attributes:
        area: Sail area in square meters.
        perimeter: Sum of edge lengths in meters.
        adjusted_perimeter: Perimeter rounded half-up to 0.5 m, used for
            table lookups.
        fabric_cost: Fabric cost in the target currency.
        edge_cost: Edge finishing cost; folded into fabric, so 0.
        hardware_cost: Corner plus hardware cost in the target currency.
        total_price: Total in whole currency units, rounded up.
        webbing_width: Webbing width in mm for webbing edges, else 0.
        wire_thickness: Wire thickness in mm for cabled edges, else None.
        total_weight_grams: Estimated shipping weight in grams.
        currency: Currency of the cost fields.
    """

    area: float
    perimeter: float
    adjusted_perimeter: float
    fabric_cost: float
    edge_cost: float
    hardware_cost: float
    total_price: int
    webbing_width: int
    wire_thickness: int | None
    total_weight_grams: float
    currency: Currency

    @classmethod
    def zero(cls, currency: Currency) -> ShadeCalculation:
        """All-zero result for an incomplete Measurement Set."""
        return cls(
            area=0.0,
            perimeter=0.0,
            adjusted_perimeter=0.0,
            fabric_cost=0.0,
            edge_cost=0.0,
            hardware_cost=0.0,
            total_price=0,
            webbing_width=0,
            wire_thickness=None,
            total_weight_grams=0.0,
            currency=currency,
        )

    @property
    def is_priced(self) -> bool:
        return self.total_price > 0
