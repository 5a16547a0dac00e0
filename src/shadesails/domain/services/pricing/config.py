"""Configuration for the pricing engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from shadesails.domain.value_objects import Currency

from .constants import (
    BASE_CURRENCY,
    BASE_PRICING_MARKUP,
    CURRENCY_MARKUPS,
    EXCHANGE_RATES,
)


@dataclass(frozen=True)
class PricingConfig:
    """Markups and exchange rates used to turn NZD costs into a quote.

    Attributes:
        base_markup: Multiplier applied to every NZD cost (default 1.40).
        currency_markups: Extra multiplier per target currency.
        exchange_rates: Units of target currency per unit of base currency.
        base_currency: Currency the price tables are expressed in.
    """

    base_markup: float = BASE_PRICING_MARKUP
    currency_markups: Mapping[Currency, float] = field(
        default_factory=lambda: dict(CURRENCY_MARKUPS), hash=False
    )
    exchange_rates: Mapping[Currency, float] = field(
        default_factory=lambda: dict(EXCHANGE_RATES), hash=False
    )
    base_currency: Currency = BASE_CURRENCY

    def __post_init__(self) -> None:
        if self.base_markup <= 0:
            raise ValueError("base_markup must be positive")
        if any(markup <= 0 for markup in self.currency_markups.values()):
            raise ValueError("currency markups must be positive")
        if any(rate <= 0 for rate in self.exchange_rates.values()):
            raise ValueError("exchange rates must be positive")
        if self.exchange_rates.get(self.base_currency) != 1.0:
            raise ValueError("base currency must have an exchange rate of 1.0")

    def markup_for(self, currency: Currency) -> float:
        """Currency markup, 1.0 for currencies without one."""
        return self.currency_markups.get(currency, 1.0)

    def rate_for(self, currency: Currency) -> float:
        """Exchange rate from the base currency, 1.0 when unknown."""
        return self.exchange_rates.get(currency, 1.0)

    def multiplier_for(self, currency: Currency) -> float:
        """Combined factor applied to a base-currency cost."""
        return self.base_markup * self.markup_for(currency) * self.rate_for(currency)
