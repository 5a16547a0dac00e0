"""Application commands (use cases) for shade sail quoting."""

from __future__ import annotations

import logging
from typing import Mapping

from shadesails.domain import SailConfiguration, ShadeCalculation, ShadeCalculator
from shadesails.domain.services import (
    GeometryConfig,
    MeasurementReview,
    TypoDetectionConfig,
    review_anchor_heights,
    review_measurements,
    validate_polygon,
)
from shadesails.domain.value_objects import Currency

from .dtos import QuoteInput, QuoteOutput

logger = logging.getLogger(__name__)


class CalculateQuoteCommand:
    """Command to calculate a quote for a configured sail.

    Runs the measurement review, the geometric validator and the
    calculation orchestrator. Geometry errors and pending suggestions are
    reported alongside the price; they never suppress it.
    """

    def __init__(
        self,
        calculator: ShadeCalculator | None = None,
        typo_config: TypoDetectionConfig | None = None,
        geometry_config: GeometryConfig | None = None,
    ) -> None:
        self.calculator = calculator or ShadeCalculator()
        self.typo_config = typo_config
        self.geometry_config = geometry_config

    def review(
        self,
        configuration: SailConfiguration,
        dismissed: Mapping[str, float] | None = None,
    ) -> MeasurementReview:
        """Review measurements and, when given, anchor heights."""
        review = review_measurements(
            configuration.measurements,
            configuration.unit,
            dismissed=dismissed,
            config=self.typo_config,
        )
        if configuration.anchor_heights:
            review = review.merge(
                review_anchor_heights(
                    configuration.anchor_heights,
                    configuration.corners,
                    configuration.unit,
                    dismissed=dismissed,
                    config=self.typo_config,
                )
            )
        return review

    def execute(
        self,
        configuration: SailConfiguration,
        dismissed: Mapping[str, float] | None = None,
    ) -> QuoteOutput:
        """Calculate a quote.

        Args:
            configuration: The sail to price.
            dismissed: Field key to the value at which the customer
                dismissed a typo suggestion.

        Returns:
            QuoteOutput with the calculation, geometry errors and review.
        """
        review = self.review(configuration, dismissed)
        geometry = validate_polygon(
            configuration.measurements, configuration.corners, self.geometry_config
        )
        calculation = self.calculator.calculate(configuration)

        logger.debug(
            f"Quote for {configuration.corners}-corner sail: "
            f"perimeter={calculation.perimeter:.2f}m area={calculation.area:.2f}m2 "
            f"total={calculation.total_price} {calculation.currency.value}"
        )
        if geometry.errors:
            logger.debug(f"Geometry errors: {list(geometry.errors)}")
        if review.suggestions:
            logger.debug(f"Pending typo suggestions: {dict(review.suggestions)}")

        return QuoteOutput(
            calculation=calculation,
            configuration=configuration,
            geometry_errors=list(geometry.errors),
            review=review,
        )

    def execute_input(self, quote_input: QuoteInput) -> QuoteOutput:
        """Validate a direct-entry input and calculate its quote."""
        errors = quote_input.validate()
        if errors:
            logger.debug(f"Quote input rejected: {errors}")
            return QuoteOutput(
                calculation=ShadeCalculation.zero(_currency_or_default(quote_input)),
                errors=errors,
            )
        return self.execute(
            quote_input.to_sail_configuration(), quote_input.dismissed_mm()
        )


def _currency_or_default(quote_input: QuoteInput) -> Currency:
    try:
        return Currency(quote_input.currency)
    except ValueError:
        return Currency.NZD
