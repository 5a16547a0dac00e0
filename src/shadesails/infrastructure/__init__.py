"""Infrastructure layer - formatters and exporters."""

from .formatters import (
    MeasurementFormatter,
    QuoteJsonExporter,
    QuoteSummaryFormatter,
    format_currency,
    quote_to_dict,
)

__all__ = [
    "MeasurementFormatter",
    "QuoteJsonExporter",
    "QuoteSummaryFormatter",
    "format_currency",
    "quote_to_dict",
]
