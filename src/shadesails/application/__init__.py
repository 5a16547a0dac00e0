"""Application layer - use cases and orchestration."""

from .commands import CalculateQuoteCommand
from .dtos import QuoteInput, QuoteOutput

__all__ = [
    "CalculateQuoteCommand",
    "QuoteInput",
    "QuoteOutput",
]
