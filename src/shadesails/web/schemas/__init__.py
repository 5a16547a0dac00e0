"""Pydantic schemas for the REST API."""

from shadesails.web.schemas.requests import (
    CalculateFromConfigRequest,
    ConfigValidateRequest,
    QuoteRequest,
    TypoCheckRequest,
)
from shadesails.web.schemas.responses import (
    CalculationSchema,
    ErrorResponseSchema,
    MeasurementKeysSchema,
    QuoteResponseSchema,
    TypoCheckResponseSchema,
    ValidationResultSchema,
)

__all__ = [
    # Requests
    "CalculateFromConfigRequest",
    "ConfigValidateRequest",
    "QuoteRequest",
    "TypoCheckRequest",
    # Responses
    "CalculationSchema",
    "ErrorResponseSchema",
    "MeasurementKeysSchema",
    "QuoteResponseSchema",
    "TypoCheckResponseSchema",
    "ValidationResultSchema",
]
