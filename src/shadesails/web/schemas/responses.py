"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class CalculationSchema(BaseModel):
    """Derived price, size and weight of a sail."""

    area: float = Field(..., description="Area in square meters")
    perimeter: float = Field(..., description="Perimeter in meters")
    adjusted_perimeter: float = Field(
        ..., description="Perimeter rounded to 0.5 m for table lookups"
    )
    fabric_cost: float = Field(..., description="Fabric cost in the quote currency")
    edge_cost: float = Field(..., description="Edge finishing cost")
    hardware_cost: float = Field(..., description="Corner and hardware cost")
    total_price: int = Field(..., description="Total, rounded up to a whole unit")
    webbing_width: int = Field(..., description="Webbing width in mm, 0 for cabled")
    wire_thickness: int | None = Field(
        default=None, description="Wire thickness in mm for cabled edges"
    )
    total_weight_grams: float = Field(..., description="Estimated shipping weight")
    currency: str = Field(..., description="Currency code")
    formatted_total: str = Field(..., description="Total with currency symbol")


class QuoteResponseSchema(BaseModel):
    """Response for a quote calculation."""

    calculation: CalculationSchema
    geometry_errors: list[str] = Field(
        default_factory=list, description="Triangle and diagonal problems"
    )
    typo_suggestions: dict[str, float] = Field(
        default_factory=dict, description="Field key to suggested value in mm"
    )
    measurement_errors: dict[str, str] = Field(
        default_factory=dict, description="Field key to range error message"
    )
    can_submit: bool = Field(..., description="Whether the order can be submitted")


class ValidationResultSchema(BaseModel):
    """Response for configuration validation."""

    is_valid: bool = Field(..., description="Whether configuration is valid")
    exit_code: int = Field(..., description="Matching CLI exit code")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation errors"
    )
    warnings: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation warnings"
    )
    suggestions: list[dict[str, Any]] = Field(
        default_factory=list, description="Pending typo suggestions"
    )


class TypoCheckResponseSchema(BaseModel):
    """Response for a single-field typo check."""

    value_mm: float = Field(..., description="Entered value in millimeters")
    suggestion_mm: float | None = Field(
        default=None, description="Suggested value in millimeters"
    )
    message: str | None = Field(default=None, description="Prompt or range error")
    error: str | None = Field(default=None, description="Blocking range error")


class MeasurementKeysSchema(BaseModel):
    """Measurement keys a sail of a given corner count needs."""

    corners: int
    edges: list[str]
    diagonals: list[str]


class ErrorResponseSchema(BaseModel):
    """Error body returned by the exception handlers."""

    error: str
    error_type: str
    details: Any = None
