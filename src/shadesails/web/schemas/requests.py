"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from shadesails.domain.value_objects import (
    Currency,
    EdgeType,
    FabricType,
    FieldClass,
    MeasurementOption,
    UnitSystem,
)


class QuoteRequest(BaseModel):
    """Request for pricing a sail entered directly.

    Lengths are in the display unit: millimeters for metric, inches for
    imperial.
    """

    corners: int = Field(..., ge=3, le=6, description="Number of sail corners")
    measurements: dict[str, float] = Field(
        default_factory=dict, description="Edge and diagonal lengths keyed by AB, AC, ..."
    )
    unit: UnitSystem = Field(default=UnitSystem.METRIC, description="Unit system")
    fabric: FabricType = Field(default=FabricType.MONOTEC_370, description="Fabric")
    fabric_color: str | None = Field(default=None, description="Fabric colour name")
    edge_type: EdgeType = Field(default=EdgeType.WEBBING, description="Edge finish")
    measurement_option: MeasurementOption = Field(
        default=MeasurementOption.ADJUST, description="Adjust or exact sizing"
    )
    currency: Currency = Field(default=Currency.NZD, description="Quote currency")
    anchor_heights: list[float] = Field(
        default_factory=list, max_length=6, description="Anchor point heights"
    )
    dismissed_suggestions: dict[str, float] = Field(
        default_factory=dict,
        description="Field key to the value at which its typo suggestion was dismissed",
    )


class CalculateFromConfigRequest(BaseModel):
    """Request for pricing a sail from a full configuration."""

    config: dict[str, Any] = Field(..., description="Full quote configuration JSON")


class ConfigValidateRequest(BaseModel):
    """Request for validating a configuration."""

    config: dict[str, Any] = Field(..., description="Quote configuration JSON")


class TypoCheckRequest(BaseModel):
    """Request for checking one entered value for a unit typo."""

    value: float = Field(..., ge=0, description="Entered value in display units")
    unit: UnitSystem = Field(default=UnitSystem.METRIC, description="Unit system")
    field_class: FieldClass = Field(
        default=FieldClass.EDGE, description="Edge/diagonal or anchor height"
    )
    dismissed_value: float | None = Field(
        default=None, description="Value at which the suggestion was dismissed"
    )
