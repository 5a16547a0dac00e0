"""Measurement helper endpoints: typo checks and required keys."""

from typing import Annotated

from fastapi import APIRouter, Path

from shadesails.application.config.validator import suggestion_message
from shadesails.domain import (
    diagonal_keys_for,
    edge_keys_for,
    validate_measurement_field,
)
from shadesails.domain.services import to_canonical_mm
from shadesails.web.schemas.requests import TypoCheckRequest
from shadesails.web.schemas.responses import (
    MeasurementKeysSchema,
    TypoCheckResponseSchema,
)

router = APIRouter(prefix="/measurements", tags=["measurements"])


@router.post("/typo", response_model=TypoCheckResponseSchema)
async def check_typo(request: TypoCheckRequest) -> TypoCheckResponseSchema:
    """Check one entered value for a likely unit typo."""
    value_mm = to_canonical_mm(request.value, request.unit)
    dismissed_mm = None
    if request.dismissed_value is not None:
        dismissed_mm = to_canonical_mm(request.dismissed_value, request.unit)

    check = validate_measurement_field(
        value_mm, request.unit, request.field_class, dismissed_value=dismissed_mm
    )
    message = check.error
    if check.has_suggestion:
        message = suggestion_message(check.suggestion, request.unit)
    return TypoCheckResponseSchema(
        value_mm=value_mm,
        suggestion_mm=check.suggestion,
        message=message,
        error=check.error,
    )


@router.get("/keys/{corners}", response_model=MeasurementKeysSchema)
async def measurement_keys(
    corners: Annotated[int, Path(ge=3, le=6, description="Number of sail corners")],
) -> MeasurementKeysSchema:
    """List the edges and diagonals to measure for a sail."""
    return MeasurementKeysSchema(
        corners=corners,
        edges=edge_keys_for(corners),
        diagonals=diagonal_keys_for(corners),
    )
