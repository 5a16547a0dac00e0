"""Quote calculation endpoints."""

import logging

from fastapi import APIRouter

from shadesails.application.config import (
    config_to_dismissed,
    config_to_sail,
    load_config_from_dict,
)
from shadesails.application.dtos import QuoteInput, QuoteOutput
from shadesails.infrastructure import format_currency
from shadesails.web.dependencies import QuoteCommandDep
from shadesails.web.exceptions import QuoteInputError
from shadesails.web.schemas.requests import CalculateFromConfigRequest, QuoteRequest
from shadesails.web.schemas.responses import CalculationSchema, QuoteResponseSchema

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/calculate", tags=["calculate"])


def _quote_output_to_schema(output: QuoteOutput) -> QuoteResponseSchema:
    """Convert QuoteOutput to response schema."""
    calculation = output.calculation
    return QuoteResponseSchema(
        calculation=CalculationSchema(
            area=calculation.area,
            perimeter=calculation.perimeter,
            adjusted_perimeter=calculation.adjusted_perimeter,
            fabric_cost=calculation.fabric_cost,
            edge_cost=calculation.edge_cost,
            hardware_cost=calculation.hardware_cost,
            total_price=calculation.total_price,
            webbing_width=calculation.webbing_width,
            wire_thickness=calculation.wire_thickness,
            total_weight_grams=calculation.total_weight_grams,
            currency=calculation.currency.value,
            formatted_total=format_currency(
                calculation.total_price, calculation.currency
            ),
        ),
        geometry_errors=output.geometry_errors,
        typo_suggestions=dict(output.review.suggestions),
        measurement_errors=dict(output.review.errors),
        can_submit=output.can_submit,
    )


@router.post("", response_model=QuoteResponseSchema)
async def calculate_quote(
    request: QuoteRequest,
    command: QuoteCommandDep,
) -> QuoteResponseSchema:
    """Price a sail from directly entered measurements.

    Args:
        request: Sail options and measurements in display units.
        command: Injected quote command.

    Returns:
        Calculation with geometry errors, typo suggestions and range errors.

    Raises:
        QuoteInputError: If the input cannot be priced.
    """
    quote_input = QuoteInput(
        corners=request.corners,
        measurements=request.measurements,
        unit=request.unit.value,
        fabric=request.fabric.value,
        edge_type=request.edge_type.value,
        measurement_option=request.measurement_option.value,
        currency=request.currency.value,
        anchor_heights=request.anchor_heights,
        fabric_color=request.fabric_color,
        dismissed_suggestions=request.dismissed_suggestions,
    )
    output = command.execute_input(quote_input)
    if not output.is_valid:
        raise QuoteInputError(output.errors)

    logger.info(
        f"Quoted {request.corners}-corner sail: "
        f"{output.calculation.total_price} {output.calculation.currency.value}"
    )
    return _quote_output_to_schema(output)


@router.post("/from-config", response_model=QuoteResponseSchema)
async def calculate_from_config(
    request: CalculateFromConfigRequest,
    command: QuoteCommandDep,
) -> QuoteResponseSchema:
    """Price a sail from a full configuration.

    Raises:
        ConfigError: If the configuration fails schema validation.
    """
    config = load_config_from_dict(request.config)
    output = command.execute(config_to_sail(config), config_to_dismissed(config))
    logger.info(
        f"Quoted {config.sail.corners}-corner sail from configuration: "
        f"{output.calculation.total_price} {output.calculation.currency.value}"
    )
    return _quote_output_to_schema(output)
