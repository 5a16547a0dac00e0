"""Output formatters and exporters for shade sail quotes."""

from __future__ import annotations

import json
from typing import Any

from shadesails.application.dtos import QuoteOutput
from shadesails.domain import SailConfiguration, ShadeCalculation
from shadesails.domain.measurements import measurement_keys_for
from shadesails.domain.services import (
    MeasurementReview,
    dual_length_values,
    format_area,
    format_dual_length,
    format_length,
)
from shadesails.domain.services.measurement_review import PENDING_SUGGESTIONS
from shadesails.domain.services.pricing import (
    CURRENCY_NAMES,
    CURRENCY_SYMBOLS,
    get_fabric,
)
from shadesails.domain.services.units import MM2_PER_M2
from shadesails.domain.value_objects import Currency, UnitSystem


def format_currency(amount: float, currency: Currency) -> str:
    """Format an amount with its currency symbol, e.g. ``NZ$2515.00``."""
    symbol = CURRENCY_SYMBOLS.get(currency, currency.value)
    return f"{symbol}{amount:.2f}"


class MeasurementFormatter:
    """Formats entered measurements for fulfilment.

    Lengths are shown in millimeters with the imperial equivalent, and
    marked when the customer originally worked in imperial.
    """

    def format(self, configuration: SailConfiguration) -> list[str]:
        lines = []
        for key in measurement_keys_for(configuration.corners):
            length = configuration.measurements.get(key)
            if length > 0:
                lines.append(
                    f"  {key:<4} {format_dual_length(length, configuration.unit)}"
                )
            else:
                lines.append(f"  {key:<4} -")
        for index, height in enumerate(configuration.anchor_heights):
            label = f"H{chr(ord('A') + index)}"
            if height > 0:
                lines.append(
                    f"  {label:<4} {format_dual_length(height, configuration.unit)}"
                )
            else:
                lines.append(f"  {label:<4} -")
        return lines

    def to_dict(self, configuration: SailConfiguration) -> dict[str, Any]:
        return {
            key: dual_length_values(configuration.measurements.get(key))
            for key in measurement_keys_for(configuration.corners)
            if configuration.measurements.get(key) > 0
        }


class QuoteSummaryFormatter:
    """Formats a quote as a plain-text summary."""

    def __init__(self) -> None:
        self._measurements = MeasurementFormatter()

    def format(self, output: QuoteOutput) -> str:
        if not output.is_valid:
            return "\n".join(["QUOTE ERRORS", "=" * 60, *output.errors])

        configuration = output.configuration
        calculation = output.calculation
        unit = configuration.unit if configuration else UnitSystem.METRIC
        lines = ["SHADE SAIL QUOTE", "=" * 60]

        if configuration is not None:
            fabric = get_fabric(configuration.fabric)
            lines.append(f"Corners:       {configuration.corners}")
            fabric_line = fabric.label
            if configuration.fabric_color:
                fabric_line += f" ({configuration.fabric_color})"
            lines.append(f"Fabric:        {fabric_line}")
            lines.append(f"Edge:          {configuration.edge_type.value}")
            lines.append(f"Option:        {configuration.measurement_option.value}")
            currency = calculation.currency
            lines.append(f"Currency:      {CURRENCY_NAMES[currency]} ({currency.value})")
            lines.append("")
            lines.append("MEASUREMENTS")
            lines.extend(self._measurements.format(configuration))
            lines.append("")

        lines.extend(self._format_calculation(calculation, unit))

        if output.geometry_errors:
            lines.append("")
            lines.append("GEOMETRY WARNINGS")
            lines.extend(f"  - {message}" for message in output.geometry_errors)

        review_lines = self._format_review(output.review, unit)
        if review_lines:
            lines.append("")
            lines.extend(review_lines)

        return "\n".join(lines)

    def _format_calculation(
        self, calculation: ShadeCalculation, unit: UnitSystem
    ) -> list[str]:
        if not calculation.is_priced:
            return ["Price:         incomplete - enter every edge to see a price"]
        currency = calculation.currency
        lines = [
            f"Area:          {format_area(calculation.area * MM2_PER_M2, unit)}",
            f"Perimeter:     {calculation.perimeter:.2f} m "
            f"(priced at {calculation.adjusted_perimeter:.1f} m)",
        ]
        if calculation.webbing_width:
            lines.append(f"Webbing:       {calculation.webbing_width}mm")
        if calculation.wire_thickness is not None:
            lines.append(f"Wire:          {calculation.wire_thickness}mm")
        lines.append(f"Weight:        {calculation.total_weight_grams / 1000:.2f} kg")
        lines.append("-" * 60)
        lines.append(f"Fabric:        {format_currency(calculation.fabric_cost, currency)}")
        lines.append(
            f"Hardware:      {format_currency(calculation.hardware_cost, currency)}"
        )
        lines.append(
            f"TOTAL:         {format_currency(calculation.total_price, currency)} "
            f"{currency.value}"
        )
        return lines

    def _format_review(self, review: MeasurementReview, unit: UnitSystem) -> list[str]:
        if not review.is_blocked:
            return []
        lines = ["MEASUREMENT CHECKS"]
        for key, message in review.errors.items():
            lines.append(f"  {key}: {message}")
        for key, suggested in review.suggestions.items():
            shown = format_length(
                suggested, unit, raw_inches_only=unit == UnitSystem.IMPERIAL
            )
            lines.append(f"  {key}: did you mean {shown}?")
        if review.suggestions:
            lines.append(f"  {PENDING_SUGGESTIONS}")
        return lines


def quote_to_dict(output: QuoteOutput) -> dict[str, Any]:
    """Plain dictionary form of a quote, as written by QuoteJsonExporter."""
    if not output.is_valid:
        return {"errors": output.errors}

    calculation = output.calculation
    data: dict[str, Any] = {
        "calculation": {
            "area": calculation.area,
            "perimeter": calculation.perimeter,
            "adjusted_perimeter": calculation.adjusted_perimeter,
            "fabric_cost": calculation.fabric_cost,
            "edge_cost": calculation.edge_cost,
            "hardware_cost": calculation.hardware_cost,
            "total_price": calculation.total_price,
            "webbing_width": calculation.webbing_width,
            "wire_thickness": calculation.wire_thickness,
            "total_weight_grams": calculation.total_weight_grams,
            "currency": calculation.currency.value,
            "formatted_total": format_currency(
                calculation.total_price, calculation.currency
            ),
        },
        "geometry_errors": list(output.geometry_errors),
        "typo_suggestions": dict(output.review.suggestions),
        "measurement_errors": dict(output.review.errors),
        "can_submit": output.can_submit,
    }
    configuration = output.configuration
    if configuration is not None:
        data["sail"] = {
            "corners": configuration.corners,
            "fabric": configuration.fabric.value,
            "fabric_color": configuration.fabric_color,
            "edge_type": configuration.edge_type.value,
            "measurement_option": configuration.measurement_option.value,
            "unit": configuration.unit.value,
            "measurements": MeasurementFormatter().to_dict(configuration),
            "anchor_heights": list(configuration.anchor_heights),
        }
    return data


class QuoteJsonExporter:
    """Exports a quote as JSON."""

    def export(self, output: QuoteOutput) -> str:
        return json.dumps(quote_to_dict(output), indent=2, ensure_ascii=False)
