"""Unit tests for quote formatters and exporters."""

import json

import pytest

from shadesails.application import CalculateQuoteCommand, QuoteInput
from shadesails.domain import MeasurementSet, SailConfiguration
from shadesails.domain.value_objects import Currency, UnitSystem
from shadesails.infrastructure import (
    MeasurementFormatter,
    QuoteJsonExporter,
    QuoteSummaryFormatter,
    format_currency,
    quote_to_dict,
)


@pytest.fixture
def square_output(square_measurements: MeasurementSet):
    config = SailConfiguration(
        corners=4, measurements=square_measurements, fabric_color="Charcoal"
    )
    return CalculateQuoteCommand().execute(config)


class TestCurrencyFormatting:
    """Tests for currency helpers."""

    def test_format_currency(self) -> None:
        assert format_currency(2515, Currency.NZD) == "NZ$2515.00"
        assert format_currency(1678, Currency.USD) == "US$1678.00"
        assert format_currency(12.5, Currency.GBP) == "£12.50"


class TestMeasurementFormatter:
    """Tests for MeasurementFormatter."""

    def test_lists_every_key(self, square_sail: SailConfiguration) -> None:
        lines = MeasurementFormatter().format(square_sail)
        assert lines[0] == "  AB   4000mm (13'1.5\")"
        assert len(lines) == 6

    def test_missing_values_shown_as_dash(self) -> None:
        config = SailConfiguration(
            corners=3, measurements=MeasurementSet(corners=3, values={"AB": 3000})
        )
        assert MeasurementFormatter().format(config)[1] == "  BC   -"

    def test_imperial_origin_marked(self) -> None:
        config = SailConfiguration(
            corners=3,
            unit=UnitSystem.IMPERIAL,
            measurements=MeasurementSet(corners=3, values={"AB": 4000}),
            anchor_heights=(2400,),
        )
        lines = MeasurementFormatter().format(config)
        assert lines[0].endswith(" *)")
        assert lines[-1].startswith("  HA   2400mm")

    def test_unentered_height_shown_as_dash(self) -> None:
        config = SailConfiguration(
            corners=3,
            measurements=MeasurementSet(corners=3, values={"AB": 3000}),
            anchor_heights=(2400, 0),
        )
        lines = MeasurementFormatter().format(config)
        assert lines[-1] == "  HB   -"

    def test_to_dict_skips_missing(self) -> None:
        config = SailConfiguration(
            corners=3, measurements=MeasurementSet(corners=3, values={"AB": 3000})
        )
        data = MeasurementFormatter().to_dict(config)
        assert list(data) == ["AB"]
        assert data["AB"]["metric"] == "3000mm"


class TestQuoteSummaryFormatter:
    """Tests for QuoteSummaryFormatter."""

    def test_priced_summary(self, square_output) -> None:
        text = QuoteSummaryFormatter().format(square_output)
        assert "SHADE SAIL QUOTE" in text
        assert "Fabric:        Monotec 370 (Charcoal)" in text
        assert "Currency:      New Zealand Dollar (NZD)" in text
        assert "Area:          16.00 m²" in text
        assert "Perimeter:     16.00 m (priced at 16.0 m)" in text
        assert "Webbing:       50mm" in text
        assert "Weight:        9.84 kg" in text
        assert "TOTAL:         NZ$2515.00 NZD" in text
        assert "GEOMETRY WARNINGS" not in text

    def test_unpriced_summary(self) -> None:
        output = CalculateQuoteCommand().execute_input(
            QuoteInput(corners=3, measurements={"AB": 3000})
        )
        text = QuoteSummaryFormatter().format(output)
        assert "incomplete - enter every edge to see a price" in text
        assert "MEASUREMENT CHECKS" in text
        assert "  BC: Measurement required" in text

    def test_geometry_warnings(self) -> None:
        output = CalculateQuoteCommand().execute_input(
            QuoteInput(corners=3, measurements={"AB": 2000, "BC": 2000, "CA": 5000})
        )
        text = QuoteSummaryFormatter().format(output)
        assert "GEOMETRY WARNINGS" in text
        assert "  - Triangle ABC:" in text

    def test_typo_suggestion(self) -> None:
        output = CalculateQuoteCommand().execute_input(
            QuoteInput(corners=3, measurements={"AB": 1500, "BC": 4000, "CA": 5000})
        )
        text = QuoteSummaryFormatter().format(output)
        assert "  AB: did you mean 15000mm?" in text
        assert "Please address all suggested corrections before continuing." in text

    def test_input_errors(self) -> None:
        output = CalculateQuoteCommand().execute_input(QuoteInput(corners=9))
        text = QuoteSummaryFormatter().format(output)
        assert text.startswith("QUOTE ERRORS")


class TestQuoteJson:
    """Tests for the JSON export."""

    def test_quote_to_dict(self, square_output) -> None:
        data = quote_to_dict(square_output)
        assert data["calculation"]["total_price"] == 2515
        assert data["calculation"]["currency"] == "NZD"
        assert data["calculation"]["formatted_total"] == "NZ$2515.00"
        assert data["can_submit"] is True
        assert data["sail"]["fabric_color"] == "Charcoal"
        assert data["sail"]["measurements"]["AB"]["metric_raw"] == 4000

    def test_export_is_valid_json(self, square_output) -> None:
        exported = QuoteJsonExporter().export(square_output)
        assert json.loads(exported)["calculation"]["webbing_width"] == 50

    def test_errors_only(self) -> None:
        output = CalculateQuoteCommand().execute_input(QuoteInput(corners=9))
        assert list(quote_to_dict(output)) == ["errors"]
