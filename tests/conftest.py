"""Pytest configuration and shared fixtures for shade sail tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from shadesails.domain import MeasurementSet, SailConfiguration

FIXTURES_PATH = Path(__file__).parent / "fixtures" / "configs"


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "cli: tests that invoke the Typer CLI")
    config.addinivalue_line("markers", "api: tests that call the REST API")


# =============================================================================
# Shared sails
# =============================================================================


@pytest.fixture
def fixtures_path() -> Path:
    """Directory holding the JSON configuration fixtures."""
    return FIXTURES_PATH


@pytest.fixture
def square_measurements() -> MeasurementSet:
    """A 4 m square with both diagonals measured."""
    return MeasurementSet(
        corners=4,
        values={
            "AB": 4000,
            "BC": 4000,
            "CD": 4000,
            "DA": 4000,
            "AC": 5657,
            "BD": 5657,
        },
    )


@pytest.fixture
def square_sail(square_measurements: MeasurementSet) -> SailConfiguration:
    """A 4 m square in Monotec 370, webbing edge, adjust option, NZD."""
    return SailConfiguration(corners=4, measurements=square_measurements)


@pytest.fixture
def triangle_sail() -> SailConfiguration:
    """A 3-4-5 m right triangle with default options."""
    return SailConfiguration(
        corners=3,
        measurements=MeasurementSet(
            corners=3, values={"AB": 3000, "BC": 4000, "CA": 5000}
        ),
    )
