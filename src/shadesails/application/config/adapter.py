"""Adapter to convert ShadeSailConfiguration into domain objects.

Configuration files store every length in millimeters, so no unit
conversion happens here; the unit system only travels along for
display and typo detection.
"""

from __future__ import annotations

from shadesails.application.config.schema import SailConfig, ShadeSailConfiguration
from shadesails.domain.entities import SailConfiguration
from shadesails.domain.measurements import MeasurementSet


def sail_config_to_domain(sail: SailConfig) -> SailConfiguration:
    """Convert the ``sail`` section of a configuration to a SailConfiguration."""
    return SailConfiguration(
        corners=sail.corners,
        fabric=sail.fabric,
        edge_type=sail.edge_type,
        measurement_option=sail.measurement_option,
        unit=sail.unit,
        currency=sail.currency,
        measurements=MeasurementSet(corners=sail.corners, values=dict(sail.measurements)),
        anchor_heights=tuple(sail.anchor_heights),
        fabric_color=sail.fabric_color,
    )


def config_to_sail(config: ShadeSailConfiguration) -> SailConfiguration:
    """Convert a validated configuration to a SailConfiguration.

    Example:
        >>> config = load_config(Path("my-sail.json"))
        >>> output = CalculateQuoteCommand().execute(
        ...     config_to_sail(config), config_to_dismissed(config)
        ... )
    """
    return sail_config_to_domain(config.sail)


def config_to_dismissed(config: ShadeSailConfiguration) -> dict[str, float]:
    """Field key to the value at which a typo suggestion was dismissed."""
    return dict(config.sail.dismissed_suggestions)
