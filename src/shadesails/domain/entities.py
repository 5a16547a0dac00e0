"""Domain entities for shade sail quoting."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace

from .measurements import MeasurementSet
from .value_objects import (
    Currency,
    EdgeType,
    FabricType,
    MeasurementOption,
    UnitSystem,
)


@dataclass(frozen=True)
class SailConfiguration:
    """Everything the customer has chosen for one sail.

    Attributes:
        corners: Number of fixing points (3 to 6).
        fabric: Shade cloth.
        edge_type: Webbing or cabled edge.
        measurement_option: Adjust (made undersized, ships with hardware)
            or exact.
        unit: Unit system the customer works in; display only.
        currency: Currency the quote is priced in.
        measurements: Edge and diagonal lengths in millimeters.
        anchor_heights: Height of each fixing point in millimeters, in
            corner order. May be empty.
        fabric_color: Fabric colour name, carried through for export.
    """

    corners: int
    fabric: FabricType = FabricType.MONOTEC_370
    edge_type: EdgeType = EdgeType.WEBBING
    measurement_option: MeasurementOption = MeasurementOption.ADJUST
    unit: UnitSystem = UnitSystem.METRIC
    currency: Currency = Currency.NZD
    measurements: MeasurementSet | None = None
    anchor_heights: tuple[float, ...] = field(default_factory=tuple)
    fabric_color: str | None = None

    def __post_init__(self) -> None:
        if self.measurements is None:
            object.__setattr__(self, "measurements", MeasurementSet.empty(self.corners))
        elif self.measurements.corners != self.corners:
            raise ValueError(
                f"Measurements are for {self.measurements.corners} corners, "
                f"configuration has {self.corners}"
            )
        heights = tuple(self.anchor_heights)
        if len(heights) > self.corners:
            raise ValueError(
                f"At most {self.corners} anchor heights allowed, got {len(heights)}"
            )
        for height in heights:
            if not math.isfinite(height) or height < 0:
                raise ValueError("Anchor heights must be non-negative lengths")
        object.__setattr__(self, "anchor_heights", heights)

    def with_corners(self, corners: int) -> SailConfiguration:
        """Return a configuration for a new corner count.

        Measurements and anchor heights are discarded since their keys
        depend on the corner count.
        """
        return replace(
            self,
            corners=corners,
            measurements=MeasurementSet.empty(corners),
            anchor_heights=(),
        )

    def with_measurement(self, key: str, length_mm: float) -> SailConfiguration:
        return replace(self, measurements=self.measurements.with_value(key, length_mm))
