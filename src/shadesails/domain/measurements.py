"""Measurement keys and the immutable Measurement Set.

A sail with N corners is labelled A, B, C, ... clockwise. Edges are the
N consecutive vertex pairs (closing back to A) and diagonals are the
fixed set of non-adjacent pairs the configurator asks for. Lengths are
always stored in millimeters.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator, Mapping

SUPPORTED_CORNERS: tuple[int, ...] = (3, 4, 5, 6)

# Diagonals requested per corner count. The fan diagonals from vertex A
# come first; the rest are cross-checks used by geometric validation.
DIAGONAL_KEYS: dict[int, tuple[str, ...]] = {
    3: (),
    4: ("AC", "BD"),
    5: ("AC", "AD", "CE", "BD", "BE"),
    6: ("AC", "AD", "AE", "BD", "BE", "BF", "CE", "CF", "DF"),
}


def vertex_label(index: int) -> str:
    """Return the letter for a zero-based vertex index (0 -> "A")."""
    return chr(ord("A") + index)


def edge_keys_for(corners: int) -> list[str]:
    """Return the edge keys for a polygon with ``corners`` vertices.

    Examples:
        >>> edge_keys_for(3)
        ['AB', 'BC', 'CA']
    """
    if corners < 1:
        return []
    return [
        f"{vertex_label(i)}{vertex_label((i + 1) % corners)}" for i in range(corners)
    ]


def diagonal_keys_for(corners: int) -> list[str]:
    """Return the diagonal keys required for a polygon with ``corners`` vertices.

    Unsupported corner counts have no diagonals.
    """
    return list(DIAGONAL_KEYS.get(corners, ()))


def measurement_keys_for(corners: int) -> list[str]:
    """Return all edge keys followed by all diagonal keys."""
    return edge_keys_for(corners) + diagonal_keys_for(corners)


def length_of(measurements: Mapping[str, float], key: str) -> float:
    """Read a length from a raw mapping, treating absent/invalid values as 0."""
    value = measurements.get(key) or 0.0
    if not isinstance(value, (int, float)) or not math.isfinite(value) or value < 0:
        return 0.0
    return float(value)


@dataclass(frozen=True)
class MeasurementSet:
    """Edge and diagonal lengths for one sail, in millimeters.

    The set is immutable: entering or clearing a value produces a new
    set. A zero or absent value means "not yet entered". Keys outside
    the edge/diagonal set for ``corners`` are rejected.

    Attributes:
        corners: Number of sail corners (3 to 6).
        values: Mapping of measurement key to length in millimeters.
    """

    corners: int
    values: Mapping[str, float] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        if self.corners not in SUPPORTED_CORNERS:
            raise ValueError(
                f"Corner count must be one of {list(SUPPORTED_CORNERS)}, got {self.corners}"
            )
        allowed = set(measurement_keys_for(self.corners))
        for key, value in self.values.items():
            if key not in allowed:
                raise ValueError(
                    f"Measurement '{key}' is not valid for a {self.corners}-corner sail"
                )
            if not math.isfinite(value) or value < 0:
                raise ValueError(f"Measurement '{key}' must be a non-negative length")
        # Private copy of the caller's mapping
        object.__setattr__(self, "values", dict(self.values))

    @classmethod
    def empty(cls, corners: int) -> MeasurementSet:
        """Create an empty set for a newly chosen corner count."""
        return cls(corners=corners)

    @property
    def edge_keys(self) -> list[str]:
        return edge_keys_for(self.corners)

    @property
    def diagonal_keys(self) -> list[str]:
        return diagonal_keys_for(self.corners)

    def get(self, key: str) -> float:
        """Length for ``key`` in millimeters, or 0 when not entered."""
        return self.values.get(key, 0.0)

    def __getitem__(self, key: str) -> float:
        return self.get(key)

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def with_value(self, key: str, length_mm: float) -> MeasurementSet:
        """Return a new set with ``key`` set to ``length_mm``."""
        updated = dict(self.values)
        updated[key] = length_mm
        return MeasurementSet(corners=self.corners, values=updated)

    def without(self, key: str) -> MeasurementSet:
        """Return a new set with ``key`` cleared."""
        updated = {k: v for k, v in self.values.items() if k != key}
        return MeasurementSet(corners=self.corners, values=updated)

    def missing_edges(self) -> list[str]:
        """Edge keys that have no positive length yet."""
        return [key for key in self.edge_keys if self.get(key) <= 0]

    @property
    def is_complete_for_pricing(self) -> bool:
        """True when every edge has a positive length."""
        return not self.missing_edges()

    @property
    def has_all_diagonals(self) -> bool:
        """True when every diagonal has a positive length."""
        return all(self.get(key) > 0 for key in self.diagonal_keys)

    @property
    def perimeter_mm(self) -> float:
        """Sum of entered edge lengths. Diagonals never contribute."""
        return sum(self.get(key) for key in self.edge_keys)

    def as_dict(self) -> dict[str, float]:
        """Plain dictionary copy, suitable for persistence."""
        return dict(self.values)
