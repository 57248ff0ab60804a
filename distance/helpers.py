"""Shortcut functions around Distance construction and conversion."""

from __future__ import annotations

from typing import Any, Union

from distance.core.distance import Distance

Number = Union[int, float]


def to_distance(value: Union[Distance, Number], unit: str = "meters", table: Any = None) -> Distance:
    """Wrap a number as a Distance; Distance instances pass through unchanged."""
    if isinstance(value, Distance):
        return value
    return Distance(value, unit, table)


def get_as(
    value: Union[Distance, Number],
    target_unit: str = "meters",
    source_unit: str = "meters",
    table: Any = None,
) -> float:
    """Convert a number (in `source_unit`) or a Distance to a plain value in `target_unit`."""
    distance = value if isinstance(value, Distance) else Distance(value, source_unit, table)
    return distance.as_unit(target_unit)
