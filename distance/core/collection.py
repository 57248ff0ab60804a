"""Ordered, read-only mapping of unit id -> Distance."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import TYPE_CHECKING, Callable, TypeVar

if TYPE_CHECKING:
    from distance.core.distance import Distance

T = TypeVar("T")


class DistanceCollection(Mapping[str, "Distance"]):
    """One distance expanded into several units, in table declaration order."""

    def __init__(self, items: Iterable[tuple[str, Distance]] = ()) -> None:
        self._items: dict[str, Distance] = {}
        for unit, distance in items:
            if unit in self._items:
                raise ValueError(f"Duplicate unit '{unit}' in collection")
            self._items[unit] = distance

    def __getitem__(self, unit: str) -> Distance:
        return self._items[unit]

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        inner = ", ".join(f"{unit}={distance.value!r}" for unit, distance in self._items.items())
        return f"DistanceCollection({inner})"

    def units(self) -> list[str]:
        return list(self._items)

    def map(self, fn: Callable[[Distance], T]) -> dict[str, T]:
        """Apply `fn` to every distance, keeping unit keys and order."""
        return {unit: fn(distance) for unit, distance in self._items.items()}

    def to_dict(self) -> dict[str, float]:
        return self.map(lambda d: d.value)

    def to_rounded_dict(self) -> dict[str, float]:
        return self.map(lambda d: d.round())
