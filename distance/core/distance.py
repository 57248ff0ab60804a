"""Distance value object: a magnitude in one declared unit, convertible to any other.

Every conversion pivots on the base unit (meters): each unit declares how
many meters one of it is worth, so A -> B is ``value * factor(A) / factor(B)``.
Conversions, copies and expansions return new instances; only
``increment``/``decrement`` change the receiver, and never its unit.

Example:
    >>> d = Distance(1500, table=table)
    >>> d.to_kilometers().value
    1.5
    >>> d.percentage_of(Distance(1000, table=table))
    150
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Optional, Union

from distance.core.collection import DistanceCollection
from distance.core.errors import UnitNotFoundError
from distance.core.registry import default_table
from distance.models.unit_table import UnitTable
from distance.utils.units import BASE_UNIT, format_number, round_half_up

Number = Union[int, float]


class Distance:
    """A physical distance tied to a unit table.

    The table is shared, never copied. When none is passed the process-wide
    default is loaded on first use (see ``distance.core.registry``).
    """

    __hash__ = None  # mutable through increment/decrement

    def __init__(self, value: Number, unit: str = BASE_UNIT, table: Any = None) -> None:
        self.value: float = 0.0
        self.unit: str = BASE_UNIT
        self._table: Optional[UnitTable] = None
        self.set_value(value, unit)
        if table is not None:
            self.set_config(table)

    # ── Constructors ─────────────────────────────────────────────────────────

    @classmethod
    def make(cls, value: Number, unit: str = BASE_UNIT, table: Any = None) -> Distance:
        return cls(value, unit, table)

    @classmethod
    def from_meters(cls, value: Number, table: Any = None) -> Distance:
        return cls(value, "meters", table)

    @classmethod
    def from_kilometers(cls, value: Number, table: Any = None) -> Distance:
        return cls(value, "kilometers", table)

    @classmethod
    def from_miles(cls, value: Number, table: Any = None) -> Distance:
        return cls(value, "miles", table)

    @classmethod
    def from_footsteps(cls, value: Number, table: Any = None) -> Distance:
        return cls(value, "footsteps", table)

    @classmethod
    def from_steps(cls, value: Number, table: Any = None) -> Distance:
        return cls.from_footsteps(value, table)

    def copy(self) -> Distance:
        """Independent instance with the same value and unit, sharing the table."""
        return type(self)(self.value, self.unit, self._table)

    # ── Getters and setters ──────────────────────────────────────────────────

    def set_value(self, value: Number, unit: str) -> Distance:
        self.value = float(value)
        self.unit = unit
        return self

    def set_distance(self, value: Number, unit: str) -> Distance:
        return self.set_value(value, unit)

    def get_value(self) -> float:
        return self.value

    def get_distance(self) -> float:
        return self.get_value()

    def get_unit(self) -> str:
        return self.unit

    # ── Unit table access ────────────────────────────────────────────────────

    @property
    def table(self) -> UnitTable:
        """The unit table, loading the process-wide default if none was given."""
        if self._table is None:
            self._table = default_table()
        return self._table

    def set_config(self, table: Any) -> Distance:
        self._table = UnitTable.from_config(table)
        return self

    def config(self, key: Optional[str] = None, fallback: Any = None) -> Any:
        return self.table.resolve(key, fallback)

    def units(self) -> list[str]:
        return self.table.list_units()

    def get_decimals(self) -> int:
        definition = self.table.definition(self.unit)
        return definition.decimals if definition is not None else 2

    def get_suffix(self) -> Optional[str]:
        definition = self.table.definition(self.unit)
        return definition.suffix if definition is not None else None

    def get_measurement(self, unit: Optional[str] = None) -> float:
        """Meters per one `unit` (defaults to this distance's unit).

        Raises:
            UnitNotFoundError: If the unit is undeclared or has no (or a zero) factor.
        """
        unit = unit if unit is not None else self.unit
        definition = self.table.definition(unit)
        if definition is None or not definition.factor:
            raise UnitNotFoundError(unit)
        return float(definition.factor)

    # ── Predicates ───────────────────────────────────────────────────────────

    def is_zero(self) -> bool:
        return self.value == 0.0

    def is_empty(self) -> bool:
        return self.is_zero()

    def is_unit(self, unit: str) -> bool:
        return self.unit == unit

    def is_meters(self) -> bool:
        return self.is_unit("meters")

    def is_kilometers(self) -> bool:
        return self.is_unit("kilometers")

    def is_miles(self) -> bool:
        return self.is_unit("miles")

    def is_footsteps(self) -> bool:
        return self.is_unit("footsteps")

    def is_steps(self) -> bool:
        return self.is_footsteps()

    def is_base_unit(self) -> bool:
        return self.is_unit(BASE_UNIT)

    # ── Comparison ───────────────────────────────────────────────────────────

    def percentage_of(self, other: Distance, overflow: bool = True) -> int:
        """This distance as a whole-number percentage of `other`.

        With ``overflow=False`` the result is capped at 100, and anything from
        99% up to (but not including) 100% reports 99. A zero `other` raises
        ZeroDivisionError.
        """
        ratio = self.as_base_unit() / other.as_base_unit()

        if not overflow:
            if ratio >= 1:
                return 100
            if ratio >= 0.99:
                return 99

        return int(round_half_up(ratio * 100, 0))

    def less_than(self, other: Distance) -> bool:
        return self.as_base_unit() < other.as_base_unit()

    def less_or_equal(self, other: Distance) -> bool:
        return self.as_base_unit() <= other.as_base_unit()

    def greater_than(self, other: Distance) -> bool:
        return self.as_base_unit() > other.as_base_unit()

    def greater_or_equal(self, other: Distance) -> bool:
        return self.as_base_unit() >= other.as_base_unit()

    lt = less_than
    lte = less_or_equal
    gt = greater_than
    gte = greater_or_equal

    def __lt__(self, other: Distance) -> bool:
        if not isinstance(other, Distance):
            return NotImplemented
        return self.less_than(other)

    def __le__(self, other: Distance) -> bool:
        if not isinstance(other, Distance):
            return NotImplemented
        return self.less_or_equal(other)

    def __gt__(self, other: Distance) -> bool:
        if not isinstance(other, Distance):
            return NotImplemented
        return self.greater_than(other)

    def __ge__(self, other: Distance) -> bool:
        if not isinstance(other, Distance):
            return NotImplemented
        return self.greater_or_equal(other)

    def __eq__(self, other: object) -> bool:
        # Structural: same magnitude in the same unit. Use the comparison
        # methods for physical equality across units.
        if not isinstance(other, Distance):
            return NotImplemented
        return self.value == other.value and self.unit == other.unit

    # ── Modifiers ────────────────────────────────────────────────────────────

    def increment(self, other: Distance) -> Distance:
        """Add `other` in place; the unit stays the same."""
        total = type(self)(self.as_base_unit() + other.as_base_unit(), BASE_UNIT, self._table)
        self.value = total.as_unit(self.unit)
        return self

    def decrement(self, other: Distance) -> Distance:
        """Subtract `other` in place; the unit stays the same."""
        total = type(self)(self.as_base_unit() - other.as_base_unit(), BASE_UNIT, self._table)
        self.value = total.as_unit(self.unit)
        return self

    # ── Conversions ──────────────────────────────────────────────────────────

    def to_base_unit(self) -> Distance:
        return self if self.is_base_unit() else self.convert_to(BASE_UNIT)

    def to_base(self) -> Distance:
        return self.to_base_unit()

    def base(self) -> Distance:
        return self.to_base_unit()

    def as_base_unit(self) -> float:
        return self.value if self.is_base_unit() else self.as_unit(BASE_UNIT)

    def as_base(self) -> float:
        return self.as_base_unit()

    def as_unit(self, unit: str) -> float:
        """Value expressed in `unit`.

        Raises:
            UnitNotFoundError: If either unit is missing from the table.
        """
        source = self.get_measurement(self.unit)
        target = self.get_measurement(unit)
        return self.value * source / target

    def convert_to(self, unit: str) -> Distance:
        return type(self)(self.as_unit(unit), unit, self._table)

    def to_meters(self) -> Distance:
        return self.convert_to("meters")

    def to_kilometers(self) -> Distance:
        return self.convert_to("kilometers")

    def to_miles(self) -> Distance:
        return self.convert_to("miles")

    def to_footsteps(self) -> Distance:
        return self.convert_to("footsteps")

    def to_steps(self) -> Distance:
        return self.to_footsteps()

    def lookup(self, unit: str) -> Optional[float]:
        """Value in `unit` if it is declared in the table, else None."""
        if unit not in self.units():
            return None
        return self.convert_to(unit).value

    # ── Expansion and formatting ─────────────────────────────────────────────

    def only(self, units: Iterable[str]) -> DistanceCollection:
        """This distance in each of `units`, ordered as the table declares them."""
        wanted = set(units)
        return DistanceCollection(
            (unit, self.convert_to(unit)) for unit in self.units() if unit in wanted
        )

    def all(self) -> DistanceCollection:
        return DistanceCollection((unit, self.convert_to(unit)) for unit in self.units())

    def to_plain_mapping(self) -> dict[str, float]:
        return self.all().to_dict()

    def to_rounded_mapping(self, units: Optional[Iterable[str]] = None) -> dict[str, float]:
        collection = self.all() if units is None else self.only(units)
        return collection.to_rounded_dict()

    def round(self) -> float:
        return round_half_up(self.value, self.get_decimals())

    def format(self) -> str:
        """Default rendering, e.g. ``10,000.00``; comma and suffix follow the table's format block."""
        options = self.table.format
        text = format_number(self.value, self.get_decimals(), "," if options.comma else "")
        if options.suffix:
            text += f" {self.get_suffix() or ''}"
        return text

    def format_with_suffix(self) -> str:
        options = self.table.format
        text = format_number(self.value, self.get_decimals(), "," if options.comma else "")
        return f"{text} {self.get_suffix() or ''}"

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"Distance({self.value!r}, {self.unit!r})"
