"""Pydantic models for the unit table a Distance converts against."""

from __future__ import annotations

import math
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class UnitDefinition(BaseModel):
    """One declared unit. `factor` is the number of meters in one unit."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    factor: Optional[float] = Field(default=None, alias="unit")
    decimals: int = Field(default=2, ge=0)
    suffix: Optional[str] = None

    @field_validator("factor")
    @classmethod
    def factor_not_negative(cls, v: Optional[float]) -> Optional[float]:
        if v is not None and (not math.isfinite(v) or v < 0):
            raise ValueError("Unit factor must be a finite, non-negative number")
        return v


class FormatOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    comma: bool = True
    suffix: bool = False


class UnitTable(BaseModel):
    """Read-only table of declared units plus the default string format.

    Unit declaration order is kept and drives the order of every
    multi-unit expansion.
    """

    model_config = ConfigDict(frozen=True)

    units: dict[str, UnitDefinition] = Field(default_factory=dict)
    format: FormatOptions = Field(default_factory=FormatOptions)

    @classmethod
    def from_config(cls, config: Any) -> UnitTable:
        """Build a table from a nested mapping (`units.<id>.unit`, `format.comma`, ...)."""
        if isinstance(config, cls):
            return config
        return cls.model_validate(config)

    def list_units(self) -> list[str]:
        return list(self.units)

    def definition(self, unit: str) -> Optional[UnitDefinition]:
        return self.units.get(unit)

    def to_config(self) -> dict:
        """Dump back to the nested mapping format, `unit` key included."""
        return self.model_dump(by_alias=True)

    def resolve(self, key: Optional[str] = None, fallback: Any = None) -> Any:
        """Dotted-path lookup, e.g. ``resolve("units.kilometers.decimals")``.

        A missing segment (or an explicit null value) returns `fallback`.
        """
        node: Any = self.to_config()
        if key is None:
            return node
        for segment in key.split("."):
            if not isinstance(node, dict) or segment not in node:
                return fallback
            node = node[segment]
        return fallback if node is None else node
