"""Exceptions raised by the distance core."""

from __future__ import annotations

from typing import Optional


class UnitNotFoundError(LookupError):
    """Raised when a unit is not declared in the table or has no measurement value."""

    def __init__(self, unit: str) -> None:
        self.unit = unit
        super().__init__(f"Measurement {unit} not found")


class ConfigUnavailableError(RuntimeError):
    """Raised when no table was supplied and no default config can be loaded."""

    def __init__(self, namespace: Optional[str] = None) -> None:
        self.namespace = namespace
        detail = f" under namespace '{namespace}'" if namespace else ""
        super().__init__(
            f"Unable to auto load distance config{detail}. "
            "Pass a UnitTable explicitly or call register_defaults() first."
        )
