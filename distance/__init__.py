"""Distance value objects converted through a configurable unit table."""

from distance.config import Settings, settings
from distance.core.collection import DistanceCollection
from distance.core.distance import Distance
from distance.core.errors import ConfigUnavailableError, UnitNotFoundError
from distance.core.registry import (
    default_table,
    register_config,
    register_defaults,
    set_config_lookup,
)
from distance.helpers import get_as, to_distance
from distance.models.unit_table import FormatOptions, UnitDefinition, UnitTable

__all__ = [
    "Distance",
    "DistanceCollection",
    "UnitTable",
    "UnitDefinition",
    "FormatOptions",
    "UnitNotFoundError",
    "ConfigUnavailableError",
    "Settings",
    "settings",
    "default_table",
    "register_config",
    "register_defaults",
    "set_config_lookup",
    "to_distance",
    "get_as",
]
