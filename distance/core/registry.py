"""Config registration and the process-wide default unit table.

A host publishes configuration under a namespace and installs a lookup
function; Distance instances created without a table load the default
through that lookup the first time they need it.

Usage:
    register_defaults()                # shipped units, env overrides applied
    Distance(1500).to_kilometers()     # uses the default table

    set_config_lookup(my_host.config)  # or plug in the host's own lookup
"""

from __future__ import annotations

import copy
from threading import Lock
from typing import Any, Callable, Optional

from loguru import logger

from distance.config import Settings, settings as default_settings
from distance.core.errors import ConfigUnavailableError
from distance.models.unit_table import UnitTable
from distance.utils.units import DEFAULT_CONFIG

ConfigLookup = Callable[[str], Any]

_lock = Lock()
_registry: dict[str, UnitTable] = {}
_lookup: Optional[ConfigLookup] = None
_default: Optional[UnitTable] = None
_namespace: str = default_settings.namespace


def _registry_lookup(namespace: str) -> Optional[UnitTable]:
    return _registry.get(namespace)


def set_config_lookup(lookup: Optional[ConfigLookup], namespace: Optional[str] = None) -> None:
    """Install the "get config by namespace" capability used for the default table."""
    global _lookup, _default, _namespace
    with _lock:
        _lookup = lookup
        _default = None
        if namespace is not None:
            _namespace = namespace
    logger.debug("Config lookup installed", namespace=_namespace, builtin=lookup is _registry_lookup)


def get_config_lookup() -> Optional[ConfigLookup]:
    return _lookup


def register_config(namespace: str, config: Any) -> UnitTable:
    """Publish a table (or raw config mapping) under `namespace`."""
    global _lookup
    table = UnitTable.from_config(config)
    with _lock:
        _registry[namespace] = table
        if _lookup is None:
            _lookup = _registry_lookup
    logger.debug("Registered distance config", namespace=namespace, units=table.list_units())
    return table


def register_defaults(settings: Optional[Settings] = None) -> UnitTable:
    """Register the shipped unit table, merged with Settings overrides."""
    global _namespace, _default
    settings = settings or default_settings
    config = copy.deepcopy(DEFAULT_CONFIG)
    config["format"]["comma"] = settings.format_comma
    config["format"]["suffix"] = settings.format_suffix
    with _lock:
        if settings.namespace != _namespace:
            _namespace = settings.namespace
            _default = None
    return register_config(settings.namespace, config)


def default_table() -> UnitTable:
    """Return the process-wide default table, loading it at most once.

    Raises:
        ConfigUnavailableError: If no lookup is installed or it has no
            config for the current namespace.
    """
    global _default
    if _default is not None:
        return _default
    with _lock:
        if _default is None:
            if _lookup is None:
                raise ConfigUnavailableError()
            raw = _lookup(_namespace)
            if raw is None:
                raise ConfigUnavailableError(_namespace)
            _default = UnitTable.from_config(raw)
            logger.debug("Loaded default distance config", namespace=_namespace, units=_default.list_units())
    return _default


def reset() -> None:
    """Forget registered configs, the installed lookup and the cached default."""
    global _lookup, _default, _namespace
    with _lock:
        _registry.clear()
        _lookup = None
        _default = None
        _namespace = default_settings.namespace
    logger.debug("Distance config registry reset")
