"""Read-only configuration view addressed with dotted keys.

Mirrors the host's config service: optional getters return None for absent
keys and raise ConfigError when a present value has the wrong type.
"""

from __future__ import annotations

import os
from pathlib import Path
from types import MappingProxyType
from typing import Any, List, Mapping, Optional, Union

import yaml

CONFIG_PATH_ENV = "LOCATION_ANALYZER_CONFIG"

_MISSING = object()


class ConfigError(ValueError):
    """A configuration value is present but has the wrong type."""

    def __init__(self, key: str, expected: str, value: Any):
        self.key = key
        self.expected = expected
        self.value = value
        super().__init__(
            f"Invalid type in config for key '{key}', "
            f"got {type(value).__name__}, wanted {expected}"
        )


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return MappingProxyType({str(k): _freeze(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    return value


class ConfigReader:
    """Immutable view over nested configuration data."""

    def __init__(self, data: Optional[Mapping[str, Any]] = None, prefix: str = ""):
        self._data = _freeze(data or {})
        self._prefix = prefix

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "ConfigReader":
        with open(path, encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
        if not isinstance(data, Mapping):
            raise ConfigError("<root>", "object", data)
        return cls(data)

    def _full_key(self, key: str) -> str:
        return f"{self._prefix}.{key}" if self._prefix else key

    def _lookup(self, key: str) -> Any:
        node: Any = self._data
        for part in key.split("."):
            if not isinstance(node, Mapping) or part not in node:
                return _MISSING
            node = node[part]
        return node

    def has(self, key: str) -> bool:
        return self._lookup(key) is not _MISSING

    def get_optional(self, key: str) -> Any:
        value = self._lookup(key)
        return None if value is _MISSING else value

    def get_optional_bool(self, key: str) -> Optional[bool]:
        value = self.get_optional(key)
        if value is None or isinstance(value, bool):
            return value
        if isinstance(value, str) and value.strip().lower() in ("true", "false"):
            return value.strip().lower() == "true"
        raise ConfigError(self._full_key(key), "boolean", value)

    def get_optional_number(self, key: str) -> Optional[float]:
        value = self.get_optional(key)
        if value is None:
            return None
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ConfigError(self._full_key(key), "number", value)
        return float(value)

    def get_optional_string_array(self, key: str) -> Optional[List[str]]:
        value = self.get_optional(key)
        if value is None:
            return None
        if not isinstance(value, tuple) or not all(isinstance(v, str) for v in value):
            raise ConfigError(self._full_key(key), "string array", value)
        return list(value)

    def get_optional_config(self, key: str) -> Optional["ConfigReader"]:
        value = self.get_optional(key)
        if value is None:
            return None
        if not isinstance(value, Mapping):
            raise ConfigError(self._full_key(key), "object", value)
        return ConfigReader(value, prefix=self._full_key(key))

    def get_config_array(self, key: str) -> List["ConfigReader"]:
        """Return a list of sub-views; absent key yields an empty list."""
        value = self.get_optional(key)
        if value is None:
            return []
        if not isinstance(value, tuple) or not all(isinstance(v, Mapping) for v in value):
            raise ConfigError(self._full_key(key), "object array", value)
        return [
            ConfigReader(item, prefix=f"{self._full_key(key)}[{i}]")
            for i, item in enumerate(value)
        ]


def load_config(path: Optional[Union[str, Path]] = None) -> ConfigReader:
    """Load configuration from a YAML file.

    Falls back to the LOCATION_ANALYZER_CONFIG environment variable, then to
    an empty configuration (every policy at its default).
    """
    path = path or os.getenv(CONFIG_PATH_ENV)
    if not path:
        return ConfigReader()
    return ConfigReader.from_yaml(path)


__all__ = ["ConfigReader", "ConfigError", "load_config", "CONFIG_PATH_ENV"]
