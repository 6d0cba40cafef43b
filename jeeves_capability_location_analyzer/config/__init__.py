"""Configuration view and key constants for the location analyzer."""

from jeeves_capability_location_analyzer.config.reader import (
    CONFIG_PATH_ENV,
    ConfigError,
    ConfigReader,
    load_config,
)

__all__ = ["ConfigReader", "ConfigError", "load_config", "CONFIG_PATH_ENV"]
