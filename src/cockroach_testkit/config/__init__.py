from .loader import load_cockroach_config, load_yaml_config
from .models import CockroachConfig, LoggingSettings
from .resolver import ConfigError, cockroach, has_cockroach_config, resolve_configuration

__all__ = [
    "CockroachConfig",
    "ConfigError",
    "LoggingSettings",
    "cockroach",
    "has_cockroach_config",
    "load_cockroach_config",
    "load_yaml_config",
    "resolve_configuration",
]
