from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from pydantic import ValidationError

from cockroach_testkit.config.models import CockroachConfig

T = TypeVar("T")

CONFIG_ATTRIBUTE = "__cockroach_config__"


# ConfigError is raised for missing or invalid group configuration (fail fast, before any step runs).
class ConfigError(ValueError):
    pass


def cockroach(config: CockroachConfig | None = None, **fields: Any) -> Callable[[T], T]:
    # Decorator attaches CockroachConfig to a test class for resolution at group start.
    if config is not None and fields:
        raise ConfigError("@cockroach accepts either a config object or field overrides, not both")
    if config is None:
        try:
            config = CockroachConfig(**fields)
        except ValidationError as exc:
            raise ConfigError(f"Invalid @cockroach configuration: {exc}") from exc

    def _decorate(target: T) -> T:
        if not isinstance(target, type):
            raise ConfigError("@cockroach must decorate a test class")
        setattr(target, CONFIG_ATTRIBUTE, config)
        return target

    return _decorate


def has_cockroach_config(test_class: type[object] | None) -> bool:
    return isinstance(getattr(test_class, CONFIG_ATTRIBUTE, None), CockroachConfig)


def resolve_configuration(test_class: type[object]) -> CockroachConfig:
    # Subclasses inherit the decorator's config through normal attribute lookup.
    config = getattr(test_class, CONFIG_ATTRIBUTE, None)
    if config is None:
        raise ConfigError(
            f"Expected @cockroach class-level configuration for {test_class.__module__}.{test_class.__qualname__}"
        )
    if not isinstance(config, CockroachConfig):
        raise ConfigError(
            f"{CONFIG_ATTRIBUTE} on {test_class.__qualname__} must be a CockroachConfig, "
            f"got {type(config).__name__}"
        )
    return config
