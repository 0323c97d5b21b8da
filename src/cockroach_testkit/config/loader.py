from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError

from cockroach_testkit.config.models import CockroachConfig
from cockroach_testkit.config.resolver import ConfigError


def load_yaml_config(path: Path) -> dict[str, object]:
    # YAML loader; returns a raw mapping for validation.
    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        raise ConfigError("Config root must be a mapping")
    return raw


def load_cockroach_config(path: Path | str) -> CockroachConfig:
    # A file may hold the settings at the root or under a top-level "cockroach" key.
    path = Path(path)
    raw = load_yaml_config(path)
    section = raw.get("cockroach", raw)
    if not isinstance(section, dict):
        raise ConfigError(f"{path}: 'cockroach' section must be a mapping")
    try:
        return CockroachConfig.model_validate(section)
    except ValidationError as exc:
        raise ConfigError(f"{path}: invalid cockroach configuration: {exc}") from exc
