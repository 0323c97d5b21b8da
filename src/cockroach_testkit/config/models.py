from __future__ import annotations

from typing import Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

# Models map the @cockroach decorator arguments and YAML files to typed, immutable structures.


class CockroachConfig(BaseModel):
    # Desired single-node topology for one test group; passed unchanged to every step.
    model_config = ConfigDict(extra="forbid", frozen=True)

    version: str | None = None
    # Explicit path to the cockroach binary; PATH lookup is used when omitted.
    binary: str | None = None
    host: str = "localhost"
    # Port 0 means "pick a free port at start time".
    sql_port: int = Field(default=0, ge=0, lt=65536, validation_alias=AliasChoices("sql_port", "port"))
    http_port: int = Field(default=0, ge=0, lt=65536)
    store: Literal["memory", "disk"] = "memory"
    store_size: str = "25%"
    user: str = "root"
    database: str = "defaultdb"
    init_scripts: tuple[str, ...] = ()
    ready_timeout_seconds: float = Field(default=30.0, gt=0)
    stop_timeout_seconds: float = Field(default=10.0, gt=0)
    extra_args: tuple[str, ...] = ()

    @model_validator(mode="after")
    def _distinct_ports(self) -> CockroachConfig:
        # Two fixed ports must not collide; zero ports are resolved later.
        if self.sql_port and self.sql_port == self.http_port:
            raise ValueError("sql_port and http_port must differ")
        return self


class LoggingSettings(BaseModel):
    # Session-wide log sink selection (pytest ini options).
    model_config = ConfigDict(extra="forbid", frozen=True)

    sink: Literal["stdout", "jsonl"] = "stdout"
    path: str | None = None
    level: Literal["debug", "info", "warning", "error"] = "info"

    @model_validator(mode="after")
    def _require_path(self) -> LoggingSettings:
        # For jsonl sink, a path is required to avoid silent defaults.
        if self.sink == "jsonl" and not self.path:
            raise ValueError("cockroach_log_path is required when cockroach_log_sink is 'jsonl'")
        return self
