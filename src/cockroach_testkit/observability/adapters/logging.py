from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path
from typing import Protocol, runtime_checkable

from cockroach_testkit.config.models import LoggingSettings
from cockroach_testkit.observability.domain.logging import LEVELS, LogMessage


@runtime_checkable
class LogSink(Protocol):
    def emit(self, message: LogMessage) -> None:
        raise NotImplementedError("LogSink.emit must be implemented")


class StdoutLogSink:
    # Minimal structured log sink: one compact JSON object per line.
    def emit(self, message: LogMessage) -> None:
        print(json.dumps(_log_to_dict(message), separators=(",", ":"), ensure_ascii=False, default=str))


class JsonlLogSink:
    # File-backed structured log sink for lifecycle diagnostics.
    def __init__(self, path: Path) -> None:
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._file = self._path.open("a", encoding="utf-8")

    @property
    def path(self) -> Path:
        return self._path

    def emit(self, message: LogMessage) -> None:
        payload = json.dumps(_log_to_dict(message), separators=(",", ":"), ensure_ascii=False, default=str)
        self._file.write(payload + "\n")
        self._file.flush()

    def close(self) -> None:
        self._file.close()


@dataclass(slots=True)
class MemoryLogSink:
    # Keeps every message in order; used by tests and ad-hoc diagnostics.
    messages: list[LogMessage] = field(default_factory=list)

    def emit(self, message: LogMessage) -> None:
        self.messages.append(message)

    def matching(self, level: str | None = None, contains: str = "") -> list[LogMessage]:
        return [
            message
            for message in self.messages
            if (level is None or message.level == level) and contains in message.message
        ]


@dataclass(slots=True)
class LevelFilterLogSink:
    # Drops messages below min_level before forwarding.
    sink: LogSink
    min_level: str = "info"

    def __post_init__(self) -> None:
        if self.min_level not in LEVELS:
            raise ValueError(f"Unknown log level: {self.min_level!r}")

    def emit(self, message: LogMessage) -> None:
        if LEVELS[message.level] < LEVELS[self.min_level]:
            return
        self.sink.emit(message)

    def close(self) -> None:
        close_log_sink(self.sink)


def build_log_sink(settings: LoggingSettings) -> LevelFilterLogSink:
    # Build the session sink from validated settings.
    if settings.sink == "jsonl":
        assert settings.path is not None
        base: LogSink = JsonlLogSink(Path(settings.path))
    else:
        base = StdoutLogSink()
    return LevelFilterLogSink(sink=base, min_level=settings.level)


def emit_log(sink: LogSink, level: str, message: str, **fields: object) -> None:
    sink.emit(
        LogMessage(
            level=level,
            message=message,
            timestamp=datetime.now(tz=UTC),
            fields=dict(fields),
        )
    )


def close_log_sink(sink: object | None) -> None:
    close = getattr(sink, "close", None)
    if callable(close):
        close()


def _log_to_dict(message: LogMessage) -> dict[str, object]:
    return {
        "level": message.level,
        "message": message.message,
        "timestamp": message.timestamp.isoformat().replace("+00:00", "Z"),
        "fields": message.fields,
    }
