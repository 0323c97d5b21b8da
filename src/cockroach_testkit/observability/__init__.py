from .adapters import (
    JsonlLogSink,
    LevelFilterLogSink,
    LogSink,
    MemoryLogSink,
    StdoutLogSink,
    build_log_sink,
    close_log_sink,
    emit_log,
)
from .domain import LogMessage
from .host_metadata import describe_host, print_host_metadata

__all__ = [
    "JsonlLogSink",
    "LevelFilterLogSink",
    "LogMessage",
    "LogSink",
    "MemoryLogSink",
    "StdoutLogSink",
    "build_log_sink",
    "close_log_sink",
    "describe_host",
    "emit_log",
    "print_host_metadata",
]
