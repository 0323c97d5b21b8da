from .logging import (
    JsonlLogSink,
    LevelFilterLogSink,
    LogSink,
    MemoryLogSink,
    StdoutLogSink,
    build_log_sink,
    close_log_sink,
    emit_log,
)

__all__ = [
    "JsonlLogSink",
    "LevelFilterLogSink",
    "LogSink",
    "MemoryLogSink",
    "StdoutLogSink",
    "build_log_sink",
    "close_log_sink",
    "emit_log",
]
