from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from cockroach_testkit.config.models import LoggingSettings
from cockroach_testkit.observability.adapters.logging import (
    JsonlLogSink,
    LevelFilterLogSink,
    MemoryLogSink,
    StdoutLogSink,
    build_log_sink,
    emit_log,
)
from cockroach_testkit.observability.domain.logging import LogMessage
from cockroach_testkit.observability.host_metadata import describe_host, print_host_metadata


def test_log_message_requires_known_level() -> None:
    with pytest.raises(ValueError):
        LogMessage(level="", message="x")
    with pytest.raises(ValueError):
        LogMessage(level="verbose", message="x")


def test_stdout_sink_writes_compact_json(capsys) -> None:
    emit_log(StdoutLogSink(), "info", "hello", step="start_process")
    line = capsys.readouterr().out.strip()
    payload = json.loads(line)
    assert payload["level"] == "info"
    assert payload["message"] == "hello"
    assert payload["fields"] == {"step": "start_process"}
    assert payload["timestamp"].endswith("Z")


def test_jsonl_sink_appends_lines(tmp_path: Path) -> None:
    path = tmp_path / "logs" / "cockroach.jsonl"
    sink = JsonlLogSink(path)
    emit_log(sink, "info", "one")
    emit_log(sink, "error", "two", error=ValueError("x"))
    sink.close()
    lines = [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]
    assert [line["message"] for line in lines] == ["one", "two"]
    # Non-JSON field values are stringified.
    assert lines[1]["fields"]["error"] == "x"


def test_level_filter_drops_lower_levels() -> None:
    memory = MemoryLogSink()
    sink = LevelFilterLogSink(sink=memory, min_level="info")
    emit_log(sink, "debug", "hidden")
    emit_log(sink, "info", "shown")
    emit_log(sink, "error", "also shown")
    assert [m.message for m in memory.messages] == ["shown", "also shown"]


def test_level_filter_rejects_unknown_level() -> None:
    with pytest.raises(ValueError):
        LevelFilterLogSink(sink=MemoryLogSink(), min_level="loud")


def test_build_log_sink_for_jsonl(tmp_path: Path) -> None:
    path = tmp_path / "out.jsonl"
    sink = build_log_sink(LoggingSettings(sink="jsonl", path=str(path), level="debug"))
    emit_log(sink, "debug", "kept")
    sink.close()
    assert "kept" in path.read_text(encoding="utf-8")


def test_logging_settings_require_path_for_jsonl() -> None:
    with pytest.raises(ValueError):
        LoggingSettings(sink="jsonl")


def test_host_metadata_dump_lists_os_and_python() -> None:
    # Dump is diagnostic text; keys are stable for operators.
    out = io.StringIO()
    print_host_metadata(out)
    text = out.getvalue()
    assert "os.name" in text
    assert "python.version" in text
    assert describe_host() is describe_host()
