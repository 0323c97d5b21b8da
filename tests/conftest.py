from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

import pytest

from cockroach_testkit.integration.context_store import StepContext
from cockroach_testkit.observability.adapters.logging import MemoryLogSink

pytest_plugins = ["pytester"]


@dataclass(slots=True)
class RecordingStep:
    # Test double: records every call into a shared journal and can be told to fail.
    name: str
    journal: list[tuple[str, str]]
    fail_set_up: bool = False
    fail_clean_up: bool = False
    writes: dict[str, object] = field(default_factory=dict)

    def set_up(self, context: StepContext, config: object) -> None:
        self.journal.append(("set_up", self.name))
        if self.fail_set_up:
            raise RuntimeError(f"{self.name} set_up boom")
        for key, value in self.writes.items():
            context.put(key, value)

    def clean_up(self, context: StepContext, config: object) -> None:
        self.journal.append(("clean_up", self.name))
        if self.fail_clean_up:
            raise RuntimeError(f"{self.name} clean_up boom")


@pytest.fixture
def journal() -> list[tuple[str, str]]:
    return []


@pytest.fixture
def make_step(journal: list[tuple[str, str]]) -> Callable[..., RecordingStep]:
    def _make(name: str, **kwargs: object) -> RecordingStep:
        return RecordingStep(name=name, journal=journal, **kwargs)  # type: ignore[arg-type]

    return _make


@pytest.fixture
def log_sink() -> MemoryLogSink:
    return MemoryLogSink()
