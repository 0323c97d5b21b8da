from __future__ import annotations

import uuid
from dataclasses import dataclass, field

from cockroach_testkit.integration.context_store import ContextStore, InMemoryContextStore


@dataclass(frozen=True, slots=True)
class GroupExecution:
    # Per-run handle the host passes to every lifecycle hook of one test group.
    display_name: str
    store: ContextStore = field(default_factory=InMemoryContextStore)
    run_id: str = field(default_factory=lambda: uuid.uuid4().hex)

    @classmethod
    def open(cls, display_name: str) -> GroupExecution:
        # Each group gets a fresh store; nothing leaks between executions.
        if not display_name:
            raise ValueError("GroupExecution display_name must be a non-empty string")
        return cls(display_name=display_name, store=InMemoryContextStore())
