from __future__ import annotations

import shutil
from collections.abc import Callable
from dataclasses import dataclass

from cockroach_testkit.config.models import CockroachConfig
from cockroach_testkit.integration.context_store import StepContext
from cockroach_testkit.kernel.errors import StepExecutionError
from cockroach_testkit.steps.keys import BINARY_KEY


@dataclass(slots=True)
class LocateBinaryStep:
    # Resolves the cockroach executable from config or PATH.
    name: str = "locate_binary"
    which: Callable[[str], str | None] = shutil.which

    def set_up(self, context: StepContext, config: CockroachConfig) -> None:
        wanted = config.binary or "cockroach"
        resolved = self.which(wanted)
        if resolved is None:
            raise StepExecutionError(
                f"cockroach binary not found: {wanted!r} (set binary= in @cockroach or add it to PATH)"
            )
        context.put(BINARY_KEY, resolved)

    def clean_up(self, context: StepContext, config: CockroachConfig) -> None:
        context.delete(BINARY_KEY)
