from __future__ import annotations

import shutil
import tempfile
from collections.abc import Callable
from dataclasses import dataclass

from cockroach_testkit.config.models import CockroachConfig
from cockroach_testkit.integration.context_store import StepContext
from cockroach_testkit.steps.keys import STORE_DIR_KEY


@dataclass(slots=True)
class PrepareStoreStep:
    # Disk stores get a throwaway directory; in-memory stores need nothing.
    name: str = "prepare_store"
    make_temp_dir: Callable[..., str] = tempfile.mkdtemp

    def set_up(self, context: StepContext, config: CockroachConfig) -> None:
        if config.store != "disk":
            return
        context.put(STORE_DIR_KEY, self.make_temp_dir(prefix="cockroach-store-"))

    def clean_up(self, context: StepContext, config: CockroachConfig) -> None:
        store_dir = context.find(STORE_DIR_KEY)
        if not isinstance(store_dir, str):
            return
        shutil.rmtree(store_dir, ignore_errors=True)
        context.delete(STORE_DIR_KEY)
