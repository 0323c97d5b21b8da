from __future__ import annotations

import subprocess
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from cockroach_testkit.config.models import CockroachConfig
from cockroach_testkit.domain.process_details import ProcessDetails
from cockroach_testkit.integration.context_store import StepContext
from cockroach_testkit.kernel.errors import StepExecutionError
from cockroach_testkit.steps.keys import BINARY_KEY, PROCESS_DETAILS_KEY


@dataclass(slots=True)
class RunInitScriptsStep:
    # Bootstraps schema/data by feeding each configured SQL file to `cockroach sql`.
    name: str = "run_init_scripts"
    run: Callable[..., subprocess.CompletedProcess[str]] = subprocess.run

    def set_up(self, context: StepContext, config: CockroachConfig) -> None:
        if not config.init_scripts:
            return
        binary = context.get(BINARY_KEY, str)
        details = context.get(PROCESS_DETAILS_KEY, ProcessDetails)
        for script in config.init_scripts:
            path = Path(script)
            if not path.is_file():
                raise StepExecutionError(f"init script not found: {script}")
            completed = self.run(
                [binary, "sql", "--insecure", f"--url={details.sql_url}", f"--file={path}"],
                capture_output=True,
                text=True,
                check=False,
            )
            if completed.returncode != 0:
                stderr = (completed.stderr or "").strip()
                raise StepExecutionError(f"init script {script} failed (exit={completed.returncode}): {stderr}")

    def clean_up(self, context: StepContext, config: CockroachConfig) -> None:
        # The in-memory store (or temp directory) goes away with the process.
        return None
