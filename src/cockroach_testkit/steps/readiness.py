from __future__ import annotations

import socket
import time
from collections.abc import Callable
from dataclasses import dataclass

from cockroach_testkit.config.models import CockroachConfig
from cockroach_testkit.domain.process_details import ProcessDetails
from cockroach_testkit.integration.context_store import StepContext
from cockroach_testkit.kernel.errors import StepExecutionError
from cockroach_testkit.steps.keys import PROCESS_DETAILS_KEY, PROCESS_KEY


@dataclass(slots=True)
class AwaitReadinessStep:
    # Blocks until the SQL port accepts connections, the process dies, or the timeout elapses.
    name: str = "await_readiness"
    connect: Callable[..., object] = socket.create_connection
    clock: Callable[[], float] = time.monotonic
    sleep: Callable[[float], None] = time.sleep
    poll_interval: float = 0.25

    def set_up(self, context: StepContext, config: CockroachConfig) -> None:
        details = context.get(PROCESS_DETAILS_KEY, ProcessDetails)
        process = context.find(PROCESS_KEY)
        deadline = self.clock() + config.ready_timeout_seconds
        while True:
            exit_code = _exit_code(process)
            if exit_code is not None:
                raise StepExecutionError(f"cockroach exited with code {exit_code} before becoming ready")
            if self._accepts_connections(details):
                return
            if self.clock() >= deadline:
                raise StepExecutionError(
                    f"cockroach not ready on {details.sql_address} after {config.ready_timeout_seconds}s"
                )
            self.sleep(self.poll_interval)

    def clean_up(self, context: StepContext, config: CockroachConfig) -> None:
        return None

    def _accepts_connections(self, details: ProcessDetails) -> bool:
        try:
            conn = self.connect((details.host, details.sql_port), timeout=self.poll_interval)
        except OSError:
            return False
        close = getattr(conn, "close", None)
        if callable(close):
            close()
        return True


def _exit_code(process: object | None) -> int | None:
    poll = getattr(process, "poll", None)
    if not callable(poll):
        return None
    return poll()
