from __future__ import annotations

import io
import traceback
from collections.abc import Iterable
from enum import Enum
from typing import NoReturn

from cockroach_testkit.config.resolver import resolve_configuration
from cockroach_testkit.injection.capability import inject_process_details
from cockroach_testkit.integration.context_store import StepContext
from cockroach_testkit.kernel.errors import LifecycleStateError, StepSetupError
from cockroach_testkit.kernel.execution import GroupExecution
from cockroach_testkit.kernel.step import PHASE_CLEAN_UP, PHASE_SET_UP, Step, StepOutcome, step_name
from cockroach_testkit.kernel.step_registry import StepRegistry
from cockroach_testkit.observability.adapters.logging import LogSink, StdoutLogSink, emit_log
from cockroach_testkit.observability.host_metadata import print_host_metadata
from cockroach_testkit.steps import STANDARD_STEPS


class LifecycleState(str, Enum):
    UNINITIALIZED = "uninitialized"
    SETUP_RUNNING = "setup_running"
    SETUP_FAILED = "setup_failed"
    READY = "ready"
    TEARDOWN_RUNNING = "teardown_running"
    DONE = "done"


class CockroachOrchestrator:
    # Single-use: one before_all/after_all pair per instance, created fresh per test group.
    def __init__(
        self,
        config: object,
        *,
        steps: Iterable[Step] | None = None,
        log_sink: LogSink | None = None,
    ) -> None:
        self._config = config
        self._registry = StepRegistry(STANDARD_STEPS if steps is None else steps)
        self._log_sink: LogSink = log_sink if log_sink is not None else StdoutLogSink()
        self._state = LifecycleState.UNINITIALIZED
        self._diagnostics: list[StepOutcome] = []

    @classmethod
    def for_test_class(
        cls,
        test_class: type[object],
        *,
        steps: Iterable[Step] | None = None,
        log_sink: LogSink | None = None,
    ) -> CockroachOrchestrator:
        # Configuration is resolved here so a misconfigured group never provisions anything.
        return cls(resolve_configuration(test_class), steps=steps, log_sink=log_sink)

    @property
    def config(self) -> object:
        return self._config

    @property
    def registry(self) -> StepRegistry:
        return self._registry

    @property
    def state(self) -> LifecycleState:
        return self._state

    @property
    def diagnostics(self) -> list[StepOutcome]:
        return list(self._diagnostics)

    def before_all(self, execution: GroupExecution) -> None:
        self._transition({LifecycleState.UNINITIALIZED}, LifecycleState.SETUP_RUNNING, hook="before_all")
        self._registry.seal()
        emit_log(self._log_sink, "info", "Bootstrap CockroachDB test group", group=execution.display_name)
        host_dump = io.StringIO()
        print_host_metadata(host_dump)
        emit_log(self._log_sink, "debug", "Host O/S metadata", dump=host_dump.getvalue())

        context = StepContext(execution.store)
        for step in self._registry:
            name = step_name(step)
            emit_log(self._log_sink, "debug", "Running step setup", step=name)
            try:
                step.set_up(context, self._config)
            except Exception as exc:
                self._record_setup_failure(name, execution, exc)
                raise StepSetupError(name, f"Step '{name}' failed during setup: {exc}") from exc
            except BaseException as exc:
                # Interrupts keep their identity; cleanup must still be reachable.
                self._record_setup_failure(name, execution, exc)
                raise
            self._diagnostics.append(StepOutcome.passed(name, PHASE_SET_UP))
        self._state = LifecycleState.READY

    def _record_setup_failure(self, name: str, execution: GroupExecution, exc: BaseException) -> None:
        self._diagnostics.append(StepOutcome.failed(name, PHASE_SET_UP, exc))
        self._state = LifecycleState.SETUP_FAILED
        emit_log(
            self._log_sink,
            "error",
            "Step setup failed",
            step=name,
            group=execution.display_name,
            error=f"{type(exc).__name__}: {exc}",
        )

    def post_process_test_instance(self, instance: object, execution: GroupExecution) -> StepOutcome:
        outcome = inject_process_details(instance, execution.store, self._log_sink)
        self._diagnostics.append(outcome)
        return outcome

    def handle_test_execution_exception(self, execution: GroupExecution, error: BaseException) -> NoReturn:
        # Observe only: the same exception object goes back to the host.
        emit_log(
            self._log_sink,
            "error",
            "Test execution error",
            group=execution.display_name,
            error=f"{type(error).__name__}: {error}",
            traceback="".join(traceback.format_exception(error)),
        )
        raise error

    def after_all(self, execution: GroupExecution) -> list[StepOutcome]:
        self._transition(
            {LifecycleState.READY, LifecycleState.SETUP_FAILED},
            LifecycleState.TEARDOWN_RUNNING,
            hook="after_all",
        )
        emit_log(self._log_sink, "info", "Teardown CockroachDB test group", group=execution.display_name)
        self._registry.reverse_for_cleanup()

        context = StepContext(execution.store)
        outcomes: list[StepOutcome] = []
        for step in self._registry:
            name = step_name(step)
            emit_log(self._log_sink, "debug", "Running step cleanup", step=name)
            try:
                step.clean_up(context, self._config)
            except Exception as exc:  # noqa: BLE001 - cleanup is best effort, siblings must still run
                emit_log(
                    self._log_sink,
                    "error",
                    "Step cleanup failed",
                    step=name,
                    group=execution.display_name,
                    error=f"{type(exc).__name__}: {exc}",
                )
                outcomes.append(StepOutcome.failed(name, PHASE_CLEAN_UP, exc))
                continue
            outcomes.append(StepOutcome.passed(name, PHASE_CLEAN_UP))
        self._diagnostics.extend(outcomes)
        self._state = LifecycleState.DONE
        return outcomes

    def _transition(self, allowed: set[LifecycleState], target: LifecycleState, *, hook: str) -> None:
        if self._state not in allowed:
            raise LifecycleStateError(
                f"{hook} is not allowed in state '{self._state.value}'; orchestrators are single-use"
            )
        self._state = target
