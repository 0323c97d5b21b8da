from __future__ import annotations

from typing import Protocol, runtime_checkable

from cockroach_testkit.domain.process_details import ProcessDetails
from cockroach_testkit.integration.context_store import GLOBAL_NAMESPACE, ContextStore
from cockroach_testkit.kernel.step import PHASE_INJECT, StepOutcome
from cockroach_testkit.observability.adapters.logging import LogSink, emit_log
from cockroach_testkit.steps.keys import PROCESS_DETAILS_KEY

INJECTOR_NAME = "process_details_injection"


@runtime_checkable
class ProcessDetailsAware(Protocol):
    # Optional capability: test classes implementing it receive the running node's details.
    def set_process_details(self, details: ProcessDetails) -> None:
        raise NotImplementedError("ProcessDetailsAware.set_process_details must be implemented")


def inject_process_details(instance: object, store: ContextStore, log_sink: LogSink) -> StepOutcome:
    # Best effort: never raises, every branch is logged and returned as an outcome.
    instance_type = type(instance).__qualname__
    details = store.find(GLOBAL_NAMESPACE, PROCESS_DETAILS_KEY)
    if not isinstance(details, ProcessDetails):
        emit_log(log_sink, "info", "Process details injection skipped - no details in context", instance=instance_type)
        return StepOutcome.skipped(INJECTOR_NAME, PHASE_INJECT, "no process details in context")
    if not isinstance(instance, ProcessDetailsAware):
        emit_log(
            log_sink,
            "info",
            "Process details injection skipped - no set_process_details method",
            instance=instance_type,
        )
        return StepOutcome.skipped(INJECTOR_NAME, PHASE_INJECT, f"{instance_type} is not ProcessDetailsAware")
    try:
        instance.set_process_details(details)
    except Exception as exc:  # noqa: BLE001 - injection failures never abort test execution
        emit_log(
            log_sink,
            "info",
            "Process details injection failed",
            instance=instance_type,
            error=f"{type(exc).__name__}: {exc}",
        )
        return StepOutcome.failed(INJECTOR_NAME, PHASE_INJECT, exc)
    return StepOutcome.passed(INJECTOR_NAME, PHASE_INJECT)
