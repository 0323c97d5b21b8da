from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from cockroach_testkit.integration.context_store import StepContext

PHASE_SET_UP = "set_up"
PHASE_CLEAN_UP = "clean_up"
PHASE_INJECT = "inject"

STATUS_PASS = "PASS"
STATUS_FAIL = "FAIL"
STATUS_SKIP = "SKIP"


@runtime_checkable
class Step(Protocol):
    # One narrow provisioning action plus its undo; config is opaque to the orchestrator.
    name: str

    def set_up(self, context: StepContext, config: object) -> None:
        raise NotImplementedError("Step.set_up must be implemented")

    def clean_up(self, context: StepContext, config: object) -> None:
        raise NotImplementedError("Step.clean_up must be implemented")


@dataclass(frozen=True, slots=True)
class StepOutcome:
    # Result of a single step (or injection) invocation, kept for per-run diagnostics.
    step: str
    phase: str
    status: str
    detail: str = ""
    error: BaseException | None = None

    @classmethod
    def passed(cls, step: str, phase: str) -> StepOutcome:
        return cls(step=step, phase=phase, status=STATUS_PASS)

    @classmethod
    def failed(cls, step: str, phase: str, error: BaseException) -> StepOutcome:
        return cls(
            step=step,
            phase=phase,
            status=STATUS_FAIL,
            detail=f"{type(error).__name__}: {error}",
            error=error,
        )

    @classmethod
    def skipped(cls, step: str, phase: str, detail: str) -> StepOutcome:
        return cls(step=step, phase=phase, status=STATUS_SKIP, detail=detail)

    @property
    def ok(self) -> bool:
        return self.status != STATUS_FAIL


def step_name(step: object) -> str:
    # Steps without an explicit name are identified by their class.
    name = getattr(step, "name", None)
    if isinstance(name, str) and name:
        return name
    cls = type(step)
    return f"{cls.__module__}.{cls.__qualname__}"
