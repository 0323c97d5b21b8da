from __future__ import annotations


class OrchestrationError(RuntimeError):
    # Base error for the group lifecycle path.
    pass


class LifecycleStateError(OrchestrationError):
    # Raised when a hook or registry mutation arrives in the wrong lifecycle state.
    pass


class StepSetupError(OrchestrationError):
    # Raised when a step's set_up fails; the cause is chained.
    def __init__(self, step: str, message: str) -> None:
        super().__init__(message)
        self.step = step


class StepExecutionError(RuntimeError):
    # Raised by concrete steps when their provisioning action cannot complete.
    pass
