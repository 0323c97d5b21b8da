from .errors import LifecycleStateError, OrchestrationError, StepExecutionError, StepSetupError
from .execution import GroupExecution
from .step import Step, StepOutcome, step_name
from .step_registry import StepRegistry, UnknownStepError

__all__ = [
    "GroupExecution",
    "LifecycleStateError",
    "OrchestrationError",
    "Step",
    "StepExecutionError",
    "StepOutcome",
    "StepRegistry",
    "StepSetupError",
    "UnknownStepError",
    "step_name",
]
