from .config import CockroachConfig, ConfigError, cockroach, load_cockroach_config, resolve_configuration
from .domain import ProcessDetails
from .injection import ProcessDetailsAware
from .integration import GLOBAL_NAMESPACE, ContextEntryError, InMemoryContextStore, StepContext
from .kernel import (
    GroupExecution,
    LifecycleStateError,
    OrchestrationError,
    Step,
    StepExecutionError,
    StepOutcome,
    StepRegistry,
    StepSetupError,
)
from .orchestration import CockroachOrchestrator, LifecycleState
from .steps import PROCESS_DETAILS_KEY, STANDARD_STEPS

__all__ = [
    "GLOBAL_NAMESPACE",
    "PROCESS_DETAILS_KEY",
    "STANDARD_STEPS",
    "CockroachConfig",
    "CockroachOrchestrator",
    "ConfigError",
    "ContextEntryError",
    "GroupExecution",
    "InMemoryContextStore",
    "LifecycleState",
    "LifecycleStateError",
    "OrchestrationError",
    "ProcessDetails",
    "ProcessDetailsAware",
    "Step",
    "StepContext",
    "StepExecutionError",
    "StepOutcome",
    "StepRegistry",
    "StepSetupError",
    "cockroach",
    "load_cockroach_config",
    "resolve_configuration",
]
