from cockroach_testkit.kernel.step import Step

from .binary import LocateBinaryStep
from .init_scripts import RunInitScriptsStep
from .keys import BINARY_KEY, PROCESS_DETAILS_KEY, PROCESS_KEY, STORE_DIR_KEY
from .process import StartProcessStep, build_start_command, find_free_port, stop_process
from .readiness import AwaitReadinessStep
from .store import PrepareStoreStep

# Baseline order; each orchestrator copies it into its own registry.
STANDARD_STEPS: tuple[Step, ...] = (
    LocateBinaryStep(),
    PrepareStoreStep(),
    StartProcessStep(),
    AwaitReadinessStep(),
    RunInitScriptsStep(),
)

__all__ = [
    "BINARY_KEY",
    "PROCESS_DETAILS_KEY",
    "PROCESS_KEY",
    "STANDARD_STEPS",
    "STORE_DIR_KEY",
    "AwaitReadinessStep",
    "LocateBinaryStep",
    "PrepareStoreStep",
    "RunInitScriptsStep",
    "StartProcessStep",
    "build_start_command",
    "find_free_port",
    "stop_process",
]
