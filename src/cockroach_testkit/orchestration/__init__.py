from .orchestrator import CockroachOrchestrator, LifecycleState

__all__ = ["CockroachOrchestrator", "LifecycleState"]
