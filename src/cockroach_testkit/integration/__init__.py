from .context_store import (
    GLOBAL_NAMESPACE,
    ContextEntryError,
    ContextStore,
    InMemoryContextStore,
    StepContext,
)

__all__ = [
    "GLOBAL_NAMESPACE",
    "ContextEntryError",
    "ContextStore",
    "InMemoryContextStore",
    "StepContext",
]
