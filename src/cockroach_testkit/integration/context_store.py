from __future__ import annotations

from typing import TypeVar

T = TypeVar("T")

# Namespace shared by steps and instance injection for well-known keys.
GLOBAL_NAMESPACE = "global"


class ContextEntryError(LookupError):
    # Raised when a context entry is missing or holds a value of another type.
    def __init__(self, namespace: str, key: str, reason: str) -> None:
        super().__init__(f"Missing/invalid context entry {namespace}:{key}: {reason}")
        self.namespace = namespace
        self.key = key


class ContextStore:
    # Port for per-group shared state keyed by (namespace, key).
    def put(self, namespace: str, key: str, value: object) -> None:
        raise NotImplementedError("ContextStore.put must be implemented")

    def find(self, namespace: str, key: str) -> object | None:
        raise NotImplementedError("ContextStore.find must be implemented")

    def delete(self, namespace: str, key: str) -> None:
        raise NotImplementedError("ContextStore.delete must be implemented")

    def get(self, namespace: str, key: str, expected_type: type[T]) -> T:
        value = self.find(namespace, key)
        if value is None:
            raise ContextEntryError(namespace, key, "not set")
        if not isinstance(value, expected_type):
            raise ContextEntryError(
                namespace,
                key,
                f"expected {expected_type.__name__}, got {type(value).__name__}",
            )
        return value


class InMemoryContextStore(ContextStore):
    # In-memory store; one instance per test-group execution.
    def __init__(self) -> None:
        self._store: dict[tuple[str, str], object] = {}

    def put(self, namespace: str, key: str, value: object) -> None:
        self._store[(namespace, key)] = value

    def find(self, namespace: str, key: str) -> object | None:
        return self._store.get((namespace, key))

    def delete(self, namespace: str, key: str) -> None:
        self._store.pop((namespace, key), None)

    def __len__(self) -> int:
        return len(self._store)


class StepContext:
    # Store view bound to a single namespace; this is what steps receive.
    def __init__(self, store: ContextStore, *, namespace: str = GLOBAL_NAMESPACE) -> None:
        if not namespace:
            raise ValueError("StepContext namespace must be a non-empty string")
        self._store = store
        self._namespace = namespace

    @property
    def namespace(self) -> str:
        return self._namespace

    def put(self, key: str, value: object) -> None:
        self._store.put(self._namespace, key, value)

    def get(self, key: str, expected_type: type[T]) -> T:
        return self._store.get(self._namespace, key, expected_type)

    def find(self, key: str) -> object | None:
        return self._store.find(self._namespace, key)

    def delete(self, key: str) -> None:
        self._store.delete(self._namespace, key)
