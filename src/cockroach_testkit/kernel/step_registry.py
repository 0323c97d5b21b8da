from __future__ import annotations

from collections.abc import Iterable, Iterator

from cockroach_testkit.kernel.errors import LifecycleStateError
from cockroach_testkit.kernel.step import Step, step_name


class UnknownStepError(KeyError):
    pass


class StepRegistry:
    # Ordered steps owned by one orchestrator; copied from a baseline, never shared.
    def __init__(self, baseline: Iterable[Step] = ()) -> None:
        self._steps: list[Step] = list(baseline)
        self._sealed = False
        self._reversed = False

    def __iter__(self) -> Iterator[Step]:
        # Iterate over a snapshot so steps cannot disturb the running order.
        return iter(list(self._steps))

    def __len__(self) -> int:
        return len(self._steps)

    @property
    def names(self) -> list[str]:
        return [step_name(step) for step in self._steps]

    @property
    def sealed(self) -> bool:
        return self._sealed

    @property
    def reversed_for_cleanup(self) -> bool:
        return self._reversed

    def insert(self, index: int, step: Step) -> None:
        self._ensure_mutable()
        self._steps.insert(index, step)

    def append(self, step: Step) -> None:
        self._ensure_mutable()
        self._steps.append(step)

    def insert_before(self, name: str, step: Step) -> None:
        self._ensure_mutable()
        self._steps.insert(self.index_of(name), step)

    def insert_after(self, name: str, step: Step) -> None:
        self._ensure_mutable()
        self._steps.insert(self.index_of(name) + 1, step)

    def remove(self, name: str) -> Step:
        self._ensure_mutable()
        return self._steps.pop(self.index_of(name))

    def clear(self) -> None:
        self._ensure_mutable()
        self._steps.clear()

    def index_of(self, name: str) -> int:
        for index, step in enumerate(self._steps):
            if step_name(step) == name:
                return index
        raise UnknownStepError(name)

    def seal(self) -> None:
        # Sealed once orchestration begins; the order is fixed from then on.
        self._sealed = True

    def reverse_for_cleanup(self) -> None:
        # One-shot transition: setup order becomes cleanup order.
        if self._reversed:
            raise LifecycleStateError("Step registry is already reversed for cleanup")
        self._sealed = True
        self._reversed = True
        self._steps.reverse()

    def _ensure_mutable(self) -> None:
        if self._sealed:
            raise LifecycleStateError("Step registry cannot be changed once orchestration has begun")
