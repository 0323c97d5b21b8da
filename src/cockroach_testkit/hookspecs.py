from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from cockroach_testkit.kernel.step_registry import StepRegistry


@pytest.hookspec
def pytest_cockroach_configure_registry(registry: StepRegistry, test_class: type[object]) -> None:
    """Insert, remove or replace steps for one test group before its setup begins.

    Called once per ``@cockroach`` test class, after the orchestrator has been
    built and before ``before_all``. The registry is sealed afterwards.
    """
