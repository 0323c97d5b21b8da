from __future__ import annotations

from collections.abc import Generator, Iterator

import pytest
from pydantic import ValidationError

from cockroach_testkit import hookspecs
from cockroach_testkit.config.models import LoggingSettings
from cockroach_testkit.config.resolver import has_cockroach_config
from cockroach_testkit.domain.process_details import ProcessDetails
from cockroach_testkit.integration.context_store import GLOBAL_NAMESPACE
from cockroach_testkit.kernel.execution import GroupExecution
from cockroach_testkit.observability.adapters.logging import LogSink, build_log_sink, close_log_sink
from cockroach_testkit.orchestration.orchestrator import CockroachOrchestrator
from cockroach_testkit.steps.keys import PROCESS_DETAILS_KEY

# pytest host adapter: class-scoped fixture = group hooks, function fixture = instance hook,
# pytest_runtest_call wrapper = exception observer.

LOG_SINK_KEY = pytest.StashKey[LogSink]()
ORCHESTRATOR_KEY = pytest.StashKey[CockroachOrchestrator]()
EXECUTION_KEY = pytest.StashKey[GroupExecution]()


def pytest_addhooks(pluginmanager: pytest.PytestPluginManager) -> None:
    pluginmanager.add_hookspecs(hookspecs)


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addini("cockroach_log_sink", "cockroach-testkit log sink: stdout or jsonl", default="stdout")
    parser.addini("cockroach_log_path", "file path for the jsonl log sink", default="")
    parser.addini("cockroach_log_level", "minimum level: debug, info, warning, error", default="info")


def pytest_configure(config: pytest.Config) -> None:
    try:
        settings = LoggingSettings(
            sink=config.getini("cockroach_log_sink"),
            path=config.getini("cockroach_log_path") or None,
            level=config.getini("cockroach_log_level"),
        )
    except ValidationError as exc:
        raise pytest.UsageError(f"invalid cockroach-testkit logging options: {exc}") from exc
    config.stash[LOG_SINK_KEY] = build_log_sink(settings)


def pytest_unconfigure(config: pytest.Config) -> None:
    sink = config.stash.get(LOG_SINK_KEY, None)
    close_log_sink(sink)


def _group_node(item: pytest.Item) -> pytest.Class | None:
    node = item.getparent(pytest.Class)
    if node is None or ORCHESTRATOR_KEY not in node.stash:
        return None
    return node


@pytest.fixture(scope="class", autouse=True)
def _cockroach_group(request: pytest.FixtureRequest) -> Iterator[GroupExecution | None]:
    # before_all / after_all around every @cockroach test class.
    test_class = request.cls
    if test_class is None or not has_cockroach_config(test_class):
        yield None
        return
    orchestrator = CockroachOrchestrator.for_test_class(
        test_class,
        log_sink=request.config.stash[LOG_SINK_KEY],
    )
    request.config.hook.pytest_cockroach_configure_registry(
        registry=orchestrator.registry,
        test_class=test_class,
    )
    execution = GroupExecution.open(request.node.nodeid)
    request.node.stash[ORCHESTRATOR_KEY] = orchestrator
    request.node.stash[EXECUTION_KEY] = execution
    try:
        orchestrator.before_all(execution)
        yield execution
    finally:
        # Runs after a failed setup too; steps tolerate partially created state.
        orchestrator.after_all(execution)


@pytest.fixture(autouse=True)
def _cockroach_instance(request: pytest.FixtureRequest, _cockroach_group: GroupExecution | None) -> None:
    # Capability injection for every constructed test instance of a group.
    if _cockroach_group is None or request.instance is None:
        return
    node = _group_node(request.node)
    if node is None:
        return
    node.stash[ORCHESTRATOR_KEY].post_process_test_instance(request.instance, _cockroach_group)


@pytest.fixture
def cockroach_details(_cockroach_group: GroupExecution | None) -> ProcessDetails:
    # Connection details of the group's running node.
    if _cockroach_group is None:
        pytest.fail("cockroach_details is only available inside a @cockroach test class")
    return _cockroach_group.store.get(GLOBAL_NAMESPACE, PROCESS_DETAILS_KEY, ProcessDetails)


@pytest.hookimpl(wrapper=True)
def pytest_runtest_call(item: pytest.Item) -> Generator[None, object, object]:
    node = _group_node(item)
    if node is None:
        return (yield)
    try:
        return (yield)
    except Exception as exc:
        node.stash[ORCHESTRATOR_KEY].handle_test_execution_exception(node.stash[EXECUTION_KEY], exc)
