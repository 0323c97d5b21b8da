from __future__ import annotations

import socket
import subprocess
from collections.abc import Callable
from dataclasses import dataclass

from cockroach_testkit.config.models import CockroachConfig
from cockroach_testkit.domain.process_details import ProcessDetails
from cockroach_testkit.integration.context_store import StepContext
from cockroach_testkit.kernel.errors import StepExecutionError
from cockroach_testkit.steps.keys import BINARY_KEY, PROCESS_DETAILS_KEY, PROCESS_KEY, STORE_DIR_KEY


_PORT_DRAW_ATTEMPTS = 16


def find_free_port(host: str) -> int:
    # The OS picks an unused port; it is released before cockroach binds it.
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as probe:
        probe.bind((host, 0))
        return int(probe.getsockname()[1])


def build_start_command(
    *,
    binary: str,
    config: CockroachConfig,
    sql_port: int,
    http_port: int,
    store_dir: str | None,
) -> list[str]:
    if config.store == "disk":
        if not store_dir:
            raise StepExecutionError("store='disk' requires a prepared store directory")
        store_arg = f"--store=path={store_dir}"
    else:
        store_arg = f"--store=type=mem,size={config.store_size}"
    return [
        binary,
        "start-single-node",
        "--insecure",
        f"--listen-addr={config.host}:{sql_port}",
        f"--http-addr={config.host}:{http_port}",
        store_arg,
        *config.extra_args,
    ]


def stop_process(process: object, *, timeout_seconds: float) -> str:
    # Return stop mode used: already_exited|graceful|forced.
    poll = getattr(process, "poll", None)
    if callable(poll) and poll() is not None:
        return "already_exited"
    process.terminate()  # type: ignore[attr-defined]
    try:
        process.wait(timeout=timeout_seconds)  # type: ignore[attr-defined]
        return "graceful"
    except subprocess.TimeoutExpired:
        process.kill()  # type: ignore[attr-defined]
        process.wait(timeout=timeout_seconds)  # type: ignore[attr-defined]
        return "forced"


@dataclass(slots=True)
class StartProcessStep:
    # Spawns a single-node insecure cluster and publishes its ProcessDetails.
    name: str = "start_process"
    spawn: Callable[..., object] = subprocess.Popen
    free_port: Callable[[str], int] = find_free_port

    def set_up(self, context: StepContext, config: CockroachConfig) -> None:
        binary = context.get(BINARY_KEY, str)
        sql_port = config.sql_port or self._draw_port(config.host, taken=config.http_port)
        http_port = config.http_port or self._draw_port(config.host, taken=sql_port)
        store_dir = context.find(STORE_DIR_KEY)
        command = build_start_command(
            binary=binary,
            config=config,
            sql_port=sql_port,
            http_port=http_port,
            store_dir=store_dir if isinstance(store_dir, str) else None,
        )
        try:
            process = self.spawn(
                command,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except OSError as exc:
            raise StepExecutionError(f"failed to spawn cockroach: {exc}") from exc
        context.put(PROCESS_KEY, process)
        context.put(
            PROCESS_DETAILS_KEY,
            ProcessDetails(
                host=config.host,
                sql_port=sql_port,
                http_port=http_port,
                user=config.user,
                database=config.database,
                pid=getattr(process, "pid", None),
                version=config.version,
            ),
        )

    def clean_up(self, context: StepContext, config: CockroachConfig) -> None:
        # Setup may have failed before spawning; only stop what was started.
        process = context.find(PROCESS_KEY)
        context.delete(PROCESS_DETAILS_KEY)
        if process is None:
            return
        try:
            stop_process(process, timeout_seconds=config.stop_timeout_seconds)
        finally:
            context.delete(PROCESS_KEY)

    def _draw_port(self, host: str, *, taken: int) -> int:
        # Released probe ports can be handed out again; never reuse the other listener's port.
        for _ in range(_PORT_DRAW_ATTEMPTS):
            port = self.free_port(host)
            if port != taken:
                return port
        raise StepExecutionError(f"could not allocate a port on {host} distinct from {taken}")
