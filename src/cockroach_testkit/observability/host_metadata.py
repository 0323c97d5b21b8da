from __future__ import annotations

import os
import platform
import sys
from functools import lru_cache
from typing import TextIO


@lru_cache(maxsize=1)
def describe_host() -> dict[str, str]:
    # Collected once per process; the host does not change between test groups.
    uname = platform.uname()
    return {
        "os.name": uname.system,
        "os.release": uname.release,
        "os.version": uname.version,
        "os.arch": uname.machine,
        "host.name": uname.node,
        "cpu.count": str(os.cpu_count() or 0),
        "python.version": platform.python_version(),
        "python.implementation": platform.python_implementation(),
        "python.executable": sys.executable,
    }


def print_host_metadata(out: TextIO) -> None:
    # Operator troubleshooting only; nothing reads this back.
    metadata = describe_host()
    width = max(len(key) for key in metadata)
    for key, value in metadata.items():
        out.write(f"{key:<{width}} : {value}\n")
