from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import quote


@dataclass(frozen=True, slots=True)
class ProcessDetails:
    # How tests reach the running CockroachDB node.
    host: str
    sql_port: int
    http_port: int
    user: str = "root"
    database: str = "defaultdb"
    pid: int | None = None
    version: str | None = None

    def __post_init__(self) -> None:
        if not self.host:
            raise ValueError("ProcessDetails.host must be a non-empty string")
        for label, port in (("sql_port", self.sql_port), ("http_port", self.http_port)):
            if not isinstance(port, int) or not 0 < port < 65536:
                raise ValueError(f"ProcessDetails.{label} must be a valid TCP port")

    @property
    def sql_address(self) -> str:
        return f"{self.host}:{self.sql_port}"

    @property
    def sql_url(self) -> str:
        # Insecure single-node clusters accept plain connections only.
        return (
            f"postgresql://{quote(self.user)}@{self.sql_address}/"
            f"{quote(self.database)}?sslmode=disable"
        )

    @property
    def http_url(self) -> str:
        return f"http://{self.host}:{self.http_port}"
