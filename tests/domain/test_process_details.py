from __future__ import annotations

import pytest

from cockroach_testkit.domain.process_details import ProcessDetails


def test_process_details_urls() -> None:
    # Derived URLs point at the insecure SQL and HTTP endpoints.
    details = ProcessDetails(host="localhost", sql_port=26257, http_port=8080)
    assert details.sql_address == "localhost:26257"
    assert details.sql_url == "postgresql://root@localhost:26257/defaultdb?sslmode=disable"
    assert details.http_url == "http://localhost:8080"


def test_process_details_quotes_user_and_database() -> None:
    details = ProcessDetails(host="h", sql_port=1, http_port=2, user="app user", database="my db")
    assert details.sql_url == "postgresql://app%20user@h:1/my%20db?sslmode=disable"


@pytest.mark.parametrize("port", [0, -1, 70000])
def test_process_details_rejects_invalid_ports(port: int) -> None:
    with pytest.raises(ValueError):
        ProcessDetails(host="localhost", sql_port=port, http_port=8080)


def test_process_details_rejects_empty_host() -> None:
    with pytest.raises(ValueError):
        ProcessDetails(host="", sql_port=26257, http_port=8080)
