import json
import logging
from unittest.mock import AsyncMock, MagicMock

import pytest

from report_connector_sdk.logger import TraceContextFilter


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Drops handlers installed by configure_logging so later tests log normally."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if any(isinstance(f, TraceContextFilter) for f in handler.filters):
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def json_each_row():
    """Encodes row dicts the way ClickHouse returns JSONEachRow bodies."""
    def encode(*rows) -> bytes:
        return "".join(json.dumps(row) + "\n" for row in rows).encode("utf-8")
    return encode


@pytest.fixture
def vendor_client():
    """Returns a mocked clickhouse_connect AsyncClient."""
    client = MagicMock()
    client.raw_query = AsyncMock(return_value=b"")
    client.command = AsyncMock(return_value="24.3.1.2672")
    client.close = MagicMock(return_value=None)
    return client


@pytest.fixture
def get_async_client(monkeypatch, vendor_client):
    """Replaces the vendor client factory so no test touches the network."""
    factory = AsyncMock(return_value=vendor_client)
    monkeypatch.setattr("clickhouse_connector.client.clickhouse_connect.get_async_client", factory)
    return factory


@pytest.fixture
def connection_args():
    return {"url": "http://localhost:8123", "username": "default", "password": "s3cr3t-pw"}
