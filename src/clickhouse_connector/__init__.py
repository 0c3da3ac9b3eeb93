"""
ClickHouse datasource connector for the reporting host.

The host loads this module through the ``report_connector.datasources``
entry point and uses ``options``, ``get_runner`` and ``test_connection``.
"""
from .config import OPTIONS as options
from .config import ClickHouseOptions, ClickHouseSettings
from .client import ClickHouseClient
from .runner import ClickHouseRunner, get_runner
from .connection import probe_connection, test_connection

__all__ = [
    "options",
    "ClickHouseOptions",
    "ClickHouseSettings",
    "ClickHouseClient",
    "ClickHouseRunner",
    "get_runner",
    "probe_connection",
    "test_connection",
]
