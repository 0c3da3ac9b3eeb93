import logging
import uuid
from typing import Any, Mapping, Optional, Union

from report_connector_sdk import QueryResult
from report_connector_sdk.logger import current_trace_id, trace_context

from .client import ClickHouseClient
from .config import ClickHouseOptions, coerce_options

_logger = logging.getLogger(__name__)


class ClickHouseRunner:
    """Runs host queries against one ClickHouse handle.

    Failures are logged once and re-raised unchanged; nothing is retried and
    no partial result is returned.
    """

    def __init__(self, client: ClickHouseClient, logger: Optional[logging.Logger] = None):
        self.client = client
        self.logger = logger if logger is not None else _logger

    async def __call__(self, query_text: str, query_path: Optional[str] = None) -> QueryResult:
        with trace_context(current_trace_id() or uuid.uuid4().hex):
            try:
                rows = await self.client.fetch_json_rows(query_text)
            except Exception:
                self.logger.exception("Error executing query")
                raise
        return QueryResult.from_rows(rows)

    async def close(self) -> None:
        """Releases the vendor client, if one was opened."""
        await self.client.close()


def get_runner(
    options: Union[ClickHouseOptions, Mapping[str, Any], None],
    logger: Optional[logging.Logger] = None,
) -> ClickHouseRunner:
    """Builds the file-based runner for one set of connection options.

    Args:
        options: Host-supplied ``url``, ``username`` and ``password``.
        logger: Diagnostics sink for query failures; defaults to this
            module's logger.

    Returns:
        ClickHouseRunner: Awaitable callable ``(query_text, query_path)``.
    """
    return ClickHouseRunner(ClickHouseClient(coerce_options(options)), logger=logger)
