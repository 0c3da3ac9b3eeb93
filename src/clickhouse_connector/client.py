import asyncio
import inspect
import json
import logging
from typing import Any, Dict, List, Union

import clickhouse_connect

from .config import ClickHouseOptions

logger = logging.getLogger(__name__)

JSON_EACH_ROW = "JSONEachRow"


def decode_json_rows(payload: Union[bytes, str]) -> List[Dict[str, Any]]:
    """Decodes a JSONEachRow body into row dicts, one per non-blank line.

    Rows are split on ``\\n`` alone; ClickHouse leaves other line separators
    such as U+0085 and U+2028 unescaped inside strings. ``String`` columns may
    hold bytes that are not valid UTF-8, which decode to U+FFFD.
    """
    if isinstance(payload, str):
        payload = payload.encode("utf-8")
    return [
        json.loads(line.decode("utf-8", errors="replace"))
        for line in payload.split(b"\n")
        if line.strip()
    ]


async def _close_vendor_client(client) -> None:
    result = client.close()
    if inspect.isawaitable(result):
        await result


def _close_abandoned(opening: "asyncio.Future") -> None:
    if opening.cancelled() or opening.exception() is not None:
        return
    logger.debug("Closing client opened after its caller gave up")
    asyncio.ensure_future(_close_vendor_client(opening.result()))


class ClickHouseClient:
    """
    Handle on one ClickHouse server, bound to a fixed set of options.
    The vendor client is opened on first use and shared by every later call,
    so building a handle does no network I/O.
    """

    def __init__(self, options: ClickHouseOptions):
        self.options = options
        self._client = None
        self._lock = asyncio.Lock()

    def __str__(self):
        return f"clickhouse ({self.options.display_host})"

    @property
    def is_open(self) -> bool:
        return self._client is not None

    async def _get_client(self):
        if self._client is None:
            async with self._lock:
                if self._client is None:
                    logger.debug(f"Opening client for {self}")
                    opening = asyncio.ensure_future(
                        clickhouse_connect.get_async_client(**self.options.client_kwargs())
                    )
                    try:
                        self._client = await asyncio.shield(opening)
                    except asyncio.CancelledError:
                        # Setup keeps running in the vendor's executor; close whatever it yields.
                        opening.add_done_callback(_close_abandoned)
                        raise
        return self._client

    async def fetch_json_rows(self, query: str) -> List[Dict[str, Any]]:
        """Runs ``query`` in JSONEachRow format and returns the decoded rows in order."""
        client = await self._get_client()
        payload = await client.raw_query(query, fmt=JSON_EACH_ROW)
        return decode_json_rows(payload)

    async def server_version(self) -> str:
        client = await self._get_client()
        return str(await client.command("SELECT version()"))

    async def close(self) -> None:
        if self._client is None:
            return
        client, self._client = self._client, None
        await _close_vendor_client(client)
