import asyncio
import logging
from typing import Any, Mapping, Optional, Union

from report_connector_sdk import ConnectionStatus, ErrorCode, Reachable, Unreachable

from .client import ClickHouseClient
from .config import ClickHouseOptions, ClickHouseSettings, coerce_options

logger = logging.getLogger(__name__)

Options = Union[ClickHouseOptions, Mapping[str, Any], None]


async def test_connection(options: Options) -> bool:
    """Host connectivity hook.

    Reports success without contacting the server, whatever the options.
    Use ``probe_connection`` for a real round-trip.
    """
    return True


async def probe_connection(options: Options, timeout: Optional[float] = None) -> ConnectionStatus:
    """Checks that the configured server answers a ``SELECT version()``.

    Args:
        options: Connection options, as for ``get_runner``.
        timeout (Optional[float]): Seconds to wait, covering both client setup
            and the query. Defaults to ``ClickHouseSettings.probe_timeout_sec``.

    Returns:
        ConnectionStatus: ``Reachable`` with the server version, or
            ``Unreachable`` with a reason and error code.
    """
    opts = coerce_options(options)
    if timeout is None:
        timeout = ClickHouseSettings().probe_timeout_sec

    client = ClickHouseClient(opts)
    try:
        version = await asyncio.wait_for(client.server_version(), timeout=timeout)
    except asyncio.TimeoutError:
        logger.warning(f"Health check against {client} timed out after {timeout}s")
        return Unreachable(reason=f"No response within {timeout}s", error_code=ErrorCode.TIMEOUT)
    except Exception as e:
        reason = opts.redact(str(e)) or type(e).__name__
        logger.warning(f"Health check against {client} failed: {reason}")
        return Unreachable(reason=reason, error_code=ErrorCode.CONNECTION_FAILED)
    finally:
        await client.close()

    return Reachable(server_version=version)
