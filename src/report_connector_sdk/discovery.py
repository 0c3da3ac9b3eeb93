import logging
from importlib.metadata import entry_points
from typing import Any, Dict

logger = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "report_connector.datasources"


def discover_connectors() -> Dict[str, Any]:
    """Discovers installed connectors via 'report_connector.datasources' entry points.

    Returns:
        Dict[str, Any]: Dict mapping connector name (e.g., 'clickhouse') to the
            loaded connector object, usually a module.
    """
    connectors = {}
    for ep in entry_points(group=ENTRY_POINT_GROUP):
        try:
            connectors[ep.name] = ep.load()
        except Exception as e:
            logger.error(f"Failed to load connector {ep.name}: {e}")

    return connectors
