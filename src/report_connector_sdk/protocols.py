from typing import Any, Dict, Optional, Protocol, runtime_checkable

from .models import OptionSpec, QueryResult


@runtime_checkable
class Runner(Protocol):
    """Executes one query per call and returns the normalized envelope."""

    async def __call__(self, query_text: str, query_path: Optional[str] = None) -> QueryResult:
        ...


@runtime_checkable
class DatasourceConnector(Protocol):
    """Contract for connector plugins loaded by the host.

    A connector is usually a module exposing these names at top level.
    """

    options: Dict[str, OptionSpec]

    def get_runner(self, options: Any) -> Runner:
        """Build a runner bound to one set of connection options."""
        ...

    async def test_connection(self, options: Any) -> bool:
        """Connectivity hook shown by the host's configuration surface."""
        ...
