from .errors import ErrorCode
from .models import (
    ColumnKind,
    ColumnType,
    ConnectionStatus,
    OptionSpec,
    QueryResult,
    Reachable,
    TypeFidelity,
    Unreachable,
)
from .inference import infer_column_kind, infer_column_types
from .protocols import DatasourceConnector, Runner
from .discovery import discover_connectors

__all__ = [
    "ErrorCode",
    "ColumnKind",
    "ColumnType",
    "ConnectionStatus",
    "OptionSpec",
    "QueryResult",
    "Reachable",
    "TypeFidelity",
    "Unreachable",
    "infer_column_kind",
    "infer_column_types",
    "DatasourceConnector",
    "Runner",
    "discover_connectors",
]
