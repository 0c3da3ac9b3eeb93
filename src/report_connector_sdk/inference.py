"""
Column type inference from sampled result rows.

Types are read off the first row only. A column whose first value is null,
or whose later values diverge from the first, is classified from that one
sample regardless.
"""
from decimal import Decimal
from numbers import Real
from typing import Any, Dict, List, Sequence

from .models import ColumnKind, ColumnType, TypeFidelity


def infer_column_kind(value: Any) -> ColumnKind:
    """Classifies a single decoded value.

    Real numbers map to NUMBER. Booleans are excluded even though ``bool``
    subclasses ``int``; they, nulls, strings and containers map to STRING.

    Args:
        value (Any): A scalar as decoded from the driver.

    Returns:
        ColumnKind: The inferred kind.
    """
    if isinstance(value, (Real, Decimal)) and not isinstance(value, bool):
        return ColumnKind.NUMBER
    return ColumnKind.STRING


def infer_column_types(rows: Sequence[Dict[str, Any]]) -> List[ColumnType]:
    """Builds column descriptors from the first row, in its key order.

    Args:
        rows (Sequence[Dict[str, Any]]): Decoded result rows.

    Returns:
        List[ColumnType]: One descriptor per key of the first row, or an
            empty list when there are no rows.
    """
    if not rows:
        return []
    first = rows[0]
    return [
        ColumnType(name=name, kind=infer_column_kind(value), fidelity=TypeFidelity.INFERRED)
        for name, value in first.items()
    ]
