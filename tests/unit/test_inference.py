from decimal import Decimal

import pytest

from report_connector_sdk import ColumnKind, TypeFidelity, infer_column_kind, infer_column_types


@pytest.mark.parametrize("value", [1, 0, -7, 2.5, float("inf"), Decimal("1.10")])
def test_numbers_are_number(value):
    assert infer_column_kind(value) == ColumnKind.NUMBER


@pytest.mark.parametrize("value", ["x", "42", None, True, False, {"k": 1}, [1, 2]])
def test_everything_else_is_string(value):
    # Booleans subclass int but are not reported as numbers.
    assert infer_column_kind(value) == ColumnKind.STRING


def test_column_types_follow_first_row_key_order():
    rows = [{"b": "x", "a": 1, "c": None}]

    types = infer_column_types(rows)

    assert [c.name for c in types] == ["b", "a", "c"]
    assert [c.kind for c in types] == [ColumnKind.STRING, ColumnKind.NUMBER, ColumnKind.STRING]
    assert all(c.fidelity == TypeFidelity.INFERRED for c in types)


def test_only_first_row_is_sampled():
    # A null first value classifies the column as STRING even if later rows hold numbers.
    rows = [{"a": None, "b": 1}, {"a": 5, "b": "later"}, {"extra": 1}]

    types = infer_column_types(rows)

    assert [(c.name, c.kind) for c in types] == [("a", ColumnKind.STRING), ("b", ColumnKind.NUMBER)]


def test_empty_rows_give_no_column_types():
    assert infer_column_types([]) == []


def test_first_row_without_keys():
    assert infer_column_types([{}, {"a": 1}]) == []
