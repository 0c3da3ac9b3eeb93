import pytest
from pydantic import TypeAdapter, ValidationError

from report_connector_sdk import (
    ColumnKind,
    ColumnType,
    ConnectionStatus,
    ErrorCode,
    OptionSpec,
    QueryResult,
    Reachable,
    TypeFidelity,
    Unreachable,
)


def test_from_rows_builds_host_envelope():
    result = QueryResult.from_rows([{"a": 1, "b": "x"}])

    assert result.rows == [{"a": 1, "b": "x"}]
    assert result.expected_row_count == 1
    assert result.to_host() == {
        "rows": [{"a": 1, "b": "x"}],
        "columnTypes": [
            {"name": "a", "evidenceType": "number", "typeFidelity": "inferred"},
            {"name": "b", "evidenceType": "string", "typeFidelity": "inferred"},
        ],
        "expectedRowCount": 1,
    }


def test_from_rows_empty():
    result = QueryResult.from_rows([])

    assert result.rows == []
    assert result.column_types == []
    assert result.expected_row_count == 0


def test_row_values_are_not_coerced_to_inferred_type():
    rows = [{"a": 1, "b": "x"}, {"a": 2.5, "b": "y"}, {"a": "3", "b": None}]

    result = QueryResult.from_rows(rows)

    assert result.rows[1]["a"] == 2.5
    assert isinstance(result.rows[1]["a"], float)
    assert result.rows[2] == {"a": "3", "b": None}
    assert result.expected_row_count == len(rows)


def test_from_rows_accepts_generators():
    result = QueryResult.from_rows({"n": i} for i in range(3))

    assert result.expected_row_count == 3
    assert [c.name for c in result.column_types] == ["n"]


def test_column_type_accepts_host_aliases():
    col = ColumnType.model_validate({"name": "a", "evidenceType": "number", "typeFidelity": "inferred"})

    assert col.kind == ColumnKind.NUMBER
    assert col.fidelity == TypeFidelity.INFERRED


def test_column_type_rejects_unknown_fidelity():
    with pytest.raises(ValidationError):
        ColumnType(name="a", kind=ColumnKind.NUMBER, fidelity="precise")


def test_option_spec_defaults():
    spec = OptionSpec(title="Password", secret=True)

    assert spec.type == "string"
    assert spec.secret is True
    assert spec.required is False


def test_connection_status_is_tagged():
    adapter = TypeAdapter(ConnectionStatus)

    ok = adapter.validate_python({"status": "reachable", "server_version": "24.3"})
    down = adapter.validate_python(
        {"status": "unreachable", "reason": "refused", "error_code": "CONNECTION_FAILED"}
    )

    assert isinstance(ok, Reachable) and bool(ok) is True
    assert isinstance(down, Unreachable) and bool(down) is False
    assert down.error_code == ErrorCode.CONNECTION_FAILED
