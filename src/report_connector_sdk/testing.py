"""
Standard Compliance Test Suite for report connectors.
Subclass it as ``Test...`` and override the fixtures to certify a connector.
"""
import pytest

from .models import ColumnKind, OptionSpec, QueryResult, TypeFidelity
from .protocols import DatasourceConnector, Runner


class ConnectorComplianceSuite:
    @pytest.fixture
    def connector(self) -> DatasourceConnector:
        """Override this fixture in subclass to return the connector under test."""
        raise NotImplementedError

    @pytest.fixture
    def connection_options(self) -> dict:
        """Override this fixture with options the connector can run queries with."""
        raise NotImplementedError

    @pytest.fixture
    def sample_query(self) -> str:
        return "SELECT 1 AS a, 'x' AS b"

    def test_protocol_contract(self, connector):
        assert isinstance(connector, DatasourceConnector)

    def test_options_contract(self, connector):
        """Every option is an OptionSpec and at least one of them is required."""
        assert connector.options
        assert all(isinstance(spec, OptionSpec) for spec in connector.options.values())
        assert any(spec.required for spec in connector.options.values())

    def test_get_runner_contract(self, connector, connection_options):
        runner = connector.get_runner(connection_options)
        assert isinstance(runner, Runner)

    @pytest.mark.asyncio
    async def test_test_connection_contract(self, connector, connection_options):
        assert isinstance(await connector.test_connection(connection_options), bool)

    @pytest.mark.asyncio
    async def test_execution_contract(self, connector, connection_options, sample_query):
        """Column types follow the first row and the row count matches the rows."""
        runner = connector.get_runner(connection_options)
        result = await runner(sample_query, None)

        assert isinstance(result, QueryResult)
        assert result.expected_row_count == len(result.rows)
        if result.rows:
            assert [col.name for col in result.column_types] == list(result.rows[0])
        else:
            assert result.column_types == []
        for col in result.column_types:
            assert col.kind in (ColumnKind.NUMBER, ColumnKind.STRING)
            assert col.fidelity == TypeFidelity.INFERRED
