import logging
from unittest.mock import MagicMock

import clickhouse_connector
from report_connector_sdk import DatasourceConnector, discover_connectors
from report_connector_sdk.discovery import ENTRY_POINT_GROUP


def _entry_point(name, loaded=None, error=None):
    ep = MagicMock()
    ep.name = name
    if error is not None:
        ep.load.side_effect = error
    else:
        ep.load.return_value = loaded
    return ep


def test_discovers_connectors_from_entry_points(monkeypatch):
    seen_groups = []

    def fake_entry_points(group):
        seen_groups.append(group)
        return [_entry_point("clickhouse", clickhouse_connector)]

    monkeypatch.setattr("report_connector_sdk.discovery.entry_points", fake_entry_points)

    found = discover_connectors()

    assert seen_groups == [ENTRY_POINT_GROUP]
    assert found == {"clickhouse": clickhouse_connector}
    assert isinstance(found["clickhouse"], DatasourceConnector)


def test_broken_connector_is_logged_and_skipped(monkeypatch, caplog):
    monkeypatch.setattr(
        "report_connector_sdk.discovery.entry_points",
        lambda group: [
            _entry_point("broken", error=ImportError("missing driver")),
            _entry_point("clickhouse", clickhouse_connector),
        ],
    )
    caplog.set_level(logging.ERROR, logger="report_connector_sdk.discovery")

    found = discover_connectors()

    assert list(found) == ["clickhouse"]
    assert "Failed to load connector broken: missing driver" in caplog.text
