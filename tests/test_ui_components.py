"""Tests for UI helpers that do not need a running Streamlit session."""

from unittest.mock import MagicMock, patch

import requests

from core import fixtures
from core.records import Participant
from core.state import Collections
from ui.components.data_status import backend_reachable, fallback_labels, source_rows
from ui.components.panels import SECTION_RENDERERS, activity_figure


class TestDataStatus:
    def test_nothing_loaded(self):
        rows = source_rows(Collections())
        assert [r["table"] for r in rows] == [
            "participants", "matches", "meetings", "insights", "top_matching", "anticipation",
        ]
        assert not any(r["live"] for r in rows)
        assert fallback_labels(Collections()) == [
            "Total Participants", "Identified", "Avg Satisfaction", "Total Matches", "Meetings",
        ]

    def test_live_tables(self, loaded_collections):
        rows = {r["table"]: r for r in source_rows(loaded_collections)}
        assert rows["meetings"] == {"table": "meetings", "rows": 2, "live": True}
        assert rows["top_matching"]["live"] is False
        assert fallback_labels(loaded_collections) == []

    def test_unidentified_participants_flag_identified_fallback(self):
        collections = Collections(participants=(Participant(id="a"),))
        assert "Identified" in fallback_labels(collections)
        assert "Total Participants" not in fallback_labels(collections)

    @patch("ui.components.data_status.requests.get")
    def test_backend_reachable(self, mock_get):
        mock_get.return_value = MagicMock(status_code=200)
        assert backend_reachable("http://backend/") is True
        mock_get.assert_called_once_with("http://backend/health", timeout=5)

    @patch("ui.components.data_status.requests.get")
    def test_backend_http_error(self, mock_get):
        mock_get.return_value = MagicMock(status_code=503)
        assert backend_reachable("http://backend") is False

    @patch("ui.components.data_status.requests.get", side_effect=requests.exceptions.ConnectionError())
    def test_backend_offline(self, _mock_get):
        assert backend_reachable("http://backend") is False

class TestPanels:
    def test_activity_figure_has_two_series(self):
        fig = activity_figure(fixtures.ACTIVITY_BY_TIME)
        names = sorted(trace.name for trace in fig.data)
        assert names == ["Meeting", "Participant Login"]
        assert list(fig.data[0].x) == [row["time"] for row in fixtures.ACTIVITY_BY_TIME]

    def test_every_fixture_section_kind_has_renderer(self):
        pages = [
            fixtures.EVENT_MANAGEMENT,
            fixtures.MATCHING_TRACKER,
            fixtures.MEETING_MONITORING,
            fixtures.PARTICIPANT_MANAGEMENT,
            fixtures.REPORTS,
            fixtures.AI_MATCHING_SETTINGS,
        ]
        kinds = {section["kind"] for page in pages for section in page}
        assert kinds <= set(SECTION_RENDERERS)
