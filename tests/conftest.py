"""Shared fixtures for MatchPulse tests."""

import asyncio
import sys
from pathlib import Path
from types import SimpleNamespace

import pytest

# Ensure project root is importable
ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

from core.records import Insight, Match, Meeting, Participant  # noqa: E402
from core.state import Collections  # noqa: E402


class FakeQuery:
    """Mimics `client.table(name).select("*").execute()` on the async client."""

    def __init__(self, client, outcome):
        self._client = client
        self._outcome = outcome

    def select(self, *_args, **_kwargs):
        return self

    async def execute(self):
        self._client.started += 1
        if self._client.gate is not None:
            await self._client.gate(self._client)
        if isinstance(self._outcome, BaseException):
            raise self._outcome
        if callable(self._outcome):
            return SimpleNamespace(data=await self._outcome())
        return SimpleNamespace(data=self._outcome)


class FakeAsyncClient:
    """
    In-memory stand-in for supabase.AsyncClient.

    ``tables`` maps table name to rows, an exception to raise, or a
    coroutine function producing rows. Unknown tables return ``[]``.
    """

    def __init__(self, tables=None, gate=None):
        self.tables = tables or {}
        self.gate = gate
        self.requested = []
        self.started = 0

    def table(self, name):
        self.requested.append(name)
        return FakeQuery(self, self.tables.get(name, []))


def factory_for(client):
    async def _factory():
        return client
    return _factory


@pytest.fixture
def fake_client():
    return FakeAsyncClient


@pytest.fixture
def client_factory():
    return factory_for


@pytest.fixture
def run():
    """Run a coroutine to completion on a fresh event loop."""
    return asyncio.run


@pytest.fixture
def participant_rows():
    return [
        {"id": "p1", "name": "Kim Minseo", "login_time": "13:00", "is_identified": True, "satisfaction": 80},
        {"id": "p2", "name": "Park Jisoo", "login_time": "14:00", "is_identified": False, "satisfaction": 90},
        {"id": "p3", "name": "Lee Jiwon", "login_time": "15:00", "is_identified": True, "satisfaction": 85},
    ]


@pytest.fixture
def all_table_rows(participant_rows):
    return {
        "participants": participant_rows,
        "matches": [
            {"id": "m1", "participant1_id": "p1", "participant2_id": "p2", "match_time": "13:05"},
            {"id": "m2", "participant1_id": "p3", "participant2_id": "p1", "match_time": "14:10"},
        ],
        "meetings": [{"id": "mt1", "match_id": "m1", "start_time": "13:30", "anticipation": True}],
        "insights": [
            {"id": "i1", "type": "high-engagement", "description": "5 repeat logins", "action_link": "View"},
        ],
        "top_matching": [{"id": 1, "participant_id": "p1", "score": 98}],
        "anticipation": [{"id": 1, "participant_id": "p2", "anticipation_score": 0.7}],
    }


@pytest.fixture
def loaded_collections():
    return Collections(
        participants=(
            Participant(id="p1", is_identified=True, satisfaction=80),
            Participant(id="p2", is_identified=False, satisfaction=90),
        ),
        matches=(Match(id="m1"),),
        meetings=(Meeting(id="mt1"), Meeting(id="mt2")),
        insights=(Insight(id="i1", type="ai-suggestion", description="12 suggestions", action_link="Open"),),
    )
