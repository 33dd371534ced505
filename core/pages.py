"""
core/pages.py
-------------
Page payload builders.

Each page is a pure function of (selected page, loaded collections,
static fixtures) and returns a JSON-serializable dict. The Streamlit
renderer and the backend API both consume these payloads; neither adds
data of its own.
"""

from __future__ import annotations

from copy import deepcopy
from typing import Any, Dict, List, Optional

from analytics.summary import compute_summary
from core import fixtures
from core.records import Insight
from core.state import DashboardState, Page

PAGE_SECTIONS: Dict[Page, List[fixtures.Section]] = {
    Page.EVENT_MANAGEMENT: fixtures.EVENT_MANAGEMENT,
    Page.MATCHING_TRACKER: fixtures.MATCHING_TRACKER,
    Page.MEETING_MONITORING: fixtures.MEETING_MONITORING,
    Page.PARTICIPANT_MANAGEMENT: fixtures.PARTICIPANT_MANAGEMENT,
    Page.REPORTS: fixtures.REPORTS,
    Page.AI_MATCHING_SETTINGS: fixtures.AI_MATCHING_SETTINGS,
}


def insight_card(insight: Insight) -> Dict[str, Any]:
    return {
        "id": insight.id,
        "title": insight.title,
        "description": insight.description,
        "action_link": insight.action_link,
    }


def build_realtime_page(state: DashboardState) -> Dict[str, Any]:
    """
    Real-Time KPI dashboard.

    While loading, only the header popovers are populated; metrics,
    chart, insight cards, rankings and callouts appear once the fetch
    has settled.
    """
    payload: Dict[str, Any] = {
        "page": Page.REAL_TIME_DASHBOARD.value,
        "title": "REAL-TIME KPI DASHBOARD",
        "loading": state.loading,
        "notifications": deepcopy(fixtures.NOTIFICATIONS),
        "admin_events": deepcopy(fixtures.ADMIN_EVENTS),
    }
    if state.loading:
        return payload

    payload.update(
        {
            "summary": compute_summary(state.collections).as_dict(),
            "activity": deepcopy(fixtures.ACTIVITY_BY_TIME),
            "insights": [insight_card(i) for i in state.collections.insights],
            "rankings": {
                "Matching in TOP 5": list(fixtures.TOP_MATCHES),
                "Meeting in Anticipation": list(fixtures.ANTICIPATED_MEETINGS),
            },
            "callouts": deepcopy(fixtures.CALLOUTS),
        }
    )
    return payload


def build_static_page(page: Page) -> Dict[str, Any]:
    return {
        "page": page.value,
        "title": page.value,
        "sections": deepcopy(PAGE_SECTIONS[page]),
    }


def build_page(state: DashboardState, page: Optional[Page] = None) -> Dict[str, Any]:
    """Build the payload for ``page`` (default: the state's selected page)."""
    page = page or state.page
    if page is Page.REAL_TIME_DASHBOARD:
        return build_realtime_page(state)
    return build_static_page(page)


def menu() -> List[str]:
    """Sidebar labels in display order."""
    return [p.value for p in Page]
