# ui/components/data_status.py
"""
Data source status for the dashboard sidebar.

Shows how many rows each Supabase table contributed to the current load
and which headline metrics are showing fallback literals instead of live
values, plus a one-line backend reachability badge.
"""

from __future__ import annotations

from typing import Any, Dict, List

import requests
import streamlit as st

from analytics.summary import fallback_metrics, source_counts
from core.state import Collections
from core.ui_config import BACKEND_STATUS_TTL, BACKEND_URL

METRIC_LABELS = {
    "total_participants": "Total Participants",
    "total_identified": "Identified",
    "avg_satisfaction": "Avg Satisfaction",
    "total_matches": "Total Matches",
    "total_meetings": "Meetings",
}


def source_rows(collections: Collections) -> List[Dict[str, Any]]:
    """One row per table: name, loaded row count and whether it is live."""
    return [
        {"table": table, "rows": count, "live": count > 0}
        for table, count in source_counts(collections).items()
    ]


def fallback_labels(collections: Collections) -> List[str]:
    return [METRIC_LABELS[name] for name in fallback_metrics(collections)]


def backend_reachable(base_url: str = BACKEND_URL) -> bool:
    """True when the backend answers /health with HTTP 200."""
    try:
        return requests.get(f"{base_url.rstrip('/')}/health", timeout=5).status_code == 200
    except requests.exceptions.RequestException:
        return False


@st.cache_data(ttl=BACKEND_STATUS_TTL)
def get_backend_reachable() -> bool:
    return backend_reachable()


def render_data_status(collections: Collections, loading: bool) -> None:
    """Render per-table load counts and active fallbacks in the sidebar."""
    st.sidebar.markdown("---")
    st.sidebar.caption("Data Sources")

    if loading:
        st.sidebar.caption("⏳ Loading…")
    else:
        for row in source_rows(collections):
            marker = "🟢" if row["live"] else "⚪"
            st.sidebar.caption(f"{marker} {row['table']}: {row['rows']} rows")

        labels = fallback_labels(collections)
        if labels:
            st.sidebar.caption(f"⚠️ Fallback values: {', '.join(labels)}")

    color, text = ("green", "ONLINE") if get_backend_reachable() else ("red", "OFFLINE")
    st.sidebar.markdown(
        f"<span style='color:{color}; font-weight:600;'>● Backend {text}</span>",
        unsafe_allow_html=True,
    )
