"""
MatchPulse — Admin Dashboard
----------------------------
Streamlit entrypoint for the event matching admin dashboard.

    $ streamlit run ui/dashboard.py

- Loads the six Supabase tables once per browser session.
- Sidebar menu switches between the seven pages.
- Always renders: missing data falls back to fixture values.
"""

import asyncio
import os
import sys

import streamlit as st

# Ensure project root is on sys.path when running via `streamlit run ui/dashboard.py`
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.append(ROOT_DIR)

from core.fixtures import FOOTER
from core.loader import load_collections
from core.pages import build_page, menu
from core.state import DashboardController
from ui.components.data_status import render_data_status
from ui.components.panels import (
    activity_figure,
    render_callouts,
    render_header_popovers,
    render_insights,
    render_rankings,
    render_sections,
    render_summary,
)

st.set_page_config(page_title="MatchPulse Dashboard", page_icon="📊", layout="wide")

# ---------------------------------------------------------------------------
# 1. Session state: one controller, one fetch cycle
# ---------------------------------------------------------------------------
if "dashboard" not in st.session_state:
    st.session_state["dashboard"] = DashboardController(load_collections)

controller: DashboardController = st.session_state["dashboard"]

if controller.state.loading:
    with st.spinner("Loading..."):
        asyncio.run(controller.mount())

# ---------------------------------------------------------------------------
# 2. Sidebar navigation
# ---------------------------------------------------------------------------
labels = menu()


def _on_select() -> None:
    controller.select_page(st.session_state["menu_choice"])


with st.sidebar:
    st.title("Dashboard")
    st.radio(
        "Navigation",
        options=labels,
        index=labels.index(controller.state.page.value),
        key="menu_choice",
        on_change=_on_select,
        label_visibility="collapsed",
    )

render_data_status(controller.state.collections, controller.state.loading)

# ---------------------------------------------------------------------------
# 3. Active page
# ---------------------------------------------------------------------------
payload = build_page(controller.state)

if "sections" in payload:
    st.title(payload["title"])
    render_sections(payload["sections"])
else:
    render_header_popovers(payload["notifications"], payload["admin_events"])
    st.title(payload["title"])

    if payload["loading"]:
        st.info("Loading...")
    else:
        render_summary(payload["summary"])
        st.plotly_chart(activity_figure(payload["activity"]), use_container_width=True)

        left, right = st.columns([2, 1])
        with left:
            render_insights(payload["insights"])
        with right:
            render_rankings(payload["rankings"])

        render_callouts(payload["callouts"])

# ---------------------------------------------------------------------------
# 4. Footer
# ---------------------------------------------------------------------------
st.markdown("---")
st.caption(FOOTER)
