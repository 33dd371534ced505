"""
MatchPulse — Panel Rendering Components
---------------------------------------
Streamlit renderers for the page payloads built by core.pages.

Design
------
- Payloads in, widgets out: no data fetching or metric math here.
- One renderer per section kind ("list", "table", "groups").
- Chart built with Plotly so Streamlit pages can display it directly.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List

import pandas as pd
import plotly.express as px
import streamlit as st


# --------------------------------------------------------------------------- #
# Generic sections
# --------------------------------------------------------------------------- #

def render_list(section: Dict[str, Any]) -> None:
    st.subheader(section["title"])
    st.markdown("\n".join(f"- {item}" for item in section["items"]))


def render_table(section: Dict[str, Any]) -> None:
    st.subheader(section["title"])
    df = pd.DataFrame(section["rows"], columns=section["columns"])
    st.dataframe(df, hide_index=True, use_container_width=True)


def render_groups(section: Dict[str, Any]) -> None:
    st.subheader(section["title"])
    groups = section["groups"]
    for col, (heading, names) in zip(st.columns(len(groups)), groups.items()):
        with col:
            st.markdown(f"**{heading}**")
            st.markdown("\n".join(f"- {n}" for n in names))


SECTION_RENDERERS = {
    "list": render_list,
    "table": render_table,
    "groups": render_groups,
}


def render_sections(sections: Iterable[Dict[str, Any]]) -> None:
    for section in sections:
        renderer = SECTION_RENDERERS.get(section.get("kind"))
        if renderer is None:
            st.warning(f"Unsupported section: {section.get('kind')}")
            continue
        with st.container(border=True):
            renderer(section)


# --------------------------------------------------------------------------- #
# Real-Time Dashboard pieces
# --------------------------------------------------------------------------- #

def render_header_popovers(notifications: List[Dict[str, Any]], admin_events: List[Dict[str, Any]]) -> None:
    _, bell, events = st.columns([6, 1, 2])

    with bell:
        with st.popover("🔔"):
            st.markdown("**Notifications**")
            if not notifications:
                st.caption("No notifications")
            for n in notifications:
                st.write(n["message"])
                st.caption(n["time"])

    with events:
        with st.popover("📅 Admin Events"):
            st.markdown("**Admin Events**")
            if not admin_events:
                st.caption("No events")
            for e in admin_events:
                st.write(e["title"])
                st.caption(f"{e['date']} — {e['desc']}")


def render_summary(summary: Dict[str, Any]) -> None:
    cols = st.columns(6)
    cols[0].metric("Total Participants", summary["total_participants"])
    cols[1].metric(
        "Real-Time Identified",
        f"{summary['total_identified']} ({summary['identified_pct']}%)",
    )
    cols[2].metric("Total Matches", summary["total_matches"])
    cols[3].metric("Average Satisfaction", f"{summary['avg_satisfaction']}%")
    cols[4].metric("Total Meetings", summary["total_meetings"])
    cols[5].metric("Peak", summary["peak"])


def activity_figure(activity: List[Dict[str, Any]]):
    """Line chart of logins and meetings per hour."""
    df = pd.DataFrame(activity).rename(columns={"login": "Participant Login", "meeting": "Meeting"})
    long_df = df.melt(id_vars="time", var_name="series", value_name="count")
    fig = px.line(long_df, x="time", y="count", color="series", title="Activity by Time")
    fig.update_layout(height=300, legend_title_text="", xaxis_title=None, yaxis_title=None)
    return fig


def render_insights(insights: List[Dict[str, Any]]) -> None:
    st.subheader("Real-Time Insights")
    if not insights:
        st.info("No live insights yet.")
    for card in insights:
        with st.container(border=True):
            st.markdown(f"**{card['title']}**")
            st.write(card["description"])
            if card["action_link"]:
                st.caption(card["action_link"])


def render_rankings(rankings: Dict[str, List[str]]) -> None:
    for col, (heading, names) in zip(st.columns(len(rankings)), rankings.items()):
        with col, st.container(border=True):
            st.markdown(f"**{heading}**")
            st.markdown("\n".join(f"{i}. {name}" for i, name in enumerate(names, start=1)))


def render_callouts(callouts: List[Dict[str, Any]]) -> None:
    for col, callout in zip(st.columns(len(callouts)), callouts):
        with col, st.container(border=True):
            st.markdown(f"{callout['icon']} **{callout['title']}**")
            st.write(callout["summary"])
            with st.popover(callout["action"]):
                st.markdown(f"**{callout['detail_title']}**")
                st.markdown("\n".join(f"- {d}" for d in callout["details"]))
