"""
core/fixtures.py
----------------
Static display content for the dashboard pages.

Nothing here is derived from fetched data: rankings, highlights and
narrative insights are literal fixtures. Sections use three shapes,
consumed by core.pages and the Streamlit renderer:

    {"kind": "list",   "title": str, "items": [str, ...]}
    {"kind": "table",  "title": str, "columns": [str, ...], "rows": [[...], ...]}
    {"kind": "groups", "title": str, "groups": {heading: [str, ...]}}
"""

from __future__ import annotations

from typing import Any, Dict, List

Section = Dict[str, Any]

# --------------------------------------------------------------------------- #
# Real-Time Dashboard
# --------------------------------------------------------------------------- #

NOTIFICATIONS: List[Dict[str, Any]] = [
    {"id": 1, "message": "New participant registered: Yeen He Eun", "time": "2 min ago"},
    {"id": 2, "message": "Profile updated: Kang Min Joon", "time": "10 min ago"},
    {"id": 3, "message": "Meeting scheduled for Yoon J Seo", "time": "30 min ago"},
]

ADMIN_EVENTS: List[Dict[str, Any]] = [
    {"id": 1, "title": "Admin Meeting", "date": "2024-07-05", "desc": "Monthly admin sync-up"},
    {"id": 2, "title": "System Maintenance", "date": "2024-07-10", "desc": "Scheduled downtime"},
    {"id": 3, "title": "Event Review", "date": "2024-07-12", "desc": "Review of last event"},
]

# Logins and meetings per hour for the "Activity by Time" chart
ACTIVITY_BY_TIME: List[Dict[str, Any]] = [
    {"time": "09:00", "login": 30, "meeting": 10},
    {"time": "10:00", "login": 50, "meeting": 20},
    {"time": "11:00", "login": 80, "meeting": 30},
    {"time": "12:00", "login": 120, "meeting": 40},
    {"time": "13:00", "login": 140, "meeting": 50},
    {"time": "14:00", "login": 130, "meeting": 45},
    {"time": "15:00", "login": 110, "meeting": 35},
    {"time": "16:00", "login": 90, "meeting": 25},
]

TOP_MATCHES: List[str] = ["Kim Minseo", "Park Jisoo", "Lee Jiwon", "Choi Yuna", "Jung Haeun"]

ANTICIPATED_MEETINGS: List[str] = ["Seo Joon", "Han Areum", "Moon Jiho", "Kang Minji", "Lim Sumin"]

# Callout cards under the insight feed, each with a popover of details
CALLOUTS: List[Dict[str, Any]] = [
    {
        "title": "AI Suggestions Active",
        "icon": "🤖",
        "summary": "AI is currently suggesting matches for 12 participants.",
        "action": "View AI suggestions →",
        "detail_title": "AI Suggestions",
        "details": [
            "Kim Minseo & Park Jisoo: High match probability based on 13:00 login spike.",
            "Lee Jiwon: Suggested to join meeting at 14:00 for optimal engagement.",
            "Choi Yuna & Jung Haeun: Recommended for peer mentoring due to consistent activity.",
        ],
    },
    {
        "title": "High Engagement Detected",
        "icon": "👥",
        "summary": "5 participants have logged in more than 3 times today.",
        "action": "See engagement report →",
        "detail_title": "Engagement Report",
        "details": [
            "Kim Minseo: Logged in 5 times, peak at 13:00.",
            "Park Jisoo: Attended 3 meetings, active at 14:00.",
            "Lee Jiwon: Consistent logins, joined all sessions.",
            "Choi Yuna: High satisfaction, active at 15:00.",
            "Jung Haeun: Joined peer mentoring, active at 12:00.",
        ],
    },
]

# --------------------------------------------------------------------------- #
# Static pages
# --------------------------------------------------------------------------- #

_PARTICIPANT_NAMES = TOP_MATCHES

EVENT_MANAGEMENT: List[Section] = [
    {
        "kind": "list",
        "title": "Upcoming Events",
        "items": [
            "13:00 - Peer Mentoring Session (Choi Yuna & Jung Haeun)",
            "14:00 - AI Matchmaking Demo (Lee Jiwon)",
            "15:00 - Engagement Workshop (Kim Minseo, Park Jisoo)",
        ],
    },
    {
        "kind": "list",
        "title": "Recent Event Highlights",
        "items": [
            "Kim Minseo and Park Jisoo achieved a high match score during the 13:00 login spike.",
            "Lee Jiwon joined all sessions and was highly engaged at 14:00.",
            "Choi Yuna and Jung Haeun led the peer mentoring group.",
        ],
    },
    {
        "kind": "groups",
        "title": "Event Participants",
        "groups": {
            "Top Participants": _PARTICIPANT_NAMES[:3],
            "Active at 13:00-15:00": _PARTICIPANT_NAMES[3:],
        },
    },
]

MATCHING_TRACKER: List[Section] = [
    {
        "kind": "list",
        "title": "Recent Matches",
        "items": [
            "Kim Minseo & Park Jisoo matched at 13:00 (high activity period).",
            "Lee Jiwon matched with Choi Yuna during the 14:00 login spike.",
            "Jung Haeun matched with Seo Joon in the afternoon session.",
        ],
    },
    {
        "kind": "table",
        "title": "Top Match Scores",
        "columns": ["Participant", "Matched With", "Score"],
        "rows": [
            ["Kim Minseo", "Park Jisoo", 98],
            ["Lee Jiwon", "Choi Yuna", 95],
            ["Jung Haeun", "Seo Joon", 93],
        ],
    },
    {
        "kind": "list",
        "title": "Matching Insights",
        "items": [
            "Most matches occur between 13:00 and 15:00, aligning with graph activity peaks.",
            "AI suggestions have increased successful matches by 20%.",
            "Peer mentoring matches (e.g., Choi Yuna & Jung Haeun) show high satisfaction.",
        ],
    },
]

MEETING_MONITORING: List[Section] = [
    {
        "kind": "list",
        "title": "Live Meetings",
        "items": [
            "Peer Mentoring Session: Choi Yuna & Jung Haeun (13:00-13:45)",
            "AI Matchmaking Demo: Lee Jiwon (14:00-14:30)",
            "Engagement Workshop: Kim Minseo, Park Jisoo (15:00-15:40)",
        ],
    },
    {
        "kind": "table",
        "title": "Meeting Attendance",
        "columns": ["Participant", "Meetings Attended", "Last Active"],
        "rows": [
            ["Kim Minseo", 3, "15:40"],
            ["Park Jisoo", 3, "15:40"],
            ["Lee Jiwon", 2, "14:30"],
            ["Choi Yuna", 2, "13:45"],
            ["Jung Haeun", 2, "13:45"],
        ],
    },
    {
        "kind": "list",
        "title": "Meeting Insights",
        "items": [
            "Most meetings are held between 13:00 and 15:40, matching graph activity peaks.",
            "Peer mentoring sessions have the highest attendance and satisfaction.",
            "AI-driven meetings (e.g., matchmaking demo) show increased engagement.",
        ],
    },
]

PARTICIPANT_MANAGEMENT: List[Section] = [
    {
        "kind": "table",
        "title": "Participant List",
        "columns": ["Name", "Status", "Last Login", "Satisfaction"],
        "rows": [
            ["Kim Minseo", "Active", "15:00", "98%"],
            ["Park Jisoo", "Active", "15:00", "95%"],
            ["Lee Jiwon", "Active", "14:00", "93%"],
            ["Choi Yuna", "Active", "13:00", "90%"],
            ["Jung Haeun", "Active", "13:00", "89%"],
        ],
    },
    {
        "kind": "list",
        "title": "Participant Actions",
        "items": [
            "Send notification to participants with low satisfaction scores.",
            "Promote peer mentoring for new joiners.",
            "Review login activity for engagement trends.",
        ],
    },
    {
        "kind": "list",
        "title": "Management Insights",
        "items": [
            "Most active participants logged in during graph peak hours (13:00-15:00).",
            "High satisfaction correlates with frequent meeting attendance.",
            "Peer mentoring increases engagement and satisfaction.",
        ],
    },
]

REPORTS: List[Section] = [
    {
        "kind": "list",
        "title": "Summary Report",
        "items": [
            "Peak activity observed between 13:00 and 15:00, as shown in the graph.",
            "Kim Minseo and Park Jisoo achieved the highest match score (98) during the 13:00 spike.",
            "AI suggestions contributed to a 20% increase in successful matches.",
            "Peer mentoring sessions (Choi Yuna & Jung Haeun) had the highest satisfaction ratings.",
            "5 participants logged in more than 3 times today, indicating high engagement.",
        ],
    },
    {
        "kind": "table",
        "title": "Participant Report",
        "columns": ["Name", "Matches", "Meetings", "Satisfaction"],
        "rows": [
            ["Kim Minseo", 3, 3, "98%"],
            ["Park Jisoo", 3, 3, "95%"],
            ["Lee Jiwon", 2, 2, "93%"],
            ["Choi Yuna", 2, 2, "90%"],
            ["Jung Haeun", 2, 2, "89%"],
        ],
    },
    {
        "kind": "list",
        "title": "Report Insights",
        "items": [
            "AI-driven features are positively impacting participant engagement and match quality.",
            "Most successful matches and meetings occur during peak hours.",
            "Participants with higher satisfaction scores are more active in meetings and matches.",
        ],
    },
]

AI_MATCHING_SETTINGS: List[Section] = [
    {
        "kind": "list",
        "title": "Current AI Settings",
        "items": [
            "AI Matching Algorithm: SmartMatch v2.1",
            "Matching Criteria: Login time, meeting attendance, satisfaction score",
            "Peak Activity Window: 13:00 - 15:00 (based on graph data)",
            "Peer Mentoring Boost: Enabled for Choi Yuna & Jung Haeun",
            "AI Suggestions: Active for 12 participants",
        ],
    },
    {
        "kind": "list",
        "title": "Recent AI Actions",
        "items": [
            "Suggested match: Kim Minseo & Park Jisoo (high probability at 13:00)",
            "Recommended meeting: Lee Jiwon at 14:00 for engagement boost",
            "Peer mentoring: Choi Yuna & Jung Haeun paired for satisfaction improvement",
        ],
    },
    {
        "kind": "list",
        "title": "Settings Insights",
        "items": [
            "AI-driven matches have a 20% higher success rate during peak hours.",
            "Peer mentoring increases satisfaction and engagement for new joiners.",
            "Adjusting criteria based on login and meeting data improves match quality.",
        ],
    },
]

FOOTER = "Designed and Developed by Noel Regis"
