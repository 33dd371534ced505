"""
MatchPulse Core Metadata
------------------------
Project identity shared by the backend and the dashboard.
"""

__project__ = "MatchPulse"
__version__ = "1.0.0"

CORE_METADATA = {
    "project": __project__,
    "version": __version__,
    "description": (
        "Admin dashboard for event participant matching: live participant, "
        "match and meeting counts over Supabase with fixture fallbacks."
    ),
}


def get_metadata() -> dict:
    """Return current system metadata as a dict."""
    return CORE_METADATA
