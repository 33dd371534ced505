"""
core/ui_config.py
-----------------
Central configuration hub for the dashboard, loader and backend.

- Reads backend & Supabase settings from environment variables.
- Provides global constants for API access and fetch behaviour.
"""

from __future__ import annotations
import os

# ---------------------------------------------------------------------------
# Backend configuration
# ---------------------------------------------------------------------------

BACKEND_URL: str = os.getenv("BACKEND_URL", "http://127.0.0.1:8000").rstrip("/")
BACKEND_STATUS_TTL: int = int(os.getenv("BACKEND_STATUS_TTL", "60"))  # seconds

# ---------------------------------------------------------------------------
# Supabase configuration
# ---------------------------------------------------------------------------

SUPABASE_URL: str | None = os.getenv("SUPABASE_URL")
SUPABASE_ANON_KEY: str | None = os.getenv("SUPABASE_ANON_KEY")

# ---------------------------------------------------------------------------
# Loader behaviour
# ---------------------------------------------------------------------------

def env_timeout(name: str, default: float) -> float:
    """Positive number of seconds from the environment, else `default`."""
    try:
        value = float(os.getenv(name, default))
    except ValueError:
        return default
    return value if value > 0 and value != float("inf") else default


FETCH_TIMEOUT: float = env_timeout("DASHBOARD_FETCH_TIMEOUT", 10.0)
DEBUG: bool = os.getenv("DASHBOARD_DEBUG", "1").strip().lower() in {"1", "true", "yes", "on"}

