"""
MatchPulse Backend API
======================

FastAPI service exposing health and read-only dashboard endpoints.

Design Intent
-------------
• `/dashboard/*` endpoints reuse the same loader, reducer and page
  builders as the Streamlit dashboard, so both surfaces agree on every
  metric and fallback.
• Supabase is optional: without credentials every table loads empty and
  all metrics report their fallback literals.
• Health and status endpoints are machine-readable for the UI status bar.

Run with:
    $ uvicorn backend.main:app --reload
"""

from __future__ import annotations

import os
import sys

from fastapi import FastAPI

# --------------------------------------------------------------------------- #
# Path setup: ensure project root on sys.path
# --------------------------------------------------------------------------- #

# Allows imports like `core.*`, `analytics.*`, `supabase_client.*` when running via uvicorn
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.append(ROOT_DIR)

from backend.routes.dashboard import router as dashboard_router
from core.health import system_health
from core.metadata import __project__, __version__, get_metadata
from core.ui_config import DEBUG, FETCH_TIMEOUT, SUPABASE_ANON_KEY, SUPABASE_URL
from supabase_client.helpers import test_connection

# --------------------------------------------------------------------------- #
# Supabase diagnostics (non-fatal)
# --------------------------------------------------------------------------- #

SUPABASE_CONFIGURED = bool(SUPABASE_URL and SUPABASE_ANON_KEY)

if not SUPABASE_CONFIGURED:
    print("[Supabase] ❌ Missing SUPABASE_URL or SUPABASE_ANON_KEY; dashboard will use fallback values.")
elif DEBUG:
    test_connection(debug=True)

# --------------------------------------------------------------------------- #
# FastAPI App
# --------------------------------------------------------------------------- #

app = FastAPI(
    title=f"{__project__} Backend API",
    version=__version__,
    description=(
        "Backend for the event matching admin dashboard.\n"
        "- Concurrent best-effort load of six Supabase tables.\n"
        "- Summary metrics with fallback literals.\n"
        "- Page payloads shared with the Streamlit dashboard."
    ),
)

app.include_router(dashboard_router)


# --------------------------------------------------------------------------- #
# Core Routes
# --------------------------------------------------------------------------- #

@app.get("/")
async def root():
    """
    Basic liveness check.
    """
    return {
        "status": "ok",
        "message": f"{__project__} Backend is live.",
        "version": app.version,
        "supabase_configured": SUPABASE_CONFIGURED,
    }


@app.get("/health")
async def health():
    """
    System health endpoint.

    Delegates to core.health.system_health which:
    - Checks Supabase connectivity (via supabase_client)
    - Reports runtime metrics
    - Returns a stable, machine-readable payload
    """
    return system_health()


@app.get("/status/summary")
async def status_summary():
    """
    High-level configuration summary for dashboards & tooling.
    """
    return {
        "metadata": get_metadata(),
        "supabase_configured": SUPABASE_CONFIGURED,
        "fetch_timeout_sec": FETCH_TIMEOUT,
        "debug": DEBUG,
    }
