"""
core/health.py
--------------
System health diagnostics for the MatchPulse backend.

Purpose
-------
- Used by the FastAPI `/health` endpoint and the dashboard status bar.
- Validates Supabase connectivity against the `participants` table.
- Reports backend uptime, version and CPU/memory usage.
- Returns JSON-safe dict ready for serialization.
"""

from __future__ import annotations

import os
import time
import platform
import psutil
from typing import Dict, Any

from core.metadata import __version__
from supabase_client.config import get_supabase_client


# Cache the process start time for uptime calculation
START_TIME = time.time()


def system_health() -> Dict[str, Any]:
    """
    Return structured backend health diagnostics.

    Returns
    -------
    dict
        JSON-safe health report.
    """
    status = "ok"
    message = "Backend operational."
    supabase_connected = False

    # --- Supabase connectivity test ---
    try:
        sb = get_supabase_client()
        sb.table("participants").select("id").limit(1).execute()
        supabase_connected = True
    except Exception as e:
        status = "degraded"
        message = f"Supabase check failed: {e.__class__.__name__}"

    # --- System metrics ---
    try:
        cpu_load = psutil.cpu_percent(interval=0.2)
        memory_usage = round(psutil.virtual_memory().used / (1024 * 1024), 2)
    except Exception:
        cpu_load = None
        memory_usage = None

    return {
        "status": status,
        "message": message,
        "version": os.getenv("BACKEND_VERSION", __version__),
        "supabase_connected": supabase_connected,
        "cpu_load": cpu_load,
        "memory_usage": memory_usage,
        "uptime_sec": round(time.time() - START_TIME, 2),
        "system": platform.system(),
        "release": platform.release(),
    }
