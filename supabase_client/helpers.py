# supabase_client/helpers.py
"""
Utility layer for reading dashboard tables from Supabase.

Features
--------
- Reusable asyncio reader for fetching whole tables.
- Per-request timeout so a stalled table cannot hold up the caller.
- Optional verbose debug output for diagnostics.

Readers return a plain list of row dicts; an empty table comes back as ``[]``.
"""

from __future__ import annotations

import asyncio
from typing import Any, Dict, List, Optional

from supabase import AsyncClient

from core.ui_config import DEBUG, FETCH_TIMEOUT
from supabase_client.config import get_supabase_client


async def afetch_table(
    client: AsyncClient,
    table: str,
    timeout: Optional[float] = FETCH_TIMEOUT,
    debug: bool = DEBUG,
) -> List[Dict[str, Any]]:
    """
    Fetch every row of a Supabase table with the asyncio client.

    Errors propagate: the loader gathers several of these at once and
    isolates failures per table.

    Parameters
    ----------
    client : AsyncClient
        Connected asyncio Supabase client.
    table : str
        Table name.
    timeout : float or None
        Seconds before the request counts as failed; None waits forever.
    debug : bool
        If True, print diagnostic info.
    """
    if debug:
        print(f"[Supabase] → Fetching all rows from '{table}'")

    query = client.table(table).select("*").execute()
    res = await asyncio.wait_for(query, timeout=timeout) if timeout is not None else await query

    records = res.data or []
    if debug:
        print(f"[Supabase] ← Got {len(records)} records from '{table}'")
    return list(records)


def test_connection(debug: bool = DEBUG) -> Optional[str]:
    """
    Verify Supabase client connectivity.

    Returns
    -------
    Optional[str]
        Supabase project URL if success, None if failure.
    """
    try:
        sb = get_supabase_client()
        if debug:
            print(f"[Supabase] ✅ Connection OK → {sb.supabase_url}")
        return sb.supabase_url
    except Exception as e:
        if debug:
            print(f"[Supabase] ❌ Connection failed: {e}")
        return None
