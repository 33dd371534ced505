"""
core/loader.py
--------------
Single best-effort batch fetch of the six dashboard tables.

All six queries are launched together and joined with per-table error
isolation: a table that fails, times out or returns nothing becomes an
empty collection without affecting the other five. Nothing is retried
and nothing is raised to the caller.
"""

from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, Dict, Optional, Tuple

from supabase import AsyncClient

from core.records import TABLES, Record, parse_rows
from core.state import Collections
from core.ui_config import DEBUG, FETCH_TIMEOUT
from supabase_client.config import get_async_supabase_client
from supabase_client.helpers import afetch_table

ClientFactory = Callable[[], Awaitable[AsyncClient]]


async def load_collections(
    client_factory: ClientFactory = get_async_supabase_client,
    timeout: Optional[float] = FETCH_TIMEOUT,
    debug: bool = DEBUG,
) -> Collections:
    """
    Fetch all six tables concurrently and return them as ``Collections``.

    Parameters
    ----------
    client_factory : callable
        Coroutine function returning a connected ``AsyncClient``.
    timeout : float or None
        Per-table timeout in seconds.
    debug : bool
        If True, print one diagnostic line per table.
    """
    try:
        client = await client_factory()
    except Exception as e:
        if debug:
            print(f"[Loader] ⚠️ Supabase unavailable, using empty collections: {type(e).__name__}: {e}")
        return Collections()

    names = list(TABLES)
    results = await asyncio.gather(
        *(afetch_table(client, TABLES[name][0], timeout=timeout, debug=debug) for name in names),
        return_exceptions=True,
    )

    loaded: Dict[str, Tuple[Record, ...]] = {}
    for name, result in zip(names, results):
        table, model = TABLES[name]
        if isinstance(result, BaseException):
            if debug:
                print(f"[Loader] ⚠️ '{table}' fetch failed ({type(result).__name__}); treating as empty.")
            result = []
        loaded[name] = parse_rows(model, result, debug=debug)

    return Collections(**loaded)


def load_collections_sync(**kwargs) -> Collections:
    """Blocking wrapper for callers without a running event loop (Streamlit)."""
    return asyncio.run(load_collections(**kwargs))
