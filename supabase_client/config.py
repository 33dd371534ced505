# supabase_client/config.py
"""
Supabase client factories.

Credentials are read from the environment (see core/ui_config.py).
Both factories raise RuntimeError when credentials are missing so callers
can decide whether to degrade or fail.
"""

from __future__ import annotations

from supabase import AsyncClient, Client, acreate_client, create_client

from core.ui_config import SUPABASE_ANON_KEY, SUPABASE_URL


def _credentials() -> tuple[str, str]:
    if not SUPABASE_URL or not SUPABASE_ANON_KEY:
        raise RuntimeError("Supabase credentials not set in environment variables.")
    return SUPABASE_URL, SUPABASE_ANON_KEY


def get_supabase_client() -> Client:
    """Return a synchronous Supabase client if credentials are set."""
    url, key = _credentials()
    return create_client(url, key)


async def get_async_supabase_client() -> AsyncClient:
    """Return an asyncio Supabase client if credentials are set."""
    url, key = _credentials()
    return await acreate_client(url, key)
