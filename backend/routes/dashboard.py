"""
Dashboard Endpoints
-------------------
Read-only JSON views of the dashboard: summary metrics and page payloads,
built from one fresh load of the six Supabase tables per request.
"""

from fastapi import APIRouter, Depends, HTTPException

from analytics.summary import compute_summary, fallback_metrics, source_counts
from core.loader import load_collections
from core.pages import build_page, menu
from core.state import Collections, DashboardController

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


async def get_collections() -> Collections:
    """Dependency: one best-effort batch fetch. Never raises."""
    return await load_collections()


@router.get("/menu")
async def get_menu():
    """Sidebar labels in display order."""
    return {"pages": menu()}


@router.get("/summary")
async def get_summary(collections: Collections = Depends(get_collections)):
    """
    Headline metrics with fallbacks.

    `sources` reports how many rows each table returned and `fallbacks`
    names the metrics currently showing a fallback literal.
    """
    try:
        summary = compute_summary(collections).as_dict()
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to compute summary: {e}")

    return {
        "summary": summary,
        "sources": source_counts(collections),
        "fallbacks": fallback_metrics(collections),
    }


@router.get("/pages/{page}")
async def get_page(page: str, collections: Collections = Depends(get_collections)):
    """
    Payload for one page.

    Unknown page names are ignored like any other invalid menu selection,
    so the default page is returned.
    """
    controller = DashboardController(lambda: _settled(collections))
    await controller.mount()
    controller.select_page(page)
    try:
        return build_page(controller.state)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to build page: {e}")


async def _settled(collections: Collections) -> Collections:
    return collections
