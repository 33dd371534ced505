"""
core/state.py
-------------
Immutable view state for the dashboard and its transition events.

The state is a frozen snapshot: the selected page, the six record
collections and a loading flag. It only changes through two events:

- ``FetchSettled``  — all six table fetches resolved (success or not).
- ``PageSelected``  — the user picked a menu entry.

``reduce`` is pure; ``DashboardController`` owns the current snapshot and
is the only thing that swaps it.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Awaitable, Callable, Optional, Tuple, Union

from core.records import Anticipation, Insight, Match, Meeting, Participant, TopMatching


class Page(str, Enum):
    """The seven menu entries, in sidebar order."""
    EVENT_MANAGEMENT = "Event Management"
    REAL_TIME_DASHBOARD = "Real-Time Dashboard"
    MATCHING_TRACKER = "Matching Tracker"
    MEETING_MONITORING = "Meeting Monitoring"
    PARTICIPANT_MANAGEMENT = "Participant Management"
    REPORTS = "Reports"
    AI_MATCHING_SETTINGS = "AI Matching Settings"

    @classmethod
    def parse(cls, label: Union[str, "Page", None]) -> Optional["Page"]:
        """Return the page for ``label``, or None if it is not a menu entry."""
        try:
            return cls(label)
        except (ValueError, TypeError):
            return None


DEFAULT_PAGE = Page.REAL_TIME_DASHBOARD


@dataclass(frozen=True)
class Collections:
    """The six record collections, replaced wholesale on each load."""
    participants: Tuple[Participant, ...] = ()
    matches: Tuple[Match, ...] = ()
    meetings: Tuple[Meeting, ...] = ()
    insights: Tuple[Insight, ...] = ()
    top_matching: Tuple[TopMatching, ...] = ()
    anticipation: Tuple[Anticipation, ...] = ()


@dataclass(frozen=True)
class DashboardState:
    page: Page = DEFAULT_PAGE
    collections: Collections = field(default_factory=Collections)
    loading: bool = True


# --------------------------------------------------------------------------- #
# Events
# --------------------------------------------------------------------------- #

@dataclass(frozen=True)
class FetchSettled:
    collections: Collections


@dataclass(frozen=True)
class PageSelected:
    page: Union[str, Page]


Event = Union[FetchSettled, PageSelected]


def reduce(state: DashboardState, event: Event) -> DashboardState:
    """Apply one transition event and return the next snapshot."""
    if isinstance(event, FetchSettled):
        return replace(state, collections=event.collections, loading=False)

    if isinstance(event, PageSelected):
        page = Page.parse(event.page)
        if page is None or page is state.page:
            return state
        return replace(state, page=page)

    raise TypeError(f"Unknown dashboard event: {event!r}")


# --------------------------------------------------------------------------- #
# Controller
# --------------------------------------------------------------------------- #

Loader = Callable[[], Awaitable[Collections]]


class DashboardController:
    """
    Holds the current snapshot and applies transitions to it.

    The loader is injected so the UI, the backend and tests can supply
    their own source of collections.
    """

    def __init__(self, loader: Loader, state: Optional[DashboardState] = None):
        self._loader = loader
        self._state = state or DashboardState()

    @property
    def state(self) -> DashboardState:
        return self._state

    def dispatch(self, event: Event) -> DashboardState:
        self._state = reduce(self._state, event)
        return self._state

    def select_page(self, label: Union[str, Page]) -> DashboardState:
        return self.dispatch(PageSelected(label))

    async def mount(self) -> DashboardState:
        """Run the single fetch cycle and publish its result."""
        collections = await self._loader()
        return self.dispatch(FetchSettled(collections))
