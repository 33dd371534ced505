"""Tests for the dashboard state reducer and controller."""

import pytest

from core.records import Participant
from core.state import (
    DEFAULT_PAGE,
    Collections,
    DashboardController,
    DashboardState,
    FetchSettled,
    Page,
    PageSelected,
    reduce,
)


class TestInitialState:
    def test_defaults(self):
        state = DashboardState()
        assert state.page is Page.REAL_TIME_DASHBOARD
        assert state.page is DEFAULT_PAGE
        assert state.loading is True
        assert state.collections == Collections()

    def test_collections_start_empty_not_none(self):
        c = DashboardState().collections
        for name in ("participants", "matches", "meetings", "insights", "top_matching", "anticipation"):
            assert getattr(c, name) == ()

    def test_seven_pages(self):
        assert len(Page) == 7


class TestPageSelection:
    @pytest.mark.parametrize("label", [p.value for p in Page])
    def test_every_menu_entry_selectable(self, label):
        state = reduce(DashboardState(), PageSelected(label))
        assert state.page.value == label

    @pytest.mark.parametrize("label", ["Settings", "", "reports", None, ["Reports"]])
    def test_unknown_page_leaves_state_unchanged(self, label):
        before = reduce(DashboardState(), PageSelected("Reports"))
        after = reduce(before, PageSelected(label))
        assert after is before
        assert after.page is Page.REPORTS

    def test_selection_keeps_collections_and_loading(self, loaded_collections):
        state = reduce(DashboardState(), FetchSettled(loaded_collections))
        state = reduce(state, PageSelected(Page.MATCHING_TRACKER))
        assert state.collections is loaded_collections
        assert state.loading is False


class TestFetchSettled:
    def test_clears_loading_and_replaces_collections(self, loaded_collections):
        state = reduce(DashboardState(), FetchSettled(loaded_collections))
        assert state.loading is False
        assert state.collections is loaded_collections

    def test_reducer_does_not_mutate_input(self, loaded_collections):
        original = DashboardState()
        reduce(original, FetchSettled(loaded_collections))
        assert original.loading is True
        assert original.collections == Collections()

    def test_unknown_event_rejected(self):
        with pytest.raises(TypeError):
            reduce(DashboardState(), object())


class TestController:
    def test_loading_until_loader_finishes(self, run):
        seen = []

        async def loader():
            seen.append(controller.state.loading)
            return Collections(participants=(Participant(id="p1"),))

        controller = DashboardController(loader)
        assert controller.state.loading is True
        state = run(controller.mount())

        assert seen == [True]
        assert state.loading is False
        assert len(state.collections.participants) == 1

    def test_select_page(self, run):
        async def loader():
            return Collections()

        controller = DashboardController(loader)
        run(controller.mount())
        controller.select_page("Reports")
        controller.select_page("Not A Page")
        assert controller.state.page is Page.REPORTS
