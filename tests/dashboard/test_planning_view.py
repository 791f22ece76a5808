import asyncio

import pytest

from retail_planner.dashboard.planning_view import PlanningState, PlanningView
from retail_planner.dashboard.selection import StoreSelection
from fakes import FakeApi

ROWS_A = [{"storeId": "A", "skuId": "S1", "week": "W01", "salesUnits": 1}]
ROWS_B = [{"storeId": "B", "skuId": "S1", "week": "W01", "salesUnits": 2}]

def make_view():
    api = FakeApi()
    api.planning = {"A": ROWS_A, "B": ROWS_B}
    selection = StoreSelection()
    return api, selection, PlanningView(api, selection)

def test_no_store_renders_placeholder_without_fetching():
    api, selection, view = make_view()

    assert view.state == PlanningState.IDLE
    assert view.render() == "Select a store"
    assert api.calls == []

def test_selecting_store_loads_rows():
    async def scenario():
        api, selection, view = make_view()
        selection.set("A")
        assert view.state == PlanningState.LOADING
        await view.settle()
        return api, view

    api, view = asyncio.run(scenario())
    assert view.state == PlanningState.LOADED
    assert view.render() == ROWS_A
    assert api.calls == ["fetch_planning:A"]

def test_late_response_for_previous_store_is_ignored():
    """A then B, with A answering last: B's rows stay on screen"""
    async def scenario():
        api, selection, view = make_view()
        api.gates = {"A": asyncio.Event(), "B": asyncio.Event()}

        selection.set("A")
        selection.set("B")
        await asyncio.sleep(0)

        api.gates["B"].set()
        await asyncio.sleep(0)
        await asyncio.sleep(0)
        assert view.rows == ROWS_B

        api.gates["A"].set()
        await view.settle()
        return view

    view = asyncio.run(scenario())
    assert view.store_id == "B"
    assert view.state == PlanningState.LOADED
    assert view.rows == ROWS_B

def test_in_order_responses_end_on_latest_store():
    async def scenario():
        api, selection, view = make_view()
        api.gates = {"A": asyncio.Event(), "B": asyncio.Event()}

        selection.set("A")
        selection.set("B")
        api.gates["A"].set()
        api.gates["B"].set()
        await view.settle()
        return view

    view = asyncio.run(scenario())
    assert view.rows == ROWS_B

def test_reselecting_refetches():
    async def scenario():
        api, selection, view = make_view()
        selection.set("A")
        await view.settle()
        selection.set("B")
        await view.settle()
        selection.set("A")
        await view.settle()
        return api

    api = asyncio.run(scenario())
    assert api.calls == ["fetch_planning:A", "fetch_planning:B", "fetch_planning:A"]

def test_fetch_error_leaves_view_errored():
    async def scenario():
        api, selection, view = make_view()
        api.fail.add("fetch_planning:A")
        selection.set("A")
        await view.settle()
        return view

    view = asyncio.run(scenario())
    assert view.state == PlanningState.ERRORED
    assert view.rows == []
    assert view.error

def test_stale_error_does_not_mark_view_errored():
    async def scenario():
        api, selection, view = make_view()
        api.gates = {"A": asyncio.Event()}
        api.fail.add("fetch_planning:A")

        selection.set("A")
        selection.set("B")
        await asyncio.sleep(0)
        api.gates["A"].set()
        await view.settle()
        return view

    view = asyncio.run(scenario())
    assert view.state == PlanningState.LOADED
    assert view.rows == ROWS_B

def test_clearing_selection_returns_to_idle():
    async def scenario():
        api, selection, view = make_view()
        api.gates = {"A": asyncio.Event()}
        selection.set("A")
        selection.clear()
        api.gates["A"].set()
        await view.settle()
        return view

    view = asyncio.run(scenario())
    assert view.state == PlanningState.IDLE
    assert view.render() == "Select a store"

def test_refresh_without_store_does_nothing():
    api, selection, view = make_view()
    asyncio.run(view.refresh())

    assert api.calls == []
    assert view.state == PlanningState.IDLE

def test_refresh_refetches_current_store():
    async def scenario():
        api, selection, view = make_view()
        selection.set("A")
        await view.settle()

        api.planning["A"] = ROWS_A + ROWS_B
        await view.refresh()
        return api, view

    api, view = asyncio.run(scenario())
    assert api.calls == ["fetch_planning:A", "fetch_planning:A"]
    assert view.state == PlanningState.LOADED
    assert view.rows == ROWS_A + ROWS_B

def test_refresh_superseded_by_selection_change():
    """A refresh that resolves after the user picked another store is dropped"""
    async def scenario():
        api, selection, view = make_view()
        selection.set("A")
        await view.settle()

        api.gates = {"A": asyncio.Event()}
        refreshing = asyncio.ensure_future(view.refresh())
        await asyncio.sleep(0)
        assert view.state == PlanningState.LOADING

        selection.set("B")
        await view.settle()
        api.gates["A"].set()
        await refreshing
        return view

    view = asyncio.run(scenario())
    assert view.store_id == "B"
    assert view.state == PlanningState.LOADED
    assert view.rows == ROWS_B

def test_selection_outside_event_loop_changes_nothing():
    api, selection, view = make_view()

    with pytest.raises(RuntimeError):
        selection.set("A")

    assert selection.store_id is None
    assert view.store_id is None
    assert view.state == PlanningState.IDLE
    assert api.calls == []
