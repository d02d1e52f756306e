from __future__ import annotations

import pytest
from pydantic import ValidationError

from tasteplaces.state.machine import (
    clear_all_filters,
    cycle_sort,
    quick_filter_toggle,
    reduce,
    set_cuisine_filter,
    set_price_filter,
    set_rating_filter,
    set_search_query,
    toggle_expand,
    toggle_search,
)
from tasteplaces.state.models import SORT_CYCLE, Action, ActionType, SortOrder, UIState

KNOWN_IDS = frozenset(range(1, 11))


# ── Expand / collapse ────────────────────────────────────────────────────


class TestExpand:
    def test_expand_then_collapse(self):
        state = toggle_expand(UIState(), 3, KNOWN_IDS)
        assert state.expanded_card == 3
        state = toggle_expand(state, 3, KNOWN_IDS)
        assert state.expanded_card is None

    def test_expanding_another_collapses_previous(self):
        state = toggle_expand(UIState(), 3, KNOWN_IDS)
        state = toggle_expand(state, 7, KNOWN_IDS)
        assert state.expanded_card == 7

    def test_unknown_id_is_noop(self):
        state = UIState(expanded_card=2)
        assert toggle_expand(state, 999, KNOWN_IDS) == state

    def test_without_known_ids_any_id_expands(self):
        assert toggle_expand(UIState(), 42).expanded_card == 42

    def test_original_state_untouched(self):
        state = UIState()
        toggle_expand(state, 1, KNOWN_IDS)
        assert state.expanded_card is None


# ── Sort cycle ───────────────────────────────────────────────────────────


def test_cycle_sort_follows_fixed_order():
    state = UIState()
    seen = []
    for _ in range(len(SORT_CYCLE)):
        state = cycle_sort(state)
        seen.append(state.sort_order)
    assert seen == [
        SortOrder.rating_desc,
        SortOrder.rating_asc,
        SortOrder.price_desc,
        SortOrder.price_asc,
        SortOrder.name,
        SortOrder.default,
    ]


def test_cycle_sort_six_times_returns_to_default():
    state = UIState(search_query="x")
    for _ in range(6):
        state = cycle_sort(state)
    assert state.sort_order is SortOrder.default
    assert state.search_query == "x"


# ── Search ───────────────────────────────────────────────────────────────


def test_set_search_query_is_verbatim():
    assert set_search_query(UIState(), "  Plateau ").search_query == "  Plateau "


def test_toggle_search_keeps_query():
    state = set_search_query(toggle_search(UIState()), "pho")
    assert state.search_active
    state = toggle_search(state)
    assert not state.search_active
    assert state.search_query == "pho"


# ── Filters ──────────────────────────────────────────────────────────────


def test_set_and_clear_individual_filters():
    state = set_rating_filter(UIState(), 2)
    state = set_price_filter(state, 3)
    state = set_cuisine_filter(state, "French")
    assert (state.rating_filter, state.price_filter, state.cuisine_filter) == (2, 3, "French")
    assert state.filters_active

    state = set_rating_filter(state, None)
    state = set_price_filter(state, None)
    state = set_cuisine_filter(state, "")
    assert not state.filters_active
    assert state.cuisine_filter is None


class TestQuickFilter:
    def test_sets_default_rating_when_nothing_active(self):
        assert quick_filter_toggle(UIState()).rating_filter == 3

    def test_custom_default_rating(self):
        assert quick_filter_toggle(UIState(), default_rating=1).rating_filter == 1

    def test_out_of_range_default_rating_rejected(self):
        with pytest.raises(ValidationError):
            quick_filter_toggle(UIState(search_query="pho"), default_rating=5)

    def test_state_survives_session_round_trip(self):
        state = quick_filter_toggle(UIState(search_query="pho", sort_order=SortOrder.name))
        restored = UIState(**state.model_dump(mode="json"))
        assert restored.rating_filter == 3
        assert restored.search_query == "pho"

    def test_clears_category_filters_only(self):
        state = UIState(
            search_query="plateau",
            price_filter=2,
            cuisine_filter="French",
            sort_order=SortOrder.name,
            expanded_card=4,
        )
        cleared = quick_filter_toggle(state)
        assert not cleared.filters_active
        assert cleared.search_query == "plateau"
        assert cleared.sort_order is SortOrder.name
        assert cleared.expanded_card == 4

    def test_toggle_twice_returns_to_unfiltered(self):
        state = quick_filter_toggle(quick_filter_toggle(UIState()))
        assert state.model_dump() == UIState().model_dump()


def test_clear_all_is_full_reset_of_query_filters_and_sort():
    state = UIState(
        search_active=True,
        search_query="ital",
        rating_filter=3,
        price_filter=4,
        cuisine_filter="Italian",
        sort_order=SortOrder.price_asc,
        expanded_card=1,
    )
    cleared = clear_all_filters(state)
    assert cleared.search_query == ""
    assert not cleared.filters_active
    assert cleared.sort_order is SortOrder.default
    assert cleared.search_active
    assert cleared.expanded_card == 1


# ── Reducer ──────────────────────────────────────────────────────────────


class TestReduce:
    def test_dispatches_every_action(self):
        state = UIState()
        state = reduce(state, Action(type=ActionType.toggle_search))
        state = reduce(state, Action(type=ActionType.set_query, value="plateau"))
        state = reduce(state, Action(type=ActionType.set_rating_filter, value=2))
        state = reduce(state, Action(type=ActionType.set_price_filter, value=3))
        state = reduce(state, Action(type=ActionType.set_cuisine_filter, value="French"))
        state = reduce(state, Action(type=ActionType.cycle_sort))
        state = reduce(state, Action(type=ActionType.expand, value=4), KNOWN_IDS)
        assert state.model_dump() == UIState(
            expanded_card=4,
            search_active=True,
            search_query="plateau",
            rating_filter=2,
            price_filter=3,
            cuisine_filter="French",
            sort_order=SortOrder.rating_desc,
        ).model_dump()

        state = reduce(state, Action(type=ActionType.quick_filter))
        assert not state.filters_active
        state = reduce(state, Action(type=ActionType.clear_all))
        assert state.search_query == ""
        assert state.sort_order is SortOrder.default

    def test_expand_unknown_id_via_reducer(self):
        state = reduce(UIState(), Action(type=ActionType.expand, value=0), KNOWN_IDS)
        assert state.expanded_card is None

    def test_quick_filter_default_rating_passthrough(self):
        state = reduce(UIState(), Action(type=ActionType.quick_filter), default_rating=2)
        assert state.rating_filter == 2


# ── Action validation ────────────────────────────────────────────────────


class TestActionValidation:
    @pytest.mark.parametrize(
        "payload",
        [
            {"type": "expand"},
            {"type": "expand", "value": "three"},
            {"type": "set_query"},
            {"type": "set_rating_filter", "value": 4},
            {"type": "set_rating_filter", "value": 0},
            {"type": "set_price_filter", "value": 5},
            {"type": "cycle_sort", "value": 1},
            {"type": "clear_all", "value": "x"},
            {"type": "teleport"},
        ],
    )
    def test_rejects_malformed_actions(self, payload):
        with pytest.raises(ValidationError):
            Action(**payload)

    def test_filters_accept_null(self):
        assert Action(type="set_rating_filter", value=None).value is None
        assert Action(type="set_price_filter").value is None
        assert Action(type="set_cuisine_filter", value=None).value is None

    def test_empty_query_allowed(self):
        assert Action(type="set_query", value="").value == ""


def test_ui_state_is_frozen():
    state = UIState()
    with pytest.raises(ValidationError):
        state.search_query = "x"


def test_ui_state_rejects_out_of_range_filters():
    with pytest.raises(ValidationError):
        UIState(rating_filter=4)
    with pytest.raises(ValidationError):
        UIState(price_filter=0)
