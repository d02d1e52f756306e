from __future__ import annotations

import logging
from collections.abc import Collection

from ..config import DEFAULT_APP_CONFIG
from .models import SORT_CYCLE, Action, ActionType, UIState

logger = logging.getLogger(__name__)


def toggle_expand(
    state: UIState, restaurant_id: int, known_ids: Collection[int] | None = None,
) -> UIState:
    """Expand *restaurant_id*, or collapse it if it is already expanded.

    At most one card is expanded, so expanding one collapses the other.
    Ids outside *known_ids* leave the state untouched.
    """
    if state.expanded_card == restaurant_id:
        return state.model_copy(update={"expanded_card": None})
    if known_ids is not None and restaurant_id not in known_ids:
        logger.debug("Ignoring expand for unknown restaurant id %s", restaurant_id)
        return state
    return state.model_copy(update={"expanded_card": restaurant_id})


def cycle_sort(state: UIState) -> UIState:
    index = SORT_CYCLE.index(state.sort_order)
    next_order = SORT_CYCLE[(index + 1) % len(SORT_CYCLE)]
    return state.model_copy(update={"sort_order": next_order})


def set_search_query(state: UIState, text: str) -> UIState:
    return state.model_copy(update={"search_query": text})


def toggle_search(state: UIState) -> UIState:
    # Hiding the input keeps the query
    return state.model_copy(update={"search_active": not state.search_active})


def set_rating_filter(state: UIState, rating: int | None) -> UIState:
    return state.model_copy(update={"rating_filter": rating or None})


def set_price_filter(state: UIState, price: int | None) -> UIState:
    return state.model_copy(update={"price_filter": price or None})


def set_cuisine_filter(state: UIState, cuisine: str | None) -> UIState:
    return state.model_copy(update={"cuisine_filter": cuisine or None})


def quick_filter_toggle(
    state: UIState, default_rating: int = DEFAULT_APP_CONFIG.quick_rating,
) -> UIState:
    """Clear the category filters if any is set, else apply *default_rating*.

    Search query, sort order and expansion are left alone; use
    ``clear_all_filters`` for a full reset.
    """
    if state.filters_active:
        return state.model_copy(
            update={"rating_filter": None, "price_filter": None, "cuisine_filter": None}
        )
    # default_rating is not checked by the Action model
    return UIState.model_validate({**state.model_dump(), "rating_filter": default_rating})


def clear_all_filters(state: UIState) -> UIState:
    return state.model_copy(
        update={
            "search_query": "",
            "rating_filter": None,
            "price_filter": None,
            "cuisine_filter": None,
            "sort_order": SORT_CYCLE[0],
        }
    )


def reduce(
    state: UIState,
    action: Action,
    known_ids: Collection[int] | None = None,
    default_rating: int = DEFAULT_APP_CONFIG.quick_rating,
) -> UIState:
    """Apply one user action and return the resulting state."""
    t, value = action.type, action.value

    if t is ActionType.expand:
        new_state = toggle_expand(state, value, known_ids)
    elif t is ActionType.cycle_sort:
        new_state = cycle_sort(state)
    elif t is ActionType.set_query:
        new_state = set_search_query(state, value)
    elif t is ActionType.toggle_search:
        new_state = toggle_search(state)
    elif t is ActionType.set_rating_filter:
        new_state = set_rating_filter(state, value)
    elif t is ActionType.set_price_filter:
        new_state = set_price_filter(state, value)
    elif t is ActionType.set_cuisine_filter:
        new_state = set_cuisine_filter(state, value)
    elif t is ActionType.quick_filter:
        new_state = quick_filter_toggle(state, default_rating)
    else:
        new_state = clear_all_filters(state)

    logger.debug("Applied %s: %s -> %s", t.value, state, new_state)
    return new_state
