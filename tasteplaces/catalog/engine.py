"""
Search, filter and sort pipeline over the restaurant data store.

Stages run in a fixed order: free-text search, rating, price, cuisine,
then sort. Each filter stage is a no-op when its input is unset, and the
sort is stable so ties keep fixture order.
"""
from __future__ import annotations

import logging
import unicodedata

import pandas as pd

from ..config import DEFAULT_APP_CONFIG, AppConfig
from ..state.models import SortOrder, UIState
from .cache import engine_query, lookup, store
from .data_store import get_dataframe, get_restaurants
from .models import Restaurant

logger = logging.getLogger(__name__)

SEARCH_FIELDS = ("name", "cuisine", "neighborhood")

_NUMERIC_SORTS: dict[SortOrder, tuple[str, bool]] = {
    SortOrder.rating_desc: ("rating", False),
    SortOrder.rating_asc: ("rating", True),
    SortOrder.price_desc: ("price", False),
    SortOrder.price_asc: ("price", True),
}


def collation_key(text: str) -> str:
    """Case and accent insensitive sort key, so "Leméac" sorts with "Lemeac"."""
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()


def _lowered(df: pd.DataFrame, column: str) -> pd.Series:
    cached = f"{column}_lower"
    if cached in df.columns:
        return df[cached]
    return df[column].str.lower()


def search_mask(df: pd.DataFrame, query: str) -> pd.Series:
    if not query:
        return pd.Series(True, index=df.index)
    needle = query.lower()
    mask = pd.Series(False, index=df.index)
    for column in SEARCH_FIELDS:
        mask = mask | _lowered(df, column).str.contains(needle, regex=False)
    return mask


def sort_frame(df: pd.DataFrame, order: SortOrder) -> pd.DataFrame:
    if order is SortOrder.default:
        return df
    if order is SortOrder.name:
        return df.sort_values(
            "name", key=lambda col: col.map(collation_key), kind="stable",
        )
    column, ascending = _NUMERIC_SORTS[order]
    return df.sort_values(column, ascending=ascending, kind="stable")


def filter_and_sort(df: pd.DataFrame, state: UIState) -> pd.DataFrame:
    """Return the rows of *df* to display for *state*, in display order."""
    mask = search_mask(df, state.search_query)

    if state.rating_filter is not None:
        mask = mask & (df["rating"] == state.rating_filter)

    if state.price_filter is not None:
        mask = mask & (df["price"] == state.price_filter)

    if state.cuisine_filter is not None:
        mask = mask & (df["cuisine"] == state.cuisine_filter)

    return sort_frame(df.loc[mask], state.sort_order)


def visible_restaurants(
    state: UIState, config: AppConfig = DEFAULT_APP_CONFIG,
) -> list[Restaurant]:
    """Run the pipeline against the data store and return the records."""
    # Load first: a lazy load clears the cache and its counters
    df = get_dataframe()

    ids = lookup(state) if config.cache_enabled else None
    if ids is None:
        ids = filter_and_sort(df, state)["id"].tolist()
        logger.debug("Computed %d matches for %s", len(ids), engine_query(state))
        if config.cache_enabled:
            store(state, ids)

    by_id = {r.id: r for r in get_restaurants()}
    return [by_id[i] for i in ids]
