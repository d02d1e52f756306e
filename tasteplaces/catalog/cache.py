"""
Memo of engine results per search/filter/sort combination.

Only the fields the engine reads take part in the key, so expanding a
card or toggling the search box reuses the previous result. Entries hold
restaurant ids in display order; the data store is read-only, so they
never go stale until it is reloaded.
"""
from __future__ import annotations

import hashlib
import json
from typing import Any

from ..state.models import UIState

# UI state fields that affect the engine output
ENGINE_FIELDS = frozenset(
    {"search_query", "rating_filter", "price_filter", "cuisine_filter", "sort_order"}
)

_results: dict[str, tuple[int, ...]] = {}
_hits: int = 0
_misses: int = 0


def engine_query(state: UIState) -> dict[str, Any]:
    return state.model_dump(include=set(ENGINE_FIELDS), mode="json")


def _make_key(state: UIState) -> str:
    normalized = json.dumps(engine_query(state), sort_keys=True)
    return hashlib.sha256(normalized.encode()).hexdigest()[:16]


def lookup(state: UIState) -> list[int] | None:
    """Return cached ids for *state*, or ``None`` on a miss."""
    global _hits, _misses
    ids = _results.get(_make_key(state))
    if ids is None:
        _misses += 1
        return None
    _hits += 1
    return list(ids)


def store(state: UIState, ids: list[int]) -> None:
    _results[_make_key(state)] = tuple(ids)


def get_cache_stats() -> dict[str, Any]:
    total = _hits + _misses
    return {
        "size": len(_results),
        "hits": _hits,
        "misses": _misses,
        "hit_rate": round(_hits / total * 100, 1) if total > 0 else 0.0,
    }


def clear_cache() -> None:
    global _hits, _misses
    _results.clear()
    _hits = 0
    _misses = 0
