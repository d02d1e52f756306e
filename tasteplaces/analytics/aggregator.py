from __future__ import annotations

from collections import Counter
from typing import Any


def compute_analytics(events: list[dict[str, Any]]) -> dict[str, Any]:
    actions = [e for e in events if e["type"] == "action"]
    views = [e for e in events if e["type"] == "view"]

    # Action counts by type
    action_counter: Counter[str] = Counter(a.get("action", "unknown") for a in actions)

    # Filter values picked by users
    rating_counter: Counter[int] = Counter()
    price_counter: Counter[int] = Counter()
    cuisine_counter: Counter[str] = Counter()
    for a in actions:
        value = a.get("value")
        if value is None:
            continue
        if a.get("action") == "set_rating_filter":
            rating_counter[value] += 1
        elif a.get("action") == "set_price_filter":
            price_counter[value] += 1
        elif a.get("action") == "set_cuisine_filter":
            cuisine_counter[value] += 1

    # Search queries, ignoring empty ones
    query_counter: Counter[str] = Counter()
    for a in actions:
        if a.get("action") == "set_query" and a.get("value"):
            query_counter[str(a["value"]).strip().lower()] += 1
    top_queries = [{"query": q, "count": c} for q, c in query_counter.most_common(10)]

    # Sort modes in effect when views were rendered
    sort_counter: Counter[str] = Counter(v.get("sort_order", "default") for v in views)

    total_views = len(views)
    zero_results = sum(1 for v in views if v.get("results", 0) == 0)
    result_counts = [v.get("results", 0) for v in views]
    avg_results = round(sum(result_counts) / total_views, 1) if total_views else 0.0

    filtered_views = sum(1 for v in views if v.get("filters_active"))

    return {
        "total_actions": len(actions),
        "total_views": total_views,
        "action_counts": dict(action_counter),
        "rating_filter_usage": {str(k): v for k, v in sorted(rating_counter.items())},
        "price_filter_usage": {str(k): v for k, v in sorted(price_counter.items())},
        "cuisine_filter_usage": dict(cuisine_counter.most_common()),
        "top_queries": top_queries,
        "sort_usage": dict(sort_counter),
        "avg_results_per_view": avg_results,
        "zero_result_rate": round(zero_results / total_views * 100, 1) if total_views else 0.0,
        "filtered_view_rate": round(filtered_views / total_views * 100, 1) if total_views else 0.0,
    }
