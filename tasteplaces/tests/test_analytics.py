from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from tasteplaces.analytics.aggregator import compute_analytics
from tasteplaces.analytics.store import clear_events, get_events, record_event, set_max_events
from tasteplaces.app import app
from tasteplaces.config import DEFAULT_APP_CONFIG


def test_analytics_returns_empty_initially():
    clear_events()
    resp = TestClient(app).get("/analytics")
    assert resp.status_code == 200
    body = resp.json()
    assert body["total_actions"] == 0
    assert body["total_views"] == 0
    assert body["zero_result_rate"] == 0.0


def test_actions_and_views_are_recorded():
    clear_events()
    client = TestClient(app)
    client.get("/restaurants")
    client.post("/actions", json={"type": "set_rating_filter", "value": 1})
    assert len(get_events("view")) == 2
    actions = get_events("action")
    assert len(actions) == 1
    assert actions[0]["action"] == "set_rating_filter"
    assert actions[0]["value"] == 1


def test_analytics_tracks_filters_and_queries():
    clear_events()
    client = TestClient(app)
    client.post("/actions", json={"type": "set_query", "value": "Plateau"})
    client.post("/actions", json={"type": "set_query", "value": "PLATEAU"})
    client.post("/actions", json={"type": "set_cuisine_filter", "value": "Mexican"})
    client.post("/actions", json={"type": "cycle_sort"})
    body = client.get("/analytics").json()
    assert body["total_actions"] == 4
    assert body["action_counts"]["set_query"] == 2
    assert body["top_queries"] == [{"query": "plateau", "count": 2}]
    assert body["cuisine_filter_usage"] == {"Mexican": 1}
    assert body["sort_usage"] == {"default": 3, "rating-desc": 1}
    # Both views after the cuisine filter were empty
    assert body["zero_result_rate"] == 50.0


def test_compute_analytics_averages():
    clear_events()
    record_event("view", {"results": 10, "sort_order": "default", "filters_active": False})
    record_event("view", {"results": 4, "sort_order": "name", "filters_active": True})
    record_event("action", {"action": "set_price_filter", "value": 4})
    body = compute_analytics(get_events())
    assert body["avg_results_per_view"] == 7.0
    assert body["filtered_view_rate"] == 50.0
    assert body["price_filter_usage"] == {"4": 1}
    assert body["rating_filter_usage"] == {}


def test_event_log_is_bounded():
    clear_events()
    set_max_events(5)
    try:
        client = TestClient(app)
        for _ in range(20):
            client.get("/restaurants")
        assert len(get_events()) == 5
        record_event("action", {"action": "cycle_sort", "value": None})
        events = get_events()
        assert len(events) == 5
        # Oldest entries are dropped first
        assert events[-1]["action"] == "cycle_sort"
    finally:
        set_max_events(DEFAULT_APP_CONFIG.analytics_max_events)
        clear_events()


def test_set_max_events_rejects_zero():
    with pytest.raises(ValueError):
        set_max_events(0)
