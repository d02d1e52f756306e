from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException, Request
from pydantic import ValidationError
from starlette.middleware.sessions import SessionMiddleware

from .analytics.aggregator import compute_analytics
from .analytics.store import get_events, record_event
from .catalog.cache import get_cache_stats
from .catalog.data_store import get_ids, get_restaurant, unique_values
from .catalog.models import CatalogView, MetadataResponse, Restaurant
from .catalog.view import build_view
from .config import DEFAULT_APP_CONFIG
from .state.machine import reduce
from .state.models import SORT_CYCLE, Action, UIState

logging.basicConfig(level=DEFAULT_APP_CONFIG.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="Taste Places API", version="1.0.0")
app.add_middleware(SessionMiddleware, secret_key=DEFAULT_APP_CONFIG.session_secret)

_STATE_KEY = "ui_state"


def _load_state(request: Request) -> UIState:
    raw_state = request.session.get(_STATE_KEY)
    if not raw_state:
        return UIState()
    try:
        return UIState(**raw_state)
    except (TypeError, ValidationError):
        logger.warning("Discarding unreadable UI state from session", exc_info=True)
        return UIState()


def _save_state(request: Request, state: UIState) -> None:
    request.session[_STATE_KEY] = state.model_dump(mode="json")


def _render(state: UIState) -> CatalogView:
    view = build_view(state, DEFAULT_APP_CONFIG)
    record_event("view", {
        "results": view.total,
        "sort_order": state.sort_order.value,
        "filters_active": state.filters_active,
        "search_query": state.search_query,
    })
    return view


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metadata", response_model=MetadataResponse)
def metadata() -> MetadataResponse:
    return MetadataResponse(
        cuisines=unique_values("cuisine"),
        neighborhoods=unique_values("neighborhood"),
        cities=unique_values("city"),
        ratings=unique_values("rating"),
        prices=unique_values("price"),
        sort_orders=[s.value for s in SORT_CYCLE],
    )


@app.get("/restaurants", response_model=CatalogView)
def restaurants(request: Request) -> CatalogView:
    return _render(_load_state(request))


@app.get("/restaurants/{restaurant_id}", response_model=Restaurant)
def restaurant_detail(restaurant_id: int) -> Restaurant:
    restaurant = get_restaurant(restaurant_id)
    if restaurant is None:
        raise HTTPException(status_code=404, detail="Restaurant not found")
    return restaurant


# ── UI actions ───────────────────────────────────────────────────────────


@app.post("/actions", response_model=CatalogView)
def apply_action(body: Action, request: Request) -> CatalogView:
    state = reduce(
        _load_state(request),
        body,
        known_ids=get_ids(),
        default_rating=DEFAULT_APP_CONFIG.quick_rating,
    )
    _save_state(request, state)
    record_event("action", {"action": body.type.value, "value": body.value})
    return _render(state)


@app.post("/state/reset", response_model=CatalogView)
def reset_state(request: Request) -> CatalogView:
    state = UIState()
    _save_state(request, state)
    return _render(state)


# ── Diagnostics ──────────────────────────────────────────────────────────


@app.get("/cache/stats")
def cache_stats() -> dict:
    return get_cache_stats()


@app.get("/analytics")
def analytics() -> dict:
    return compute_analytics(get_events())
