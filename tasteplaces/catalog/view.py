from __future__ import annotations

from ..config import DEFAULT_APP_CONFIG, AppConfig
from ..state.models import SortOrder, UIState
from .engine import visible_restaurants
from .models import CardDetails, CatalogView, Restaurant, RestaurantCard

TITLE = "@Will's"
SUBTITLE = "Montreal Restaurants"
NO_MATCHES_MESSAGE = "No restaurants match your filters"

SORT_LABELS: dict[SortOrder, str] = {
    SortOrder.default: "Default order",
    SortOrder.rating_desc: "Rating: high to low",
    SortOrder.rating_asc: "Rating: low to high",
    SortOrder.price_desc: "Price: high to low",
    SortOrder.price_asc: "Price: low to high",
    SortOrder.name: "Name: A to Z",
}


def render_stars(rating: int) -> str:
    return "★" * rating


def render_price(price: int) -> str:
    return "$" * price


def sort_label(order: SortOrder) -> str:
    return SORT_LABELS[order]


def build_card(restaurant: Restaurant, expanded: bool) -> RestaurantCard:
    details = None
    if expanded:
        details = CardDetails(
            address=restaurant.address,
            city=restaurant.city,
            neighborhood=restaurant.neighborhood,
            known_for=restaurant.known_for,
            description=restaurant.description,
        )
    return RestaurantCard(
        id=restaurant.id,
        title=f"{restaurant.id}. {restaurant.name}",
        cuisine=restaurant.cuisine,
        stars=render_stars(restaurant.rating),
        price_label=render_price(restaurant.price),
        expanded=expanded,
        details=details,
    )


def build_view(state: UIState, config: AppConfig = DEFAULT_APP_CONFIG) -> CatalogView:
    """Assemble everything the presentation layer needs for *state*."""
    restaurants = visible_restaurants(state, config)
    cards = [build_card(r, r.id == state.expanded_card) for r in restaurants]
    return CatalogView(
        title=TITLE,
        subtitle=SUBTITLE,
        cards=cards,
        total=len(cards),
        no_matches=not cards,
        message=None if cards else NO_MATCHES_MESSAGE,
        state=state,
        search_visible=state.search_active,
        filters_active=state.filters_active,
        show_filter_bar=bool(state.rating_filter or state.price_filter),
        sort_active=state.sort_active,
        sort_label=sort_label(state.sort_order),
    )
