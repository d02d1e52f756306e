from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ..state.models import PRICE_MAX, PRICE_MIN, RATING_MAX, RATING_MIN, UIState


class Restaurant(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = Field(..., ge=1)
    name: str = Field(..., min_length=1)
    cuisine: str
    rating: int = Field(..., ge=RATING_MIN, le=RATING_MAX)
    price: int = Field(..., ge=PRICE_MIN, le=PRICE_MAX)
    address: str = ""
    city: str = ""
    neighborhood: str = ""
    known_for: str = Field(default="", alias="knownFor")
    description: str = ""


class CardDetails(BaseModel):
    address: str
    city: str
    neighborhood: str
    known_for: str = Field(alias="knownFor")
    description: str
    links: list[str] = Field(default_factory=lambda: ["Website", "Photos", "Reserve"])

    model_config = ConfigDict(populate_by_name=True)


class RestaurantCard(BaseModel):
    id: int
    title: str
    cuisine: str
    stars: str
    price_label: str
    expanded: bool = False
    details: CardDetails | None = None


class CatalogView(BaseModel):
    title: str
    subtitle: str
    cards: list[RestaurantCard]
    total: int
    no_matches: bool
    message: str | None = None
    state: UIState
    search_visible: bool
    filters_active: bool
    show_filter_bar: bool
    sort_active: bool
    sort_label: str


class MetadataResponse(BaseModel):
    cuisines: list[str]
    neighborhoods: list[str]
    cities: list[str]
    ratings: list[int]
    prices: list[int]
    sort_orders: list[str]
