from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

RATING_MIN, RATING_MAX = 1, 3
PRICE_MIN, PRICE_MAX = 1, 4


class SortOrder(str, Enum):
    default = "default"
    rating_desc = "rating-desc"
    rating_asc = "rating-asc"
    price_desc = "price-desc"
    price_asc = "price-asc"
    name = "name"


# Order the sort control steps through
SORT_CYCLE: tuple[SortOrder, ...] = (
    SortOrder.default,
    SortOrder.rating_desc,
    SortOrder.rating_asc,
    SortOrder.price_desc,
    SortOrder.price_asc,
    SortOrder.name,
)


class UIState(BaseModel):
    """Per-session interaction state. Transitions return new instances."""

    model_config = ConfigDict(frozen=True)

    expanded_card: int | None = None
    search_active: bool = False
    search_query: str = ""
    rating_filter: int | None = Field(default=None, ge=RATING_MIN, le=RATING_MAX)
    price_filter: int | None = Field(default=None, ge=PRICE_MIN, le=PRICE_MAX)
    cuisine_filter: str | None = None
    sort_order: SortOrder = SortOrder.default

    @property
    def filters_active(self) -> bool:
        return bool(self.rating_filter or self.price_filter or self.cuisine_filter)

    @property
    def sort_active(self) -> bool:
        return self.sort_order is not SortOrder.default


class ActionType(str, Enum):
    expand = "expand"
    cycle_sort = "cycle_sort"
    set_query = "set_query"
    toggle_search = "toggle_search"
    set_rating_filter = "set_rating_filter"
    set_price_filter = "set_price_filter"
    set_cuisine_filter = "set_cuisine_filter"
    quick_filter = "quick_filter"
    clear_all = "clear_all"


_VALUELESS = {
    ActionType.cycle_sort,
    ActionType.toggle_search,
    ActionType.quick_filter,
    ActionType.clear_all,
}


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class Action(BaseModel):
    type: ActionType
    value: int | str | None = None

    @model_validator(mode="after")
    def _check_value(self) -> "Action":
        t, v = self.type, self.value
        if t is ActionType.expand and not _is_int(v):
            raise ValueError("expand requires an integer restaurant id")
        if t is ActionType.set_query and not isinstance(v, str):
            raise ValueError("set_query requires a string value")
        if t is ActionType.set_rating_filter and v is not None:
            if not (_is_int(v) and RATING_MIN <= v <= RATING_MAX):
                raise ValueError(f"rating filter must be between {RATING_MIN} and {RATING_MAX}")
        if t is ActionType.set_price_filter and v is not None:
            if not (_is_int(v) and PRICE_MIN <= v <= PRICE_MAX):
                raise ValueError(f"price filter must be between {PRICE_MIN} and {PRICE_MAX}")
        if t is ActionType.set_cuisine_filter and v is not None and not isinstance(v, str):
            raise ValueError("cuisine filter must be a string")
        if t in _VALUELESS and v is not None:
            raise ValueError(f"{t.value} takes no value")
        return self
