from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from ..config import DEFAULT_APP_CONFIG
from .cache import clear_cache
from .models import Restaurant

logger = logging.getLogger(__name__)

COLUMNS = [
    "id",
    "name",
    "cuisine",
    "rating",
    "price",
    "address",
    "city",
    "neighborhood",
    "known_for",
    "description",
]

_df: pd.DataFrame | None = None
_records: tuple[Restaurant, ...] | None = None


def _load(path: Path) -> tuple[pd.DataFrame, tuple[Restaurant, ...]]:
    df = pd.read_csv(path, keep_default_na=False)
    missing = [c for c in COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"{path} is missing columns: {', '.join(missing)}")

    df = df[COLUMNS].astype({"id": int, "rating": int, "price": int}).reset_index(drop=True)
    if df["id"].duplicated().any():
        dupes = sorted(df.loc[df["id"].duplicated(), "id"].unique().tolist())
        raise ValueError(f"Duplicate restaurant ids in {path}: {dupes}")

    # Validates bounds on rating/price and non-empty names
    records = tuple(Restaurant(**row) for row in df.to_dict(orient="records"))

    # Lowercase searchable fields once for substring matching
    for col in ("name", "cuisine", "neighborhood"):
        df[f"{col}_lower"] = df[col].str.lower()

    return df, records


def load_data_store(path: Path = DEFAULT_APP_CONFIG.data_path) -> pd.DataFrame:
    """(Re)load the fixture at *path* and make it the active data store."""
    global _df, _records
    _df, _records = _load(path)
    clear_cache()
    logger.info("Loaded %d restaurants from %s", len(_records), path)
    return _df


def get_dataframe() -> pd.DataFrame:
    """Return a copy of the restaurant DataFrame, loading it on first call."""
    if _df is None:
        load_data_store()
    return _df.copy()


def get_restaurants() -> tuple[Restaurant, ...]:
    """Return all restaurants in fixture order."""
    if _records is None:
        load_data_store()
    return _records


def get_restaurant(restaurant_id: int) -> Restaurant | None:
    for restaurant in get_restaurants():
        if restaurant.id == restaurant_id:
            return restaurant
    return None


def get_ids() -> frozenset[int]:
    return frozenset(r.id for r in get_restaurants())


def unique_values(key: str) -> list:
    """Sorted distinct values of column *key*."""
    df = get_dataframe()
    if key not in COLUMNS:
        raise KeyError(key)
    return sorted(df[key].unique().tolist())
