from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .state.models import RATING_MAX, RATING_MIN

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent / ".env")

_PACKAGED_CSV = Path(__file__).resolve().parent / "data" / "restaurants.csv"


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class AppConfig:
    session_secret: str = os.getenv(
        "SESSION_SECRET", "tasteplaces-secret-change-in-production"
    )
    data_path: Path = Path(os.getenv("TASTEPLACES_DATA_PATH", str(_PACKAGED_CSV)))
    # Rating applied by the quick filter control when no filter is active
    quick_rating: int = int(os.getenv("TASTEPLACES_QUICK_RATING", "3"))
    cache_enabled: bool = _env_bool("TASTEPLACES_CACHE_ENABLED", True)
    # Oldest analytics events are dropped past this many
    analytics_max_events: int = int(os.getenv("TASTEPLACES_ANALYTICS_MAX_EVENTS", "10000"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    def __post_init__(self) -> None:
        if not RATING_MIN <= self.quick_rating <= RATING_MAX:
            raise ValueError(
                f"quick_rating must be between {RATING_MIN} and {RATING_MAX}, "
                f"got {self.quick_rating}"
            )
        if self.analytics_max_events < 1:
            raise ValueError("analytics_max_events must be at least 1")


DEFAULT_APP_CONFIG = AppConfig()
