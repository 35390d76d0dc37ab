"""Application configuration helpers."""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    google_api_key: str = ""
    yelp_api_key: str = ""
    cache_ttl_seconds: int = 600
    port: int = 4000
    request_timeout_seconds: float = 10
    search_keyword: str = "solar electrician"
    google_place_type: str = "electrician"
    geocoder_base_url: str = "http://api.zippopotam.us/us"


def _get_int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("%s=%r is not an integer; using %s.", name, raw, default)
        return default


def _get_float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("%s=%r is not numeric; using %s.", name, raw, default)
        return default
    if value <= 0:
        logger.warning("%s must be positive; using %s.", name, default)
        return default
    return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings from environment variables with sensible defaults."""
    load_dotenv()

    google_api_key = os.getenv("GOOGLE_API_KEY", "").strip()
    yelp_api_key = os.getenv("YELP_API_KEY", "").strip()
    cache_ttl_seconds = _get_int_env("CACHE_TTL_SECONDS", 600)
    port = _get_int_env("PORT", 4000)
    request_timeout_seconds = _get_float_env("REQUEST_TIMEOUT_SECONDS", 10)
    search_keyword = os.getenv("SEARCH_KEYWORD", "").strip() or "solar electrician"
    google_place_type = os.getenv("GOOGLE_PLACE_TYPE", "").strip() or "electrician"
    geocoder_base_url = (os.getenv("GEOCODER_BASE_URL", "").strip() or "http://api.zippopotam.us/us").rstrip("/")

    if not google_api_key:
        logger.warning("GOOGLE_API_KEY is not configured; Google Places will be skipped.")
    if not yelp_api_key:
        logger.warning("YELP_API_KEY is not configured; Yelp Fusion will be skipped.")
    if not google_api_key and not yelp_api_key:
        logger.warning("No provider credentials configured; every search will return placeholder results.")
    if cache_ttl_seconds < 0:
        logger.warning("CACHE_TTL_SECONDS must not be negative; using 600.")
        cache_ttl_seconds = 600

    return Settings(
        google_api_key=google_api_key,
        yelp_api_key=yelp_api_key,
        cache_ttl_seconds=cache_ttl_seconds,
        port=port,
        request_timeout_seconds=request_timeout_seconds,
        search_keyword=search_keyword,
        google_place_type=google_place_type,
        geocoder_base_url=geocoder_base_url,
    )
