"""Utilities for transforming vendor search payloads into BusinessResult objects."""

import logging
import math
from typing import Any, Dict, Iterable, List, Optional

from solar_finder.core.models import BusinessResult, Coordinates, Provenance

logger = logging.getLogger(__name__)

MAX_RATING = 5.0


def _strip_or_none(value: Any) -> Optional[str]:
    if value is None:
        return None
    value_str = str(value).strip()
    return value_str or None


def safe_float(value: Any) -> Optional[float]:
    try:
        if value is None or isinstance(value, bool):
            return None
        result = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(result) or math.isinf(result):
        return None
    return result


def _safe_int(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = safe_float(value)
        return int(number) if number is not None else None

    if isinstance(value, str):
        number = safe_float(value.replace(",", "").strip())
        return int(number) if number is not None else None
    return None


def _normalize_rating(value: Any) -> float:
    rating = safe_float(value)
    if rating is None:
        return 0.0
    return min(max(rating, 0.0), MAX_RATING)


def _normalize_review_count(value: Any) -> int:
    count = _safe_int(value)
    if count is None or count < 0:
        return 0
    return count


def _nested(raw: Dict[str, Any], key: str) -> Dict[str, Any]:
    """Return ``raw[key]`` as a dict, treating absence as empty and any other type as malformed."""
    value = raw.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"{key} must be an object, got {type(value).__name__}")
    return value


def _coordinates(lat: Any, lng: Any) -> Optional[Coordinates]:
    latitude = safe_float(lat)
    longitude = safe_float(lng)
    if latitude is None or longitude is None:
        return None
    return Coordinates(lat=latitude, lng=longitude)


def from_google_place(raw: Dict[str, Any]) -> Optional[BusinessResult]:
    name = _strip_or_none(raw.get("name"))
    if not name:
        return None

    location = _nested(_nested(raw, "geometry"), "location")
    return BusinessResult(
        name=name,
        rating=_normalize_rating(raw.get("rating")),
        review_count=_normalize_review_count(raw.get("user_ratings_total")),
        address=_strip_or_none(raw.get("vicinity")) or _strip_or_none(raw.get("formatted_address")) or "",
        coordinates=_coordinates(location.get("lat"), location.get("lng")),
        provenance=Provenance.PRIMARY,
    )


def from_yelp_business(raw: Dict[str, Any]) -> Optional[BusinessResult]:
    name = _strip_or_none(raw.get("name"))
    if not name:
        return None

    location = _nested(raw, "location")
    display_address = location.get("display_address") or []
    if isinstance(display_address, str):
        display_address = [display_address]
    address = ", ".join(part.strip() for part in display_address if isinstance(part, str) and part.strip())

    coordinates = _nested(raw, "coordinates")
    return BusinessResult(
        name=name,
        rating=_normalize_rating(raw.get("rating")),
        review_count=_normalize_review_count(raw.get("review_count")),
        address=address,
        phone=_strip_or_none(raw.get("display_phone")),
        coordinates=_coordinates(coordinates.get("latitude"), coordinates.get("longitude")),
        external_url=_strip_or_none(raw.get("url")),
        provenance=Provenance.SECONDARY,
    )


def normalize_items(items: Iterable[Any], parser) -> List[BusinessResult]:
    """Apply ``parser`` to every dict item, skipping entries without a usable name."""
    results: List[BusinessResult] = []
    for raw in items or []:
        if not isinstance(raw, dict):
            continue
        result = parser(raw)
        if result is None:
            logger.debug("Skipping vendor item without name: %s", str(raw)[:200])
            continue
        results.append(result)
    return results
