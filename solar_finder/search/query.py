"""Parsing and validation of incoming search parameters."""

import math
import re
from typing import Any, Optional

from solar_finder.core.errors import InvalidInput
from solar_finder.core.models import PostalQuery

ZIP_PATTERN = re.compile(r"^[0-9]{5}$")
DEFAULT_RADIUS_MILES = 10.0
DEFAULT_LIMIT = 10
MAX_LIMIT = 50


def validate_code(code: Any) -> str:
    """Return the stripped ZIP or raise InvalidInput.

    ``00000`` is well-formed but never assigned, so it is rejected here too.
    """
    value = str(code or "").strip()
    if not ZIP_PATTERN.match(value) or value == "00000":
        raise InvalidInput("zip must be a 5-digit US ZIP")
    return value


def _positive_number(raw: Any) -> Optional[float]:
    if raw is None or isinstance(raw, bool):
        return None
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    if math.isnan(value) or math.isinf(value) or value <= 0:
        return None
    return value


def parse_radius_miles(raw: Any) -> float:
    value = _positive_number(raw)
    return value if value is not None else DEFAULT_RADIUS_MILES


def parse_limit(raw: Any) -> int:
    value = _positive_number(raw)
    if value is None or value < 1:
        return DEFAULT_LIMIT
    return min(int(value), MAX_LIMIT)


def build_query(code: Any, radius_miles: Any = None, limit: Any = None) -> PostalQuery:
    return PostalQuery(
        code=validate_code(code),
        radius_miles=parse_radius_miles(radius_miles),
        limit=parse_limit(limit),
    )
