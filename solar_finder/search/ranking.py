"""Deterministic ordering of normalized results."""

from typing import Iterable, List

from solar_finder.core.models import BusinessResult


def _sort_key(result: BusinessResult):
    return (-result.rating, -result.review_count)


def rank_results(results: Iterable[BusinessResult], limit: int) -> List[BusinessResult]:
    """Order by rating then review count, both descending, and truncate to ``limit``.

    ``sorted`` is stable, so full ties keep the provider's order.
    """
    ranked = sorted(results, key=_sort_key)
    return ranked[: max(limit, 0)]
