"""Exception hierarchy for the search pipeline.

Only ``InvalidInput`` and ``GeocodeFailed`` ever reach a caller. ``ProviderError``
is raised by vendor adapters and recovered by the fallback orchestrator.
"""


class SearchError(RuntimeError):
    """Base class for errors with a client-facing HTTP status."""

    status_code = 500


class InvalidInput(SearchError):
    """Raised when the postal code is not a well-formed U.S. ZIP."""

    status_code = 400


class GeocodeFailed(SearchError):
    """Raised when a postal code cannot be turned into coordinates."""

    status_code = 404


class GeocodeNotFound(GeocodeFailed):
    """The lookup service has no match for the postal code."""


class GeocodeUnavailable(GeocodeFailed):
    """The lookup service could not be reached or timed out."""


class ProviderError(SearchError):
    """Raised when a business-search vendor call fails."""

    status_code = 502

    def __init__(self, vendor: str, message: str) -> None:
        super().__init__(f"{vendor}: {message}")
        self.vendor = vendor
        self.message = message
