"""Infrastructure layer errors."""

from flowdeck.domain.error import UpstreamError


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class ProviderError(AdapterError, UpstreamError):
    """External provider error."""

    pass
