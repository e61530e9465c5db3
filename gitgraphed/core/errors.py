class ContributionFetchError(Exception):
    """Raised when the contributions page cannot be retrieved."""


class ContributionTransportError(ContributionFetchError):
    """Raised on DNS, connection or timeout failures."""


class ContributionStatusError(ContributionFetchError):
    """Raised when the contributions page answers with a non-2xx status."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"HTTP request failed with status code: {status_code}")
        self.status_code = status_code


class ContributionReadError(ContributionFetchError):
    """Raised when the response body cannot be fully read."""
