"""
Error taxonomy for content retrieval.

Single-source operations raise these directly. Failover operations log the
primary failure and raise AllSourcesFailedError wrapping the secondary one.
"""

from typing import Optional


class ContentSourceError(Exception):
    """Base exception for every content source failure."""

    def __init__(self, message: str, endpoint: Optional[str] = None):
        self.message = message
        self.endpoint = endpoint
        super().__init__(message)

    def __str__(self) -> str:
        if self.endpoint:
            return f"{self.message} [{self.endpoint}]"
        return self.message


class NetworkError(ContentSourceError):
    """Transport-level failure: DNS, timeout, connection reset."""


class HttpStatusError(ContentSourceError):
    """The content source answered with a non-success status."""

    def __init__(self, endpoint: str, status_code: int, reason: str = ""):
        self.status_code = status_code
        self.reason = reason
        detail = f"HTTP {status_code}" + (f" {reason}" if reason else "")
        super().__init__(f"Request failed with {detail}", endpoint)


class InvalidPayloadError(ContentSourceError):
    """The response body is not a JSON object or collection."""


class EmptyResultError(ContentSourceError):
    """Well-formed but empty result set where records are required."""


class NotFoundError(EmptyResultError):
    """Single-record lookup (page, post, category, author) matched nothing."""


class AllSourcesFailedError(ContentSourceError):
    """Both the primary and the secondary content source failed."""

    def __init__(self, message: str, cause: ContentSourceError | Exception):
        self.cause = cause
        super().__init__(f"{message} {cause}", getattr(cause, "endpoint", None))

    def __str__(self) -> str:
        return self.message
