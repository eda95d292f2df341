"""Custom exceptions for the Sequence SDK."""

from typing import Optional, Any, Dict


class SequenceSDKError(Exception):
    """Base exception for all Sequence SDK errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(SequenceSDKError):
    """Configuration is invalid or missing."""
    pass


class TransportError(SequenceSDKError):
    """A request to the ledger service failed."""
    pass


class APIError(TransportError):
    """The ledger service answered with an error status or an unreadable body."""

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        status_code: Optional[int] = None,
        seq_code: Optional[str] = None,
        response_data: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, details)
        self.path = path
        self.status_code = status_code
        self.seq_code = seq_code
        self.response_data = response_data


class RateLimitError(APIError):
    """Rate limit exceeded."""

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        retry_after: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, status_code=429, details=details)
        self.retry_after = retry_after


class NetworkError(TransportError):
    """Network connectivity issues."""
    pass


class TimeoutError(TransportError):
    """Request timed out."""

    def __init__(
        self,
        message: str,
        timeout_duration: Optional[float] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, details)
        self.timeout_duration = timeout_duration


class BuilderError(SequenceSDKError):
    """A transaction builder was used after it was submitted."""
    pass


class ContinuationResolutionError(SequenceSDKError):
    """A page's origin does not resolve to a page-fetching method on the client."""

    def __init__(
        self,
        message: str,
        resource: Optional[str] = None,
        method: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, details)
        self.resource = resource
        self.method = method


class NoMorePagesError(SequenceSDKError):
    """The page is the last one in its result set."""
    pass
