"""
Core module for Sequence SDK.

This module contains the configuration, exceptions, wire types and callback
support shared by every resource API.
"""

from .config import SequenceConfig
from .types import (
    QueryParams,
    IssueAction,
    TransferAction,
    RetireAction,
    TransactionRequest,
    Transaction,
    TokenGroup,
    TokenSum,
    ActionRecord,
    ActionSum,
)
from .exceptions import (
    SequenceSDKError,
    ConfigurationError,
    TransportError,
    APIError,
    RateLimitError,
    NetworkError,
    TimeoutError,
    BuilderError,
    ContinuationResolutionError,
    NoMorePagesError,
)
from .callbacks import with_callback

__all__ = [
    # Configuration
    "SequenceConfig",

    # Core types
    "QueryParams",
    "IssueAction",
    "TransferAction",
    "RetireAction",
    "TransactionRequest",
    "Transaction",
    "TokenGroup",
    "TokenSum",
    "ActionRecord",
    "ActionSum",

    # Exceptions
    "SequenceSDKError",
    "ConfigurationError",
    "TransportError",
    "APIError",
    "RateLimitError",
    "NetworkError",
    "TimeoutError",
    "BuilderError",
    "ContinuationResolutionError",
    "NoMorePagesError",

    # Callbacks
    "with_callback",
]
