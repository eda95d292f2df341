"""
Sequence SDK for Python

An async Python SDK for the Sequence ledger API: paginated queries over
transactions, tokens and actions, and multi-action transaction submission.
"""

__version__ = "0.1.0"

# Core configuration and types
from .core.config import SequenceConfig
from .core.types import (
    QueryParams,
    IssueAction,
    TransferAction,
    RetireAction,
    Transaction,
    TokenGroup,
    TokenSum,
    ActionRecord,
    ActionSum,
)

# Client
from .client import Client

# Pagination
from .paging import (
    Page,
    PageOrigin,
    Query,
    IterationOutcome,
    STOP,
)

# Transaction building
from .transactions import TransactionBuilder, TransactionsAPI

# Resource APIs
from .api import TokensAPI, ActionsAPI

# Exceptions
from .core.exceptions import (
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

# Main exports for public API
__all__ = [
    # Version info
    "__version__",

    # Configuration
    "SequenceConfig",

    # Core types
    "QueryParams",
    "IssueAction",
    "TransferAction",
    "RetireAction",
    "Transaction",
    "TokenGroup",
    "TokenSum",
    "ActionRecord",
    "ActionSum",

    # Client
    "Client",

    # Pagination
    "Page",
    "PageOrigin",
    "Query",
    "IterationOutcome",
    "STOP",

    # Transaction building
    "TransactionBuilder",
    "TransactionsAPI",

    # Resource APIs
    "TokensAPI",
    "ActionsAPI",

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
]
