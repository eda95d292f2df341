"""Transaction building and submission for the Sequence SDK."""

from .builder import TransactionBuilder
from .api import TransactionsAPI

__all__ = [
    "TransactionBuilder",
    "TransactionsAPI",
]
