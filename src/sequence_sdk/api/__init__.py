"""Query APIs for ledger resources."""

from .tokens import TokensAPI
from .actions import ActionsAPI

__all__ = [
    "TokensAPI",
    "ActionsAPI",
]
