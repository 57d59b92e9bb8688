"""
Awin API Client

Publisher API client for Awin: transaction retrieval and commission-group
lookup, with a fixed-window call throttle and an in-memory commission-group
cache.
"""

from .exceptions import AwinAPIError, AwinConfigError, AwinParseError
from .extract.awin_client import AwinClient
from .extract.schemas import CommissionGroup, Transaction, TransactionPart

__all__ = [
    "AwinClient",
    "AwinAPIError",
    "AwinConfigError",
    "AwinParseError",
    "CommissionGroup",
    "Transaction",
    "TransactionPart",
]
