"""
Simple Banking Model

An in-memory banking domain: account holders and bank accounts supporting
credits, debits and transfers under overdraft and per-debit limits.
All amounts are handled as Decimal.
"""

from .errors import InvalidArgumentError, ValidationReason
from .persons import Person
from .accounts import Account
from .logging_config import configure_logging

__version__ = "1.0.0"

__all__ = [
    "Account",
    "configure_logging",
    "InvalidArgumentError",
    "Person",
    "ValidationReason",
]
