"""
Domain layer - Account validation, credential digest and result taxonomy.

This package holds the account business logic with no framework imports.
It defines its own port interface for persistence so adapters can be
swapped without touching the service.
"""

from .accounts import AccountService
from .digest import PasswordDigest, digest
from .exceptions import AccountError, StorageError
from .ports import Account, AccountRepository
from .results import Result, ServiceMessage, Status

__all__ = [
    "Account",
    "AccountError",
    "AccountRepository",
    "AccountService",
    "PasswordDigest",
    "Result",
    "ServiceMessage",
    "Status",
    "StorageError",
    "digest",
]
