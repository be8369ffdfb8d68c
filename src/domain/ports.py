"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the account record and the persistence interface
(port) the domain requires. Adapters implement the protocol structurally.
"""

from dataclasses import dataclass
from typing import Protocol


@dataclass
class Account:
    """
    One registered user.

    `password` holds plaintext while a request is in flight and the digest
    once loaded from storage. The service clears it before an account
    leaves a completed operation.
    """

    id: int | None = None
    email: str | None = None
    password: str | None = None
    handle: str | None = None
    display_name: str | None = None
    phone_number: str | None = None
    gender: str | None = None
    signature: str | None = None
    avatar: str | None = None
    location: str | None = None


class AccountRepository(Protocol):
    """
    Port interface for account persistence.

    Every method may raise StorageError. Implementations must enforce
    email and handle uniqueness atomically.
    """

    def get_by_email(self, email: str) -> Account | None:
        """Return the account registered with `email`, or None."""
        ...

    def get_by_handle(self, handle: str) -> Account | None:
        """Return the account owning `handle`, or None."""
        ...

    def get_by_id(self, account_id: int) -> Account | None:
        """Return the account with `account_id`, or None."""
        ...

    def insert(self, account: Account) -> int:
        """
        Persist a new account.

        Assigns `account.id` on success.

        Returns:
            Number of affected rows
        """
        ...

    def update(self, account: Account) -> int:
        """
        Update profile fields of the account identified by `account.id`.

        Email, password and handle are never written through this path.

        Returns:
            Number of affected rows
        """
        ...
