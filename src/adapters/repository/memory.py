"""
In-memory repository adapter - Implements AccountRepository protocol.

Dict-backed substitute for PostgresAccountRepository, used in tests and
for running the API without a database. Uniqueness of email and handle
is checked under a lock so concurrent inserts behave like the UNIQUE
constraints of the SQL schema.
"""

import itertools
import threading
from dataclasses import fields, replace

from src.domain.exceptions import StorageError
from src.domain.ports import Account

# Fields the update path may write
_PROFILE_FIELDS = tuple(
    f.name for f in fields(Account) if f.name not in ("id", "email", "password", "handle")
)


class InMemoryAccountRepository:
    """
    Implements AccountRepository protocol with a dict keyed by id.

    Returned accounts are copies, so callers mutating them never touch
    stored state.
    """

    def __init__(self) -> None:
        self._accounts: dict[int, Account] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def _find(self, attribute: str, value: object) -> Account | None:
        with self._lock:
            for account in self._accounts.values():
                if getattr(account, attribute) == value:
                    return replace(account)
        return None

    def get_by_email(self, email: str) -> Account | None:
        return self._find("email", email)

    def get_by_handle(self, handle: str) -> Account | None:
        return self._find("handle", handle)

    def get_by_id(self, account_id: int) -> Account | None:
        with self._lock:
            account = self._accounts.get(account_id)
            return replace(account) if account is not None else None

    def insert(self, account: Account) -> int:
        """
        Store a new account and assign its id.

        Raises:
            StorageError: If the email or handle is already taken
        """
        with self._lock:
            for existing in self._accounts.values():
                if existing.email == account.email:
                    raise StorageError(f"duplicate email: {account.email}")
                if account.handle is not None and existing.handle == account.handle:
                    raise StorageError(f"duplicate handle: {account.handle}")
            account.id = next(self._ids)
            self._accounts[account.id] = replace(account)
            return 1

    def update(self, account: Account) -> int:
        """Copy non-None profile fields onto the stored account."""
        with self._lock:
            stored = self._accounts.get(account.id)
            if stored is None:
                return 0
            for name in _PROFILE_FIELDS:
                value = getattr(account, name)
                if value is not None:
                    setattr(stored, name, value)
            return 1

    def ping(self) -> None:
        pass
