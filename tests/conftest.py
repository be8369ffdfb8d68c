"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- A low-cost credential digest so bcrypt does not dominate test time
- In-memory repository and account service
- Factories for registration requests and stored accounts
"""

from collections.abc import Callable

import pytest

from src.adapters.repository.memory import InMemoryAccountRepository
from src.domain.accounts import AccountService
from src.domain.digest import PasswordDigest
from src.domain.ports import Account

# Cost factor 4 is the bcrypt minimum
FAST_DIGEST_SALT = "$2b$04$accountcoredigestsaltu"


@pytest.fixture
def password_digest() -> PasswordDigest:
    """Digest with a fixed low-cost salt."""
    return PasswordDigest(salt=FAST_DIGEST_SALT)


@pytest.fixture
def repository() -> InMemoryAccountRepository:
    """Fresh in-memory repository for each test."""
    return InMemoryAccountRepository()


@pytest.fixture
def service(
    repository: InMemoryAccountRepository, password_digest: PasswordDigest
) -> AccountService:
    """Account service over the in-memory repository."""
    return AccountService(repository=repository, password_digest=password_digest)


def _make_account(**overrides: object) -> Account:
    values = {
        "email": "alice@example.com",
        "password": "secret_123",
        "handle": "alice_w",
        "display_name": "Alice",
    }
    values.update(overrides)
    return Account(**values)


@pytest.fixture
def stored_account(
    repository: InMemoryAccountRepository, password_digest: PasswordDigest
) -> Account:
    """An account already persisted with the digest of 'secret_123'."""
    account = _make_account(password=password_digest.digest("secret_123"))
    repository.insert(account)
    return account


@pytest.fixture
def make_account() -> Callable[..., Account]:
    """Factory for well-formed registration requests; keyword overrides."""
    return _make_account
