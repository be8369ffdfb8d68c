"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
the account service and its repository into routes.
"""

from fastapi import Depends, Request

from src.config.settings import get_settings
from src.domain.accounts import AccountService
from src.domain.digest import PasswordDigest
from src.domain.ports import AccountRepository


def get_repository(request: Request) -> AccountRepository:
    """
    Get the account repository from app state.

    The repository is created during app lifespan startup and stored in
    app.state, backed by either the connection pool or an in-memory store.
    """
    return request.app.state.repository


def get_password_digest() -> PasswordDigest:
    """Digest bound to the configured salt."""
    return PasswordDigest(salt=get_settings().digest_salt)


def get_account_service(
    repository: AccountRepository = Depends(get_repository),
    password_digest: PasswordDigest = Depends(get_password_digest),
) -> AccountService:
    """Create account service with injected dependencies."""
    return AccountService(repository=repository, password_digest=password_digest)
