"""
Account domain service - Registration, login, handle and profile operations.

Every operation returns a Result envelope. Validation failures, duplicates,
wrong credentials and missing rows become ERROR results with a specific
ServiceMessage. StorageError from the repository is logged and collapsed
into SYSTEM_EXCEPTION so callers never see persistence details.

Operations are stateless. Callers are expected to run register_check
before insert_account, but each call stands on its own.
"""

import logging
from dataclasses import dataclass, field

from .digest import PasswordDigest
from .exceptions import StorageError
from .ports import Account, AccountRepository
from .results import Result, ServiceMessage
from .validators import is_valid_email, is_valid_handle, is_valid_password

logger = logging.getLogger(__name__)


@dataclass
class AccountService:
    """
    Domain service for account management.

    Orchestrates validators, the credential digest and the repository.
    """

    repository: AccountRepository
    password_digest: PasswordDigest = field(default_factory=PasswordDigest)

    def register_check(self, account: Account) -> Result[Account]:
        """
        Check that registration details are acceptable.

        Checks run in order and stop at the first failure: email format,
        email uniqueness, password format. Any client-supplied id is
        discarded.

        Args:
            account: Registration request (email and plaintext password)

        Returns:
            Result echoing the account with `id` cleared
        """
        account.id = None
        try:
            if not is_valid_email(account.email):
                return Result.error(ServiceMessage.EMAIL_FORMAT_INCORRECT, account)
            if self.repository.get_by_email(account.email) is not None:
                return Result.error(ServiceMessage.EMAIL_ALREADY_USED, account)
            if not is_valid_password(account.password):
                return Result.error(ServiceMessage.INVALID_PASSWORD, account)
        except StorageError:
            logger.exception("Registration check failed for %s", account.email)
            return Result.error(ServiceMessage.SYSTEM_EXCEPTION, account)
        return Result.success(ServiceMessage.REGISTER_INFO_VALID, account)

    def insert_account(self, account: Account) -> Result[Account]:
        """
        Persist a new account.

        The plaintext password is replaced by its digest before the insert
        and cleared from the returned account afterwards. A password that
        would not pass register_check is rejected without touching storage.

        Args:
            account: Account that passed register_check

        Returns:
            Result carrying the account with its assigned id
        """
        if not is_valid_password(account.password):
            return Result.error(ServiceMessage.INVALID_PASSWORD, account)
        try:
            account.password = self.password_digest.digest(account.password)
            if self.repository.insert(account) != 1:
                return Result.error(ServiceMessage.SYSTEM_EXCEPTION, account)
            account.password = None
        except StorageError:
            logger.exception("Account insert failed for %s", account.email)
            return Result.error(ServiceMessage.SYSTEM_EXCEPTION, account)
        logger.info("Registered account %s", account.id)
        return Result.success(ServiceMessage.REGISTER_SUCCESS, account)

    def verify_credentials(self, account: Account) -> Result[Account]:
        """
        Verify an email and password pair.

        On success the stored account id is copied onto `account`, which
        establishes the authenticated identity for the caller.
        """
        try:
            stored = self.repository.get_by_email(account.email)
            if stored is None:
                return Result.error(ServiceMessage.ACCOUNT_NOT_FOUND, account)
            if account.password is None or not self.password_digest.matches(
                account.password, stored.password
            ):
                return Result.error(ServiceMessage.PASSWORD_INCORRECT, account)
            account.id = stored.id
        except StorageError:
            logger.exception("Credential lookup failed for %s", account.email)
            return Result.error(ServiceMessage.SYSTEM_EXCEPTION, account)
        logger.info("Login succeeded for account %s", account.id)
        return Result.success(ServiceMessage.LOGIN_SUCCESS, account)

    def check_handle(self, handle: str) -> Result[str]:
        """Check that a handle is well-formed and not yet taken."""
        try:
            if not is_valid_handle(handle):
                return Result.error(ServiceMessage.HANDLE_INVALID, handle)
            if self.repository.get_by_handle(handle) is not None:
                return Result.error(ServiceMessage.HANDLE_USED, handle)
        except StorageError:
            logger.exception("Handle lookup failed for %s", handle)
            return Result.error(ServiceMessage.SYSTEM_EXCEPTION, handle)
        return Result.success(ServiceMessage.HANDLE_VALID, handle)

    def get_profile(self, account_id: int) -> Result[Account | None]:
        """Load an account profile. The stored digest is never returned."""
        try:
            account = self.repository.get_by_id(account_id)
            if account is None:
                return Result.error(ServiceMessage.NO_USER_INFO, None)
        except StorageError:
            logger.exception("Profile lookup failed for %s", account_id)
            return Result.error(ServiceMessage.SYSTEM_EXCEPTION, None)
        account.password = None
        return Result.success(ServiceMessage.GET_INFO_SUCCESS, account)

    def update_profile(self, account: Account) -> Result[Account]:
        """
        Update non-credential profile fields.

        Password and email are cleared from `account` before anything else,
        so they can never be changed through this path.
        """
        account.password = None
        account.email = None
        try:
            if self.repository.update(account) != 1:
                return Result.error(ServiceMessage.UPDATE_USER_FAILED, account)
        except StorageError:
            logger.exception("Profile update failed for %s", account.id)
            return Result.error(ServiceMessage.SYSTEM_EXCEPTION, account)
        return Result.success(ServiceMessage.UPDATE_INFO_SUCCESS, account)
