"""
Result envelope - Uniform outcome of every account service operation.

Operations report expected business conditions as ERROR results with a
specific ServiceMessage instead of raising.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class Status(str, Enum):
    """Coarse outcome of an operation."""

    SUCCESS = "SUCCESS"
    ERROR = "ERROR"


class ServiceMessage(str, Enum):
    """
    Closed set of outcome codes.

    Each member carries a human-readable explanation in `text`.
    """

    # register-check / insert-account
    EMAIL_FORMAT_INCORRECT = "EMAIL_FORMAT_INCORRECT"
    EMAIL_ALREADY_USED = "EMAIL_ALREADY_USED"
    INVALID_PASSWORD = "INVALID_PASSWORD"
    REGISTER_INFO_VALID = "REGISTER_INFO_VALID"
    REGISTER_SUCCESS = "REGISTER_SUCCESS"

    # verify-credentials
    ACCOUNT_NOT_FOUND = "ACCOUNT_NOT_FOUND"
    PASSWORD_INCORRECT = "PASSWORD_INCORRECT"
    LOGIN_SUCCESS = "LOGIN_SUCCESS"

    # check-handle
    HANDLE_INVALID = "HANDLE_INVALID"
    HANDLE_USED = "HANDLE_USED"
    HANDLE_VALID = "HANDLE_VALID"

    # profile
    NO_USER_INFO = "NO_USER_INFO"
    GET_INFO_SUCCESS = "GET_INFO_SUCCESS"
    UPDATE_USER_FAILED = "UPDATE_USER_FAILED"
    UPDATE_INFO_SUCCESS = "UPDATE_INFO_SUCCESS"

    SYSTEM_EXCEPTION = "SYSTEM_EXCEPTION"

    @property
    def text(self) -> str:
        return _MESSAGE_TEXT[self]


_MESSAGE_TEXT = {
    ServiceMessage.EMAIL_FORMAT_INCORRECT: "Email address format is incorrect",
    ServiceMessage.EMAIL_ALREADY_USED: "Email address is already registered",
    ServiceMessage.INVALID_PASSWORD: "Password must be 6-20 letters, digits or underscores",
    ServiceMessage.REGISTER_INFO_VALID: "Registration details are valid",
    ServiceMessage.REGISTER_SUCCESS: "Registration succeeded",
    ServiceMessage.ACCOUNT_NOT_FOUND: "No account is registered with this email",
    ServiceMessage.PASSWORD_INCORRECT: "Password is incorrect",
    ServiceMessage.LOGIN_SUCCESS: "Login succeeded",
    ServiceMessage.HANDLE_INVALID: "Handle must be 6-20 letters, digits or underscores",
    ServiceMessage.HANDLE_USED: "Handle is already taken",
    ServiceMessage.HANDLE_VALID: "Handle is available",
    ServiceMessage.NO_USER_INFO: "No such user",
    ServiceMessage.GET_INFO_SUCCESS: "Profile retrieved",
    ServiceMessage.UPDATE_USER_FAILED: "Profile update failed",
    ServiceMessage.UPDATE_INFO_SUCCESS: "Profile updated",
    ServiceMessage.SYSTEM_EXCEPTION: "Internal error, please try again later",
}


@dataclass(frozen=True)
class Result(Generic[T]):
    """Status, outcome code and operation-specific payload."""

    status: Status
    message: ServiceMessage
    payload: T

    @classmethod
    def success(cls, message: ServiceMessage, payload: T) -> "Result[T]":
        return cls(Status.SUCCESS, message, payload)

    @classmethod
    def error(cls, message: ServiceMessage, payload: T) -> "Result[T]":
        return cls(Status.ERROR, message, payload)

    @property
    def ok(self) -> bool:
        return self.status is Status.SUCCESS
