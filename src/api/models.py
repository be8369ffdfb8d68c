"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
Field formats are checked by the domain validators, not here, so every
rejection carries a ServiceMessage code.
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

from src.domain.ports import Account
from src.domain.results import Result, ServiceMessage, Status

PayloadT = TypeVar("PayloadT")


class RegisterRequest(BaseModel):
    """Request model for account registration."""

    email: str
    password: str
    handle: str | None = None
    display_name: str | None = None

    def to_account(self) -> Account:
        return Account(
            email=self.email,
            password=self.password,
            handle=self.handle,
            display_name=self.display_name,
        )


class LoginRequest(BaseModel):
    """Request model for credential verification."""

    email: str
    password: str | None = None

    def to_account(self) -> Account:
        return Account(email=self.email, password=self.password)


class ProfileUpdateRequest(BaseModel):
    """Request model for profile updates. Credentials are not accepted."""

    display_name: str | None = None
    phone_number: str | None = None
    gender: str | None = None
    signature: str | None = None
    avatar: str | None = None
    location: str | None = None

    def to_account(self, account_id: int) -> Account:
        return Account(id=account_id, **self.model_dump())


class AccountResponse(BaseModel):
    """Public view of an account. Never includes the password."""

    id: int | None = None
    email: str | None = None
    handle: str | None = None
    display_name: str | None = None
    phone_number: str | None = None
    gender: str | None = None
    signature: str | None = None
    avatar: str | None = None
    location: str | None = None

    @classmethod
    def from_account(cls, account: Account) -> "AccountResponse":
        return cls(
            id=account.id,
            email=account.email,
            handle=account.handle,
            display_name=account.display_name,
            phone_number=account.phone_number,
            gender=account.gender,
            signature=account.signature,
            avatar=account.avatar,
            location=account.location,
        )


class ResultResponse(BaseModel, Generic[PayloadT]):
    """Result envelope as returned over HTTP."""

    status: Status
    message: ServiceMessage
    detail: str = Field(..., description="Human-readable explanation of the message code")
    payload: PayloadT | None = None

    @classmethod
    def from_result(cls, result: Result, payload: PayloadT | None) -> "ResultResponse[PayloadT]":
        return cls(
            status=result.status,
            message=result.message,
            detail=result.message.text,
            payload=payload,
        )
