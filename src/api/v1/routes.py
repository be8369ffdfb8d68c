"""
API v1 routes.

Thin controller over AccountService. Each endpoint runs one service
operation (two for registration) and returns the Result envelope, with
an HTTP status derived from the outcome code.
"""

from fastapi import APIRouter, Depends, Response, status

from src.api.dependencies import get_account_service
from src.api.models import (
    AccountResponse,
    LoginRequest,
    ProfileUpdateRequest,
    RegisterRequest,
    ResultResponse,
)
from src.domain.accounts import AccountService
from src.domain.ports import Account
from src.domain.results import Result, ServiceMessage

router = APIRouter(tags=["v1"])

# Outcome codes that are not plain 400s; every SUCCESS maps to 200
_ERROR_STATUS_CODES = {
    ServiceMessage.EMAIL_ALREADY_USED: status.HTTP_409_CONFLICT,
    ServiceMessage.HANDLE_USED: status.HTTP_409_CONFLICT,
    ServiceMessage.ACCOUNT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ServiceMessage.NO_USER_INFO: status.HTTP_404_NOT_FOUND,
    ServiceMessage.PASSWORD_INCORRECT: status.HTTP_401_UNAUTHORIZED,
    ServiceMessage.UPDATE_USER_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ServiceMessage.SYSTEM_EXCEPTION: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def http_status_for(result: Result) -> int:
    """Map a Result to the HTTP status code of its response."""
    if result.ok:
        return status.HTTP_200_OK
    return _ERROR_STATUS_CODES.get(result.message, status.HTTP_400_BAD_REQUEST)


def _account_envelope(
    result: Result[Account], response: Response
) -> ResultResponse[AccountResponse]:
    response.status_code = http_status_for(result)
    payload = None
    if result.payload is not None:
        payload = AccountResponse.from_account(result.payload)
    return ResultResponse[AccountResponse].from_result(result, payload)


@router.post(
    "/register",
    response_model=ResultResponse[AccountResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Register a new account",
    description="Validate the registration details, then create the account. "
    "The password is stored as a digest and never echoed back.",
)
async def register(
    request_data: RegisterRequest,
    response: Response,
    service: AccountService = Depends(get_account_service),
) -> ResultResponse[AccountResponse]:
    """
    Register a new account.

    - **email**: Login email, must be unused
    - **password**: 6-20 letters, digits or underscores
    - **handle**: Optional; 6-20 letters, digits or underscores, must be unused
    """
    account = request_data.to_account()
    result = service.register_check(account)
    if result.ok and account.handle is not None:
        handle_result = service.check_handle(account.handle)
        if not handle_result.ok:
            result = Result.error(handle_result.message, account)
    if result.ok:
        result = service.insert_account(result.payload)
    envelope = _account_envelope(result, response)
    if result.ok:
        response.status_code = status.HTTP_201_CREATED
    return envelope


@router.post(
    "/login",
    response_model=ResultResponse[AccountResponse],
    summary="Verify login credentials",
)
async def login(
    request_data: LoginRequest,
    response: Response,
    service: AccountService = Depends(get_account_service),
) -> ResultResponse[AccountResponse]:
    """On success the payload carries the authenticated account id."""
    result = service.verify_credentials(request_data.to_account())
    return _account_envelope(result, response)


@router.get(
    "/handles/{handle}",
    response_model=ResultResponse[str],
    summary="Check handle availability",
)
async def check_handle(
    handle: str,
    response: Response,
    service: AccountService = Depends(get_account_service),
) -> ResultResponse[str]:
    result = service.check_handle(handle)
    response.status_code = http_status_for(result)
    return ResultResponse[str].from_result(result, result.payload)


@router.get(
    "/accounts/{account_id}",
    response_model=ResultResponse[AccountResponse],
    summary="Get an account profile",
)
async def get_profile(
    account_id: int,
    response: Response,
    service: AccountService = Depends(get_account_service),
) -> ResultResponse[AccountResponse]:
    return _account_envelope(service.get_profile(account_id), response)


@router.put(
    "/accounts/{account_id}",
    response_model=ResultResponse[AccountResponse],
    summary="Update an account profile",
    description="Only profile fields are updated. Email and password cannot be changed here.",
)
async def update_profile(
    account_id: int,
    request_data: ProfileUpdateRequest,
    response: Response,
    service: AccountService = Depends(get_account_service),
) -> ResultResponse[AccountResponse]:
    result = service.update_profile(request_data.to_account(account_id))
    return _account_envelope(result, response)
