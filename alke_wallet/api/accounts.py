"""
Account endpoints
"""

from fastapi import APIRouter, HTTPException, Depends, status

from .dependencies import get_account_service, unwrap_or_raise
from .schemas import (
    AccountResponse, ConvertRequest, CreateAccountRequest, DepositRequest,
    MoneyModel, TransactionListResponse, TransactionResponse, WithdrawRequest
)
from ..exceptions import InvalidInputError
from ..service import AccountService


router = APIRouter()


def _invalid(e: InvalidInputError) -> HTTPException:
    return HTTPException(status_code=422, detail=e.to_dict())


@router.post("", status_code=status.HTTP_201_CREATED, response_model=AccountResponse)
def create_account(
    request: CreateAccountRequest,
    service: AccountService = Depends(get_account_service)
):
    """Create a new account"""
    try:
        currency = request.to_currency()
    except InvalidInputError as e:
        raise _invalid(e)

    account = unwrap_or_raise(service.create_account(request.owner_name, currency))
    return AccountResponse.from_account(account)


@router.get("/{account_id}", response_model=AccountResponse)
def get_account(
    account_id: str,
    service: AccountService = Depends(get_account_service)
):
    """Get account summary"""
    account = unwrap_or_raise(service.get_account(account_id))
    return AccountResponse.from_account(account)


@router.get("/{account_id}/balance", response_model=MoneyModel)
def get_balance(
    account_id: str,
    service: AccountService = Depends(get_account_service)
):
    balance = unwrap_or_raise(service.get_balance(account_id))
    return MoneyModel.from_money(balance)


@router.post("/{account_id}/deposit", response_model=AccountResponse)
def deposit(
    account_id: str,
    request: DepositRequest,
    service: AccountService = Depends(get_account_service)
):
    """Deposit money; foreign currency is converted to the account currency"""
    try:
        amount = request.amount.to_money()
    except InvalidInputError as e:
        raise _invalid(e)

    account = unwrap_or_raise(service.deposit(account_id, amount))
    return AccountResponse.from_account(account)


@router.post("/{account_id}/withdraw", response_model=AccountResponse)
def withdraw(
    account_id: str,
    request: WithdrawRequest,
    service: AccountService = Depends(get_account_service)
):
    try:
        amount = request.to_decimal()
    except InvalidInputError as e:
        raise _invalid(e)

    account = unwrap_or_raise(service.withdraw(account_id, amount))
    return AccountResponse.from_account(account)


@router.post("/{account_id}/convert", response_model=AccountResponse)
def convert(
    account_id: str,
    request: ConvertRequest,
    service: AccountService = Depends(get_account_service)
):
    """Convert the whole balance to another currency"""
    try:
        target = request.to_currency()
    except InvalidInputError as e:
        raise _invalid(e)

    account = unwrap_or_raise(service.convert_all(account_id, target))
    return AccountResponse.from_account(account)


@router.get("/{account_id}/transactions", response_model=TransactionListResponse)
def get_transactions(
    account_id: str,
    service: AccountService = Depends(get_account_service)
):
    """Get transaction history for account, oldest first"""
    transactions = unwrap_or_raise(service.get_transactions(account_id))
    return TransactionListResponse(
        transactions=[TransactionResponse.from_transaction(t) for t in transactions]
    )
