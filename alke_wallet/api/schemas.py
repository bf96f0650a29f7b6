"""
Pydantic schemas for API requests and responses
"""

from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field

from ..accounts import Account
from ..currency import Money, Currency
from ..transactions import Transaction
from ..validation import parse_amount, parse_currency


class MoneyModel(BaseModel):
    amount: str = Field(..., description="Decimal amount as string")
    currency: str = Field(..., description="Currency code (USD or CLP)")

    def to_money(self) -> Money:
        """Validate as a positive amount in a supported currency"""
        return Money(parse_amount(self.amount), parse_currency(self.currency))

    @classmethod
    def from_money(cls, money: Money) -> 'MoneyModel':
        return cls(amount=str(money.amount), currency=money.currency.code)


class CreateAccountRequest(BaseModel):
    owner_name: str
    currency: str = Field(..., description="Currency code (USD or CLP)")

    def to_currency(self) -> Currency:
        return parse_currency(self.currency)


class DepositRequest(BaseModel):
    amount: MoneyModel


class WithdrawRequest(BaseModel):
    amount: str = Field(..., description="Decimal amount in the account currency")

    def to_decimal(self) -> Decimal:
        return parse_amount(self.amount)


class ConvertRequest(BaseModel):
    target_currency: str = Field(..., description="Currency code (USD or CLP)")

    def to_currency(self) -> Currency:
        return parse_currency(self.target_currency)


class AccountResponse(BaseModel):
    id: str
    owner_name: str
    balance: MoneyModel
    transaction_count: int

    @classmethod
    def from_account(cls, account: Account) -> 'AccountResponse':
        return cls(
            id=account.id,
            owner_name=account.owner_name,
            balance=MoneyModel.from_money(account.balance),
            transaction_count=len(account.transactions)
        )


class TransactionResponse(BaseModel):
    id: str
    timestamp: str
    transaction_type: str
    amount: MoneyModel
    balance_after: MoneyModel
    notes: Optional[str] = None

    @classmethod
    def from_transaction(cls, transaction: Transaction) -> 'TransactionResponse':
        return cls(
            id=transaction.id,
            timestamp=transaction.timestamp.isoformat(),
            transaction_type=transaction.transaction_type.value,
            amount=MoneyModel.from_money(transaction.amount),
            balance_after=MoneyModel.from_money(transaction.balance_after),
            notes=transaction.notes
        )


class TransactionListResponse(BaseModel):
    transactions: List[TransactionResponse]
