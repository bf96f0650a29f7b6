"""
Wallet Error Types

Every failure the wallet core can report is a WalletError carrying an
ErrorKind, so front ends can map kinds to messages or status codes.
None of these errors are transient; callers should not retry.
"""

from enum import Enum


class ErrorKind(Enum):
    """Kinds of domain failures"""
    CURRENCY_MISMATCH = "currency_mismatch"
    UNSUPPORTED_CURRENCY_PAIR = "unsupported_currency_pair"
    ACCOUNT_NOT_FOUND = "account_not_found"
    INSUFFICIENT_FUNDS = "insufficient_funds"
    INVALID_INPUT = "invalid_input"


class WalletError(Exception):
    """Base class for wallet domain errors"""

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"kind": self.kind.value, "message": self.message}


class CurrencyMismatchError(WalletError, ValueError):
    """Arithmetic attempted between Money values of different currencies"""
    kind = ErrorKind.CURRENCY_MISMATCH


class UnsupportedCurrencyPairError(WalletError, ValueError):
    """Exchange rate requested for a pair outside the supported set"""
    kind = ErrorKind.UNSUPPORTED_CURRENCY_PAIR


class AccountNotFoundError(WalletError):
    kind = ErrorKind.ACCOUNT_NOT_FOUND

    def __init__(self, account_id: str):
        super().__init__(f"Account {account_id} not found")
        self.account_id = account_id


class InsufficientFundsError(WalletError):
    kind = ErrorKind.INSUFFICIENT_FUNDS


class InvalidInputError(WalletError, ValueError):
    """Raised by front ends when user input fails validation"""
    kind = ErrorKind.INVALID_INPUT
