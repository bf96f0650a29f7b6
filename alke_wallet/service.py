"""
Account Service Module

Orchestrates every money-moving operation: load the account from the
store, compute the new balance, append exactly one Transaction and save.
All operations return a ServiceResult. A failed operation leaves the
stored account untouched, since nothing is saved until the new balance
and its transaction have both been built.
"""

from decimal import Decimal, InvalidOperation
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional, Union
import threading
import uuid

from .currency import Money, Currency
from .accounts import Account
from .transactions import Transaction, TransactionType
from .storage import AccountStore
from .exchange import ExchangeRateProvider, convert
from .exceptions import (
    WalletError, AccountNotFoundError, InsufficientFundsError, InvalidInputError
)
from .results import ServiceResult
from .logging_config import get_logger, log_action

CONVERSION_NOTE = "Full balance conversion"


def _new_id() -> str:
    return str(uuid.uuid4())


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _to_decimal(amount: Union[Decimal, str]) -> Decimal:
    try:
        value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    except InvalidOperation:
        raise InvalidInputError(f"Invalid amount: {amount!r}")
    if not value.is_finite():
        raise InvalidInputError(f"Invalid amount: {amount!r}")
    return value


class AccountService:
    """
    Wallet operations over an account store and an exchange rate provider

    Mutating operations on the same account id are serialized with a
    per-account lock; different accounts proceed independently.
    """

    def __init__(
        self,
        store: AccountStore,
        rates: ExchangeRateProvider,
        id_factory: Optional[Callable[[], str]] = None,
        clock: Optional[Callable[[], datetime]] = None
    ):
        self.store = store
        self.rates = rates
        self._id_factory = id_factory or _new_id
        self._clock = clock or _utc_now
        self._locks: Dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()
        self.logger = get_logger("alke_wallet.service")

    def create_account(self, owner_name: str, currency: Currency) -> ServiceResult[Account]:
        """Open a new account with zero balance in the given currency"""
        def operation() -> Account:
            account = Account.open(self._id_factory(), owner_name, currency)
            saved = self.store.save(account)
            log_action(
                self.logger, "info", "Account created",
                action="create_account", resource=f"account:{saved.id}",
                extra={"owner_name": owner_name, "currency": currency.code}
            )
            return saved

        return self._run("create_account", None, operation)

    def get_account(self, account_id: str) -> ServiceResult[Account]:
        return self._run("get_account", account_id, lambda: self._load(account_id))

    def get_balance(self, account_id: str) -> ServiceResult[Money]:
        return self._run("get_balance", account_id, lambda: self._load(account_id).balance)

    def deposit(self, account_id: str, amount: Money) -> ServiceResult[Account]:
        """
        Deposit money, converting it to the account currency if needed

        The DEPOSIT transaction records the converted amount. Positivity of
        the amount is checked by front ends, not here.
        """
        def operation() -> Account:
            with self._account_lock(account_id):
                account = self._load(account_id)
                if amount.currency == account.currency:
                    credited = amount
                else:
                    credited = convert(amount, account.currency, self.rates)
                new_balance = account.balance + credited
                return self._record(account, TransactionType.DEPOSIT, credited, new_balance)

        return self._run("deposit", account_id, operation)

    def withdraw(self, account_id: str, amount: Union[Decimal, str]) -> ServiceResult[Account]:
        """
        Withdraw an amount in the account currency

        Withdrawing exactly the full balance is allowed and leaves zero.
        """
        def operation() -> Account:
            requested = _to_decimal(amount)
            with self._account_lock(account_id):
                account = self._load(account_id)
                debited = Money(requested, account.currency)
                if account.balance.amount < requested:
                    raise InsufficientFundsError(
                        f"Insufficient funds: balance {account.balance}, requested {debited}"
                    )
                new_balance = account.balance - debited
                return self._record(account, TransactionType.WITHDRAW, debited, new_balance)

        return self._run("withdraw", account_id, operation)

    def convert_all(self, account_id: str, target: Currency) -> ServiceResult[Account]:
        """
        Convert the whole balance into the target currency

        Converting to the current currency is a no-op and records nothing.
        """
        def operation() -> Account:
            with self._account_lock(account_id):
                account = self._load(account_id)
                if account.currency == target:
                    return account
                converted = convert(account.balance, target, self.rates)
                return self._record(
                    account, TransactionType.CONVERT, converted, converted, CONVERSION_NOTE
                )

        return self._run("convert_all", account_id, operation)

    def get_transactions(self, account_id: str) -> ServiceResult[List[Transaction]]:
        """Get the full transaction log, oldest first"""
        return self._run(
            "get_transactions", account_id,
            lambda: list(self._load(account_id).transactions)
        )

    def _load(self, account_id: str) -> Account:
        account = self.store.find_by_id(account_id)
        if account is None:
            raise AccountNotFoundError(account_id)
        return account

    def _record(
        self,
        account: Account,
        transaction_type: TransactionType,
        amount: Money,
        balance_after: Money,
        notes: Optional[str] = None
    ) -> Account:
        """Apply one transaction to a loaded account and save it"""
        transaction = Transaction(
            id=self._id_factory(),
            timestamp=self._clock(),
            transaction_type=transaction_type,
            amount=amount,
            balance_after=balance_after,
            notes=notes
        )
        account.apply(transaction)
        saved = self.store.save(account)

        log_action(
            self.logger, "info", f"Transaction recorded: {transaction_type.value}",
            action=transaction_type.value, resource=f"account:{account.id}",
            extra={
                "transaction_id": transaction.id,
                "amount": str(amount),
                "balance_after": str(balance_after)
            }
        )
        return saved

    def _account_lock(self, account_id: str) -> threading.Lock:
        """Get the lock for an existing account; unknown ids get none"""
        with self._locks_guard:
            lock = self._locks.get(account_id)
            if lock is None:
                if not self.store.exists(account_id):
                    raise AccountNotFoundError(account_id)
                lock = threading.Lock()
                self._locks[account_id] = lock
            return lock

    def _run(self, action: str, account_id: Optional[str], operation: Callable) -> ServiceResult:
        try:
            return ServiceResult.success(operation())
        except InvalidOperation:
            # Decimal overflow, e.g. an amount too large to quantize
            return self._fail(action, account_id, InvalidInputError("Amount out of range"))
        except WalletError as e:
            return self._fail(action, account_id, e)

    def _fail(self, action: str, account_id: Optional[str], e: WalletError) -> ServiceResult:
        log_action(
            self.logger, "warning", f"{action} failed: {e.message}",
            action=action,
            resource=f"account:{account_id}" if account_id else None,
            extra={"error_kind": e.kind.value}
        )
        return ServiceResult.failure(e)
