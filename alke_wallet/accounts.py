"""
Account Module

An Account holds the current balance and the append-only log of
transactions that produced it. Only AccountService mutates accounts,
and only through Account.apply().
"""

from dataclasses import dataclass, field
from typing import List

from .currency import Money, Currency
from .transactions import Transaction


@dataclass
class Account:
    """
    Wallet account

    The balance currency is the account currency. A whole-balance
    conversion replaces the balance with Money in the new currency, which
    is the only way the account currency changes.
    """
    id: str
    owner_name: str
    balance: Money
    transactions: List[Transaction] = field(default_factory=list)

    @classmethod
    def open(cls, account_id: str, owner_name: str, currency: Currency) -> 'Account':
        """Create an account with zero balance and an empty log"""
        return cls(id=account_id, owner_name=owner_name, balance=Money.zero(currency))

    @property
    def currency(self) -> Currency:
        return self.balance.currency

    def apply(self, transaction: Transaction) -> None:
        """Set the balance from a transaction and append it to the log"""
        self.balance = transaction.balance_after
        self.transactions.append(transaction)

    def snapshot(self) -> 'Account':
        """Independent copy; transactions are immutable and shared"""
        return Account(
            id=self.id,
            owner_name=self.owner_name,
            balance=self.balance,
            transactions=list(self.transactions)
        )

    def to_string(self) -> str:
        return f"Account{{id={self.id}, owner={self.owner_name}, balance={self.balance}}}"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "owner_name": self.owner_name,
            "currency": self.currency.code,
            "balance": str(self.balance.amount),
            "transaction_count": len(self.transactions),
        }
