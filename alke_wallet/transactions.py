"""
Transaction Records Module

A Transaction is the immutable ledger entry for one balance-affecting
event. It is created once per mutating operation, appended to its
account's log and never modified afterwards.
"""

from datetime import datetime
from dataclasses import dataclass
from typing import Any, Dict, Optional
from enum import Enum

from .currency import Money


class TransactionType(Enum):
    """Types of wallet transactions"""
    DEPOSIT = "deposit"
    WITHDRAW = "withdraw"
    CONVERT = "convert"    # Whole-balance currency conversion


@dataclass(frozen=True)
class Transaction:
    """
    Ledger entry

    amount is the delta applied to the balance, or the post-conversion
    total for CONVERT. balance_after is the account balance immediately
    after this entry was applied.
    """
    id: str
    timestamp: datetime
    transaction_type: TransactionType
    amount: Money
    balance_after: Money
    notes: Optional[str] = None

    def to_string(self) -> str:
        line = (
            f"[{self.timestamp.isoformat()}] {self.transaction_type.name} "
            f"{self.amount} -> balance: {self.balance_after}"
        )
        if self.notes:
            line += f" ({self.notes})"
        return line

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "timestamp": self.timestamp.isoformat(),
            "transaction_type": self.transaction_type.value,
            "amount": str(self.amount.amount),
            "currency": self.amount.currency.code,
            "balance_after": str(self.balance_after.amount),
            "balance_currency": self.balance_after.currency.code,
            "notes": self.notes,
        }
