"""
Account Storage Module

Provides the abstract account store and its in-memory implementation.
Stores hand out snapshots, so a caller never holds a reference to the
stored account itself.
"""

from abc import ABC, abstractmethod
from typing import Dict, Optional
import threading

from .accounts import Account


class AccountStore(ABC):
    """Abstract interface for account stores"""

    @abstractmethod
    def save(self, account: Account) -> Account:
        """Insert or replace an account by id and return the stored state"""
        pass

    @abstractmethod
    def find_by_id(self, account_id: str) -> Optional[Account]:
        """Load an account, or None if no account has this id"""
        pass

    @abstractmethod
    def exists(self, account_id: str) -> bool:
        """Check if an account exists"""
        pass

    @abstractmethod
    def count(self) -> int:
        """Count stored accounts"""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove all accounts"""
        pass


class InMemoryAccountStore(AccountStore):
    """In-memory account store, lives for the process lifetime"""

    def __init__(self):
        self._accounts: Dict[str, Account] = {}
        self._lock = threading.RLock()

    def save(self, account: Account) -> Account:
        with self._lock:
            # Copy to prevent external mutation
            stored = account.snapshot()
            self._accounts[stored.id] = stored
            return stored.snapshot()

    def find_by_id(self, account_id: str) -> Optional[Account]:
        with self._lock:
            account = self._accounts.get(account_id)
            if account:
                return account.snapshot()
            return None

    def exists(self, account_id: str) -> bool:
        with self._lock:
            return account_id in self._accounts

    def count(self) -> int:
        with self._lock:
            return len(self._accounts)

    def clear(self) -> None:
        with self._lock:
            self._accounts = {}
