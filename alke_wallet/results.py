"""
Service Result Module

AccountService returns a ServiceResult from every operation instead of
raising, so each caller handles the error kind explicitly.
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from .exceptions import ErrorKind, WalletError

T = TypeVar("T")


@dataclass(frozen=True)
class ServiceResult(Generic[T]):
    """Either a value (ok) or a WalletError (failed), never both"""
    value: Optional[T] = None
    error: Optional[WalletError] = None

    @classmethod
    def success(cls, value: T) -> 'ServiceResult[T]':
        return cls(value=value)

    @classmethod
    def failure(cls, error: WalletError) -> 'ServiceResult[T]':
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def error_kind(self) -> Optional[ErrorKind]:
        return self.error.kind if self.error else None

    def unwrap(self) -> T:
        """Return the value, or raise the carried error"""
        if self.error is not None:
            raise self.error
        return self.value

    def __bool__(self) -> bool:
        return self.ok
