"""
Wallet system wiring and FastAPI dependencies
"""

from typing import Optional

from fastapi import HTTPException

from ..config import WalletConfig, get_config
from ..exceptions import ErrorKind
from ..exchange import FixedExchangeRateProvider
from ..results import ServiceResult
from ..service import AccountService
from ..storage import InMemoryAccountStore


class WalletSystem:
    """Store, rate provider and service wired from configuration"""

    def __init__(self, config: Optional[WalletConfig] = None):
        config = config or get_config()
        self.store = InMemoryAccountStore()
        self.rates = FixedExchangeRateProvider(config.usd_to_clp)
        self.service = AccountService(self.store, self.rates)


ERROR_STATUS = {
    ErrorKind.ACCOUNT_NOT_FOUND: 404,
    ErrorKind.INSUFFICIENT_FUNDS: 409,
    ErrorKind.INVALID_INPUT: 422,
    ErrorKind.CURRENCY_MISMATCH: 400,
    ErrorKind.UNSUPPORTED_CURRENCY_PAIR: 400,
}


def unwrap_or_raise(result: ServiceResult):
    """Return the result value or raise the matching HTTPException"""
    if not result.ok:
        raise HTTPException(
            status_code=ERROR_STATUS.get(result.error_kind, 400),
            detail=result.error.to_dict()
        )
    return result.value


# Global wallet system instance, state lives for the process lifetime
wallet_system = WalletSystem()


# Dependency to get the account service
def get_account_service() -> AccountService:
    return wallet_system.service
