#!/usr/bin/env python3
"""
Alke Wallet Entry Point

Starts the interactive menu, or the HTTP API with --api.
"""

import sys

from alke_wallet.config import get_config
from alke_wallet.logging_config import setup_logging


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    config = get_config()

    if "--api" in argv:
        from alke_wallet.api import run_server

        setup_logging(config.log_level, log_format=config.log_format)
        print(f"Alke Wallet API at: http://{config.api_host}:{config.api_port}")
        try:
            run_server(host=config.api_host, port=config.api_port)
        except KeyboardInterrupt:
            print("\nShutting down Alke Wallet...")
        return 0

    from alke_wallet.cli import WalletMenu
    from alke_wallet.exchange import FixedExchangeRateProvider
    from alke_wallet.service import AccountService
    from alke_wallet.storage import InMemoryAccountStore

    setup_logging("ERROR", log_format="text")
    service = AccountService(
        InMemoryAccountStore(),
        FixedExchangeRateProvider(config.usd_to_clp)
    )
    try:
        WalletMenu(service).start()
    except KeyboardInterrupt:
        print("\nGoodbye!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
