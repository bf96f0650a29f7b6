"""
Interactive Menu Front End

Text menu over AccountService. The menu keeps track of the account it
created most recently and validates all user input before calling the
service.
"""

from decimal import Decimal
from typing import Callable, Optional

from .currency import Money, Currency
from .exceptions import InvalidInputError
from .results import ServiceResult
from .service import AccountService
from .validation import parse_amount, parse_currency


class NoAccountSelected(Exception):
    """Raised when an action needs an account before one was created"""


class WalletMenu:
    """Interactive wallet menu"""

    OPTIONS = [
        ("1", "Create account"),
        ("2", "Show balance"),
        ("3", "Deposit"),
        ("4", "Withdraw"),
        ("5", "Convert balance USD/CLP"),
        ("6", "List transactions"),
        ("0", "Exit"),
    ]

    def __init__(
        self,
        service: AccountService,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print
    ):
        self.service = service
        self._input = input_fn
        self._output = output_fn
        self.current_account_id: Optional[str] = None
        self._actions = {
            1: self.create_account,
            2: self.show_balance,
            3: self.deposit,
            4: self.withdraw,
            5: self.convert,
            6: self.list_transactions,
        }

    def start(self) -> None:
        """Run the menu loop until the user picks 0 or input ends"""
        while True:
            self.show_menu()
            try:
                option = self.read_int("Option: ")
            except EOFError:
                break

            if option == 0:
                self._output("Goodbye!")
                break

            action = self._actions.get(option)
            if action is None:
                self._output("Invalid option.")
                continue

            try:
                action()
            except NoAccountSelected as e:
                self._output(f"! {e}")
            except EOFError:
                break

    def show_menu(self) -> None:
        self._output("\n=== ALKE WALLET ===")
        self._output(f"Account: {self.current_account_id or '(none)'}")
        for key, label in self.OPTIONS:
            self._output(f"{key}) {label}")

    def create_account(self) -> None:
        owner_name = self._input("Name: ")
        currency = self.read_currency("Initial currency (USD/CLP): ")
        account = self._unwrap(self.service.create_account(owner_name, currency))
        if account is not None:
            self.current_account_id = account.id
            self._output(f"Account created: {account.to_string()}")

    def show_balance(self) -> None:
        balance = self._unwrap(self.service.get_balance(self.require_account()))
        if balance is not None:
            self._output(f"Balance: {balance}")

    def deposit(self) -> None:
        account_id = self.require_account()
        currency = self.read_currency("Deposit currency (USD/CLP): ")
        amount = self.read_amount("Amount: ")
        account = self._unwrap(self.service.deposit(account_id, Money(amount, currency)))
        if account is not None:
            self._output(f"New balance: {account.balance}")

    def withdraw(self) -> None:
        account_id = self.require_account()
        amount = self.read_amount("Amount: ")
        account = self._unwrap(self.service.withdraw(account_id, amount))
        if account is not None:
            self._output(f"New balance: {account.balance}")

    def convert(self) -> None:
        account_id = self.require_account()
        target = self.read_currency("Convert to (USD/CLP): ")
        account = self._unwrap(self.service.convert_all(account_id, target))
        if account is not None:
            self._output(f"New balance: {account.balance}")

    def list_transactions(self) -> None:
        transactions = self._unwrap(self.service.get_transactions(self.require_account()))
        if transactions is None:
            return
        if not transactions:
            self._output("No transactions.")
        for transaction in transactions:
            self._output(transaction.to_string())

    def require_account(self) -> str:
        if self.current_account_id is None:
            raise NoAccountSelected("Create an account first.")
        return self.current_account_id

    def read_int(self, prompt: str) -> int:
        while True:
            try:
                return int(self._input(prompt).strip())
            except ValueError:
                self._output("Invalid number.")

    def read_amount(self, prompt: str) -> Decimal:
        while True:
            try:
                return parse_amount(self._input(prompt))
            except InvalidInputError:
                self._output("Invalid amount.")

    def read_currency(self, prompt: str) -> Currency:
        while True:
            try:
                return parse_currency(self._input(prompt))
            except InvalidInputError:
                self._output("Only USD or CLP.")

    def _unwrap(self, result: ServiceResult):
        if not result.ok:
            self._output(f"! {result.error.message}")
            return None
        return result.value
