"""Facade: one wallet interface over accounts, codes, balances and ledgers."""

from __future__ import annotations

import sys


class WalletError(Exception):
    """Raised when a wallet operation is refused."""


class Account:
    """An account identified by name."""

    def __init__(self, name: str) -> None:
        self.name = name

    def check_account(self, account_name: str) -> None:
        """Raise WalletError unless ``account_name`` matches."""
        if self.name != account_name:
            raise WalletError("Account Name is incorrect")
        print("Account Verified")


class SecurityCode:
    """A numeric security code."""

    def __init__(self, code: int) -> None:
        self.code = code

    def check_code(self, incoming_code: int) -> None:
        """Raise WalletError unless ``incoming_code`` matches."""
        if self.code != incoming_code:
            raise WalletError("Security Code is incorrect")
        print("SecurityCode Verified")


class Wallet:
    """Holds a balance."""

    def __init__(self) -> None:
        self.balance = 0

    def credit(self, amount: int) -> None:
        self.balance += amount
        print("Wallet balance added successfully")

    def debit(self, amount: int) -> None:
        """Take ``amount`` off the balance; raise WalletError if it is too low."""
        if self.balance < amount:
            raise WalletError("Balance is not sufficient")
        print("Wallet balance is Sufficient")
        self.balance -= amount


class Notification:
    """Sends wallet notifications and remembers which were sent."""

    def __init__(self) -> None:
        self.sent: list[str] = []

    def send_wallet_credit_notification(self) -> None:
        self.sent.append("credit")
        print("Sending wallet credit notification")

    def send_wallet_debit_notification(self) -> None:
        self.sent.append("debit")
        print("Sending wallet debit notification")


class Ledger:
    def make_entry(self, account_id: str, txn_type: str, amount: int) -> None:
        print(
            f"Make ledger entry for accountId {account_id} "
            f"with txnType {txn_type} for amount {amount}"
        )


class WalletFacade:
    """Single entry point for adding and deducting wallet money."""

    def __init__(self, account_id: str, code: int) -> None:
        print("Starting create account")
        self.account = Account(account_id)
        self.security_code = SecurityCode(code)
        self.wallet = Wallet()
        self.notification = Notification()
        self.ledger = Ledger()
        print("Account created")

    def add_money_to_wallet(self, account_id: str, security_code: int, amount: int) -> None:
        print("Starting add money to wallet")
        self.account.check_account(account_id)
        self.security_code.check_code(security_code)
        self.wallet.credit(amount)
        self.notification.send_wallet_credit_notification()
        self.ledger.make_entry(account_id, "credit", amount)

    def deduct_money_from_wallet(self, account_id: str, security_code: int, amount: int) -> None:
        print("Starting debit money from wallet")
        self.account.check_account(account_id)
        self.security_code.check_code(security_code)
        self.wallet.debit(amount)
        self.notification.send_wallet_debit_notification()
        self.ledger.make_entry(account_id, "credit", amount)


def main(argv: list[str] | None = None) -> None:
    print()
    facade = WalletFacade("abc", 1234)
    print()
    try:
        facade.add_money_to_wallet("abc", 1234, 10)
        print()
        facade.deduct_money_from_wallet("abc", 1234, 5)
    except WalletError as err:
        sys.exit(f"Error: {err}")


if __name__ == "__main__":
    main()