"""
Ledger Error Types

Failures a caller of the bank can observe. Contract violations such as a
negative amount are raised as ValueError/TypeError and are not listed here.
"""

from typing import Optional


class BankError(Exception):
    """Base class for all ledger failures"""

    def __init__(self, message: str, account_number: Optional[str] = None):
        super().__init__(message)
        self.account_number = account_number


class AccountNotFoundError(BankError):
    """The account identifier does not match any known account"""

    def __init__(self, account_number: str):
        super().__init__(f"Account {account_number} not found", account_number)


class InsufficientBalanceError(BankError):
    """A withdrawal exceeds the current balance; the account is left unchanged"""

    def __init__(self, account_number: str, balance: int, requested: int):
        super().__init__(
            f"Insufficient balance: available {balance}, requested {requested}",
            account_number
        )
        self.balance = balance
        self.requested = requested
