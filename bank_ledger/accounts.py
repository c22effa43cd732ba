"""
Account Module

An account owns a balance and the append-only history of the transactions
that produced it. Both live in one state record behind one lock, so a
withdrawal's sufficiency check and its effect can never be split by another
caller.
"""

from dataclasses import dataclass, field
from typing import List
import threading

from .transactions import Transaction
from .errors import InsufficientBalanceError
from .logging_config import get_logger


@dataclass
class _AccountState:
    """Balance and history, only ever touched together under the account lock"""
    balance: int = 0
    history: List[Transaction] = field(default_factory=list)


class Account:
    """
    Bank account with an integral, never-negative balance

    Balance always equals the sum of applied deposits minus the sum of
    applied withdrawals in history.
    """

    def __init__(self, account_number: str):
        self._account_number = account_number
        self._state = _AccountState()
        self._lock = threading.Lock()
        self.logger = get_logger("bank_ledger.accounts")

    @property
    def account_number(self) -> str:
        """Immutable identifier issued by the bank"""
        return self._account_number

    @property
    def balance(self) -> int:
        """Current balance in the smallest currency unit"""
        with self._lock:
            return self._state.balance

    def history(self) -> List[Transaction]:
        """
        Get the applied transactions in application order

        Returns:
            A new list; changing it does not affect the account
        """
        with self._lock:
            return list(self._state.history)

    def apply(self, transaction: Transaction) -> None:
        """
        Validate and commit a transaction atomically

        Args:
            transaction: Deposit or withdrawal to apply

        Raises:
            InsufficientBalanceError: Withdrawal exceeds the balance. Balance
                and history are left unchanged.
        """
        if not isinstance(transaction, Transaction):
            raise TypeError(f"Expected a Transaction, got {type(transaction).__name__}")

        with self._lock:
            current_balance = self._state.balance

            if transaction.is_withdrawal and current_balance < transaction.amount:
                raise InsufficientBalanceError(
                    self._account_number, current_balance, transaction.amount
                )

            if transaction.is_deposit:
                self._state.balance = current_balance + transaction.amount
            else:
                self._state.balance = current_balance - transaction.amount
            self._state.history.append(transaction)
            new_balance = self._state.balance

        self.logger.debug(
            f"Applied {transaction.kind.value} of {transaction.amount} to account "
            f"{self._account_number}, balance now {new_balance}"
        )

    def __repr__(self) -> str:
        return f"Account(account_number={self._account_number!r}, balance={self.balance})"
