"""
Transaction Values

Immutable ledger entries. A transaction is a deposit or a withdrawal of a
non-negative integral amount, expressed in the smallest currency unit.
"""

from dataclasses import dataclass
from typing import Any, Dict
from enum import Enum


class TransactionKind(Enum):
    """Kinds of ledger entries"""
    DEPOSIT = "deposit"        # Increases the balance
    WITHDRAWAL = "withdrawal"  # Decreases the balance, never below zero


@dataclass(frozen=True)
class Transaction:
    """
    One ledger entry
    Never mutated once built; stored verbatim in account history
    """
    amount: int
    kind: TransactionKind

    def __post_init__(self):
        # bool is an int subclass but never a valid amount
        if not isinstance(self.amount, int) or isinstance(self.amount, bool):
            raise ValueError("Transaction amount must be an integer")

        if self.amount < 0:
            raise ValueError("Transaction amount cannot be negative")

        if not isinstance(self.kind, TransactionKind):
            raise ValueError("Transaction kind must be a TransactionKind")

    @property
    def is_deposit(self) -> bool:
        """Check if this entry credits the account"""
        return self.kind == TransactionKind.DEPOSIT

    @property
    def is_withdrawal(self) -> bool:
        """Check if this entry debits the account"""
        return self.kind == TransactionKind.WITHDRAWAL

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for events and log records"""
        return {"amount": self.amount, "kind": self.kind.value}


def deposit_of(amount: int) -> Transaction:
    """Build a deposit of the given amount"""
    return Transaction(amount=amount, kind=TransactionKind.DEPOSIT)


def withdrawal_of(amount: int) -> Transaction:
    """Build a withdrawal of the given amount"""
    return Transaction(amount=amount, kind=TransactionKind.WITHDRAWAL)
