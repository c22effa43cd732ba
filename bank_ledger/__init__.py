"""
Bank Ledger

A thread-safe, in-memory bank ledger: accounts with integral balances,
deposit and withdrawal transactions, and append-only transaction history.
"""

__version__ = "1.0.0"

from .transactions import Transaction, TransactionKind, deposit_of, withdrawal_of
from .accounts import Account
from .bank import Bank
from .errors import BankError, AccountNotFoundError, InsufficientBalanceError

__all__ = [
    "Transaction",
    "TransactionKind",
    "deposit_of",
    "withdrawal_of",
    "Account",
    "Bank",
    "BankError",
    "AccountNotFoundError",
    "InsufficientBalanceError",
]
