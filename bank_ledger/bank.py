"""
Bank Module

Owns every account, issues account numbers and routes deposits,
withdrawals and inquiries to the right account. The bank lock guards the
account index and the number counter; each account guards its own balance.
"""

from typing import Dict, List, Optional
import threading

from .accounts import Account
from .transactions import Transaction, deposit_of, withdrawal_of
from .errors import AccountNotFoundError, InsufficientBalanceError
from .events import EventDispatcher, EventPayload, LedgerEvent
from .config import LedgerConfig, get_config
from .logging_config import get_logger, log_action


class Bank:
    """
    In-memory bank ledger

    Account numbers are "1", "2", ... in creation order and are never reused.
    """

    def __init__(
        self,
        event_dispatcher: Optional[EventDispatcher] = None,
        config: Optional[LedgerConfig] = None
    ):
        self._accounts: Dict[str, Account] = {}
        self._accounts_count = 0
        self._lock = threading.RLock()
        self._event_dispatcher = event_dispatcher
        self.config = config or get_config()
        self.logger = get_logger("bank_ledger.bank")

    def create_account(self) -> str:
        """
        Open a new empty account

        Returns:
            The new account number
        """
        with self._lock:
            account_number = self._generate_account_number()
            self._accounts[account_number] = Account(account_number)

        log_action(
            self.logger, "info", f"Account created: {account_number}",
            action="create_account", resource=f"account:{account_number}"
        )
        self._publish_event(LedgerEvent.ACCOUNT_CREATED, account_number, {})
        return account_number

    def deposit(self, account_number: str, amount: int) -> None:
        """
        Deposit an amount into an account

        Raises:
            AccountNotFoundError: No account has this number
        """
        self._perform_transaction(account_number, deposit_of(amount))

    def withdraw(self, account_number: str, amount: int) -> None:
        """
        Withdraw an amount from an account

        Raises:
            AccountNotFoundError: No account has this number
            InsufficientBalanceError: The amount exceeds the balance
        """
        self._perform_transaction(account_number, withdrawal_of(amount))

    def check_balance(self, account_number: str) -> Optional[int]:
        """Get the balance of an account, or None if it does not exist"""
        account = self._find_account(account_number)
        if account is None:
            return None
        return account.balance

    def get_transactions(self, account_number: str) -> Optional[List[Transaction]]:
        """
        Get a snapshot of an account's transaction history

        Returns:
            Transactions in application order (empty for a new account),
            or None if the account does not exist
        """
        account = self._find_account(account_number)
        if account is None:
            return None
        return account.history()

    def __len__(self) -> int:
        with self._lock:
            return len(self._accounts)

    def __contains__(self, account_number: object) -> bool:
        with self._lock:
            return account_number in self._accounts

    def _generate_account_number(self) -> str:
        # Caller must hold self._lock
        self._accounts_count += 1
        return str(self._accounts_count)

    def _find_account(self, account_number: str) -> Optional[Account]:
        with self._lock:
            return self._accounts.get(account_number)

    def _perform_transaction(self, account_number: str, transaction: Transaction) -> None:
        account = self._find_account(account_number)
        if account is None:
            log_action(
                self.logger, "warning", f"Account not found: {account_number}",
                action=transaction.kind.value, resource=f"account:{account_number}"
            )
            raise AccountNotFoundError(account_number)

        try:
            account.apply(transaction)
        except InsufficientBalanceError as e:
            log_action(
                self.logger, "warning", f"Transaction rejected: {e}",
                action=transaction.kind.value, resource=f"account:{account_number}",
                extra={"balance": e.balance, "requested": e.requested}
            )
            self._publish_event(
                LedgerEvent.TRANSACTION_REJECTED, account_number,
                dict(transaction.to_dict(), reason="insufficient_balance")
            )
            raise

        log_action(
            self.logger, "info", f"Transaction applied: {transaction.kind.value}",
            action=transaction.kind.value, resource=f"account:{account_number}",
            extra=transaction.to_dict()
        )
        self._publish_event(LedgerEvent.TRANSACTION_APPLIED, account_number, transaction.to_dict())

    def _publish_event(self, event_type: LedgerEvent, account_number: str, data: dict) -> None:
        """Publish a ledger event if a dispatcher is attached and events are enabled"""
        if self._event_dispatcher is None or not self.config.enable_events:
            return
        self._event_dispatcher.publish(EventPayload(event_type, account_number, data))
