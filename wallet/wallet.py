"""
wallet.py - Stateful Money Wallet

The Wallet class holds a single non-negative integer balance.
It is the only module that mutates state, ensuring controlled changes.

Key responsibilities:
    - Implements WalletView protocol for safe read-only access by pure functions
    - Applies deposits and withdrawals atomically (validated, then applied)
    - Enforces the no-overdraft invariant on every operation
"""

from __future__ import annotations
from typing import Optional

from .core import (
    # Constants
    INITIAL_BALANCE,
    # Exceptions
    WalletError,
    # Validation
    validate_amount, check_withdrawal, check_deposit,
)


class Wallet:
    """
    In-memory money wallet that never goes below zero.

    Implements the WalletView protocol, allowing the wallet to be passed to
    pure functions that access only read-only attributes.

    Design Principles:
        - Always validates: every operation is checked before the balance is
          touched. A rejected operation leaves the balance exactly as it was.
        - No currency: the balance is a whole-unit integer.

    Thread Safety:
        Not thread-safe. Each thread should maintain its own Wallet instance.

    Example:
        wallet = Wallet()
        wallet.deposit(100)
        wallet.withdraw(20)
        wallet.balance  # 80
    """

    def __init__(
        self,
        name: str = "wallet",
        strict: bool = False,
        verbose: bool = False
    ):
        """
        Create an empty wallet.

        Args:
            name: Wallet identifier, used in messages
            strict: Reject zero and negative amounts with InvalidAmountError (default: False)
            verbose: Print one line per operation (default: False)
        """
        self.name = name
        self.strict = strict
        self.verbose = verbose
        self._balance: int = INITIAL_BALANCE

    # ========================================================================
    # WalletView PROTOCOL IMPLEMENTATION (read-only)
    # ========================================================================

    @property
    def balance(self) -> int:
        """Current balance."""
        return self._balance

    def can_withdraw(self, amount: int) -> bool:
        """Return True if withdraw(amount) would succeed, False otherwise."""
        try:
            validate_amount(amount, self.strict)
            check_withdrawal(self, amount)
        except (WalletError, TypeError):
            return False
        return True

    # ========================================================================
    # OPERATIONS (Mutating)
    # ========================================================================

    def deposit(self, amount: int) -> None:
        """
        Add amount to the balance.

        Args:
            amount: Amount to deposit

        Raises:
            TypeError: If amount is not an int
            InvalidAmountError: If strict mode is on and amount <= 0
            NotEnoughFundsError: If a negative amount would overdraw the wallet
        """
        try:
            validate_amount(amount, self.strict)
            proposed = check_deposit(self, amount)
        except WalletError as e:
            self._report("✗", f"REJECTED deposit: {e}")
            raise
        self._balance = proposed
        self._report("✓", f"deposit {amount} -> balance {self._balance}")

    def withdraw(self, amount: int) -> None:
        """
        Remove amount from the balance.

        Withdrawing exactly the full balance is allowed and leaves zero.

        Args:
            amount: Amount to withdraw

        Raises:
            TypeError: If amount is not an int
            InvalidAmountError: If strict mode is on and amount <= 0
            NotEnoughFundsError: If amount is greater than the balance
        """
        try:
            validate_amount(amount, self.strict)
            proposed = check_withdrawal(self, amount)
        except WalletError as e:
            self._report("✗", f"REJECTED withdraw: {e}")
            raise
        self._balance = proposed
        self._report("✓", f"withdraw {amount} -> balance {self._balance}")

    def _report(self, icon: str, message: str) -> None:
        if self.verbose:
            print(f"{icon} [{self.name}] {message}")

    # ========================================================================
    # WALLET OPERATIONS
    # ========================================================================

    def clone(self, name: Optional[str] = None) -> Wallet:
        """
        Create an independent copy of this wallet.

        Cloned state includes the balance and configuration (strict and
        verbose).

        Args:
            name: Name for the copy (default: same name)

        Returns:
            A new Wallet instance with identical state
        """
        cloned = Wallet(
            name=name if name is not None else self.name,
            strict=self.strict,
            verbose=self.verbose,
        )
        cloned._balance = self._balance
        return cloned

    def __repr__(self) -> str:
        w = 40
        bar = "─" * w

        def pad(text: str) -> str:
            if len(text) > w:
                return text[:w-3] + "..."
            return text + " " * (w - len(text))

        return "\n".join([
            f"┌{bar}┐",
            f"│{pad(' Wallet: ' + self.name)}│",
            f"├{bar}┤",
            f"│{pad('   balance : ' + str(self._balance))}│",
            f"│{pad('   strict  : ' + str(self.strict))}│",
            f"└{bar}┘",
        ])
