"""
Core types and pure functions for the wallet.

This module provides the foundational pieces the Wallet is built from:
1. Protocols: WalletView for read-only wallet access
2. Exceptions: WalletError and domain-specific error types
3. Constants: balance bounds
4. Validation: pure functions that check an operation before it is applied

All functions in this module are pure and operate on read-only views.
No function can mutate a balance directly.
"""

from __future__ import annotations
from typing import Protocol, runtime_checkable


# ============================================================================
# CONSTANTS
# ============================================================================

# Balance of a freshly created wallet.
INITIAL_BALANCE = 0

# Lowest balance a wallet may hold. The no-overdraft invariant.
MIN_BALANCE = 0


# ============================================================================
# PROTOCOLS
# ============================================================================

@runtime_checkable
class WalletView(Protocol):
    """
    Read-only interface to wallet state.

    Functions accepting a WalletView parameter declare their read-only intent.
    The Wallet class implements this protocol but also provides mutation
    methods. For testing, FakeView provides a truly immutable implementation.
    """

    name: str

    @property
    def balance(self) -> int:
        """Return the current balance."""
        ...


# ============================================================================
# EXCEPTIONS
# ============================================================================

class WalletError(Exception):
    """Base exception for all wallet-related errors."""
    pass


class NotEnoughFundsError(WalletError):
    """
    Raised when an operation would take a wallet balance below zero.

    Attributes:
        amount: The amount of the rejected operation.
        balance: The wallet balance when the operation was rejected.
    """

    def __init__(self, message: str, amount: int, balance: int):
        super().__init__(message)
        self.amount = amount
        self.balance = balance


class InvalidAmountError(WalletError):
    """
    Raised in strict mode when a deposit or withdrawal amount is not positive.

    Attributes:
        amount: The rejected amount.
    """

    def __init__(self, message: str, amount: int):
        super().__init__(message)
        self.amount = amount


# ============================================================================
# VALIDATION
# ============================================================================

def validate_amount(amount: int, strict: bool = False) -> int:
    """
    Check that an amount is usable for a deposit or withdrawal.

    Amounts must be plain integers. Strings, floats and bools are rejected
    rather than coerced.

    Args:
        amount: The amount to check.
        strict: Reject zero and negative amounts.

    Returns:
        The amount, unchanged.

    Raises:
        TypeError: If amount is not an int.
        InvalidAmountError: If strict is set and amount <= 0.
    """
    # bool is a subclass of int
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise TypeError(f"Amount must be int, got {type(amount).__name__}")
    if strict and amount <= 0:
        raise InvalidAmountError(
            f"Amount must be positive, got {amount}",
            amount=amount,
        )
    return amount


def check_withdrawal(view: WalletView, amount: int) -> int:
    """
    Compute the balance a withdrawal would leave behind.

    Args:
        view: Read-only wallet access
        amount: Amount to withdraw

    Returns:
        The proposed new balance.

    Raises:
        NotEnoughFundsError: If amount is greater than the current balance.
    """
    current = view.balance
    if amount > current:
        raise NotEnoughFundsError(
            f"{view.name}: cannot withdraw {amount}, balance is {current}",
            amount=amount,
            balance=current,
        )
    return current - amount


def check_deposit(view: WalletView, amount: int) -> int:
    """
    Compute the balance a deposit would leave behind.

    Only a negative amount can fail here, and only outside strict mode.

    Raises:
        NotEnoughFundsError: If the proposed balance is below MIN_BALANCE.
    """
    current = view.balance
    proposed = current + amount
    if proposed < MIN_BALANCE:
        raise NotEnoughFundsError(
            f"{view.name}: deposit of {amount} would leave {proposed} < min {MIN_BALANCE}",
            amount=amount,
            balance=current,
        )
    return proposed
