"""
wallet - Money Wallet

An in-memory balance holder that never goes below zero.

Usage:
    from wallet import Wallet, NotEnoughFundsError

    wallet = Wallet()
    wallet.deposit(100)
    wallet.withdraw(20)
    assert wallet.balance == 80

    try:
        wallet.withdraw(1000)
    except NotEnoughFundsError as e:
        print(f"rejected: {e}")   # balance is still 80

    # Strict mode rejects zero and negative amounts
    strict = Wallet(strict=True)
    strict.deposit(0)             # raises InvalidAmountError
"""

# Core types
from .core import (
    WalletView,
    WalletError,
    NotEnoughFundsError,
    InvalidAmountError,
    validate_amount,
    check_withdrawal,
    check_deposit,
    INITIAL_BALANCE,
    MIN_BALANCE,
)

# Wallet
from .wallet import Wallet

__all__ = [
    'Wallet',
    'WalletView',
    'WalletError',
    'NotEnoughFundsError',
    'InvalidAmountError',
    'validate_amount',
    'check_withdrawal',
    'check_deposit',
    'INITIAL_BALANCE',
    'MIN_BALANCE',
]

__version__ = '1.0.0'
