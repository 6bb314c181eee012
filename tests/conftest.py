"""
conftest.py - Shared pytest fixtures for Wallet tests

Provides common fixtures used across unit and conformance tests:
- Empty and funded wallets
- Strict-mode wallets
"""

import pytest

from wallet import Wallet


@pytest.fixture
def wallet() -> Wallet:
    """Fresh wallet with zero balance."""
    return Wallet("test")


@pytest.fixture
def funded_wallet() -> Wallet:
    """Wallet holding 100, funded through deposit()."""
    w = Wallet("funded")
    w.deposit(100)
    return w


@pytest.fixture
def strict_wallet() -> Wallet:
    """Strict-mode wallet holding 100."""
    w = Wallet("strict", strict=True)
    w.deposit(100)
    return w
