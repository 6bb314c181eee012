"""
Conformance Test Suite

This suite defines the NORMATIVE behavior of the Wallet.
Any compliant implementation MUST pass these tests.

The tests are organized by invariant:
1. test_balance_arithmetic.py - Deposits add, withdrawals subtract
2. test_no_overdraft.py - The balance never goes below zero
3. test_atomicity.py - A rejected operation changes nothing

These tests use hypothesis for property-based testing.
"""
