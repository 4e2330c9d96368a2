"""
Test suite for the BigInteger core

Contains:
- tests/unit/          : Unit tests for individual modules
"""
