"""
Test suite for immutable-values

Contains:
- tests/unit/          : Unit tests for value types, validation and contracts
"""
