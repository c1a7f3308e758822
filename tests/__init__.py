"""
Test suite for krypton

Contains:
- tests/unit/          : Unit tests for value objects, models, updates and contracts
"""
