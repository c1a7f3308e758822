"""
Core domain models, value objects, errors and wire contracts.

Nothing here performs I/O or holds shared mutable state.
"""
