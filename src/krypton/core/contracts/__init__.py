"""
Contract Validation Module

Валидация и (де)сериализация JSON контрактов: transport и portfolio.
"""

from .codec import decode_portfolio, decode_transport, encode_portfolio, encode_transport
from .validators import (
    ContractViolation,
    check_contract,
    contract_errors,
    contract_validator,
    load_schema,
    validate_portfolio,
    validate_transport,
)

__all__ = [
    "ContractViolation",
    # Schemas
    "load_schema",
    "contract_validator",
    "contract_errors",
    "check_contract",
    # Transport / portfolio
    "validate_transport",
    "validate_portfolio",
    "decode_transport",
    "encode_transport",
    "decode_portfolio",
    "encode_portfolio",
]
