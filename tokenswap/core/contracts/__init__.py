"""
Contract Validation Module

Модуль для валидации JSON контрактов tokenswap.
"""

from .validators import (
    ContractValidator,
    SchemaLoader,
    SwapCalculationValidator,
    TokenRegistryValidator,
    validate_swap_calculation,
    validate_token_registry,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "TokenRegistryValidator",
    "SwapCalculationValidator",
    # Functions
    "validate_token_registry",
    "validate_swap_calculation",
]
