"""
Domain models and value objects.

Contains fundamental domain entities like Token, PriceQuote, SwapCalculation.
"""

from tokenswap.core.domain.price import PriceQuote
from tokenswap.core.domain.swap import SwapCalculation, TokenAmount
from tokenswap.core.domain.token import MAX_TOKEN_DECIMALS, Token

__all__ = [
    # Token model
    "MAX_TOKEN_DECIMALS",
    "Token",
    # Price model
    "PriceQuote",
    # Swap models
    "SwapCalculation",
    "TokenAmount",
]
