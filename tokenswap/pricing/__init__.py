"""
Price quote storage owned by the price-fetching collaborator.
"""

from tokenswap.pricing.price_cache import DEFAULT_PRICE_TTL_SECONDS, PriceCache

__all__ = [
    "DEFAULT_PRICE_TTL_SECONDS",
    "PriceCache",
]
