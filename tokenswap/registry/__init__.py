"""
Static token registry.
"""

from tokenswap.registry.tokens import (
    REGISTRY_PATH,
    SUPPORTED_TOKENS,
    TokenNotFoundError,
    get_token,
    get_token_by_symbol,
    get_tokens_by_chain,
    load_registry,
)

__all__ = [
    "REGISTRY_PATH",
    "SUPPORTED_TOKENS",
    "TokenNotFoundError",
    "get_token",
    "get_token_by_symbol",
    "get_tokens_by_chain",
    "load_registry",
]
