"""
tokenswap — USD-denominated token conversions on exact fixed-point integers.

Layout:
- tokenswap/core/math       : fixed-point codec and swap arithmetic
- tokenswap/core/domain     : Token, PriceQuote, SwapCalculation models
- tokenswap/core/contracts  : JSON Schema contracts
- tokenswap/registry        : static token registry
- tokenswap/pricing         : price quote cache
- tokenswap/calculator      : swap calculation orchestrator
"""

__version__ = "0.1.0"
