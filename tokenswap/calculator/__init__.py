"""
Swap calculation orchestrator.
"""

from .swap_calculator import SwapCalculator, compute_swap

__all__ = [
    "SwapCalculator",
    "compute_swap",
]
