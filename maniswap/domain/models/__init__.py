"""
Domain Models Package
Export all domain entities
"""

from .entities import (
    # Enums
    SwapFormula,
    TradeDirection,

    # Entities
    Outcome,
    PoolState,
    SwapInput,
    SwapResult,
    TradePreview,
    TradeValidationResult,
)

__all__ = [
    # Enums
    "SwapFormula",
    "TradeDirection",

    # Entities
    "Outcome",
    "PoolState",
    "SwapInput",
    "SwapResult",
    "TradePreview",
    "TradeValidationResult",
]
