"""
Domain Models - Entities
Pure value objects for a single swap; nothing here is persisted
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class TradeDirection(str, Enum):
    """Which side of the pool the trader is selling"""
    A_TO_B = "A_TO_B"
    B_TO_A = "B_TO_A"


class SwapFormula(str, Enum):
    """Arithmetic used to price a swap"""
    LITERAL = "literal"
    INVARIANT = "invariant"


@dataclass(frozen=True)
class PoolState:
    """Two-token pool reserves as supplied by the caller"""
    token_a: str
    reserve_a: float
    token_b: str
    reserve_b: float

    def reserves_for(self, direction: TradeDirection) -> Tuple[float, float]:
        """(reserve_in, reserve_out) for the given trade direction"""
        if direction == TradeDirection.A_TO_B:
            return self.reserve_a, self.reserve_b
        return self.reserve_b, self.reserve_a


@dataclass(frozen=True)
class SwapInput:
    """Token being sold and how much of it"""
    input_token: str
    amount_in: float


@dataclass(frozen=True)
class SwapResult:
    """Outcome of a swap: amount delivered plus the post-trade reserves"""
    amount_out: float
    new_reserve_a: float
    new_reserve_b: float
    direction: TradeDirection


@dataclass(frozen=True)
class Outcome:
    """One side of a binary prediction market"""
    id: int
    name: str
    tokens: float


@dataclass(frozen=True)
class TradeValidationResult:
    """Liquidity check verdict"""
    is_valid: bool
    error: Optional[str] = None


@dataclass(frozen=True)
class TradePreview:
    """What a buy would deliver, priced before it is placed"""
    shares_received: float
    avg_price: float
    price_impact: float
    new_odds: float
    expected_profit: float
    is_valid: bool
    error: Optional[str] = None

    @staticmethod
    def rejected(error: str) -> "TradePreview":
        return TradePreview(
            shares_received=0.0,
            avg_price=0.0,
            price_impact=0.0,
            new_odds=0.0,
            expected_profit=0.0,
            is_valid=False,
            error=error,
        )
