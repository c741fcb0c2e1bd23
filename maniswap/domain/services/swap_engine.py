"""
SWAP ENGINE
Price a two-token Maniswap trade from caller-supplied reserves

RESPONSIBILITIES:
- Route the trade to the "sell A" or "sell B" branch
- Apply the weighted geometric invariant y^p * n^(1-p) = k (p = 0.5)
- Report the amount delivered and both post-trade reserves

RULES (LOCKED):
❌ No persisted state between calls
❌ No fees, no slippage limits, no minimum output
✅ Literal formula by default (reproduces the deployed pricing exactly)
✅ IEEE-754 semantics: degenerate inputs give NaN/inf, never raise
✅ Strict validation only when explicitly enabled
"""

import logging
import math

import numpy as np

from maniswap.domain.models import (
    PoolState,
    SwapFormula,
    SwapInput,
    SwapResult,
    TradeDirection,
)

logger = logging.getLogger(__name__)

# Invariant weight, not configurable
WEIGHT = 0.5


class InvalidInputToken(ValueError):
    """Input token matches neither side of the pool"""


class SwapValidationError(ValueError):
    """Raised in strict mode when reserves, amounts or the result are out of bounds"""


def maniswap_swap(reserve_in: float, reserve_out: float, amount_in: float) -> float:
    """
    Maniswap formula as deployed: y^p * n^(1-p) = k

    k is taken at the post-trade input balance n, so n^(1-p) cancels and
    the result is reserve_out - reserve_out^p regardless of amount_in.

    Args:
        reserve_in: Reserve of the token being sold (before the trade)
        reserve_out: Reserve of the token being bought (before the trade)
        amount_in: Amount being sold

    Returns:
        Amount of the output token delivered to the trader
    """
    p = np.float64(WEIGHT)
    with np.errstate(all="ignore"):
        y = np.float64(reserve_out)
        n = np.float64(reserve_in) + np.float64(amount_in)
        k = np.power(y, p) * np.power(n, 1.0 - p)
        new_y = k / np.power(n, 1.0 - p)
        return float(y - new_y)


def invariant_swap(reserve_in: float, reserve_out: float, amount_in: float) -> float:
    """
    Re-derived invariant: k from the pre-trade reserves, solved for new y

    new_y = (k / n^(1-p))^(1/p); at p = 0.5 this is the constant product x*y/n.
    """
    p = np.float64(WEIGHT)
    with np.errstate(all="ignore"):
        x = np.float64(reserve_in)
        y = np.float64(reserve_out)
        n = x + np.float64(amount_in)
        k = np.power(y, p) * np.power(x, 1.0 - p)
        new_y = np.power(k / np.power(n, 1.0 - p), 1.0 / p)
        return float(y - new_y)


_FORMULAS = {
    SwapFormula.LITERAL: maniswap_swap,
    SwapFormula.INVARIANT: invariant_swap,
}


class SwapEngine:
    """
    Swap Engine
    Stateless; one instance can serve any number of concurrent requests
    """

    def __init__(
        self,
        formula: SwapFormula = SwapFormula.LITERAL,
        strict: bool = False
    ):
        """
        Initialize swap engine

        Args:
            formula: Pricing arithmetic (default: literal Maniswap formula)
            strict: Reject negative/non-finite inputs and impossible outputs
        """
        self.formula = SwapFormula(formula)
        self.strict = strict
        self._swap = _FORMULAS[self.formula]

    def compute_swap(self, pool: PoolState, swap_input: SwapInput) -> SwapResult:
        """
        Execute a swap against the supplied pool state

        Args:
            pool: Current reserves of both tokens
            swap_input: Token sold and amount

        Returns:
            SwapResult with amount out and post-trade reserves

        Raises:
            InvalidInputToken: input token is neither token_a nor token_b
            SwapValidationError: strict mode only
        """
        direction = self.resolve_direction(pool, swap_input.input_token)

        if self.strict:
            self._validate_inputs(pool, swap_input)

        reserve_in, reserve_out = pool.reserves_for(direction)
        amount_out = self._swap(reserve_in, reserve_out, swap_input.amount_in)

        if not math.isfinite(amount_out):
            logger.warning(
                f"Non-finite swap output {amount_out} "
                f"(reserve_in={reserve_in}, reserve_out={reserve_out}, amount_in={swap_input.amount_in})"
            )

        if self.strict:
            self._validate_output(amount_out)

        if direction == TradeDirection.A_TO_B:
            return SwapResult(
                amount_out=amount_out,
                new_reserve_a=pool.reserve_a + swap_input.amount_in,
                new_reserve_b=pool.reserve_b - amount_out,
                direction=direction,
            )

        return SwapResult(
            amount_out=amount_out,
            new_reserve_a=pool.reserve_a - amount_out,
            new_reserve_b=pool.reserve_b + swap_input.amount_in,
            direction=direction,
        )

    @staticmethod
    def resolve_direction(pool: PoolState, input_token: str) -> TradeDirection:
        """
        Exact string match, token_a checked first
        """
        if input_token == pool.token_a:
            return TradeDirection.A_TO_B
        if input_token == pool.token_b:
            return TradeDirection.B_TO_A
        raise InvalidInputToken(f"Token {input_token!r} is not in pool {pool.token_a}/{pool.token_b}")

    @staticmethod
    def _validate_inputs(pool: PoolState, swap_input: SwapInput) -> None:
        if pool.token_a == pool.token_b:
            raise SwapValidationError("Pool tokens must differ")

        checks = (
            ("reserve_a", pool.reserve_a),
            ("reserve_b", pool.reserve_b),
            ("amount_in", swap_input.amount_in),
        )
        for name, value in checks:
            if not math.isfinite(value):
                raise SwapValidationError(f"{name} must be finite")
            if value < 0:
                raise SwapValidationError(f"{name} must be non-negative")

    @staticmethod
    def _validate_output(amount_out: float) -> None:
        if not math.isfinite(amount_out):
            raise SwapValidationError("Swap output is not finite")
        if amount_out < 0:
            raise SwapValidationError(f"Swap output {amount_out} is negative")
