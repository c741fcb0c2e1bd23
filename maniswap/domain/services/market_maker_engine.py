"""Prediction-market pricing helpers (binary outcome pools)."""
from typing import Tuple


def fixed_price_market_maker(outcome_tokens: float, other_tokens: float, amount: float) -> float:
    """
    Shares bought at the current odds, no price impact.

    $10 at 50% odds -> 20 shares, $10 at 20% odds -> 50 shares.
    """
    probability = outcome_tokens / (outcome_tokens + other_tokens)
    return amount / probability


def cpmm_update(outcome_tokens: float, other_tokens: float, amount: float) -> Tuple[float, float]:
    """Pool balances after `amount` is added to the outcome side, keeping x*y constant."""
    k = outcome_tokens * other_tokens
    new_outcome_tokens = outcome_tokens + amount
    new_other_tokens = k / new_outcome_tokens
    return new_outcome_tokens, new_other_tokens


def constant_product_market_maker(
    outcome_tokens: float,
    other_tokens: float,
    amount: float,
    min_tokens: float = 1.0,
) -> float:
    """
    Shares received under x*y = k, with slippage.

    Both pools must stay above `min_tokens` before and after the trade.
    """
    if amount <= 0:
        raise ValueError("Prediction amount must be greater than zero.")
    if outcome_tokens <= min_tokens or other_tokens <= min_tokens:
        raise ValueError(f"Token pools must be greater than {min_tokens}.")

    new_outcome_tokens, new_other_tokens = cpmm_update(outcome_tokens, other_tokens, amount)

    if new_other_tokens < min_tokens:
        max_amount = outcome_tokens * (other_tokens - min_tokens) / min_tokens
        raise ValueError(f"Trade would reduce liquidity too much. Maximum trade amount: {max_amount}")

    shares = other_tokens - new_other_tokens
    if shares < 0 or new_other_tokens < min_tokens:
        raise ValueError("Invalid trade: would result in negative tokens or shares.")

    return shares
