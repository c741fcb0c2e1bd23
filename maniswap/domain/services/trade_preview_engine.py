"""
TRADE PREVIEW ENGINE
Price binary prediction-market trades before they are placed

RESPONSIBILITIES:
- Check a buy against available tokens and minimum pool liquidity
- Preview shares, average price, odds shift and profit for a buy
- Quote sell proceeds at current odds
- Find the largest buy the pool can absorb

RULES (LOCKED):
✅ Shares priced at current odds (fixed-price market maker)
✅ Pool balances move along x*y = k (cpmm_update)
✅ Exactly two outcomes, otherwise rejected
"""

import logging
import math
from typing import List, Optional, Tuple

from maniswap.domain.models import Outcome, TradePreview, TradeValidationResult
from maniswap.domain.services.market_maker_engine import cpmm_update, fixed_price_market_maker

logger = logging.getLogger(__name__)


class TradePreviewEngine:
    """
    Trade Preview Engine
    Pure functions over caller-supplied outcome balances
    """

    def __init__(
        self,
        min_liquidity: float = 1.0,
        max_search_iterations: int = 50,
        search_tolerance: float = 0.01
    ):
        """
        Initialize trade preview engine

        Args:
            min_liquidity: Tokens each outcome must keep after a buy
            max_search_iterations: Binary search steps for the max purchase
            search_tolerance: Stop searching once the bracket is this narrow
        """
        self.min_liquidity = min_liquidity
        self.max_search_iterations = max_search_iterations
        self.search_tolerance = search_tolerance

    @staticmethod
    def _split_outcomes(
        outcomes: List[Outcome],
        selected_outcome_id: int
    ) -> Tuple[Optional[Outcome], Optional[Outcome]]:
        selected = next((o for o in outcomes if o.id == selected_outcome_id), None)
        other = next((o for o in outcomes if o.id != selected_outcome_id), None)
        return selected, other

    def check_market_liquidity(
        self,
        outcomes: List[Outcome],
        selected_outcome_id: int,
        trade_amount: float
    ) -> TradeValidationResult:
        """
        Check that a buy fits the available tokens and leaves enough liquidity

        Args:
            outcomes: Both market outcomes with current token balances
            selected_outcome_id: Outcome being bought
            trade_amount: Amount being spent

        Returns:
            TradeValidationResult (error set when invalid)
        """
        if len(outcomes) != 2:
            return TradeValidationResult(False, "Market must have exactly 2 outcomes for binary trading")

        selected, other = self._split_outcomes(outcomes, selected_outcome_id)
        if selected is None or other is None:
            return TradeValidationResult(False, "Could not find selected outcome in market")

        try:
            shares_received = fixed_price_market_maker(selected.tokens, other.tokens, trade_amount)

            if shares_received > selected.tokens:
                return TradeValidationResult(
                    False,
                    f"Not enough tokens available. You're trying to purchase {shares_received:.2f} shares, "
                    f"but only {selected.tokens:.2f} tokens are available."
                )

            new_selected, new_other = cpmm_update(selected.tokens, other.tokens, trade_amount)
        except ZeroDivisionError:
            logger.warning(f"Trade calculation failed for outcome {selected_outcome_id}: empty pool")
            return TradeValidationResult(False, "Trade calculation failed")

        if new_selected < 0 or new_other < 0:
            return TradeValidationResult(False, "Trade too large - would drain market liquidity")

        if new_selected < self.min_liquidity or new_other < self.min_liquidity:
            return TradeValidationResult(False, "Trade would leave insufficient market liquidity")

        return TradeValidationResult(True)

    def calculate_buy_trade_preview(
        self,
        outcomes: List[Outcome],
        selected_outcome_id: int,
        trade_amount: float
    ) -> TradePreview:
        """
        Preview a buy: shares, average price, price impact (%), new odds, profit if it wins

        Args:
            outcomes: Both market outcomes with current token balances
            selected_outcome_id: Outcome being bought
            trade_amount: Amount being spent

        Returns:
            TradePreview (is_valid False with error when the trade is rejected)
        """
        if len(outcomes) != 2 or trade_amount <= 0:
            return TradePreview.rejected("Invalid trade parameters")

        selected, other = self._split_outcomes(outcomes, selected_outcome_id)
        if selected is None or other is None:
            return TradePreview.rejected("Could not find outcomes")

        liquidity = self.check_market_liquidity(outcomes, selected_outcome_id, trade_amount)
        if not liquidity.is_valid:
            return TradePreview.rejected(liquidity.error or "Liquidity check failed")

        current_odds = selected.tokens / (selected.tokens + other.tokens)
        shares_received = fixed_price_market_maker(selected.tokens, other.tokens, trade_amount)
        new_selected, new_other = cpmm_update(selected.tokens, other.tokens, trade_amount)

        new_odds = new_selected / (new_selected + new_other)

        return TradePreview(
            shares_received=shares_received,
            avg_price=trade_amount / shares_received,
            price_impact=abs(new_odds - current_odds) / current_odds * 100,
            new_odds=new_odds,
            expected_profit=shares_received - trade_amount,
            is_valid=True,
        )

    @staticmethod
    def calculate_sell_amount(
        outcomes: List[Outcome],
        selected_outcome_id: int,
        shares_to_sell: float
    ) -> float:
        """Proceeds of selling shares at current odds; 0 for a non-binary or unknown outcome."""
        if len(outcomes) != 2:
            return 0.0

        selected = next((o for o in outcomes if o.id == selected_outcome_id), None)
        if selected is None:
            return 0.0

        total_tokens = sum(o.tokens for o in outcomes)
        if total_tokens == 0:
            return 0.0
        return shares_to_sell * (selected.tokens / total_tokens)

    def get_max_purchase_amount(
        self,
        outcomes: List[Outcome],
        selected_outcome_id: int
    ) -> float:
        """
        Largest buy that passes the token and liquidity limits

        Binary search between 0 and (selected tokens x current odds),
        floored to cents.

        Returns:
            Maximum trade amount (0 when nothing can be bought)
        """
        if len(outcomes) != 2:
            return 0.0

        selected, other = self._split_outcomes(outcomes, selected_outcome_id)
        if selected is None or other is None:
            return 0.0

        total_tokens = selected.tokens + other.tokens
        if total_tokens == 0:
            return 0.0
        current_odds = selected.tokens / total_tokens

        low = 0.0
        high = selected.tokens * current_odds
        safe_max = 0.0

        for _ in range(self.max_search_iterations):
            mid = (low + high) / 2

            if self._is_affordable(selected, other, mid):
                safe_max = mid
                low = mid
            else:
                high = mid

            if high - low < self.search_tolerance:
                break

        return math.floor(safe_max * 100) / 100

    def _is_affordable(self, selected: Outcome, other: Outcome, amount: float) -> bool:
        try:
            shares_received = fixed_price_market_maker(selected.tokens, other.tokens, amount)
            if shares_received > selected.tokens:
                return False
            new_selected, new_other = cpmm_update(selected.tokens, other.tokens, amount)
        except ZeroDivisionError:
            return False
        return new_selected >= self.min_liquidity and new_other >= self.min_liquidity
