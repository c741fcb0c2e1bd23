import pytest

from maniswap.domain.services.market_maker_engine import (
    constant_product_market_maker,
    cpmm_update,
    fixed_price_market_maker,
)


@pytest.mark.unit
@pytest.mark.parametrize(
    "outcome_tokens,other_tokens,expected_shares",
    [
        (50.0, 50.0, 20.0),   # 50% odds
        (20.0, 80.0, 50.0),   # 20% odds
        (25.0, 75.0, 40.0),   # 25% odds
    ],
)
def test_fixed_price_shares_follow_odds(outcome_tokens, other_tokens, expected_shares):
    assert fixed_price_market_maker(outcome_tokens, other_tokens, 10.0) == pytest.approx(expected_shares)


@pytest.mark.unit
def test_cpmm_update_preserves_product():
    new_outcome, new_other = cpmm_update(100.0, 100.0, 25.0)

    assert new_outcome == 125.0
    assert new_other == pytest.approx(80.0)
    assert new_outcome * new_other == pytest.approx(100.0 * 100.0)


class TestConstantProductMarketMaker:
    """Share quotes with minimum-liquidity guards"""

    @pytest.mark.unit
    def test_shares_received(self):
        # 100 * 100 / 125 = 80 left, 20 shares out
        assert constant_product_market_maker(100.0, 100.0, 25.0) == pytest.approx(20.0)

    @pytest.mark.unit
    def test_slippage_vs_fixed_price(self):
        cpmm = constant_product_market_maker(100.0, 100.0, 10.0)
        fixed = fixed_price_market_maker(100.0, 100.0, 10.0)
        assert cpmm < fixed

    @pytest.mark.unit
    @pytest.mark.parametrize("amount", [0.0, -5.0])
    def test_non_positive_amount_rejected(self, amount):
        with pytest.raises(ValueError, match="greater than zero"):
            constant_product_market_maker(100.0, 100.0, amount)

    @pytest.mark.unit
    def test_thin_pool_rejected(self):
        with pytest.raises(ValueError, match="Token pools must be greater than 1.0"):
            constant_product_market_maker(1.0, 100.0, 10.0)

    @pytest.mark.unit
    def test_custom_min_tokens(self):
        with pytest.raises(ValueError, match="greater than 50"):
            constant_product_market_maker(40.0, 100.0, 10.0, min_tokens=50.0)

    @pytest.mark.unit
    def test_liquidity_drain_rejected_with_max_amount(self):
        # 10 * 2 / 3 = 0.6666 left on the other side, below min_tokens=1
        with pytest.raises(ValueError, match="Maximum trade amount: 10.0"):
            constant_product_market_maker(10.0, 2.0, 20.0)
