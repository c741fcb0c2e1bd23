from pydantic import BaseModel, ConfigDict
from typing import Tuple

from maniswap.domain.models import PoolState, SwapInput, SwapResult


class SwapRequest(BaseModel):
    """Swap request body. Strict: numbers must be JSON numbers, tokens JSON strings."""
    model_config = ConfigDict(strict=True, allow_inf_nan=False)

    token_a: str
    reserve_a: float
    token_b: str
    reserve_b: float
    input_token: str
    amount_in: float

    def to_domain(self) -> Tuple[PoolState, SwapInput]:
        pool = PoolState(
            token_a=self.token_a,
            reserve_a=self.reserve_a,
            token_b=self.token_b,
            reserve_b=self.reserve_b,
        )
        return pool, SwapInput(input_token=self.input_token, amount_in=self.amount_in)


class SwapResponse(BaseModel):
    """Swap response body. NaN/inf serialize as null."""
    amount_out: float
    new_reserve_a: float
    new_reserve_b: float

    @classmethod
    def from_result(cls, result: SwapResult) -> "SwapResponse":
        return cls(
            amount_out=result.amount_out,
            new_reserve_a=result.new_reserve_a,
            new_reserve_b=result.new_reserve_b,
        )
