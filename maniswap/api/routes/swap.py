"""
Maniswap API Route
Stateless swap quote: caller supplies reserves, gets amount out and new reserves
"""

import logging

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError

from maniswap.config import settings
from maniswap.domain.schemas.swap import SwapRequest, SwapResponse
from maniswap.domain.services.swap_engine import (
    InvalidInputToken,
    SwapEngine,
    SwapValidationError,
)

logger = logging.getLogger(__name__)

router = APIRouter()

INVALID_BODY = "Invalid request body"
INVALID_TOKEN = "Invalid input token"


def get_swap_engine() -> SwapEngine:
    return SwapEngine(
        formula=settings.SWAP_FORMULA,
        strict=settings.STRICT_VALIDATION,
    )


@router.post("/maniswap")
async def maniswap(request: Request, engine: SwapEngine = Depends(get_swap_engine)):
    """
    Price a swap against the supplied reserves

    Body is parsed by hand so malformed input yields a plain-text 400
    rather than FastAPI's 422 JSON.
    """
    body = await request.body()
    try:
        swap_request = SwapRequest.model_validate_json(body)
    except ValidationError as e:
        logger.debug(f"Rejected swap body: {e.error_count()} validation error(s)")
        return PlainTextResponse(INVALID_BODY, status_code=400)

    pool, swap_input = swap_request.to_domain()

    try:
        result = engine.compute_swap(pool, swap_input)
    except InvalidInputToken as e:
        logger.info(f"❌ {e}")
        return PlainTextResponse(INVALID_TOKEN, status_code=400)
    except SwapValidationError as e:
        logger.info(f"❌ Strict validation failed: {e}")
        return PlainTextResponse(str(e), status_code=400)

    response = SwapResponse.from_result(result)
    return Response(
        content=response.model_dump_json(),
        media_type="application/json",
    )
