from typing import AsyncGenerator

import pytest
from fastapi import FastAPI
from httpx import AsyncClient, ASGITransport

from maniswap.api.routes import swap
from maniswap.domain.models import PoolState


@pytest.fixture()
def pool() -> PoolState:
    return PoolState(token_a="X", reserve_a=100.0, token_b="Y", reserve_b=100.0)


@pytest.fixture()
def app() -> FastAPI:
    app = FastAPI()
    app.include_router(swap.router, prefix="/api", tags=["Maniswap"])
    return app


@pytest.fixture()
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
