"""
FastAPI Main Application
Maniswap swap pricing service
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from typing import AsyncGenerator
import logging

from maniswap.config import settings
from maniswap.core.logging import setup_logging
from maniswap.api.routes import swap

# Configure logging
setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """
    Application lifespan manager
    Nothing to initialize beyond logging the active swap configuration
    """
    logger.info("="*60)
    logger.info("🚀 Starting Maniswap")
    logger.info("="*60)
    logger.info(f"   🌍 Environment: {settings.APP_ENV}")
    logger.info(f"   🧮 Swap formula: {settings.SWAP_FORMULA.value}")
    logger.info(f"   🛡️  Strict validation: {'Enabled' if settings.STRICT_VALIDATION else 'Disabled'}")
    logger.info(f"   ✅ API Server: http://{settings.API_HOST}:{settings.API_PORT}")
    logger.info("="*60)

    yield

    logger.info("👋 Maniswap shutdown complete")


# Create FastAPI app
app = FastAPI(
    title="Maniswap",
    description="Stateless two-token swap pricing",
    version="1.0.0",
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(swap.router, prefix="/api", tags=["Maniswap"])


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("maniswap.main:app", host=settings.API_HOST, port=settings.API_PORT, reload=settings.DEBUG)
