"""FastAPI application - minimal setup with dependency injection."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from portfolio_analytics.config import app_config, market_data_config
from portfolio_analytics.api.dependencies import init_services
from portfolio_analytics.api.routes import analysis, assets, health
from portfolio_analytics.infrastructure.provider_factory import create_price_provider

logging.basicConfig(
    level=app_config.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown."""
    logger.info("Starting application...")

    # Select the price source once and inject it into the services
    provider = create_price_provider(market_data_config)
    init_services(
        provider,
        benchmark_symbol=market_data_config.BENCHMARK_SYMBOL,
        alignment=market_data_config.PRICE_ALIGNMENT,
    )

    logger.info("Application started")
    yield
    logger.info("Shutdown complete")


# Create app
app = FastAPI(
    title="Portfolio Analytics API",
    description="Risk and return analysis of weighted asset portfolios",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=app_config.CORS_ORIGINS.split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routes
app.include_router(health.router)
app.include_router(assets.router)
app.include_router(analysis.router)
