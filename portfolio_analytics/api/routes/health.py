"""Health and data source status endpoints."""
from datetime import datetime
from fastapi import APIRouter, Depends

from portfolio_analytics.api.schemas import HealthResponse, StatusResponse
from portfolio_analytics.api.dependencies import get_analysis_service, get_price_service
from portfolio_analytics.services.analysis_service import PortfolioAnalyzer
from portfolio_analytics.services.price_service import PriceService

router = APIRouter()

STATUS_MESSAGES = {
    "yahoo": "Using Yahoo Finance historical prices",
    "mock": "Using deterministic mock prices",
}


@router.get("/health", response_model=HealthResponse)
async def health_check(
    prices: PriceService = Depends(get_price_service),
) -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now().isoformat(),
        data_source=prices.data_source,
    )


@router.get("/api/v1/status", response_model=StatusResponse)
async def data_status(
    prices: PriceService = Depends(get_price_service),
    analyzer: PortfolioAnalyzer = Depends(get_analysis_service),
) -> StatusResponse:
    """Report which price source backs the analysis."""
    source = prices.data_source
    return StatusResponse(
        data_source=source,
        ready=True,
        benchmark=analyzer.benchmark_symbol,
        alignment=analyzer.alignment,
        message=STATUS_MESSAGES.get(source, f"Using {source} prices"),
    )
