"""FastAPI dependency injection setup."""
from typing import Optional

from portfolio_analytics.config import market_data_config
from portfolio_analytics.domain.interfaces import PriceSeriesProvider
from portfolio_analytics.services.analysis_service import PortfolioAnalyzer
from portfolio_analytics.services.price_service import PriceService
from portfolio_analytics.services.search_service import AssetSearchService


# Application state (set during lifespan)
_analysis_service: Optional[PortfolioAnalyzer] = None
_price_service: Optional[PriceService] = None
_search_service: Optional[AssetSearchService] = None


def init_services(
    provider: PriceSeriesProvider,
    benchmark_symbol: str = market_data_config.BENCHMARK_SYMBOL,
    alignment: str = market_data_config.PRICE_ALIGNMENT,
) -> None:
    """Initialize all services with the selected price provider."""
    global _analysis_service, _price_service, _search_service

    _analysis_service = PortfolioAnalyzer(
        provider, benchmark_symbol=benchmark_symbol, alignment=alignment
    )
    _price_service = PriceService(provider)
    _search_service = AssetSearchService()


def get_analysis_service() -> PortfolioAnalyzer:
    """Get analysis service dependency."""
    if _analysis_service is None:
        raise RuntimeError("Services not initialized")
    return _analysis_service


def get_price_service() -> PriceService:
    """Get price service dependency."""
    if _price_service is None:
        raise RuntimeError("Services not initialized")
    return _price_service


def get_search_service() -> AssetSearchService:
    """Get search service dependency."""
    if _search_service is None:
        raise RuntimeError("Services not initialized")
    return _search_service
