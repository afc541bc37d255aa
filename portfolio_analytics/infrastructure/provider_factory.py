"""
Price provider factory (config-driven).

The provider is chosen once at startup and injected into the services.
"""
import logging

from portfolio_analytics.config import MarketDataConfig, market_data_config
from portfolio_analytics.domain.errors import PriceProviderError
from portfolio_analytics.domain.interfaces import PriceSeriesProvider
from portfolio_analytics.infrastructure.mock_provider import MockPriceProvider
from portfolio_analytics.infrastructure.yahoo_client import YahooPriceProvider

logger = logging.getLogger(__name__)


def create_price_provider(config: MarketDataConfig = market_data_config) -> PriceSeriesProvider:
    name = (config.DATA_PROVIDER or "").strip().lower()
    if name == "mock":
        provider = MockPriceProvider(seed=config.MOCK_SEED)
    elif name in ("yahoo", "yfinance"):
        provider = YahooPriceProvider(max_workers=config.FETCH_WORKERS)
    else:
        raise PriceProviderError(f"Unknown data provider: {config.DATA_PROVIDER!r}")

    logger.info(f"Using {provider.name} price provider")
    return provider
