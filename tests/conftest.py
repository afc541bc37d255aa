"""Pytest configuration and fixtures."""
import pytest
from unittest.mock import MagicMock

from fastapi.testclient import TestClient

from portfolio_analytics.domain.entities import DateRange, PriceSeries, SelectedAsset
from portfolio_analytics.domain.interfaces import PriceSeriesProvider


def make_series(symbol, prices, dates=None, name=None):
    """Build a PriceSeries with consecutive January dates unless dates are given."""
    if dates is None:
        dates = [f"2024-01-{day:02d}" for day in range(1, len(prices) + 1)]
    return PriceSeries(symbol=symbol, name=name or symbol, dates=dates, prices=prices)


def make_asset(symbol, weight, type="stock", name=None):
    return SelectedAsset(symbol=symbol, name=name or f"{symbol} Inc.", type=type, weight=weight)


@pytest.fixture
def date_range():
    return DateRange(start_date="2024-01-01", end_date="2024-01-31")


@pytest.fixture
def mock_provider():
    """Price provider mock returning whatever series a test assigns."""
    provider = MagicMock(spec=PriceSeriesProvider)
    provider.name = "test"
    provider.fetch_price_series = MagicMock(return_value=[])
    return provider


@pytest.fixture
def two_asset_series():
    """A compounds +10%/day, B compounds -10%/day, plus a rising benchmark."""
    return [
        make_series("A", [100.0, 110.0, 121.0]),
        make_series("B", [100.0, 90.0, 81.0]),
        make_series("SPY", [200.0, 210.0, 220.0]),
    ]


@pytest.fixture
def client():
    """Test client wired to the deterministic mock provider."""
    from portfolio_analytics.main import app
    from portfolio_analytics.api import dependencies
    from portfolio_analytics.infrastructure.mock_provider import MockPriceProvider
    from portfolio_analytics.services.analysis_service import PortfolioAnalyzer
    from portfolio_analytics.services.price_service import PriceService
    from portfolio_analytics.services.search_service import AssetSearchService

    provider = MockPriceProvider(seed=7)
    app.dependency_overrides[dependencies.get_analysis_service] = lambda: PortfolioAnalyzer(provider)
    app.dependency_overrides[dependencies.get_price_service] = lambda: PriceService(provider)
    app.dependency_overrides[dependencies.get_search_service] = lambda: AssetSearchService()
    yield TestClient(app)
    app.dependency_overrides.clear()
