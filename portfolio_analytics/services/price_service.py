"""Historical price data business logic."""
from typing import List
import logging

from portfolio_analytics.domain.interfaces import PriceSeriesProvider
from portfolio_analytics.domain.entities import DateRange, PriceSeries

logger = logging.getLogger(__name__)


class PriceService:
    """Business logic for raw price series lookups."""

    def __init__(self, provider: PriceSeriesProvider):
        self._provider = provider

    @property
    def data_source(self) -> str:
        return self._provider.name

    def get_price_series(self, symbols: List[str], date_range: DateRange) -> List[PriceSeries]:
        """Get closing prices for symbols (uppercase normalized, duplicates dropped)."""
        normalized = list(dict.fromkeys(s.strip().upper() for s in symbols if s.strip()))
        return self._provider.fetch_price_series(normalized, date_range)
