"""Provider interfaces (Ports) - abstraction for price data access."""
from abc import ABC, abstractmethod
from typing import List, Sequence

from portfolio_analytics.domain.entities import DateRange, PriceSeries


class PriceSeriesProvider(ABC):
    """Interface for historical closing-price data."""

    name: str = "unknown"

    @abstractmethod
    def fetch_price_series(
        self, symbols: Sequence[str], date_range: DateRange
    ) -> List[PriceSeries]:
        """Get one price series per available symbol.

        Order of the result is not guaranteed to match ``symbols`` and
        unavailable symbols may be missing entirely.
        """
        pass
