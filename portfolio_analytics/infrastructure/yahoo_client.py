"""Yahoo Finance price provider backed by yfinance."""
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, List, Optional, Sequence

import pandas as pd
import yfinance as yf

from portfolio_analytics.domain.entities import DateRange, PriceSeries
from portfolio_analytics.domain.interfaces import PriceSeriesProvider
from portfolio_analytics.infrastructure.asset_catalog import display_name

logger = logging.getLogger(__name__)


def get_historical_closes(symbol: str, start: str, end: str) -> Optional[Dict[str, Any]]:
    """
    Fetch daily closing prices for a symbol.

    Args:
        symbol: Ticker symbol (e.g., 'AAPL', 'BTC-USD', '^GSPC')
        start: Start date in YYYY-MM-DD format
        end: End date in YYYY-MM-DD format, inclusive

    Returns:
        Dict with symbol, dates and prices (oldest first), or None if fetch fails
    """
    try:
        ticker: yf.Ticker = yf.Ticker(symbol)
        # yfinance treats end as exclusive
        end_exclusive = (pd.Timestamp(end) + pd.Timedelta(days=1)).strftime("%Y-%m-%d")
        hist = ticker.history(start=start, end=end_exclusive)

        closes = hist["Close"].dropna().sort_index() if not hist.empty else pd.Series(dtype=float)
        return {
            "symbol": symbol,
            "dates": [date.strftime("%Y-%m-%d") for date in closes.index],
            "prices": [float(price) for price in closes],
        }
    except Exception as e:
        logger.error(f"Failed to fetch history for {symbol}: {e}")
        return None


class YahooPriceProvider(PriceSeriesProvider):
    """Fetches one symbol per request, fanned out over a small thread pool."""

    name = "yahoo"

    def __init__(self, max_workers: int = 4):
        self._max_workers = max(1, max_workers)

    def _fetch_one(self, symbol: str, date_range: DateRange) -> Optional[PriceSeries]:
        data = get_historical_closes(symbol, date_range.start_date, date_range.end_date)
        if data is None:
            return None
        return PriceSeries(
            symbol=symbol,
            name=display_name(symbol),
            dates=data["dates"],
            prices=data["prices"],
        )

    def fetch_price_series(
        self, symbols: Sequence[str], date_range: DateRange
    ) -> List[PriceSeries]:
        if not symbols:
            return []

        logger.info(
            f"Fetching {len(symbols)} symbols from Yahoo "
            f"({date_range.start_date} to {date_range.end_date})"
        )
        with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
            fetched = list(executor.map(lambda s: self._fetch_one(s, date_range), symbols))

        results = [series for series in fetched if series is not None]
        if len(results) < len(symbols):
            logger.warning(f"Yahoo returned {len(results)} of {len(symbols)} requested series")
        return results
