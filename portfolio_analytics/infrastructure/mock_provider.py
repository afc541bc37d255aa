"""Deterministic synthetic price data for offline use and demos."""
import logging
import zlib
from typing import Dict, List, Sequence

import numpy as np
import pandas as pd

from portfolio_analytics.domain.entities import DateRange, PriceSeries
from portfolio_analytics.domain.interfaces import PriceSeriesProvider
from portfolio_analytics.infrastructure.asset_catalog import display_name

logger = logging.getLogger(__name__)

BASE_PRICES: Dict[str, float] = {
    "TCS.NS": 3500, "TATAMOTORS.NS": 450, "TATASTEEL.NS": 120,
    "RELIANCE.NS": 2500, "INFY.NS": 1600, "HDFCBANK.NS": 1400,
    "WIPRO.NS": 400, "ITC.NS": 380,
    "AAPL": 175, "MSFT": 330, "GOOGL": 135, "AMZN": 125,
    "TSLA": 175, "META": 420, "NFLX": 550, "NVDA": 880,
    "BTC-USD": 60000, "ETH-USD": 3200, "SOL-USD": 150, "DOGE-USD": 0.15,
    "SPY": 505, "QQQ": 430,
}
DEFAULT_BASE_PRICE = 100.0

HIGH_VOLATILITY = ("BTC", "ETH", "SOL", "DOGE", "SHIB")
STRONG_UPTREND = ("AAPL", "MSFT", "NVDA", "TCS.NS", "INFY.NS")
MEDIUM_UPTREND = ("SPY", "QQQ", "NIFTYBEES.NS")
MILD_UPTREND = ("BTC", "^NSEI", "^BSESN")
MILD_DOWNTREND = ("META", "NFLX")


def _contains_any(symbol: str, needles: Sequence[str]) -> bool:
    return any(needle in symbol for needle in needles)


def _volatility(symbol: str) -> float:
    if _contains_any(symbol, HIGH_VOLATILITY):
        return 0.03
    if _contains_any(symbol, ("TSLA", "TATAMOTORS.NS")):
        return 0.025
    if ".NS" in symbol:
        return 0.018
    return 0.01


def _trend(symbol: str) -> float:
    if _contains_any(symbol, STRONG_UPTREND):
        return 0.0004
    if _contains_any(symbol, MEDIUM_UPTREND):
        return 0.0003
    if _contains_any(symbol, MILD_UPTREND):
        return 0.0002
    if _contains_any(symbol, MILD_DOWNTREND):
        return -0.0001
    return 0.0


class MockPriceProvider(PriceSeriesProvider):
    """Random-walk closing prices, one point per calendar day, both ends included.

    Each symbol gets its own generator seeded from ``seed`` and the symbol,
    so the same request always yields the same series.
    """

    name = "mock"

    def __init__(self, seed: int = 42):
        self._seed = seed

    def _generate(self, symbol: str, date_range: DateRange) -> PriceSeries:
        start = pd.Timestamp(date_range.start_date)
        end = pd.Timestamp(date_range.end_date)
        days = (end - start).days + 1 if end >= start else 0
        dates = pd.date_range(start, periods=days, freq="D")

        rng = np.random.default_rng([self._seed, zlib.crc32(symbol.encode())])
        volatility = _volatility(symbol)
        trend = _trend(symbol)

        price = BASE_PRICES.get(symbol, DEFAULT_BASE_PRICE)
        prices: List[float] = []
        for i in range(days):
            change = (rng.random() - 0.5) * volatility + trend
            # indices get a slow cycle on top of the walk
            cyclical = np.sin(i / 30) * 0.001 if symbol.startswith("^") else 0.0
            price = price * (1 + change + cyclical)
            prices.append(round(float(price), 2))

        return PriceSeries(
            symbol=symbol,
            name=display_name(symbol),
            dates=[d.strftime("%Y-%m-%d") for d in dates],
            prices=prices,
        )

    def fetch_price_series(
        self, symbols: Sequence[str], date_range: DateRange
    ) -> List[PriceSeries]:
        logger.debug(f"Generating mock series for {len(symbols)} symbols")
        return [self._generate(symbol, date_range) for symbol in symbols]
