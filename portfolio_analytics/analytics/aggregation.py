"""
Blending per-asset price series into a single portfolio path.

The portfolio is a buy-and-hold basket: 100 currency units are split by
weight on the first day and each slice then moves with its own asset's
cumulative return. Weights drift with relative performance; nothing is
rebalanced.

Series are combined by position. When assets have different history
lengths, the whole portfolio is truncated to the shortest one.
``align_by_date`` is available for callers that prefer to keep only the
calendar dates every series shares.
"""
from typing import List, Sequence

import numpy as np
import pandas as pd

from portfolio_analytics.domain.entities import PriceSeries

INITIAL_VALUE = 100.0


def build_portfolio_path(
    asset_prices: Sequence[Sequence[float]], weights: Sequence[float]
) -> List[float]:
    """Value of a 100-unit buy-and-hold portfolio at each time index.

    ``weights`` are percentages and are used as given, even when they do
    not sum to 100. Returns ``[]`` when there are no series, any series is
    empty, or the weight count does not match the series count.
    """
    if not asset_prices or len(weights) != len(asset_prices):
        return []
    if any(len(prices) == 0 for prices in asset_prices):
        return []

    length = min(len(prices) for prices in asset_prices)
    normalized_weights = [weight / 100 for weight in weights]

    path = np.zeros(length)
    for prices, weight in zip(asset_prices, normalized_weights):
        arr = np.asarray(prices[:length], dtype=float)
        with np.errstate(divide="ignore", invalid="ignore"):
            growth = arr / arr[0]
        # a slice bought at a zero price is worthless
        growth[~np.isfinite(growth)] = 0.0
        # day 0 is the initial allocation, independent of the price level
        growth[0] = 1.0
        path += INITIAL_VALUE * weight * growth
    return path.tolist()


def normalize_to_base(prices: Sequence[float], base: float = INITIAL_VALUE) -> List[float]:
    """Rescale a path so its first point equals ``base``."""
    arr = np.asarray(prices, dtype=float)
    if arr.size == 0:
        return []
    with np.errstate(divide="ignore", invalid="ignore"):
        scaled = arr / arr[0] * base
    return np.where(np.isfinite(scaled), scaled, 0.0).tolist()


def _to_series(price_series: PriceSeries) -> pd.Series:
    length = min(len(price_series.dates), len(price_series.prices))
    series = pd.Series(
        price_series.prices[:length], index=price_series.dates[:length], dtype=float
    )
    return series[~series.index.duplicated(keep="first")]


def align_by_date(series_list: Sequence[PriceSeries]) -> List[PriceSeries]:
    """Restrict every series to the dates present in all of them.

    Date order follows the first series. Duplicate dates within a series
    keep their first price.
    """
    if not series_list:
        return []

    frames = [_to_series(s) for s in series_list]
    common = frames[0].index
    for frame in frames[1:]:
        common = common.intersection(frame.index, sort=False)

    dates = [str(d) for d in common]
    return [
        PriceSeries(
            symbol=source.symbol,
            name=source.name,
            dates=dates,
            prices=frame.reindex(common).tolist(),
        )
        for source, frame in zip(series_list, frames)
    ]
