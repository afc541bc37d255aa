"""
Return and risk statistics on price series, pure numpy with no shared state.

All functions accept any sequence of floats and return plain Python floats
(or lists of floats) so results serialize without conversion. Degenerate
input (empty, single point, constant) resolves to 0 instead of raising.

Conventions:
  - returns and risk are annualized over 252 trading days, in percent
  - the risk-free rate is a fixed 5.0 percent
  - max drawdown is a non-negative percentage; callers apply the sign
"""
import math
from dataclasses import dataclass
from typing import List, Sequence

import numpy as np

TRADING_DAYS_PER_YEAR = 252
RISK_FREE_RATE = 5.0


@dataclass(frozen=True)
class RiskProfile:
    annual_return: float
    risk: float
    sharpe_ratio: float
    max_drawdown: float


def _as_array(values: Sequence[float]) -> np.ndarray:
    return np.asarray(values, dtype=float)


def _finite(value: float) -> float:
    return value if math.isfinite(value) else 0.0


def daily_returns(prices: Sequence[float]) -> List[float]:
    """Simple day-over-day returns; one fewer element than ``prices``."""
    arr = _as_array(prices)
    if arr.size < 2:
        return []
    with np.errstate(divide="ignore", invalid="ignore"):
        returns = arr[1:] / arr[:-1] - 1
    # a move from or to a zero price has no defined return
    return np.where(np.isfinite(returns), returns, 0.0).tolist()


def mean(values: Sequence[float]) -> float:
    arr = _as_array(values)
    if arr.size == 0:
        return 0.0
    return float(np.mean(arr))


def standard_deviation(values: Sequence[float]) -> float:
    """Sample standard deviation (n - 1 denominator)."""
    arr = _as_array(values)
    if arr.size <= 1:
        return 0.0
    return float(np.std(arr, ddof=1))


def annualized_return(returns: Sequence[float]) -> float:
    """Mean daily return compounded over a trading year, in percent."""
    if len(returns) == 0:
        return 0.0
    with np.errstate(over="ignore", invalid="ignore"):
        growth = np.power(1 + mean(returns), TRADING_DAYS_PER_YEAR)
    return _finite((float(growth) - 1) * 100)


def annualized_risk(returns: Sequence[float]) -> float:
    """Daily volatility scaled by sqrt(252), in percent."""
    if len(returns) == 0:
        return 0.0
    return _finite(standard_deviation(returns) * math.sqrt(TRADING_DAYS_PER_YEAR) * 100)


def sharpe_ratio(
    annual_return: float, annual_risk: float, risk_free_rate: float = RISK_FREE_RATE
) -> float:
    if annual_risk == 0 or not (math.isfinite(annual_return) and math.isfinite(annual_risk)):
        return 0.0
    return _finite((annual_return - risk_free_rate) / annual_risk)


def max_drawdown(prices: Sequence[float]) -> float:
    """Largest peak-to-trough decline as a positive percentage."""
    arr = _as_array(prices)
    if arr.size <= 1:
        return 0.0
    peaks = np.maximum.accumulate(arr)
    with np.errstate(divide="ignore", invalid="ignore"):
        drawdowns = np.where(peaks > 0, (peaks - arr) / peaks, 0.0)
    return _finite(float(np.nanmax(drawdowns)) * 100) if np.isfinite(drawdowns).any() else 0.0


def risk_profile(prices: Sequence[float]) -> RiskProfile:
    """Annualized return, risk, Sharpe ratio and max drawdown of a price path."""
    returns = daily_returns(prices)
    ret = annualized_return(returns)
    risk = annualized_risk(returns)
    return RiskProfile(
        annual_return=ret,
        risk=risk,
        sharpe_ratio=sharpe_ratio(ret, risk),
        max_drawdown=max_drawdown(prices),
    )
