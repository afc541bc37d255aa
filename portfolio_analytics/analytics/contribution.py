"""Attribution of portfolio return to individual assets."""
import math
from typing import List, Sequence


def calculate_contributions(
    asset_returns: Sequence[float], asset_weights: Sequence[float]
) -> List[float]:
    """Share of the weighted portfolio return coming from each asset, in percent.

    Values can be negative and sum to ~100 whenever the portfolio return is
    non-zero. A zero portfolio return gives all zeros; any non-finite share
    is reported as 0. Extra returns or weights beyond the shorter list get 0.
    """
    count = max(len(asset_returns), len(asset_weights))
    pairs = list(zip(asset_returns, asset_weights))
    weighted = [ret * weight / 100 for ret, weight in pairs]

    portfolio_return = sum(weighted)
    if portfolio_return == 0 or not math.isfinite(portfolio_return):
        return [0.0] * count

    contributions = []
    for value in weighted:
        share = value / portfolio_return * 100
        contributions.append(share if math.isfinite(share) else 0.0)
    contributions.extend([0.0] * (count - len(pairs)))
    return contributions
