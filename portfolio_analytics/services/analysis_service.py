"""Portfolio analysis business logic."""
from typing import Dict, List, Optional, Sequence
import logging

from portfolio_analytics.analytics import statistics
from portfolio_analytics.analytics.aggregation import (
    align_by_date,
    build_portfolio_path,
    normalize_to_base,
)
from portfolio_analytics.analytics.contribution import calculate_contributions
from portfolio_analytics.domain.entities import (
    AssetPerformance,
    DateRange,
    PortfolioAnalysisResponse,
    PortfolioRiskReturnPoint,
    PortfolioSummary,
    PriceSeries,
    RiskReturnData,
    RiskReturnPoint,
    SelectedAsset,
    TimeSeriesData,
)
from portfolio_analytics.domain.errors import InsufficientDataError, MissingSeriesError
from portfolio_analytics.domain.interfaces import PriceSeriesProvider

logger = logging.getLogger(__name__)

DEFAULT_BENCHMARK = "SPY"
POSITIONAL = "positional"
CALENDAR = "calendar"
ALIGNMENT_MODES = (POSITIONAL, CALENDAR)


def _index_by_symbol(series_list: Sequence[PriceSeries]) -> Dict[str, PriceSeries]:
    """Map symbol to series; the first entry for a symbol wins."""
    indexed: Dict[str, PriceSeries] = {}
    for series in series_list:
        indexed.setdefault(series.symbol, series)
    return indexed


class PortfolioAnalyzer:
    """Turns a weighted asset list and a date range into performance metrics.

    Any asset without at least two prices fails the whole analysis; a
    missing benchmark only leaves the benchmark path empty.
    """

    def __init__(
        self,
        provider: PriceSeriesProvider,
        benchmark_symbol: str = DEFAULT_BENCHMARK,
        alignment: str = POSITIONAL,
    ):
        if alignment not in ALIGNMENT_MODES:
            raise ValueError(f"Unknown alignment {alignment!r}, expected one of {ALIGNMENT_MODES}")
        self._provider = provider
        self._benchmark_symbol = benchmark_symbol
        self._alignment = alignment

    @property
    def benchmark_symbol(self) -> str:
        return self._benchmark_symbol

    @property
    def alignment(self) -> str:
        return self._alignment

    def analyze(
        self, assets: Sequence[SelectedAsset], date_range: DateRange
    ) -> PortfolioAnalysisResponse:
        """Analyze a buy-and-hold portfolio against the benchmark."""
        symbols = [asset.symbol for asset in assets]
        requested = list(dict.fromkeys(symbols + [self._benchmark_symbol]))
        logger.info(
            f"Analyzing {len(assets)} assets from {date_range.start_date} "
            f"to {date_range.end_date} against {self._benchmark_symbol}"
        )

        by_symbol = _index_by_symbol(
            self._provider.fetch_price_series(requested, date_range)
        )
        asset_series = [self._require_series(asset.symbol, by_symbol) for asset in assets]
        weights = [asset.weight for asset in assets]

        asset_returns: List[float] = []
        asset_risks: List[float] = []
        asset_sharpes: List[float] = []
        for series in asset_series:
            returns = statistics.daily_returns(series.prices)
            annual_return = statistics.annualized_return(returns)
            risk = statistics.annualized_risk(returns)
            asset_returns.append(annual_return)
            asset_risks.append(risk)
            asset_sharpes.append(statistics.sharpe_ratio(annual_return, risk))

        if self._alignment == CALENDAR:
            path_series = align_by_date(asset_series)
        else:
            path_series = list(asset_series)
        portfolio_path = build_portfolio_path([s.prices for s in path_series], weights)
        portfolio = statistics.risk_profile(portfolio_path)

        contributions = calculate_contributions(asset_returns, weights)
        performance = [
            AssetPerformance(
                symbol=asset.symbol,
                name=asset.name,
                weight=asset.weight,
                annual_return=annual_return,
                risk=risk,
                sharpe_ratio=sharpe,
                contribution=contribution,
            )
            for asset, annual_return, risk, sharpe, contribution in zip(
                assets, asset_returns, asset_risks, asset_sharpes, contributions
            )
        ]

        axis_dates = path_series[0].dates if path_series else []
        time_series = self._build_time_series(
            portfolio_path, axis_dates, by_symbol.get(self._benchmark_symbol)
        )

        return PortfolioAnalysisResponse(
            summary=PortfolioSummary(
                annual_return=portfolio.annual_return,
                risk=portfolio.risk,
                sharpe_ratio=portfolio.sharpe_ratio,
                max_drawdown=-portfolio.max_drawdown,
            ),
            asset_performance=performance,
            time_series_data=time_series,
            risk_return_data=RiskReturnData(
                assets=[
                    RiskReturnPoint(
                        symbol=row.symbol,
                        name=row.name,
                        risk=row.risk,
                        return_=row.annual_return,
                    )
                    for row in performance
                ],
                portfolio=PortfolioRiskReturnPoint(
                    risk=portfolio.risk, return_=portfolio.annual_return
                ),
            ),
        )

    def _require_series(self, symbol: str, by_symbol: Dict[str, PriceSeries]) -> PriceSeries:
        series = by_symbol.get(symbol)
        if series is None:
            raise MissingSeriesError(symbol)
        if len(series.prices) < 2:
            raise InsufficientDataError(symbol, len(series.prices))
        return series

    def _build_time_series(
        self,
        portfolio_path: List[float],
        asset_dates: List[str],
        benchmark: Optional[PriceSeries],
    ) -> TimeSeriesData:
        """Index both paths to 100 on one date axis of a single length."""
        if benchmark is None or not benchmark.prices:
            logger.warning(f"No benchmark data for {self._benchmark_symbol}")
            length = min(len(asset_dates), len(portfolio_path))
            return TimeSeriesData(
                dates=asset_dates[:length],
                portfolio_values=normalize_to_base(portfolio_path[:length]),
                benchmark_values=[],
            )

        if self._alignment == CALENDAR:
            length = min(len(asset_dates), len(portfolio_path))
            portfolio_series = PriceSeries(
                symbol="PORTFOLIO",
                name="Portfolio",
                dates=asset_dates[:length],
                prices=portfolio_path[:length],
            )
            portfolio_series, benchmark = align_by_date([portfolio_series, benchmark])
            return TimeSeriesData(
                dates=portfolio_series.dates,
                portfolio_values=normalize_to_base(portfolio_series.prices),
                benchmark_values=normalize_to_base(benchmark.prices),
            )

        length = min(len(benchmark.dates), len(benchmark.prices), len(portfolio_path))
        return TimeSeriesData(
            dates=benchmark.dates[:length],
            portfolio_values=normalize_to_base(portfolio_path[:length]),
            benchmark_values=normalize_to_base(benchmark.prices[:length]),
        )
