"""Domain errors raised by the analysis pipeline and price providers."""
from typing import Optional


class PortfolioAnalysisError(Exception):
    """Base class for fatal analysis failures."""

    def __init__(self, message: str, symbol: Optional[str] = None):
        super().__init__(message)
        self.symbol = symbol


class InsufficientDataError(PortfolioAnalysisError):
    """An asset's price series has fewer than 2 points."""

    def __init__(self, symbol: str, points: int = 0):
        super().__init__(
            f"Insufficient price data for {symbol} ({points} points)", symbol
        )
        self.points = points


class MissingSeriesError(InsufficientDataError):
    """The provider returned no series at all for a requested symbol."""

    def __init__(self, symbol: str):
        PortfolioAnalysisError.__init__(
            self, f"No price data returned for {symbol}", symbol
        )
        self.points = 0


class PriceProviderError(Exception):
    """Price source is misconfigured or unreachable."""
