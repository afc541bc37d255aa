"""Domain entities - core business objects."""
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field


class AssetType(str, Enum):
    """Kind of tradeable asset."""
    STOCK = "stock"
    ETF = "etf"
    CRYPTO = "crypto"
    INDEX = "index"


class Asset(BaseModel):
    """Reference entity for a searchable asset."""
    symbol: str
    name: str
    type: AssetType
    exchange: Optional[str] = None

    class Config:
        frozen = True


class SelectedAsset(Asset):
    """Asset picked into a portfolio with its allocation in percentage points."""
    weight: float


class DateRange(BaseModel):
    """Inclusive ISO calendar date range."""
    start_date: str = Field(alias="startDate")
    end_date: str = Field(alias="endDate")

    class Config:
        frozen = True
        populate_by_name = True


class PriceSeries(BaseModel):
    """Closing prices for one symbol, ordered by date."""
    symbol: str
    name: str
    dates: List[str] = Field(default_factory=list)
    prices: List[float] = Field(default_factory=list)

    class Config:
        frozen = True


class AssetPerformance(BaseModel):
    """Per-asset row of an analysis."""
    symbol: str
    name: str
    weight: float
    annual_return: float = Field(alias="annualReturn")
    risk: float
    sharpe_ratio: float = Field(alias="sharpeRatio")
    contribution: float

    class Config:
        frozen = True
        populate_by_name = True


class PortfolioSummary(BaseModel):
    """Portfolio-level statistics. max_drawdown is zero or negative."""
    annual_return: float = Field(alias="annualReturn")
    risk: float
    sharpe_ratio: float = Field(alias="sharpeRatio")
    max_drawdown: float = Field(alias="maxDrawdown")

    class Config:
        frozen = True
        populate_by_name = True


class TimeSeriesData(BaseModel):
    """Portfolio and benchmark paths indexed to 100 on a shared date axis."""
    dates: List[str]
    portfolio_values: List[float] = Field(alias="portfolioValues")
    benchmark_values: List[float] = Field(alias="benchmarkValues")

    class Config:
        frozen = True
        populate_by_name = True


class RiskReturnPoint(BaseModel):
    """One asset on the risk/return plane."""
    symbol: str
    name: str
    risk: float
    return_: float = Field(alias="return")

    class Config:
        frozen = True
        populate_by_name = True


class PortfolioRiskReturnPoint(BaseModel):
    """The portfolio itself on the risk/return plane."""
    risk: float
    return_: float = Field(alias="return")

    class Config:
        frozen = True
        populate_by_name = True


class RiskReturnData(BaseModel):
    assets: List[RiskReturnPoint]
    portfolio: PortfolioRiskReturnPoint

    class Config:
        frozen = True


class PortfolioAnalysisResponse(BaseModel):
    """Full result of analyzing one weighted portfolio over a date range."""
    summary: PortfolioSummary
    asset_performance: List[AssetPerformance] = Field(alias="assetPerformance")
    time_series_data: TimeSeriesData = Field(alias="timeSeriesData")
    risk_return_data: RiskReturnData = Field(alias="riskReturnData")

    class Config:
        frozen = True
        populate_by_name = True


class SearchResponse(BaseModel):
    """Search hits grouped by asset type."""
    stocks: List[Asset] = Field(default_factory=list)
    etfs: List[Asset] = Field(default_factory=list)
    crypto: List[Asset] = Field(default_factory=list)
    indices: List[Asset] = Field(default_factory=list)
