"""API request/response schemas (DTOs)."""
from typing import List
from pydantic import BaseModel, Field

from portfolio_analytics.domain.entities import DateRange, PriceSeries, SelectedAsset

# Accepted deviation of the weight total from 100, in percentage points
WEIGHT_TOLERANCE = 0.1


# Request models
class AnalyzeRequest(BaseModel):
    """Body of a portfolio analysis request."""
    assets: List[SelectedAsset] = Field(default_factory=list)
    date_range: DateRange = Field(alias="dateRange")

    class Config:
        populate_by_name = True

    @property
    def total_weight(self) -> float:
        return sum(asset.weight for asset in self.assets)

    def normalized_assets(self) -> List[SelectedAsset]:
        """Assets with symbols stripped and upper-cased, as providers key them."""
        return [
            asset.model_copy(update={"symbol": asset.symbol.strip().upper()})
            for asset in self.assets
        ]


# Response models
class PriceSeriesListResponse(BaseModel):
    """Response for raw price series lookups."""
    start_date: str = Field(alias="startDate")
    end_date: str = Field(alias="endDate")
    series: List[PriceSeries]
    count: int

    class Config:
        populate_by_name = True


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    timestamp: str
    data_source: str


class StatusResponse(BaseModel):
    """Data source status response."""
    data_source: str = Field(alias="dataSource")
    ready: bool
    benchmark: str
    alignment: str
    message: str

    class Config:
        populate_by_name = True
