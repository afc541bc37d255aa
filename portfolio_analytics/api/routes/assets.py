"""Asset search and price history endpoints."""
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query
import logging

from portfolio_analytics.api.schemas import PriceSeriesListResponse
from portfolio_analytics.api.dependencies import get_price_service, get_search_service
from portfolio_analytics.domain.entities import DateRange, SearchResponse
from portfolio_analytics.services.price_service import PriceService
from portfolio_analytics.services.search_service import AssetSearchService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1", tags=["assets"])

MIN_QUERY_LENGTH = 2


@router.get("/search", response_model=SearchResponse)
async def search_assets(
    q: str = "",
    service: AssetSearchService = Depends(get_search_service),
) -> SearchResponse:
    """Search stocks, ETFs, crypto and indices by symbol or name."""
    if len(q.strip()) < MIN_QUERY_LENGTH:
        raise HTTPException(
            status_code=400,
            detail=f"Search query must be at least {MIN_QUERY_LENGTH} characters",
        )
    return service.search(q)


@router.get("/assets", response_model=PriceSeriesListResponse)
def get_asset_prices(
    symbols: str = "",
    start_date: Optional[str] = Query(None, alias="startDate"),
    end_date: Optional[str] = Query(None, alias="endDate"),
    service: PriceService = Depends(get_price_service),
) -> PriceSeriesListResponse:
    """Get closing price series for comma-separated symbols."""
    symbol_list = [s for s in symbols.split(",") if s.strip()]
    if not symbol_list:
        raise HTTPException(status_code=400, detail="No symbols provided")
    if not start_date or not end_date:
        raise HTTPException(status_code=400, detail="Start and end dates are required")

    try:
        series = service.get_price_series(
            symbol_list, DateRange(start_date=start_date, end_date=end_date)
        )
        return PriceSeriesListResponse(
            start_date=start_date,
            end_date=end_date,
            series=series,
            count=len(series),
        )
    except Exception as e:
        logger.error(f"Error getting prices for {symbols}: {e}")
        raise HTTPException(status_code=500, detail=str(e))
