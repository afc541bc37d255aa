"""Portfolio analysis endpoint."""
from fastapi import APIRouter, Depends, HTTPException
import logging

from portfolio_analytics.api.schemas import AnalyzeRequest, WEIGHT_TOLERANCE
from portfolio_analytics.api.dependencies import get_analysis_service
from portfolio_analytics.domain.entities import PortfolioAnalysisResponse
from portfolio_analytics.domain.errors import PortfolioAnalysisError
from portfolio_analytics.services.analysis_service import PortfolioAnalyzer

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1", tags=["analysis"])


@router.post("/analyze", response_model=PortfolioAnalysisResponse)
def analyze_portfolio(
    request: AnalyzeRequest,
    service: PortfolioAnalyzer = Depends(get_analysis_service),
) -> PortfolioAnalysisResponse:
    """Analyze a weighted portfolio over a date range."""
    if not request.assets:
        raise HTTPException(
            status_code=400, detail="Assets are required and must be a non-empty list"
        )
    if abs(request.total_weight - 100) > WEIGHT_TOLERANCE:
        raise HTTPException(
            status_code=400,
            detail=f"Portfolio weights must sum to 100% (got {request.total_weight:.2f}%)",
        )

    try:
        return service.analyze(request.normalized_assets(), request.date_range)
    except PortfolioAnalysisError as e:
        logger.error(f"Analysis rejected for {e.symbol}: {e}")
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.error(f"Error analyzing portfolio: {e}")
        raise HTTPException(status_code=500, detail=str(e))
