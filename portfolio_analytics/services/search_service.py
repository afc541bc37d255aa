"""Asset search business logic."""
from typing import List, Optional
import logging

from portfolio_analytics.domain.entities import Asset, AssetType, SearchResponse
from portfolio_analytics.infrastructure.asset_catalog import ALL_ASSETS

logger = logging.getLogger(__name__)


class AssetSearchService:
    """Case-insensitive search over an asset catalog, grouped by asset type."""

    def __init__(self, assets: Optional[List[Asset]] = None):
        self._assets = list(ALL_ASSETS if assets is None else assets)

    def search(self, query: str) -> SearchResponse:
        """Match the query against symbol and name substrings."""
        needle = query.strip().lower()
        if not needle:
            return SearchResponse()

        matches = [
            asset for asset in self._assets
            if needle in asset.symbol.lower() or needle in asset.name.lower()
        ]
        logger.debug(f"Search {query!r} matched {len(matches)} assets")
        return SearchResponse(
            stocks=[a for a in matches if a.type == AssetType.STOCK],
            etfs=[a for a in matches if a.type == AssetType.ETF],
            crypto=[a for a in matches if a.type == AssetType.CRYPTO],
            indices=[a for a in matches if a.type == AssetType.INDEX],
        )
