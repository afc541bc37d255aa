"""Tests for asset search."""
from portfolio_analytics.domain.entities import Asset, AssetType
from portfolio_analytics.infrastructure.asset_catalog import display_name, find_asset
from portfolio_analytics.services.search_service import AssetSearchService


def test_search_by_symbol_groups_by_type():
    result = AssetSearchService().search("btc")
    assert [a.symbol for a in result.crypto] == ["BTC-USD"]
    assert result.stocks == [] and result.etfs == [] and result.indices == []


def test_search_by_name_is_case_insensitive():
    result = AssetSearchService().search("TATA")
    assert {a.symbol for a in result.stocks} == {"TCS.NS", "TATAMOTORS.NS", "TATASTEEL.NS"}


def test_search_spans_types():
    result = AssetSearchService().search("nifty")
    assert result.etfs
    assert result.indices


def test_search_blank_query():
    result = AssetSearchService().search("   ")
    assert result.stocks == result.etfs == result.crypto == result.indices == []


def test_search_custom_catalog():
    catalog = [Asset(symbol="XYZ", name="Xyz Corp", type=AssetType.STOCK)]
    assert AssetSearchService(catalog).search("corp").stocks == catalog


def test_catalog_lookup():
    assert find_asset("aapl").name == "Apple Inc."
    assert find_asset("NOPE") is None
    assert display_name("NOPE") == "NOPE"
