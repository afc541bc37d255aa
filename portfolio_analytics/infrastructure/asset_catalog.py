"""Static catalog of well-known assets used for search and display names."""
from typing import List, Optional

from portfolio_analytics.domain.entities import Asset, AssetType

STOCKS: List[Asset] = [
    # US
    Asset(symbol="AAPL", name="Apple Inc.", type=AssetType.STOCK, exchange="NASDAQ"),
    Asset(symbol="MSFT", name="Microsoft Corporation", type=AssetType.STOCK, exchange="NASDAQ"),
    Asset(symbol="GOOGL", name="Alphabet Inc.", type=AssetType.STOCK, exchange="NASDAQ"),
    Asset(symbol="AMZN", name="Amazon.com Inc.", type=AssetType.STOCK, exchange="NASDAQ"),
    Asset(symbol="TSLA", name="Tesla, Inc.", type=AssetType.STOCK, exchange="NASDAQ"),
    Asset(symbol="META", name="Meta Platforms, Inc.", type=AssetType.STOCK, exchange="NASDAQ"),
    Asset(symbol="NFLX", name="Netflix, Inc.", type=AssetType.STOCK, exchange="NASDAQ"),
    Asset(symbol="NVDA", name="NVIDIA Corporation", type=AssetType.STOCK, exchange="NASDAQ"),
    # India
    Asset(symbol="TCS.NS", name="Tata Consultancy Services Ltd.", type=AssetType.STOCK, exchange="NSE"),
    Asset(symbol="TATAMOTORS.NS", name="Tata Motors Ltd.", type=AssetType.STOCK, exchange="NSE"),
    Asset(symbol="TATASTEEL.NS", name="Tata Steel Ltd.", type=AssetType.STOCK, exchange="NSE"),
    Asset(symbol="RELIANCE.NS", name="Reliance Industries Ltd.", type=AssetType.STOCK, exchange="NSE"),
    Asset(symbol="INFY.NS", name="Infosys Ltd.", type=AssetType.STOCK, exchange="NSE"),
    Asset(symbol="HDFCBANK.NS", name="HDFC Bank Ltd.", type=AssetType.STOCK, exchange="NSE"),
    Asset(symbol="WIPRO.NS", name="Wipro Ltd.", type=AssetType.STOCK, exchange="NSE"),
    Asset(symbol="ITC.NS", name="ITC Ltd.", type=AssetType.STOCK, exchange="NSE"),
]

ETFS: List[Asset] = [
    Asset(symbol="SPY", name="SPDR S&P 500 ETF Trust", type=AssetType.ETF, exchange="NYSE"),
    Asset(symbol="QQQ", name="Invesco QQQ Trust", type=AssetType.ETF, exchange="NASDAQ"),
    Asset(symbol="VTI", name="Vanguard Total Stock Market ETF", type=AssetType.ETF, exchange="NYSE"),
    Asset(symbol="VOO", name="Vanguard S&P 500 ETF", type=AssetType.ETF, exchange="NYSE"),
    Asset(symbol="NIFTYBEES.NS", name="Nippon India ETF Nifty BeES", type=AssetType.ETF, exchange="NSE"),
    Asset(symbol="BANKBEES.NS", name="Nippon India ETF Bank BeES", type=AssetType.ETF, exchange="NSE"),
    Asset(symbol="JUNIORBEES.NS", name="Nippon India ETF Junior BeES", type=AssetType.ETF, exchange="NSE"),
    Asset(symbol="KOTAKGOLD.NS", name="Kotak Gold ETF", type=AssetType.ETF, exchange="NSE"),
    Asset(symbol="SETFNIFBK.NS", name="SBI ETF Nifty Bank", type=AssetType.ETF, exchange="NSE"),
]

CRYPTO: List[Asset] = [
    Asset(symbol="BTC-USD", name="Bitcoin USD", type=AssetType.CRYPTO, exchange="Crypto"),
    Asset(symbol="ETH-USD", name="Ethereum USD", type=AssetType.CRYPTO, exchange="Crypto"),
    Asset(symbol="SOL-USD", name="Solana USD", type=AssetType.CRYPTO, exchange="Crypto"),
    Asset(symbol="DOGE-USD", name="Dogecoin USD", type=AssetType.CRYPTO, exchange="Crypto"),
    Asset(symbol="XRP-USD", name="XRP USD", type=AssetType.CRYPTO, exchange="Crypto"),
    Asset(symbol="ADA-USD", name="Cardano USD", type=AssetType.CRYPTO, exchange="Crypto"),
    Asset(symbol="DOT-USD", name="Polkadot USD", type=AssetType.CRYPTO, exchange="Crypto"),
    Asset(symbol="SHIB-USD", name="Shiba Inu USD", type=AssetType.CRYPTO, exchange="Crypto"),
]

INDICES: List[Asset] = [
    Asset(symbol="^GSPC", name="S&P 500", type=AssetType.INDEX, exchange="SNP"),
    Asset(symbol="^DJI", name="Dow Jones Industrial Average", type=AssetType.INDEX, exchange="DJI"),
    Asset(symbol="^IXIC", name="NASDAQ Composite", type=AssetType.INDEX, exchange="NASDAQ"),
    Asset(symbol="^RUT", name="Russell 2000", type=AssetType.INDEX, exchange="Russell"),
    Asset(symbol="^NSEI", name="NIFTY 50", type=AssetType.INDEX, exchange="NSE"),
    Asset(symbol="^BSESN", name="S&P BSE SENSEX", type=AssetType.INDEX, exchange="BSE"),
    Asset(symbol="^CNXBANK", name="Nifty Bank", type=AssetType.INDEX, exchange="NSE"),
    Asset(symbol="^CNXIT", name="Nifty IT", type=AssetType.INDEX, exchange="NSE"),
    Asset(symbol="^CNXAUTO", name="Nifty Auto", type=AssetType.INDEX, exchange="NSE"),
]

ALL_ASSETS: List[Asset] = STOCKS + ETFS + CRYPTO + INDICES


def find_asset(symbol: str) -> Optional[Asset]:
    """Look up a catalog entry by exact (case-insensitive) symbol."""
    symbol = symbol.upper()
    for asset in ALL_ASSETS:
        if asset.symbol == symbol:
            return asset
    return None


def display_name(symbol: str) -> str:
    asset = find_asset(symbol)
    return asset.name if asset else symbol
