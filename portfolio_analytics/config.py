"""Configuration management using python-dotenv."""
import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env file from project root
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(dotenv_path=env_path)


class MarketDataConfig:
    """Price data source configuration."""
    DATA_PROVIDER: str = os.getenv("DATA_PROVIDER", "yahoo")
    BENCHMARK_SYMBOL: str = os.getenv("BENCHMARK_SYMBOL", "SPY")
    PRICE_ALIGNMENT: str = os.getenv("PRICE_ALIGNMENT", "positional")
    FETCH_WORKERS: int = int(os.getenv("FETCH_WORKERS", "4"))
    MOCK_SEED: int = int(os.getenv("MOCK_SEED", "42"))


class AppConfig:
    """Application configuration."""
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "*")


# Singleton instances
market_data_config = MarketDataConfig()
app_config = AppConfig()
