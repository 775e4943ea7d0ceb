"""Application settings and configuration."""

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from brokerage.domain.models.enums import PortfolioStrategy


def get_default_data_dir() -> Path:
    """Return the default data directory."""
    return Path.home() / ".brokerage-ledger"


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    app_name: str = "Brokerage Order Ledger"
    app_version: str = "0.1.0"

    # Data directory (SQLite database lives here unless database_url is set)
    data_dir: Optional[Path] = None
    database_url: Optional[str] = None

    log_level: str = "INFO"

    # Valuation strategy, fixed for the lifetime of the deployment
    portfolio_strategy: PortfolioStrategy = PortfolioStrategy.SNAPSHOT

    # Base-currency instrument; orders on it move cash, never positions
    cash_ticker: str = "ARS"

    # Calendar days (snapshot boundaries) are taken in this timezone
    market_timezone: str = "America/Argentina/Buenos_Aires"

    # None waits on the per-user lock indefinitely
    lock_timeout_ms: Optional[int] = None

    host: str = "127.0.0.1"
    port: int = 8000

    def get_data_dir(self) -> Path:
        """Get the data directory, creating it if needed."""
        data_dir = self.data_dir or get_default_data_dir()
        data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir

    def get_database_url(self) -> str:
        """Get database URL, deriving from data_dir if not set."""
        if self.database_url:
            return self.database_url
        db_path = self.get_data_dir() / "brokerage.db"
        return f"sqlite:///{db_path}"


# Global settings instance (can be replaced at runtime)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the current settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Set the global settings instance."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Reset settings to force reload."""
    global _settings
    _settings = None
