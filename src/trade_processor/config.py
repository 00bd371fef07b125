"""Configuration system using pydantic-settings with environment variable loading."""

from decimal import Decimal

from pydantic_settings import BaseSettings, SettingsConfigDict


class SourceSettings(BaseSettings):
    """Where raw trade lines are fetched from."""

    model_config = SettingsConfigDict(env_prefix="SOURCE_")

    url: str = ""
    timeout_seconds: float = 10.0
    encoding: str = "utf-8-sig"
    user_agent: str = "TradeProcessor/1.0"


class StoreSettings(BaseSettings):
    """Relational store settings."""

    model_config = SettingsConfigDict(env_prefix="STORE_")

    db_path: str = "data/trades.db"


class TradeSettings(BaseSettings):
    """Trade line validation and mapping parameters.

    Amount bounds are inclusive. All fields configurable via TRADE_
    environment variable prefix.
    """

    model_config = SettingsConfigDict(env_prefix="TRADE_")

    min_amount: int = 1000
    max_amount: int = 100000
    lot_size: Decimal = Decimal("100000")  # units per lot


class LogSettings(BaseSettings):
    """Structured trade log sink."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    file_path: str = "log.xml"


class AppSettings(BaseSettings):
    """Root application settings, composing all sub-settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    log_level: str = "INFO"
    source: SourceSettings = SourceSettings()
    store: StoreSettings = StoreSettings()
    trade: TradeSettings = TradeSettings()
    log: LogSettings = LogSettings()
