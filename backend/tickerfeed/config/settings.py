from __future__ import annotations

from typing import List, Optional

from pydantic import AliasChoices, BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class FeedLimits(BaseModel):
    news_symbol_limit: int = 5
    news_items_per_symbol: int = 3
    news_result_limit: int = 10
    news_window_days: int = 7
    candle_window: int = 30


class ProviderSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TICKERFEED_",
        env_file=("../.env", ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    finnhub_api_key: str = Field(
        validation_alias=AliasChoices("FINNHUB_API_KEY", "TICKERFEED_FINNHUB_API_KEY"),
    )
    alpha_vantage_api_key: str = Field(
        validation_alias=AliasChoices(
            "ALPHA_VANTAGE_API_KEY", "TICKERFEED_ALPHA_VANTAGE_API_KEY"
        ),
    )
    finnhub_base_url: str = "https://finnhub.io/api/v1"
    alpha_vantage_base_url: str = "https://www.alphavantage.co"
    # None disables the outbound timeout; the slowest symbol bounds the response.
    request_timeout_seconds: Optional[float] = None


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TICKERFEED_",
        env_file=("../.env", ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(
        default="INFO",
        validation_alias=AliasChoices("LOG_LEVEL", "TICKERFEED_LOG_LEVEL"),
    )
    cors_allow_origins: List[str] = Field(default_factory=lambda: ["*"])
    cors_allow_headers: List[str] = Field(
        default_factory=lambda: ["authorization", "x-client-info", "apikey", "content-type"]
    )

    limits: FeedLimits = Field(default_factory=FeedLimits)
    providers: ProviderSettings = Field(default_factory=ProviderSettings)


settings = Settings()
