"""
Application configuration from environment variables.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class AppConfig(BaseSettings):
    jupiter_price_api_base: str = "https://api.jup.ag/price/v2"
    jupiter_swap_api_base: str = "https://quote-api.jup.ag/v6"
    jupiter_token_api_base: str = "https://tokens.jup.ag"
    # Single deadline applied to every request made by the shared client
    jupiter_http_timeout: float = 30.0
    # Upstream adds fields faster than the schema tracks them
    jupiter_ignore_unknown_fields: bool = True
    jupiter_log_level: str = "DEBUG"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_config() -> AppConfig:
    return AppConfig()
