"""Storefront Configuration"""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment"""

    # Application
    app_name: str = "Storefront"
    debug: bool = True
    host: str = "0.0.0.0"
    port: int = 8001

    # Storefront branding used in the order message
    brand_name: str = "Row-Nel FooDelivery"
    currency_symbol: str = "₱"

    # Delivery pricing
    default_delivery_fee_per_km: float = 4.0

    # Messenger hand-off
    messenger_base_url: str = "https://m.me"
    messenger_page_id: str = "61579693577478"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()
