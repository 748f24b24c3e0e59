from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(extra="ignore", env_file=".env")

    app_name: str = "Future Fulfillment Advisor"
    log_level: str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")

    # Booking links; the per-strategy topic suffix is appended at render time.
    strategy_call_url: str = "https://futurefulfilment.com/ausnz#section-0XX8Pbq9ZQ"
    diy_toolkit_url: str = (
        "https://j63rzjzdahixjfu3foqc.app.clientclub.net/communities/groups/"
        "ecommerce-insiders-academy/home?invite=67b1bb500ca4a3bf1bba9912"
    )
    cheatsheet_url: str = "https://futurefulfilment.com/global-tax-guide.pdf"

    default_first_name: str = "Friend"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
