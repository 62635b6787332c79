"""Application configuration.

Loads settings from environment variables (prefix ``PADARIA_``) with
sensible defaults.
"""

from decimal import Decimal
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_name: str = "Sistema da Padaria"
    debug: bool = False

    # Logging
    log_level: str = "INFO"
    log_format: Literal["console", "json"] = "console"
    activity_log_size: int = Field(default=500, ge=1)

    # Display
    currency_symbol: str = "R$"

    # Demonstration
    demo_category: str = "Móveis"
    price_increase: Decimal = Field(default=Decimal("10"), ge=0)
    price_update_ceiling: Decimal = Field(default=Decimal("1000"), ge=0)

    model_config = {
        "env_prefix": "PADARIA_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()
