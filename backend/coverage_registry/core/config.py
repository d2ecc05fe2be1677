from typing import List, Optional, Union
from pydantic_settings import BaseSettings
from pydantic import field_validator, model_validator


class Settings(BaseSettings):
    # Environment
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # API
    API_V1_STR: str = "/api/v1"

    # Role authority bootstrap
    INITIAL_ADMINS: Union[List[str], str] = ["registry-admin"]

    # Price reference (initial quote for the static feed)
    REFERENCE_PRICE: int = 200_000_000
    REFERENCE_DECIMALS: int = 8

    # Live feed, used instead of the static quote when set
    PRICE_FEED_URL: Optional[str] = None
    PRICE_FEED_TIMEOUT: float = 5.0  # seconds

    # Ledger
    RENEWAL_PERIOD_DAYS: int = 365

    @field_validator("INITIAL_ADMINS", mode="before")
    @classmethod
    def parse_initial_admins(cls, v):
        if isinstance(v, str):
            return [identity.strip() for identity in v.split(",") if identity.strip()]
        return v

    @model_validator(mode="after")
    def enforce_bootstrap_configuration(self) -> "Settings":
        if not self.INITIAL_ADMINS:
            raise ValueError("INITIAL_ADMINS must name at least one administrator")
        if self.REFERENCE_DECIMALS < 0:
            raise ValueError("REFERENCE_DECIMALS cannot be negative")
        if self.RENEWAL_PERIOD_DAYS <= 0:
            raise ValueError("RENEWAL_PERIOD_DAYS must be positive")
        return self

    model_config = {
        "env_file": ".env",
    }


settings = Settings()
