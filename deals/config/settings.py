"""Application settings module.

All application settings are defined here and can be overridden using
environment variables.

Environment Variable Precedence:
1. OS Environment Variables (Highest Priority)
   - Example: export PORT=9000
2. Default .env File
   - .env file in the working directory
3. Settings Class Defaults (Lowest Priority)

Usage:
    from deals.config import settings

    prefix = settings.API_V1_PREFIX

Environment Variable Rules:
1. Variable names are case-sensitive and match the Settings class field names
2. Boolean values can be set using "1", "true", "yes", "on" for True
"""

import logging
from typing import Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings.
    
    Settings are loaded from environment variables and the .env file.
    """

    # Application settings
    APP_NAME: str = Field(default="Flash Deals", description="Application name")
    APP_VERSION: str = Field(default="1.0.0", description="Application version")
    APP_ENVIRONMENT: str = Field(default="development", description="Application environment")
    TESTING: bool = Field(default=False, description="Testing mode")

    # API settings
    API_V1_PREFIX: str = Field(default="/api/v1")
    ENABLE_LEGACY_ROUTES: bool = Field(
        default=True,
        description="Expose the root-level /createDeal, /updateDeal, /claimDeal and /endDeal routes"
    )

    # Server settings
    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=8082)

    # Logging
    LOG_LEVEL: Union[str, int] = Field(default=logging.INFO, description="Logging level")

    # Deal registry
    STRICT_DEAL_VALIDATION: bool = Field(
        default=False,
        description="Reject negative item counts and past end times on create/update"
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_log_level(cls, v: Union[str, int]) -> Union[str, int]:
        """Accept level names in any case."""
        if isinstance(v, str):
            if v.isdigit():
                return int(v)
            return v.upper()
        return v

    class Config:
        """Pydantic model configuration."""
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"
