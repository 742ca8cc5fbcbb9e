from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from snowid.core.constants import MAX_NODE_ID


class Settings(BaseSettings):
    # Read at import time from the host's environment and .env, so only
    # SNOWID_-prefixed keys are ours and everything else is ignored
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SNOWID_",
        extra="ignore",
    )

    ENV: str = "dev"

    # Default node for the module-level generate(); callers may always pass their own
    NODE_ID: int = Field(default=0, ge=0, le=MAX_NODE_ID)

    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"


settings = Settings()
