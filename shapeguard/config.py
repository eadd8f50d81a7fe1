from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False  # True for structured JSON, False for colored console

    # Messages
    MESSAGE_LOCALE: Literal["en", "zh"] = Field(
        default="en",
        description="Bundled message catalog the process starts from",
    )

    class Config:
        env_prefix = "SHAPEGUARD_"
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    return Settings()

