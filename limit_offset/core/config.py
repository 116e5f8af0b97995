from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    env: str = Field(default="development", description="ENV")
    debug: bool = Field(default=False, description="DEBUG")

    # Pagination defaults, used when the request omits page[limit] / page[offset]
    default_page_limit: int = Field(default=20, alias="DEFAULT_PAGE_LIMIT")
    default_page_offset: int = Field(default=0, alias="DEFAULT_PAGE_OFFSET")


@lru_cache
def get_settings() -> Settings:
    return Settings()
