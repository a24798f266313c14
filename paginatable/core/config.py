from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(case_sensitive=False, extra="ignore", populate_by_name=True)

    # Page size used when neither the caller nor the resource supplies one
    default_page_size: int = Field(default=20, ge=1, alias="PAGINATION_DEFAULT_SIZE")


@lru_cache
def get_settings() -> Settings:
    env_file = Path.cwd() / ".env"
    if env_file.exists():
        load_dotenv(env_file, override=False)
    return Settings()
