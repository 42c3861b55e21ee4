"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Optional

DEFAULT_AUTHORITY_SOURCES = [
    "https://developer.hashicorp.com/terraform/language/modules/develop",
    "https://developer.hashicorp.com/terraform/language/style",
    "https://developer.hashicorp.com/validated-designs/terraform-operating-guides-adoption/terraform-workflows",
    "https://developer.hashicorp.com/terraform/tutorials/pro-cert/pro-review",
]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    DEBUG: bool = False
    LOG_LEVEL: str = "info"

    # Corpus
    CORPUS_PATH: Optional[str] = None  # None → packaged default corpus
    AUTHORITY_SOURCES: list[str] = DEFAULT_AUTHORITY_SOURCES

    # Bundle limits
    MAX_BUNDLE_FILES: int = 200
    MAX_FILE_SIZE_BYTES: int = 1024 * 1024

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
