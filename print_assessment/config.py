"""Configuration helpers."""
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    catalog_path: Path = Field(default=Path("data"), description="Directory holding products.csv")
    anthropic_api_key: Optional[str] = Field(default=None)
    anthropic_base_url: str = Field(default="https://api.anthropic.com")
    anthropic_model: str = Field(default="claude-sonnet-4-20250514")
    anthropic_version: str = Field(default="2023-06-01")
    anthropic_max_tokens: int = Field(default=4096, gt=0)
    anthropic_timeout: float = Field(default=60.0, gt=0, description="Seconds before the AI call is abandoned")
    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
