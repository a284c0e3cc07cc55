"""Pydantic Settings — loads configuration from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "extra": "ignore"}

    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"
    cors_origins: str = "*"

    headless: bool = True
    scrape_timeout_seconds: int = 30
    title_selector: str = ".complaint-title"
    body_selector: str = ".complaint-body"
    date_selector: str = ".complaint-date"

    concurrency: int = 1
    failure_policy: Literal["abort", "skip"] = "abort"
    service_url: str = "http://localhost:3000"

    export_filename: str = "analise-reclame-aqui.xlsx"
    export_sheet_name: str = "Análise Reclame Aqui"

    @property
    def allowed_origins(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()
