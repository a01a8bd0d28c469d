"""Configuration management using Pydantic Settings"""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "mortgage-engine"
    log_level: str = "INFO"

    # Request defaults (the regulatory stress test constants are not configurable)
    default_gds_threshold: float = 32.0
    default_tds_threshold: float = 40.0
    default_amortization_years: int = 25

    # Analytics
    sensitivity_rate_step: float = 0.25
    sensitivity_range: float = 3.0
    comparison_terms: List[int] = [15, 20, 25, 30]


settings = Settings()
