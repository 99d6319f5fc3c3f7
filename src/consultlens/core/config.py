"""Configuration management for ConsultLens."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    # Logging
    log_level: str = Field("INFO", description="Logging level")

    # Data source
    data_file: Optional[str] = Field(None, description="JSON or YAML dataset; demo data when unset")
    validate_input: bool = Field(True, description="Validate records when they are loaded")
    demo_seed: int = Field(42, description="Seed for the demo data generator")
    demo_days: int = Field(100, description="Number of daily entries in the demo series")

    # Trend binning policy
    bucket_size: int = Field(7, description="Entries per bucket when the trend is re-bucketed")
    weekly_threshold: int = Field(35, description="Re-bucket when the series is longer than this")

    # Triage
    low_confidence_threshold: float = Field(0.7, description="Confidence below this counts as low")
    feed_limit: int = Field(20, description="Maximum comments shown by the feed command")

    class Config:
        env_prefix = "CONSULTLENS_"
        env_file = ".env"
        env_file_encoding = "utf-8"


# Global settings instance
settings = Settings()
