"""
Seller Performance Analytics
Centralized Configuration Management

Pydantic settings with environment variable support and validation.
"""

from functools import lru_cache
from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ReportSettings(BaseSettings):
    """Seller report calculation settings"""
    
    model_config = SettingsConfigDict(env_prefix="REPORT_")
    
    top_products_limit: int = Field(default=10, ge=1, description="Max products listed per seller")
    decimal_places: int = Field(default=2, ge=0, description="Rounding precision for money fields")
    
    # Rank tiers for the default bonus strategy
    top_bonus_rate: float = Field(default=0.15, description="Bonus rate for the first place")
    podium_bonus_rate: float = Field(default=0.10, description="Bonus rate for second and third place")
    standard_bonus_rate: float = Field(default=0.05, description="Bonus rate for everyone else but the last")


class DataSettings(BaseSettings):
    """Input/output location configuration"""
    
    model_config = SettingsConfigDict(env_prefix="DATA_")
    
    input_path: str = Field(default="./data/dataset.json", description="Default input bundle")
    output_path: str = Field(default="./data/reports", description="Report output directory")
    output_format: str = Field(default="json", description="Report format: json, csv or parquet")
    
    @field_validator("output_format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        """Validate output format"""
        allowed = ["json", "csv", "parquet"]
        if v.lower() not in allowed:
            raise ValueError(f"Output format must be one of: {allowed}")
        return v.lower()


class MonitoringSettings(BaseSettings):
    """Logging Configuration"""
    
    model_config = SettingsConfigDict(env_prefix="")
    
    log_level: str = Field(default="INFO", alias="LOG_LEVEL", description="Logging level")
    log_format: str = Field(default="json", description="Log format: json or text")
    log_file: Optional[str] = Field(default=None, description="Log file path")


class Settings(BaseSettings):
    """
    Main Application Settings
    
    Aggregates all configuration sections and provides a single entry point
    for accessing application configuration.
    """
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
    
    app_env: str = Field(default="development", alias="APP_ENV", description="Environment")
    
    # Subsystem configurations
    report: ReportSettings = Field(default_factory=ReportSettings)
    data: DataSettings = Field(default_factory=DataSettings)
    monitoring: MonitoringSettings = Field(default_factory=MonitoringSettings)
    
    @field_validator("app_env")
    @classmethod
    def validate_env(cls, v: str) -> str:
        """Validate environment value"""
        allowed = ["development", "staging", "production", "testing"]
        if v.lower() not in allowed:
            raise ValueError(f"Environment must be one of: {allowed}")
        return v.lower()


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached application settings.
    
    Uses LRU cache to ensure settings are only loaded once.
    
    Returns:
        Settings: Application settings instance
    """
    return Settings()
