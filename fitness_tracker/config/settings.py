import os
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_database_url() -> str:
    """Get database URL, using absolute path for SQLite to avoid path resolution issues."""
    db_url = os.getenv("DATABASE_URL", "")
    if db_url:
        logger.info(f"Using DATABASE_URL from environment: {db_url}")
        return db_url

    db_path = Path(__file__).parent.parent.parent / "fitness_tracker.db"
    abs_path = db_path.resolve()
    db_url = f"sqlite:///{abs_path}"
    logger.info(f"Using default database path: {db_url}")
    return db_url


class Settings(BaseSettings):
    database_url: str = Field(
        default_factory=get_database_url,
        validation_alias="DATABASE_URL",
    )
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_file: str = Field(default="", validation_alias="LOG_FILE")
    timezone: str = Field(
        default="UTC",
        validation_alias="TIMEZONE",
        description="IANA timezone used to decide what 'today' means",
    )
    health_steps_authorized: bool = Field(
        default=False,
        validation_alias="HEALTH_STEPS_AUTHORIZED",
        description="Whether the user granted read access to step-count data",
    )
    default_weight_kg: float = Field(default=70.0, gt=0, validation_alias="DEFAULT_WEIGHT_KG")
    default_height_cm: float = Field(default=175.0, gt=0, validation_alias="DEFAULT_HEIGHT_CM")
    default_daily_steps_goal: int = Field(default=10000, gt=0, validation_alias="DEFAULT_DAILY_STEPS_GOAL")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that log level is one of the standard logging levels."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            logger.warning(f"Invalid LOG_LEVEL '{value}'. Valid levels are: {', '.join(sorted(valid_levels))}. Defaulting to INFO.")
            return "INFO"
        return upper_value

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, value: str) -> str:
        """Fall back to UTC when the configured timezone is unknown."""
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError):
            logger.warning(f"Unknown TIMEZONE '{value}'. Defaulting to UTC.")
            return "UTC"
        return value


settings = Settings()
