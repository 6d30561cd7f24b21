"""Settings for the FireSQL WHERE translator."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class FireSQLSettings(BaseSettings):
    """FireSQL configuration settings."""

    LOG_LEVEL: str = "INFO"

    # Log a warning when one query ends up with range filters on several fields.
    # The store rejects such queries at execution time; translation never does.
    WARN_MULTIPLE_RANGE_FIELDS: bool = True

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


settings = FireSQLSettings()
