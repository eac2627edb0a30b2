# filmorate_api/core/config.py
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "filmorate"
    env: str = Field(default="local")
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # GET /films/popular without a usable count
    popular_default_count: int = Field(default=10, ge=1,
                                       alias="POPULAR_DEFAULT_COUNT")

    sentry_dsn: str = Field(default="", alias="SENTRY_DSN")
    sentry_test_enabled: bool = Field(default=False,
                                      alias="SENTRY_TEST_ENABLED")
    model_config = SettingsConfigDict(env_file=".env", extra="ignore",
                                      populate_by_name=True)


settings = Settings()
