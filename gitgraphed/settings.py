import logging

from pydantic import Field
from pydantic import field_validator
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict


APP_NAME = "gitgraphed"
APP_VERSION = "0.1.0"

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)


class Settings(BaseSettings):
    """Runtime settings loaded from environment variables.

    Values are read from process environment and optionally from `.env`.
    """

    github_base_url: str = "https://github.com"
    request_timeout_seconds: float = Field(default=10.0, gt=0)
    user_agent: str = DEFAULT_USER_AGENT
    accept_header: str = "text/html,application/xhtml+xml,application/xml"
    log_level: str = "WARNING"
    sentry_dsn: str | None = None
    environment: str = "development"
    release: str | None = None
    sentry_traces_sample_rate: float = 0.1

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level {value!r}")
        return level
