from typing import Annotated, Literal, Optional

from pydantic import Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from core.domain.monitor_config import MonitorConfig
from core.exceptions.configuration_error import ConfigurationError
from infra.logging.config import _normalize_log_level
from infra.utils.version import get_version

LogLevel = Literal["DEBUG", "INFO", "WARN", "WARNING", "ERROR", "CRITICAL"]


class Config(BaseSettings):
    APP_NAME: str = "py-tunnel-monitor"
    VERSION: str = get_version()
    ENVIRONMENT: Literal["loc", "dev", "pre", "pro"] = "pro"

    MONITOR_URL: str = Field(min_length=1)
    CONTAINER_NAME: str = Field(min_length=1)
    CHECK_INTERVAL: int = Field(default=30, ge=5)
    SUCCESS_CODES: Annotated[frozenset[int], NoDecode] = frozenset({200, 301, 302})
    RESTART_DELAY: int = Field(default=60, ge=0)
    CONNECTION_TIMEOUT: float = Field(default=5.0, gt=0)
    MAX_TIMEOUT: float = Field(default=10.0, gt=0)
    RETRY_COUNT: int = Field(default=3, ge=1)
    MAX_RESTARTS_PER_HOUR: int = Field(default=0, ge=0)

    NOTIFY_WEBHOOK: Optional[str] = None
    NOTIFY_TIMEOUT: float = Field(default=10.0, gt=0)

    RESTART_HISTORY_FILE: Optional[str] = None

    LOG_LEVEL: LogLevel = "INFO"
    LOG_JSON_FORMAT: bool = False
    LIBRARY_LOG_LEVELS: dict[str, str | int] = Field(default_factory=dict)

    model_config = SettingsConfigDict(
        frozen=True,
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
    )

    @field_validator("SUCCESS_CODES", mode="before")
    @classmethod
    def parse_success_codes(cls, value):
        if isinstance(value, str):
            return frozenset(int(code.strip()) for code in value.split(",") if code.strip())

        return value

    @field_validator("SUCCESS_CODES")
    @classmethod
    def validate_success_codes(cls, value: frozenset[int]) -> frozenset[int]:
        if not value:
            raise ValueError("SUCCESS_CODES must contain at least one status code")

        invalid_codes = sorted(code for code in value if not 100 <= code <= 599)
        if invalid_codes:
            raise ValueError(f"SUCCESS_CODES contains invalid HTTP status codes: {invalid_codes}")

        return value

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, value):
        if isinstance(value, str):
            return value.strip().upper()

        return value

    @field_validator("LIBRARY_LOG_LEVELS")
    @classmethod
    def validate_library_log_levels(cls, value: dict[str, str | int]) -> dict[str, str | int]:
        for level in value.values():
            _normalize_log_level(level)

        return value

    @field_validator("MONITOR_URL", "CONTAINER_NAME", "NOTIFY_WEBHOOK", "RESTART_HISTORY_FILE", mode="before")
    @classmethod
    def strip_blank(cls, value):
        if isinstance(value, str):
            value = value.strip()

        return value

    @field_validator("NOTIFY_WEBHOOK", "RESTART_HISTORY_FILE")
    @classmethod
    def blank_as_none(cls, value: Optional[str]) -> Optional[str]:
        return value or None

    @model_validator(mode="after")
    def validate_timeouts(self) -> "Config":
        if self.MAX_TIMEOUT < self.CONNECTION_TIMEOUT:
            raise ValueError("MAX_TIMEOUT must be greater than or equal to CONNECTION_TIMEOUT")

        return self

    @property
    def logging_level(self) -> str:
        return "WARNING" if self.LOG_LEVEL == "WARN" else self.LOG_LEVEL

    def to_monitor_config(self) -> MonitorConfig:
        return MonitorConfig(
            target_url=self.MONITOR_URL,
            container_name=self.CONTAINER_NAME,
            check_interval_seconds=self.CHECK_INTERVAL,
            success_codes=self.SUCCESS_CODES,
            restart_delay_seconds=self.RESTART_DELAY,
            connect_timeout_seconds=self.CONNECTION_TIMEOUT,
            max_timeout_seconds=self.MAX_TIMEOUT,
            retry_count=self.RETRY_COUNT,
            max_restarts_per_hour=self.MAX_RESTARTS_PER_HOUR,
            notify_webhook=self.NOTIFY_WEBHOOK,
        )


def _describe_validation_error(error: ValidationError) -> list[str]:
    messages = []

    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"]) or "config"
        messages.append(f"{location}: {detail['msg']}")

    return messages


def load_config(**overrides) -> tuple[Config, MonitorConfig]:
    """Read settings from the environment and build the immutable monitor config."""
    try:
        config = Config(**overrides)
        return config, config.to_monitor_config()
    except ValidationError as e:
        raise ConfigurationError(_describe_validation_error(e)) from e
    except ValueError as e:
        raise ConfigurationError([str(e)]) from e

