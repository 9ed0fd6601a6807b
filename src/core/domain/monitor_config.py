from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlparse

MIN_CHECK_INTERVAL_SECONDS = 5


@dataclass(frozen=True)
class MonitorConfig:
    target_url: str
    container_name: str
    check_interval_seconds: int = 30
    success_codes: frozenset[int] = frozenset({200, 301, 302})
    restart_delay_seconds: int = 60
    connect_timeout_seconds: float = 5.0
    max_timeout_seconds: float = 10.0
    retry_count: int = 3
    max_restarts_per_hour: int = 0
    notify_webhook: Optional[str] = None

    def __post_init__(self):
        parsed = urlparse(self.target_url)
        if not all([parsed.scheme, parsed.netloc]):
            raise ValueError(f"Invalid URL: {self.target_url}")

        if parsed.scheme not in ("http", "https"):
            raise ValueError(f"URL must use http or https scheme: {self.target_url}")

        if not self.container_name.strip():
            raise ValueError("Container name cannot be empty")

        if self.check_interval_seconds < MIN_CHECK_INTERVAL_SECONDS:
            raise ValueError(f"Check interval must be >= {MIN_CHECK_INTERVAL_SECONDS} seconds")

        if not self.success_codes:
            raise ValueError("At least one success code is required")

        invalid_codes = sorted(code for code in self.success_codes if not 100 <= code <= 599)
        if invalid_codes:
            raise ValueError(f"Invalid HTTP status codes: {invalid_codes}")

        if self.restart_delay_seconds < 0:
            raise ValueError("Restart delay cannot be negative")

        if self.connect_timeout_seconds <= 0:
            raise ValueError("Connection timeout must be positive")

        if self.max_timeout_seconds < self.connect_timeout_seconds:
            raise ValueError("Max timeout must be >= connection timeout")

        if self.retry_count < 1:
            raise ValueError("Retry count must be >= 1")

        if self.max_restarts_per_hour < 0:
            raise ValueError("Max restarts per hour cannot be negative")
