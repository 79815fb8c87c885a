"""Configuration management via environment variables."""

import logging
import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv


@dataclass
class Config:
    """Runtime configuration loaded from environment variables."""

    log_level: str = "WARNING"

    # None leaves requests without a timeout
    http_timeout: float | None = None

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        load_dotenv(find_dotenv(usecwd=True))

        log_level = os.getenv("CHARTCHECK_LOG_LEVEL", "WARNING").upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ValueError(f"CHARTCHECK_LOG_LEVEL has unknown level {log_level!r}")

        timeout_str = os.getenv("CHARTCHECK_HTTP_TIMEOUT")
        http_timeout = None
        if timeout_str:
            try:
                http_timeout = float(timeout_str)
            except ValueError:
                raise ValueError(
                    f"CHARTCHECK_HTTP_TIMEOUT must be a number of seconds, got {timeout_str!r}"
                ) from None
            if http_timeout <= 0:
                raise ValueError("CHARTCHECK_HTTP_TIMEOUT must be positive")

        return cls(log_level=log_level, http_timeout=http_timeout)
