"""Client configuration.

Settings can be passed explicitly or read from `AMADEUS_*` environment
variables (optionally from a local .env file):

    AMADEUS_CLIENT_ID, AMADEUS_CLIENT_SECRET   API credentials (required)
    AMADEUS_HOSTNAME                           "test" (default) or "production"
    AMADEUS_HOST, AMADEUS_PORT, AMADEUS_SSL    override the derived endpoint
    AMADEUS_LOG_LEVEL                          "silent", "warn" or "debug"
    AMADEUS_CUSTOM_APP_ID/_VERSION             appended to the User-Agent
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any

from .exceptions import ConfigurationError
from .utils.env import env_flag, load_env_file_if_present

HOSTS = {
    "test": "test.api.amadeus.com",
    "production": "api.amadeus.com",
}
DEFAULT_TIMEOUT = 30.0


class Verb(str, Enum):
    GET = "GET"
    POST = "POST"


class LogLevel(IntEnum):
    """Ordered log levels; higher values log more."""

    SILENT = 0
    WARN = 1
    DEBUG = 2

    @classmethod
    def parse(cls, value: str | LogLevel) -> LogLevel:
        if isinstance(value, LogLevel):
            return value
        try:
            return cls[str(value).strip().upper()]
        except KeyError:
            raise ConfigurationError(
                f"Unknown log level {value!r}; expected one of silent, warn, debug"
            ) from None


@dataclass
class Configuration:
    client_id: str | None = None
    client_secret: str | None = None
    logger: logging.Logger = field(default_factory=lambda: logging.getLogger("amadeus_client"))
    log_level: LogLevel = LogLevel.SILENT
    hostname: str = "test"
    host: str | None = None
    ssl: bool = True
    port: int | None = None
    custom_app_id: str | None = None
    custom_app_version: str | None = None
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        if not self.client_id:
            raise ConfigurationError("Missing client_id. Set AMADEUS_CLIENT_ID or pass client_id")
        if not self.client_secret:
            raise ConfigurationError(
                "Missing client_secret. Set AMADEUS_CLIENT_SECRET or pass client_secret"
            )
        if self.hostname not in HOSTS:
            raise ConfigurationError(
                f"Unknown hostname {self.hostname!r}; expected one of {sorted(HOSTS)}"
            )
        self.log_level = LogLevel.parse(self.log_level)
        if self.host is None:
            self.host = HOSTS[self.hostname]
        if self.port is None:
            self.port = 443 if self.ssl else 80

    @classmethod
    def from_env(cls, dotenv: bool = True, **overrides: Any) -> Configuration:
        """Build a configuration from `AMADEUS_*` variables; keyword overrides win."""
        if dotenv:
            load_env_file_if_present()

        settings: dict[str, Any] = {
            "client_id": os.getenv("AMADEUS_CLIENT_ID"),
            "client_secret": os.getenv("AMADEUS_CLIENT_SECRET"),
            "hostname": os.getenv("AMADEUS_HOSTNAME"),
            "host": os.getenv("AMADEUS_HOST"),
            "ssl": env_flag("AMADEUS_SSL"),
            "log_level": os.getenv("AMADEUS_LOG_LEVEL"),
            "custom_app_id": os.getenv("AMADEUS_CUSTOM_APP_ID"),
            "custom_app_version": os.getenv("AMADEUS_CUSTOM_APP_VERSION"),
        }
        port = os.getenv("AMADEUS_PORT")
        if port:
            try:
                settings["port"] = int(port)
            except ValueError:
                raise ConfigurationError(f"AMADEUS_PORT must be an integer, got {port!r}") from None

        settings = {k: v for k, v in settings.items() if v is not None}
        settings.update(overrides)
        return cls(**settings)

    @property
    def scheme(self) -> str:
        return "https" if self.ssl else "http"

    @property
    def base_url(self) -> str:
        default_port = 443 if self.ssl else 80
        if self.port == default_port:
            return f"{self.scheme}://{self.host}"
        return f"{self.scheme}://{self.host}:{self.port}"
