"""Configuration settings for the Pocket ID MCP server.

This module defines the configuration settings for the Pocket ID MCP
server, including the upstream endpoint, request timeouts, logging and
server identity. Settings are loaded from environment variables and
.env files.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_LOG_FILE = "pocketid-mcp.log"


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    :param pocketid_url: Base URL of the Pocket ID instance
    :type pocketid_url: str
    :param pocketid_api_key: Static API key sent as ``X-API-KEY``
    :type pocketid_api_key: str
    :param request_timeout_ms: Default per-request deadline in milliseconds
    :type request_timeout_ms: int
    :param log_level: Logging level for the application
    :type log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    :param log_dir: Directory holding the log file
    :type log_dir: Optional[str]
    :param log_file: Log file name or absolute path
    :type log_file: str
    :param log_truncate: Drop old records from the log file at start-up
    :type log_truncate: bool
    :param log_max_age_hours: Age after which log records are dropped
    :type log_max_age_hours: float
    :param log_to_stderr: Mirror log records to stderr
    :type log_to_stderr: bool
    :param mcp_server_name: Name of the MCP server
    :type mcp_server_name: str
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra fields in .env file
    )

    # Pocket ID endpoint
    pocketid_url: str = Field("", description="Pocket ID base URL")
    pocketid_api_key: str = Field("", description="Pocket ID API key")
    request_timeout_ms: int = Field(
        30_000, gt=0, description="Default request timeout in milliseconds"
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        "INFO", description="Logging level"
    )
    log_dir: Optional[str] = Field(None, description="Directory for the log file")
    log_file: str = Field(DEFAULT_LOG_FILE, description="Log file name or path")
    log_truncate: bool = Field(
        True, description="Drop expired records from the log file at start-up"
    )
    log_max_age_hours: float = Field(
        24, description="Maximum age of kept log records in hours"
    )
    log_to_stderr: bool = Field(True, description="Also log to stderr")

    # MCP Server Configuration
    mcp_server_name: str = Field("pocketid-mcp", description="MCP Server Name")

    @field_validator("pocketid_url")
    @classmethod
    def strip_trailing_slashes(cls, v: str) -> str:
        """Remove trailing slashes so paths can be appended verbatim.

        :param v: The configured base URL
        :type v: str
        :return: Base URL without trailing slashes
        :rtype: str
        """
        return v.strip().rstrip("/")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        if isinstance(v, str):
            return v.upper()
        return v

    @property
    def log_file_path(self) -> Path:
        """Resolve the log file location.

        An absolute ``LOG_FILE`` is used as-is. A relative one is placed
        under ``LOG_DIR`` or, when unset, the current working directory.

        :return: Absolute path of the log file
        :rtype: Path
        """
        log_file = Path(self.log_file or DEFAULT_LOG_FILE).expanduser()
        if log_file.is_absolute():
            return log_file
        base_dir = Path(self.log_dir).expanduser() if self.log_dir else Path.cwd()
        return (base_dir / log_file).resolve()


@dataclass(frozen=True)
class EndpointConfig:
    """Immutable upstream endpoint shared by every request.

    :param base_url: Pocket ID base URL without trailing slashes
    :param api_key: API key attached to every request
    """

    base_url: str
    api_key: str

    @classmethod
    def from_settings(cls, settings: Settings) -> "EndpointConfig":
        return cls(
            base_url=settings.pocketid_url.rstrip("/"),
            api_key=settings.pocketid_api_key,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings instance.

    Settings are read from the environment once; call
    ``get_settings.cache_clear()`` to force a reload.

    :return: Cached settings
    :rtype: Settings
    """
    return Settings()
