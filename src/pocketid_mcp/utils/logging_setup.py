"""Logging setup with redaction and log-file housekeeping.

This module configures the root logger for the server:
- a sanitizing formatter that redacts API keys and bearer tokens
- a file handler on the configured log file
- an optional stderr handler (stdout carries the MCP stdio transport)
- age-based truncation of the existing log file at start-up
"""

import logging
import re
import sys
import time
from datetime import datetime
from pathlib import Path
from typing import Optional

from ..config.settings import Settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
# Matches the asctime prefix written by LOG_FORMAT
_TIMESTAMP_RE = re.compile(r"^(\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}),\d{3}")
_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

# Patterns for sensitive data detection
SENSITIVE_PATTERNS = {
    "api_key_header": re.compile(r"(X-API-KEY['\"]?\s*[:=]\s*['\"]?)[^\s'\",}]+", re.IGNORECASE),
    "bearer_token": re.compile(r"(Bearer\s+)[A-Za-z0-9._~+/=-]+", re.IGNORECASE),
}

_LOGGING_CONFIGURED = False


def sanitize_string(value: str) -> str:
    """Redact credentials from a log message.

    :param value: String to sanitize
    :type value: str
    :return: String with credential values replaced by ``[REDACTED]``
    :rtype: str
    """
    if not value:
        return value
    for pattern in SENSITIVE_PATTERNS.values():
        value = pattern.sub(r"\1[REDACTED]", value)
    return value


class SanitizingFormatter(logging.Formatter):
    """Formatter that redacts credentials from every record."""

    def format(self, record: logging.LogRecord) -> str:
        return sanitize_string(super().format(record))


def truncate_log_file(path: Path, max_age_hours: float, now: Optional[float] = None) -> None:
    """Drop log records older than ``max_age_hours`` from ``path``.

    Lines without a parseable timestamp (continuation lines, tracebacks)
    are kept. The file is rewritten through a temporary file and an
    atomic rename. A missing file is not an error; any other failure is
    reported on stderr and never raised.

    :param path: Log file to truncate
    :type path: Path
    :param max_age_hours: Maximum age of kept records
    :type max_age_hours: float
    :param now: Reference time as a POSIX timestamp, defaults to now
    :type now: Optional[float]
    """
    cutoff = (now if now is not None else time.time()) - max_age_hours * 3600
    try:
        lines = path.read_text(encoding="utf-8").splitlines()
    except FileNotFoundError:
        return
    except OSError as e:
        print(f"Failed to read log file {path}: {e}", file=sys.stderr)
        return

    kept = []
    for line in lines:
        if not line:
            continue
        match = _TIMESTAMP_RE.match(line)
        if match:
            try:
                stamp = datetime.strptime(match.group(1), _TIMESTAMP_FORMAT).timestamp()
            except ValueError:
                stamp = None
            if stamp is not None and stamp < cutoff:
                continue
        kept.append(line)

    tmp_path = path.with_name(f"{path.name}.{int(time.time() * 1000)}.tmp")
    try:
        tmp_path.write_text("\n".join(kept) + "\n" if kept else "", encoding="utf-8")
        tmp_path.replace(path)
    except OSError as e:
        print(f"Failed to truncate log file {path}: {e}", file=sys.stderr)


def setup_logging(settings: Settings) -> None:
    """Configure logging for the server.

    Uses a singleton pattern to prevent duplicate handlers.

    :param settings: Application settings
    :type settings: Settings
    """
    global _LOGGING_CONFIGURED

    if _LOGGING_CONFIGURED:
        logging.getLogger(__name__).debug(
            "Logging already configured, skipping duplicate setup"
        )
        return

    formatter = SanitizingFormatter(LOG_FORMAT)
    handlers = []

    log_path = settings.log_file_path
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        if settings.log_truncate and settings.log_max_age_hours > 0:
            truncate_log_file(log_path, settings.log_max_age_hours)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)
    except OSError as e:
        print(f"Cannot open log file {log_path}: {e}", file=sys.stderr)

    if settings.log_to_stderr or not handlers:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setFormatter(formatter)
        handlers.append(stderr_handler)

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()),
        handlers=handlers,
        force=True,  # Override any existing configuration
    )

    # httpx logs every request at INFO; keep it to warnings
    logging.getLogger("httpx").setLevel(logging.WARNING)

    _LOGGING_CONFIGURED = True
    logging.getLogger(__name__).debug("Logging to %s", log_path)
