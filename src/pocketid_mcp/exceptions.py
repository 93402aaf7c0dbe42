"""Structured exception classes for the Pocket ID MCP server."""

import json
from typing import Any, Dict, Optional


class PocketIdMCPError(Exception):
    """Base exception for all Pocket ID MCP errors.

    This exception serves as the parent class for all Pocket ID MCP
    specific exceptions, providing a consistent interface for error
    handling across the application.

    :param message: Human-readable error message
    :param code: Optional error code for programmatic handling
    :param details: Optional dictionary containing additional error context
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        """Initialize the exception with message, code, and details."""
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format.

        :return: Dictionary containing error code, message, and details
        """
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }

    def to_json(self) -> str:
        """Convert exception to JSON string.

        :return: JSON-encoded string representation of the exception
        """
        return json.dumps(self.to_dict())


class ConfigurationError(PocketIdMCPError):
    """Raised when a required setting is missing.

    The base URL and the API key must both be configured before any
    request reaches Pocket ID. The error stays fatal until the
    configuration is fixed.

    :param message: Description of the configuration error
    :param setting: Optional name of the problematic setting
    """

    def __init__(self, message: str, setting: Optional[str] = None):
        """Initialize configuration error with message and optional setting."""
        details = {}
        if setting:
            details["setting"] = setting
        super().__init__(message=message, code="CONFIGURATION_ERROR", details=details)
        self.setting = setting


class HealthCheckError(PocketIdMCPError):
    """Raised when the Pocket ID health check fails.

    Covers both an unreachable instance and a non-success answer from
    ``/healthz``. The cached availability is cleared before this error
    is raised, so the next call checks again.

    :param message: Description of the health check failure
    :param status_code: Optional HTTP status returned by the health check
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        """Initialize health check error with message and optional status."""
        details = {}
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(message=message, code="HEALTH_CHECK_ERROR", details=details)
        self.status_code = status_code


class PocketIdError(PocketIdMCPError):
    """Raised for any non-2xx response from a Pocket ID operation.

    Carries the HTTP status, the method, the request path and the raw
    response body. The message always lists them in that order:
    method, path, status, body.

    :param status_code: HTTP status code of the response
    :param method: HTTP method of the failed request
    :param path: Request path relative to the base URL
    :param body: Raw response body text
    """

    def __init__(self, status_code: int, method: str, path: str, body: str):
        """Initialize upstream error from the four response fields."""
        message = f"Pocket ID {method} {path} failed ({status_code}): {body}"
        super().__init__(
            message=message,
            code="API_ERROR",
            details={
                "status_code": status_code,
                "method": method,
                "path": path,
                "body": body,
            },
        )
        self.status_code = status_code
        self.method = method
        self.path = path
        self.body = body


UpstreamError = PocketIdError


class RequestTimeoutError(PocketIdMCPError):
    """Raised when an exchange exceeds its deadline.

    Kept apart from :class:`PocketIdError` so callers can tell
    "Pocket ID said no" from "Pocket ID never answered".

    :param method: HTTP method of the request that timed out
    :param path: Request path relative to the base URL
    :param timeout_ms: Deadline that elapsed, in milliseconds
    """

    def __init__(self, method: str, path: str, timeout_ms: float):
        """Initialize timeout error with the request that timed out."""
        super().__init__(
            message=f"Pocket ID {method} {path} timed out after {timeout_ms:g} ms",
            code="TIMEOUT_ERROR",
            details={"method": method, "path": path, "timeout_ms": timeout_ms},
        )
        self.method = method
        self.path = path
        self.timeout_ms = timeout_ms


class PayloadDecodeError(PocketIdMCPError):
    """Raised when an upload payload is not valid base64."""

    def __init__(self, message: str):
        """Initialize decode error with message."""
        super().__init__(message=message, code="PAYLOAD_DECODE_ERROR")
