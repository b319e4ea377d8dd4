"""Custom exceptions and error handling for the wallet client."""

from typing import Any, Optional


class WalletClientError(Exception):
    """Base exception for wallet client errors."""

    def __init__(
        self,
        message: str,
        error_type: str = "WalletClientError",
        details: Optional[dict[str, Any]] = None
    ):
        """
        Initialize error.

        Args:
            message: Human-readable error message
            error_type: Type/category of error
            details: Additional context about the error
        """
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary format for CLI and API output."""
        result = {
            "success": False,
            "error": self.message,
            "error_type": self.error_type,
        }
        if self.details:
            result["details"] = self.details
        return result


class ConfigError(WalletClientError, ValueError):
    """Error raised when client configuration is invalid."""

    def __init__(self, message: str, field: Optional[str] = None):
        details = {"field": field} if field is not None else None
        super().__init__(
            message=message,
            error_type="ConfigError",
            details=details
        )


class TransportError(WalletClientError):
    """Error raised when the wallet service cannot be reached or answers
    with a non-2xx status and no usable body."""

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        status_code: Optional[int] = None,
        error_type: str = "TransportError",
    ):
        """
        Initialize transport error.

        Args:
            message: Human-readable error message
            url: Endpoint that was being called
            status_code: HTTP status code if a response was received
            error_type: Type/category of error
        """
        details = {}
        if url is not None:
            details["url"] = url
        if status_code is not None:
            details["status_code"] = status_code

        super().__init__(
            message=message,
            error_type=error_type,
            details=details
        )
        self.url = url
        self.status_code = status_code


class HealthCheckError(TransportError):
    """Error raised when the wallet health endpoint does not answer 2xx."""

    def __init__(
        self,
        url: str,
        status_code: Optional[int] = None,
        reason: Optional[str] = None
    ):
        message = f"Wallet service at {url} is not healthy"
        if status_code is not None:
            message += f" (HTTP {status_code})"
        if reason:
            message += f": {reason}"
        super().__init__(
            message=message,
            url=url,
            status_code=status_code,
            error_type="HealthCheckError",
        )


class DecodeError(WalletClientError):
    """Error raised when a payload does not match the expected shape.

    Distinct from TransportError: the service answered, but what it sent
    could not be decoded (malformed envelope, wrong result shape, unknown
    enum tag).
    """

    def __init__(self, message: str, payload: Any = None):
        """
        Initialize decode error.

        Args:
            message: Human-readable error message
            payload: The offending value, if small enough to be useful
        """
        details = {"payload": payload} if payload is not None else None
        super().__init__(
            message=message,
            error_type="DecodeError",
            details=details
        )
        self.payload = payload


class SchemaError(WalletClientError):
    """Error raised when a command object does not hold exactly one variant.

    Well-typed construction cannot produce this; seeing it means a
    programming defect or a hand-built wire object.
    """

    def __init__(self, message: str, keys: Optional[list[str]] = None):
        super().__init__(
            message=message,
            error_type="SchemaError",
            details={"keys": keys} if keys is not None else None
        )
        self.keys = keys or []


class WalletServiceError(WalletClientError):
    """Error raised when the wallet answers with a JSON-RPC error object."""

    def __init__(self, code: int, message: str, data: Any = None):
        """
        Initialize wallet service error.

        Args:
            code: JSON-RPC error code
            message: Error message returned by the wallet
            data: Optional extra data returned by the wallet
        """
        details: dict[str, Any] = {"code": code}
        if data is not None:
            details["data"] = data
        super().__init__(
            message=f"Wallet service error {code}: {message}",
            error_type="WalletServiceError",
            details=details
        )
        self.code = code
        self.data = data


class SigningNotImplementedError(WalletClientError, NotImplementedError):
    """Error raised when a capability that is not built yet is invoked."""

    def __init__(self, capability: str):
        super().__init__(
            message=f"'{capability}' is not implemented by this client.",
            error_type="NotImplementedError",
            details={"capability": capability}
        )


def format_error_response(error: Exception) -> dict[str, Any]:
    """
    Format any exception into a standardized error response.

    Args:
        error: The exception to format

    Returns:
        Dictionary with standardized error format
    """
    if isinstance(error, WalletClientError):
        return error.to_dict()

    # Generic exception
    return {
        "success": False,
        "error": str(error),
        "error_type": type(error).__name__
    }
