"""Custom exception classes for the Datadog API client."""

from typing import Optional, Dict, Any, List


class DatadogError(Exception):
    """Base exception for all Datadog client operations.

    Every error raised by this package derives from this class so callers can
    catch a single type at the edge of their application.
    """

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        """Initialize the exception with a message and optional context.

        Args:
            message: Human-readable error message
            context: Optional dictionary containing additional error context
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        """Return string representation of the exception."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} (Context: {context_str})"
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "context": self.context
        }


class TransportError(DatadogError):
    """Raised when the HTTP exchange itself fails.

    This exception is raised when:
    - The connection to the Datadog host cannot be established
    - The connection drops before a response is received
    """

    def __init__(
        self,
        message: str,
        method: Optional[str] = None,
        url: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, context)
        self.method = method
        self.url = url

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        result = super().to_dict()
        if self.method:
            result["method"] = self.method
        if self.url:
            result["url"] = self.url
        return result


class TransportTimeoutError(TransportError):
    """Raised when the underlying HTTP client gives up waiting."""


class APIError(DatadogError):
    """Raised when Datadog answers with a non-2xx status.

    The uniform error body ``{"errors": [...]}`` is decoded into ``errors``.
    The display form joins the messages with newlines.
    """

    def __init__(
        self,
        errors: List[str],
        status_code: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        """Initialize API error.

        Args:
            errors: Error messages returned by the API
            status_code: HTTP status code from the failed request
            context: Additional context about the API failure
        """
        super().__init__("\n".join(errors), context)
        self.errors = list(errors)
        self.status_code = status_code

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        result = super().to_dict()
        result["errors"] = self.errors
        if self.status_code:
            result["status_code"] = self.status_code
        return result

    @property
    def is_client_error(self) -> bool:
        """Check if this is a client error (4xx status code)."""
        return self.status_code is not None and 400 <= self.status_code < 500

    @property
    def is_server_error(self) -> bool:
        """Check if this is a server error (5xx status code)."""
        return self.status_code is not None and 500 <= self.status_code < 600


class DecodeError(DatadogError):
    """Raised when a response body does not match the expected schema.

    This covers both success bodies and error bodies. It is kept apart from
    ``APIError`` so callers can tell a rejected request from a response the
    client could not understand.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
        model: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        """Initialize decode error.

        Args:
            message: Description of the decoding failure
            status_code: HTTP status code of the undecodable response
            body: Raw response body
            model: Name of the model the body was decoded into
            context: Additional context about the failure
        """
        super().__init__(message, context)
        self.status_code = status_code
        self.body = body
        self.model = model

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        result = super().to_dict()
        if self.status_code:
            result["status_code"] = self.status_code
        if self.body:
            result["body"] = self.body
        if self.model:
            result["model"] = self.model
        return result


class ValidationError(DatadogError):
    """Raised when a request fails a client-side precondition.

    Nothing is sent over the network when this is raised.
    """

    def __init__(
        self,
        message: str,
        field_name: Optional[str] = None,
        field_value: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, context)
        self.field_name = field_name
        self.field_value = field_value

    def __str__(self) -> str:
        """Return string representation including field information."""
        base_str = super().__str__()
        if self.field_name:
            return f"{base_str} (Field: {self.field_name})"
        return base_str

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        result = super().to_dict()
        if self.field_name:
            result["field_name"] = self.field_name
        if self.field_value is not None:
            result["field_value"] = str(self.field_value)
        return result


class ConfigurationError(DatadogError):
    """Raised when client configuration is missing or invalid.

    This exception is raised when:
    - DD_API_KEY or DD_APP_KEY is not set
    - The configured host is not an HTTP(S) URL
    """

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, context)
        self.config_key = config_key

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        result = super().to_dict()
        if self.config_key:
            result["config_key"] = self.config_key
        return result


__all__ = [
    'DatadogError',
    'TransportError',
    'TransportTimeoutError',
    'APIError',
    'DecodeError',
    'ValidationError',
    'ConfigurationError'
]
