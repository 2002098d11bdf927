"""Datadog API - a typed asynchronous client for the Datadog HTTP API."""

__version__ = "0.1.0"
__description__ = "Typed asynchronous client for the Datadog HTTP API"

from .config import DatadogConfig, DEFAULT_HOST, EU_HOST
from .client import Client
from .api import DatadogAPI
from .exceptions import (
    DatadogError,
    TransportError,
    TransportTimeoutError,
    APIError,
    DecodeError,
    ValidationError,
    ConfigurationError
)

__all__ = [
    "Client",
    "DatadogAPI",
    "DatadogConfig",
    "DEFAULT_HOST",
    "EU_HOST",
    "DatadogError",
    "TransportError",
    "TransportTimeoutError",
    "APIError",
    "DecodeError",
    "ValidationError",
    "ConfigurationError"
]
