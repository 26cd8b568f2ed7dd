"""
Apaczka API Client

A Python client library for the Apaczka courier API (v2) that builds
HMAC-signed requests and exposes one method per remote endpoint.

Example usage:
    from apaczka_client import ApaczkaClient

    client = ApaczkaClient("your-app-id", "your-app-secret")
    body = client.orders(page=1, limit=10)
"""

from .client import ApaczkaClient
from .exceptions import (
    ApaczkaClientError,
    ConfigurationError,
    HTTPError
)
from .constants import (
    API_URL,
    SIGN_ALGORITHM,
    EXPIRES_IN,
    DEFAULT_CONFIG
)

__version__ = "1.0.0"
__all__ = [
    "ApaczkaClient",
    "ApaczkaClientError",
    "ConfigurationError",
    "HTTPError",
    "API_URL",
    "SIGN_ALGORITHM",
    "EXPIRES_IN",
    "DEFAULT_CONFIG"
]
