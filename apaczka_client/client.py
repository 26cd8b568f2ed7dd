"""
Apaczka API v2 client.

This module provides request signing (HMAC over a colon-joined canonical
string) and one method per remote endpoint of the Apaczka courier API.
"""

import hmac
import json
import logging
import time
from typing import Any, Callable, Dict, List, Optional

import requests

from .constants import CONTENT_TYPE, DEFAULT_CONFIG
from .exceptions import ConfigurationError, HTTPError


class ApaczkaClient:
    """
    Client for the Apaczka courier API.

    Every call is a signed form-urlencoded POST. Failed calls are logged
    and return None; successful calls return the raw response body.
    """

    def __init__(self, app_id: str, app_secret: str,
                 session: Optional[requests.Session] = None,
                 logger: Optional[logging.Logger] = None,
                 clock: Callable[[], float] = time.time,
                 **config):
        """
        Initialize Apaczka client.

        Args:
            app_id: Application identifier issued by Apaczka
            app_secret: Shared secret used as the HMAC key
            session: HTTP session to use (a new one is created if omitted)
            logger: Logger receiving request errors (module logger if omitted)
            clock: Callable returning the current Unix time in seconds
            **config: Configuration options (api_url, sign_algorithm,
                expires_in, timeout)
        """
        self._app_id = app_id
        self._app_secret = app_secret

        # Merge default config with user overrides
        self.config = {**DEFAULT_CONFIG, **config}

        self._validate_config()

        self.api_url = self.config['api_url'].rstrip('/') + '/'
        self.clock = clock
        self.logger = logger if logger is not None else logging.getLogger(__name__)
        self.session = session or requests.Session()

    @property
    def app_id(self) -> str:
        """Application identifier sent with every request."""
        return self._app_id

    @property
    def app_secret(self) -> str:
        """Shared secret used as the HMAC key."""
        return self._app_secret

    def _validate_config(self):
        """Validate client configuration."""
        if not self._app_id:
            raise ConfigurationError("app_id cannot be empty")

        if not self._app_secret:
            raise ConfigurationError("app_secret cannot be empty")

        if not self.config['api_url']:
            raise ConfigurationError("api_url cannot be empty")

        try:
            hmac.new(b'', digestmod=self.config['sign_algorithm'])
        except ValueError:
            raise ConfigurationError(
                f"unsupported sign_algorithm {self.config['sign_algorithm']!r}"
            )

        if self.config['expires_in'] <= 0:
            raise ConfigurationError("expires_in must be positive")

        if self.config['timeout'] <= 0:
            raise ConfigurationError("timeout must be positive")

    def sign(self, message: str, key: str) -> str:
        """
        Generate an HMAC signature of message.

        Args:
            message: Text to sign
            key: HMAC key

        Returns:
            Lowercase hex-encoded digest
        """
        mac = hmac.new(
            key.encode('utf-8'),
            message.encode('utf-8'),
            self.config['sign_algorithm']
        )
        return mac.hexdigest()

    def string_to_sign(self, app_id: str, route: str, data: str, expires: int) -> str:
        """Build the canonical message: app_id:route:data:expires."""
        return f"{app_id}:{route}:{data}:{expires}"

    def _serialize(self, data: Optional[Dict[str, Any]]) -> str:
        # Compact, non-ASCII kept as-is: the server signs the same text
        return json.dumps(data, separators=(',', ':'), ensure_ascii=False)

    def build_request(self, route: str, data: Optional[Dict[str, Any]] = None) -> str:
        """
        Build the signed request body for route.

        The JSON payload is embedded without percent-encoding.

        Args:
            route: API route, e.g. "order/123/"
            data: Request payload, serialized as JSON null when None

        Returns:
            Body in the form app_id=...&request=...&expires=...&signature=...
        """
        data_json = self._serialize(data)
        expires = int(self.clock()) + self.config['expires_in']
        signature = self.sign(
            self.string_to_sign(self._app_id, route, data_json, expires),
            self._app_secret
        )

        return (
            f"app_id={self._app_id}&request={data_json}"
            f"&expires={expires}&signature={signature}"
        )

    def send_request(self, route: str, data: Optional[Dict[str, Any]] = None) -> Optional[str]:
        """
        Send a signed POST request to route.

        Args:
            route: API route relative to api_url
            data: Request payload

        Returns:
            Response body as text, or None if the request failed
        """
        url = self.api_url + route
        body = self.build_request(route, data)

        self.logger.debug("POST %s (route %s)", url, route)

        try:
            response = self.session.post(
                url,
                data=body.encode('utf-8'),
                headers={'Content-Type': CONTENT_TYPE},
                timeout=self.config['timeout']
            )
            if not 200 <= response.status_code < 300:
                raise HTTPError(
                    f"Request failed with status {response.status_code}",
                    status_code=response.status_code
                )
            return response.text
        except (requests.RequestException, HTTPError) as e:
            self.logger.error("Request error: %s", e)
            return None

    def order(self, order_id: str) -> Optional[str]:
        """Fetch order details."""
        return self.send_request(f"order/{order_id}/")

    def orders(self, page: int = 1, limit: int = 10) -> Optional[str]:
        """List orders, one page at a time."""
        return self.send_request("orders/", {'page': page, 'limit': limit})

    def waybill(self, order_id: str) -> Optional[str]:
        """Fetch the waybill of an order."""
        return self.send_request(f"waybill/{order_id}/")

    def pickup_hours(self, postal_code: str, service_id: Optional[str] = None) -> Optional[str]:
        """Fetch courier pickup hours for a postal code."""
        return self.send_request(
            "pickup_hours/",
            {'postal_code': postal_code, 'service_id': service_id}
        )

    def order_valuation(self, order: Dict[str, Any]) -> Optional[str]:
        """Price an order without placing it."""
        return self.send_request("order_valuation/", {'order': order})

    def order_send(self, order: Dict[str, Any]) -> Optional[str]:
        """Place an order."""
        return self.send_request("order_send/", {'order': order})

    def cancel_order(self, order_id: str) -> Optional[str]:
        """Cancel an order."""
        return self.send_request(f"cancel_order/{order_id}/")

    def service_structure(self) -> Optional[str]:
        """Fetch available services and their options."""
        return self.send_request("service_structure/")

    def points(self, point_type: Optional[str] = None) -> Optional[str]:
        """
        Fetch pickup/drop-off points.

        A missing point_type is sent as the literal "null" path segment.
        """
        if point_type is None:
            point_type = 'null'
        return self.send_request(f"points/{point_type}/")

    def customer_register(self, customer: Dict[str, Any]) -> Optional[str]:
        """Register a new customer account."""
        return self.send_request("customer_register/", {'customer': customer})

    def turn_in(self, order_ids: List[str]) -> Optional[str]:
        """Hand off several orders to the courier at once."""
        return self.send_request("turn_in/", {'order_ids': order_ids})

    def close(self):
        """Close HTTP session."""
        if self.session:
            self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
