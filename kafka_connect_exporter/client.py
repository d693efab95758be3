"""
Kafka Connect REST API client.

Only the two read endpoints the exporter needs are covered. Every call
either returns decoded, shape-checked data or raises KafkaConnectError.
"""

from typing import Any
from urllib.parse import quote

import requests

from .const import DEFAULT_TIMEOUT
from .logging import get_logger
from .models import ConnectorStatus

logger = get_logger("client")


class KafkaConnectError(Exception):
    """Raised when the Kafka Connect API can't be queried or returns garbage."""

    def __init__(self, url: str, message: str):
        self.url = url
        super().__init__(f"{url}: {message}")


class KafkaConnectClient:
    """
    Client for the Kafka Connect REST API.

    The underlying requests.Session is shared by every call and is safe to
    reuse across overlapping scrapes.
    """

    def __init__(
        self,
        base_uri: str,
        timeout: float = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ):
        self.base_uri = base_uri.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _get_json(self, path: str) -> Any:
        url = f"{self.base_uri}{path}"
        logger.debug(f"GET {url}")

        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise KafkaConnectError(url, f"request failed: {e}") from e

        try:
            response.raise_for_status()
            return response.json()
        except requests.RequestException as e:
            raise KafkaConnectError(url, f"bad response: {e}") from e
        except (ValueError, RecursionError) as e:
            raise KafkaConnectError(url, f"can't decode response: {e}") from e
        finally:
            try:
                response.close()
            except Exception as e:
                logger.error(f"Can't close connection to {url}: {e}")

    def list_connectors(self) -> list[str]:
        """Get list of all connector names"""
        data = self._get_json("/connectors")
        if not isinstance(data, list) or not all(isinstance(name, str) for name in data):
            raise KafkaConnectError(
                f"{self.base_uri}/connectors", f"expected a list of connector names, got {data!r}"
            )
        return data

    def connector_status(self, name: str) -> ConnectorStatus:
        """Get connector status"""
        path = f"/connectors/{quote(name, safe='')}/status"
        data = self._get_json(path)
        try:
            return ConnectorStatus.from_json(data)
        except ValueError as e:
            raise KafkaConnectError(f"{self.base_uri}{path}", f"can't decode status: {e}") from e

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "KafkaConnectClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
