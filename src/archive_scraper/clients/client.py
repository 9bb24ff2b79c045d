"""Base HTTP client shared by archive clients."""

import logging
from abc import ABC, abstractmethod
from typing import Any

import httpx

from .exceptions import APIError, ConnectionError

logger = logging.getLogger(__name__)


class Client(ABC):
    """httpx-backed client configured from a dict.

    The underlying httpx.Client is created on first use and closed when
    the context manager exits. Every request is attempted once; transport
    failures become ConnectionError and non-2xx answers become APIError.

    Config keys:
        base_url (required): Archive root, prepended to request paths
        timeout: Seconds per request (default: 30)
        headers: Extra headers sent with every request
    """

    def __init__(self, config: dict):
        if "base_url" not in config:
            raise ValueError("config must include 'base_url'")

        self._config = config
        self._client: httpx.Client | None = None

    @property
    def base_url(self) -> str:
        return str(self._config["base_url"])

    @property
    def timeout(self) -> float:
        return float(self._config.get("timeout", 30))

    @property
    def headers(self) -> dict[str, str]:
        return dict(self._config.get("headers", {}))

    @property
    def client(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(
                base_url=self.base_url,
                timeout=self.timeout,
                headers=self.headers,
                follow_redirects=True,
            )
        return self._client

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None

    def get(self, path: str, **kwargs) -> httpx.Response:
        """Send one GET request and return the successful response.

        Args:
            path: Path relative to base_url
            **kwargs: Passed through to httpx.Client.request

        Raises:
            ConnectionError: If no usable response arrived
            APIError: If the response status is not 2xx
        """
        try:
            response = self.client.request("GET", path, **kwargs)
        except httpx.TimeoutException as e:
            logger.warning(f"Timeout requesting {path}: {e}")
            raise ConnectionError(f"Request timed out: {e}") from e
        except httpx.HTTPError as e:
            logger.warning(f"Request for {path} failed: {e!r}")
            raise ConnectionError(f"Request failed: {e!r}") from e

        self._check_status(response)
        return response

    def _check_status(self, response: httpx.Response) -> None:
        if response.is_success:
            return
        raise APIError(
            f"HTTP {response.status_code} from {response.url}",
            status_code=response.status_code,
        )

    @abstractmethod
    def fetch(self, *args, **kwargs) -> Any:
        """Fetch one item from the remote source."""
