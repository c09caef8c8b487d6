"""
Shared HTTP client infrastructure for upstream API integrations.

Provides BaseApiClient with an explicit timeout and uniform error handling.
Each call makes exactly one attempt; failures of any kind (transport errors,
non-2xx responses, undecodable bodies) surface as ExternalAPIError.

Usage:
    class MyClient(BaseApiClient):
        BASE_URL = "https://api.example.com"

        def __init__(self, api_key: str):
            super().__init__(headers={"Authorization": f"Bearer {api_key}"})

        async def get_data(self) -> dict:
            return await self._get("/data")
"""

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class ExternalAPIError(Exception):
    """
    Raised for any failure while contacting or reading an upstream API.

    ``details`` carries the upstream's own error payload when one was
    returned, otherwise a textual failure reason.
    """

    def __init__(
        self,
        message: str,
        details: Any = None,
        status_code: int | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = message if details is None else details
        self.status_code = status_code


# ---------------------------------------------------------------------------
# Base client
# ---------------------------------------------------------------------------

class BaseApiClient:
    """
    Async HTTP client base for upstream APIs.

    Subclasses set BASE_URL, configure auth, and add domain-specific methods.
    Use as an async context manager:

        async with MyClient(api_key="...") as client:
            data = await client._get("/endpoint")

    Or with lazy initialisation (for long-lived services):

        client = MyClient(api_key="...")
        data = await client._get("/endpoint")  # client auto-creates on first use
        await client.close()
    """

    BASE_URL: str = ""

    def __init__(
        self,
        *,
        base_url: str | None = None,
        headers: dict[str, str] | None = None,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = (base_url or self.BASE_URL).rstrip("/")
        self._default_headers = headers or {}
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    # -- Lifecycle -----------------------------------------------------------

    async def __aenter__(self) -> "BaseApiClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    @property
    def client(self) -> httpx.AsyncClient:
        """Return the HTTP client, lazily creating it if needed."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers=self._default_headers,
                timeout=httpx.Timeout(self._timeout),
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    def is_configured(self) -> bool:
        """
        Check if the client has required configuration (API keys, etc.).

        Override in subclasses that need configuration validation.
        """
        return True

    # -- HTTP methods --------------------------------------------------------

    async def _get(
        self,
        path: str,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """
        Make a single GET request and return the decoded JSON body.

        Raises:
            ExternalAPIError: On transport failure, non-2xx status, or a
                body that is not valid JSON.
        """
        try:
            response = await self.client.get(path, params=params)
        except httpx.RequestError as e:
            logger.debug(f"Request to {path} failed: {e!r}")
            raise ExternalAPIError(str(e) or type(e).__name__) from e

        if response.is_error:
            raise ExternalAPIError(
                f"HTTP {response.status_code} from {path}",
                details=_error_payload(response),
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise ExternalAPIError(
                f"Invalid JSON from {path}: {e}",
                status_code=response.status_code,
            ) from e


def _error_payload(response: httpx.Response) -> Any:
    """Return the upstream error body, decoded when it is JSON."""
    try:
        return response.json()
    except ValueError:
        return response.text or f"HTTP {response.status_code}"
