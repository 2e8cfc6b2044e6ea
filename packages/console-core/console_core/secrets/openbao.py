"""OpenBao secure store integration.

OpenBao (a Vault fork) stores service credentials in a KV v2 secrets engine.
The console reads them at request time through a service token, so rotating a
key in the store takes effect without a restart.

Every request uses a bounded timeout. A store that is sealed, down or slow
shows up as SecretProviderError, which the resolver turns into a fallback to
the environment.

For the KV v2 HTTP API, see: https://openbao.org/api-docs/secret/kv/kv-v2/
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import Any

import httpx

from ..core.config import Settings, get_settings
from ..utils.errors import SecretProviderError
from .base import SecretProvider
from .specs import SecretSpec

logger = logging.getLogger(__name__)

PROVIDER_NAME = "openbao"
DEFAULT_TIMEOUT = 3.0  # seconds
DEFAULT_HEALTH_TTL = 60.0  # seconds


class OpenBaoClient:
    """Async client for the OpenBao KV v2 API.

    Usage:
        async with OpenBaoClient("http://openbao:8200", token="s.xxx") as client:
            if await client.check_health():
                secret = await client.read_secret("services/anthropic")

    All methods except check_health() raise SecretProviderError on timeouts,
    transport errors and unexpected status codes.
    """

    def __init__(
        self,
        addr: str,
        token: str | None = None,
        mount: str = "secret",
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the client.

        Args:
            addr: OpenBao base URL (e.g., "http://openbao:8200")
            token: Service token sent as X-Vault-Token
            mount: KV v2 mount point
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self._addr = addr.rstrip("/")
        self._token = token or ""
        self._mount = mount.strip("/")
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> OpenBaoClient:
        settings = settings or get_settings()
        return cls(
            addr=settings.openbao_addr,
            token=settings.openbao_service_token,
            mount=settings.openbao_mount,
            timeout=settings.secret_store_timeout,
        )

    @property
    def addr(self) -> str:
        return self._addr

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self._addr,
                timeout=self._timeout,
                transport=self._transport,
                headers={
                    "X-Vault-Token": self._token,
                    "Content-Type": "application/json",
                },
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> OpenBaoClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        """Send a request, normalizing transport failures."""
        try:
            client = await self._get_client()
            return await client.request(method, path, **kwargs)
        except httpx.TimeoutException as e:
            raise SecretProviderError(
                PROVIDER_NAME, f"{method} {path} timed out after {self._timeout}s"
            ) from e
        except httpx.HTTPError as e:
            raise SecretProviderError(PROVIDER_NAME, f"{method} {path} failed: {e}") from e

    @staticmethod
    def _raise_for_status(response: httpx.Response, action: str) -> None:
        if not response.is_success:
            raise SecretProviderError(
                PROVIDER_NAME, f"{action} returned status {response.status_code}"
            )

    async def read_secret(self, path: str) -> dict[str, str] | None:
        """Read the latest version of a KV entry.

        Args:
            path: Path below the mount (e.g., "services/anthropic")

        Returns:
            The entry's key/value data, or None if the path does not exist
        """
        response = await self._request("GET", f"/v1/{self._mount}/data/{path}")
        if response.status_code == 404:
            return None
        self._raise_for_status(response, f"read {path}")
        try:
            return response.json()["data"]["data"]
        except (ValueError, KeyError, TypeError) as e:
            raise SecretProviderError(PROVIDER_NAME, f"malformed response for {path}") from e

    async def write_secret(self, path: str, data: dict[str, str]) -> None:
        """Create a new version of a KV entry."""
        response = await self._request(
            "POST", f"/v1/{self._mount}/data/{path}", json={"data": data}
        )
        self._raise_for_status(response, f"write {path}")
        logger.info(f"Wrote secret at {path} ({len(data)} fields)")

    async def delete_secret(self, path: str) -> None:
        """Delete a KV entry and all of its versions."""
        response = await self._request("DELETE", f"/v1/{self._mount}/metadata/{path}")
        if response.status_code == 404:
            return
        self._raise_for_status(response, f"delete {path}")
        logger.info(f"Deleted secret at {path}")

    async def list_secrets(self, path: str) -> list[str]:
        """List keys below a path (empty if the path does not exist)."""
        response = await self._request(
            "GET", f"/v1/{self._mount}/metadata/{path}", params={"list": "true"}
        )
        if response.status_code == 404:
            return []
        self._raise_for_status(response, f"list {path}")
        try:
            return list(response.json()["data"]["keys"])
        except (ValueError, KeyError, TypeError) as e:
            raise SecretProviderError(PROVIDER_NAME, f"malformed list response for {path}") from e

    async def check_health(self) -> bool:
        """Return True if the store is initialized, unsealed and answering.

        Standby nodes count as healthy.
        """
        try:
            response = await self._request("GET", "/v1/sys/health", params={"standbyok": "true"})
        except SecretProviderError as e:
            logger.debug(f"OpenBao health check failed: {e}")
            return False
        return response.is_success


class OpenBaoProvider(SecretProvider):
    """Secret provider backed by OpenBao.

    The health probe result is cached for health_ttl seconds so that a down
    store costs one timeout per TTL window, not one per lookup.
    """

    name = PROVIDER_NAME

    def __init__(
        self,
        client: OpenBaoClient,
        health_ttl: float = DEFAULT_HEALTH_TTL,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._client = client
        self._health_ttl = health_ttl
        self._clock = clock
        self._health: tuple[bool, float] | None = None

    @property
    def client(self) -> OpenBaoClient:
        return self._client

    async def is_available(self) -> bool:
        """Check store health, reusing a recent result."""
        now = self._clock()
        if self._health is not None:
            available, checked_at = self._health
            if now - checked_at < self._health_ttl:
                return available

        available = await self._client.check_health()
        self._health = (available, now)
        if not available:
            logger.warning(f"OpenBao at {self._client.addr} is unavailable")
        return available

    def invalidate_health(self) -> None:
        """Forget the cached health result."""
        self._health = None

    async def lookup(self, spec: SecretSpec) -> str | None:
        if not await self.is_available():
            raise SecretProviderError(PROVIDER_NAME, "secure store unavailable")

        secret = await self._client.read_secret(spec.vault_path)
        if not secret:
            return None
        value = secret.get(spec.vault_field)
        if value is None or value == "":
            return None
        if not isinstance(value, str):
            raise SecretProviderError(
                PROVIDER_NAME,
                f"field {spec.vault_field!r} at {spec.vault_path} is not a string",
            )
        return value

    async def close(self) -> None:
        await self._client.close()
