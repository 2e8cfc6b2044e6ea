"""Secret resolution through an ordered provider chain.

The resolver asks each provider in turn and returns the first value found.
A provider that reports absence or fails is skipped; failures are logged and
recorded on the result but never raised to the caller. If nothing in the chain
has the secret, the result is None.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from ..core.config import Settings, get_settings
from ..utils.errors import MissingAPIKeyError, SecretProviderError
from .base import SecretProvider
from .environment import EnvironmentProvider
from .openbao import OpenBaoClient, OpenBaoProvider
from .specs import SECRET_SPECS, SecretSpec, get_spec

logger = logging.getLogger(__name__)

SOURCE_NONE = "none"
MASK_CHAR = "•"


@dataclass(frozen=True)
class ProviderFailure:
    """A provider that failed while resolving a secret."""

    provider: str
    error: str


@dataclass
class SecretResolution:
    """Outcome of resolving one secret.

    Attributes:
        name: Logical secret name
        value: The resolved value, or None if absent everywhere
        source: Name of the provider that produced the value ("none" if absent)
        failures: Providers that failed along the way
    """

    name: str
    value: str | None = None
    source: str = SOURCE_NONE
    failures: list[ProviderFailure] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return self.value is not None

    def __repr__(self) -> str:
        # Never show the value
        return (
            f"SecretResolution(name={self.name!r}, found={self.found}, "
            f"source={self.source!r}, failures={len(self.failures)})"
        )


@dataclass(frozen=True)
class SecretStatus:
    """Display-safe status of a secret for admin pages."""

    name: str
    label: str
    configured: bool
    masked: str
    source: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "label": self.label,
            "configured": self.configured,
            "masked": self.masked,
            "source": self.source,
        }


def mask_secret(value: str) -> str:
    """Mask a secret for display.

    Keeps the first 7 and last 4 characters with at most 20 bullets between.
    Short values are masked completely.
    """
    if len(value) <= 12:
        return MASK_CHAR * 8
    return value[:7] + MASK_CHAR * min(len(value) - 11, 20) + value[-4:]


class SecretResolver:
    """Resolves logical secret names through an ordered provider chain.

    Example:
        resolver = SecretResolver([OpenBaoProvider(client), EnvironmentProvider()])
        api_key = await resolver.resolve("ANTHROPIC_API_KEY")
        if api_key is None:
            ...  # not configured anywhere
    """

    def __init__(
        self,
        providers: Sequence[SecretProvider],
        specs: Mapping[str, SecretSpec] = SECRET_SPECS,
        timeout: float | None = None,
    ):
        """Initialize the resolver.

        Args:
            providers: Providers in priority order
            specs: Registry of known secrets
            timeout: Optional per-provider lookup timeout in seconds. A provider
                that exceeds it is treated as failed.
        """
        self._providers: tuple[SecretProvider, ...] = tuple(providers)
        self._specs = specs
        self._timeout = timeout

    @property
    def providers(self) -> tuple[SecretProvider, ...]:
        return self._providers

    def spec(self, name: str) -> SecretSpec:
        """Look up the spec for a secret name.

        Raises:
            UnknownSecretError: If the name is not registered
        """
        return get_spec(name, self._specs)

    async def _lookup(self, provider: SecretProvider, spec: SecretSpec) -> str | None:
        if self._timeout is None:
            return await provider.lookup(spec)
        try:
            return await asyncio.wait_for(provider.lookup(spec), timeout=self._timeout)
        except asyncio.TimeoutError as e:
            raise SecretProviderError(
                provider.name, f"lookup timed out after {self._timeout}s"
            ) from e

    async def resolve_with_source(self, name: str) -> SecretResolution:
        """Resolve a secret and report which provider answered.

        Args:
            name: Logical secret name

        Returns:
            SecretResolution (value is None if no provider had it)

        Raises:
            UnknownSecretError: If the name is not registered
        """
        spec = self.spec(name)
        resolution = SecretResolution(name=name)

        for provider in self._providers:
            try:
                value = await self._lookup(provider, spec)
            except SecretProviderError as e:
                logger.warning(f"Secret provider '{provider.name}' failed for {name}: {e}")
                resolution.failures.append(ProviderFailure(provider.name, str(e)))
                continue
            except Exception as e:
                logger.exception(f"Unexpected error from secret provider '{provider.name}' for {name}")
                resolution.failures.append(
                    ProviderFailure(provider.name, f"{type(e).__name__}: {e}")
                )
                continue

            if value:
                logger.debug(f"Resolved {name} from {provider.name}")
                resolution.value = value
                resolution.source = provider.name
                return resolution

            logger.debug(f"{name} not configured in {provider.name}")

        logger.info(
            f"{name} not configured in any provider "
            f"({', '.join(p.name for p in self._providers) or 'no providers'})"
        )
        return resolution

    async def resolve(self, name: str) -> str | None:
        """Resolve a secret to its value, or None if it is configured nowhere."""
        return (await self.resolve_with_source(name)).value

    async def require(self, name: str) -> str:
        """Resolve a secret that must be present.

        Raises:
            MissingAPIKeyError: If no provider has the secret. The message names
                both the secure store location and the environment variable.
        """
        value = await self.resolve(name)
        if value is None:
            spec = self.spec(name)
            raise MissingAPIKeyError(spec.name, spec.vault_location, spec.env_var)
        return value

    async def status(self, name: str) -> SecretStatus:
        """Masked, display-safe status for a secret."""
        spec = self.spec(name)
        resolution = await self.resolve_with_source(name)
        if resolution.value is None:
            return SecretStatus(spec.name, spec.label or spec.name, False, "", SOURCE_NONE)
        return SecretStatus(
            spec.name,
            spec.label or spec.name,
            True,
            mask_secret(resolution.value),
            resolution.source,
        )

    async def status_all(self) -> list[SecretStatus]:
        """Status of every registered secret, in registry order."""
        return list(await asyncio.gather(*(self.status(name) for name in self._specs)))

    async def close(self) -> None:
        """Close every provider in the chain, even if one of them fails."""
        for provider in self._providers:
            try:
                await provider.close()
            except Exception as e:
                logger.warning(f"Failed to close secret provider '{provider.name}': {e}")


def build_default_resolver(
    settings: Settings | None = None,
    client: OpenBaoClient | None = None,
) -> SecretResolver:
    """Build the standard chain: OpenBao first, then the environment."""
    settings = settings or get_settings()
    client = client or OpenBaoClient.from_settings(settings)
    return SecretResolver(
        [
            OpenBaoProvider(client, health_ttl=settings.secret_store_health_ttl),
            EnvironmentProvider(),
        ]
    )
