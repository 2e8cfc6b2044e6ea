"""Secret provider interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .specs import SecretSpec


class SecretProvider(ABC):
    """A backing store that may hold a value for a secret.

    Implementations return the value, or None when the store simply does not
    have it. A store that cannot be reached raises SecretProviderError; the
    resolver treats that like absence and moves on.
    """

    name: str = "provider"

    @abstractmethod
    async def lookup(self, spec: SecretSpec) -> str | None:
        """Look up a secret.

        Args:
            spec: The secret to look up

        Returns:
            The value, or None if not configured in this store

        Raises:
            SecretProviderError: If the store failed transiently
        """

    async def close(self) -> None:
        """Release any resources held by the provider."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
