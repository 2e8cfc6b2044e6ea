"""Test doubles for secret providers."""

from console_core.secrets import SecretProvider, SecretSpec
from console_core.utils.errors import SecretProviderError


class StaticProvider(SecretProvider):
    """Provider answering from a fixed dict and counting lookups."""

    def __init__(self, name: str, values: dict[str, str] | None = None):
        self.name = name
        self.values = values or {}
        self.calls: list[str] = []

    async def lookup(self, spec: SecretSpec) -> str | None:
        self.calls.append(spec.name)
        return self.values.get(spec.name)


class FailingProvider(SecretProvider):
    """Provider whose backing store is always unreachable."""

    def __init__(self, name: str = "vault", error: Exception | None = None):
        self.name = name
        self.error = error or SecretProviderError(name, "connection refused")
        self.calls: list[str] = []

    async def lookup(self, spec: SecretSpec) -> str | None:
        self.calls.append(spec.name)
        raise self.error
