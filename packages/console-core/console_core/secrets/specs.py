"""Registry of logical secrets and where each one can live."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

from ..utils.errors import UnknownSecretError

# Environment variable names (not actual secrets, just the env var keys)
ENV_ANTHROPIC_API_KEY = "ANTHROPIC_API_KEY"  # pragma: allowlist secret
ENV_OPENROUTER_API_KEY = "OPENROUTER_API_KEY"  # pragma: allowlist secret
ENV_N8N_API_KEY = "N8N_API_KEY"  # pragma: allowlist secret
ENV_PAPERLESS_API_TOKEN = "PAPERLESS_API_TOKEN"  # nosec B105  # pragma: allowlist secret


@dataclass(frozen=True)
class SecretSpec:
    """A logical secret and its location in each backing store.

    Attributes:
        name: Logical name used by callers (e.g., "ANTHROPIC_API_KEY")
        vault_path: KV path in the secure store (e.g., "services/anthropic")
        vault_field: Field inside the KV entry holding the value
        env_var: Environment variable consulted as fallback
        label: Display name for status pages
    """

    name: str
    vault_path: str
    vault_field: str
    env_var: str
    label: str = ""

    @property
    def vault_location(self) -> str:
        """Human-readable secure store location, e.g. services/anthropic#api_key."""
        return f"{self.vault_path}#{self.vault_field}"


SECRET_SPECS = MappingProxyType(
    {
        spec.name: spec
        for spec in (
            SecretSpec(
                name=ENV_ANTHROPIC_API_KEY,
                vault_path="services/anthropic",
                vault_field="api_key",
                env_var=ENV_ANTHROPIC_API_KEY,
                label="Anthropic",
            ),
            SecretSpec(
                name=ENV_OPENROUTER_API_KEY,
                vault_path="services/openrouter",
                vault_field="api_key",
                env_var=ENV_OPENROUTER_API_KEY,
                label="OpenRouter",
            ),
            SecretSpec(
                name=ENV_N8N_API_KEY,
                vault_path="services/n8n",
                vault_field="api_key",
                env_var=ENV_N8N_API_KEY,
                label="n8n",
            ),
            SecretSpec(
                name=ENV_PAPERLESS_API_TOKEN,
                vault_path="services/paperless",
                vault_field="api_token",
                env_var=ENV_PAPERLESS_API_TOKEN,
                label="Paperless",
            ),
        )
    }
)


def get_spec(name: str, specs=SECRET_SPECS) -> SecretSpec:
    """Look up a registered secret.

    Raises:
        UnknownSecretError: If the name is not registered
    """
    try:
        return specs[name]
    except KeyError:
        raise UnknownSecretError(name) from None
