"""Secret resolution.

Secrets are looked up at request time through an ordered chain of providers:
the OpenBao secure store first, then the process environment. The first
provider with a value wins; a failing provider is logged and skipped.

Example usage:
    resolver = build_default_resolver()
    api_key = await resolver.resolve("ANTHROPIC_API_KEY")

    # Or fail with a message naming both places to configure it
    api_key = await resolver.require("ANTHROPIC_API_KEY")
"""

from .base import SecretProvider
from .environment import EnvironmentProvider
from .openbao import OpenBaoClient, OpenBaoProvider
from .resolver import (
    ProviderFailure,
    SecretResolution,
    SecretResolver,
    SecretStatus,
    build_default_resolver,
    mask_secret,
)
from .specs import (
    ENV_ANTHROPIC_API_KEY,
    ENV_N8N_API_KEY,
    ENV_OPENROUTER_API_KEY,
    ENV_PAPERLESS_API_TOKEN,
    SECRET_SPECS,
    SecretSpec,
    get_spec,
)

__all__ = [
    "ENV_ANTHROPIC_API_KEY",
    "ENV_N8N_API_KEY",
    "ENV_OPENROUTER_API_KEY",
    "ENV_PAPERLESS_API_TOKEN",
    "EnvironmentProvider",
    "OpenBaoClient",
    "OpenBaoProvider",
    "ProviderFailure",
    "SECRET_SPECS",
    "SecretProvider",
    "SecretResolution",
    "SecretResolver",
    "SecretSpec",
    "SecretStatus",
    "build_default_resolver",
    "get_spec",
    "mask_secret",
]
