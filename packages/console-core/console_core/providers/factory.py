"""AI provider selection and client construction.

API keys are resolved at request time through the SecretResolver, so keys set
in the secure store take effect without a restart.

Provider selection priority:
1. The organization's stored preference ("anthropic" or "openrouter")
2. Auto-detection: whichever key is configured (Anthropic if both)
3. The AI_PROVIDER setting as last resort
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum

from anthropic import AsyncAnthropic

from ..core.config import Settings, get_settings
from ..secrets.resolver import SecretResolver
from ..secrets.specs import ENV_ANTHROPIC_API_KEY, ENV_OPENROUTER_API_KEY
from ..utils.errors import NoProviderAvailableError

logger = logging.getLogger(__name__)

OPENROUTER_BASE_URL = "https://openrouter.ai/api"
PREFERENCE_AUTO = "auto"


class ActiveProvider(str, Enum):
    """AI backends the console can talk to."""

    ANTHROPIC = "anthropic"
    OPENROUTER = "openrouter"

    @property
    def secret_name(self) -> str:
        """Logical name of the API key this provider needs."""
        if self is ActiveProvider.OPENROUTER:
            return ENV_OPENROUTER_API_KEY
        return ENV_ANTHROPIC_API_KEY


class SelectionReason(str, Enum):
    """Why a provider was chosen."""

    PREFERENCE = "preference"
    AUTO_ONLY_KEY = "auto-only-key"
    AUTO_BOTH = "auto-both"
    FALLBACK_OTHER = "fallback-other"
    ENV = "env"


@dataclass(frozen=True)
class ResolvedProvider:
    provider: ActiveProvider
    reason: SelectionReason


@dataclass
class ProviderClient:
    """A constructed client plus the provider it talks to."""

    provider: ActiveProvider
    reason: SelectionReason
    client: AsyncAnthropic

    def model_id(self, model: str) -> str:
        """Map a model id to this provider's naming.

        OpenRouter needs vendor-prefixed ids; bare Claude ids get "anthropic/".
        """
        if self.provider is ActiveProvider.OPENROUTER and "/" not in model:
            return f"anthropic/{model}"
        return model


async def resolve_provider(
    resolver: SecretResolver,
    preference: str | None = None,
    settings: Settings | None = None,
) -> ResolvedProvider:
    """Decide which AI provider to use.

    Args:
        resolver: Secret resolver used to check which keys are configured
        preference: Stored preference: "auto" (or None), "anthropic" or "openrouter"
        settings: Settings supplying the AI_PROVIDER fallback

    Returns:
        The chosen provider and why

    Raises:
        NoProviderAvailableError: If neither provider has a key
    """
    settings = settings or get_settings()
    anthropic_key, openrouter_key = await asyncio.gather(
        resolver.resolve(ENV_ANTHROPIC_API_KEY),
        resolver.resolve(ENV_OPENROUTER_API_KEY),
    )
    has_key = {
        ActiveProvider.ANTHROPIC: anthropic_key is not None,
        ActiveProvider.OPENROUTER: openrouter_key is not None,
    }

    preference = (preference or PREFERENCE_AUTO).lower()
    if preference == PREFERENCE_AUTO:
        if all(has_key.values()):
            return ResolvedProvider(ActiveProvider.ANTHROPIC, SelectionReason.AUTO_BOTH)
        for provider in (ActiveProvider.ANTHROPIC, ActiveProvider.OPENROUTER):
            if has_key[provider]:
                return ResolvedProvider(provider, SelectionReason.AUTO_ONLY_KEY)
    elif preference in (ActiveProvider.ANTHROPIC.value, ActiveProvider.OPENROUTER.value):
        preferred = ActiveProvider(preference)
        other = (
            ActiveProvider.OPENROUTER
            if preferred is ActiveProvider.ANTHROPIC
            else ActiveProvider.ANTHROPIC
        )
        if has_key[preferred]:
            return ResolvedProvider(preferred, SelectionReason.PREFERENCE)
        if has_key[other]:
            logger.info(f"Preferred provider {preferred.value} has no key, using {other.value}")
            return ResolvedProvider(other, SelectionReason.FALLBACK_OTHER)
    else:
        logger.warning(f"Ignoring unknown AI provider preference: {preference}")

    # Last resort: AI_PROVIDER setting
    if settings.ai_provider:
        env_provider = ActiveProvider(settings.ai_provider)
        if has_key[env_provider]:
            return ResolvedProvider(env_provider, SelectionReason.ENV)

    raise NoProviderAvailableError(
        f"Store an API key at services/anthropic or services/openrouter in the secure "
        f"store, or set {ENV_ANTHROPIC_API_KEY} or {ENV_OPENROUTER_API_KEY}."
    )


async def create_client(
    resolver: SecretResolver,
    preference: str | None = None,
    settings: Settings | None = None,
) -> ProviderClient:
    """Resolve a provider and construct its client.

    Raises:
        NoProviderAvailableError: If neither provider has a key
        MissingAPIKeyError: If the chosen provider's key disappeared between
            selection and construction
    """
    resolved = await resolve_provider(resolver, preference, settings)
    api_key = await resolver.require(resolved.provider.secret_name)

    if resolved.provider is ActiveProvider.OPENROUTER:
        client = AsyncAnthropic(api_key=api_key, base_url=OPENROUTER_BASE_URL)
    else:
        client = AsyncAnthropic(api_key=api_key)

    logger.info(f"Using AI provider {resolved.provider.value} ({resolved.reason.value})")
    return ProviderClient(provider=resolved.provider, reason=resolved.reason, client=client)
