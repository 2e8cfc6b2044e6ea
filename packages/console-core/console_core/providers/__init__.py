"""AI provider initialization."""

from .factory import (
    OPENROUTER_BASE_URL,
    ActiveProvider,
    ProviderClient,
    ResolvedProvider,
    SelectionReason,
    create_client,
    resolve_provider,
)

__all__ = [
    "OPENROUTER_BASE_URL",
    "ActiveProvider",
    "ProviderClient",
    "ResolvedProvider",
    "SelectionReason",
    "create_client",
    "resolve_provider",
]
