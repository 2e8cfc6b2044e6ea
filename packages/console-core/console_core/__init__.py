"""Operator console core - role-gated tool access and runtime secret resolution."""

__version__ = "0.1.0"

from .core.config import Settings, get_settings
from .permissions import (
    AgentDefinition,
    CallerContext,
    CapabilityCatalog,
    CapabilityDescriptor,
    Role,
    agents_for,
    default_catalog,
    meets_minimum,
    tools_for_agent,
)
from .providers import ActiveProvider, create_client, resolve_provider
from .secrets import (
    EnvironmentProvider,
    OpenBaoClient,
    OpenBaoProvider,
    SecretProvider,
    SecretResolver,
    build_default_resolver,
)
from .utils.errors import (
    ConfigurationError,
    ConsoleError,
    InsufficientRoleError,
    InvalidRoleError,
    MissingAPIKeyError,
    SecretProviderError,
)

__all__ = [
    "Settings",
    "get_settings",
    # Permissions
    "AgentDefinition",
    "CallerContext",
    "CapabilityCatalog",
    "CapabilityDescriptor",
    "Role",
    "agents_for",
    "default_catalog",
    "meets_minimum",
    "tools_for_agent",
    # Secrets
    "EnvironmentProvider",
    "OpenBaoClient",
    "OpenBaoProvider",
    "SecretProvider",
    "SecretResolver",
    "build_default_resolver",
    # Providers
    "ActiveProvider",
    "create_client",
    "resolve_provider",
    # Errors
    "ConsoleError",
    "ConfigurationError",
    "InsufficientRoleError",
    "InvalidRoleError",
    "MissingAPIKeyError",
    "SecretProviderError",
]
