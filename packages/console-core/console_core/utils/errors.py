"""Error types for the operator console core."""


class ConsoleError(Exception):
    """Base exception for console core errors."""

    pass


# Contract violations
class InvalidRoleError(ConsoleError, ValueError):
    """Raised when a role value is not one of the known roles."""

    def __init__(self, value: object):
        super().__init__(f"Unknown role: {value!r}")
        self.value = value


class UnknownSecretError(ConsoleError, KeyError):
    """Raised when a secret name is not registered."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown secret: {self.name!r}"


# Authorization errors
class InsufficientRoleError(ConsoleError, PermissionError):
    """Raised when a caller's role is below the required minimum."""

    def __init__(self, role: str, required: str):
        super().__init__(f"Role '{role}' does not meet required role '{required}'")
        self.role = role
        self.required = required


# Secret provider errors
class SecretProviderError(ConsoleError):
    """Raised by a secret provider when its backing store fails transiently.

    The resolver records these and moves on to the next provider.
    """

    def __init__(self, provider: str, message: str):
        super().__init__(f"{provider}: {message}")
        self.provider = provider


# Configuration errors
class ConfigurationError(ConsoleError):
    """Raised when configuration is missing or invalid."""

    pass


class MissingAPIKeyError(ConfigurationError):
    """Raised when a required secret resolves nowhere in the provider chain."""

    def __init__(self, key_name: str, vault_location: str | None = None, env_var: str | None = None):
        env_var = env_var or key_name
        if vault_location:
            message = (
                f"{key_name} not configured. Store it in the secure store at "
                f"'{vault_location}' or set the {env_var} environment variable."
            )
        else:
            message = f"{key_name} not configured. Set the {env_var} environment variable."
        super().__init__(message)
        self.key_name = key_name
        self.vault_location = vault_location
        self.env_var = env_var


class NoProviderAvailableError(ConfigurationError):
    """Raised when no AI provider has a usable API key."""

    def __init__(self, hint: str = "Configure an Anthropic or OpenRouter API key"):
        super().__init__(f"No AI provider available. {hint}")
