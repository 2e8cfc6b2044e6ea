"""Utility functions and classes."""

from .errors import (
    ConfigurationError,
    ConsoleError,
    InsufficientRoleError,
    InvalidRoleError,
    MissingAPIKeyError,
    NoProviderAvailableError,
    SecretProviderError,
    UnknownSecretError,
)
from .logging_config import SecretRedactingFilter, setup_logging, setup_logging_from_settings

__all__ = [
    "ConsoleError",
    "ConfigurationError",
    "InsufficientRoleError",
    "InvalidRoleError",
    "MissingAPIKeyError",
    "NoProviderAvailableError",
    "SecretProviderError",
    "UnknownSecretError",
    "SecretRedactingFilter",
    "setup_logging",
    "setup_logging_from_settings",
]
