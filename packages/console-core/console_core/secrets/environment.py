"""Environment variable secret provider."""

from __future__ import annotations

import os
from collections.abc import Mapping

from .base import SecretProvider
from .specs import SecretSpec


class EnvironmentProvider(SecretProvider):
    """Reads secrets from the process environment.

    Empty values count as unset. Never raises.
    """

    name = "env"

    def __init__(self, environ: Mapping[str, str] | None = None):
        """Initialize the provider.

        Args:
            environ: Mapping to read from (defaults to os.environ, read at lookup time)
        """
        self._environ = environ

    async def lookup(self, spec: SecretSpec) -> str | None:
        environ = self._environ if self._environ is not None else os.environ
        return environ.get(spec.env_var) or None
