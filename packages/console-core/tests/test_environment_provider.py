"""Tests for the environment secret provider."""

import pytest

from console_core.secrets import EnvironmentProvider, get_spec


class TestEnvironmentProvider:
    """Tests for EnvironmentProvider."""

    @pytest.mark.asyncio
    async def test_reads_environment(self, monkeypatch):
        """Test the value is read from os.environ at lookup time."""
        provider = EnvironmentProvider()
        monkeypatch.setenv("N8N_API_KEY", "n8n-key")

        assert await provider.lookup(get_spec("N8N_API_KEY")) == "n8n-key"

    @pytest.mark.asyncio
    async def test_unset_is_absent(self, clean_env):
        """Test an unset variable is None."""
        assert await EnvironmentProvider().lookup(get_spec("ANTHROPIC_API_KEY")) is None

    @pytest.mark.asyncio
    async def test_empty_is_absent(self, monkeypatch):
        """Test an empty variable is None."""
        monkeypatch.setenv("ANTHROPIC_API_KEY", "")

        assert await EnvironmentProvider().lookup(get_spec("ANTHROPIC_API_KEY")) is None

    @pytest.mark.asyncio
    async def test_injected_mapping(self):
        """Test an explicit mapping replaces os.environ."""
        provider = EnvironmentProvider({"PAPERLESS_API_TOKEN": "tok"})

        assert await provider.lookup(get_spec("PAPERLESS_API_TOKEN")) == "tok"
        assert await provider.lookup(get_spec("N8N_API_KEY")) is None

    def test_name(self):
        """Test the provider reports itself as env."""
        assert EnvironmentProvider().name == "env"
