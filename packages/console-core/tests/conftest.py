"""Pytest configuration and fixtures for console-core tests."""

import tempfile
from pathlib import Path

import pytest

from console_core.core.config import Settings
from console_core.permissions import CapabilityCatalog, CapabilityDescriptor, Role


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def settings(temp_dir: Path) -> Settings:
    """Settings isolated from the environment and any .env file."""
    return Settings(
        openbao_addr="http://openbao.test:8200",
        openbao_service_token="test-service-token",  # pragma: allowlist secret
        ai_provider=None,
        log_dir=temp_dir / "logs",
        _env_file=None,
    )


@pytest.fixture
def search_deploy_catalog() -> CapabilityCatalog:
    """Two-tool catalog: search for everyone, deploy for admins."""
    return CapabilityCatalog(
        [
            CapabilityDescriptor("search", "Search the knowledge base", Role.VIEWER),
            CapabilityDescriptor("deploy", "Deploy a release", Role.ADMIN),
        ]
    )


@pytest.fixture
def mixed_catalog() -> CapabilityCatalog:
    """Catalog with interleaved role requirements."""
    return CapabilityCatalog(
        [
            CapabilityDescriptor("a_admin", "A", Role.ADMIN, category="Ops"),
            CapabilityDescriptor("b_viewer", "B", Role.VIEWER, category="Read"),
            CapabilityDescriptor("c_owner", "C", Role.OWNER, category="Ops"),
            CapabilityDescriptor("d_member", "D", Role.MEMBER, category="Write"),
            CapabilityDescriptor("e_viewer", "E", Role.VIEWER, category="Read"),
            CapabilityDescriptor("f_admin", "F", Role.ADMIN, category="Ops"),
        ]
    )


@pytest.fixture
def clean_env(monkeypatch):
    """Remove provider API keys from the environment."""
    for key in (
        "ANTHROPIC_API_KEY",
        "OPENROUTER_API_KEY",
        "N8N_API_KEY",
        "PAPERLESS_API_TOKEN",
        "AI_PROVIDER",
    ):
        monkeypatch.delenv(key, raising=False)
