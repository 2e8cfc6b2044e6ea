"""Operator CLI for inspecting tool access and secret configuration.

Usage:
    console-core catalog --role member           # Tools a member can use
    console-core catalog --role admin --category # Grouped by category
    console-core catalog --role viewer --json    # JSON payload as served to the UI
    console-core secrets status                  # Masked status of every known secret
    console-core secrets check ANTHROPIC_API_KEY # Exit 1 if not configured
    console-core provider                        # Which AI provider would be used
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys

from dotenv import load_dotenv

from .core.config import get_settings
from .permissions import Role, catalog_for, default_catalog
from .providers import resolve_provider
from .secrets import SECRET_SPECS, build_default_resolver
from .utils.errors import ConfigurationError, InvalidRoleError, MissingAPIKeyError
from .utils.logging_config import setup_logging_from_settings


def _role_arg(value: str) -> Role:
    try:
        return Role.parse(value)
    except InvalidRoleError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="console-core",
        description="Inspect role-gated tools and secret resolution.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--log-level", help="Override LOG_LEVEL")

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    catalog_parser = subparsers.add_parser("catalog", help="List tools visible to a role")
    catalog_parser.add_argument(
        "--role",
        type=_role_arg,
        required=True,
        help=f"Caller role ({', '.join(r.value for r in Role)})",
    )
    output = catalog_parser.add_mutually_exclusive_group()
    output.add_argument("--json", action="store_true", help="Print the JSON payload")
    output.add_argument("--category", action="store_true", help="Group tools by category")

    secrets_parser = subparsers.add_parser("secrets", help="Inspect secret configuration")
    secrets_sub = secrets_parser.add_subparsers(dest="secrets_command", help="Secrets command")
    secrets_sub.add_parser("status", help="Show masked status of every known secret")
    check_parser = secrets_sub.add_parser("check", help="Check that a secret resolves")
    check_parser.add_argument("name", choices=list(SECRET_SPECS), help="Secret name")

    provider_parser = subparsers.add_parser("provider", help="Show the AI provider selection")
    provider_parser.add_argument(
        "--preference",
        default="auto",
        choices=["auto", "anthropic", "openrouter"],
        help="Stored organization preference",
    )

    return parser


def show_catalog(role: Role, as_json: bool = False, grouped: bool = False) -> None:
    """Print the tools visible to a role."""
    catalog = default_catalog()

    if as_json:
        print(json.dumps(catalog_for(catalog, role), indent=2))
        return

    if grouped:
        groups = catalog.by_category(role)
        if not groups:
            print(f"No tools available for role '{role}'.")
            return
        for category, tools in groups.items():
            print(f"\n{category}:")
            for tool in tools:
                print(f"  • {tool.name} - {tool.description}")
        return

    tools = catalog.catalog_for(role)
    print(f"{len(tools)} of {len(catalog)} tools available for role '{role}':")
    for tool in tools:
        print(f"  • {tool.name} [{tool.min_role}] - {tool.description}")


async def show_secret_status() -> None:
    """Print the masked status of every registered secret."""
    resolver = build_default_resolver()
    try:
        statuses = await resolver.status_all()
    finally:
        await resolver.close()
    for status in statuses:
        marker = "✅" if status.configured else "❌"
        detail = f"{status.masked} (from {status.source})" if status.configured else "not configured"
        print(f"  {marker} {status.label:<12} {status.name:<22} {detail}")


async def check_secret(name: str) -> int:
    """Return 0 if a secret resolves, 1 otherwise."""
    resolver = build_default_resolver()
    try:
        resolution = await resolver.resolve_with_source(name)
    finally:
        await resolver.close()
    for failure in resolution.failures:
        print(f"⚠️  {failure.provider} unavailable: {failure.error}")
    if resolution.found:
        print(f"✅ {name} resolved from {resolution.source}")
        return 0
    spec = resolver.spec(name)
    print(f"❌ {MissingAPIKeyError(spec.name, spec.vault_location, spec.env_var)}")
    return 1


async def show_provider(preference: str) -> int:
    """Print which AI provider would be selected."""
    resolver = build_default_resolver()
    try:
        resolved = await resolve_provider(resolver, preference)
    except ConfigurationError as e:
        print(f"❌ {e}")
        return 1
    finally:
        await resolver.close()
    print(f"✅ {resolved.provider.value} ({resolved.reason.value})")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Parse arguments and run the requested command."""
    load_dotenv()
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    if args.log_level:
        settings = settings.model_copy(update={"log_level": args.log_level})
    setup_logging_from_settings(settings, component="console_cli")

    if args.command == "catalog":
        show_catalog(args.role, as_json=args.json, grouped=args.category)
        return 0

    if args.command == "secrets":
        if args.secrets_command == "status":
            asyncio.run(show_secret_status())
            return 0
        if args.secrets_command == "check":
            return asyncio.run(check_secret(args.name))

    if args.command == "provider":
        return asyncio.run(show_provider(args.preference))

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
