"""Capability catalog.

An immutable, ordered registry of tool descriptors, each tagged with the
minimum role that may see and invoke it. Filtering never re-sorts: every role
sees its tools in registration order.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from .roles import Role, meets_minimum

logger = logging.getLogger(__name__)


def _freeze(value: Any) -> Any:
    """Recursively convert a JSON-like value into read-only containers."""
    if isinstance(value, Mapping):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    return value


def _thaw(value: Any) -> Any:
    """Inverse of ``_freeze``: a fresh, mutable deep copy."""
    if isinstance(value, Mapping):
        return {key: _thaw(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_thaw(item) for item in value]
    return value


@dataclass(frozen=True)
class CapabilityDescriptor:
    """A single invocable tool.

    Attributes:
        name: Unique tool name (e.g., "list_requests")
        description: Human-readable description
        min_role: Minimum role required to see or use the tool
        category: Grouping label for display (e.g., "Console (Read)")
        input_schema: JSON schema for the tool input, stored as a read-only copy
    """

    name: str
    description: str
    min_role: Role
    category: str = "General"
    input_schema: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "input_schema", _freeze(self.input_schema))

    def to_dict(self) -> dict[str, Any]:
        """Serializable record handed to the HTTP boundary.

        The schema is deep-copied, so callers may mutate the payload freely.
        """
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": _thaw(self.input_schema),
            "minRole": self.min_role.value,
            "category": self.category,
        }


class CapabilityCatalog:
    """Ordered, read-only registry of capability descriptors.

    Built once at startup; safe to share across concurrent requests.

    Example:
        catalog = CapabilityCatalog([
            CapabilityDescriptor("search", "Search things", Role.VIEWER),
            CapabilityDescriptor("deploy", "Deploy things", Role.ADMIN),
        ])
        [d.name for d in catalog.catalog_for(Role.MEMBER)]
        # ["search"]
    """

    def __init__(self, descriptors: Iterable[CapabilityDescriptor]):
        """Build the registry.

        Args:
            descriptors: Descriptors in registration order

        Raises:
            ValueError: If a name is registered twice or a min_role is not a Role
        """
        entries: list[CapabilityDescriptor] = []
        index: dict[str, CapabilityDescriptor] = {}
        for descriptor in descriptors:
            if not isinstance(descriptor.min_role, Role):
                raise ValueError(
                    f"Tool '{descriptor.name}' has invalid min_role {descriptor.min_role!r}"
                )
            if descriptor.name in index:
                raise ValueError(f"Duplicate tool name in catalog: {descriptor.name}")
            entries.append(descriptor)
            index[descriptor.name] = descriptor

        self._entries: tuple[CapabilityDescriptor, ...] = tuple(entries)
        self._index: Mapping[str, CapabilityDescriptor] = MappingProxyType(index)

    def catalog_for(self, role: Role) -> list[CapabilityDescriptor]:
        """Return the descriptors visible to a role, in registration order.

        Args:
            role: The caller's role

        Returns:
            List of descriptors (empty if the role can see none)
        """
        return [d for d in self._entries if meets_minimum(role, d.min_role)]

    def resolve_tools(self, allowed_names: Iterable[str], role: Role) -> list[CapabilityDescriptor]:
        """Narrow an allow-list to the tools a role may actually use.

        Names missing from the catalog and tools above the caller's role are
        dropped. The allow-list order is kept.

        Args:
            allowed_names: Tool names an agent is configured with
            role: The caller's role

        Returns:
            List of usable descriptors
        """
        resolved: list[CapabilityDescriptor] = []
        seen: set[str] = set()
        for name in allowed_names:
            descriptor = self._index.get(name)
            if descriptor is None:
                logger.debug(f"Skipping unknown tool in allow-list: {name}")
                continue
            if name in seen or not meets_minimum(role, descriptor.min_role):
                continue
            seen.add(name)
            resolved.append(descriptor)
        return resolved

    def by_category(self, role: Role) -> dict[str, list[CapabilityDescriptor]]:
        """Group the descriptors visible to a role by category.

        Categories appear in the order their first tool was registered.
        """
        groups: dict[str, list[CapabilityDescriptor]] = {}
        for descriptor in self.catalog_for(role):
            groups.setdefault(descriptor.category, []).append(descriptor)
        return groups

    def get(self, name: str) -> CapabilityDescriptor | None:
        return self._index.get(name)

    @property
    def names(self) -> list[str]:
        """All registered tool names in registration order."""
        return [d.name for d in self._entries]

    def __iter__(self) -> Iterator[CapabilityDescriptor]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __repr__(self) -> str:
        return f"CapabilityCatalog({len(self._entries)} tools)"


def catalog_for(catalog: CapabilityCatalog, role: Role) -> list[dict[str, Any]]:
    """Serialized catalog payload for a caller role."""
    return [d.to_dict() for d in catalog.catalog_for(role)]
