"""Core type definitions."""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import NewType

# Store key derived from a request path (e.g., "home", "models/firetruck")
# Distinct from raw URL paths, which carry a leading slash
PathKey = NewType("PathKey", str)

HOME_KEY = PathKey("home")


@dataclass(frozen=True)
class ContentItem:
    """Data for a single page, keyed by its path."""

    key: PathKey
    title: str
    status: str
    body: str = ""
    fields: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        # Freeze a caller-supplied dict so items stay read-only
        if not isinstance(self.fields, MappingProxyType):
            object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))


class ContentStore:
    """Read-only mapping of path keys to content items.

    Built once from a fully populated dict. There is no mutating API, so
    concurrent reads after construction need no locking.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Mapping[str, ContentItem]) -> None:
        self._items: Mapping[str, ContentItem] = MappingProxyType(dict(items))

    def get(self, key: str) -> ContentItem | None:
        """Get item by key.

        Args:
            key: Store key (e.g., "home" or "models/firetruck")

        Returns:
            ContentItem if found, None otherwise
        """
        return self._items.get(key)

    def keys(self) -> list[str]:
        """Return all keys in sorted order."""
        return sorted(self._items)

    def items(self) -> list[tuple[str, ContentItem]]:
        """Return (key, item) pairs in key order."""
        return sorted(self._items.items())

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())
