"""Path-based content resolution."""

from typing import Protocol

from showroom.core.errors import ContentFetchError, ContentNotFoundError
from showroom.core.types import HOME_KEY, ContentItem, PathKey


class ContentSource(Protocol):
    """Read access to content items by key.

    ContentStore satisfies this; tests substitute failing sources.
    """

    def get(self, key: str) -> ContentItem | None: ...


def to_key(path: str) -> PathKey:
    """Normalize a request path to a store key.

    Args:
        path: Raw request path (e.g., "/models/firetruck/")

    Returns:
        Store key, with the root path mapped to "home"
    """
    stripped = path.strip("/")
    if not stripped:
        return HOME_KEY
    return PathKey(stripped)


class ContentResolver:
    """Looks up content items for request paths.

    Resolution is a pure read: repeated calls with the same path return
    equal results as long as the underlying store is unchanged.
    """

    __slots__ = ("_source",)

    def __init__(self, source: ContentSource) -> None:
        self._source = source

    def resolve(self, path: str) -> ContentItem:
        """Resolve a request path to its content item.

        Args:
            path: Raw request path including leading slash

        Returns:
            Matching ContentItem

        Raises:
            ContentNotFoundError: If no item exists for the path
            ContentFetchError: If the store lookup itself fails
        """
        key = to_key(path)
        try:
            item = self._source.get(key)
        except Exception as e:
            raise ContentFetchError(key, e) from e

        if item is None:
            raise ContentNotFoundError(key)
        return item
