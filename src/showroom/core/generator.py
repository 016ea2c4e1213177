"""Startup content generation.

Builds the ContentStore from TOML files before the server accepts traffic:

    content/
    ├── home.toml                # key: home
    ├── about.toml               # key: about
    └── models/
        ├── index.toml           # key: models
        └── firetruck.toml       # key: models/firetruck

Each file holds one page:

    title = "Firetruck"
    status = "available"
    body = "Ladder truck, 2019."

    [fields]
    price = "$450,000"
"""

import logging
import tomllib
from pathlib import Path

from showroom.core.errors import GenerationError
from showroom.core.types import HOME_KEY, ContentItem, ContentStore, PathKey

logger = logging.getLogger(__name__)

CONTENT_SUFFIX = ".toml"


class ContentGenerator:
    """Generates the content store from a source directory.

    Generation is all-or-nothing: either every file is loaded and validated,
    or GenerationError is raised and no store is produced.
    """

    def __init__(self, content_dir: Path) -> None:
        """Initialize generator.

        Args:
            content_dir: Directory containing page TOML files
        """
        self._content_dir = content_dir

    @property
    def content_dir(self) -> Path:
        """Directory containing page sources."""
        return self._content_dir

    def generate(self) -> ContentStore:
        """Load and validate all content.

        Returns:
            Fully populated ContentStore

        Raises:
            GenerationError: If the directory is missing or any file is invalid
        """
        if not self._content_dir.is_dir():
            raise GenerationError(f"Content directory not found: {self._content_dir}")

        items: dict[str, ContentItem] = {}
        sources: dict[str, Path] = {}

        for source_path in sorted(self._content_dir.rglob(f"*{CONTENT_SUFFIX}")):
            key = self._to_key(source_path)
            if key in items:
                raise GenerationError(
                    f"Duplicate content key {key!r}: {sources[key]} and {source_path}"
                )
            items[key] = self._load_item(key, source_path)
            sources[key] = source_path
            logger.debug(f"Loaded {key!r} from {source_path}")

        logger.info(f"Generated {len(items)} content items from {self._content_dir}")
        return ContentStore(items)

    def _to_key(self, source_path: Path) -> PathKey:
        """Convert a source file path to a store key.

        Args:
            source_path: Absolute path to a TOML file under content_dir

        Returns:
            Store key (e.g., "models/firetruck")
        """
        relative = source_path.relative_to(self._content_dir).with_suffix("")
        parts = list(relative.parts)

        if parts[-1] == "index":
            parts.pop()
        if not parts or parts == [HOME_KEY]:
            return HOME_KEY

        return PathKey("/".join(parts))

    def _load_item(self, key: PathKey, source_path: Path) -> ContentItem:
        """Parse and validate a single content file.

        Args:
            key: Store key for the file
            source_path: Path to TOML file

        Returns:
            ContentItem

        Raises:
            GenerationError: If the file can't be read or has invalid fields
        """
        try:
            with source_path.open("rb") as f:
                data = tomllib.load(f)
        except OSError as e:
            raise GenerationError(f"Cannot read {source_path}: {e}") from e
        except tomllib.TOMLDecodeError as e:
            raise GenerationError(f"Invalid TOML in {source_path}: {e}") from e

        title = data.get("title")
        if not isinstance(title, str) or not title:
            raise GenerationError(f"{source_path}: title must be a non-empty string")

        status = data.get("status")
        if not isinstance(status, str):
            raise GenerationError(f"{source_path}: status must be a string")

        body = data.get("body", "")
        if not isinstance(body, str):
            raise GenerationError(f"{source_path}: body must be a string")

        fields_raw = data.get("fields", {})
        if not isinstance(fields_raw, dict):
            raise GenerationError(f"{source_path}: fields must be a table")
        fields: dict[str, str] = {}
        for name, value in fields_raw.items():
            if not isinstance(value, str):
                raise GenerationError(f"{source_path}: fields.{name} must be a string")
            fields[name] = value

        return ContentItem(key=key, title=title, status=status, body=body, fields=fields)
