"""Configuration management for Showroom.

Supports TOML configuration format with auto-discovery, plus the PORT
environment variable.
"""

import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path

CONFIG_FILENAME = "showroom.toml"
DEFAULT_PORT = 6060
PORT_ENV_VAR = "PORT"


@dataclass
class ServerConfig:
    """Server configuration."""

    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT


@dataclass
class ContentConfig:
    """Content source configuration."""

    source_dir: Path = field(default_factory=lambda: Path("content"))


@dataclass
class StaticConfig:
    """Static asset configuration."""

    dir: Path = field(default_factory=lambda: Path("static"))


@dataclass
class PagesConfig:
    """Page routing configuration."""

    home_title: str = "Home"
    bind_content: bool = False


@dataclass
class Config:
    """Application configuration."""

    server: ServerConfig
    content: ContentConfig
    static: StaticConfig
    pages: PagesConfig
    config_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path | None = None) -> "Config":
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for showroom.toml in current directory and parents.

        Args:
            config_path: Optional explicit path to config file

        Returns:
            Config instance with defaults for missing sections

        Raises:
            FileNotFoundError: If explicit config_path doesn't exist
            ValueError: If configuration is invalid
        """
        if config_path is not None:
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return cls._load_from_file(config_path)

        discovered_path = cls._discover_config()
        if discovered_path is None:
            return cls._default()

        return cls._load_from_file(discovered_path)

    @classmethod
    def _discover_config(cls) -> Path | None:
        current = Path.cwd()
        while True:
            candidate = current / CONFIG_FILENAME
            if candidate.exists():
                return candidate
            parent = current.parent
            if parent == current:
                return None
            current = parent

    @classmethod
    def _default(cls) -> "Config":
        return cls(
            server=ServerConfig(),
            content=ContentConfig(),
            static=StaticConfig(),
            pages=PagesConfig(),
        )

    @classmethod
    def _load_from_file(cls, path: Path) -> "Config":
        """Load configuration from a specific file.

        Args:
            path: Path to TOML configuration file

        Returns:
            Config instance

        Raises:
            ValueError: If configuration is invalid
        """
        with path.open("rb") as f:
            data = tomllib.load(f)

        config_dir = path.parent

        return cls(
            server=cls._parse_server(data.get("server")),
            content=cls._parse_content(data.get("content"), config_dir),
            static=cls._parse_static(data.get("static"), config_dir),
            pages=cls._parse_pages(data.get("pages")),
            config_path=path,
        )

    @classmethod
    def _parse_server(cls, data: object) -> ServerConfig:
        if data is None:
            return ServerConfig()

        if not isinstance(data, dict):
            raise ValueError("server section must be a dictionary")

        host = data.get("host", "0.0.0.0")
        if not isinstance(host, str):
            raise ValueError("server.host must be a string")

        port = data.get("port", DEFAULT_PORT)
        if not isinstance(port, int) or isinstance(port, bool):
            raise ValueError("server.port must be an integer")

        return ServerConfig(host=host, port=port)

    @classmethod
    def _parse_content(cls, data: object, config_dir: Path) -> ContentConfig:
        """Parse content configuration section.

        Args:
            data: Raw content section data
            config_dir: Directory containing config file (for relative paths)

        Returns:
            ContentConfig instance
        """
        if data is None:
            return ContentConfig(source_dir=config_dir / "content")

        if not isinstance(data, dict):
            raise ValueError("content section must be a dictionary")

        source_dir = data.get("source_dir", "content")
        if not isinstance(source_dir, str):
            raise ValueError("content.source_dir must be a string")

        return ContentConfig(source_dir=config_dir / source_dir)

    @classmethod
    def _parse_static(cls, data: object, config_dir: Path) -> StaticConfig:
        if data is None:
            return StaticConfig(dir=config_dir / "static")

        if not isinstance(data, dict):
            raise ValueError("static section must be a dictionary")

        static_dir = data.get("dir", "static")
        if not isinstance(static_dir, str):
            raise ValueError("static.dir must be a string")

        return StaticConfig(dir=config_dir / static_dir)

    @classmethod
    def _parse_pages(cls, data: object) -> PagesConfig:
        if data is None:
            return PagesConfig()

        if not isinstance(data, dict):
            raise ValueError("pages section must be a dictionary")

        home_title = data.get("home_title", "Home")
        if not isinstance(home_title, str):
            raise ValueError("pages.home_title must be a string")

        bind_content = data.get("bind_content", False)
        if not isinstance(bind_content, bool):
            raise ValueError("pages.bind_content must be a boolean")

        return PagesConfig(home_title=home_title, bind_content=bind_content)

    def with_overrides(
        self,
        *,
        host: str | None = None,
        port: int | None = None,
        content_dir: Path | None = None,
        static_dir: Path | None = None,
    ) -> "Config":
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config. The original
        Config is not modified.

        Args:
            host: Override server.host
            port: Override server.port
            content_dir: Override content.source_dir
            static_dir: Override static.dir

        Returns:
            New Config instance with overrides applied
        """
        server = self.server
        if host is not None or port is not None:
            server = replace(
                self.server,
                host=host if host is not None else self.server.host,
                port=port if port is not None else self.server.port,
            )

        content = self.content
        if content_dir is not None:
            content = replace(self.content, source_dir=content_dir)

        static = self.static
        if static_dir is not None:
            static = replace(self.static, dir=static_dir)

        return replace(self, server=server, content=content, static=static)

    def with_env(self, environ: Mapping[str, str] | None = None) -> "Config":
        """Apply the PORT environment variable.

        An unset or empty PORT keeps the configured port.

        Args:
            environ: Environment mapping (defaults to os.environ)

        Returns:
            New Config instance

        Raises:
            ValueError: If PORT is set but not an integer
        """
        env = os.environ if environ is None else environ
        raw_port = env.get(PORT_ENV_VAR, "").strip()
        if not raw_port:
            return self

        try:
            port = int(raw_port)
        except ValueError:
            raise ValueError(f"{PORT_ENV_VAR} must be an integer, got {raw_port!r}") from None

        return self.with_overrides(port=port)
