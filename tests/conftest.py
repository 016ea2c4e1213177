"""Shared test fixtures."""

from pathlib import Path

import pytest
from showroom.config import Config, ContentConfig, PagesConfig, ServerConfig, StaticConfig
from showroom.core.generator import ContentGenerator
from showroom.core.types import ContentStore


@pytest.fixture
def content_dir(tmp_path: Path) -> Path:
    """Create a content directory with a home page and a nested model page."""
    content = tmp_path / "content"
    (content / "models").mkdir(parents=True)
    (content / "home.toml").write_text(
        'title = "Welcome"\nstatus = "published"\nbody = "Fire apparatus for sale."\n'
    )
    (content / "models" / "firetruck.toml").write_text(
        'title = "Firetruck"\n'
        'status = "available"\n'
        'body = "Ladder truck."\n'
        "\n"
        "[fields]\n"
        'year = "2019"\n'
        'price = "$450,000"\n'
    )
    return content


@pytest.fixture
def store(content_dir: Path) -> ContentStore:
    return ContentGenerator(content_dir).generate()


@pytest.fixture
def test_config(tmp_path: Path, content_dir: Path) -> Config:
    """Create a test configuration with tmp_path directories."""
    static_dir = tmp_path / "static"
    static_dir.mkdir(exist_ok=True)

    return Config(
        server=ServerConfig(),
        content=ContentConfig(source_dir=content_dir),
        static=StaticConfig(dir=static_dir),
        pages=PagesConfig(),
    )
