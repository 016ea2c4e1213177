"""Tests for static asset routes."""

from pathlib import Path

import pytest
from showroom.config import Config
from showroom.core.types import ContentStore
from showroom.server import create_app


class TestStaticRoutes:
    """Tests for /static/ and /favicon.ico."""

    @pytest.mark.asyncio
    async def test__static_file__served(
        self, test_config: Config, store: ContentStore, aiohttp_client
    ) -> None:
        js_dir = test_config.static.dir / "js"
        js_dir.mkdir()
        (js_dir / "main.js").write_text("console.log('hi');")
        test_client = await aiohttp_client(create_app(test_config, store))

        response = await test_client.get("/static/js/main.js")

        assert response.status == 200
        assert await response.text() == "console.log('hi');"

    @pytest.mark.asyncio
    async def test__missing_static_file__returns_404(
        self, test_config: Config, store: ContentStore, aiohttp_client
    ) -> None:
        """Missing assets are 404, not the Home page fallback."""
        test_client = await aiohttp_client(create_app(test_config, store))

        response = await test_client.get("/static/missing.js")

        assert response.status == 404

    @pytest.mark.asyncio
    async def test__favicon__served(
        self, test_config: Config, store: ContentStore, aiohttp_client
    ) -> None:
        (test_config.static.dir / "favicon.ico").write_bytes(b"\x00\x00\x01\x00")
        test_client = await aiohttp_client(create_app(test_config, store))

        response = await test_client.get("/favicon.ico")

        assert response.status == 200
        assert await response.read() == b"\x00\x00\x01\x00"

    @pytest.mark.asyncio
    async def test__missing_favicon__returns_404(
        self, test_config: Config, store: ContentStore, aiohttp_client
    ) -> None:
        test_client = await aiohttp_client(create_app(test_config, store))

        response = await test_client.get("/favicon.ico")

        assert response.status == 404

    @pytest.mark.asyncio
    async def test__missing_static_dir__app_still_starts(
        self, test_config: Config, store: ContentStore, tmp_path: Path, aiohttp_client
    ) -> None:
        config = test_config.with_overrides(static_dir=tmp_path / "nope")
        test_client = await aiohttp_client(create_app(config, store))

        response = await test_client.get("/")

        assert response.status == 200
