"""aiohttp server for Showroom.

Application factory, page handlers and route registration.
"""

import logging

from aiohttp import web

from showroom.app_keys import (
    chain_key,
    home_title_key,
    renderer_key,
    resolver_key,
    static_dir_key,
    store_key,
)
from showroom.assets import create_static_routes
from showroom.config import Config
from showroom.core.errors import ContentFetchError, ContentNotFoundError
from showroom.core.generator import ContentGenerator
from showroom.core.middleware import default_chain
from showroom.core.renderer import TemplateRenderer
from showroom.core.resolver import ContentResolver
from showroom.core.types import ContentStore
from showroom.forms import create_form_routes

logger = logging.getLogger(__name__)


async def home_page(request: web.Request) -> web.StreamResponse:
    """Render the Home page through the middleware chain.

    Serves both "/" and every other GET path that no earlier route matched.
    """
    renderer = request.app[renderer_key]
    title = request.app[home_title_key]

    async def render(_: web.Request) -> web.StreamResponse:
        return renderer.render_response(title)

    return await request.app[chain_key](request, render)


async def content_page(request: web.Request) -> web.StreamResponse:
    """Render the content item bound to the request path."""
    try:
        item = request.app[resolver_key].resolve(request.path)
    except ContentNotFoundError:
        raise web.HTTPNotFound() from None
    except ContentFetchError as e:
        logger.error(f"Content lookup failed for {request.path}: {e.cause}")
        return web.Response(status=500, text=f"Error fetching data: {e.cause}")

    renderer = request.app[renderer_key]

    async def render(_: web.Request) -> web.StreamResponse:
        return renderer.render_response(item.title, item)

    return await request.app[chain_key](request, render)


def create_page_routes(*, bind_content: bool = False) -> list[web.RouteDef]:
    fallback = content_page if bind_content else home_page
    return [
        web.get("/", home_page),
        web.get("/{path:.*}", fallback),
    ]


def create_app(config: Config, store: ContentStore) -> web.Application:
    """Create aiohttp application.

    Args:
        config: Application configuration
        store: Content store produced by ContentGenerator

    Returns:
        Configured aiohttp application
    """
    app = web.Application()

    app[store_key] = store
    app[resolver_key] = ContentResolver(store)
    app[renderer_key] = TemplateRenderer()
    app[chain_key] = default_chain()
    app[home_title_key] = config.pages.home_title
    app[static_dir_key] = config.static.dir

    # Fixed prefixes first, the catch-all page route must be last
    app.router.add_routes(create_static_routes(config.static.dir))
    app.router.add_routes(create_form_routes())
    app.router.add_routes(create_page_routes(bind_content=config.pages.bind_content))

    return app


def run_server(config: Config) -> None:
    """Generate content, then serve.

    Args:
        config: Application configuration

    Raises:
        GenerationError: If content generation fails; the server never listens
    """
    store = ContentGenerator(config.content.source_dir).generate()
    app = create_app(config, store)

    logger.info(f"Server is running on http://localhost:{config.server.port}")
    web.run_app(app, host=config.server.host, port=config.server.port, print=None)
