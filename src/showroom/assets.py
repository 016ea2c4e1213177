"""Static asset serving.

Files under the configured static directory are served at /static/ and
favicon.ico at the site root.
"""

from pathlib import Path

from aiohttp import web

from showroom.app_keys import static_dir_key

FAVICON_NAME = "favicon.ico"


def create_static_routes(static_dir: Path) -> list[web.AbstractRouteDef]:
    """Create routes for static assets.

    The /static/ prefix is only registered when the directory exists;
    aiohttp refuses to serve a missing directory.

    Args:
        static_dir: Directory containing static assets

    Returns:
        List of route definitions
    """
    routes: list[web.AbstractRouteDef] = [web.get("/favicon.ico", serve_favicon)]
    if static_dir.is_dir():
        routes.append(web.static("/static", static_dir))
    return routes


async def serve_favicon(request: web.Request) -> web.FileResponse:
    """Serve favicon from static directory."""
    favicon_path = request.app[static_dir_key] / FAVICON_NAME
    if not favicon_path.is_file():
        raise web.HTTPNotFound()
    return web.FileResponse(favicon_path)
