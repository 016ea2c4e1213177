"""HTML page rendering with Jinja2 templates."""

from aiohttp import web
from jinja2 import Environment, PackageLoader, StrictUndefined, select_autoescape

from showroom.core.types import ContentItem

PAGE_TEMPLATE = "page.html"


class TemplateRenderer:
    """Renders pages from a title and an optional content item.

    Rendering is deterministic: the same title and item always produce the
    same markup. Writing the markup to a response is left to the caller.
    """

    def __init__(self, environment: Environment | None = None) -> None:
        """Initialize renderer.

        Args:
            environment: Jinja2 environment to use. Defaults to the templates
                         bundled with the showroom package.
        """
        self._env = environment or create_environment()
        self._template = self._env.get_template(PAGE_TEMPLATE)

    def render(self, title: str, item: ContentItem | None = None) -> str:
        """Render a page.

        Args:
            title: Page title
            item: Content item to bind, or None for a generic page

        Returns:
            Rendered HTML
        """
        fields = sorted(item.fields.items()) if item is not None else []
        return self._template.render(title=title, item=item, fields=fields)

    def render_response(self, title: str, item: ContentItem | None = None) -> web.Response:
        """Render a page into a text/html response."""
        return web.Response(text=self.render(title, item), content_type="text/html")


def create_environment() -> Environment:
    """Create the Jinja2 environment for bundled templates."""
    return Environment(
        loader=PackageLoader("showroom", "templates"),
        autoescape=select_autoescape(["html"]),
        undefined=StrictUndefined,
        keep_trailing_newline=True,
    )
