"""Application keys for type-safe app configuration access."""

from pathlib import Path

from aiohttp import web

from showroom.core.middleware import MiddlewareChain
from showroom.core.renderer import TemplateRenderer
from showroom.core.resolver import ContentResolver
from showroom.core.types import ContentStore

store_key = web.AppKey("store", ContentStore)
resolver_key = web.AppKey("resolver", ContentResolver)
renderer_key = web.AppKey("renderer", TemplateRenderer)
chain_key = web.AppKey("chain", MiddlewareChain)
home_title_key = web.AppKey("home_title", str)
static_dir_key = web.AppKey("static_dir", Path)
