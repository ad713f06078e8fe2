# File: tests/helpers.py
"""Small builders shared by the test modules (sitemap documents and aiohttp handlers)."""
from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable

from aiohttp import web

Handler = Callable[[web.Request], Awaitable[web.StreamResponse]]

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"


def sitemap_xml(locs: Iterable[str]) -> str:
    """Build a sitemap document listing *locs* in order."""
    entries = "".join(f"<url><loc>{loc}</loc></url>" for loc in locs)
    return f'<?xml version="1.0" encoding="UTF-8"?><urlset xmlns="{SITEMAP_NS}">{entries}</urlset>'


def xml_handler(body: str) -> Handler:
    async def handle(_):
        return web.Response(text=body, content_type="application/xml")

    return handle


def html_handler(body: str, charset: str = "utf-8") -> Handler:
    async def handle(_):
        return web.Response(body=body.encode(charset), content_type="text/html", charset=charset)

    return handle


def status_handler(status: int) -> Handler:
    async def handle(_):
        return web.Response(status=status, text="nope")

    return handle
