# File: tests/conftest.py
from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable, Callable, Mapping
from typing import List

import pytest
import pytest_asyncio
from aiohttp import web

from site_scanner.config import CrawlerConfig
from site_scanner.crawler.models import PageDescriptor
from site_scanner.logger import configure
from tests.helpers import Handler

ServeFn = Callable[[Mapping[str, Handler]], Awaitable[str]]


@pytest.fixture()
def crawler_config() -> CrawlerConfig:
    """Short timeout so that failing tests do not hang."""
    return CrawlerConfig(timeout=5.0, user_agent="TestAgent/1.0", concurrency=4)


@pytest.fixture()
def pages() -> List[PageDescriptor]:
    return [
        PageDescriptor("http://ex.com/blog/a"),
        PageDescriptor("http://ex.com/shop/b"),
        PageDescriptor("http://ex.com/blog/c"),
        PageDescriptor("http://ex.com/about"),
    ]


@pytest_asyncio.fixture
async def serve(unused_tcp_port_factory) -> AsyncIterator[ServeFn]:
    """Start an aiohttp app with the given GET routes, return its base URL."""
    runners: List[web.AppRunner] = []

    async def _serve(routes: Mapping[str, Handler]) -> str:
        app = web.Application()
        for path, handler in routes.items():
            app.router.add_get(path, handler)
        runner = web.AppRunner(app)
        await runner.setup()
        port = unused_tcp_port_factory()
        site = web.TCPSite(runner, "127.0.0.1", port)
        await site.start()
        runners.append(runner)
        return f"http://127.0.0.1:{port}"

    yield _serve

    for runner in runners:
        await runner.cleanup()


@pytest.fixture()
def dead_url(unused_tcp_port_factory) -> Callable[..., str]:
    """URL on a port nobody listens on: connection is refused."""
    port = unused_tcp_port_factory()
    return lambda path="/": f"http://127.0.0.1:{port}{path}"


@pytest.fixture(autouse=True)
def _reset_logging():
    """CliRunner swaps sys.stderr; rebind the project logger after every test."""
    yield
    configure(level="WARNING")
