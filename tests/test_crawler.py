# File: tests/test_crawler.py
from __future__ import annotations

import asyncio
import random

import pytest
from aiohttp import web

from site_scanner.config import CrawlerConfig
from site_scanner.crawler.crawler import SitemapCrawler
from site_scanner.crawler.models import PageResult
from site_scanner.errors import FetchError, MalformedSitemapError
from tests.helpers import html_handler, sitemap_xml, status_handler, xml_handler


def test_constructor_normalizes_source():
    crawler = SitemapCrawler("example.com")
    assert crawler.url == "http://example.com/sitemap.xml"
    assert crawler.domain == "example.com"
    assert crawler.pages == []
    assert crawler.results == []


def test_decode_before_download():
    with pytest.raises(RuntimeError):
        SitemapCrawler("example.com").decode()


@pytest.mark.asyncio()
async def test_download_requires_session():
    with pytest.raises(RuntimeError):
        await SitemapCrawler("example.com").download()


@pytest.mark.asyncio()
async def test_end_to_end_partial_failure(serve, dead_url, crawler_config):
    """One reachable page, one unreachable: two results, the crawl is not aborted."""
    missing = dead_url("/b")
    site = await serve({"/a": html_handler("<title>A</title><h1>Hi</h1>")})
    found = f"{site}/a"
    sitemap_host = await serve({"/sitemap.xml": xml_handler(sitemap_xml([missing, found]))})

    async with SitemapCrawler(sitemap_host, crawler_config) as crawler:
        await crawler.download()
        assert len(crawler.decode()) == 2
        results = await crawler.crawl_all()

    assert len(results) == 2
    by_url = {r.url: r for r in crawler.sorted_results()}
    assert by_url[found] == PageResult(url=found, title="A", heading="Hi")
    failed = by_url[missing]
    assert failed.error
    assert failed.title is None and failed.heading is None


@pytest.mark.asyncio()
async def test_one_result_per_page_in_page_order(serve, crawler_config):
    """Pages finish in random order; results still follow the sitemap order."""
    count = 12

    async def page(request: web.Request) -> web.Response:
        await asyncio.sleep(random.uniform(0, 0.05))
        return web.Response(text=f"<title>{request.path}</title>", content_type="text/html")

    routes = {f"/p{i}": page for i in range(count)}
    routes["/p5"] = status_handler(500)
    base = await serve(routes)
    locs = [f"{base}/p{i}" for i in reversed(range(count))]
    sitemap_base = await serve({"/sitemap.xml": xml_handler(sitemap_xml(locs))})

    completed: list[PageResult] = []
    async with SitemapCrawler(sitemap_base, crawler_config, on_page=completed.append) as crawler:
        await crawler.download()
        crawler.decode()
        results = await crawler.crawl_all()

    assert [r.url for r in results] == locs
    assert [r.url for r in crawler.results] == locs
    assert sorted(r.url for r in completed) == sorted(locs)
    assert sum(1 for r in results if r.error) == 1
    assert [r.url for r in crawler.sorted_results()] == sorted(locs)


@pytest.mark.asyncio()
async def test_failing_observer_keeps_results(serve, crawler_config):
    base = await serve({"/a": html_handler("<h1>a</h1>"), "/b": html_handler("<h1>b</h1>")})
    locs = [f"{base}/a", f"{base}/b"]
    sitemap_base = await serve({"/sitemap.xml": xml_handler(sitemap_xml(locs))})

    def broken_observer(result: PageResult) -> None:
        raise RuntimeError("display is gone")

    async with SitemapCrawler(sitemap_base, crawler_config, on_page=broken_observer) as crawler:
        await crawler.download()
        crawler.decode()
        results = await crawler.crawl_all()

    assert [r.heading for r in results] == ["a", "b"]
    assert len(crawler.results) == 2


@pytest.mark.asyncio()
async def test_sorted_results_is_idempotent(serve, crawler_config):
    base = await serve({f"/{name}": html_handler(f"<h1>{name}</h1>") for name in "cab"})
    locs = [f"{base}/c", f"{base}/a", f"{base}/b"]
    sitemap_base = await serve({"/sitemap.xml": xml_handler(sitemap_xml(locs))})

    async with SitemapCrawler(f"{sitemap_base}/sitemap.xml", crawler_config) as crawler:
        await crawler.download()
        crawler.decode()
        await crawler.crawl_all()

    first = crawler.sorted_results()
    second = crawler.sorted_results()
    assert [r.url for r in first] == [f"{base}/a", f"{base}/b", f"{base}/c"]
    assert first == second
    assert [r.heading for r in first] == ["a", "b", "c"]


@pytest.mark.asyncio()
async def test_limit_and_filter_before_crawl(serve, crawler_config):
    hits: list[str] = []

    async def page(request: web.Request) -> web.Response:
        hits.append(request.path)
        return web.Response(text="<title>x</title>", content_type="text/html")

    base = await serve({f"/{path}": page for path in ("blog/1", "shop/2", "blog/3", "blog/4")})
    locs = [f"{base}/blog/1", f"{base}/shop/2", f"{base}/blog/3", f"{base}/blog/4"]
    sitemap_base = await serve({"/sitemap.xml": xml_handler(sitemap_xml(locs))})

    async with SitemapCrawler(sitemap_base, crawler_config) as crawler:
        await crawler.download()
        crawler.decode()
        crawler.limit(3)
        crawler.filter_containing("/blog/")
        assert [p.loc for p in crawler.pages] == [f"{base}/blog/1", f"{base}/blog/3"]
        results = await crawler.crawl_all()

    assert len(results) == 2
    assert sorted(hits) == ["/blog/1", "/blog/3"]


@pytest.mark.asyncio()
async def test_crawl_all_with_no_pages(serve, crawler_config):
    sitemap_base = await serve(
        {"/sitemap.xml": xml_handler(sitemap_xml(["http://ex.com/a"]))}
    )
    async with SitemapCrawler(sitemap_base, crawler_config) as crawler:
        await crawler.download()
        crawler.decode()
        crawler.limit(0)
        assert await crawler.crawl_all() == []
    assert crawler.sorted_results() == []


@pytest.mark.asyncio()
async def test_download_failure_is_fetch_error(dead_url, crawler_config):
    async with SitemapCrawler(dead_url("/sitemap.xml"), crawler_config) as crawler:
        with pytest.raises(FetchError):
            await crawler.download()
    assert crawler.sitemap_xml is None


@pytest.mark.asyncio()
async def test_missing_sitemap_is_fetch_error(serve, crawler_config):
    base = await serve({"/": html_handler("home")})
    async with SitemapCrawler(base, crawler_config) as crawler:
        with pytest.raises(FetchError):
            await crawler.download()


@pytest.mark.asyncio()
async def test_malformed_sitemap(serve, crawler_config):
    base = await serve({"/sitemap.xml": html_handler("<html><body>oops</body></html>")})
    async with SitemapCrawler(base, crawler_config) as crawler:
        await crawler.download()
        with pytest.raises(MalformedSitemapError):
            crawler.decode()
    assert crawler.pages == []


@pytest.mark.asyncio()
async def test_external_session_is_not_closed(serve, crawler_config):
    from site_scanner.crawler.fetcher import create_session

    base = await serve({"/sitemap.xml": xml_handler(sitemap_xml(["http://ex.com/a"]))})
    async with create_session(crawler_config) as session:
        async with SitemapCrawler(base, crawler_config, session=session) as crawler:
            await crawler.download()
        assert not session.closed


def test_path_list():
    crawler = SitemapCrawler("ex.com")
    crawler.sitemap_xml = sitemap_xml(
        [
            "http://ex.com/b",
            "http://ex.com/a?page=2",
            "http://ex.com/a",
            "http://ex.com",
        ]
    ).encode()
    crawler.decode()

    assert crawler.path_list() == [
        "http://ex.com",
        "http://ex.com/a",
        "http://ex.com/a?page=2",
        "http://ex.com/b",
    ]
    assert crawler.path_list(without_domain=True) == ["/", "/a", "/b"]


def test_config_defaults_are_used():
    crawler = SitemapCrawler("ex.com")
    assert crawler.config == CrawlerConfig()
