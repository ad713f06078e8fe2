# === FILE: site_scanner/crawler/crawler.py ===
from __future__ import annotations

import asyncio
import time
from typing import Callable, List, Optional

from aiohttp import ClientSession

from site_scanner.config import CrawlerConfig
from site_scanner.crawler.fetcher import PageFetcher, create_session, fetch_document
from site_scanner.crawler.filters import filter_containing, limit_pages
from site_scanner.crawler.models import PageDescriptor, PageResult
from site_scanner.logger import logger
from site_scanner.parser.sitemap_parser import parse_sitemap
from site_scanner.utils import SitemapSource, normalize_source, url_path

__all__ = ("SitemapCrawler", "PageObserver")

#: Called once per finished page, in completion order. Errors it raises are
#: logged and do not stop the crawl.
PageObserver = Callable[[PageResult], None]


class SitemapCrawler:
    """Загрузка sitemap одного сайта и SEO-обход всех его страниц.

    Typical use::

        async with SitemapCrawler("example.com") as crawler:
            await crawler.download()
            crawler.decode()
            crawler.limit(50)
            await crawler.crawl_all()
            results = crawler.sorted_results()

    A crawler owns its page list and its results; two crawlers never share
    state, so a master and a slave crawler can run side by side.
    """

    def __init__(
        self,
        url: str,
        config: Optional[CrawlerConfig] = None,
        session: Optional[ClientSession] = None,
        on_page: Optional[PageObserver] = None,
    ) -> None:
        self.source: SitemapSource = normalize_source(url)
        self.config = config or CrawlerConfig()
        self.session = session
        self.on_page = on_page
        self.sitemap_xml: Optional[bytes] = None
        self._owns_session = False
        self._pages: List[PageDescriptor] = []
        self._results: List[PageResult] = []

    async def __aenter__(self) -> SitemapCrawler:
        if self.session is None:
            self.session = create_session(self.config)
            self._owns_session = True
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._owns_session and self.session is not None:
            await self.session.close()
            self.session = None
            self._owns_session = False

    # ------------------------------------------------------------------ #
    # Source                                                             #
    # ------------------------------------------------------------------ #

    @property
    def url(self) -> str:
        return self.source.normalized_url

    @property
    def domain(self) -> str:
        return self.source.domain

    @property
    def pages(self) -> List[PageDescriptor]:
        return list(self._pages)

    @property
    def results(self) -> List[PageResult]:
        return list(self._results)

    # ------------------------------------------------------------------ #
    # Sitemap                                                            #
    # ------------------------------------------------------------------ #

    async def download(self) -> bytes:
        """Скачивает sitemap; FetchError пробрасывается вызывающему."""
        session = self._require_session()
        logger.info("Downloading sitemap %s", self.url)
        self.sitemap_xml = await fetch_document(session, self.url)
        logger.info("Sitemap %s downloaded (%d bytes)", self.url, len(self.sitemap_xml))
        return self.sitemap_xml

    def decode(self) -> List[PageDescriptor]:
        """Разбирает скачанный sitemap; одна попытка, без повторов."""
        if self.sitemap_xml is None:
            raise RuntimeError("Sitemap not downloaded, call download() first")
        self._pages = parse_sitemap(self.sitemap_xml)
        logger.info("Sitemap %s lists %d pages", self.url, len(self._pages))
        return self.pages

    def limit(self, limit: int) -> None:
        self._pages = limit_pages(self._pages, limit)

    def filter_containing(self, substring: str) -> None:
        self._pages = filter_containing(self._pages, substring)

    def path_list(self, without_domain: bool = False) -> List[str]:
        """Отсортированные уникальные URL страниц (или их пути без схемы и хоста)."""
        if without_domain:
            values = {url_path(page.loc) for page in self._pages}
        else:
            values = {page.loc for page in self._pages}
        return sorted(values)

    # ------------------------------------------------------------------ #
    # Pages                                                              #
    # ------------------------------------------------------------------ #

    async def crawl_all(self) -> List[PageResult]:
        """Fetch every page on a bounded pool; one result per page, page order kept."""
        session = self._require_session()
        pages = list(self._pages)
        if not pages:
            return []

        fetcher = PageFetcher(session)
        semaphore = asyncio.Semaphore(self.config.concurrency)
        logger.info("Crawling %d pages of %s", len(pages), self.domain)
        start = time.monotonic()

        async def crawl_one(page: PageDescriptor) -> PageResult:
            async with semaphore:
                result = await fetcher.fetch(page)
            if self.on_page is not None:
                try:
                    self.on_page(result)
                except Exception:
                    logger.exception("Page observer failed on %s", result.url)
            return result

        results = list(await asyncio.gather(*(crawl_one(page) for page in pages)))
        self._results.extend(results)

        duration = time.monotonic() - start
        failed = sum(1 for r in results if r.error is not None)
        logger.info(
            "Crawled %d pages in %.2f s, %d failed", len(results), duration, failed
        )
        return results

    def sorted_results(self) -> List[PageResult]:
        """Результаты, отсортированные по URL (по возрастанию)."""
        self._results.sort(key=lambda result: result.url)
        return list(self._results)

    def _require_session(self) -> ClientSession:
        if self.session is None:
            raise RuntimeError("Session not initialized, use 'async with SitemapCrawler(...)'")
        return self.session
