# File: site_scanner/engine.py
"""site_scanner.engine: Orchestration layer для сканирования sitemap и сравнения двух сайтов."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import List, Optional

from site_scanner.config import CrawlerConfig
from site_scanner.crawler.crawler import PageObserver, SitemapCrawler
from site_scanner.crawler.models import PageResult
from site_scanner.differ import SitemapDiff
from site_scanner.logger import logger

__all__ = ["ScanReport", "start_scan", "start_compare"]


@dataclass(slots=True)
class ScanReport:
    """Итог сканирования одного sitemap: источник и отсортированные по URL страницы."""

    url: str
    domain: str
    pages: List[PageResult] = field(default_factory=list)

    @property
    def failed(self) -> List[PageResult]:
        return [page for page in self.pages if page.error is not None]


async def start_scan(
    url: str,
    config: Optional[CrawlerConfig] = None,
    *,
    limit: Optional[int] = None,
    containing: Optional[str] = None,
    on_page: Optional[PageObserver] = None,
) -> ScanReport:
    """Download, decode, filter and crawl one sitemap.

    Sitemap-level errors (InvalidSourceError, FetchError, MalformedSitemapError)
    propagate before any page is fetched; page failures are inside the report.
    """
    crawler = SitemapCrawler(url, config, on_page=on_page)
    async with crawler:
        await crawler.download()
        crawler.decode()
        if limit is not None:
            crawler.limit(limit)
        if containing:
            crawler.filter_containing(containing)
        await crawler.crawl_all()

    report = ScanReport(url=crawler.url, domain=crawler.domain, pages=crawler.sorted_results())
    logger.info(
        "Scan of %s finished: %d pages, %d failed",
        report.domain,
        len(report.pages),
        len(report.failed),
    )
    return report


async def _load(crawler: SitemapCrawler, containing: Optional[str]) -> List[str]:
    async with crawler:
        await crawler.download()
    crawler.decode()
    if containing:
        crawler.filter_containing(containing)
    return crawler.path_list(without_domain=True)


async def start_compare(
    master_url: str,
    slave_url: str,
    config: Optional[CrawlerConfig] = None,
    *,
    containing: Optional[str] = None,
) -> SitemapDiff:
    """Paths listed in the master sitemap but absent from the slave sitemap.

    Both sitemaps are downloaded concurrently; pages themselves are not fetched.
    """
    master = SitemapCrawler(master_url, config)
    slave = SitemapCrawler(slave_url, config)
    outcomes = await asyncio.gather(
        _load(master, containing), _load(slave, containing), return_exceptions=True
    )
    # both downloads are allowed to finish; the master's failure is reported first
    for outcome in outcomes:
        if isinstance(outcome, BaseException):
            raise outcome
    master_paths, slave_paths = outcomes

    diff = SitemapDiff.compute(master.domain, master_paths, slave.domain, slave_paths)
    logger.info(
        "Compared %s (%d paths) with %s (%d paths): %d missing",
        master.domain,
        len(master_paths),
        slave.domain,
        len(slave_paths),
        len(diff.missing),
    )
    return diff
