# File: site_scanner/errors.py
"""site_scanner.errors: Иерархия исключений SiteScanner.

Sitemap-level errors (:class:`InvalidSourceError`, :class:`FetchError`,
:class:`MalformedSitemapError`) abort the run for that sitemap and reach the
caller unchanged. Page-level errors (:class:`PageFetchError`,
:class:`PageParseError`) never leave :class:`~site_scanner.crawler.fetcher.PageFetcher`;
they end up in :attr:`PageResult.error`.
"""
from __future__ import annotations

from typing import Optional, Sequence

__all__: Sequence[str] = (
    "SiteScannerError",
    "InvalidSourceError",
    "FetchError",
    "MalformedSitemapError",
    "PageError",
    "PageFetchError",
    "PageParseError",
    "UnsupportedFormatError",
)


class SiteScannerError(Exception):
    """Base class for all errors raised by the package."""


class InvalidSourceError(SiteScannerError, ValueError):
    """Raw input could not be turned into a sitemap URL with a host."""


class FetchError(SiteScannerError):
    """The sitemap document itself could not be retrieved."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Cannot download {url}: {reason}")
        self.url = url
        self.reason = reason


class MalformedSitemapError(SiteScannerError):
    """Sitemap body is not XML or has no ``<urlset><url><loc>`` structure."""


class PageError(SiteScannerError):
    """Failure isolated to a single page."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(reason)
        self.url = url
        self.reason = reason


class PageFetchError(PageError):
    """Network error, timeout or non-2xx status for one page."""

    def __init__(self, url: str, reason: str, status: Optional[int] = None) -> None:
        super().__init__(url, reason)
        self.status = status


class PageParseError(PageError):
    """The page body could not be decoded or parsed."""


class UnsupportedFormatError(SiteScannerError, ValueError):
    """Report file extension is neither ``csv`` nor ``xlsx``."""
