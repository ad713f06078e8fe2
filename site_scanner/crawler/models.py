"""
Data models for the SiteScanner crawler.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True, slots=True)
class PageDescriptor:
    """One ``<url>`` entry of a sitemap. Only ``loc`` is used by the crawler."""

    loc: str
    lastmod: Optional[str] = None
    changefreq: Optional[str] = None
    priority: Optional[str] = None


@dataclass(slots=True)
class PageResult:
    """SEO snapshot of one crawled page, or the reason it could not be taken."""

    url: str
    title: Optional[str] = None
    heading: Optional[str] = None
    meta_description: Optional[str] = None
    meta_keywords: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def as_row(self) -> Tuple[Optional[str], ...]:
        """Row for the page report: URL, Title, H1, Description, Keywords, Error."""
        return (
            self.url,
            self.title,
            self.heading,
            self.meta_description,
            self.meta_keywords,
            self.error,
        )
