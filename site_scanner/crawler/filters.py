# site_scanner/crawler/filters.py
"""
Pure filters over sitemap page lists. Both return new lists and keep order.
"""
from __future__ import annotations

from typing import List, Sequence

from site_scanner.crawler.models import PageDescriptor


def limit_pages(pages: Sequence[PageDescriptor], limit: int) -> List[PageDescriptor]:
    """Keep the first *limit* pages; ``0`` gives an empty list."""
    if limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")
    return list(pages[:limit])


def filter_containing(pages: Sequence[PageDescriptor], substring: str) -> List[PageDescriptor]:
    """Keep pages whose ``loc`` contains *substring* (case-sensitive)."""
    if not substring:
        return list(pages)
    return [page for page in pages if substring in page.loc]
