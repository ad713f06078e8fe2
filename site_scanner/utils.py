# File: site_scanner/utils.py
"""site_scanner.utils: Утилитарные функции для обработки URL карты сайта."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence
from urllib.parse import urlparse

from site_scanner.errors import InvalidSourceError
from site_scanner.logger import logger

__all__: Sequence[str] = (
    "SitemapSource",
    "normalize_source",
    "extract_domain",
    "url_path",
)

_SCHEMES = ("http://", "https://")
_SITEMAP_FILE = "sitemap.xml"


@dataclass(frozen=True, slots=True)
class SitemapSource:
    """Нормализованный адрес карты сайта: исходная строка, полный URL и домен."""

    raw_input: str
    normalized_url: str
    domain: str


def normalize_source(raw: str) -> SitemapSource:
    """Превращает хост или URL в полный адрес sitemap.

    ``example.com`` → ``http://example.com/sitemap.xml``;
    ``https://example.com/`` → ``https://example.com/sitemap.xml``;
    ``https://example.com/map.xml`` остаётся без изменений.

    Raises:
        InvalidSourceError: если из результата нельзя извлечь хост.
    """
    url = raw.strip()
    if not url:
        raise InvalidSourceError("Sitemap address is empty")
    if not url.lower().startswith(_SCHEMES):
        url = "http://" + url

    if not url.endswith("xml"):
        url = url + ("" if url.endswith("/") else "/") + _SITEMAP_FILE

    domain = extract_domain(url)
    if not domain:
        raise InvalidSourceError(f"Cannot extract host from {raw!r}")

    logger.debug("Normalized sitemap source: %s -> %s", raw, url)
    return SitemapSource(raw_input=raw, normalized_url=url, domain=domain)


def extract_domain(url: str) -> str:
    """Возвращает хост из URL (пустая строка, если хоста нет)."""
    try:
        return urlparse(url).hostname or ""
    except ValueError:
        return ""


def url_path(url: str) -> str:
    """Путь URL без схемы и хоста; для корня сайта — ``/``."""
    return urlparse(url).path or "/"
