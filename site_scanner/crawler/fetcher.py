# site_scanner/crawler/fetcher.py
"""
Fetcher module: HTTP downloads of the sitemap document and of single pages.

* :func:`fetch_document` is used for the sitemap itself; every failure is fatal and
  surfaces as :class:`~site_scanner.errors.FetchError`.
* :class:`PageFetcher` turns one :class:`PageDescriptor` into exactly one
  :class:`PageResult`; failures are recorded in ``PageResult.error`` and never
  raised.
"""
from __future__ import annotations

import asyncio
from dataclasses import asdict
from typing import Optional, Tuple

from aiohttp import ClientError, ClientResponse, ClientSession, ClientTimeout, TCPConnector

from site_scanner.config import CrawlerConfig
from site_scanner.crawler.models import PageDescriptor, PageResult
from site_scanner.errors import FetchError, PageError, PageFetchError, PageParseError
from site_scanner.logger import logger
from site_scanner.parser.html_parser import extract_seo


def create_session(config: CrawlerConfig) -> ClientSession:
    """Build the aiohttp session shared by all requests of one crawler."""
    return ClientSession(
        timeout=ClientTimeout(total=config.timeout),
        headers={"User-Agent": config.user_agent},
        connector=TCPConnector(limit=config.concurrency, ssl=config.verify_ssl),
        raise_for_status=False,
    )


def _describe(exc: BaseException) -> str:
    if isinstance(exc, asyncio.TimeoutError):
        return "Request timed out"
    message = str(exc)
    return f"{type(exc).__name__}: {message}" if message else type(exc).__name__


def _status_reason(resp: ClientResponse) -> str:
    return f"HTTP {resp.status} {resp.reason or ''}".rstrip()


async def fetch_document(session: ClientSession, url: str) -> bytes:
    """Return the body of *url*; raise FetchError on network error or non-2xx."""
    try:
        async with session.get(url, allow_redirects=True) as resp:
            if not 200 <= resp.status < 300:
                raise FetchError(url, _status_reason(resp))
            return await resp.read()
    except (ClientError, asyncio.TimeoutError, ValueError) as exc:
        raise FetchError(url, _describe(exc)) from exc


class PageFetcher:
    """Fetches one page and extracts its SEO fields, isolating any failure."""

    def __init__(self, session: ClientSession) -> None:
        self.session = session

    async def fetch(self, page: PageDescriptor) -> PageResult:
        """Return the PageResult for *page*. Never raises on page failures."""
        url = page.loc
        try:
            body, charset = await self._get(url)
            result = self._parse(url, body, charset)
        except PageError as exc:
            logger.warning("Page %s failed: %s", url, exc.reason)
            return PageResult(url=url, error=exc.reason)
        except Exception as exc:  # pragma: no cover
            logger.exception("Unexpected error while crawling %s", url)
            return PageResult(url=url, error=_describe(exc))

        logger.debug("Page %s parsed (title=%r)", url, result.title)
        return result

    async def _get(self, url: str) -> Tuple[bytes, Optional[str]]:
        try:
            async with self.session.get(url, allow_redirects=True) as resp:
                if not 200 <= resp.status < 300:
                    raise PageFetchError(url, _status_reason(resp), status=resp.status)
                return await resp.read(), resp.charset
        except (ClientError, asyncio.TimeoutError, ValueError) as exc:
            raise PageFetchError(url, _describe(exc)) from exc

    @staticmethod
    def _parse(url: str, body: bytes, charset: Optional[str]) -> PageResult:
        try:
            fields = extract_seo(body, encoding=charset)
        except Exception as exc:
            raise PageParseError(url, f"Cannot parse HTML: {_describe(exc)}") from exc
        return PageResult(url=url, **asdict(fields))
