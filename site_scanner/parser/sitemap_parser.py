# File: site_scanner/parser/sitemap_parser.py
"""site_scanner.parser.sitemap_parser: Модуль для парсинга sitemap.xml в список страниц."""

from __future__ import annotations

from typing import List, Optional, Union

from lxml import etree

from site_scanner.crawler.models import PageDescriptor
from site_scanner.errors import MalformedSitemapError
from site_scanner.logger import logger


def _local_name(element: etree._Element) -> str:
    return etree.QName(element).localname


def _child_text(entry: etree._Element, name: str) -> Optional[str]:
    node = entry.find(f"{{*}}{name}")
    if node is None or node.text is None:
        return None
    text = node.text.strip()
    return text or None


def parse_sitemap(xml_content: Union[bytes, str]) -> List[PageDescriptor]:
    """Разбирает XML sitemap и возвращает страницы в порядке объявления.

    Args:
        xml_content: содержимое sitemap.xml (байты или строка).

    Returns:
        Список PageDescriptor, по одному на каждый ``<url>``. Карта с одним
        ``<url>`` даёт список из одного элемента.

    Raises:
        MalformedSitemapError: XML невалиден, корень не ``urlset`` или у
            ``<url>`` нет ``<loc>``. Пустой ``<urlset/>`` даёт пустой список.

    Пример:
    ```python
    from site_scanner.parser.sitemap_parser import parse_sitemap

    with open('sitemap.xml', 'rb') as f:
        pages = parse_sitemap(f.read())
    print([p.loc for p in pages])
    ```
    """
    if isinstance(xml_content, str):
        xml_content = xml_content.encode("utf-8")
    if not xml_content.strip():
        raise MalformedSitemapError("Sitemap is empty")

    parser = etree.XMLParser(ns_clean=True, recover=False, resolve_entities=False, no_network=True)
    try:
        root = etree.fromstring(xml_content, parser=parser)
    except etree.XMLSyntaxError as exc:
        raise MalformedSitemapError(f"Sitemap is not well-formed XML: {exc}") from exc

    if _local_name(root) != "urlset":
        raise MalformedSitemapError(f"Unexpected root element <{_local_name(root)}>, expected <urlset>")

    entries = root.findall("{*}url")

    pages: List[PageDescriptor] = []
    for position, entry in enumerate(entries, start=1):
        loc = _child_text(entry, "loc")
        if loc is None:
            raise MalformedSitemapError(f"<url> entry #{position} has no <loc>")
        pages.append(
            PageDescriptor(
                loc=loc,
                lastmod=_child_text(entry, "lastmod"),
                changefreq=_child_text(entry, "changefreq"),
                priority=_child_text(entry, "priority"),
            )
        )

    logger.debug("Decoded %d sitemap entries", len(pages))
    return pages
