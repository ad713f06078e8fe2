# === FILE: site_scanner/parser/html_parser.py ===
"""HTML parsing utilities for SiteScanner.

Extracts the SEO fields that end up in the page report:

* title            — text of the first ``<title>``.
* heading          — text of the first ``<h1>``.
* meta_description — ``content`` of ``<meta name="Description">``.
* meta_keywords    — ``content`` of ``<meta name="Keywords">``.

Every field is ``None`` when the corresponding markup is absent. Parsing is
lenient (``html.parser``), so broken markup yields whatever could be recovered
instead of an exception.
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Optional, Union

from bs4 import BeautifulSoup
from bs4.element import Tag

__all__: Sequence[str] = ("SeoFields", "META_FIELDS", "extract_seo")

#: ``<meta name=...>`` literal (case-sensitive) -> SeoFields attribute
META_FIELDS: Mapping[str, str] = {
    "Keywords": "meta_keywords",
    "Description": "meta_description",
}


@dataclass(slots=True)
class SeoFields:
    """Fields extracted from one HTML document."""

    title: Optional[str] = None
    heading: Optional[str] = None
    meta_description: Optional[str] = None
    meta_keywords: Optional[str] = None


def _first_text(soup: BeautifulSoup, name: str) -> Optional[str]:
    tag = soup.find(name)
    if not isinstance(tag, Tag):
        return None
    return tag.get_text(" ", strip=True)


def extract_seo(html: Union[str, bytes], encoding: Optional[str] = None) -> SeoFields:
    """Parse *html* and return its :class:`SeoFields`.

    *encoding* is a hint for byte input (usually the response charset); without
    it BeautifulSoup sniffs the encoding itself. When several ``<meta>`` tags
    share a recognised name the last one wins.
    """
    if isinstance(html, bytes) and encoding:
        soup = BeautifulSoup(html, "html.parser", from_encoding=encoding)
    else:
        soup = BeautifulSoup(html, "html.parser")
    fields = SeoFields(
        title=_first_text(soup, "title"),
        heading=_first_text(soup, "h1"),
    )

    for meta in soup.find_all("meta"):
        if not isinstance(meta, Tag):
            continue
        attr = META_FIELDS.get(str(meta.get("name", "")))
        if attr is None:
            continue
        content = meta.get("content")
        setattr(fields, attr, None if content is None else str(content))

    return fields
