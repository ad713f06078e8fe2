# File: site_scanner/report/__init__.py
"""site_scanner.report: Экспорт результатов (CSV и XLSX), используемый CLI и тестами."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, Iterable, Optional, Sequence, Union

from site_scanner.crawler.models import PageResult
from site_scanner.differ import SitemapDiff
from site_scanner.errors import UnsupportedFormatError
from site_scanner.report.csv_report import write_csv
from site_scanner.report.xlsx_report import write_xlsx

PAGES_HEADER = ("URL", "Title", "H1", "Description", "Keywords", "Error message")
MISSING_HEADER = ("Path", "Master URL", "Slave URL should be")

_Writer = Callable[[Sequence[str], Iterable[Sequence[Optional[str]]], Union[str, Path]], Path]

WRITERS: Dict[str, _Writer] = {
    "csv": write_csv,
    "xlsx": write_xlsx,
}


def report_format(path: Union[str, Path]) -> str:
    """Формат отчёта по расширению файла; UnsupportedFormatError для прочих."""
    extension = Path(path).suffix.lstrip(".").lower()
    if extension not in WRITERS:
        raise UnsupportedFormatError(f"Extension {extension or '(none)'} is not implemented.")
    return extension


def render_pages(pages: Iterable[PageResult], path: Union[str, Path]) -> Path:
    """Сохраняет SEO-отчёт по страницам (в том порядке, в котором они переданы)."""
    writer = WRITERS[report_format(path)]
    return writer(PAGES_HEADER, (page.as_row() for page in pages), path)


def render_missing(diff: SitemapDiff, path: Union[str, Path]) -> Path:
    """Сохраняет список путей master, отсутствующих у slave."""
    writer = WRITERS[report_format(path)]
    return writer(MISSING_HEADER, diff.rows(), path)


__all__ = [
    "MISSING_HEADER",
    "PAGES_HEADER",
    "render_missing",
    "render_pages",
    "report_format",
]
