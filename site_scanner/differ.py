# File: site_scanner/differ.py
"""site_scanner.differ: Сравнение двух карт сайта (master против slave) по путям."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Tuple

__all__ = ["SitemapDiff", "diff_paths"]


def diff_paths(master_paths: Iterable[str], slave_paths: Iterable[str]) -> List[str]:
    """Пути master, которых нет у slave, по возрастанию.

    Both inputs are expected to come from ``SitemapCrawler.path_list(True)``;
    nothing is re-normalized here.
    """
    return sorted(set(master_paths) - set(slave_paths))


@dataclass(slots=True)
class SitemapDiff:
    """Результат сравнения: домены обоих сайтов и недостающие у slave пути."""

    master_domain: str
    slave_domain: str
    missing: List[str] = field(default_factory=list)

    @classmethod
    def compute(
        cls,
        master_domain: str,
        master_paths: Iterable[str],
        slave_domain: str,
        slave_paths: Iterable[str],
    ) -> SitemapDiff:
        return cls(master_domain, slave_domain, diff_paths(master_paths, slave_paths))

    def rows(self) -> Iterator[Tuple[str, str, str]]:
        """Path, Master URL, Slave URL should be."""
        for path in self.missing:
            yield path, f"http://{self.master_domain}{path}", f"http://{self.slave_domain}{path}"
