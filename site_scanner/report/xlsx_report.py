# File: site_scanner/report/xlsx_report.py
"""site_scanner.report.xlsx_report: Генерация XLSX-отчёта с помощью openpyxl."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional, Sequence, Union

from openpyxl import Workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE, Cell
from openpyxl.styles import Font, PatternFill
from openpyxl.utils import get_column_letter

from site_scanner import __version__

SHEET_TITLE = "Site Scanner"
HEADER_FILL = PatternFill(fill_type="solid", start_color="FFFF00", end_color="FFFF00")
_MAX_COLUMN_WIDTH = 80


def _write_text(cell: Cell, value: Optional[str]) -> None:
    # управляющие символы в XLSX недопустимы; строка на "=" остаётся текстом
    if value is None:
        return
    cell.value = ILLEGAL_CHARACTERS_RE.sub("", str(value))
    cell.data_type = "s"


def write_xlsx(
    header: Sequence[str],
    rows: Iterable[Sequence[Optional[str]]],
    output_path: Union[Path, str],
) -> Path:
    """Сохраняет лист «Site Scanner» с жёлтой шапкой и шириной колонок по содержимому.

    Args:
        header: названия колонок.
        rows: строки отчёта.
        output_path: путь к итоговому XLSX-файлу.

    Returns:
        Path до сохранённого файла.
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    workbook = Workbook()
    sheet = workbook.active
    sheet.title = SHEET_TITLE
    workbook.properties.lastModifiedBy = f"SiteScanner ({__version__})"

    sheet.append(list(header))
    for row_index, row in enumerate(rows, start=2):
        for column_index, value in enumerate(row, start=1):
            _write_text(sheet.cell(row=row_index, column=column_index), value)

    for cell in sheet[1]:
        cell.fill = HEADER_FILL
        cell.font = Font(bold=True)

    # openpyxl has no auto-size, approximate it from the longest value
    for index, column in enumerate(sheet.iter_cols(values_only=True), start=1):
        longest = max((len(str(value)) for value in column if value is not None), default=0)
        sheet.column_dimensions[get_column_letter(index)].width = min(longest + 2, _MAX_COLUMN_WIDTH)

    workbook.save(output)
    return output
