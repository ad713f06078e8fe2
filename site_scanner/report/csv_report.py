# site_scanner/report/csv_report.py

"""
Генерация CSV-отчёта для проекта SiteScanner.

Разделитель ``;`` и кавычки ``"`` — тот же диалект, что у прежних отчётов,
чтобы файлы открывались в Excel с европейской локалью без настройки.
"""
import csv
from pathlib import Path
from typing import Iterable, Optional, Sequence


def write_csv(
    header: Sequence[str],
    rows: Iterable[Sequence[Optional[str]]],
    output_path: Path | str,
) -> Path:
    """
    Записывает заголовок и строки в CSV по указанному пути.

    :param header: названия колонок
    :param rows: строки отчёта; ``None`` записывается как пустая ячейка
    :param output_path: путь к CSV-файлу
    :return: Path сохранённого файла
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open("w", encoding="utf-8", newline="") as f:
        writer = csv.writer(f, delimiter=";", quotechar='"', quoting=csv.QUOTE_MINIMAL)
        writer.writerow(header)
        for row in rows:
            writer.writerow(["" if cell is None else cell for cell in row])

    return output
