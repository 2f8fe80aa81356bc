# link_scout/report/text_report.py

"""
Текстовый отчёт LinkScout: одна строка на каждую найденную 404-ссылку.
"""
from pathlib import Path

from link_scout.aggregator import CrawlReport


def render_text(report: CrawlReport, output_path: Path | str) -> Path:
    """
    Сохраняет строки ``<url> (linked from <referrer>)`` в файл, перезаписывая его.

    :param report: объект CrawlReport с результатами обхода
    :param output_path: путь к текстовому файлу
    :return: Path сохранённого файла
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open("w", encoding="utf-8", newline="\n") as f:
        for line in report.lines():
            f.write(line + "\n")

    return output
