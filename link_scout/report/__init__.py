# File: link_scout/report/__init__.py
"""link_scout.report: Запись отчётов (текст, JSON и HTML), используемая CLI и тестами."""

from link_scout.report.html_report import render_html
from link_scout.report.json_report import render_json
from link_scout.report.text_report import render_text

__all__ = ["render_text", "render_json", "render_html"]
