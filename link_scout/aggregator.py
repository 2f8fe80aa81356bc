# File: link_scout/aggregator.py
"""link_scout.aggregator: Сводный отчёт по результатам проверки ссылок."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List

from link_scout.crawler.models import Finding


@dataclass(slots=True)
class CrawlReport:
    """Итоги одного обхода: найденные 404 и статистика."""

    base_url: str
    findings: List[Finding] = field(default_factory=list)
    pages_checked: int = 0
    duration: float = 0.0
    completed: bool = True

    def lines(self) -> List[str]:
        """Строки текстового отчёта: ``<url> (linked from <referrer>)``."""
        return [f.line() for f in self.findings]

    def as_dict(self) -> Dict[str, Any]:
        return {
            "base_url": self.base_url,
            "pages_checked": self.pages_checked,
            "broken_count": len(self.findings),
            "duration": round(self.duration, 3),
            "completed": self.completed,
            "findings": [{"url": f.url, "referrer": f.referrer} for f in self.findings],
        }

    def json(self, *, pretty: bool = False) -> str:
        """Возвращает JSON-представление отчёта."""
        return json.dumps(self.as_dict(), ensure_ascii=False, indent=2 if pretty else None)


def build_report(
    base_url: str,
    findings: Iterable[Finding],
    *,
    pages_checked: int = 0,
    duration: float = 0.0,
    completed: bool = True,
) -> CrawlReport:
    """Собирает CrawlReport, убирая повторные находки с сохранением порядка."""
    unique = list(dict.fromkeys(findings))
    return CrawlReport(
        base_url=base_url,
        findings=unique,
        pages_checked=pages_checked,
        duration=duration,
        completed=completed,
    )


__all__ = ["CrawlReport", "build_report"]
