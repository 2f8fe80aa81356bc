# === FILE: link_scout/config.py ===
"""
Модуль для загрузки и валидации конфигурации LinkScout.
Используется Pydantic для описания схемы и проверки данных.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Literal, Optional, Union
from urllib.parse import urlsplit, urlunsplit

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

DEFAULT_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"


def normalize_seed(raw: str) -> str:
    """
    Приводит введённый адрес к корневому URL обхода.

    Убирает пробелы и завершающие слеши, добавляет ``https://``,
    если схема не указана, переводит хост в нижний регистр.
    Пустой ввод — ValueError.
    """
    value = raw.strip().rstrip("/")
    if not value:
        raise ValueError("Invalid URL")
    if not value.startswith(("http://", "https://")):
        value = "https://" + value
    parts = urlsplit(value)
    return urlunsplit(parts._replace(netloc=parts.netloc.lower()))


class CrawlerConfig(BaseModel):
    """Конфигурация для одного запуска проверки ссылок."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    base_url: str = Field(..., description="Корневой URL обхода (граница области).")
    concurrency: Optional[int] = Field(10, ge=1, description="Число одновременных запросов.")
    dispatch_limit: Optional[int] = Field(10, ge=1, description="Число одновременно живых задач.")
    timeout: float = Field(30.0, gt=0, description="Таймаут на один запрос (секунд).")
    user_agent: str = Field(DEFAULT_USER_AGENT, min_length=1, description="Заголовок User-Agent.")
    canonical_scheme: Literal["http", "https"] = Field(
        "https", description="Схема, к которой приводятся все найденные ссылки."
    )
    output_path: Path = Field(Path("404_errors.txt"), description="Файл текстового отчёта.")

    @field_validator("base_url", mode="before")
    def _normalize_base_url(cls, v: Any) -> Any:
        if isinstance(v, str):
            return normalize_seed(v)
        return v


_DEFAULT_CFG = Path("configs/default.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Неправильный YAML в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень YAML должен быть mapping, получено {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Неправильный JSON в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень JSON должен быть mapping, получено {type(data).__name__}")
    return data


def read_config_file(path: Union[str, Path, None]) -> dict[str, Any]:
    """
    Читает YAML или JSON и возвращает словарь настроек без валидации.
    Без пути берётся configs/default.yaml, если он существует, иначе пустой словарь.
    """
    if path is None:
        if not _DEFAULT_CFG.is_file():
            return {}
        path_obj = _DEFAULT_CFG
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        return _read_yaml(path_obj)
    if suffix == ".json":
        return _read_json(path_obj)
    raise ValueError(f"Неподдерживаемый формат конфига: {suffix}")


def load_config(path: Union[str, Path, None] = None, **overrides: Any) -> CrawlerConfig:
    """
    Возвращает проверенный объект CrawlerConfig.

    Значения из ``overrides`` (например, URL, введённый пользователем)
    имеют приоритет над файлом. Ошибки схемы — pydantic ValidationError.
    """
    data = read_config_file(path)
    data.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return CrawlerConfig(**data)
    except ValidationError:
        raise


__all__ = ["CrawlerConfig", "load_config", "read_config_file", "normalize_seed", "DEFAULT_USER_AGENT"]
