#!/usr/bin/env python3
# === FILE: link_scout/cli.py ===
"""
Точка входа для запуска LinkScout через командную строку.

Без подкоманды запрашивает адрес сайта и выполняет ``check``.

Команды:
  check     Обойти сайт и сохранить список 404-ссылок
  config    Показать текущую конфигурацию

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (default: configs/default.yaml, если есть)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (stdout, если не указан)

Команда check опции:
  --output PATH       Текстовый отчёт (default: 404_errors.txt)
  --json PATH         Сохранить JSON-отчёт в файл
  --html PATH         Сохранить HTML-отчёт в файл
  --scan-timeout SEC  Таймаут всего обхода (секунд)

Пример:
  link-scout check example.com --json report.json
"""
import asyncio
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from link_scout import __version__
from link_scout.config import load_config, normalize_seed, read_config_file
from link_scout.engine import start_scan
from link_scout.logger import init_logging
from link_scout.report.html_report import render_html
from link_scout.report.json_report import render_json
from link_scout.report.text_report import render_text

CONTEXT_SETTINGS = dict(help_option_names=["--help"])
PROMPT = "Enter the website URL to crawl (e.g., example.com or https://example.com)"


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


def _ask_url(url):
    if url is None:
        url = click.prompt(PROMPT, default="", show_default=False, prompt_suffix="\n")
    try:
        return normalize_seed(url)
    except ValueError:
        return None


@click.group(context_settings=CONTEXT_SETTINGS, invoke_without_command=True)
@click.version_option(__version__, '--version', '-v', message='LinkScout, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML/JSON.'
)
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Уровень логирования'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Путь к файлу логов (stdout, если не указан)'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file):
    """Проверка сайта на битые ссылки (404)."""
    init_logging(level=log_level, log_file=str(log_file) if log_file else None)
    try:
        read_config_file(config_path)
    except Exception as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config_path'] = config_path
    if ctx.invoked_subcommand is None:
        ctx.invoke(check)


@cli.command('check', context_settings=CONTEXT_SETTINGS)
@click.argument('url', required=False)
@click.option(
    '--output', '-o', 'output_path',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Файл текстового отчёта (default: 404_errors.txt)'
)
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить JSON-отчёт в файл'
)
@click.option(
    '--html', '-h', 'html_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить HTML-отчёт в файл'
)
@click.option(
    '--scan-timeout', 'scan_timeout',
    type=float,
    default=None,
    help='Таймаут всего обхода (секунд)'
)
@click.pass_context
def check(ctx, url=None, output_path=None, json_output=None, html_output=None, scan_timeout=None):
    """Обойти сайт и сохранить найденные 404-ссылки."""
    base_url = _ask_url(url)
    if base_url is None:
        click.echo('Invalid URL')
        return

    try:
        cfg = load_config(ctx.obj['config_path'], base_url=base_url, output_path=output_path)
    except (ValidationError, ValueError, TypeError, OSError) as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')

    report = asyncio.run(start_scan(cfg, scan_timeout=scan_timeout))

    try:
        saved = render_text(report, cfg.output_path)
    except OSError as e:
        print_error(f'Ошибка при сохранении отчёта: {e}')

    if json_output:
        try:
            click.echo(f'JSON report: {render_json(report, json_output)}')
        except Exception as e:
            print_error(f'Ошибка при сохранении JSON: {e}')

    if html_output:
        try:
            click.echo(f'HTML report: {render_html(report, html_output)}')
        except Exception as e:
            print_error(f'Ошибка при сохранении HTML: {e}')

    click.echo(f'\nCrawling completed. Found {len(report.findings)} 404 errors.')
    click.echo(f'Results have been saved to {saved}')


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.argument('url', required=False, default='example.com')
@click.pass_context
def show_config(ctx, url):
    """Показать текущую конфигурацию в JSON."""
    try:
        cfg = load_config(ctx.obj['config_path'], base_url=url)
    except (ValidationError, ValueError, TypeError, OSError) as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
