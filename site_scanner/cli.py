# === FILE: site_scanner/cli.py ===
#!/usr/bin/env python3
"""
Точка входа для запуска SiteScanner через командную строку.

Команды:
  sitemap URL FILE                    SEO-обход всех страниц sitemap, отчёт в CSV/XLSX
  compare-sitemaps MASTER SLAVE FILE  Пути master, которых нет в sitemap slave

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (таймаут, User-Agent, параллелизм)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (stderr, если не указан)

Опции команд:
  --limit INT         Ограничить число страниц (sitemap)
  --containing STR    Оставить только URL, содержащие строку

Дополнительно:
  --version, -v       Показать версию SiteScanner

Пример:
  site-scanner sitemap example.com report.xlsx --limit 100 --containing /blog/
"""
import asyncio
import sys
from pathlib import Path

import click

from site_scanner import __version__
from site_scanner.config import CrawlerConfig, load_config
from site_scanner.crawler.models import PageResult
from site_scanner.engine import start_compare, start_scan
from site_scanner.errors import (
    FetchError,
    InvalidSourceError,
    MalformedSitemapError,
    UnsupportedFormatError,
)
from site_scanner.logger import init_logging
from site_scanner.report import render_missing, render_pages, report_format

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


def print_ok(message: str):
    click.echo(click.style("✔ OK", fg='green') + f" {message}")


def _describe_failure(exc: Exception) -> str:
    if isinstance(exc, InvalidSourceError):
        return f'Некорректный адрес sitemap: {exc}'
    if isinstance(exc, FetchError):
        return f'Ошибка загрузки sitemap: {exc}'
    if isinstance(exc, MalformedSitemapError):
        return f'Ошибка разбора sitemap: {exc}'
    return f'Ошибка: {exc}'


def _check_output(file: Path) -> str:
    try:
        return report_format(file)
    except UnsupportedFormatError as e:
        print_error(str(e))


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='SiteScanner, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML/JSON (по умолчанию — встроенные значения).'
)
@click.option(
    '--log-level', 'log_level',
    default='WARNING', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Уровень логирования'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Путь к файлу логов (только stderr, если не указан)'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file):
    """SiteScanner: SEO-отчёт по sitemap и сравнение sitemap двух сайтов."""
    init_logging(level=log_level, log_file=str(log_file) if log_file else None)
    cfg = CrawlerConfig()
    if config_path is not None:
        try:
            cfg = load_config(config_path)
        except Exception as e:
            print_error(f'Ошибка загрузки конфигурации: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


@cli.command('sitemap', context_settings=CONTEXT_SETTINGS)
@click.argument('url')
@click.argument('file', type=click.Path(dir_okay=False, path_type=Path))
@click.option('--limit', 'limit', type=click.IntRange(min=0), default=None,
              help='Ограничить число обрабатываемых страниц')
@click.option('--containing', 'containing', default=None,
              help='Строка, которая должна присутствовать в URL')
@click.pass_context
def sitemap(ctx, url, file, limit, containing):
    """Скачать sitemap URL, обойти все страницы и сохранить SEO-отчёт в FILE (CSV или XLSX)."""
    cfg = ctx.obj['config']
    extension = _check_output(file)

    def progress(page: PageResult) -> None:
        status = click.style('error', fg='red') if page.error else click.style('ok', fg='green')
        click.echo(f'  [{status}] {page.url}')

    click.echo(f'Scanning sitemap {url} ...')
    try:
        report = asyncio.run(
            start_scan(url, cfg, limit=limit, containing=containing, on_page=progress)
        )
    except (InvalidSourceError, FetchError, MalformedSitemapError) as e:
        print_error(_describe_failure(e))

    print_ok(f'All pages parsed: {len(report.pages)} ({len(report.failed)} with errors).')

    click.echo(f'Generating {extension.upper()}...')
    try:
        saved = render_pages(report.pages, file)
    except OSError as e:
        print_error(f'Ошибка при сохранении отчёта: {e}')
    print_ok(f'{extension.upper()} generated to file {saved}')


@cli.command('compare-sitemaps', context_settings=CONTEXT_SETTINGS)
@click.argument('master_url')
@click.argument('slave_url')
@click.argument('file', type=click.Path(dir_okay=False, path_type=Path))
@click.option('--containing', 'containing', default=None,
              help='Строка, которая должна присутствовать в URL')
@click.pass_context
def compare_sitemaps(ctx, master_url, slave_url, file, containing):
    """Сравнить sitemap двух сайтов: пути MASTER_URL, которых нет у SLAVE_URL, сохранить в FILE."""
    cfg = ctx.obj['config']
    extension = _check_output(file)

    click.echo(f'Comparing {master_url} vs. {slave_url} ...')
    try:
        diff = asyncio.run(start_compare(master_url, slave_url, cfg, containing=containing))
    except (InvalidSourceError, FetchError, MalformedSitemapError) as e:
        print_error(_describe_failure(e))

    print_ok(
        f'All pages compared [{diff.master_domain} vs. {diff.slave_domain}]: '
        f'{len(diff.missing)} missing.'
    )

    click.echo(f'Generating {extension.upper()}...')
    try:
        saved = render_missing(diff, file)
    except OSError as e:
        print_error(f'Ошибка при сохранении отчёта: {e}')
    print_ok(f'{extension.upper()} generated to file {saved}')


if __name__ == "__main__":
    cli()
