# === FILE: link_scout/cli.py ===
#!/usr/bin/env python3
"""
Точка входа для запуска краулера LinkScout через командную строку.

Команды:
  crawl     Обойти сайт и вывести/сохранить дерево ссылок и sitemap
  config    Показать текущую конфигурацию

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (default: configs/default.yaml, если есть)
  --seed URL          Начальный URL (override base_url)
  --depth INT         Максимальная глубина (override max_depth)
  --concurrency INT   Максимум одновременных загрузок (override concurrency)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов
  --log-format FORMAT Формат логирования

Команда crawl опции:
  --tree/--no-tree    Строить дерево ссылок
  --sequential        Детерминированный обход в глубину
  --tree-file PATH    Сохранить дерево в файл
  --sitemap PATH      Сохранить sitemap.xml в файл
  --json PATH         Сохранить JSON-отчёт в файл
  --html PATH         Сохранить HTML-отчёт в файл
  --template DIR      Папка с Jinja2-шаблоном report.html.j2
  --crawl-timeout SEC Дедлайн обхода (секунд)

Дополнительно:
  --version, -v       Показать версию LinkScout

Пример:
  link_scout --seed https://example.com --depth 2 crawl --sitemap sitemap.xml
"""
import asyncio
import sys
from pathlib import Path

import click
from click.core import ParameterSource
from pydantic import ValidationError

from link_scout import __version__
from link_scout.config import DEFAULT_CONFIG_PATH, CrawlConfig, load_config
from link_scout.engine import start_crawl
from link_scout.logger import DEFAULT_FORMAT, init_logging
from link_scout.report.html_report import render_html
from link_scout.report.json_report import render_json
from link_scout.report.sitemap import render_sitemap, write_sitemap
from link_scout.tree import render

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


def _build_config(config_path, seed) -> CrawlConfig:
    if config_path is not None:
        return load_config(config_path)
    if DEFAULT_CONFIG_PATH.exists():
        return load_config(DEFAULT_CONFIG_PATH)
    if seed is None:
        raise click.UsageError('Укажите --config или --seed')
    return CrawlConfig(base_url=seed)


def _explicit(ctx: click.Context, name: str, value):
    """Значение флага, если он задан в командной строке, иначе None (берём из конфига)."""
    if ctx.get_parameter_source(name) is ParameterSource.COMMANDLINE:
        return value
    return None


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='LinkScout, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML/JSON.'
)
@click.option('--seed', '-s', 'seed', default=None, help='Начальный URL обхода.')
@click.option('--depth', '-d', 'depth', type=click.IntRange(min=0), default=None, help='Максимальная глубина.')
@click.option(
    '--concurrency', 'concurrency',
    type=click.IntRange(min=1),
    default=None,
    help='Максимум одновременных загрузок.'
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
    help='Путь к файлу логов'
)
@click.option(
    '--log-format', 'log_format',
    default=DEFAULT_FORMAT,
    show_default=True,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, config_path, seed, depth, concurrency, log_level, log_file, log_format):
    """Группа команд LinkScout CLI."""
    # stdout занят деревом и sitemap, поэтому логи идут в stderr
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format,
        stream=sys.stderr,
    )
    try:
        cfg = _build_config(config_path, seed)
        cfg = cfg.with_overrides(base_url=seed, max_depth=depth, concurrency=concurrency)
    except (OSError, ValueError, TypeError, ValidationError) as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


@cli.command('crawl', context_settings=CONTEXT_SETTINGS)
@click.option('--tree/--no-tree', 'show_tree', default=True, help='Строить дерево ссылок (override show_tree)')
@click.option('--sequential', is_flag=True, help='Детерминированный обход в глубину')
@click.option(
    '--tree-file', 'tree_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить дерево ссылок в файл'
)
@click.option(
    '--sitemap', 'sitemap_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить sitemap.xml в файл'
)
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить JSON-отчёт в файл'
)
@click.option(
    '--html', 'html_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить HTML-отчёт в файл'
)
@click.option(
    '--template', '-t', 'template_dir',
    default=None,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help='Папка с Jinja2-шаблоном report.html.j2 (по умолчанию встроенный)'
)
@click.option(
    '--crawl-timeout', 'crawl_timeout',
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help='Дедлайн обхода (секунд): после него новые загрузки не стартуют'
)
@click.pass_context
def crawl(ctx, show_tree, sequential, tree_output, sitemap_output, json_output, html_output,
          template_dir, crawl_timeout):
    """Обойти сайт и сгенерировать дерево ссылок и sitemap."""
    cfg = ctx.obj['config'].with_overrides(
        show_tree=_explicit(ctx, 'show_tree', show_tree),
        sequential=_explicit(ctx, 'sequential', sequential),
        crawl_timeout=crawl_timeout,
    )
    try:
        report = asyncio.run(start_crawl(cfg))
    except Exception as e:
        print_error(f'Ошибка при обходе: {e}')

    outputs = (tree_output, sitemap_output, json_output, html_output)

    # Если не сохраняем в файлы, печатаем дерево и sitemap в stdout
    if not any(outputs):
        if report.tree is not None:
            click.echo(render(report.tree))
        click.echo(render_sitemap(report.visited), nl=False)
        return

    try:
        if tree_output:
            if report.tree is None:
                click.secho('Дерево не строилось (--no-tree), файл не записан', fg='yellow', err=True)
            else:
                tree_output.parent.mkdir(parents=True, exist_ok=True)
                tree_output.write_text(render(report.tree), encoding='utf-8')
                click.echo(f'Tree: {tree_output}')
        if sitemap_output:
            click.echo(f'Sitemap: {write_sitemap(report.visited, sitemap_output)}')
        if json_output:
            click.echo(f'JSON report: {render_json(report, json_output)}')
        if html_output:
            click.echo(f'HTML report: {render_html(report, template_dir, html_output)}')
    except Exception as e:
        print_error(f'Ошибка при сохранении отчёта: {e}')


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Показать текущую конфигурацию в JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
