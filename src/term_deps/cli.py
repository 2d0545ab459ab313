"""Command-line interface for term-deps."""

import sys

import click
from rich.text import Text

from term_deps.config import InjectionConfig
from term_deps.injection import DependencyInjector, InjectionError
from term_deps.version import get_version
from term_deps.utils.console import (
    _rich_success, _rich_error, _rich_info, _rich_warning, _rich_panel,
    _create_files_table, _print_table
)


def print_version(ctx, param, value):
    """Print version and exit."""
    if not value or ctx.resilient_parsing:
        return

    version_text = Text()
    version_text.append("term-deps", style="bold cyan")
    version_text.append(f" version {get_version()}", style="white")
    _rich_panel(version_text)
    ctx.exit()


def path_options(func):
    """Shared options selecting term.html, node_modules and the config file."""
    func = click.option('--config', 'config_path', type=click.Path(dir_okay=False),
                        help="Path to term-deps.yml (default: ./term-deps.yml if present)")(func)
    func = click.option('--deps-dir', type=click.Path(file_okay=False),
                        help="Directory holding the xterm packages (default: ./node_modules)")(func)
    func = click.option('--html', 'html_path', type=click.Path(dir_okay=False),
                        help="term.html to inject into (default: ../term.html)")(func)
    return func


def _load_config(config_path, **overrides) -> InjectionConfig:
    config = InjectionConfig.from_yml(config_path, **overrides)
    for warning in config.warnings:
        _rich_warning(warning, symbol="warning")
    return config


@click.group(help="Embed the xterm style sheet and scripts into the terminal HTML page")
@click.option('--version', is_flag=True, callback=print_version,
              expose_value=False, is_eager=True, help="Show version and exit.")
@click.pass_context
def cli(ctx):
    """Main entry point for the term-deps CLI."""
    ctx.ensure_object(dict)


@cli.command(help="Inject the xterm dependencies into term.html")
@path_options
@click.option('--dry-run', is_flag=True, help="Build the document without writing it")
@click.option('--verbose', '-v', is_flag=True, help="Show every injected dependency")
def inject(html_path, deps_dir, config_path, dry_run, verbose):
    """Replace each marked region of term.html with its dependency file.

    Nothing is written unless every dependency file and marker is found.
    """
    config = _load_config(config_path, html_path=html_path, deps_dir=deps_dir, dry_run=dry_run or None)
    _rich_info("Starting to inject the dependencies.", symbol="running")

    try:
        result = DependencyInjector(config).run()
    except InjectionError as e:
        # Every failure happens before term.html is replaced
        _rich_error(f"ERROR: {e} No changes were made.", symbol="error")
        sys.exit(1)

    if verbose:
        rows = [(outcome.name, outcome.source, f"{outcome.chars} chars") for outcome in result.tasks]
        _print_table(_create_files_table(rows, ["Task", "Source", "Size"], title="Injected dependencies"))

    if dry_run:
        _rich_info(f"Dry run: {result.output_path} was not modified", symbol="preview")
        return
    _rich_success("Dependencies injected.", symbol="success")


@cli.command(help="Verify dependency files and markers without writing anything")
@path_options
def check(html_path, deps_dir, config_path):
    config = _load_config(config_path, html_path=html_path, deps_dir=deps_dir)
    result = DependencyInjector(config).check()

    for error in result.errors:
        _rich_error(error, symbol="error")
    if not result.is_valid:
        _rich_error(result.summary())
        sys.exit(1)
    _rich_success(result.summary(), symbol="check")


@cli.command(name="tasks", help="List the dependencies injected into term.html")
def list_tasks():
    config = InjectionConfig()
    rows = [(task.name, task.source, task.start_marker, task.end_marker) for task in config.tasks]
    _print_table(_create_files_table(rows, ["Task", "Source", "Start marker", "End marker"], title="Injection tasks"))


def main():
    """Main entry point for the CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
