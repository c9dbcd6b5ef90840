"""CLI for modsource."""

import asyncio
import json
import sys

import click
import structlog

from modsource.config.logging import configure_logging
from modsource.core.exceptions import ModuleSourceError

logger = structlog.get_logger(__name__)


def run_async(coro):
    """Run an async function synchronously."""
    return asyncio.run(coro)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def cli(verbose: bool) -> None:
    """modsource: find the source repository of a module version."""
    from modsource.config.settings import get_settings

    settings = get_settings()
    log_level = "DEBUG" if verbose else settings.log_level
    configure_logging(log_level=log_level, json_logs=settings.json_logs)


@cli.command()
@click.argument("module_path")
@click.argument("version")
@click.option("--dir", "-d", "directory", help="Directory relative to the module root")
@click.option("--file", "-f", "file_path", help="File relative to the module root")
@click.option("--line", "-l", type=click.IntRange(min=1), help="Line in --file")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
def resolve(
    module_path: str,
    version: str,
    directory: str | None,
    file_path: str | None,
    line: int | None,
    as_json: bool,
) -> None:
    """Resolve MODULE_PATH at VERSION to its repository and source URLs."""
    if line is not None and file_path is None:
        raise click.UsageError("--line requires --file")

    async def _resolve():
        from modsource.services.resolution import SourceResolver

        async with SourceResolver() as resolver:
            return await resolver.resolve(module_path, version)

    try:
        info = run_async(_resolve())
    except ModuleSourceError as e:
        logger.debug("Resolution failed", module_path=module_path, version=version, exc_info=True)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    result = {
        "repo_url": info.repo_url,
        "module_dir": info.module_dir,
        "commit": info.commit,
        "has_templates": info.has_templates,
        "module_url": info.module_url(),
    }
    if directory is not None:
        result["directory_url"] = info.directory_url(directory)
    if file_path is not None:
        result["file_url"] = info.file_url(file_path)
        if line is not None:
            result["line_url"] = info.line_url(file_path, line)

    if as_json:
        click.echo(json.dumps(result, indent=2))
        return

    click.echo(f"Repository: {info.repo_url}")
    click.echo(f"Directory:  {info.module_dir or '(repo root)'}")
    click.echo(f"Commit:     {info.commit}")
    if not info.has_templates:
        click.echo("No URL templates known for this repository.")
        return
    for key in ("module_url", "directory_url", "file_url", "line_url"):
        if key in result:
            label = key.removesuffix("_url").capitalize() + " URL:"
            click.echo(f"{label:<15} {result[key]}")


@cli.command()
def patterns() -> None:
    """List the known hosting patterns, in match order."""
    from modsource.resolution.patterns import default_pattern_table

    for i, pattern in enumerate(default_pattern_table(), 1):
        click.echo(f"{i}. {pattern.regex.pattern}")
        if pattern.templates.is_empty:
            click.echo("     (no URL templates)")
            continue
        click.echo(f"     directory: {pattern.templates.directory}")
        click.echo(f"     file:      {pattern.templates.file}")
        click.echo(f"     line:      {pattern.templates.line}")


if __name__ == "__main__":
    cli()
