"""CLI entry point for Syndox."""

import asyncio
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from syndox import __version__
from syndox.config import load_config
from syndox.core.exceptions import SyndoxError
from syndox.core.pipeline import run_pipeline
from syndox.log import setup_logging

app = typer.Typer(
    name="syndox",
    help="Track identity, content and syntax trees of files matched by glob patterns.",
    no_args_is_help=True,
    add_completion=False,
)
console = Console()


@app.command()
def run(
    patterns: Annotated[
        list[str], typer.Argument(help="Glob patterns, e.g. 'src/**/*.py'", show_default=False)
    ],
) -> None:
    """Resolve patterns, then refresh content and syntax trees of every tracked file."""
    logger = setup_logging()
    logger.info("using syndox@%s", __version__)

    try:
        config = load_config(Path.cwd())
    except SyndoxError as e:
        logger.error("%s: %s", type(e).__name__, e)
        raise typer.Exit(code=1) from e

    result, context = asyncio.run(run_pipeline(patterns, config))

    if not result.ok:
        logger.error(
            "%s in stage %s: %s", type(result.error).__name__, result.failed_stage, result.error
        )
        raise typer.Exit(code=1)

    logger.info("status end")
    stats = context.stats
    console.print("[green]Done![/green]")
    console.print(f"  Files tracked: {stats.tracked}")
    console.print(f"  Contents loaded: {stats.loaded}")
    console.print(f"  Syntax trees: {stats.parsed}")
    if stats.skipped:
        console.print(f"  [dim]Skipped: {stats.skipped}[/]")
    document = context.store.get_stats()
    console.print(f"  [dim]Document entries: {document['files']}[/]")
    console.print(f"  [dim]Document: {context.store.path}[/]")


def main() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
