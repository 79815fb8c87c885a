"""CLI entrypoint for chartcheck."""

import logging

import typer

from .checker import ChartChecker
from .config import Config
from .helm.repository import RepositoryClient
from .report import render_table, sort_results

logger = logging.getLogger(__name__)

USAGE = "Usage: chartcheck <directory path>"

app = typer.Typer(
    name="chartcheck",
    help="Report whether Argo CD Helm applications pin the latest chart version",
    add_completion=False,
)


@app.command()
def check(
    path: str = typer.Argument(
        None,
        help="Directory to scan for Argo CD Application manifests",
        show_default=False,
    ),
    # Anything after the path is ignored
    extra: list[str] = typer.Argument(None, hidden=True),
) -> None:
    """Scan a directory tree and compare each chart pin with its repository."""
    if path is None:
        typer.echo(USAGE)
        raise typer.Exit(1)

    try:
        config = Config.from_env()
    except ValueError as e:
        typer.echo(f"Configuration error: {e}", err=True)
        raise typer.Exit(1)

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    checker = ChartChecker(
        client=RepositoryClient(timeout=config.http_timeout),
        announce=typer.echo,
    )

    try:
        results = checker.check_tree(path)
    except OSError as e:
        logger.debug("Directory walk failed", exc_info=True)
        typer.echo(f"Error walking through directory: {e}")
        return

    for line in render_table(sort_results(results)):
        typer.echo(line)


def main() -> None:
    """Main entrypoint."""
    app()


if __name__ == "__main__":
    main()
