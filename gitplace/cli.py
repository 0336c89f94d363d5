"""
gitplace CLI - clone git repositories into a predictable directory tree.

    gitplace https://github.com/user/repo.git
    -> ./github.com/user/repo
"""

import logging
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from gitplace import __version__
from gitplace.config import load_settings
from gitplace.exceptions import GitPlaceError
from gitplace.repository import RepositoryCloner
from gitplace.utils import setup_logging

app = typer.Typer(
    name="gitplace",
    help="Clone git repositories into <base>/<domain>/<author>/<repo>",
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"gitplace {__version__}", highlight=False)
        raise typer.Exit()


@app.command()
def clone(
    git_url: str = typer.Argument(..., help="URL of the git repository to clone"),
    base_path: Optional[str] = typer.Option(
        None,
        "--base-path",
        "-b",
        help="Directory the domain/author/repo tree is created under (default: current directory)",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Print the commands without executing them",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
):
    """
    Clone GIT_URL into BASE_PATH/<domain>/<author>/<repo>.

    Example:
        gitplace https://github.com/lancedb/lancedb.git --base-path ~/src
        -> ~/src/github.com/lancedb/lancedb
    """
    try:
        settings = load_settings()
    except ValidationError as e:
        err_console.print(f"[red]❌ Configuration error:[/red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(1)

    setup_logging("DEBUG" if verbose else settings.log_level)

    if base_path is None and settings.base_path is not None:
        base_path = str(settings.base_path)
        logger.debug(f"Using base path from GITPLACE_BASE_PATH: {base_path}")

    cloner = RepositoryCloner.for_mode(dry_run=dry_run, console=console)

    try:
        cloner.run(git_url, base_path)
    except GitPlaceError as e:
        err_console.print(f"[red]❌ Error:[/red] {escape(str(e))}", highlight=False, soft_wrap=True)
        raise typer.Exit(e.exit_code)
    except KeyboardInterrupt:
        err_console.print("\n[yellow]⚠️  Interrupted by user[/yellow]")
        raise typer.Exit(130)


if __name__ == "__main__":
    app()
