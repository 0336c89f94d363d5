"""Directory creation and git cloning for resolved repository locations."""

import logging
import os
import shlex
from pathlib import Path
from typing import List, Optional, Union

from rich.console import Console

# A missing git executable should fail the clone, not the import.
os.environ.setdefault("GIT_PYTHON_REFRESH", "quiet")

import git  # noqa: E402

from gitplace.exceptions import CloneError, FilesystemError  # noqa: E402
from gitplace.repository.resolver import resolve_location  # noqa: E402
from gitplace.schemas import RepoLocation  # noqa: E402

logger = logging.getLogger(__name__)

DRY_RUN_PREFIX = "DRY RUN: "


def build_command(url: str, clone_path: Path, git_executable: str = "git") -> List[str]:
    """Return the argv git.Repo.clone_from runs for url into clone_path."""
    return [git_executable, "clone", "-v", "--", url, str(clone_path)]


def format_command(argv: List[str]) -> str:
    """Render argv as a single shell command line."""
    return " ".join(shlex.quote(arg) for arg in argv)


def _clean_stderr(stderr: Optional[str]) -> str:
    """Strip GitPython's "stderr: '...'" decoration from command output."""
    text = (stderr or "").strip()
    if text.startswith("stderr:"):
        text = text[len("stderr:"):].strip()
        if len(text) >= 2 and text[0] == text[-1] == "'":
            text = text[1:-1]
    return text.strip()


class RepoCommands:
    """Side effects needed to place a repository on disk.

    Subclasses either perform them (SystemRepoCommands) or only describe
    them (DryRunRepoCommands).
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def echo(self, text: str) -> None:
        """Print text verbatim (no markup, highlighting or wrapping)."""
        self.console.print(text, markup=False, highlight=False, soft_wrap=True)

    def create_dir_all(self, path: Path) -> None:
        raise NotImplementedError

    def git_clone(self, url: str, clone_path: Path) -> None:
        raise NotImplementedError

    def cd_destination(self, clone_path: Path) -> None:
        raise NotImplementedError

    def display_success(self, clone_path: Path) -> None:
        raise NotImplementedError


class SystemRepoCommands(RepoCommands):
    """Creates directories and runs git for real."""

    def create_dir_all(self, path: Path) -> None:
        """Create path and any missing parents; succeeds if it already exists.

        Raises:
            FilesystemError: On permission or I/O failure
        """
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error(f"Could not create {path}: {e}")
            raise FilesystemError(path, e.strerror or str(e)) from e
        logger.info(f"Ensured directory {path}")

    def git_clone(self, url: str, clone_path: Path) -> None:
        """Clone url into clone_path with the external git executable.

        Raises:
            CloneError: If git is missing, refuses the URL or exits with a non-zero status
        """
        logger.debug(f"Running: {format_command(build_command(url, clone_path))}")

        try:
            with self.console.status(f"Cloning {url}..."):
                git.Repo.clone_from(url, clone_path)
        except git.exc.GitCommandNotFound as e:
            logger.error(f"git executable not found: {e}")
            raise CloneError(url, clone_path, None, "git executable not found") from e
        except git.exc.GitCommandError as e:
            stderr = _clean_stderr(e.stderr)
            logger.error(f"git clone exited with status {e.status}: {stderr}")
            raise CloneError(url, clone_path, e.status, stderr) from e
        except git.exc.GitError as e:
            # Refused by GitPython before git was started, e.g. UnsafeProtocolError
            logger.error(f"git clone refused: {e}")
            raise CloneError(url, clone_path, None, str(e)) from e

        logger.info(f"Cloned {url} into {clone_path}")

    def cd_destination(self, clone_path: Path) -> None:
        self.echo(f"cd {shlex.quote(str(clone_path))}")

    def display_success(self, clone_path: Path) -> None:
        self.echo(f"✅ Repository cloned successfully to {clone_path}")


class DryRunRepoCommands(RepoCommands):
    """Prints the commands that would run; never touches disk or spawns git."""

    def create_dir_all(self, path: Path) -> None:
        self.echo(DRY_RUN_PREFIX + format_command(["mkdir", "-p", str(path)]))

    def git_clone(self, url: str, clone_path: Path) -> None:
        self.echo(DRY_RUN_PREFIX + format_command(build_command(url, clone_path)))

    def cd_destination(self, clone_path: Path) -> None:
        self.echo(DRY_RUN_PREFIX + format_command(["cd", str(clone_path)]))

    def display_success(self, clone_path: Path) -> None:
        self.echo(f"{DRY_RUN_PREFIX}Repository cloned successfully to {clone_path}")


class RepositoryCloner:
    """Clones a repository into base_path/domain/author/repo_name."""

    def __init__(self, commands: RepoCommands):
        self.commands = commands

    @classmethod
    def for_mode(cls, dry_run: bool = False, console: Optional[Console] = None) -> "RepositoryCloner":
        """Create a cloner that either executes or only prints its actions."""
        if dry_run:
            return cls(DryRunRepoCommands(console))
        return cls(SystemRepoCommands(console))

    def run(self, git_url: str, base_path: Optional[Union[str, Path]] = None) -> RepoLocation:
        """Resolve, prepare and clone a repository.

        Args:
            git_url: Repository URL to clone
            base_path: Root directory (default: current working directory)

        Returns:
            The resolved RepoLocation

        Raises:
            InvalidUrlError: If the URL cannot be resolved (nothing is touched)
            FilesystemError: If the parent directories cannot be created
            CloneError: If git fails
        """
        location = resolve_location(git_url, base_path)

        self.create_directory_structure(location)
        self.commands.git_clone(git_url, location.destination_path)
        self.commands.cd_destination(location.destination_path)
        self.commands.display_success(location.destination_path)

        return location

    def create_directory_structure(self, location: RepoLocation) -> Path:
        """Ensure base_path/domain/author exists and return it."""
        path = location.parent_path
        self.commands.create_dir_all(path)
        return path
