"""Error types raised while resolving and cloning a repository.

Every error carries the exit code the CLI terminates with.
"""

from pathlib import Path
from typing import Optional


class GitPlaceError(Exception):
    """Base class for all gitplace failures."""

    exit_code = 1


class InvalidUrlError(GitPlaceError):
    """The git URL is malformed or does not name a domain/author/repo."""

    exit_code = 2

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Invalid git URL '{url}': {reason}")


class FilesystemError(GitPlaceError):
    """The destination directories could not be created."""

    exit_code = 3

    def __init__(self, path: Path, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Failed to create directory {self.path}: {reason}")


class CloneError(GitPlaceError):
    """The external git clone exited unsuccessfully."""

    exit_code = 4

    def __init__(
        self,
        url: str,
        destination: Path,
        status: Optional[int] = None,
        stderr: str = ""
    ):
        self.url = url
        self.destination = Path(destination)
        self.status = status
        self.stderr = stderr

        message = f"Failed to clone repository {url} into {self.destination}"
        if status is not None:
            message += f" (git exited with status {status})"
        if stderr:
            message += f": {stderr}"
        super().__init__(message)
