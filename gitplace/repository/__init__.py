"""Repository resolution and cloning."""

from .resolver import default_base_path, parse_git_url, resolve_location
from .manager import (
    DryRunRepoCommands,
    RepoCommands,
    RepositoryCloner,
    SystemRepoCommands,
    build_command,
)

__all__ = [
    "default_base_path",
    "parse_git_url",
    "resolve_location",
    "DryRunRepoCommands",
    "RepoCommands",
    "RepositoryCloner",
    "SystemRepoCommands",
    "build_command",
]
