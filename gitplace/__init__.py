"""gitplace - clone git repositories into a domain/author/repo directory tree."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("gitplace")
except PackageNotFoundError:
    __version__ = "0.0.0"
