"""Derive the on-disk location of a repository from its git URL.

Supported URL shapes:
- https://github.com/user/repo.git (any scheme://, with optional credentials and port)
- git@github.com:user/repo.git (scp-like SSH shorthand)
- github.com/user/repo (no scheme)
"""

import logging
import re
from pathlib import Path
from typing import Optional, Tuple, Union

from pydantic import ValidationError

from gitplace.exceptions import InvalidUrlError
from gitplace.schemas import RepoLocation

logger = logging.getLogger(__name__)

SCHEME_PATTERN = re.compile(r'^[A-Za-z][A-Za-z0-9+.\-]*://')
SCP_PATTERN = re.compile(r'^(?:[^@/[]+@)?(?P<host>\[[^\]/]+\]|[^:/\[\]]+):(?P<path>.*)$')
# git remote-helper syntax, e.g. ext::sh or fd::0
TRANSPORT_PATTERN = re.compile(r'^[A-Za-z][A-Za-z0-9+.\-]*::')

GIT_SUFFIX = '.git'


def default_base_path() -> Path:
    """Base directory used when none is given: the current working directory."""
    return Path.cwd()


def _strip_userinfo(authority: str) -> str:
    """Drop 'user@' or 'user:password@' from a URL authority."""
    return authority.rpartition('@')[2]


def _strip_port(host: str) -> str:
    if host.startswith('['):
        # IPv6 literal, e.g. [::1]:8080
        end = host.find(']')
        return host[:end + 1] if end != -1 else host
    return host.partition(':')[0]


def _split_host_and_path(url: str) -> Tuple[str, str]:
    """Split a URL into (host, path), removing scheme, credentials and port."""
    scheme = SCHEME_PATTERN.match(url)
    if scheme:
        rest = re.split(r'[?#]', url[scheme.end():], maxsplit=1)[0]
        authority, _, path = rest.partition('/')
        return _strip_port(_strip_userinfo(authority)), path

    scp = SCP_PATTERN.match(url)
    if scp:
        return scp.group('host'), scp.group('path')

    authority, _, path = url.partition('/')
    return _strip_port(_strip_userinfo(authority)), path


def parse_git_url(git_url: str) -> Tuple[str, str, str]:
    """Parse a git URL into its (domain, author, repo_name) components.

    Args:
        git_url: Repository URL, HTTPS or SSH style

    Returns:
        Tuple of domain, author and repository name (without '.git')

    Raises:
        InvalidUrlError: If the URL has no domain, or does not have exactly
            an author and a repository segment after the domain
    """
    url = git_url.strip()
    if not url:
        raise InvalidUrlError(git_url, "URL is empty")

    if TRANSPORT_PATTERN.match(url):
        raise InvalidUrlError(git_url, "remote-helper transports (<transport>::<address>) are not supported")

    # pip-style git+https://...
    if url.startswith('git+') and '://' in url:
        url = url[len('git+'):]

    host, path = _split_host_and_path(url)
    domain = host.lower()
    if not domain:
        raise InvalidUrlError(git_url, "no domain found")

    segments = [segment for segment in path.split('/') if segment]
    if len(segments) < 2:
        raise InvalidUrlError(git_url, "expected <author>/<repository> after the domain")
    if len(segments) > 2:
        raise InvalidUrlError(
            git_url,
            f"nested namespaces are not supported ('{'/'.join(segments[:-1])}')"
        )

    author, repo_name = segments
    if repo_name.endswith(GIT_SUFFIX):
        repo_name = repo_name[:-len(GIT_SUFFIX)]
    if not repo_name:
        raise InvalidUrlError(git_url, "repository name is empty")

    for segment in (domain, author, repo_name):
        if segment in ('.', '..') or '\\' in segment:
            raise InvalidUrlError(git_url, f"invalid path segment '{segment}'")

    logger.debug(f"Parsed {git_url}: domain={domain} author={author} repo={repo_name}")
    return domain, author, repo_name


def resolve_location(
    git_url: str,
    base_path: Optional[Union[str, Path]] = None
) -> RepoLocation:
    """Resolve where a repository should be cloned.

    Pure function: nothing on disk is read or created.

    Args:
        git_url: Repository URL
        base_path: Root of the directory tree (default: current working directory)

    Returns:
        RepoLocation with destination base_path/domain/author/repo_name
    """
    domain, author, repo_name = parse_git_url(git_url)

    if base_path is None or str(base_path) == '':
        base = default_base_path()
    else:
        base = Path(base_path).expanduser()

    try:
        location = RepoLocation.create(base, domain, author, repo_name)
    except ValidationError as e:
        raise InvalidUrlError(git_url, str(e)) from e

    logger.debug(f"Resolved {location.slug} -> {location.destination_path}")
    return location
