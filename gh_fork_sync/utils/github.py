"""Contains utility functions for GitHub interactions."""

import structlog

from gh_fork_sync.schemas.repository import RepositoryIdentity, RepositoryInfo
from gh_fork_sync.synchronize.exceptions import MalformedURLError, MissingParentError, NotAForkError, UnsupportedURLFormatError
from gh_fork_sync.utils.constants import DEFAULT_GITHUB_HOST

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def parse_remote_url(url: str, host: str = DEFAULT_GITHUB_HOST) -> RepositoryIdentity:
    """Parses the owner and repository name out of a git remote URL.

    Two shapes are recognized:

    - SSH: ``git@github.com:owner/repo.git``
    - HTTPS: ``https://github.com/owner/repo.git``

    A trailing ``.git`` is optional in both.

    Args:
        url: The remote URL, as printed by ``git remote get-url origin``.
        host: The GitHub host expected in the URL.

    Raises:
        UnsupportedURLFormatError: If the URL matches neither shape.
        MalformedURLError: If the owner or repository name is missing.

    Returns:
        RepositoryIdentity: The parsed owner and repository name.
    """
    url = url.strip()
    ssh_prefix = f"git@{host}:"
    https_marker = f"{host}/"

    if url.startswith(ssh_prefix):
        path = url.removeprefix(ssh_prefix)
    elif https_marker in url:
        path = url.split(https_marker, 1)[1]
    else:
        raise UnsupportedURLFormatError(url)

    parts = path.split("/", 1)
    if len(parts) < 2:
        raise MalformedURLError(url)

    owner = parts[0]
    name = parts[1].removesuffix(".git")
    if not owner or not name:
        raise MalformedURLError(url)

    logger.debug("Parsed remote URL", url=url, owner=owner, repo_name=name)
    return RepositoryIdentity(owner=owner, name=name)


def validate_fork(info: RepositoryInfo) -> None:
    """Checks that the repository is a fork with a known parent.

    Raises:
        NotAForkError: If the repository isn't a fork.
        MissingParentError: If GitHub did not report the fork's parent.
    """
    if not info.fork:
        raise NotAForkError(info.full_name)
    if info.parent is None:
        raise MissingParentError(info.full_name)
