"""Sets up the githubkit client."""

from typing import TypeAlias

import structlog
from githubkit import GitHub
from githubkit.auth import TokenAuthStrategy, UnauthAuthStrategy

from gh_fork_sync.utils.constants import DEFAULT_GITHUB_API_URL

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

GitHubClient: TypeAlias = GitHub[TokenAuthStrategy] | GitHub[UnauthAuthStrategy]


def get_github_client(github_token: str | None = None, github_api_url: str = DEFAULT_GITHUB_API_URL) -> GitHubClient:
    """Returns a githubkit client for the given GitHub instance.

    A token is passed through as-is when one is supplied; otherwise the client
    is unauthenticated, which is enough to read public repositories. Supports
    custom base URLs for GitHub Enterprise Server (GHES).
    """
    if github_token:
        logger.debug("Using token authentication", github_api_url=github_api_url)
        # Disable HTTP caching to always get fresh data
        return GitHub(auth=TokenAuthStrategy(github_token), base_url=github_api_url, http_cache=False)
    logger.debug("No GitHub token supplied, using unauthenticated client", github_api_url=github_api_url)
    return GitHub(auth=UnauthAuthStrategy(), base_url=github_api_url, http_cache=False)
