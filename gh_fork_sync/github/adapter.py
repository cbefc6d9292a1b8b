"""GitHub client adapter for the githubkit library."""

from functools import wraps
from typing import Any, Awaitable, Callable, Self, TypeVar

import structlog
from githubkit import Response
from githubkit.exception import GitHubException
from pydantic import ValidationError

from gh_fork_sync.schemas.repository import RepositoryInfo
from gh_fork_sync.synchronize.exceptions import RepositoryLookupError
from gh_fork_sync.utils.constants import DEFAULT_GITHUB_API_URL

from .abc import GitHubClientBase
from .client import GitHubClient, get_github_client

logger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


def handle_lookup_errors(func: F) -> F:
    """Decorator to turn transport, HTTP, and schema failures into RepositoryLookupError."""

    @wraps(func)
    async def wrapper(self: "GitHubKitAdapter", owner: str, repo_name: str, *args: Any, **kwargs: Any) -> Any:
        try:
            return await func(self, owner, repo_name, *args, **kwargs)
        except (GitHubException, ValidationError) as exc:
            logger.debug(
                "GitHub repository lookup failed",
                function=func.__name__,
                owner=owner,
                repo_name=repo_name,
                error=str(exc),
                error_type=type(exc).__name__,
            )
            raise RepositoryLookupError(f"{owner}/{repo_name}", exc) from exc

    return wrapper  # type: ignore


class GitHubKitAdapter(GitHubClientBase):
    """GitHub client adapter for the githubkit library."""

    def __init__(self, client: GitHubClient) -> None:
        """Initialize the GitHub client adapter with an already-initialized client."""
        self.client = client

    @classmethod
    def create(cls, github_token: str | None = None, github_api_url: str = DEFAULT_GITHUB_API_URL) -> Self:
        """Create a new GitHub client adapter.

        Args:
            github_token: Token handed to githubkit unchanged, if any
            github_api_url: GitHub API URL (defaults to https://api.github.com)

        Returns:
            Configured GitHubKitAdapter instance
        """
        logger.info("Creating client for GitHub instance", github_api_url=github_api_url, authenticated=bool(github_token))
        return cls(get_github_client(github_token=github_token, github_api_url=github_api_url))

    # Repository reads
    @handle_lookup_errors
    async def get_repository(self, owner: str, repo_name: str) -> RepositoryInfo:
        """Get fork-related metadata for a repository."""
        response: Response[Any] = await self.client.rest.repos.async_get(owner=owner, repo=repo_name)
        info = RepositoryInfo.model_validate(response.json())
        logger.info("Fetched repository info", full_name=info.full_name, fork=info.fork)
        return info
