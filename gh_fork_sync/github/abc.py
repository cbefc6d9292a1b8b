"""Base ABC for GitHub clients."""

from abc import ABC, abstractmethod

from gh_fork_sync.schemas.repository import RepositoryInfo


class GitHubClientBase(ABC):
    """Base ABC for GitHub clients."""

    # Repository reads
    @abstractmethod
    async def get_repository(self, owner: str, repo_name: str) -> RepositoryInfo:
        """Get metadata for a repository."""
        pass
