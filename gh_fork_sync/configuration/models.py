"""Models for configuration between CLI arguments and environment variables."""

from dataclasses import dataclass

from gh_fork_sync.utils.constants import DEFAULT_BRANCH, DEFAULT_GITHUB_HOST


@dataclass(frozen=True)
class SyncConfig:
    """Configuration class for a single fork sync run.

    Resolved once from the command line and passed to every component that
    needs it; nothing mutates it afterwards.
    """

    upstream_branch: str = DEFAULT_BRANCH
    origin_branch: str = DEFAULT_BRANCH
    rebase: bool = False
    force_push: bool = False
    dry_run: bool = False
    github_host: str = DEFAULT_GITHUB_HOST
