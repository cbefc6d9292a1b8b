"""Builds the git commands a fork sync runs."""

from dataclasses import dataclass

from gh_fork_sync.configuration.models import SyncConfig
from gh_fork_sync.utils.constants import ORIGIN_REMOTE, UPSTREAM_REMOTE


@dataclass(frozen=True)
class GitCommand:
    """A git invocation plus the label used when reporting its failure."""

    args: tuple[str, ...]
    description: str

    def render(self, git: str = "git") -> str:
        """Render the command as it would be typed in a shell."""
        return " ".join((git, *self.args))


def build_get_origin_url_command() -> GitCommand:
    """Build the command that prints the URL of the origin remote."""
    return GitCommand(args=("remote", "get-url", ORIGIN_REMOTE), description="getting origin remote")


def build_remote_add_command(clone_url: str) -> GitCommand:
    """Build the command that registers the parent repository as the upstream remote."""
    return GitCommand(args=("remote", "add", UPSTREAM_REMOTE, clone_url), description="adding upstream remote")


def build_fetch_command() -> GitCommand:
    """Build the command that fetches the upstream remote."""
    return GitCommand(args=("fetch", UPSTREAM_REMOTE), description="fetching upstream")


def build_sync_command(config: SyncConfig, upstream_branch: str) -> GitCommand:
    """Build the merge or rebase command that integrates upstream changes.

    An empty ``upstream_branch`` leaves the branch qualifier off, so git
    integrates whatever the upstream remote's default ref resolves to.
    """
    if config.rebase:
        verb, description = "rebase", "rebasing onto upstream"
    else:
        verb, description = "merge", "merging upstream"
    args = [verb, UPSTREAM_REMOTE]
    if upstream_branch:
        args.append(f"{UPSTREAM_REMOTE}/{upstream_branch}")
    return GitCommand(args=tuple(args), description=description)


def build_push_command(config: SyncConfig) -> GitCommand:
    """Build the command that pushes the integrated HEAD to the origin branch."""
    args = ["push"]
    if config.force_push:
        args.append("-f")
    args.extend([ORIGIN_REMOTE, f"HEAD:{config.origin_branch}"])
    return GitCommand(args=tuple(args), description=f"pushing to {ORIGIN_REMOTE}/{config.origin_branch}")


def abort_hint(config: SyncConfig) -> str:
    """Return the command that backs out of a failed merge or rebase."""
    if config.rebase:
        return "git rebase --abort"
    return "git merge --abort"
