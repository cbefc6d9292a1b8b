"""Contains results of a fork sync."""

from gh_fork_sync.git.commands import GitCommand


class ForkSyncResult:
    """Contains results of the fork sync workflow."""

    def __init__(
        self,
        strategy: str,
        upstream_branch: str,
        origin_branch: str,
        dry_run: bool = False,
        fork: str | None = None,
        parent: str | None = None,
        commands: list[GitCommand] | None = None,
    ) -> None:
        """Initialize the result with the action taken and the commands that ran."""
        self.strategy = strategy
        self.upstream_branch = upstream_branch
        self.origin_branch = origin_branch
        self.dry_run = dry_run
        self.fork = fork
        self.parent = parent
        self.commands = commands or []
