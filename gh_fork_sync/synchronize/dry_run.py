"""Projects the commands a fork sync would run without running any of them."""

import typer

from gh_fork_sync.configuration.models import SyncConfig
from gh_fork_sync.git.commands import build_fetch_command, build_push_command, build_remote_add_command, build_sync_command
from gh_fork_sync.utils.constants import DRY_RUN_PLACEHOLDER_URL


def project_dry_run(config: SyncConfig, parent_clone_url: str = DRY_RUN_PLACEHOLDER_URL) -> list[str]:
    """Print and return the commands a real sync would run.

    Neither git nor the GitHub API is contacted, so ``parent_clone_url`` is
    a stand-in for the fork's real parent URL.
    """
    commands = [
        build_remote_add_command(parent_clone_url),
        build_fetch_command(),
        build_sync_command(config, config.upstream_branch),
        build_push_command(config),
    ]
    lines = [
        "Note: The following commands are examples. The actual upstream URL will be taken from your fork's parent repository.",
        "Dry run mode - commands that would be executed:",
    ]
    lines.extend(f"Would run: {command.render()}" for command in commands)
    for line in lines:
        typer.echo(line)
    return lines
