"""Orchestrates the synchronization of a fork with its upstream repository."""

import structlog
import typer
from structlog.contextvars import bound_contextvars

from gh_fork_sync.configuration.models import SyncConfig
from gh_fork_sync.git.commands import GitCommand, abort_hint, build_fetch_command, build_push_command, build_remote_add_command, build_sync_command
from gh_fork_sync.git.runner import GitCLI
from gh_fork_sync.github.abc import GitHubClientBase
from gh_fork_sync.github.adapter import GitHubKitAdapter
from gh_fork_sync.schemas.repository import ParentRepository
from gh_fork_sync.synchronize.dry_run import project_dry_run
from gh_fork_sync.synchronize.exceptions import (
    FetchError,
    GitCommandError,
    IntegrationError,
    OriginRemoteError,
    PushError,
    RemoteAddError,
)
from gh_fork_sync.synchronize.results import ForkSyncResult
from gh_fork_sync.utils.constants import DEFAULT_GITHUB_API_URL, REMOTE_ALREADY_EXISTS_MARKER, SUCCESS_MARK, UPSTREAM_REMOTE
from gh_fork_sync.utils.github import parse_remote_url, validate_fork

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def _upstream_ref(upstream_branch: str) -> str:
    if upstream_branch:
        return f"{UPSTREAM_REMOTE}/{upstream_branch}"
    return UPSTREAM_REMOTE


async def run_fork_sync_workflow(
    config: SyncConfig,
    github_token: str | None = None,
    github_api_url: str = DEFAULT_GITHUB_API_URL,
    github_client: GitHubClientBase | None = None,
    git: GitCLI | None = None,
) -> ForkSyncResult:
    """Run the fork-sync workflow: add upstream, fetch it, merge or rebase, then push.

    Each step only runs once the previous one has succeeded, and the first
    failure is raised as a ForkSyncError subclass. A dry run prints the
    planned commands and returns before git or GitHub is touched.

    ``github_client`` and ``git`` default to a githubkit adapter and the git
    binary found on PATH.
    """
    strategy = "rebase" if config.rebase else "merge"
    if config.dry_run:
        logger.info("Dry run requested, projecting commands only", strategy=strategy)
        project_dry_run(config)
        return ForkSyncResult(strategy, config.upstream_branch, config.origin_branch, dry_run=True)

    if git is None:
        git = GitCLI.locate()

    # Resolve the fork from the origin remote.
    try:
        origin_url = git.get_origin_url()
    except GitCommandError as exc:
        raise OriginRemoteError(exc) from exc
    identity = parse_remote_url(origin_url, host=config.github_host)
    logger.info("Resolved origin repository", origin_url=origin_url, repository=str(identity))

    # Look up and validate the fork.
    if github_client is None:
        github_client = GitHubKitAdapter.create(github_token=github_token, github_api_url=github_api_url)
    repo_info = await github_client.get_repository(identity.owner, identity.name)
    validate_fork(repo_info)
    parent: ParentRepository = repo_info.parent  # type: ignore[assignment]
    typer.echo(f"{SUCCESS_MARK} Detected fork: {repo_info.full_name} (parent: {parent.full_name})")

    commands_run: list[GitCommand] = []
    with bound_contextvars(fork=repo_info.full_name, parent=parent.full_name):
        # Register the parent as the upstream remote.
        command = build_remote_add_command(parent.clone_url)
        try:
            git.run(command)
            commands_run.append(command)
            logger.info("Added upstream remote", clone_url=parent.clone_url)
        except GitCommandError as exc:
            if REMOTE_ALREADY_EXISTS_MARKER not in exc.output:
                raise RemoteAddError(exc) from exc
            logger.info("Upstream remote already exists, reusing it")

        command = build_fetch_command()
        try:
            git.run(command)
        except GitCommandError as exc:
            raise FetchError(exc) from exc
        commands_run.append(command)
        typer.echo(f"{SUCCESS_MARK} Fetched upstream")

        command = build_sync_command(config, config.upstream_branch)
        try:
            git.run(command)
        except GitCommandError as exc:
            logger.warning("Integration failed, leaving working copy for manual resolution", strategy=strategy)
            raise IntegrationError(exc, abort_hint(config)) from exc
        commands_run.append(command)
        if config.rebase:
            typer.echo(f"{SUCCESS_MARK} Rebased onto {_upstream_ref(config.upstream_branch)}")
        else:
            typer.echo(f"{SUCCESS_MARK} Merged {_upstream_ref(config.upstream_branch)}")

        command = build_push_command(config)
        try:
            git.run(command)
        except GitCommandError as exc:
            raise PushError(exc) from exc
        commands_run.append(command)
        typer.echo(f"{SUCCESS_MARK} Pushed to origin/{config.origin_branch}")

    logger.info("Fork sync complete", strategy=strategy, commands=len(commands_run))
    return ForkSyncResult(
        strategy,
        config.upstream_branch,
        config.origin_branch,
        fork=repo_info.full_name,
        parent=parent.full_name,
        commands=commands_run,
    )
