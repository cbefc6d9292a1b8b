"""Defines the Command Line Interface (CLI) using Typer."""

import asyncio
import logging
import sys

import structlog
import typer
from dotenv import load_dotenv
from typer import Option
from typing_extensions import Annotated

from gh_fork_sync.configuration.env import settings
from gh_fork_sync.configuration.models import SyncConfig
from gh_fork_sync.synchronize.driver import run_fork_sync_workflow
from gh_fork_sync.synchronize.exceptions import ForkSyncError, IntegrationError
from gh_fork_sync.utils.constants import DEFAULT_BRANCH

load_dotenv()

EPILOG = """Examples:

  Sync main branch with upstream: gh-fork-sync

  Sync a specific branch: gh-fork-sync --upstream-branch develop --origin-branch develop

  Rebase instead of merge: gh-fork-sync --rebase

  Force push the changes: gh-fork-sync --force

  Preview the commands without executing them: gh-fork-sync --dry-run
"""

typer_app = typer.Typer(
    pretty_exceptions_show_locals=False,
    add_completion=False,
    help="Sync your fork with the upstream repository.",
)


def configure_logging(debug: bool) -> None:
    """Send structlog output to stderr, at DEBUG when requested and WARNING otherwise."""
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG if debug else logging.WARNING),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


@typer_app.command(name="fork-sync", epilog=EPILOG)
def fork_sync_cli(
    upstream_branch: Annotated[str, Option("--upstream-branch", help="Branch to sync from upstream.")] = DEFAULT_BRANCH,
    origin_branch: Annotated[str, Option("--origin-branch", help="Local branch to update.")] = DEFAULT_BRANCH,
    rebase: Annotated[bool, Option("--rebase", help="Rebase instead of merge.")] = False,
    force: Annotated[bool, Option("--force", help="Force push to origin.")] = False,
    dry_run: Annotated[bool, Option("--dry-run", help="Print commands without executing them.")] = False,
    github_host: Annotated[str, Option("--github-host", help="GitHub host expected in the origin remote URL.")] = settings.GH_HOST,
    github_api_url: Annotated[str, Option("--github-api-url", help="GitHub API URL.")] = settings.GITHUB_API_URL,
    github_token: Annotated[
        str | None, Option("--github-token", envvar="GITHUB_TOKEN", show_default=False, help="GitHub token, passed to the API client unchanged.")
    ] = None,
    debug: Annotated[bool, Option("--debug", help="Enable debug logging.")] = settings.DEBUG,
) -> None:
    """Sync your fork with its upstream repository: add upstream, fetch, merge or rebase, and push."""
    configure_logging(debug)
    config = SyncConfig(
        upstream_branch=upstream_branch,
        origin_branch=origin_branch,
        rebase=rebase,
        force_push=force,
        dry_run=dry_run,
        github_host=github_host,
    )

    try:
        asyncio.run(run_fork_sync_workflow(config, github_token=github_token, github_api_url=github_api_url))
    except ForkSyncError as exc:
        typer.echo(exc.display())
        if isinstance(exc, IntegrationError):
            strategy = "rebase" if config.rebase else "merge"
            typer.echo(f"To abort the {strategy}, run: {exc.abort_hint}")
        raise typer.Exit(exc.exit_code) from exc


if __name__ == "__main__":
    typer_app()
