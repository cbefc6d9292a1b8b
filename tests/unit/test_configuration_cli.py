"""Unit tests for the fork-sync command line interface."""

import logging
import subprocess
from unittest.mock import AsyncMock

import pytest
import structlog
from pytest import MonkeyPatch
from typer.testing import CliRunner

from gh_fork_sync.configuration import cli
from gh_fork_sync.configuration.models import SyncConfig
from gh_fork_sync.synchronize.exceptions import GitCommandError, IntegrationError, NotAForkError, UnsupportedURLFormatError

runner = CliRunner()


@pytest.fixture
def workflow(monkeypatch: MonkeyPatch) -> AsyncMock:
    """Replace the fork sync workflow with a mock."""
    mock = AsyncMock()
    monkeypatch.setattr(cli, "run_fork_sync_workflow", mock)
    return mock


@pytest.mark.parametrize(
    "args, expected",
    [
        pytest.param([], SyncConfig(), id="default values"),
        pytest.param(
            ["--upstream-branch=develop", "--origin-branch=feature"],
            SyncConfig(upstream_branch="develop", origin_branch="feature"),
            id="custom branches",
        ),
        pytest.param(
            ["--rebase", "--force", "--dry-run"],
            SyncConfig(rebase=True, force_push=True, dry_run=True),
            id="all flags enabled",
        ),
        pytest.param(["--github-host", "ghe.example.com"], SyncConfig(github_host="ghe.example.com"), id="enterprise host"),
    ],
)
def test_flags_bind_into_config(workflow: AsyncMock, args: list[str], expected: SyncConfig) -> None:
    """Test that command line flags are resolved into a single SyncConfig."""
    result = runner.invoke(cli.typer_app, args)

    assert result.exit_code == 0, result.output
    config = workflow.await_args.args[0]
    assert config == expected


def test_api_options_are_passed_to_workflow(workflow: AsyncMock) -> None:
    """Test that API settings reach the workflow."""
    result = runner.invoke(cli.typer_app, ["--github-api-url", "https://ghe.example.com/api/v3", "--github-token", "abc"])

    assert result.exit_code == 0, result.output
    assert workflow.await_args.kwargs == {"github_token": "abc", "github_api_url": "https://ghe.example.com/api/v3"}


def test_positional_arguments_are_rejected(workflow: AsyncMock) -> None:
    """Test that the command takes no positional arguments."""
    result = runner.invoke(cli.typer_app, ["extra"])

    assert result.exit_code != 0
    workflow.assert_not_awaited()


def test_dry_run_end_to_end() -> None:
    """Test that --dry-run prints the plan and exits successfully."""
    result = runner.invoke(cli.typer_app, ["--dry-run", "--rebase"])

    assert result.exit_code == 0, result.output
    assert "Would run: git rebase upstream upstream/main" in result.output
    assert "Would run: git push origin HEAD:main" in result.output


@pytest.mark.parametrize(
    "error, expected_line, expected_code",
    [
        pytest.param(UnsupportedURLFormatError("ftp://example.com/x"), "✗ Error: unsupported origin URL format: ftp://example.com/x", 2, id="parse"),
        pytest.param(NotAForkError("me/stream"), "✗ repository me/stream isn't a fork", 4, id="not a fork"),
    ],
)
def test_failures_print_cross_and_exit_code(workflow: AsyncMock, error: Exception, expected_line: str, expected_code: int) -> None:
    """Test that failures are printed with a cross mark and mapped to their exit code."""
    workflow.side_effect = error

    result = runner.invoke(cli.typer_app, [])

    assert result.exit_code == expected_code
    assert expected_line in result.output


@pytest.mark.parametrize(
    "args, hint_line",
    [
        pytest.param([], "To abort the merge, run: git merge --abort", id="merge"),
        pytest.param(["--rebase"], "To abort the rebase, run: git rebase --abort", id="rebase"),
    ],
)
def test_integration_failure_prints_abort_hint(workflow: AsyncMock, args: list[str], hint_line: str) -> None:
    """Test that a failed merge or rebase prints the abort command for the active strategy."""
    strategy_hint = "git rebase --abort" if "--rebase" in args else "git merge --abort"
    cause = GitCommandError("merging upstream", subprocess.CalledProcessError(1, ["git", "merge"]), "CONFLICT")
    workflow.side_effect = IntegrationError(cause, strategy_hint)

    result = runner.invoke(cli.typer_app, args)

    assert result.exit_code == 7
    assert "✗ Error while merging upstream: exit status 1" in result.output
    assert hint_line in result.output


def test_help_does_not_reveal_token(monkeypatch: MonkeyPatch) -> None:
    """Test that a token from the environment never appears in the help text."""
    monkeypatch.setenv("GITHUB_TOKEN", "ghp_SECRET123")

    result = runner.invoke(cli.typer_app, ["--help"])

    assert result.exit_code == 0, result.output
    assert "--github-token" in result.output
    assert "ghp_SECRET123" not in result.output


def test_token_read_from_environment(workflow: AsyncMock, monkeypatch: MonkeyPatch) -> None:
    """Test that GITHUB_TOKEN reaches the workflow when --github-token is not given."""
    monkeypatch.setenv("GITHUB_TOKEN", "ghp_FROM_ENV")

    result = runner.invoke(cli.typer_app, [])

    assert result.exit_code == 0, result.output
    assert workflow.await_args.kwargs["github_token"] == "ghp_FROM_ENV"


def test_help_examples_use_installed_command() -> None:
    """Test that the help examples name the installed gh-fork-sync command."""
    result = runner.invoke(cli.typer_app, ["--help"])

    assert result.exit_code == 0, result.output
    assert "gh-fork-sync" in result.output
    assert "gh fork-sync" not in result.output


@pytest.mark.parametrize(
    "debug, expect_debug_output",
    [
        pytest.param(True, True, id="debug"),
        pytest.param(False, False, id="default"),
    ],
)
def test_configure_logging_filters_structlog(capsys: pytest.CaptureFixture[str], debug: bool, expect_debug_output: bool) -> None:
    """Test that --debug controls structlog's level and output goes to stderr, not the root logger."""
    root_level = logging.getLogger().level

    cli.configure_logging(debug)
    structlog.get_logger("gh_fork_sync.test").debug("Checking log level")

    captured = capsys.readouterr()
    assert ("Checking log level" in captured.err) is expect_debug_output
    assert "Checking log level" not in captured.out
    assert logging.getLogger().level == root_level
