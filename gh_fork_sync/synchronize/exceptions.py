"""Custom exceptions raised while synchronizing a fork with its upstream."""

import subprocess

from gh_fork_sync.utils.constants import FAILURE_MARK


class ForkSyncError(Exception):
    """Base class for every failure that terminates a fork sync."""

    exit_code: int = 1
    prefix: str = "Error: "

    def display(self) -> str:
        """Return the single line shown to the user for this failure."""
        return f"{FAILURE_MARK} {self.prefix}{self}"


# Origin identity errors
class RemoteURLParseError(ForkSyncError):
    """Raised when the origin remote URL cannot be turned into an owner/repo pair."""

    exit_code = 2

    def __init__(self, message: str, url: str) -> None:
        """Initializes the exception with the offending URL."""
        super().__init__(message)
        self.url = url


class UnsupportedURLFormatError(RemoteURLParseError):
    """Raised when the origin remote URL is neither SSH nor HTTPS shaped."""

    def __init__(self, url: str) -> None:
        super().__init__(f"unsupported origin URL format: {url}", url)


class MalformedURLError(RemoteURLParseError):
    """Raised when the origin remote URL lacks an owner or repository name."""

    def __init__(self, url: str) -> None:
        super().__init__(f"failed to parse owner/repo from URL: {url}", url)


class OriginRemoteError(ForkSyncError):
    """Raised when the URL of the origin remote cannot be read from git."""

    exit_code = 2

    def __init__(self, cause: Exception) -> None:
        super().__init__(f"failed to get origin remote: {cause}")
        self.cause = cause


# Repository metadata errors
class RepositoryLookupError(ForkSyncError):
    """Raised when repository metadata cannot be fetched from the GitHub API."""

    exit_code = 3

    def __init__(self, repository: str, cause: Exception) -> None:
        super().__init__(f"failed to get repo info for {repository}: {cause}")
        self.repository = repository
        self.cause = cause


class MissingParentError(ForkSyncError):
    """Raised when a fork's metadata does not name its parent repository."""

    exit_code = 3

    def __init__(self, full_name: str) -> None:
        super().__init__(f"repository {full_name} is a fork but GitHub did not report its parent")
        self.full_name = full_name


class NotAForkError(ForkSyncError):
    """Raised when the origin repository isn't a fork."""

    exit_code = 4
    prefix = ""

    def __init__(self, full_name: str) -> None:
        super().__init__(f"repository {full_name} isn't a fork")
        self.full_name = full_name


# Git errors
class GitExecutableNotFoundError(ForkSyncError):
    """Raised when no git executable can be found on PATH."""

    exit_code = 9
    prefix = "Error while looking for git: "

    def __init__(self, name: str) -> None:
        super().__init__(f"executable file not found in $PATH: {name}")
        self.name = name


class GitCommandError(Exception):
    """Raised when a git command fails to launch or exits non-zero."""

    def __init__(self, description: str, underlying: Exception, output: str = "") -> None:
        """Initializes the exception with the command label, native error, and combined output."""
        self.description = description
        self.underlying = underlying
        self.output = output
        super().__init__(str(self))

    def __str__(self) -> str:
        if isinstance(self.underlying, subprocess.CalledProcessError):
            reason = f"exit status {self.underlying.returncode}"
        else:
            reason = str(self.underlying)
        return f"{self.description}: {reason}\nOutput: {self.output}"


class GitStepError(ForkSyncError):
    """Base class for a sync step whose git command failed."""

    prefix = "Error while "

    def __init__(self, cause: GitCommandError) -> None:
        super().__init__(str(cause))
        self.cause = cause


class RemoteAddError(GitStepError):
    """Raised when the upstream remote cannot be registered."""

    exit_code = 5


class FetchError(GitStepError):
    """Raised when fetching the upstream remote fails."""

    exit_code = 6


class IntegrationError(GitStepError):
    """Raised when merging or rebasing upstream changes fails.

    Usually a conflict. The working copy is left mid-merge or mid-rebase for
    the user to resolve or abort with ``abort_hint``.
    """

    exit_code = 7

    def __init__(self, cause: GitCommandError, abort_hint: str) -> None:
        super().__init__(cause)
        self.abort_hint = abort_hint


class PushError(GitStepError):
    """Raised when pushing the integrated branch to origin fails."""

    exit_code = 8
