"""Runs git commands as subprocesses."""

import shutil
import subprocess
from typing import Self

import structlog

from gh_fork_sync.git.commands import GitCommand, build_get_origin_url_command
from gh_fork_sync.synchronize.exceptions import GitCommandError, GitExecutableNotFoundError

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def run_git_command(git_executable: str, command: GitCommand) -> str:
    """Run a git command and return its combined stdout and stderr.

    Args:
        git_executable: Path to the git binary.
        command: The command to run.

    Raises:
        GitCommandError: If git cannot be launched or exits non-zero. The
            captured output is attached for diagnostics.

    Returns:
        str: The combined output of the command.
    """
    cmd = [git_executable, *command.args]
    logger.debug("Running git command", command=cmd, description=command.description)
    try:
        result = subprocess.run(cmd, stdout=subprocess.PIPE, stderr=subprocess.STDOUT, encoding="utf-8", errors="replace", check=True)
    except subprocess.CalledProcessError as exc:
        logger.debug("Git command failed", command=cmd, returncode=exc.returncode, output=exc.output)
        raise GitCommandError(command.description, exc, exc.output or "") from exc
    except OSError as exc:
        logger.debug("Git command could not be launched", command=cmd, error=str(exc))
        raise GitCommandError(command.description, exc) from exc
    logger.debug("Git command succeeded", command=cmd, output=result.stdout)
    return result.stdout


class GitCLI:
    """Runs git commands against the repository in the current working directory."""

    def __init__(self, executable: str) -> None:
        """Initialize with an already-resolved git executable."""
        self.executable = executable

    @classmethod
    def locate(cls, name: str = "git") -> Self:
        """Find git on PATH.

        Raises:
            GitExecutableNotFoundError: If ``name`` is not on PATH.
        """
        executable = shutil.which(name)
        if executable is None:
            raise GitExecutableNotFoundError(name)
        logger.debug("Located git executable", executable=executable)
        return cls(executable)

    def run(self, command: GitCommand) -> str:
        """Run a git command, raising GitCommandError on failure."""
        return run_git_command(self.executable, command)

    def get_origin_url(self) -> str:
        """Return the URL of the origin remote."""
        return self.run(build_get_origin_url_command()).strip()
