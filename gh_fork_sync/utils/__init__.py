"""Utility modules for shared functionality."""

from .constants import (
    DEFAULT_BRANCH,
    DEFAULT_GITHUB_API_URL,
    DEFAULT_GITHUB_HOST,
    DRY_RUN_PLACEHOLDER_URL,
    FAILURE_MARK,
    ORIGIN_REMOTE,
    SUCCESS_MARK,
    UPSTREAM_REMOTE,
)

__all__ = [
    "DEFAULT_BRANCH",
    "DEFAULT_GITHUB_API_URL",
    "DEFAULT_GITHUB_HOST",
    "DRY_RUN_PLACEHOLDER_URL",
    "FAILURE_MARK",
    "ORIGIN_REMOTE",
    "SUCCESS_MARK",
    "UPSTREAM_REMOTE",
]
