"""Shared constants used across the application."""

# Remote and Branch Constants
# ---------------------------

ORIGIN_REMOTE = "origin"
"""Conventional name of the remote the working copy was cloned from (the fork)."""

UPSTREAM_REMOTE = "upstream"
"""Conventional name of the remote pointing at the fork's parent repository."""

DEFAULT_BRANCH = "main"
"""Default branch for both the upstream and origin side of a sync."""

REMOTE_ALREADY_EXISTS_MARKER = f"remote {UPSTREAM_REMOTE} already exists"
"""Text git emits when the upstream remote has already been registered."""

# GitHub Constants
# ----------------

DEFAULT_GITHUB_HOST = "github.com"
"""Host recognized in origin remote URLs."""

DEFAULT_GITHUB_API_URL = "https://api.github.com"
"""Default GitHub REST API URL."""

DRY_RUN_PLACEHOLDER_URL = "https://github.com/upstream/repo.git"
"""Upstream clone URL shown during a dry run, where no API lookup takes place."""

# Output Prefixes
# ---------------

SUCCESS_MARK = "✓"
FAILURE_MARK = "✗"
