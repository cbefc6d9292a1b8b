"""Pydantic schemas for repository identities and GitHub repository metadata."""

from pydantic import BaseModel, ConfigDict, Field


class RepositoryIdentity(BaseModel):
    """Owner/name pair parsed from a git remote URL."""

    model_config = ConfigDict(frozen=True)

    owner: str = Field(min_length=1)
    name: str = Field(min_length=1)

    def __str__(self) -> str:
        return f"{self.owner}/{self.name}"


class ParentRepository(BaseModel):
    """Pydantic model for the parent of a forked repository."""

    full_name: str
    clone_url: str


class RepositoryInfo(BaseModel):
    """Pydantic model for the subset of GitHub repository metadata a sync needs.

    Mirrors the ``GET /repos/{owner}/{repo}`` response; keys not listed here
    are ignored.
    """

    model_config = ConfigDict(extra="ignore")

    full_name: str
    fork: bool
    parent: ParentRepository | None = None
