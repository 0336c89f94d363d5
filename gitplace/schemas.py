"""
Pydantic schemas for gitplace.

RepoLocation is the only data model: where a repository URL lands on disk.
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RepoLocation(BaseModel):
    """Destination of a clone, derived from the repository URL."""

    model_config = ConfigDict(frozen=True)

    domain: str = Field(description="Host portion of the URL, e.g. 'github.com'")
    author: str = Field(description="Owning user or organization, e.g. 'torvalds'")
    repo_name: str = Field(description="Repository name without the '.git' suffix")
    destination_path: Path = Field(description="base_path/domain/author/repo_name")

    @field_validator('domain', 'author', 'repo_name')
    @classmethod
    def validate_segment(cls, v: str) -> str:
        """Each component must be a single, non-empty path segment."""
        if not v:
            raise ValueError("must not be empty")
        if '/' in v or '\\' in v:
            raise ValueError(f"must not contain a path separator: {v!r}")
        if v in ('.', '..'):
            raise ValueError(f"must not be a relative path marker: {v!r}")
        return v

    @classmethod
    def create(cls, base_path: Path, domain: str, author: str, repo_name: str) -> "RepoLocation":
        """Build a location whose destination is base_path/domain/author/repo_name."""
        return cls(
            domain=domain,
            author=author,
            repo_name=repo_name,
            destination_path=Path(base_path) / domain / author / repo_name,
        )

    @property
    def parent_path(self) -> Path:
        """Directory that has to exist before cloning (base/domain/author)."""
        return self.destination_path.parent

    @property
    def slug(self) -> str:
        return f"{self.domain}/{self.author}/{self.repo_name}"
