"""Data models for GitHub issue and repository data."""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, field_validator


class IssueUser(BaseModel):
    """Author of an issue (only the fields the UI shows)."""
    login: str


class Issue(BaseModel):
    """Issue record as returned by GitHub's issue list endpoint.

    Extra fields in the GitHub payload are ignored. Only `id` and `title`
    are required; everything else falls back to a display default.
    """

    id: int
    number: Optional[int] = None
    title: str
    body: Optional[str] = None  # Markdown
    user: Optional[IssueUser] = None
    created_at: Optional[datetime] = None
    html_url: Optional[str] = None

    @property
    def author_login(self) -> str:
        return self.user.login if self.user else "Unknown"

    @property
    def formatted_date(self) -> str:
        """Creation date in the local timezone, US long form, e.g. "January 5, 2024"."""
        if self.created_at is None:
            return "Unknown date"
        local = self.created_at.astimezone()
        return f"{local:%B} {local.day}, {local.year}"


class Repo(BaseModel):
    """A GitHub repository identified by owner/name."""

    owner: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"

    @classmethod
    def parse(cls, value: str) -> "Repo":
        """Build a Repo from an "owner/name" string.

        Raises:
            ValueError: If the string is not in owner/name form
        """
        parts = value.strip().strip("/").split("/")
        if len(parts) != 2 or not all(parts):
            raise ValueError(f"Invalid repository format: '{value}'. Use 'owner/name'")
        return cls(owner=parts[0], name=parts[1])


class NewIssue(BaseModel):
    """Request body for creating an issue through the proxy."""

    title: str
    body: Optional[str] = None

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Issue title must not be empty")
        return v
