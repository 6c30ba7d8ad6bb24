"""Data models for the issue viewer."""

from models.config_models import Config, CredentialsConfig, UIConfig
from models.data_models import Issue, IssueUser, NewIssue, Repo

__all__ = [
    "Config",
    "CredentialsConfig",
    "UIConfig",
    "Issue",
    "IssueUser",
    "NewIssue",
    "Repo",
]
