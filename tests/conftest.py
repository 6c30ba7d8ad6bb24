"""Shared pytest fixtures and configuration."""

import os
import time
import pytest

# backend.routes builds its GitHub client at import time
os.environ.setdefault("GITHUB_TOKEN", "ghp_test_token_1234567890")


@pytest.fixture
def test_env(monkeypatch):
    """
    Set valid test environment variables so config can be loaded during
    tests without requiring real credentials.
    """
    monkeypatch.setenv("GITHUB_TOKEN", "ghp_test_token_1234567890")
    monkeypatch.delenv("GITHUB_PAT", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("GITHUB_PROXY_URL", "http://localhost:9000/")
    monkeypatch.setenv("ISSUE_REPOS", "octocat/Hello-World, primer/react")
    monkeypatch.delenv("CORS_ORIGINS", raising=False)

    return {
        "github_token": "ghp_test_token_1234567890",
        "log_level": "DEBUG",
        "api_url": "http://localhost:9000",
    }


@pytest.fixture
def invalid_env(monkeypatch):
    """
    Set up invalid/missing environment variables for testing validation.
    """
    monkeypatch.setenv("GITHUB_TOKEN", "")
    monkeypatch.setenv("GITHUB_PAT", "")


def _make_issue_payload(issue_id: int, title: str = None, login: str = "octocat", **extra) -> dict:
    """A trimmed GitHub issue object as returned by the list endpoint."""
    payload = {
        "id": issue_id,
        "number": issue_id,
        "title": title or f"Issue {issue_id}",
        "body": f"Body of issue {issue_id}",
        "user": {"login": login, "id": 1},
        "state": "open",
        "created_at": "2024-01-05T10:30:00Z",
        "html_url": f"https://github.com/octocat/Hello-World/issues/{issue_id}",
    }
    payload.update(extra)
    return payload


@pytest.fixture
def issue_payload():
    """The single-issue builder, for tests that need custom fields."""
    return _make_issue_payload


@pytest.fixture
def issue_payloads():
    """Factory fixture: issue_payloads(1, 2, 3) -> list of issue dicts."""
    def _make(*ids):
        return [_make_issue_payload(i) for i in ids]
    return _make


@pytest.fixture
def local_tz(monkeypatch):
    """Factory fixture: local_tz("PST8") pins the process timezone."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")

    def _set(name):
        monkeypatch.setenv("TZ", name)
        time.tzset()

    yield _set
    monkeypatch.undo()
    time.tzset()
