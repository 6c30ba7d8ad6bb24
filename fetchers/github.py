"""GitHub REST API client used by the /api/github proxy.

Each method maps to exactly one upstream request and returns the decoded
JSON untouched. There is no retry or rate-limit handling here: any non-2xx
response raises ``requests.HTTPError`` and network failures propagate as
``requests.RequestException`` for the caller to handle.

Owner, repo, username and file path values are percent-encoded into the
URL so a request can never leave the endpoint it was built for.
"""

import logging
from typing import Any, Optional
from urllib.parse import quote

import requests

logger = logging.getLogger(__name__)

# Issues per page requested from the list endpoint
ISSUES_PER_PAGE = 30


class InvalidPathError(ValueError):
    """A caller-supplied value cannot be used as a URL path segment."""


def _segment(value: str) -> str:
    """Percent-encode one path segment; dot segments and empty values are refused."""
    if value in ("", ".", ".."):
        raise InvalidPathError(f"Invalid path segment: {value!r}")
    return quote(value, safe="")


def _file_path(path: str) -> str:
    """Encode a repository file path segment by segment, keeping the slashes."""
    segments = path.strip("/").split("/")
    return "/".join(_segment(segment) for segment in segments)


class GitHubClient:
    """Thin wrapper around the GitHub REST API v2022-11-28."""

    def __init__(self, token: str):
        """Initialize GitHub API client.

        Args:
            token: GitHub personal access token for authentication
        """
        self.token = token
        self.base_url = "https://api.github.com"
        self.headers = {
            "Accept": "application/vnd.github+json",
            "Authorization": f"Bearer {token}",
            "X-GitHub-Api-Version": "2022-11-28"
        }

    def _get(self, path: str, params: Optional[dict] = None) -> Any:
        url = f"{self.base_url}{path}"
        response = requests.get(url, headers=self.headers, params=params)

        remaining = response.headers.get("X-RateLimit-Remaining")
        limit = response.headers.get("X-RateLimit-Limit")
        if remaining and limit:
            logger.debug(f"Rate limit: {remaining}/{limit} remaining")

        if response.status_code in (401, 403):
            logger.error(
                f"Authentication error: {response.status_code} - "
                f"{response.text[:200]}"
            )
        response.raise_for_status()
        return response.json()

    def fetch_issues(self, owner: str, repo: str, page: int = 1) -> list[dict[str, Any]]:
        """Fetch one page of open issues.

        Args:
            owner: Repository owner (e.g., "facebook")
            repo: Repository name (e.g., "react")
            page: 1-indexed page number

        Returns:
            List of raw GitHub issue objects (at most ISSUES_PER_PAGE)

        Raises:
            requests.HTTPError: On any non-2xx response
        """
        params = {
            "state": "open",
            "per_page": ISSUES_PER_PAGE,
            "page": page,
        }
        issues = self._get(f"/repos/{_segment(owner)}/{_segment(repo)}/issues", params=params)
        logger.info(f"Fetched {len(issues)} issues from {owner}/{repo} (page {page})")
        return issues

    def fetch_repo_details(self, owner: str, repo: str) -> dict[str, Any]:
        """Fetch repository metadata."""
        return self._get(f"/repos/{_segment(owner)}/{_segment(repo)}")

    def fetch_user_avatar_url(self, username: str) -> str:
        """Look up a user's avatar URL."""
        user = self._get(f"/users/{_segment(username)}")
        return user["avatar_url"]

    def fetch_file_content(self, owner: str, repo: str, path: str) -> Any:
        """Fetch a file (or directory listing) from the default branch.

        The contents API returns a dict for a file (base64 ``content``) and a
        list for a directory; both are returned as-is.

        Raises:
            InvalidPathError: If any path segment is empty, "." or ".."
        """
        return self._get(f"/repos/{_segment(owner)}/{_segment(repo)}/contents/{_file_path(path)}")

    def create_issue(
        self,
        owner: str,
        repo: str,
        title: str,
        body: Optional[str] = None
    ) -> dict[str, Any]:
        """Open a new issue.

        Raises:
            requests.HTTPError: On any non-2xx response (e.g. 422 on empty title)
        """
        url = f"{self.base_url}/repos/{_segment(owner)}/{_segment(repo)}/issues"
        payload = {"title": title}
        if body is not None:
            payload["body"] = body

        response = requests.post(url, headers=self.headers, json=payload)
        response.raise_for_status()

        issue = response.json()
        logger.info(f"Created issue #{issue.get('number')} in {owner}/{repo}")
        return issue
