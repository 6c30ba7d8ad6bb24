"""HTTP client the Streamlit UI uses to talk to the /api/github proxy.

The UI never surfaces granular errors: every method logs the failure and
returns None so the caller can leave its loading state untouched.
"""

import base64
import binascii
import logging
from typing import Any, Optional

import requests
from pydantic import ValidationError

from models.data_models import Issue, Repo

logger = logging.getLogger(__name__)


class ProxyClient:
    """Calls the local proxy; the GitHub token never reaches this side."""

    def __init__(self, base_url: str = "http://127.0.0.1:8000"):
        self.base_url = base_url.rstrip("/")
        self.url = f"{self.base_url}/api/github"

    def _request(self, method: str, params: dict, json: Optional[dict] = None) -> Optional[Any]:
        try:
            response = requests.request(method, self.url, params=params, json=json)
            response.raise_for_status()
            return response.json()
        except (requests.RequestException, ValueError) as e:
            logger.warning(f"Proxy request failed ({method} endpoint={params.get('endpoint')}): {e}")
            return None

    def fetch_issues(self, repo: Repo, page: int = 1) -> Optional[list[Issue]]:
        """One page of open issues, or None if the request failed."""
        data = self._request("GET", {
            "endpoint": "issues",
            "owner": repo.owner,
            "repo": repo.name,
            "page": page,
        })
        if data is None:
            return None
        if not isinstance(data, list):
            logger.warning(f"Unexpected issue payload for {repo.full_name}: {type(data).__name__}")
            return None

        issues = []
        for item in data:
            try:
                issues.append(Issue.model_validate(item))
            except ValidationError as e:
                logger.warning(f"Skipping malformed issue in {repo.full_name}: {e.error_count()} error(s)")
        return issues

    def fetch_repo(self, repo: Repo) -> Optional[dict[str, Any]]:
        return self._request("GET", {"endpoint": "repo", "owner": repo.owner, "repo": repo.name})

    def fetch_avatar_url(self, username: str) -> Optional[str]:
        data = self._request("GET", {"endpoint": "avatar", "username": username})
        if not isinstance(data, dict):
            return None
        return data.get("avatar_url")

    def fetch_file_content(self, repo: Repo, path: str) -> Optional[Any]:
        return self._request("GET", {
            "endpoint": "content",
            "owner": repo.owner,
            "repo": repo.name,
            "path": path,
        })

    def create_issue(self, repo: Repo, title: str, body: Optional[str] = None) -> Optional[dict[str, Any]]:
        """Create an issue; returns GitHub's issue object or None."""
        return self._request(
            "POST",
            {"endpoint": "issues", "owner": repo.owner, "repo": repo.name},
            json={"title": title, "body": body},
        )


def decode_file_content(payload: Any) -> Optional[str]:
    """Text of a contents-API file payload, or None for dirs and non-base64 files."""
    if not isinstance(payload, dict) or payload.get("encoding") != "base64":
        return None
    try:
        return base64.b64decode(payload.get("content", "")).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as e:
        logger.warning(f"Could not decode {payload.get('path')}: {e}")
        return None
