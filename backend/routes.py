"""
API routes for the GitHub proxy.

A single route, /api/github, forwards a small set of parameterized requests
to the GitHub REST API using the server-held token. The `endpoint` query
parameter selects the operation:

- issues  (GET)  list one page of open issues
- issues  (POST) create an issue from a {title, body} JSON body
- repo    (GET)  repository metadata
- avatar  (GET)  {avatar_url} for a username
- content (GET)  file contents at a path
"""

import logging
from typing import Any, Optional

import requests
from fastapi import APIRouter, Body, Query
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from fetchers.github import GitHubClient, InvalidPathError
from models.data_models import NewIssue
from utils.config_loader import load_config

logger = logging.getLogger(__name__)

# Module-scoped GitHub client shared by every request
config = load_config()
github = GitHubClient(config.credentials.github_token)

router = APIRouter(prefix="/api", tags=["github"])

INVALID_ENDPOINT = {"error": "Invalid endpoint"}
FETCH_FAILED = {"error": "Failed to fetch data"}


def _parse_page(page: Optional[str]) -> int:
    """Page number from the query string; anything unusable means page 1."""
    try:
        value = int(page)
    except (TypeError, ValueError):
        return 1
    return value if value >= 1 else 1


@router.get("/github")
def proxy_get(
    endpoint: Optional[str] = Query(None, description="One of: issues, repo, avatar, content"),
    owner: Optional[str] = Query(None, description="Repository owner"),
    repo: Optional[str] = Query(None, description="Repository name"),
    username: Optional[str] = Query(None, description="GitHub login (avatar)"),
    path: Optional[str] = Query(None, description="File path in the repository (content)"),
    page: Optional[str] = Query(None, description="Issue list page (1-indexed)"),
):
    """
    Forward a read request to GitHub and return the JSON response verbatim.

    Returns:
    - issues: array of issue objects (30 per page, open only)
    - repo: repository object
    - avatar: {"avatar_url": "..."}
    - content: contents API object

    Errors:
    - 400 {"error": "Invalid endpoint"} for an unknown endpoint or a missing selector
    - 500 {"error": "Failed to fetch data"} for any upstream failure
    """
    has_repo = bool(owner and repo)

    try:
        if endpoint == "issues" and has_repo:
            data = github.fetch_issues(owner, repo, _parse_page(page))
        elif endpoint == "repo" and has_repo:
            data = github.fetch_repo_details(owner, repo)
        elif endpoint == "avatar" and username:
            data = {"avatar_url": github.fetch_user_avatar_url(username)}
        elif endpoint == "content" and has_repo and path:
            data = github.fetch_file_content(owner, repo, path)
        else:
            logger.warning(f"Rejected proxy request: endpoint={endpoint!r}")
            return JSONResponse(status_code=400, content=INVALID_ENDPOINT)

        return JSONResponse(status_code=200, content=data)

    except InvalidPathError as e:
        logger.warning(f"Rejected proxy request: {e}")
        return JSONResponse(status_code=400, content=INVALID_ENDPOINT)
    except requests.RequestException as e:
        logger.error(f"Error fetching data (endpoint={endpoint}): {e}")
        return JSONResponse(status_code=500, content=FETCH_FAILED)
    except Exception as e:
        logger.error(f"Unexpected error fetching data (endpoint={endpoint}): {e}")
        return JSONResponse(status_code=500, content=FETCH_FAILED)


@router.post("/github")
def proxy_post(
    endpoint: Optional[str] = Query(None, description="Only 'issues' accepts POST"),
    owner: Optional[str] = Query(None, description="Repository owner"),
    repo: Optional[str] = Query(None, description="Repository name"),
    payload: Any = Body(None),
):
    """
    Create an issue in owner/repo and return GitHub's issue object with 201.

    Errors:
    - 400 {"error": "Invalid endpoint"} unless endpoint=issues with owner and repo
    - 422 when the body is not a {title, body} object with a non-empty title
    - 500 {"error": "Failed to fetch data"} for any upstream failure
    """
    # The selector is checked before the body so a bad endpoint is always a 400
    if endpoint != "issues" or not (owner and repo):
        logger.warning(f"Rejected proxy POST: endpoint={endpoint!r}")
        return JSONResponse(status_code=400, content=INVALID_ENDPOINT)

    try:
        new_issue = NewIssue.model_validate(payload)
    except ValidationError as e:
        raise RequestValidationError(e.errors())

    try:
        issue = github.create_issue(owner, repo, new_issue.title, new_issue.body)
        return JSONResponse(status_code=201, content=issue)

    except InvalidPathError as e:
        logger.warning(f"Rejected proxy POST: {e}")
        return JSONResponse(status_code=400, content=INVALID_ENDPOINT)
    except requests.RequestException as e:
        logger.error(f"Error creating issue in {owner}/{repo}: {e}")
        return JSONResponse(status_code=500, content=FETCH_FAILED)
    except Exception as e:
        logger.error(f"Unexpected error creating issue in {owner}/{repo}: {e}")
        return JSONResponse(status_code=500, content=FETCH_FAILED)
