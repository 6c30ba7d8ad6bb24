"""Tests for the GitHub API client behind the proxy."""

from unittest.mock import Mock, patch
import pytest
import requests

from fetchers.github import GitHubClient, InvalidPathError, ISSUES_PER_PAGE


def _response(status_code=200, json_data=None, text=""):
    response = Mock()
    response.status_code = status_code
    response.headers = {"X-RateLimit-Remaining": "4999", "X-RateLimit-Limit": "5000"}
    response.json.return_value = json_data
    response.text = text
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} Error")
    return response


class TestGitHubClientInit:
    """Tests for GitHubClient initialization."""

    def test_init_sets_headers_correctly(self):
        """Verify headers are set correctly with token."""
        token = "ghp_test_token_123"
        client = GitHubClient(token=token)

        assert client.token == token
        assert client.base_url == "https://api.github.com"
        assert client.headers["Accept"] == "application/vnd.github+json"
        assert client.headers["Authorization"] == f"Bearer {token}"
        assert client.headers["X-GitHub-Api-Version"] == "2022-11-28"


class TestFetchIssues:
    """Tests for fetch_issues method."""

    def test_requests_open_issues_page(self, issue_payloads):
        client = GitHubClient(token="test_token")
        payload = issue_payloads(1, 2)

        with patch("requests.get", return_value=_response(json_data=payload)) as mock_get:
            result = client.fetch_issues("octocat", "Hello-World", page=3)

        mock_get.assert_called_once()
        call_args = mock_get.call_args
        assert call_args[0][0] == "https://api.github.com/repos/octocat/Hello-World/issues"
        assert call_args[1]["params"] == {"state": "open", "per_page": ISSUES_PER_PAGE, "page": 3}
        assert call_args[1]["headers"]["Authorization"] == "Bearer test_token"

        # Returned verbatim
        assert result == payload

    def test_default_page_is_one(self):
        client = GitHubClient(token="test_token")
        with patch("requests.get", return_value=_response(json_data=[])) as mock_get:
            client.fetch_issues("octocat", "Hello-World")
        assert mock_get.call_args[1]["params"]["page"] == 1

    def test_auth_error_raises_exception(self):
        """Verify 401/403 auth errors raise exceptions."""
        client = GitHubClient(token="invalid_token")

        with patch("requests.get", return_value=_response(401, text="Bad credentials")):
            with pytest.raises(requests.HTTPError):
                client.fetch_issues("owner", "repo")

        with patch("requests.get", return_value=_response(403, text="Forbidden")):
            with pytest.raises(requests.HTTPError):
                client.fetch_issues("owner", "repo")

    def test_rate_limit_is_not_retried(self):
        """A 429 surfaces immediately; there is no backoff loop."""
        client = GitHubClient(token="test_token")

        with patch("requests.get", return_value=_response(429)) as mock_get:
            with pytest.raises(requests.HTTPError):
                client.fetch_issues("owner", "repo")

        assert mock_get.call_count == 1

    def test_network_error_propagates(self):
        client = GitHubClient(token="test_token")
        with patch("requests.get", side_effect=requests.ConnectionError("boom")):
            with pytest.raises(requests.ConnectionError):
                client.fetch_issues("owner", "repo")


class TestOtherEndpoints:
    """Tests for repo, avatar, content and create."""

    def test_fetch_repo_details(self):
        client = GitHubClient(token="test_token")
        repo_data = {"full_name": "octocat/Hello-World", "description": "My first repo"}

        with patch("requests.get", return_value=_response(json_data=repo_data)) as mock_get:
            result = client.fetch_repo_details("octocat", "Hello-World")

        assert mock_get.call_args[0][0] == "https://api.github.com/repos/octocat/Hello-World"
        assert result == repo_data

    def test_fetch_user_avatar_url(self):
        client = GitHubClient(token="test_token")
        user = {"login": "octocat", "avatar_url": "https://avatars.githubusercontent.com/u/583231"}

        with patch("requests.get", return_value=_response(json_data=user)) as mock_get:
            url = client.fetch_user_avatar_url("octocat")

        assert mock_get.call_args[0][0] == "https://api.github.com/users/octocat"
        assert url == "https://avatars.githubusercontent.com/u/583231"

    def test_fetch_file_content(self):
        client = GitHubClient(token="test_token")
        content = {"type": "file", "path": "docs/README.md", "encoding": "base64", "content": "SGk="}

        with patch("requests.get", return_value=_response(json_data=content)) as mock_get:
            result = client.fetch_file_content("octocat", "Hello-World", "/docs/README.md")

        assert mock_get.call_args[0][0] == (
            "https://api.github.com/repos/octocat/Hello-World/contents/docs/README.md"
        )
        assert result == content

    def test_create_issue(self, issue_payload):
        client = GitHubClient(token="test_token")
        created = issue_payload(99, title="New bug")

        with patch("requests.post", return_value=_response(201, json_data=created)) as mock_post:
            result = client.create_issue("octocat", "Hello-World", "New bug", "Steps to reproduce")

        call_args = mock_post.call_args
        assert call_args[0][0] == "https://api.github.com/repos/octocat/Hello-World/issues"
        assert call_args[1]["json"] == {"title": "New bug", "body": "Steps to reproduce"}
        assert call_args[1]["headers"]["X-GitHub-Api-Version"] == "2022-11-28"
        assert result == created

    def test_create_issue_without_body(self, issue_payload):
        client = GitHubClient(token="test_token")

        with patch("requests.post", return_value=_response(201, json_data=issue_payload(1))) as mock_post:
            client.create_issue("octocat", "Hello-World", "Title only")

        assert mock_post.call_args[1]["json"] == {"title": "Title only"}

    def test_create_issue_validation_error(self):
        client = GitHubClient(token="test_token")
        with patch("requests.post", return_value=_response(422)):
            with pytest.raises(requests.HTTPError):
                client.create_issue("octocat", "Hello-World", "")


class TestPathEscaping:
    """Caller values stay inside the endpoint they were sent to."""

    def test_slash_in_username_is_encoded_on_the_wire(self):
        """The prepared request still targets /users/, not another API path."""
        client = GitHubClient(token="test_token")
        response = _response(json_data={"avatar_url": "https://a/1"})

        with patch("requests.Session.send", return_value=response) as mock_send:
            client.fetch_user_avatar_url("../rate_limit")

        prepared = mock_send.call_args[0][0]
        assert prepared.url == "https://api.github.com/users/..%2Frate_limit"

    @pytest.mark.parametrize("username", ["..", ".", ""])
    def test_dot_segment_username_rejected(self, username):
        client = GitHubClient(token="test_token")
        with patch("requests.get") as mock_get:
            with pytest.raises(InvalidPathError):
                client.fetch_user_avatar_url(username)
        mock_get.assert_not_called()

    def test_owner_and_repo_are_single_segments(self):
        client = GitHubClient(token="test_token")

        with patch("requests.get", return_value=_response(json_data={})) as mock_get:
            client.fetch_repo_details("octocat", "Hello-World/issues?x=1")

        assert mock_get.call_args[0][0] == (
            "https://api.github.com/repos/octocat/Hello-World%2Fissues%3Fx%3D1"
        )

    def test_dot_segment_repo_rejected_for_create(self):
        client = GitHubClient(token="test_token")
        with patch("requests.post") as mock_post:
            with pytest.raises(InvalidPathError):
                client.create_issue("..", "..", "title")
        mock_post.assert_not_called()

    def test_file_path_keeps_slashes_and_encodes_segments(self):
        client = GitHubClient(token="test_token")

        with patch("requests.get", return_value=_response(json_data={})) as mock_get:
            client.fetch_file_content("octocat", "Hello-World", "docs/my file#1.md")

        assert mock_get.call_args[0][0] == (
            "https://api.github.com/repos/octocat/Hello-World/contents/docs/my%20file%231.md"
        )

    @pytest.mark.parametrize("path", ["../../rate_limit", "docs/./README.md", "docs//README.md"])
    def test_file_path_traversal_rejected(self, path):
        client = GitHubClient(token="test_token")
        with patch("requests.get") as mock_get:
            with pytest.raises(InvalidPathError):
                client.fetch_file_content("octocat", "Hello-World", path)
        mock_get.assert_not_called()
