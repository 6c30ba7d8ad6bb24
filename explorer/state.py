"""Session state for the issue list and detail pane.

IssueBrowser is plain Python so the Streamlit script stays a thin view over
it. Fetching is injected as a callable taking (repo, page) and returning a
list of issues, or None when the request failed.
"""

import logging
from typing import Callable, Optional

from fetchers.github import ISSUES_PER_PAGE
from models.data_models import Issue, Repo

logger = logging.getLogger(__name__)

FetchPage = Callable[[Repo, int], Optional[list[Issue]]]
FetchAvatar = Callable[[str], Optional[str]]


class IssueBrowser:
    """Issues loaded so far for one repo, plus the selected one."""

    def __init__(self, repo: Repo, per_page: int = ISSUES_PER_PAGE):
        self.repo = repo
        self.per_page = per_page
        self.issues: list[Issue] = []
        self.page = 0
        self.loading = True
        self.current_item = 0
        self.has_more = False
        self.avatar_urls: dict[str, str] = {}

    @property
    def current_issue(self) -> Optional[Issue]:
        if 0 <= self.current_item < len(self.issues):
            return self.issues[self.current_item]
        return None

    @property
    def show_load_more(self) -> bool:
        return not self.loading and self.has_more

    def load(self, fetch: FetchPage) -> bool:
        """(Re)load the first page. On failure the browser stays in loading state."""
        self.issues = []
        self.page = 0
        self.current_item = 0
        self.has_more = False
        self.loading = True

        batch = fetch(self.repo, 1)
        if batch is None:
            logger.warning(f"Initial issue load failed for {self.repo.full_name}")
            return False

        self.issues = list(batch)
        self.page = 1
        self.has_more = len(batch) >= self.per_page
        self.loading = False
        return True

    def load_more(self, fetch: FetchPage) -> int:
        """Append the next page, skipping issues already listed.

        Returns the number of issues added. A failed fetch changes nothing.
        """
        next_page = self.page + 1
        batch = fetch(self.repo, next_page)
        if batch is None:
            logger.warning(f"Loading page {next_page} failed for {self.repo.full_name}")
            return 0

        seen = {issue.id for issue in self.issues}
        added = [issue for issue in batch if issue.id not in seen]
        self.issues.extend(added)
        self.page = next_page
        self.has_more = len(batch) >= self.per_page
        logger.debug(f"Page {next_page}: {len(batch)} fetched, {len(added)} new")
        return len(added)

    def select(self, index: int) -> Issue:
        """Make issues[index] the one shown in the detail pane."""
        if not 0 <= index < len(self.issues):
            raise IndexError(f"No issue at index {index} ({len(self.issues)} loaded)")
        self.current_item = index
        return self.issues[index]

    def select_repo(self, repo: Repo, fetch: FetchPage) -> bool:
        self.repo = repo
        return self.load(fetch)

    def avatar_for(self, login: str, fetch_avatar: FetchAvatar) -> Optional[str]:
        """Avatar URL for login, fetched once per login."""
        if login not in self.avatar_urls:
            url = fetch_avatar(login)
            if url is None:
                return None
            self.avatar_urls[login] = url
        return self.avatar_urls[login]
