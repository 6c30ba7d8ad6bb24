"""
Issue Explorer - Streamlit client for the /api/github proxy.

Layout: repo picker and "New issue" on top, the issue list on the left and
the selected issue on the right. Run with:

    streamlit run explorer/app.py
"""

import os
import random

import streamlit as st

from explorer.client import ProxyClient, decode_file_content
from explorer.state import IssueBrowser
from models.data_models import Issue
from utils.config_loader import load_ui_config
from utils.logger import setup_logger

SKELETON_ROWS = 6
README_PATH = "README.md"

st.set_page_config(page_title="Issues", page_icon="🐞", layout="wide")

config = load_ui_config()
repos = {repo.full_name: repo for repo in config.repos}

if "client" not in st.session_state:
    setup_logger(os.getenv("LOG_LEVEL", "INFO"), "explorer")
    st.session_state.client = ProxyClient(config.api_url)
    st.session_state.browser = IssueBrowser(config.repos[0])
    st.session_state.repo_details = None
    st.session_state.readme = None
    st.session_state.details_for = None
    st.session_state.show_new_issue = False

client: ProxyClient = st.session_state.client
browser: IssueBrowser = st.session_state.browser


# ── Skeletons ────────────────────────────────────────────────────────────

def _skeleton_bar(width: float, height: str = "0.9em"):
    st.markdown(
        f'<div style="height:{height};width:{width:.0f}%;margin:0.6em 0;'
        f'border-radius:6px;background:rgba(128,128,128,0.2)"></div>',
        unsafe_allow_html=True,
    )


def _skeleton_avatar():
    st.markdown(
        '<div style="width:20px;height:20px;border-radius:50%;'
        'background:rgba(128,128,128,0.2)"></div>',
        unsafe_allow_html=True,
    )


def render_nav_skeleton():
    for _ in range(SKELETON_ROWS):
        _skeleton_bar(random.uniform(50, 80))


def render_content_skeleton():
    _skeleton_bar(60, height="1.8em")
    _skeleton_bar(30)
    for width in (100, 95, 70):
        _skeleton_bar(width)


# ── Callbacks ────────────────────────────────────────────────────────────

def on_repo_selected():
    browser.select_repo(repos[st.session_state.repo_picker], client.fetch_issues)


def on_toggle_new_issue():
    st.session_state.show_new_issue = not st.session_state.show_new_issue


def load_repo_details():
    """Repo metadata and README, fetched once per selected repo."""
    repo = browser.repo
    if st.session_state.details_for == repo.full_name:
        return
    st.session_state.details_for = repo.full_name
    st.session_state.repo_details = client.fetch_repo(repo)
    st.session_state.readme = decode_file_content(client.fetch_file_content(repo, README_PATH))


# ── Sections ─────────────────────────────────────────────────────────────

def render_repo_header():
    picker_col, button_col = st.columns([4, 1])
    with picker_col:
        names = list(repos)
        st.selectbox(
            "Repository",
            names,
            index=names.index(browser.repo.full_name) if browser.repo.full_name in names else 0,
            key="repo_picker",
            on_change=on_repo_selected,
            label_visibility="collapsed",
        )
    with button_col:
        st.button("New issue", type="primary", on_click=on_toggle_new_issue)

    details = st.session_state.repo_details
    if details and details.get("description"):
        st.caption(details["description"])
    if st.session_state.readme:
        with st.expander(README_PATH):
            st.markdown(st.session_state.readme)


def render_new_issue_form():
    with st.form("new_issue", clear_on_submit=True):
        st.subheader(f"New issue in {browser.repo.full_name}")
        title = st.text_input("Title")
        body = st.text_area("Description", help="Markdown is supported")
        submitted = st.form_submit_button("Submit new issue")

    if not submitted:
        return
    if not title.strip():
        st.warning("A title is required")
        return

    created = client.create_issue(browser.repo, title, body or None)
    if created is None:
        st.error("Failed to create issue")
        return

    st.session_state.show_new_issue = False
    st.success(f"Created issue #{created.get('number')}")
    browser.load(client.fetch_issues)


def render_navigation():
    refresh_col, _ = st.columns([1, 3])
    with refresh_col:
        st.button("↻ Refresh", on_click=browser.load, args=(client.fetch_issues,))

    if browser.loading:
        render_nav_skeleton()
        return

    if not browser.issues:
        st.markdown("#### No issues")
        st.caption("Create an issue to report a problem or share an idea")
        return

    for index, issue in enumerate(browser.issues):
        st.button(
            issue.title,
            key=f"issue-{issue.id}",
            on_click=browser.select,
            args=(index,),
            type="primary" if index == browser.current_item else "secondary",
        )

    if browser.show_load_more:
        st.button("Load more", on_click=browser.load_more, args=(client.fetch_issues,))


def render_author(issue: Issue):
    avatar_col, meta_col = st.columns([1, 20])
    if issue.user is None:
        with meta_col:
            st.markdown(f"**{issue.author_login}** opened on {issue.formatted_date}")
        return

    avatar_url = browser.avatar_for(issue.user.login, client.fetch_avatar_url)
    with avatar_col:
        if avatar_url:
            st.image(avatar_url, width=20)
        else:
            _skeleton_avatar()
    with meta_col:
        st.markdown(f"**{issue.author_login}** opened on {issue.formatted_date}")


def render_content():
    if browser.loading:
        render_content_skeleton()
        return

    issue = browser.current_issue
    if issue is None:
        return

    st.header(issue.title, divider="gray")
    render_author(issue)
    st.markdown(issue.body or "")


# ── Page ─────────────────────────────────────────────────────────────────

st.title("Issues")
load_repo_details()
render_repo_header()

if st.session_state.show_new_issue:
    render_new_issue_form()

nav_col, content_col = st.columns([1, 2], gap="large")
with nav_col:
    nav_area = st.empty()
with content_col:
    content_area = st.empty()

if browser.loading:
    # Show skeletons while the first page is in flight
    with nav_area.container():
        render_nav_skeleton()
    with content_area.container():
        render_content_skeleton()
    browser.load(client.fetch_issues)

with nav_area.container():
    render_navigation()
with content_area.container():
    render_content()
