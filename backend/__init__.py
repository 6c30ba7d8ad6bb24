"""
Issue Viewer backend - proxy between the browser UI and GitHub.

Provides a FastAPI app exposing /api/github, which forwards requests to the
GitHub REST API with a server-held access token.
"""
