"""
Issue Explorer - Streamlit UI for browsing and creating GitHub issues.

Talks only to the /api/github proxy; see explorer/app.py.
"""
