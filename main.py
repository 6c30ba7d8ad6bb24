#!/usr/bin/env python3
"""
Issue Viewer - Main CLI entrypoint

Browse and create GitHub issues from the browser. Two processes make up the
app: a FastAPI proxy that holds the GitHub token, and a Streamlit client
that talks to the proxy.

Usage:
    python main.py api                     # start the proxy on 127.0.0.1:8000
    python main.py api --port 8080 --no-reload
    python main.py ui                      # start the Streamlit client on :8501
"""

import argparse
import os
import subprocess
import sys
from pathlib import Path

from utils.logger import setup_logger

logger = setup_logger(os.getenv("LOG_LEVEL", "INFO"), "issue_viewer")

PROJECT_ROOT = Path(__file__).resolve().parent
UI_SCRIPT = PROJECT_ROOT / "explorer" / "app.py"


def run_api(host: str, port: int, reload: bool) -> None:
    """Start the /api/github proxy under uvicorn."""
    logger.info("=" * 80)
    logger.info("Starting Issue Viewer API proxy")
    logger.info("=" * 80)
    logger.info(f"API will be available at: http://{host}:{port}/api/github")
    logger.info(f"API docs available at: http://{host}:{port}/docs")
    logger.info("")
    logger.info("To start the UI:")
    logger.info("  python main.py ui")
    logger.info("")
    logger.info("Press Ctrl+C to stop the server")
    logger.info("=" * 80)

    import uvicorn
    uvicorn.run(
        "backend.app:app",
        host=host,
        port=port,
        reload=reload,
        log_level="info"
    )


def run_ui(port: int) -> int:
    """Launch the Streamlit client; returns the streamlit exit code."""
    # Streamlit only puts the script's own directory on sys.path
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(
        p for p in (str(PROJECT_ROOT), env.get("PYTHONPATH")) if p
    )

    cmd = [
        sys.executable, "-m", "streamlit", "run", str(UI_SCRIPT),
        "--server.port", str(port),
    ]
    logger.info(f"Starting Issue Explorer UI at http://localhost:{port}")
    logger.debug(f"Running: {' '.join(cmd)}")
    return subprocess.call(cmd, env=env, cwd=PROJECT_ROOT)


def main():
    """Main CLI entrypoint."""
    parser = argparse.ArgumentParser(
        description="Issue Viewer - browse and create GitHub issues",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Development mode (auto-reload enabled)
  python main.py api

  # Production mode on all interfaces
  python main.py api --host 0.0.0.0 --port 8080 --no-reload

  # Browser UI (expects the API at GITHUB_PROXY_URL)
  python main.py ui --port 8501
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # API command
    api_parser = subparsers.add_parser(
        "api",
        help="Start the GitHub proxy API server"
    )
    api_parser.add_argument(
        "--host",
        type=str,
        default="127.0.0.1",
        help="Host to bind the server to (default: 127.0.0.1)"
    )
    api_parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port to run the API server on (default: 8000)"
    )
    api_parser.add_argument(
        "--no-reload",
        action="store_true",
        help="Disable auto-reload (use for production)"
    )

    # UI command
    ui_parser = subparsers.add_parser(
        "ui",
        help="Start the Streamlit issue browser"
    )
    ui_parser.add_argument(
        "--port",
        type=int,
        default=8501,
        help="Port for the Streamlit server (default: 8501)"
    )

    args = parser.parse_args()

    # Show help if no command provided
    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == "api":
        run_api(args.host, args.port, reload=not args.no_reload)
        sys.exit(0)

    elif args.command == "ui":
        sys.exit(run_ui(args.port))


if __name__ == "__main__":
    main()
