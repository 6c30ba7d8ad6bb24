"""Configuration loader that reads from .env and validates with Pydantic."""

import os
import sys
from pathlib import Path
from dotenv import load_dotenv
from pydantic import ValidationError

from models.config_models import Config, CredentialsConfig, UIConfig


def _load_env() -> None:
    # Load .env file from project root (existing environment wins)
    env_path = Path(__file__).parent.parent / ".env"
    load_dotenv(dotenv_path=env_path)


def _ui_settings() -> dict:
    """Collect UI settings that are present in the environment."""
    settings = {}
    if os.getenv("GITHUB_PROXY_URL"):
        settings["api_url"] = os.getenv("GITHUB_PROXY_URL")
    if os.getenv("ISSUE_REPOS"):
        settings["repos"] = os.getenv("ISSUE_REPOS")
    if os.getenv("CORS_ORIGINS"):
        settings["allowed_origins"] = os.getenv("CORS_ORIGINS")
    return settings


def _exit_with_errors(e: ValidationError) -> None:
    print("❌ Configuration validation failed:", file=sys.stderr)
    print("\nPlease check your .env file. Missing or invalid fields:", file=sys.stderr)

    for error in e.errors():
        field_path = " → ".join(str(x) for x in error["loc"])
        message = error["msg"]
        print(f"  • {field_path}: {message}", file=sys.stderr)

    print("\nHint: Copy .env.example to .env and fill in your credentials.", file=sys.stderr)
    sys.exit(1)


def load_config() -> Config:
    """
    Load and validate the proxy configuration from environment variables.

    Reads from the .env file in the project root. The GitHub token is taken
    from GITHUB_TOKEN, falling back to GITHUB_PAT.

    Returns:
        Config: Validated configuration object

    Raises:
        SystemExit: If configuration is invalid or missing required fields
    """
    _load_env()

    try:
        return Config(
            credentials=CredentialsConfig(
                github_token=os.getenv("GITHUB_TOKEN") or os.getenv("GITHUB_PAT") or "",
            ),
            ui=UIConfig(**_ui_settings()),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )
    except ValidationError as e:
        _exit_with_errors(e)


def load_ui_config() -> UIConfig:
    """
    Load the Streamlit client settings.

    The client never talks to GitHub directly, so no token is required here.

    Raises:
        SystemExit: If a setting is invalid
    """
    _load_env()

    try:
        return UIConfig(**_ui_settings())
    except ValidationError as e:
        _exit_with_errors(e)
