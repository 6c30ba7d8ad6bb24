"""Configuration models for validation using Pydantic."""

from pydantic import BaseModel, Field, field_validator

from models.data_models import Repo


class CredentialsConfig(BaseModel):
    """API credentials loaded from environment variables."""

    github_token: str = Field(..., description="GitHub personal access token held by the proxy")

    @field_validator("github_token")
    @classmethod
    def validate_github_token(cls, v: str) -> str:
        """Reject empty and placeholder tokens."""
        if not v or not v.strip() or v == "ghp_your_token_here":
            raise ValueError("GitHub token must be set in .env file (GITHUB_TOKEN)")
        return v.strip()


class UIConfig(BaseModel):
    """Settings for the Streamlit client and the origins the proxy accepts."""

    api_url: str = Field(default="http://127.0.0.1:8000", description="Base URL of the /api/github proxy")
    repos: list[Repo] = Field(
        default_factory=lambda: [Repo.parse("octocat/Hello-World"), Repo.parse("octocat/Spoon-Knife")],
        description="Repositories offered in the repo picker",
    )
    allowed_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:8501"],
        description="CORS origins allowed to call the proxy",
    )

    @field_validator("api_url")
    @classmethod
    def validate_api_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("Proxy URL must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("repos", mode="before")
    @classmethod
    def parse_repos(cls, v):
        """Accept "owner/name" strings as well as Repo objects."""
        if isinstance(v, str):
            v = [item for item in v.split(",") if item.strip()]
        return [Repo.parse(item) if isinstance(item, str) else item for item in v]

    @field_validator("repos")
    @classmethod
    def validate_repos(cls, v: list[Repo]) -> list[Repo]:
        if not v:
            raise ValueError("At least one repository must be configured (ISSUE_REPOS)")
        return v

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def parse_origins(cls, v):
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v


class Config(BaseModel):
    """Application configuration."""

    credentials: CredentialsConfig
    ui: UIConfig = Field(default_factory=UIConfig)
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the standard levels."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Log level must be one of: {', '.join(valid_levels)}")
        return v_upper
