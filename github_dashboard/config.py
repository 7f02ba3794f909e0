import os
from typing import Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Environment variables checked, in order, for the GitHub access token.
TOKEN_ENV_VARS = ("GITHUB_TOKEN", "GITHUB_ACCESS_TOKEN")


class ViewLimits(BaseModel):
    """Default and maximum result counts for each dashboard view."""
    model_config = ConfigDict(frozen=True)

    technologies_default: int = 10
    technologies_max: int = 20
    trending_default: int = 10
    trending_max: int = 15
    rising_users: int = 30


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    github_token: Optional[str] = Field(None, description="GitHub REST API access token")
    github_api_url: str = "https://api.github.com"
    host: str = "0.0.0.0"
    port: int = Field(5000, ge=1, le=65535)
    log_level: str = "INFO"
    trending_lookback_days: int = Field(30, ge=1, description="Window for the trending fallback search")
    seed_data: bool = True
    limits: ViewLimits = Field(default_factory=ViewLimits)

    @field_validator("github_token")
    @classmethod
    def blank_token_is_unset(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            return None
        return v

    @field_validator("log_level")
    @classmethod
    def upper_log_level(cls, v: str) -> str:
        return v.upper()

    @property
    def has_github_token(self) -> bool:
        return self.github_token is not None


def _first_set(env: Mapping[str, str], names) -> Optional[str]:
    for name in names:
        value = env.get(name)
        if value:
            return value
    return None


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Builds the settings from the process environment.

    A `.env` file in the working directory is loaded first without overriding
    variables that are already set. Passing `env` skips both and reads only
    from the given mapping.
    """
    if env is None:
        load_dotenv(override=False)
        env = os.environ

    raw = {"github_token": _first_set(env, TOKEN_ENV_VARS)}
    for field, var in (
        ("github_api_url", "GITHUB_API_URL"),
        ("host", "HOST"),
        ("port", "PORT"),
        ("log_level", "LOG_LEVEL"),
        ("trending_lookback_days", "TRENDING_LOOKBACK_DAYS"),
        ("seed_data", "SEED_DATA"),
    ):
        if var in env:
            raw[field] = env[var]

    return Settings.model_validate(raw)
