from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict

# Subsets of the GitHub REST v3 payloads the dashboard consumes.
# Every other upstream field is dropped on validation (extra="ignore").


class UpstreamOwner(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    login: str
    avatar_url: Optional[str] = None


class UpstreamUser(BaseModel):
    """GitHub `GET /users/{username}` response."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    login: str = Field(..., min_length=1)
    id: Optional[int] = None
    name: Optional[str] = None
    avatar_url: Optional[str] = None
    html_url: Optional[str] = None
    followers: Optional[int] = Field(None, ge=0)
    following: Optional[int] = Field(None, ge=0)
    public_repos: Optional[int] = Field(None, ge=0)
    bio: Optional[str] = None
    location: Optional[str] = None
    company: Optional[str] = None
    blog: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class UpstreamRepository(BaseModel):
    """Repository object as returned by `/users/{username}/repos` and `/search/repositories`."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int
    name: str
    full_name: str
    owner: UpstreamOwner
    description: Optional[str] = None
    html_url: str
    language: Optional[str] = None
    stargazers_count: int = Field(0, ge=0)
    forks_count: int = Field(0, ge=0)
    watchers_count: Optional[int] = None
    size: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    pushed_at: Optional[datetime] = None
