from datetime import datetime
from typing import Any, Dict, List, Literal, Optional
from pydantic import BaseModel, Field, ConfigDict, model_validator

MetricType = Literal["users", "repositories", "stars", "activity"]


# ---------------------------------------------------------------------------
# Stored entities. Frozen: callers receive records they cannot mutate, every
# change goes through a MemoryStore upsert.
# ---------------------------------------------------------------------------

class Account(BaseModel):
    """Local login account. Created once, never updated."""
    model_config = ConfigDict(frozen=True)

    id: int = Field(..., ge=1, description="Store-assigned identifier")
    username: str = Field(..., description="Unique login name")
    password: str = Field(..., description="Opaque credential")


class GithubProfile(BaseModel):
    """
    A GitHub user profile cached by the dashboard.
    The natural key is the username, compared case-insensitively.
    """
    model_config = ConfigDict(frozen=True)

    id: int = Field(..., ge=1, description="Store-assigned identifier")
    username: str = Field(..., description="GitHub login")
    name: Optional[str] = None
    avatar_url: Optional[str] = None
    followers: Optional[int] = 0
    following: Optional[int] = 0
    public_repos: Optional[int] = 0
    bio: Optional[str] = None
    location: Optional[str] = None
    company: Optional[str] = None
    blog: Optional[str] = None
    created_at: datetime = Field(..., description="When the dashboard first stored this profile")
    updated_at: datetime = Field(..., description="When the dashboard last merged data into this profile")


class RepositoryRecord(BaseModel):
    """
    A repository shown in the trending view.
    The natural key is the upstream GitHub repository id.
    """
    model_config = ConfigDict(frozen=True)

    id: int = Field(..., ge=1, description="Store-assigned identifier")
    github_id: int = Field(..., description="Upstream GitHub repository id")
    name: str
    full_name: str
    description: Optional[str] = None
    owner: str
    language: Optional[str] = None
    stars: Optional[int] = 0
    forks: Optional[int] = 0
    today_stars: Optional[int] = Field(0, description="Stars gained per day")
    today_stars_estimated: Optional[bool] = Field(
        False,
        description="True when today_stars was derived from lifetime stars rather than observed",
    )
    growth_percentage: Optional[str] = None
    url: str
    created_at: datetime
    updated_at: datetime


class TechnologyRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int = Field(..., ge=1)
    name: str
    icon: Optional[str] = None
    color: Optional[str] = None
    percentage: Optional[int] = Field(0, ge=0, le=100, description="Adoption share")
    repos_count: Optional[int] = 0
    updated_at: datetime


class DashboardMetric(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int = Field(..., ge=1)
    metric_type: MetricType
    total: int
    growth_percentage: Optional[str] = None
    updated_at: datetime


# ---------------------------------------------------------------------------
# Upsert payloads. Only the fields a caller explicitly sets are merged into an
# existing record (model_dump(exclude_unset=True)); an explicit None overwrites.
# ---------------------------------------------------------------------------

class AccountCreate(BaseModel):
    model_config = ConfigDict(frozen=True)

    username: str = Field(..., min_length=1)
    password: str


class GithubProfileUpsert(BaseModel):
    model_config = ConfigDict(frozen=True)

    username: str = Field(..., min_length=1)
    name: Optional[str] = None
    avatar_url: Optional[str] = None
    followers: Optional[int] = Field(None, ge=0)
    following: Optional[int] = Field(None, ge=0)
    public_repos: Optional[int] = Field(None, ge=0)
    bio: Optional[str] = None
    location: Optional[str] = None
    company: Optional[str] = None
    blog: Optional[str] = None


class RepositoryUpsert(BaseModel):
    """
    Partial repository payload keyed by github_id.
    The first upsert for a github_id must carry name, full_name, owner and url.
    """
    model_config = ConfigDict(frozen=True)

    github_id: int
    name: Optional[str] = None
    full_name: Optional[str] = None
    description: Optional[str] = None
    owner: Optional[str] = None
    language: Optional[str] = None
    stars: Optional[int] = Field(None, ge=0)
    forks: Optional[int] = Field(None, ge=0)
    today_stars: Optional[int] = Field(None, ge=0)
    today_stars_estimated: Optional[bool] = None
    growth_percentage: Optional[str] = None
    url: Optional[str] = None


class TechnologyUpsert(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    icon: Optional[str] = None
    color: Optional[str] = None
    percentage: Optional[int] = Field(None, ge=0, le=100)
    repos_count: Optional[int] = Field(None, ge=0)


class DashboardMetricUpsert(BaseModel):
    model_config = ConfigDict(frozen=True)

    metric_type: MetricType
    total: Optional[int] = None
    growth_percentage: Optional[str] = None


# ---------------------------------------------------------------------------
# Request bodies and static views
# ---------------------------------------------------------------------------

# GitHub logins: alphanumerics and hyphens, at most 39 characters.
GITHUB_LOGIN_PATTERN = r"^[A-Za-z0-9-]{1,39}$"


class GithubUserSearch(BaseModel):
    username: str = Field(..., min_length=1, pattern=GITHUB_LOGIN_PATTERN, description="Username is required")


class GithubProfileSubmission(BaseModel):
    """
    Body of POST /api/github/users. Accepts either our own profile shape
    (username) or a raw GitHub user object (login).
    """
    username: Optional[str] = None
    login: Optional[str] = None
    name: Optional[str] = None
    avatar_url: Optional[str] = None
    followers: Optional[int] = Field(None, ge=0)
    following: Optional[int] = Field(None, ge=0)
    public_repos: Optional[int] = Field(None, ge=0)
    bio: Optional[str] = None
    location: Optional[str] = None
    company: Optional[str] = None
    blog: Optional[str] = None

    @model_validator(mode="after")
    def require_username(self) -> "GithubProfileSubmission":
        if not (self.username or self.login):
            raise ValueError("Username is required")
        return self

    def to_upsert(self) -> GithubProfileUpsert:
        fields: Dict[str, Any] = self.model_dump(exclude_unset=True, exclude={"username", "login"})
        return GithubProfileUpsert(username=self.username or self.login, **fields)


class ActivityDataset(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    label: str
    data: List[int]
    border_color: str = Field(..., alias="borderColor")
    background_color: str = Field(..., alias="backgroundColor")


class WeeklyActivity(BaseModel):
    model_config = ConfigDict(frozen=True)

    labels: List[str]
    datasets: List[ActivityDataset]
