from datetime import datetime, timezone
from typing import Any, Dict, Optional

from github_dashboard.domain.models import GithubProfileUpsert, RepositoryUpsert
from github_dashboard.domain.upstream import UpstreamRepository, UpstreamUser

# Upstream user fields copied verbatim into the profile upsert.
PROFILE_FIELDS = {
    "name", "avatar_url", "followers", "following", "public_repos",
    "bio", "location", "company", "blog",
}


def format_growth(today_stars: int, stars: int) -> str:
    """Daily star gain as a share of total stars, e.g. '+0.1%'."""
    if not stars:
        return "+0.0%"
    return f"+{today_stars / stars * 100:.1f}%"


def estimate_daily_stars(stars: int, created_at: Optional[datetime], now: datetime) -> Optional[int]:
    """
    Average stars gained per day since the repository was created.
    GitHub does not expose a real daily delta, so this stands in for it.
    """
    if created_at is None:
        return None
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)
    age_days = max((now - created_at).days, 1)
    return stars // age_days


class GitHubTranslator:
    """
    Anti-corruption layer that translates validated GitHub REST payloads into the
    store's upsert shapes. Fields GitHub did not send are left unset so the
    store keeps whatever it already holds for them.
    """

    @staticmethod
    def to_profile(user: UpstreamUser) -> GithubProfileUpsert:
        """
        Maps a GitHub user (`login`, counters, profile text) onto a profile upsert.

        Args:
            user (UpstreamUser): The validated `/users/{username}` payload.

        Returns:
            GithubProfileUpsert: Upsert keyed by the user's login.
        """
        fields = user.model_dump(exclude_unset=True, include=PROFILE_FIELDS)
        return GithubProfileUpsert(username=user.login, **fields)

    @staticmethod
    def to_repository(repo: UpstreamRepository, now: Optional[datetime] = None) -> RepositoryUpsert:
        """
        Maps a GitHub repository onto a repository upsert.

        `today_stars` is estimated from lifetime stars and repository age, and the
        record is flagged with `today_stars_estimated`.

        Args:
            repo (UpstreamRepository): A validated repository object from GitHub.
            now (datetime): Reference time for the estimate; defaults to the current UTC time.

        Returns:
            RepositoryUpsert: Upsert keyed by the GitHub repository id.
        """
        now = now or datetime.now(timezone.utc)

        values: Dict[str, Any] = {
            "github_id": repo.id,
            "name": repo.name,
            "full_name": repo.full_name,
            "owner": repo.owner.login,
            "stars": repo.stargazers_count,
            "forks": repo.forks_count,
            "url": repo.html_url,
        }
        for field in ("description", "language"):
            if field in repo.model_fields_set:
                values[field] = getattr(repo, field)

        today_stars = estimate_daily_stars(repo.stargazers_count, repo.created_at, now)
        if today_stars is not None:
            values["today_stars"] = today_stars
            values["today_stars_estimated"] = True
            values["growth_percentage"] = format_growth(today_stars, repo.stargazers_count)

        return RepositoryUpsert(**values)
