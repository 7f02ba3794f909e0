from typing import List

from github_dashboard.config import ViewLimits
from github_dashboard.domain.models import DashboardMetric, GithubProfile, RepositoryRecord, TechnologyRecord
from github_dashboard.infrastructure.memory_store import MemoryStore


def clamp_limit(limit: int, maximum: int) -> int:
    return min(max(limit, 0), maximum)


class DashboardService:
    """
    Read-side projections over the store: each view is one sort over a small
    collection, computed on demand and capped by ViewLimits.
    """

    def __init__(self, store: MemoryStore, limits: ViewLimits = ViewLimits()):
        self.store = store
        self.limits = limits

    def get_trending_repositories(self, limit: int) -> List[RepositoryRecord]:
        """Repositories by today_stars, highest first."""
        return self.store.list_repositories_by_today_stars(clamp_limit(limit, self.limits.trending_max))

    def get_rising_users(self, limit: int) -> List[GithubProfile]:
        """Profiles by follower count, highest first."""
        return self.store.list_profiles_by_followers(clamp_limit(limit, self.limits.rising_users))

    def get_top_technologies(self, limit: int) -> List[TechnologyRecord]:
        """Technologies by adoption percentage, highest first."""
        return self.store.list_technologies_by_percentage(clamp_limit(limit, self.limits.technologies_max))

    def get_dashboard_metrics(self) -> List[DashboardMetric]:
        return self.store.list_dashboard_metrics()
