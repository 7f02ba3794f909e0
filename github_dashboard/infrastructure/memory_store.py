from datetime import datetime, timezone
from typing import Any, Callable, Dict, Generic, Hashable, Iterable, List, Optional, Sequence, Type, TypeVar

from pydantic import BaseModel

from github_dashboard.domain.models import (
    Account,
    AccountCreate,
    DashboardMetric,
    DashboardMetricUpsert,
    GithubProfile,
    GithubProfileUpsert,
    MetricType,
    RepositoryRecord,
    RepositoryUpsert,
    TechnologyRecord,
    TechnologyUpsert,
)

T = TypeVar("T", bound=BaseModel)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class _KeyedCollection(Generic[T]):
    """
    Insertion-ordered records of one entity type, indexed by natural key.
    Identifiers start at 1 and are never reused.
    """

    def __init__(
        self,
        model: Type[T],
        stamp_fields: Sequence[str],
        clock: Callable[[], datetime],
    ):
        self._model = model
        self._stamp_fields = stamp_fields
        self._clock = clock
        self._records: Dict[Hashable, T] = {}
        self._next_id = 1

    def get(self, key: Hashable) -> Optional[T]:
        return self._records.get(key)

    def values(self) -> List[T]:
        return list(self._records.values())

    def merge(self, key: Hashable, values: Dict[str, Any]) -> T:
        """
        Partial update: overwrite the supplied fields of the record stored under
        `key` and bump updated_at, or insert a new record when the key is unknown.
        The merged record is validated like a new one; a rejected update leaves
        the stored record untouched.
        """
        now = self._clock()
        existing = self._records.get(key)

        if existing is not None:
            # Dict assignment keeps the key's original insertion position.
            updated = self._model.model_validate({**existing.model_dump(), **values, "updated_at": now})
            self._records[key] = updated
            return updated

        # Validate before consuming an identifier so a rejected insert leaves no gap.
        record = self._model(id=self._next_id, **values, **{field: now for field in self._stamp_fields})
        self._next_id += 1
        self._records[key] = record
        return record

    def top(self, field: str, limit: int) -> List[T]:
        """Records sorted descending by a numeric field (None as 0), stable on ties."""
        ranked = sorted(
            self._records.values(),
            key=lambda record: getattr(record, field) or 0,
            reverse=True,
        )
        return ranked[:max(limit, 0)]


class MemoryStore:
    """
    Process-local entity store for the dashboard.

    Holds one keyed collection per entity type. Nothing is persisted and
    nothing is ever evicted; every mutation is an upsert keyed by the
    entity's natural key (username, GitHub repository id, technology name,
    metric type).
    """

    def __init__(self, clock: Callable[[], datetime] = _utcnow):
        self._accounts: _KeyedCollection[Account] = _KeyedCollection(Account, (), clock)
        self._profiles: _KeyedCollection[GithubProfile] = _KeyedCollection(
            GithubProfile, ("created_at", "updated_at"), clock
        )
        self._repositories: _KeyedCollection[RepositoryRecord] = _KeyedCollection(
            RepositoryRecord, ("created_at", "updated_at"), clock
        )
        self._technologies: _KeyedCollection[TechnologyRecord] = _KeyedCollection(
            TechnologyRecord, ("updated_at",), clock
        )
        self._metrics: _KeyedCollection[DashboardMetric] = _KeyedCollection(
            DashboardMetric, ("updated_at",), clock
        )

    # -- accounts ---------------------------------------------------------

    def get_account(self, account_id: int) -> Optional[Account]:
        return next((a for a in self._accounts.values() if a.id == account_id), None)

    def get_account_by_username(self, username: str) -> Optional[Account]:
        return self._accounts.get(username)

    def create_account(self, account: AccountCreate) -> Account:
        if self._accounts.get(account.username) is not None:
            raise ValueError(f"Account '{account.username}' already exists.")
        return self._accounts.merge(account.username, account.model_dump())

    # -- GitHub profiles --------------------------------------------------

    def get_github_profile(self, username: str) -> Optional[GithubProfile]:
        return self._profiles.get(username.lower())

    def upsert_github_profile(self, profile: GithubProfileUpsert) -> GithubProfile:
        return self._profiles.merge(profile.username.lower(), profile.model_dump(exclude_unset=True))

    def list_profiles_by_followers(self, limit: int) -> List[GithubProfile]:
        return self._profiles.top("followers", limit)

    # -- repositories -----------------------------------------------------

    def get_repository(self, github_id: int) -> Optional[RepositoryRecord]:
        return self._repositories.get(github_id)

    def upsert_repository(self, repository: RepositoryUpsert) -> RepositoryRecord:
        return self._repositories.merge(repository.github_id, repository.model_dump(exclude_unset=True))

    def bulk_upsert_repositories(self, repositories: Iterable[RepositoryUpsert]) -> List[RepositoryRecord]:
        return [self.upsert_repository(repository) for repository in repositories]

    def list_repositories_by_today_stars(self, limit: int) -> List[RepositoryRecord]:
        return self._repositories.top("today_stars", limit)

    # -- technologies -----------------------------------------------------

    def get_technology(self, name: str) -> Optional[TechnologyRecord]:
        return self._technologies.get(name)

    def upsert_technology(self, technology: TechnologyUpsert) -> TechnologyRecord:
        return self._technologies.merge(technology.name, technology.model_dump(exclude_unset=True))

    def list_technologies_by_percentage(self, limit: int) -> List[TechnologyRecord]:
        return self._technologies.top("percentage", limit)

    # -- dashboard metrics ------------------------------------------------

    def get_dashboard_metric(self, metric_type: MetricType) -> Optional[DashboardMetric]:
        return self._metrics.get(metric_type)

    def upsert_dashboard_metric(self, metric: DashboardMetricUpsert) -> DashboardMetric:
        return self._metrics.merge(metric.metric_type, metric.model_dump(exclude_unset=True))

    def list_dashboard_metrics(self) -> List[DashboardMetric]:
        return self._metrics.values()
