import unittest
from datetime import datetime, timedelta, timezone

from pydantic import ValidationError

from github_dashboard.domain.models import (
    AccountCreate,
    DashboardMetricUpsert,
    GithubProfileUpsert,
    RepositoryUpsert,
    TechnologyUpsert,
)
from github_dashboard.infrastructure.memory_store import MemoryStore


class _Clock:
    def __init__(self) -> None:
        self.now = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: int) -> None:
        self.now += timedelta(seconds=seconds)


def _repo(github_id: int, today_stars: int, **extra) -> RepositoryUpsert:
    return RepositoryUpsert(
        github_id=github_id,
        name=f"repo-{github_id}",
        full_name=f"octocat/repo-{github_id}",
        owner="octocat",
        url=f"https://github.com/octocat/repo-{github_id}",
        today_stars=today_stars,
        **extra,
    )


class TestRepositoryUpsert(unittest.TestCase):
    def setUp(self) -> None:
        self.clock = _Clock()
        self.store = MemoryStore(clock=self.clock)

    def test_upserting_same_record_twice_keeps_one_record_and_id(self) -> None:
        first = self.store.upsert_repository(_repo(42, 10, stars=100))
        self.clock.advance(60)
        second = self.store.upsert_repository(_repo(42, 12, stars=150))

        self.assertEqual(first.id, second.id)
        self.assertEqual(second.stars, 150)
        self.assertEqual(second.today_stars, 12)
        self.assertEqual(second.created_at, first.created_at)
        self.assertEqual(second.updated_at, first.updated_at + timedelta(seconds=60))
        self.assertEqual(len(self.store.list_repositories_by_today_stars(100)), 1)

    def test_natural_key_is_unique_across_many_upserts(self) -> None:
        for stars in range(5):
            self.store.upsert_repository(_repo(7, stars))
        self.store.upsert_repository(_repo(8, 1))

        records = self.store.list_repositories_by_today_stars(100)
        self.assertEqual([r.github_id for r in records].count(7), 1)
        self.assertEqual(self.store.get_repository(7).today_stars, 4)

    def test_absent_fields_are_kept_and_explicit_none_overwrites(self) -> None:
        self.store.upsert_repository(_repo(1, 5, description="original", language="Python"))

        updated = self.store.upsert_repository(RepositoryUpsert(github_id=1, today_stars=9, description=None))

        self.assertEqual(updated.today_stars, 9)
        self.assertIsNone(updated.description)
        self.assertEqual(updated.language, "Python")
        self.assertEqual(updated.name, "repo-1")

    def test_first_insert_without_required_fields_is_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            self.store.upsert_repository(RepositoryUpsert(github_id=99, today_stars=3))

        created = self.store.upsert_repository(_repo(100, 1))
        self.assertEqual(created.id, 1)
        self.assertIsNone(self.store.get_repository(99))

    def test_update_cannot_null_a_required_field(self) -> None:
        original = self.store.upsert_repository(_repo(1, 5))

        with self.assertRaises(ValidationError):
            self.store.upsert_repository(RepositoryUpsert(github_id=1, name=None))

        self.assertEqual(self.store.get_repository(1), original)

    def test_identifiers_increase_per_new_key(self) -> None:
        ids = [self.store.upsert_repository(_repo(github_id, 0)).id for github_id in (10, 20, 30)]
        self.assertEqual(ids, [1, 2, 3])

    def test_records_are_frozen(self) -> None:
        record = self.store.upsert_repository(_repo(1, 1))
        with self.assertRaises(ValidationError):
            record.stars = 5


class TestSortedViews(unittest.TestCase):
    def setUp(self) -> None:
        self.store = MemoryStore()

    def test_ties_keep_insertion_order(self) -> None:
        for github_id, today in [(1, 5), (2, 9), (3, 5), (4, 9), (5, 1)]:
            self.store.upsert_repository(_repo(github_id, today))

        ranked = self.store.list_repositories_by_today_stars(10)
        self.assertEqual([r.github_id for r in ranked], [2, 4, 1, 3, 5])

    def test_merge_does_not_move_record_in_insertion_order(self) -> None:
        for github_id in (1, 2, 3):
            self.store.upsert_repository(_repo(github_id, 5))
        self.store.upsert_repository(RepositoryUpsert(github_id=1, stars=10))

        ranked = self.store.list_repositories_by_today_stars(10)
        self.assertEqual([r.github_id for r in ranked], [1, 2, 3])

    def test_limit_truncates_and_negative_limit_returns_nothing(self) -> None:
        for github_id in range(1, 6):
            self.store.upsert_repository(_repo(github_id, github_id))

        self.assertEqual([r.github_id for r in self.store.list_repositories_by_today_stars(2)], [5, 4])
        self.assertEqual(self.store.list_repositories_by_today_stars(-5), [])

    def test_none_counts_as_zero(self) -> None:
        self.store.upsert_github_profile(GithubProfileUpsert(username="ghost", followers=None))
        self.store.upsert_github_profile(GithubProfileUpsert(username="octocat", followers=3))

        ranked = self.store.list_profiles_by_followers(10)
        self.assertEqual([p.username for p in ranked], ["octocat", "ghost"])

    def test_technologies_sorted_by_percentage(self) -> None:
        self.store.upsert_technology(TechnologyUpsert(name="Python", percentage=78))
        self.store.upsert_technology(TechnologyUpsert(name="JavaScript", percentage=85))

        top = self.store.list_technologies_by_percentage(1)
        self.assertEqual(len(top), 1)
        self.assertEqual(top[0].name, "JavaScript")
        self.assertEqual(top[0].percentage, 85)


class TestProfiles(unittest.TestCase):
    def setUp(self) -> None:
        self.store = MemoryStore()

    def test_lookup_is_case_insensitive(self) -> None:
        stored = self.store.upsert_github_profile(GithubProfileUpsert(username="Octocat", followers=10))

        self.assertEqual(self.store.get_github_profile("octocat"), stored)
        self.assertEqual(self.store.get_github_profile("OCTOCAT"), stored)

    def test_upsert_with_other_casing_merges(self) -> None:
        first = self.store.upsert_github_profile(GithubProfileUpsert(username="Octocat", bio="hi"))
        second = self.store.upsert_github_profile(GithubProfileUpsert(username="octocat", followers=20))

        self.assertEqual(first.id, second.id)
        self.assertEqual(second.bio, "hi")
        self.assertEqual(second.followers, 20)
        self.assertEqual(len(self.store.list_profiles_by_followers(10)), 1)

    def test_missing_profile_is_none(self) -> None:
        self.assertIsNone(self.store.get_github_profile("nobody"))

    def test_new_profile_counters_default_to_zero(self) -> None:
        profile = self.store.upsert_github_profile(GithubProfileUpsert(username="new"))
        self.assertEqual(profile.followers, 0)
        self.assertEqual(profile.public_repos, 0)


class TestMetricsAndAccounts(unittest.TestCase):
    def setUp(self) -> None:
        self.store = MemoryStore()

    def test_metric_upsert_by_type(self) -> None:
        self.store.upsert_dashboard_metric(DashboardMetricUpsert(metric_type="stars", total=1, growth_percentage="+1%"))
        updated = self.store.upsert_dashboard_metric(DashboardMetricUpsert(metric_type="stars", total=2))

        metrics = self.store.list_dashboard_metrics()
        self.assertEqual(len(metrics), 1)
        self.assertEqual(updated.total, 2)
        self.assertEqual(updated.growth_percentage, "+1%")

    def test_unknown_metric_type_is_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            DashboardMetricUpsert(metric_type="forks", total=1)

    def test_accounts(self) -> None:
        account = self.store.create_account(AccountCreate(username="admin", password="secret"))

        self.assertEqual(account.id, 1)
        self.assertEqual(self.store.get_account(1), account)
        self.assertEqual(self.store.get_account_by_username("admin"), account)
        self.assertIsNone(self.store.get_account(2))

        with self.assertRaises(ValueError):
            self.store.create_account(AccountCreate(username="admin", password="other"))
