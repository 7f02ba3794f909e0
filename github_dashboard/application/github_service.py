import logging
from datetime import date, datetime, timedelta, timezone
from typing import List, Optional

import aiohttp

from github_dashboard.domain.models import GithubProfile, GithubProfileSubmission, RepositoryRecord
from github_dashboard.domain.upstream import UpstreamRepository
from github_dashboard.infrastructure.acl import GitHubTranslator
from github_dashboard.infrastructure.github_client import GitHubRestClient
from github_dashboard.infrastructure.memory_store import MemoryStore

logger = logging.getLogger(__name__)

DEFAULT_TRENDING_LOOKBACK_DAYS = 30


class GitHubService:
    """
    Orchestrates on-demand GitHub lookups: consult the store by natural key,
    fall back to the REST client on a miss, translate the payload and upsert it.

    The client never touches the store; this service is the only writer of
    GitHub-sourced records.
    """

    def __init__(
            self,
            github_client: GitHubRestClient,
            store: MemoryStore,
            trending_lookback_days: int = DEFAULT_TRENDING_LOOKBACK_DAYS
    ):
        self.github_client = github_client
        self.store = store
        self.trending_lookback_days = trending_lookback_days

    @property
    def is_configured(self) -> bool:
        return self.github_client.is_configured

    async def search_user(self, session: aiohttp.ClientSession, username: str) -> GithubProfile:
        """
        Returns the stored profile for `username` or fetches and stores it.
        Client exceptions (not found, unconfigured, upstream) propagate unchanged.
        """
        cached = self.store.get_github_profile(username)
        if cached is not None:
            logger.debug(f"Profile '{username}' served from store.")
            return cached

        upstream_user = await self.github_client.fetch_user(session, username)
        profile = self.store.upsert_github_profile(GitHubTranslator.to_profile(upstream_user))
        logger.info(f"Stored GitHub profile '{profile.username}' (id={profile.id}).")
        return profile

    async def list_user_repositories(
        self, session: aiohttp.ClientSession, username: str
    ) -> List[UpstreamRepository]:
        return await self.github_client.fetch_user_repositories(session, username)

    async def refresh_trending(
        self, session: aiohttp.ClientSession, today: Optional[date] = None
    ) -> List[RepositoryRecord]:
        """
        Seeds the repository collection from GitHub's most starred recent
        repositories. Used when the trending view would otherwise be empty.
        """
        now = datetime.now(timezone.utc)
        since = (today or now.date()) - timedelta(days=self.trending_lookback_days)

        candidates = await self.github_client.search_trending_candidates(session, since)
        records = self.store.bulk_upsert_repositories(
            GitHubTranslator.to_repository(candidate, now) for candidate in candidates
        )

        logger.info(f"Fetched {len(records)} trending candidates created after {since.isoformat()}.")
        return records

    def save_profile(self, submission: GithubProfileSubmission) -> GithubProfile:
        """Stores a profile the client already fetched from GitHub itself."""
        return self.store.upsert_github_profile(submission.to_upsert())
