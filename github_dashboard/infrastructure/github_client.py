import aiohttp
import asyncio
import logging
import re
from datetime import date
from typing import Any, Dict, List, Optional
from urllib.parse import quote

from pydantic import ValidationError

from github_dashboard.domain.exceptions import (
    MalformedPayloadException,
    NotFoundException,
    RateLimitExceededException,
    UnconfiguredException,
    UpstreamException,
)
from github_dashboard.domain.models import GITHUB_LOGIN_PATTERN
from github_dashboard.domain.upstream import UpstreamRepository, UpstreamUser

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.github.com"
REQUEST_TIMEOUT = aiohttp.ClientTimeout(total=30, connect=10)
# GitHub cannot sort /users/{username}/repos by stars, so one full page is
# fetched and ranked locally.
USER_REPOS_PAGE_SIZE = 100
USER_REPOS_LIMIT = 10
TRENDING_SEARCH_LIMIT = 10


def _user_path(username: str) -> str:
    """Path of a user resource. Strings that are not valid logins are treated as unknown users."""
    if not re.fullmatch(GITHUB_LOGIN_PATTERN, username):
        raise NotFoundException(f"user '{username}'")
    return f"/users/{quote(username, safe='')}"


class GitHubRestClient:
    """
    Client for the GitHub REST API.
    Handles authentication, status-code mapping and payload validation.
    Every call is a single attempt: failures surface immediately, nothing is retried.
    """

    def __init__(self, token: Optional[str], api_url: str = DEFAULT_API_URL):
        self.token = token
        self.api_url = api_url.rstrip("/")
        self.headers = {
            "Accept": "application/vnd.github+json",
            "User-Agent": "github-dashboard",
            "X-GitHub-Api-Version": "2022-11-28",
        }
        if token:
            self.headers["Authorization"] = f"Bearer {token}"

    @property
    def is_configured(self) -> bool:
        return bool(self.token)

    async def fetch_user(self, session: aiohttp.ClientSession, username: str) -> UpstreamUser:
        """
        Looks up a single GitHub user.

        Raises:
            UnconfiguredException: No access token is configured.
            NotFoundException: GitHub answered 404.
            UpstreamException: Any other failure reaching GitHub.
            MalformedPayloadException: The response is not a GitHub user object.
        """
        data = await self._get_json(session, _user_path(username), resource=f"user '{username}'")
        try:
            return UpstreamUser.model_validate(data)
        except ValidationError as e:
            raise MalformedPayloadException(f"Unexpected user payload for '{username}': {e}") from e

    async def fetch_user_repositories(
        self, session: aiohttp.ClientSession, username: str
    ) -> List[UpstreamRepository]:
        """
        Returns the user's repositories, most starred first, at most USER_REPOS_LIMIT of them.
        Same failure taxonomy as fetch_user.
        """
        data = await self._get_json(
            session,
            f"{_user_path(username)}/repos",
            params={"sort": "updated", "per_page": str(USER_REPOS_PAGE_SIZE)},
            resource=f"repositories of '{username}'",
        )
        repos = self._parse_repositories(data, context=f"repositories of '{username}'")
        repos.sort(key=lambda repo: repo.stargazers_count, reverse=True)
        return repos[:USER_REPOS_LIMIT]

    async def search_trending_candidates(
        self, session: aiohttp.ClientSession, since: date
    ) -> List[UpstreamRepository]:
        """Most starred repositories created after `since`, at most TRENDING_SEARCH_LIMIT of them."""
        data = await self._get_json(
            session,
            "/search/repositories",
            params={
                "q": f"created:>{since.isoformat()}",
                "sort": "stars",
                "order": "desc",
                "per_page": str(TRENDING_SEARCH_LIMIT),
            },
            resource="repository search",
        )
        if not isinstance(data, dict):
            raise MalformedPayloadException("Repository search returned a non-object payload.")
        repos = self._parse_repositories(data.get("items", []), context="repository search")
        return repos[:TRENDING_SEARCH_LIMIT]

    @staticmethod
    def _parse_repositories(data: Any, context: str) -> List[UpstreamRepository]:
        if not isinstance(data, list):
            raise MalformedPayloadException(f"Expected a list for {context}, got {type(data).__name__}.")
        try:
            return [UpstreamRepository.model_validate(item) for item in data]
        except ValidationError as e:
            raise MalformedPayloadException(f"Unexpected repository payload in {context}: {e}") from e

    async def _get_json(
        self,
        session: aiohttp.ClientSession,
        path: str,
        params: Optional[Dict[str, str]] = None,
        resource: str = "",
    ) -> Any:
        if not self.is_configured:
            raise UnconfiguredException()

        url = f"{self.api_url}{path}"
        try:
            async with session.get(url, params=params, headers=self.headers, timeout=REQUEST_TIMEOUT) as response:
                if response.status == 404:
                    raise NotFoundException(resource or path)

                # Primary rate limit: 403 with the remaining quota at zero
                if response.status == 403 and response.headers.get("X-RateLimit-Remaining") == "0":
                    reset_at = response.headers.get("X-RateLimit-Reset")
                    logger.warning(f"GitHub rate limit exhausted on {path}. Resets at {reset_at}.")
                    raise RateLimitExceededException(reset_at=reset_at)

                if not 200 <= response.status < 300:
                    message = await self._error_message(response)
                    logger.warning(f"GitHub returned {response.status} for {path}: {message}")
                    raise UpstreamException(response.status, message)

                try:
                    return await response.json()
                except (aiohttp.ContentTypeError, ValueError) as e:
                    raise MalformedPayloadException(f"GitHub returned a non-JSON body for {path}: {e}") from e

        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning(f"Request to GitHub failed for {path}: {e!r}")
            raise UpstreamException(None, str(e) or type(e).__name__) from e

    @staticmethod
    async def _error_message(response: aiohttp.ClientResponse) -> str:
        """Best-effort extraction of GitHub's `message` field from an error body."""
        try:
            body = await response.json()
        except (aiohttp.ContentTypeError, ValueError):
            return response.reason or "Unknown error"
        if isinstance(body, dict) and body.get("message"):
            return str(body["message"])
        return response.reason or "Unknown error"
