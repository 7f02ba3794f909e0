import asyncio
import json
import unittest
from datetime import date
from unittest.mock import AsyncMock, MagicMock

import aiohttp

from github_dashboard.domain.exceptions import (
    MalformedPayloadException,
    NotFoundException,
    RateLimitExceededException,
    UnconfiguredException,
    UpstreamException,
)
from github_dashboard.infrastructure.github_client import GitHubRestClient


def _response(status: int, payload=None, headers=None, reason: str = "") -> AsyncMock:
    resp = AsyncMock()
    resp.status = status
    resp.reason = reason
    resp.headers = headers or {}
    resp.json = AsyncMock(return_value=payload)
    resp.__aenter__ = AsyncMock(return_value=resp)
    resp.__aexit__ = AsyncMock(return_value=False)
    return resp


def _session(*responses) -> AsyncMock:
    session = AsyncMock()
    session.get = MagicMock(side_effect=list(responses))
    return session


def _repo(github_id: int, stars: int) -> dict:
    return {
        "id": github_id,
        "name": f"r{github_id}",
        "full_name": f"octocat/r{github_id}",
        "owner": {"login": "octocat"},
        "html_url": f"https://github.com/octocat/r{github_id}",
        "stargazers_count": stars,
        "forks_count": 0,
    }


class TestGitHubRestClientHeaders(unittest.TestCase):
    def test_request_headers(self) -> None:
        client = GitHubRestClient(token="secret")

        self.assertTrue(client.is_configured)
        self.assertEqual(client.headers["Authorization"], "Bearer secret")
        self.assertEqual(client.headers["Accept"], "application/vnd.github+json")
        self.assertEqual(client.headers["User-Agent"], "github-dashboard")
        self.assertEqual(client.headers["X-GitHub-Api-Version"], "2022-11-28")

        anonymous = GitHubRestClient(token=None)
        self.assertFalse(anonymous.is_configured)
        self.assertNotIn("Authorization", anonymous.headers)
        self.assertEqual(anonymous.headers["User-Agent"], "github-dashboard")


class TestGitHubRestClientCalls(unittest.IsolatedAsyncioTestCase):
    async def test_fetch_user_parses_payload(self) -> None:
        client = GitHubRestClient(token="test-token", api_url="https://github.test/")
        session = _session(_response(200, {"login": "octocat", "followers": 5, "plan": {"name": "free"}}))

        user = await client.fetch_user(session, "octocat")

        self.assertEqual(user.login, "octocat")
        self.assertEqual(user.followers, 5)
        url = session.get.call_args.args[0]
        self.assertEqual(url, "https://github.test/users/octocat")

    async def test_unconfigured_client_makes_no_request(self) -> None:
        client = GitHubRestClient(token=None)
        session = _session()

        with self.assertRaises(UnconfiguredException):
            await client.fetch_user(session, "octocat")
        session.get.assert_not_called()

    async def test_invalid_login_never_reaches_github(self) -> None:
        client = GitHubRestClient(token="t")
        session = _session()

        for username in ("../user", "..", "octo/cat", "octo?cat", "a" * 40):
            with self.assertRaises(NotFoundException):
                await client.fetch_user(session, username)
            with self.assertRaises(NotFoundException):
                await client.fetch_user_repositories(session, username)

        session.get.assert_not_called()

    async def test_404_raises_not_found(self) -> None:
        client = GitHubRestClient(token="t")
        session = _session(_response(404, {"message": "Not Found"}))

        with self.assertRaises(NotFoundException):
            await client.fetch_user(session, "does-not-exist-xyz")

    async def test_other_error_status_raises_upstream_with_message(self) -> None:
        client = GitHubRestClient(token="t")
        session = _session(_response(502, {"message": "Bad gateway"}, reason="Bad Gateway"))

        with self.assertRaises(UpstreamException) as ctx:
            await client.fetch_user_repositories(session, "octocat")

        self.assertEqual(ctx.exception.status, 502)
        self.assertEqual(ctx.exception.message, "Bad gateway")
        # Single attempt, no retry
        self.assertEqual(session.get.call_count, 1)

    async def test_exhausted_rate_limit_raises_rate_limit(self) -> None:
        client = GitHubRestClient(token="t")
        headers = {"X-RateLimit-Remaining": "0", "X-RateLimit-Reset": "1700000000"}
        session = _session(_response(403, {"message": "API rate limit exceeded"}, headers=headers))

        with self.assertRaises(RateLimitExceededException) as ctx:
            await client.fetch_user(session, "octocat")

        self.assertEqual(ctx.exception.reset_at, "1700000000")
        self.assertIsInstance(ctx.exception, UpstreamException)

    async def test_network_failure_raises_upstream(self) -> None:
        client = GitHubRestClient(token="t")
        session = AsyncMock()
        session.get = MagicMock(side_effect=aiohttp.ClientConnectionError("connection refused"))

        with self.assertRaises(UpstreamException) as ctx:
            await client.fetch_user(session, "octocat")
        self.assertIsNone(ctx.exception.status)

    async def test_timeout_raises_upstream(self) -> None:
        client = GitHubRestClient(token="t")
        session = AsyncMock()
        session.get = MagicMock(side_effect=asyncio.TimeoutError())

        with self.assertRaises(UpstreamException):
            await client.fetch_user(session, "octocat")

    async def test_malformed_user_payload(self) -> None:
        client = GitHubRestClient(token="t")
        session = _session(_response(200, {"name": "no login"}))

        with self.assertRaises(MalformedPayloadException):
            await client.fetch_user(session, "octocat")

    async def test_non_json_body_is_malformed(self) -> None:
        client = GitHubRestClient(token="t")
        resp = _response(200)
        resp.json = AsyncMock(side_effect=json.JSONDecodeError("Expecting value", "<html>", 0))
        session = _session(resp)

        with self.assertRaises(MalformedPayloadException):
            await client.search_trending_candidates(session, date(2024, 1, 1))

    async def test_user_repositories_sorted_by_stars_and_capped(self) -> None:
        client = GitHubRestClient(token="t")
        payload = [_repo(i, stars) for i, stars in enumerate([5, 50, 0, 7, 1, 2, 3, 4, 100, 6, 8, 9])]
        session = _session(_response(200, payload))

        repos = await client.fetch_user_repositories(session, "octocat")

        self.assertEqual(len(repos), 10)
        self.assertEqual([r.stargazers_count for r in repos[:3]], [100, 50, 9])
        self.assertNotIn(0, [r.stargazers_count for r in repos])

    async def test_search_trending_candidates_builds_query(self) -> None:
        client = GitHubRestClient(token="t")
        session = _session(_response(200, {"total_count": 2, "items": [_repo(1, 10), _repo(2, 5)]}))

        repos = await client.search_trending_candidates(session, date(2024, 1, 1))

        self.assertEqual([r.id for r in repos], [1, 2])
        params = session.get.call_args.kwargs["params"]
        self.assertEqual(params["q"], "created:>2024-01-01")
        self.assertEqual(params["sort"], "stars")
        self.assertEqual(params["order"], "desc")
        self.assertEqual(params["per_page"], "10")

    async def test_search_with_non_object_payload_is_malformed(self) -> None:
        client = GitHubRestClient(token="t")
        session = _session(_response(200, ["unexpected"]))

        with self.assertRaises(MalformedPayloadException):
            await client.search_trending_candidates(session, date(2024, 1, 1))
