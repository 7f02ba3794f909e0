import logging
from typing import Any, Iterable, Optional

import aiohttp
from aiohttp import web
from pydantic import BaseModel, ValidationError

from github_dashboard.application.dashboard_service import DashboardService
from github_dashboard.application.github_service import GitHubService
from github_dashboard.config import ViewLimits
from github_dashboard.domain.exceptions import (
    DashboardException,
    NotFoundException,
    UnconfiguredException,
    UpstreamException,
)
from github_dashboard.domain.models import GithubProfileSubmission, GithubUserSearch
from github_dashboard.infrastructure.seed import WEEKLY_ACTIVITY

logger = logging.getLogger(__name__)

CLIENT_SESSION_KEY = web.AppKey("client_session", aiohttp.ClientSession)


def parse_limit(raw: Optional[str], default: int) -> int:
    """Query-string limit; anything missing, non-numeric or non-positive falls back to `default`."""
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def _json_list(models: Iterable[BaseModel]) -> web.Response:
    return web.json_response([model.model_dump(mode="json") for model in models])


def _error(message: str, status: int, **extra: Any) -> web.Response:
    return web.json_response({"error": message, **extra}, status=status)


def _invalid_input(e: ValidationError) -> web.Response:
    return _error("Invalid input", 400, details=e.errors(include_url=False, include_context=False))


async def _read_json(request: web.Request) -> Any:
    try:
        return await request.json()
    except ValueError:
        return None


class DashboardHandlers:
    """
    HTTP surface of the dashboard. Sole place where internal failures are
    translated into status codes; error details stay in the server log.
    """

    def __init__(self, dashboard: DashboardService, github: GitHubService, limits: ViewLimits):
        self.dashboard = dashboard
        self.github = github
        self.limits = limits

    def register(self, router: web.UrlDispatcher) -> None:
        router.add_get("/api/dashboard/metrics", self.dashboard_metrics)
        router.add_get("/api/technologies", self.technologies)
        router.add_get("/api/repositories/trending", self.trending_repositories)
        router.add_get("/api/users/rising", self.rising_users)
        router.add_post("/api/github/search", self.search_github_user)
        router.add_post("/api/github/users", self.store_github_user)
        router.add_get("/api/github/users/{username}/repos", self.github_user_repositories)
        router.add_get("/api/activity/weekly", self.weekly_activity)
        router.add_get("/healthz", self.health)

    async def dashboard_metrics(self, request: web.Request) -> web.Response:
        try:
            return _json_list(self.dashboard.get_dashboard_metrics())
        except Exception:
            logger.exception("Error fetching dashboard metrics")
            return _error("Failed to fetch dashboard metrics", 500)

    async def technologies(self, request: web.Request) -> web.Response:
        try:
            limit = parse_limit(request.query.get("limit"), self.limits.technologies_default)
            return _json_list(self.dashboard.get_top_technologies(limit))
        except Exception:
            logger.exception("Error fetching technologies")
            return _error("Failed to fetch technologies", 500)

    async def trending_repositories(self, request: web.Request) -> web.Response:
        try:
            limit = parse_limit(request.query.get("limit"), self.limits.trending_default)
            repositories = self.dashboard.get_trending_repositories(limit)

            # Empty store: seed once from GitHub search, then query again.
            if not repositories and self.github.is_configured:
                try:
                    await self.github.refresh_trending(request.app[CLIENT_SESSION_KEY])
                except DashboardException as e:
                    logger.error(f"Error fetching trending candidates from GitHub: {e}")
                repositories = self.dashboard.get_trending_repositories(limit)

            return _json_list(repositories)
        except Exception:
            logger.exception("Error fetching trending repositories")
            return _error("Failed to fetch trending repositories", 500)

    async def rising_users(self, request: web.Request) -> web.Response:
        try:
            return _json_list(self.dashboard.get_rising_users(self.limits.rising_users))
        except Exception:
            logger.exception("Error fetching rising users")
            return _error("Failed to fetch rising users", 500)

    async def search_github_user(self, request: web.Request) -> web.Response:
        try:
            search = GithubUserSearch.model_validate(await _read_json(request))
        except ValidationError as e:
            return _invalid_input(e)

        try:
            profile = await self.github.search_user(request.app[CLIENT_SESSION_KEY], search.username)
        except NotFoundException:
            return _error("User not found", 404)
        except UnconfiguredException:
            logger.error("GitHub user search requested but no GitHub token is configured.")
            return _error("GitHub token not configured", 500)
        except UpstreamException as e:
            logger.error(f"Error searching GitHub user '{search.username}': {e}")
            return _error("Failed to search user", 500)
        except Exception:
            logger.exception(f"Error searching GitHub user '{search.username}'")
            return _error("Failed to search user", 500)

        return web.json_response(profile.model_dump(mode="json"))

    async def github_user_repositories(self, request: web.Request) -> web.Response:
        username = request.match_info["username"]
        try:
            repositories = await self.github.list_user_repositories(request.app[CLIENT_SESSION_KEY], username)
        except NotFoundException:
            return _error("User not found", 404)
        except UnconfiguredException:
            logger.error("User repositories requested but no GitHub token is configured.")
            return _error("GitHub token not configured", 500)
        except UpstreamException as e:
            logger.error(f"Error fetching repositories for '{username}': {e}")
            return _error("Failed to fetch user repositories", 500)
        except Exception:
            logger.exception(f"Error fetching repositories for '{username}'")
            return _error("Failed to fetch user repositories", 500)

        return _json_list(repositories)

    async def store_github_user(self, request: web.Request) -> web.Response:
        try:
            submission = GithubProfileSubmission.model_validate(await _read_json(request))
        except ValidationError as e:
            return _invalid_input(e)

        try:
            profile = self.github.save_profile(submission)
        except Exception:
            logger.exception("GitHub user storage error")
            return _error("Failed to store user", 500)

        return web.json_response(profile.model_dump(mode="json"))

    async def weekly_activity(self, request: web.Request) -> web.Response:
        try:
            return web.json_response(WEEKLY_ACTIVITY.model_dump(mode="json", by_alias=True))
        except Exception:
            logger.exception("Error fetching activity data")
            return _error("Failed to fetch activity data", 500)

    async def health(self, request: web.Request) -> web.Response:
        return web.json_response({"status": "ok"})
