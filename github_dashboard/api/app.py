import logging
from typing import AsyncIterator, Optional

import aiohttp
from aiohttp import web

from github_dashboard.api.handlers import CLIENT_SESSION_KEY, DashboardHandlers
from github_dashboard.application.dashboard_service import DashboardService
from github_dashboard.application.github_service import GitHubService
from github_dashboard.config import Settings
from github_dashboard.infrastructure.github_client import GitHubRestClient
from github_dashboard.infrastructure.memory_store import MemoryStore
from github_dashboard.infrastructure.seed import load_seed_data

logger = logging.getLogger(__name__)

STORE_KEY = web.AppKey("store", MemoryStore)
SETTINGS_KEY = web.AppKey("settings", Settings)


@web.middleware
async def error_middleware(request: web.Request, handler) -> web.StreamResponse:
    """Last line of defence: anything a handler did not map becomes a generic 500."""
    try:
        return await handler(request)
    except web.HTTPException:
        raise
    except Exception:
        logger.exception(f"Unhandled error on {request.method} {request.path}")
        return web.json_response({"error": "Internal server error"}, status=500)


async def client_session_ctx(app: web.Application) -> AsyncIterator[None]:
    """One outbound HTTP session per application, closed on shutdown."""
    async with aiohttp.ClientSession() as session:
        app[CLIENT_SESSION_KEY] = session
        yield


def create_app(
    settings: Settings,
    store: Optional[MemoryStore] = None,
    github_client: Optional[GitHubRestClient] = None,
) -> web.Application:
    """
    Wires the store, services and handlers into an aiohttp application.

    Args:
        settings (Settings): Runtime configuration.
        store (MemoryStore): Store to serve from. When omitted a fresh store is
            created and, if `settings.seed_data` is set, seeded.
        github_client (GitHubRestClient): Injected for tests; built from the
            settings when omitted.
    """
    if store is None:
        store = MemoryStore()
        if settings.seed_data:
            load_seed_data(store)

    if github_client is None:
        github_client = GitHubRestClient(token=settings.github_token, api_url=settings.github_api_url)

    if not github_client.is_configured:
        logger.warning("No GitHub token configured; GitHub lookups will fail with a configuration error.")

    app = web.Application(middlewares=[error_middleware])
    app[SETTINGS_KEY] = settings
    app[STORE_KEY] = store

    handlers = DashboardHandlers(
        dashboard=DashboardService(store, settings.limits),
        github=GitHubService(github_client, store, settings.trending_lookback_days),
        limits=settings.limits,
    )
    handlers.register(app.router)
    app.cleanup_ctx.append(client_session_ctx)
    return app
