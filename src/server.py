"""HTTP endpoint serving the stats card."""

import logging
from typing import Any, Callable

import requests
from flask import Flask, Response, request
from werkzeug.exceptions import HTTPException

from errors import ClientError, NotFound, StatsCardError, UpstreamError
from github_stats import GitHubStats
from renderer import render
from themes import resolve_theme_name

logger = logging.getLogger(__name__)

DEFAULT_CACHE_MAX_AGE = 1800


def parse_bool(value: str | None, default: bool = True) -> bool:
    """Only the literal string "false" turns a flag off."""
    if value is None:
        return default
    return value != "false"


def _plain_text(body: str, status: int) -> Response:
    return Response(body, status=status, content_type="text/plain")


def _default_client_factory(
    github_config: dict[str, Any], session: requests.Session
) -> Callable[[str], GitHubStats]:
    def factory(username: str) -> GitHubStats:
        return GitHubStats(
            username,
            api_url=github_config.get("api_url"),
            user_agent=github_config.get("user_agent"),
            per_page=github_config.get("per_page"),
            timeout=github_config.get("timeout"),
            session=session,
        )

    return factory


def create_app(config: dict | None = None) -> Flask:
    """Create the Flask application serving `/` and `/api/stats`."""
    config = config or {}
    github_config = config.get("github") or {}
    cache_config = config.get("cache") or {}

    app = Flask(__name__)
    app.config["CACHE_MAX_AGE"] = cache_config.get("max_age", DEFAULT_CACHE_MAX_AGE)
    # One connection pool for all requests served by this app
    app.config["GITHUB_SESSION"] = requests.Session()
    app.config["GITHUB_CLIENT_FACTORY"] = _default_client_factory(
        github_config, app.config["GITHUB_SESSION"]
    )

    @app.errorhandler(StatsCardError)
    def handle_stats_card_error(error: StatsCardError) -> Response:
        return _plain_text(error.message, error.status_code)

    @app.errorhandler(HTTPException)
    def handle_http_error(error: HTTPException) -> Response:
        if error.code == 404:
            return handle_stats_card_error(NotFound())
        # 405 for non-GET methods on known routes
        return _plain_text(error.name, error.code or 500)

    @app.get("/")
    def index() -> Response:
        return _plain_text("GitHub Stats API running", 200)

    @app.get("/api/stats")
    def stats_card() -> Response:
        username = (request.args.get("username") or "").strip()
        if not username:
            raise ClientError("Missing username")

        theme = resolve_theme_name(request.args.get("theme"))
        animate = parse_bool(request.args.get("animate"), True)

        client = app.config["GITHUB_CLIENT_FACTORY"](username)
        try:
            stats = client.get_all_stats()
        except UpstreamError:
            raise
        except Exception as e:
            logger.exception("Unexpected error building stats for %s", username)
            raise UpstreamError() from e

        svg = render(stats, theme, animate)
        logger.info(
            "Served card for %s (theme=%s, animate=%s, languages=%d)",
            username,
            theme,
            animate,
            len(stats.top_languages),
        )

        response = Response(svg, status=200, content_type="image/svg+xml")
        response.headers["Cache-Control"] = f"public, max-age={app.config['CACHE_MAX_AGE']}"
        return response

    return app
