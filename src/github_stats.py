"""GitHub API client for fetching user statistics."""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any
from urllib.parse import quote

import requests

from errors import UpstreamError
from stats import Stats, aggregate

logger = logging.getLogger(__name__)


class GitHubStats:
    """Fetches a user's public profile and repositories from the GitHub REST API."""

    REST_API_URL = "https://api.github.com"
    USER_AGENT = "git-state"
    PER_PAGE = 100
    TIMEOUT = 30

    def __init__(
        self,
        username: str,
        api_url: str | None = None,
        user_agent: str | None = None,
        per_page: int | None = None,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ):
        self.username = username
        self.api_url = (api_url or self.REST_API_URL).rstrip("/")
        self.per_page = per_page or self.PER_PAGE
        self.timeout = timeout or self.TIMEOUT
        # Only close sessions this client created; a shared one belongs to the caller
        self._owns_session = session is None
        self.session = session or requests.Session()
        self.headers = {
            "User-Agent": user_agent or self.USER_AGENT,
            "Accept": "application/vnd.github+json",
        }

    @property
    def user_path(self) -> str:
        """`/users/{username}` with the username encoded as a single path segment."""
        segment = quote(self.username, safe="")
        if segment in (".", ".."):
            segment = segment.replace(".", "%2E")
        return f"/users/{segment}"

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "GitHubStats":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _get_json(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """GET `path` and decode the JSON body, raising UpstreamError on any failure."""
        url = f"{self.api_url}{path}"
        try:
            response = self.session.get(
                url, headers=self.headers, params=params, timeout=self.timeout
            )
            response.raise_for_status()
            return response.json()
        except requests.exceptions.RequestException as e:
            logger.warning("GitHub request failed for %s: %s", url, e)
            raise UpstreamError() from e
        except ValueError as e:
            # Invalid JSON body
            logger.warning("GitHub returned an unreadable body for %s: %s", url, e)
            raise UpstreamError() from e

    def get_profile(self) -> dict[str, Any]:
        """Fetch the user's public profile."""
        profile = self._get_json(self.user_path)
        if not isinstance(profile, dict):
            raise UpstreamError()
        return profile

    def get_repositories(self) -> list[dict[str, Any]]:
        """Fetch up to `per_page` public repositories (a single page)."""
        repos = self._get_json(
            f"{self.user_path}/repos", params={"per_page": self.per_page}
        )
        if not isinstance(repos, list):
            raise UpstreamError()
        return repos

    def get_profile_and_repositories(
        self,
    ) -> tuple[dict[str, Any], list[dict[str, Any]]]:
        """
        Fetch the profile and the repository list concurrently.

        Both calls are always awaited; if either fails its UpstreamError is
        raised once both have finished.
        """
        with ThreadPoolExecutor(max_workers=2) as executor:
            profile_future = executor.submit(self.get_profile)
            repos_future = executor.submit(self.get_repositories)
            profile = profile_future.result()
            repos = repos_future.result()

        return profile, repos

    def get_all_stats(self) -> Stats:
        """Get all statistics in a single call."""
        profile, repos = self.get_profile_and_repositories()
        return aggregate(profile, repos)
