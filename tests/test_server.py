"""HTTP endpoint tests using Flask's test client and a fake GitHub client."""
from unittest.mock import patch

import pytest

from errors import UpstreamError
from server import create_app, parse_bool
from stats import aggregate

PROFILE = {"login": "alice", "public_repos": 3}
REPOS = [
    {"stargazers_count": 10, "forks_count": 2, "language": "Go"},
    {"stargazers_count": 5, "forks_count": 1, "language": "Go"},
    {"stargazers_count": 0, "forks_count": 0, "language": "Rust"},
]


class FakeClient:
    def __init__(self, username, error=None):
        self.username = username
        self.error = error

    def get_all_stats(self):
        if self.error:
            raise self.error
        return aggregate(PROFILE, REPOS)


@pytest.fixture
def app():
    app = create_app({"cache": {"max_age": 1800}})
    app.config["TESTING"] = True
    app.config["GITHUB_CLIENT_FACTORY"] = FakeClient
    return app


@pytest.fixture
def client(app):
    return app.test_client()


def failing_factory(error):
    return lambda username: FakeClient(username, error=error)


def test_index(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.mimetype == "text/plain"
    assert b"running" in response.data


def test_missing_username_is_400(client):
    response = client.get("/api/stats")
    assert response.status_code == 400
    assert response.mimetype == "text/plain"
    assert response.data == b"Missing username"


def test_blank_username_is_400(client):
    assert client.get("/api/stats?username=%20").status_code == 400


def test_static_card(client):
    response = client.get("/api/stats?username=alice&theme=ocean&animate=false")

    assert response.status_code == 200
    assert response.headers["Content-Type"] == "image/svg+xml"
    assert response.headers["Cache-Control"] == "public, max-age=1800"
    body = response.get_data(as_text=True)
    assert "@alice" in body
    assert "#38bdf8" in body
    assert "animation" not in body
    assert 'class="fade"' not in body


@pytest.mark.parametrize("query", ["", "&animate=true", "&animate=0", "&animate=False"])
def test_animation_enabled_unless_literal_false(client, query):
    body = client.get(f"/api/stats?username=alice{query}").get_data(as_text=True)
    assert 'class="fade"' in body
    assert 'class="grow"' in body


def test_unknown_theme_falls_back_to_default(client):
    unknown = client.get("/api/stats?username=alice&theme=nonexistent").data
    default = client.get("/api/stats?username=alice&theme=default").data
    assert unknown == default


def test_upstream_error_is_502(app, client):
    app.config["GITHUB_CLIENT_FACTORY"] = failing_factory(UpstreamError())

    response = client.get("/api/stats?username=ghost")
    assert response.status_code == 502
    assert response.mimetype == "text/plain"
    assert response.data == b"Error fetching data"


def test_unexpected_error_is_mapped_to_upstream(app, client):
    app.config["GITHUB_CLIENT_FACTORY"] = failing_factory(KeyError("login"))

    response = client.get("/api/stats?username=ghost")
    assert response.status_code == 502
    assert b"<svg" not in response.data


def test_unknown_path_is_404(client):
    response = client.get("/api/other")
    assert response.status_code == 404
    assert response.mimetype == "text/plain"
    assert response.data == b"Not Found"


def test_post_is_405(client):
    response = client.post("/api/stats?username=alice")
    assert response.status_code == 405
    assert response.mimetype == "text/plain"


def test_cache_max_age_from_config():
    app = create_app({"cache": {"max_age": 60}})
    app.config["GITHUB_CLIENT_FACTORY"] = FakeClient
    response = app.test_client().get("/api/stats?username=alice")
    assert response.headers["Cache-Control"] == "public, max-age=60"


def test_parse_bool():
    assert parse_bool(None) is True
    assert parse_bool(None, default=False) is False
    assert parse_bool("false") is False
    assert parse_bool("no") is True
    assert parse_bool("") is True


def test_default_clients_share_one_session():
    with patch("server.requests.Session") as session_cls:
        app = create_app({"github": {"user_agent": "my-agent"}})
    factory = app.config["GITHUB_CLIENT_FACTORY"]

    first, second = factory("alice"), factory("bob")
    session_cls.assert_called_once()
    assert first.session is session_cls.return_value
    assert second.session is first.session
    assert first.headers["User-Agent"] == "my-agent"

    # Per-request clients leave the shared session open
    with first:
        pass
    session_cls.return_value.close.assert_not_called()
