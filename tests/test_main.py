"""Entry point tests: config loading, env overrides and offline --render."""
from unittest.mock import patch

import pytest

import main
from errors import UpstreamError
from stats import aggregate


def test_load_config(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("server:\n  port: 8080\ncache:\n  max_age: 60\n", encoding="utf-8")

    config = main.load_config(path)
    assert config["server"]["port"] == 8080
    assert config["cache"]["max_age"] == 60


def test_load_empty_config(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("", encoding="utf-8")
    assert main.load_config(path) == {}


def test_load_missing_config(tmp_path):
    with pytest.raises(FileNotFoundError):
        main.load_config(tmp_path / "missing.yaml")


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("PORT", "9000")
    monkeypatch.setenv("HOST", "127.0.0.1")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    config = main.apply_env_overrides({"server": {"port": 3000}})
    assert config["server"] == {"port": 9000, "host": "127.0.0.1"}
    assert config["logging"]["level"] == "DEBUG"


def test_missing_explicit_config_exits_1(tmp_path):
    assert main.main(["--config", str(tmp_path / "nope.yaml")]) == 1


def test_render_to_file(tmp_path, monkeypatch, capsys):
    monkeypatch.delenv("PORT", raising=False)
    output = tmp_path / "card.svg"
    stats = aggregate(
        {"login": "alice", "public_repos": 1},
        [{"stargazers_count": 7, "forks_count": 1, "language": "Python"}],
    )

    with patch("main.GitHubStats") as github_cls:
        github_cls.return_value.get_all_stats.return_value = stats
        code = main.main(
            ["--render", "alice", "--theme", "ocean", "--no-animate", "--output", str(output), "--json"]
        )

    assert code == 0
    github_cls.assert_called_once()
    assert github_cls.call_args.args[0] == "alice"
    github_cls.return_value.__exit__.assert_called_once()
    svg = output.read_text(encoding="utf-8")
    assert "@alice" in svg
    assert "animation" not in svg
    out = capsys.readouterr().out
    assert "Total stars: 7" in out
    assert '"total_stars": 7' in out


def test_render_upstream_failure(tmp_path):
    with patch("main.GitHubStats") as github_cls:
        github_cls.return_value.get_all_stats.side_effect = UpstreamError()
        code = main.main(["--render", "ghost", "--output", str(tmp_path / "x.svg")])

    assert code == 1
    assert not (tmp_path / "x.svg").exists()


def test_serve_uses_config_and_args(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("HOST", raising=False)

    with patch("main.create_app") as create_app:
        code = main.main(["--port", "5050", "--host", "127.0.0.1"])

    assert code == 0
    create_app.return_value.run.assert_called_once_with(
        host="127.0.0.1", port=5050, debug=False
    )
