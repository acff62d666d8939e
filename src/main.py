#!/usr/bin/env python3
"""Main entry point for the GitHub Stats Card service."""

import argparse
import json
import logging
import os
import sys
from pathlib import Path

import yaml
from dotenv import load_dotenv

from errors import UpstreamError
from github_stats import GitHubStats
from renderer import render
from server import create_app
from themes import resolve_theme_name

logger = logging.getLogger(__name__)

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Serve (or render) GitHub stats cards as SVG images.",
    )
    parser.add_argument("--config", help="Path to config.yaml (defaults to the project root)")
    parser.add_argument("--host", help="Interface to bind the HTTP server to")
    parser.add_argument("--port", type=int, help="Port for the HTTP server")
    parser.add_argument("--debug", action="store_true", help="Run Flask in debug mode")
    parser.add_argument(
        "--render",
        metavar="USERNAME",
        help="Fetch stats for USERNAME and write the SVG card instead of serving",
    )
    parser.add_argument("--theme", default="default", help="Theme used with --render")
    parser.add_argument(
        "--no-animate",
        action="store_true",
        help="Render a static card (with --render)",
    )
    parser.add_argument("--output", help="Output path for --render (default: output/stats.svg)")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Also print the aggregated stats as JSON (with --render)",
    )
    return parser.parse_args(argv)


def load_config(config_path: str | Path = "config.yaml") -> dict:
    """Load configuration from YAML file."""
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, "r") as f:
        return yaml.safe_load(f) or {}


def apply_env_overrides(config: dict) -> dict:
    """Let HOST, PORT and LOG_LEVEL from the environment win over config.yaml."""
    server = config.setdefault("server", {})
    if os.environ.get("HOST"):
        server["host"] = os.environ["HOST"]
    if os.environ.get("PORT"):
        server["port"] = int(os.environ["PORT"])
    if os.environ.get("LOG_LEVEL"):
        config.setdefault("logging", {})["level"] = os.environ["LOG_LEVEL"]
    return config


def configure_logging(config: dict) -> None:
    level = (config.get("logging") or {}).get("level", "INFO")
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def render_to_file(args: argparse.Namespace, config: dict, output_path: Path) -> int:
    """Fetch stats for one user and write the card to disk."""
    github_config = config.get("github") or {}
    theme = resolve_theme_name(args.theme)

    print("=" * 50)
    print("GitHub Stats Card Generator")
    print("=" * 50)

    print(f"\n[1/2] Fetching GitHub stats for {args.render}...")
    try:
        github = GitHubStats(
            args.render,
            api_url=github_config.get("api_url"),
            user_agent=github_config.get("user_agent"),
            per_page=github_config.get("per_page"),
            timeout=github_config.get("timeout"),
        )
        with github:
            stats = github.get_all_stats()
    except UpstreamError as e:
        print(f"Error fetching GitHub stats: {e}")
        return 1

    print(f"  Total stars: {stats.total_stars:,}")
    print(f"  Total forks: {stats.total_forks:,}")
    print(f"  Public repos: {stats.total_repos:,}")
    print(
        "  Top languages: "
        + ", ".join(f"{lang.name} ({lang.percentage:.1f}%)" for lang in stats.top_languages)
    )
    if args.json:
        print(json.dumps(stats.to_dict(), indent=2))

    print(f"\n[2/2] Rendering stats card (theme: {theme})...")
    svg = render(stats, theme, animate=not args.no_animate)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(svg, encoding="utf-8")

    print("\n" + "=" * 50)
    print("✓ Stats card generated successfully!")
    print(f"  Output: {output_path}")
    print("=" * 50)

    return 0


def main(argv: list[str] | None = None) -> int:
    """Start the stats card server, or render a single card with --render."""
    args = parse_args(argv)

    # Determine paths
    script_dir = Path(__file__).parent
    project_root = script_dir.parent
    env_path = project_root / ".env"

    # Load environment variables from .env file if it exists
    load_dotenv(env_path)

    if args.config:
        try:
            config = load_config(args.config)
        except FileNotFoundError as e:
            print(f"Error: {e}")
            return 1
    else:
        try:
            config = load_config(project_root / "config.yaml")
        except FileNotFoundError:
            config = {}

    config = apply_env_overrides(config)
    configure_logging(config)

    if args.render:
        output_path = Path(args.output) if args.output else project_root / "output" / "stats.svg"
        return render_to_file(args, config, output_path)

    server_config = config.get("server") or {}
    host = args.host or server_config.get("host", DEFAULT_HOST)
    port = args.port or server_config.get("port", DEFAULT_PORT)
    debug = args.debug or bool(server_config.get("debug", False))

    app = create_app(config)
    logger.info("GitHub stats server listening on http://%s:%s", host, port)
    app.run(host=host, port=port, debug=debug)

    return 0


if __name__ == "__main__":
    sys.exit(main())
