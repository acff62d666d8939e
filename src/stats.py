"""Aggregation of raw GitHub repository data into card statistics."""

from dataclasses import asdict, dataclass, field
from typing import Any, Iterable, Mapping


@dataclass(frozen=True)
class LanguageShare:
    """How many repositories use a language, and what share of all tagged repos that is."""

    name: str
    count: int
    percentage: float


@dataclass(frozen=True)
class Stats:
    """Summary statistics for one user, built once per request."""

    username: str
    total_repos: int = 0
    total_stars: int = 0
    total_forks: int = 0
    # Commit counts are not fetched; always 0.
    total_commits: int = 0
    top_languages: tuple[LanguageShare, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["top_languages"] = list(data["top_languages"])
        return data


def _count(value: Any) -> int:
    """Treat a missing or null counter as zero."""
    return value or 0


def language_breakdown(repositories: Iterable[Mapping[str, Any]]) -> dict[str, int]:
    """Count repositories per primary language, in first-seen order."""
    languages: dict[str, int] = {}
    for repo in repositories:
        language = repo.get("language")
        if not language:
            continue
        languages[language] = languages.get(language, 0) + 1
    return languages


def rank_languages(languages: Mapping[str, int]) -> tuple[LanguageShare, ...]:
    """
    Sort languages by count (descending) and attach percentages.

    `sorted` is stable, so ties keep their first-seen order. Percentages are
    computed against every language, not only the ones that end up drawn.
    """
    total = sum(languages.values())

    sorted_languages = sorted(languages.items(), key=lambda x: x[1], reverse=True)

    return tuple(
        LanguageShare(
            name=name,
            count=count,
            percentage=(count / total) * 100 if total else 0,
        )
        for name, count in sorted_languages
    )


def aggregate(
    profile: Mapping[str, Any], repositories: Iterable[Mapping[str, Any]]
) -> Stats:
    """
    Reduce a GitHub user profile and its repository list into `Stats`.

    Args:
        profile: User JSON from `/users/{username}` (`login`, `public_repos`)
        repositories: Repository JSON objects from `/users/{username}/repos`

    Returns:
        Stats with star/fork totals and the full ranked language breakdown
    """
    repositories = list(repositories)

    total_stars = 0
    total_forks = 0
    for repo in repositories:
        total_stars += _count(repo.get("stargazers_count"))
        total_forks += _count(repo.get("forks_count"))

    return Stats(
        username=profile.get("login") or "",
        total_repos=_count(profile.get("public_repos")),
        total_stars=total_stars,
        total_forks=total_forks,
        total_commits=0,
        top_languages=rank_languages(language_breakdown(repositories)),
    )
