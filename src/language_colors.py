"""Display colors for common GitHub languages."""

GITHUB_LANGUAGE_COLORS = {
    "JavaScript": "#f1e05a",
    "TypeScript": "#3178c6",
    "Python": "#3572A5",
    "Java": "#b07219",
    "Go": "#00ADD8",
    "Rust": "#dea584",
    "HTML": "#e34c26",
    "CSS": "#563d7c",
    "Vue": "#41b883",
    "React": "#61dafb",
}


def get_language_color(language: str, fallback: str) -> str:
    """Get the GitHub color for a language, or `fallback` for unknown languages."""
    # Try exact match first
    if language in GITHUB_LANGUAGE_COLORS:
        return GITHUB_LANGUAGE_COLORS[language]

    # Try case-insensitive match
    language_lower = language.lower()
    for lang, color in GITHUB_LANGUAGE_COLORS.items():
        if lang.lower() == language_lower:
            return color

    return fallback
