"""Color themes for the stats card."""

from dataclasses import dataclass
from types import MappingProxyType

DEFAULT_THEME = "default"


@dataclass(frozen=True)
class Theme:
    """A named palette applied across the whole card."""

    name: str
    bg: tuple[str, str]
    border: str
    text: str
    title: str
    icon: str
    ring: str


THEMES = MappingProxyType(
    {
        "default": Theme(
            name="default",
            bg=("#0d1117", "#161b22"),
            border="#30363d",
            text="#c9d1d9",
            title="#58a6ff",
            icon="#8b949e",
            ring="#2f81f7",
        ),
        "ocean": Theme(
            name="ocean",
            bg=("#0f172a", "#1e293b"),
            border="#334155",
            text="#94a3b8",
            title="#38bdf8",
            icon="#64748b",
            ring="#0ea5e9",
        ),
        "midnight": Theme(
            name="midnight",
            bg=("#000000", "#1a1a1a"),
            border="#333333",
            text="#eeeeee",
            title="#ff006e",
            icon="#888888",
            ring="#ffbe0b",
        ),
    }
)


def resolve_theme_name(name: str | None) -> str:
    """Return the registered theme key for `name`, or the default key."""
    if name and name in THEMES:
        return name
    return DEFAULT_THEME


def get_theme(name: str | None) -> Theme:
    """Look up a theme by name. Unknown or missing names fall back to the default."""
    return THEMES[resolve_theme_name(name)]
