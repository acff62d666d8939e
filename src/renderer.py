"""SVG renderer for the GitHub stats card."""

from html import escape

from icons import ICONS
from language_colors import get_language_color
from stats import LanguageShare, Stats
from themes import Theme, get_theme

FONT_FAMILY = (
    '-apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, Helvetica, Arial, sans-serif'
)


def bar_width(percentage: float) -> float:
    """Width of a language bar. Never thinner than MIN_BAR_WIDTH so tiny shares stay visible."""
    return max(
        StatsCardRenderer.MIN_BAR_WIDTH,
        (percentage / 100) * StatsCardRenderer.LANGUAGE_TRACK_WIDTH,
    )


def _num(value: float) -> str:
    """Format a coordinate without trailing zeros (120.0 -> 120)."""
    return f"{value:g}"


class StatsCardRenderer:
    """Renders the GitHub stats card as an SVG document."""

    CARD_WIDTH = 460
    CARD_HEIGHT = 200
    PADDING = 25
    CORNER_RADIUS = 10

    # Title and divider (relative to the padded content origin)
    TITLE_Y = 15
    DIVIDER_Y = 35

    # Stat grid: 2x2 blocks
    STATS_ORIGIN = (0, 60)
    STAT_COLUMN_X = (0, 110)
    STAT_ROW_Y = (0, 55)
    ICON_SCALE = 1.2
    STAT_VALUE_POS = (28, 12)
    STAT_LABEL_POS = (0, 32)

    # Language panel
    LANGUAGES_ORIGIN = (220, 55)
    MAX_LANGUAGES = 4
    LANGUAGE_ROW_HEIGHT = 28
    LANGUAGE_TRACK_X = 70
    LANGUAGE_TRACK_WIDTH = 120
    LANGUAGE_BAR_HEIGHT = 8
    MIN_BAR_WIDTH = 10
    TRACK_OPACITY = 0.4

    # Animation timing (ms)
    STAT_DELAYS = (100, 200, 300, 400)
    LANGUAGE_DELAY_STEP = 150
    LANGUAGE_DELAY_OFFSET = 2

    def __init__(self, theme: Theme | str | None = None, animate: bool = True):
        if not isinstance(theme, Theme):
            theme = get_theme(theme)
        self.theme = theme
        self.animate = animate

    def _render_styles(self) -> str:
        t = self.theme
        css = f"""
    .root {{ font-family: {FONT_FAMILY}; }}
    .title {{ font-weight: 700; font-size: 18px; fill: {t.title}; }}
    .stat-label {{ font-size: 12px; fill: {t.text}; opacity: 0.8; }}
    .stat-value {{ font-size: 16px; fill: {t.text}; font-weight: 700; }}
    .icon {{ fill: {t.icon}; }}
    .lang-name {{ font-size: 11px; fill: {t.text}; }}"""
        if self.animate:
            css += """
    .fade { opacity: 0; animation: fadeIn 0.8s ease-out forwards; }
    .grow { transform: scaleX(0); transform-origin: left; animation: growIn 1s cubic-bezier(0.4,0,0.2,1) forwards; }
    @keyframes fadeIn { to { opacity: 1; } }
    @keyframes growIn { to { transform: scaleX(1); } }"""
        return css + "\n  "

    def _animation_attrs(self, css_class: str, delay: int) -> str:
        """Class and delay attributes for an animated element, or nothing when static."""
        if not self.animate:
            return ""
        return f' class="{css_class}" style="animation-delay:{delay}ms"'

    def _render_stat(
        self, x: int, y: int, icon: str, label: str, value: int, delay: int
    ) -> str:
        """Render one icon + value + label block."""
        value_x, value_y = self.STAT_VALUE_POS
        label_x, label_y = self.STAT_LABEL_POS
        return f"""
      <g transform="translate({x},{y})"{self._animation_attrs("fade", delay)}>
        <path d="{icon}" class="icon" transform="scale({_num(self.ICON_SCALE)})"/>
        <text x="{value_x}" y="{value_y}" class="stat-value">{value:,}</text>
        <text x="{label_x}" y="{label_y}" class="stat-label">{label}</text>
      </g>"""

    def _render_stats_grid(self, stats: Stats) -> str:
        col0, col1 = self.STAT_COLUMN_X
        row0, row1 = self.STAT_ROW_Y
        # Fixed order: stars, commits, repos, forks
        blocks = [
            (col0, row0, ICONS["star"], "Total Stars", stats.total_stars),
            (col1, row0, ICONS["commit"], "Commits", stats.total_commits),
            (col0, row1, ICONS["repo"], "Repos", stats.total_repos),
            (col1, row1, ICONS["fork"], "Forks", stats.total_forks),
        ]
        return "".join(
            self._render_stat(x, y, icon, label, value, delay)
            for (x, y, icon, label, value), delay in zip(blocks, self.STAT_DELAYS)
        )

    def _render_language(self, index: int, language: LanguageShare) -> str:
        """Render one language row: name, background track and proportional bar."""
        t = self.theme
        color = get_language_color(language.name, t.ring)
        delay = (index + self.LANGUAGE_DELAY_OFFSET) * self.LANGUAGE_DELAY_STEP
        radius = self.LANGUAGE_BAR_HEIGHT // 2
        return f"""
      <g transform="translate(0,{index * self.LANGUAGE_ROW_HEIGHT})">
        <text y="10" class="lang-name">{escape(language.name)}</text>
        <rect x="{self.LANGUAGE_TRACK_X}" y="2" width="{self.LANGUAGE_TRACK_WIDTH}" height="{self.LANGUAGE_BAR_HEIGHT}" rx="{radius}" fill="{t.border}" fill-opacity="{_num(self.TRACK_OPACITY)}"/>
        <rect x="{self.LANGUAGE_TRACK_X}" y="2" width="{_num(bar_width(language.percentage))}" height="{self.LANGUAGE_BAR_HEIGHT}" rx="{radius}" fill="{color}" data-lang="{escape(language.name)}"{self._animation_attrs("grow", delay)}/>
      </g>"""

    def _render_languages(self, stats: Stats) -> str:
        languages = stats.top_languages[: self.MAX_LANGUAGES]
        return "".join(
            self._render_language(i, language) for i, language in enumerate(languages)
        )

    def render(self, stats: Stats) -> str:
        """
        Render the stats card.

        Args:
            stats: Aggregated statistics for one user

        Returns:
            A complete SVG document. The output depends only on `stats`,
            the theme and the animation flag.
        """
        t = self.theme
        width, height = self.CARD_WIDTH, self.CARD_HEIGHT
        stats_x, stats_y = self.STATS_ORIGIN
        langs_x, langs_y = self.LANGUAGES_ORIGIN

        return f"""<svg width="{width}" height="{height}" viewBox="0 0 {width} {height}" xmlns="http://www.w3.org/2000/svg">
  <style>{self._render_styles()}</style>
  <defs>
    <linearGradient id="grad" x1="0" y1="0" x2="1" y2="1">
      <stop offset="0%" stop-color="{t.bg[0]}"/>
      <stop offset="100%" stop-color="{t.bg[1]}"/>
    </linearGradient>
  </defs>
  <rect width="{width}" height="{height}" rx="{self.CORNER_RADIUS}" fill="url(#grad)" stroke="{t.border}" stroke-width="1"/>
  <g class="root" transform="translate({self.PADDING},{self.PADDING})">
    <text x="0" y="{self.TITLE_Y}" class="title">@{escape(stats.username)}</text>
    <line x1="0" y1="{self.DIVIDER_Y}" x2="{width - 3 * self.PADDING}" y2="{self.DIVIDER_Y}" stroke="{t.border}"/>
    <g transform="translate({stats_x},{stats_y})">{self._render_stats_grid(stats)}
    </g>
    <g transform="translate({langs_x},{langs_y})">{self._render_languages(stats)}
    </g>
  </g>
</svg>
"""


def render(stats: Stats, theme: Theme | str | None = None, animate: bool = True) -> str:
    """Render `stats` as an SVG card with the given theme and animation flag."""
    return StatsCardRenderer(theme, animate=animate).render(stats)
