from typing import TypedDict


class ThemeColors(TypedDict):
    background: str
    empty: str
    levels: tuple[str, str, str, str, str]


THEMES: dict[str, ThemeColors] = {
    "github": {
        "background": "#ffffff",
        "empty": "#ebedf0",
        "levels": ("#9be9a8", "#40c463", "#30a14e", "#216e39", "#0d4429"),
    },
    "dark": {
        "background": "#0d1117",
        "empty": "#161b22",
        "levels": ("#0e4429", "#006d32", "#26a641", "#39d353", "#57e36e"),
    },
    "light": {
        "background": "#ffffff",
        "empty": "#f0f0f0",
        "levels": ("#c6e48b", "#7bc96f", "#49af5d", "#2e8840", "#196127"),
    },
}

# Level for a day with no contributions; rendered with the theme's "empty" color
EMPTY_LEVEL = -1


def get_theme(name: str) -> ThemeColors:
    return THEMES[name]


def get_color_level(count: int) -> int:
    """Bucket a daily count: 0 is empty, then 1-3, 4-6, 7-9, 10-12 and 13+."""
    if count <= 0:
        return EMPTY_LEVEL
    if count <= 3:
        return 0
    if count <= 6:
        return 1
    if count <= 9:
        return 2
    if count <= 12:
        return 3
    return 4


def get_color(count: int, theme: str = "github") -> str:
    colors = get_theme(theme)
    level = get_color_level(count)
    if level == EMPTY_LEVEL:
        return colors["empty"]
    return colors["levels"][level]
