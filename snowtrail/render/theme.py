"""Visual theme presets for the frame compositor.

Themes are frozen dataclasses that group all styling constants together.
The compositor accepts a ``Theme`` instance instead of referencing
hard-coded module-level colours, making it easy to swap palettes via the
``--theme`` CLI argument or programmatically.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    """Complete collection of frame style tokens."""

    background_color: str = "#eefaff"
    tile_color: str = "#cde6f7"
    trail_color: str = "#bbdefb"
    tile_gap: int = 0
    """Pixels of background left visible between adjacent tiles."""

    text_color: str = "#004d40"
    font_size: int = 20
    text_margin: int = 10
    elapsed_label: str = "{seconds}s"
    hit_count_label: str = "{count}"

    def __post_init__(self) -> None:
        if self.tile_gap < 0:
            raise ValueError("tile_gap must be >= 0")
        if self.font_size < 1:
            raise ValueError("font_size must be >= 1")

    def elapsed_text(self, seconds: int) -> str:
        return self.elapsed_label.format(seconds=seconds)

    def hit_count_text(self, count: int) -> str:
        return self.hit_count_label.format(count=count)


# ---------------------------------------------------------------------------
# Built-in presets
# ---------------------------------------------------------------------------

DEFAULT_THEME = Theme()

NIGHT_THEME = Theme(
    background_color="#0d1117",
    tile_color="#161b22",
    trail_color="#1f3b57",
    tile_gap=2,
    text_color="#e6edf3",
)

REGISTERED_THEMES: dict[str, Theme] = {
    "default": DEFAULT_THEME,
    "night": NIGHT_THEME,
}


def get_theme(name: str) -> Theme:
    """Look up a theme by name (case-insensitive)."""
    key = name.lower()
    if key not in REGISTERED_THEMES:
        valid = ", ".join(sorted(REGISTERED_THEMES))
        raise ValueError(f"Unknown theme {name!r}; available: {valid}")
    return REGISTERED_THEMES[key]
