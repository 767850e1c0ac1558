"""Rendering layer: themes, sprite sheets, frame compositing, sinks, and previews."""

from snowtrail.render.compositor import FrameCompositor, SceneSprites
from snowtrail.render.filmstrip import render_filmstrip
from snowtrail.render.sinks import FrameCollector, FrameSink, GifSink, TeeSink
from snowtrail.render.sprites import SpriteSheet, sprite_offset
from snowtrail.render.theme import (
    DEFAULT_THEME,
    NIGHT_THEME,
    REGISTERED_THEMES,
    Theme,
    get_theme,
)

__all__ = [
    "DEFAULT_THEME",
    "FrameCollector",
    "FrameCompositor",
    "FrameSink",
    "GifSink",
    "NIGHT_THEME",
    "REGISTERED_THEMES",
    "SceneSprites",
    "SpriteSheet",
    "TeeSink",
    "Theme",
    "get_theme",
    "render_filmstrip",
    "sprite_offset",
]
