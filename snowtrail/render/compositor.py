"""Layered per-step frame rendering.

Layers are drawn strictly in this order, later ones occluding earlier ones:

1. background fill
2. base tile per grid cell
3. trail highlight tiles
4. unopened block icon for every unhit trigger
5. live burst particles, faded by their alpha
6. scenery (shelters, then trees)
7. the character, animated by step
8. ambient snowflakes, re-drawn at random every frame
9. elapsed-time (bottom-left) and hit-count (top-right) text

The compositor only reads simulation state. Its single source of randomness
is the snow ``Random`` passed by the caller.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from random import Random

import numpy as np
from PIL import Image, ImageColor, ImageDraw, ImageFont

from snowtrail.config.types import AssetConfig, SceneConfig
from snowtrail.domain.decorations import Decoration
from snowtrail.domain.grid import ActivityGrid
from snowtrail.domain.trail import Trail
from snowtrail.domain.triggers import TriggerRegistry
from snowtrail.render.sprites import SpriteSheet
from snowtrail.render.theme import DEFAULT_THEME, Theme


@dataclass(frozen=True)
class SceneSprites:
    """Every sprite source the compositor draws from."""

    character: SpriteSheet
    shelter: SpriteSheet
    tree: SpriteSheet
    snowflakes: SpriteSheet
    block: Image.Image
    particle: Image.Image
    assets: AssetConfig = AssetConfig()

    @classmethod
    def from_images(
        cls, images: Mapping[str, Image.Image], assets: AssetConfig = AssetConfig()
    ) -> SceneSprites:
        """Slice loaded images into sheets using the geometry in ``assets``."""
        shelter_w, shelter_h = assets.shelter_region
        tree_w, tree_h = assets.tree_region
        return cls(
            character=SpriteSheet.from_grid(
                images["character"], assets.character_columns, assets.character_rows
            ),
            shelter=SpriteSheet(images["shelter"], shelter_w, shelter_h),
            tree=SpriteSheet(images["tree"], tree_w, tree_h),
            snowflakes=SpriteSheet(
                images["snowflakes"],
                assets.snowflake_size,
                assets.snowflake_size,
                columns=assets.snowflake_columns,
            ),
            block=images["block"].convert("RGBA"),
            particle=images["particle"].convert("RGBA"),
            assets=assets,
        )


def _rgb(color: str) -> tuple[int, int, int]:
    return ImageColor.getrgb(color)[:3]  # type: ignore[return-value]


def _scaled(size: tuple[int, int], scale: float) -> tuple[int, int]:
    return max(1, round(size[0] * scale)), max(1, round(size[1] * scale))


def _faded(sprite: Image.Image, alpha: float) -> Image.Image:
    """Return a copy of ``sprite`` with its alpha channel multiplied by ``alpha``."""
    alpha = min(max(alpha, 0.0), 1.0)
    faded = sprite.copy()
    faded.putalpha(sprite.getchannel("A").point(lambda a: round(a * alpha)))
    return faded


class FrameCompositor:
    """Renders one RGB frame per traversal step for a fixed grid and sprite set."""

    def __init__(
        self,
        grid: ActivityGrid,
        sprites: SceneSprites,
        config: SceneConfig = SceneConfig(),
        theme: Theme = DEFAULT_THEME,
    ) -> None:
        self.grid = grid
        self.sprites = sprites
        self.config = config
        self.theme = theme
        cell = config.cell_size
        self.width = grid.cols * cell
        self.height = grid.rows * cell

        scale = config.sprite_scale
        assets = sprites.assets
        self._block = sprites.block.resize((cell, cell), Image.Resampling.LANCZOS)
        self._particle = sprites.particle.resize(
            (config.particle_size, config.particle_size), Image.Resampling.LANCZOS
        )
        self._shelter = sprites.shelter.frame(0, _scaled(assets.shelter_draw_size, scale))
        self._tree = sprites.tree.frame(assets.tree_index, _scaled(assets.tree_draw_size, scale))
        self._font = ImageFont.load_default(size=theme.font_size)
        self._tile_mask = self._build_tile_mask()

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height

    # -- layers 1-3 ---------------------------------------------------------

    def _build_tile_mask(self) -> np.ndarray:
        """Return (H, W) bool array, True where a tile (not a gap) is drawn."""
        cell = self.config.cell_size
        gap = min(self.theme.tile_gap, cell - 1)
        in_tile = np.arange(cell) < cell - gap
        mask_y = np.tile(in_tile, self.grid.rows)
        mask_x = np.tile(in_tile, self.grid.cols)
        return np.outer(mask_y, mask_x)

    def _build_tile_array(self, trail: Trail) -> np.ndarray:
        """Return (H, W, 3) uint8 array: background, base tiles, then trail tiles."""
        cell = self.config.cell_size
        codes = np.zeros(self.grid.shape, dtype=np.uint8)
        for row, col in trail:
            codes[row, col] = 1
        palette = np.array(
            [_rgb(self.theme.tile_color), _rgb(self.theme.trail_color)], dtype=np.uint8
        )
        tiles = np.repeat(np.repeat(palette[codes], cell, axis=0), cell, axis=1)
        canvas = np.empty((self.height, self.width, 3), dtype=np.uint8)
        canvas[:, :] = _rgb(self.theme.background_color)
        canvas[self._tile_mask] = tiles[self._tile_mask]
        return canvas

    # -- layers 4-8 ---------------------------------------------------------

    def _draw_blocks(self, frame: Image.Image, registry: TriggerRegistry) -> None:
        cell = self.config.cell_size
        for trigger in registry:
            if not trigger.hit:
                frame.paste(self._block, (trigger.col * cell, trigger.row * cell), self._block)

    def _draw_particles(self, frame: Image.Image, registry: TriggerRegistry) -> None:
        for trigger in registry:
            for particle in trigger.particles:
                sprite = _faded(self._particle, particle.alpha)
                frame.paste(sprite, (round(particle.x), round(particle.y)), sprite)

    def _draw_decorations(self, frame: Image.Image, decorations: Iterable[Decoration]) -> None:
        cell = self.config.cell_size
        ordered = sorted(decorations, key=lambda d: d.kind != "shelter")
        for decoration in ordered:
            sprite = self._shelter if decoration.kind == "shelter" else self._tree
            frame.paste(sprite, (decoration.col * cell, (decoration.row - 1) * cell), sprite)

    def _draw_character(self, frame: Image.Image, step: int, row: int, col: int) -> None:
        cell = self.config.cell_size
        sheet = self.sprites.character
        sprite = sheet.frame(step % sheet.frame_count, (cell, cell))
        frame.paste(sprite, (col * cell, row * cell), sprite)

    def _draw_snow(self, frame: Image.Image, step: int, rng: Random) -> None:
        variants = self.sprites.assets.snowflake_variants
        drift = step * self.config.snow_fall_speed
        for _ in range(self.config.snowflake_count):
            x = rng.random() * self.width
            y = (rng.random() * self.height + drift) % self.height
            sprite = self.sprites.snowflakes.frame(rng.randrange(variants))
            frame.paste(sprite, (int(x), int(y)), sprite)

    # -- layer 9 ------------------------------------------------------------

    def _draw_text(self, frame: Image.Image, elapsed_seconds: int, hit_count: int) -> None:
        draw = ImageDraw.Draw(frame)
        margin = self.theme.text_margin
        fill = _rgb(self.theme.text_color)

        elapsed = self.theme.elapsed_text(elapsed_seconds)
        _, _, _, bottom = draw.textbbox((0, 0), elapsed, font=self._font)
        draw.text((margin, self.height - margin - bottom), elapsed, font=self._font, fill=fill)

        count = self.theme.hit_count_text(hit_count)
        _, top, right, _ = draw.textbbox((0, 0), count, font=self._font)
        draw.text((self.width - margin - right, margin - top), count, font=self._font, fill=fill)

    def compose(
        self,
        step: int,
        position: tuple[int, int],
        registry: TriggerRegistry,
        trail: Trail,
        decorations: Iterable[Decoration],
        elapsed_seconds: int,
        snow_rng: Random,
    ) -> Image.Image:
        """Render the frame for ``step`` with the character at ``position``."""
        row, col = position
        frame = Image.fromarray(self._build_tile_array(trail))
        self._draw_blocks(frame, registry)
        self._draw_particles(frame, registry)
        self._draw_decorations(frame, decorations)
        self._draw_character(frame, step, row, col)
        self._draw_snow(frame, step, snow_rng)
        self._draw_text(frame, elapsed_seconds, registry.hit_count)
        return frame
