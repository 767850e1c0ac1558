"""Sprite-sheet indexing and cached sub-image extraction."""

from __future__ import annotations

from PIL import Image


def sprite_offset(
    index: int, columns: int, frame_width: int, frame_height: int
) -> tuple[int, int]:
    """Return the pixel offset of flat frame ``index`` on a sheet of ``columns`` columns."""
    if columns < 1:
        raise ValueError("columns must be >= 1")
    if index < 0:
        raise ValueError("index must be >= 0")
    return (index % columns) * frame_width, (index // columns) * frame_height


class SpriteSheet:
    """Fixed-size frames laid out row-major on a single RGBA image.

    Extracted (and optionally resized) frames are cached per
    ``(index, size)`` since the compositor asks for the same few sub-images
    on every step.
    """

    def __init__(
        self,
        image: Image.Image,
        frame_width: int,
        frame_height: int,
        columns: int | None = None,
        rows: int | None = None,
    ) -> None:
        if frame_width < 1 or frame_height < 1:
            raise ValueError("frame dimensions must be >= 1")
        self.image = image if image.mode == "RGBA" else image.convert("RGBA")
        self.frame_width = frame_width
        self.frame_height = frame_height
        self.columns = columns if columns is not None else max(1, image.width // frame_width)
        self.rows = rows if rows is not None else max(1, image.height // frame_height)
        self._cache: dict[tuple[int, tuple[int, int] | None], Image.Image] = {}

    @classmethod
    def from_grid(cls, image: Image.Image, columns: int, rows: int) -> SpriteSheet:
        """Slice ``image`` evenly into ``columns x rows`` frames."""
        frame_width = image.width // columns
        frame_height = image.height // rows
        if frame_width < 1 or frame_height < 1:
            raise ValueError(
                f"sheet of {image.width}x{image.height} px is too small for "
                f"{columns}x{rows} frames"
            )
        return cls(image, frame_width, frame_height, columns=columns, rows=rows)

    @property
    def frame_count(self) -> int:
        return self.columns * self.rows

    def offset(self, index: int) -> tuple[int, int]:
        return sprite_offset(index, self.columns, self.frame_width, self.frame_height)

    def frame(self, index: int, size: tuple[int, int] | None = None) -> Image.Image:
        """Return frame ``index``, resized to ``size`` when given."""
        key = (index, size)
        cached = self._cache.get(key)
        if cached is not None:
            return cached
        x, y = self.offset(index)
        sprite = self.image.crop((x, y, x + self.frame_width, y + self.frame_height))
        if size is not None and size != sprite.size:
            sprite = sprite.resize(size, Image.Resampling.LANCZOS)
        self._cache[key] = sprite
        return sprite
