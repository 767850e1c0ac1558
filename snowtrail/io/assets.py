"""Raster asset loading with fail-fast decoding."""

from __future__ import annotations

import logging
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from snowtrail.config.types import AssetConfig
from snowtrail.errors import AssetMissing
from snowtrail.io.paths import asset_path

logger = logging.getLogger(__name__)


class AssetLibrary:
    """Loads the named images declared in an :class:`AssetConfig` from one directory."""

    def __init__(self, root: Path, config: AssetConfig = AssetConfig()) -> None:
        self.root = Path(root)
        self.config = config
        self._images: dict[str, Image.Image] = {}

    def load(self, name: str) -> Image.Image:
        """Return the decoded RGBA image for asset ``name``, loading it on first use."""
        cached = self._images.get(name)
        if cached is not None:
            return cached
        files = self.config.files
        if name not in files:
            raise AssetMissing(f"unknown asset {name!r}; expected one of {sorted(files)}")
        try:
            path = asset_path(self.root, files[name])
        except ValueError as exc:
            raise AssetMissing(f"asset {name!r} path escapes {self.root}") from exc
        try:
            with Image.open(path) as handle:
                image = handle.convert("RGBA")
        except FileNotFoundError as exc:
            raise AssetMissing(f"asset {name!r} not found at {path}") from exc
        except (UnidentifiedImageError, OSError) as exc:
            raise AssetMissing(f"asset {name!r} at {path} could not be decoded: {exc}") from exc
        logger.debug("Loaded asset %s from %s (%dx%d)", name, path, image.width, image.height)
        self._images[name] = image
        return image

    def load_all(self) -> dict[str, Image.Image]:
        """Eagerly load every required asset so failures surface before rendering."""
        return {name: self.load(name) for name in self.config.files}
