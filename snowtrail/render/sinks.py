"""Frame sinks: ordered consumers of composed frames.

Every sink follows the same three-phase contract: ``start(width, height)``
once, ``write_frame(frame)`` once per step in order, then ``finish()``.
Calling out of order is a programming defect and raises ``RuntimeError``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

from PIL import Image

from snowtrail.config.constants import FRAME_DURATION_MS
from snowtrail.errors import SinkWriteFailure

logger = logging.getLogger(__name__)


class FrameSink(Protocol):
    """Anything that accepts an ordered stream of equally sized frames."""

    def start(self, width: int, height: int) -> None: ...

    def write_frame(self, frame: Image.Image) -> None: ...

    def finish(self) -> None: ...


class _OrderedSink:
    """Shared start/write/finish bookkeeping."""

    def __init__(self) -> None:
        self.size: tuple[int, int] | None = None
        self.frames_written = 0
        self.finished = False

    def start(self, width: int, height: int) -> None:
        if self.size is not None:
            raise RuntimeError(f"{type(self).__name__} already started")
        if width < 1 or height < 1:
            raise ValueError("frame dimensions must be >= 1")
        self.size = (width, height)

    def _check_frame(self, frame: Image.Image) -> None:
        if self.size is None:
            raise RuntimeError(f"{type(self).__name__}.write_frame called before start")
        if self.finished:
            raise RuntimeError(f"{type(self).__name__}.write_frame called after finish")
        if frame.size != self.size:
            raise ValueError(f"frame size {frame.size} does not match sink size {self.size}")

    def _check_finish(self) -> None:
        if self.size is None:
            raise RuntimeError(f"{type(self).__name__}.finish called before start")
        if self.finished:
            raise RuntimeError(f"{type(self).__name__} already finished")


class GifSink(_OrderedSink):
    """Animated GIF written with Pillow on ``finish``.

    Frames are palette-quantized as they arrive so only one byte per pixel
    is held in memory until the file is written.
    """

    def __init__(
        self, path: Path, frame_duration_ms: int = FRAME_DURATION_MS, loop: int = 0
    ) -> None:
        super().__init__()
        self.path = Path(path)
        self.frame_duration_ms = frame_duration_ms
        self.loop = loop
        self._frames: list[Image.Image] = []

    def write_frame(self, frame: Image.Image) -> None:
        self._check_frame(frame)
        self._frames.append(frame.convert("RGB").quantize(colors=256))
        self.frames_written += 1

    def finish(self) -> None:
        self._check_finish()
        if not self._frames:
            raise SinkWriteFailure("cannot write a GIF with zero frames")
        first, *rest = self._frames
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            first.save(
                self.path,
                format="GIF",
                save_all=True,
                append_images=rest,
                duration=self.frame_duration_ms,
                loop=self.loop,
            )
        except OSError as exc:
            raise SinkWriteFailure(f"failed to write GIF to {self.path}: {exc}") from exc
        finally:
            self._frames.clear()
        self.finished = True
        logger.info("Wrote %d frames to %s", self.frames_written, self.path)


class FrameCollector(_OrderedSink):
    """In-memory sink keeping every ``stride``-th frame alongside its step index."""

    def __init__(self, stride: int = 1) -> None:
        super().__init__()
        if stride < 1:
            raise ValueError("stride must be >= 1")
        self.stride = stride
        self.frames: list[Image.Image] = []
        self.steps: list[int] = []

    def write_frame(self, frame: Image.Image) -> None:
        self._check_frame(frame)
        if self.frames_written % self.stride == 0:
            self.frames.append(frame.copy())
            self.steps.append(self.frames_written)
        self.frames_written += 1

    def finish(self) -> None:
        self._check_finish()
        self.finished = True


class TeeSink:
    """Forwards every call to each wrapped sink, in the order given."""

    def __init__(self, *sinks: FrameSink) -> None:
        if not sinks:
            raise ValueError("TeeSink needs at least one sink")
        self.sinks = sinks

    def start(self, width: int, height: int) -> None:
        for sink in self.sinks:
            sink.start(width, height)

    def write_frame(self, frame: Image.Image) -> None:
        for sink in self.sinks:
            sink.write_frame(frame)

    def finish(self) -> None:
        for sink in self.sinks:
            sink.finish()
