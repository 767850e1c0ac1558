"""Matplotlib filmstrip preview of composed frames."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402
from PIL import Image  # noqa: E402


def render_filmstrip(
    frames: Sequence[Image.Image],
    output_path: Path,
    n_frames: int = 6,
    steps: Sequence[int] | None = None,
    title: str | None = None,
) -> Path:
    """Render an evenly sampled vertical strip of frames with step labels.

    ``steps`` gives the traversal step of each frame for the panel titles and
    defaults to the frame positions.
    """
    if n_frames < 1:
        raise ValueError("n_frames must be >= 1")
    if not frames:
        raise ValueError("frames must not be empty")
    if steps is not None and len(steps) != len(frames):
        raise ValueError("steps must have one entry per frame")
    step_labels = list(steps) if steps is not None else list(range(len(frames)))

    actual_n = max(1, min(n_frames, len(frames)))
    indices = [int(i * (len(frames) - 1) / max(1, actual_n - 1)) for i in range(actual_n)]

    width, height = frames[0].size
    panel_w = 8.0
    panel_h = max(1.0, panel_w * height / width)
    fig, axes = plt.subplots(actual_n, 1, figsize=(panel_w, panel_h * actual_n), squeeze=False)

    for ax_idx, frame_idx in enumerate(indices):
        ax = axes[ax_idx, 0]
        ax.imshow(np.asarray(frames[frame_idx].convert("RGB")), origin="upper", aspect="equal")
        ax.set_title(f"Step {step_labels[frame_idx]}", fontsize=9)
        ax.set_xticks([])
        ax.set_yticks([])

    if title is not None:
        fig.suptitle(title, fontsize=11)
    fig.tight_layout()
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=100)
    plt.close(fig)
    return output_path
