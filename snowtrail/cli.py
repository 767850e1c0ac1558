from __future__ import annotations

import argparse
import datetime
import logging
import sys
from pathlib import Path

from snowtrail.config.types import AssetConfig, SceneConfig
from snowtrail.domain.grid import ActivityGrid
from snowtrail.errors import SnowtrailError
from snowtrail.io.assets import AssetLibrary
from snowtrail.io.contributions import fetch_contributions, load_grid_json, save_grid_json
from snowtrail.io.paths import resolve_within_base
from snowtrail.render.compositor import SceneSprites
from snowtrail.render.filmstrip import render_filmstrip
from snowtrail.render.sinks import FrameCollector, FrameSink, GifSink, TeeSink
from snowtrail.render.theme import REGISTERED_THEMES, get_theme
from snowtrail.simulation.engine import run_animation

logger = logging.getLogger("snowtrail")


def _build_fetch_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("fetch", help="Fetch a contribution grid and save it as JSON")
    p.set_defaults(func=_handle_fetch, parser=p)
    p.add_argument("--user", type=str, required=True)
    p.add_argument("--year", type=int, default=datetime.date.today().year)
    p.add_argument("--output", type=Path, required=True)
    p.add_argument("--base-dir", type=Path, default=Path("."))


def _build_render_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("render", help="Render the traversal animation as a GIF")
    p.set_defaults(func=_handle_render, parser=p)
    source = p.add_mutually_exclusive_group(required=True)
    source.add_argument("--grid-json", type=Path, default=None)
    source.add_argument("--user", type=str, default=None)
    p.add_argument("--year", type=int, default=datetime.date.today().year)
    p.add_argument("--assets-dir", type=Path, required=True)
    p.add_argument("--output", type=Path, required=True)
    p.add_argument("--frame-log", type=Path, default=None)
    p.add_argument("--filmstrip", type=Path, default=None)
    p.add_argument("--filmstrip-frames", type=int, default=6)
    p.add_argument("--cell-size", type=int, default=SceneConfig.cell_size)
    p.add_argument("--frame-duration", type=int, default=SceneConfig.frame_duration_ms)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--snow-seed", type=int, default=None)
    p.add_argument("--theme", type=str, default="default", choices=sorted(REGISTERED_THEMES))
    p.add_argument("--base-dir", type=Path, default=Path("."))


def _within_base(args: argparse.Namespace, path: Path) -> Path:
    """Resolve a user-supplied path under --base-dir, reporting escapes as usage errors."""
    try:
        return resolve_within_base(path, Path(args.base_dir).resolve())
    except ValueError as exc:
        args.parser.error(str(exc))


def _scene_config(args: argparse.Namespace) -> SceneConfig:
    try:
        return SceneConfig(
            cell_size=args.cell_size,
            frame_duration_ms=args.frame_duration,
            seed=args.seed,
            snow_seed=args.snow_seed,
        )
    except ValueError as exc:
        args.parser.error(str(exc))


def _handle_fetch(args: argparse.Namespace) -> None:
    output = _within_base(args, args.output)
    grid = fetch_contributions(args.user, args.year)
    save_grid_json(grid, output, user=args.user, year=args.year)
    logger.info("Saved %dx%d grid to %s", grid.rows, grid.cols, output)


def _load_grid(args: argparse.Namespace) -> ActivityGrid:
    if args.grid_json is not None:
        return load_grid_json(_within_base(args, args.grid_json))
    return fetch_contributions(args.user, args.year)


def _handle_render(args: argparse.Namespace) -> None:
    output = _within_base(args, args.output)
    frame_log = _within_base(args, args.frame_log) if args.frame_log is not None else None
    filmstrip = _within_base(args, args.filmstrip) if args.filmstrip is not None else None
    config = _scene_config(args)
    assets = AssetConfig()

    grid = _load_grid(args)
    images = AssetLibrary(args.assets_dir, assets).load_all()
    sprites = SceneSprites.from_images(images, assets)

    gif = GifSink(output, frame_duration_ms=config.frame_duration_ms)
    sink: FrameSink = gif
    collector: FrameCollector | None = None
    if filmstrip is not None:
        stride = max(1, (grid.rows * grid.cols) // max(1, args.filmstrip_frames))
        collector = FrameCollector(stride=stride)
        sink = TeeSink(gif, collector)

    run_animation(
        grid,
        sprites,
        sink,
        config=config,
        theme=get_theme(args.theme),
        frame_log_path=frame_log,
    )
    if collector is not None and filmstrip is not None:
        render_filmstrip(
            collector.frames,
            filmstrip,
            n_frames=args.filmstrip_frames,
            steps=collector.steps,
        )
        logger.info("Wrote filmstrip to %s", filmstrip)


def main() -> None:
    """CLI entrypoint with subcommands."""
    parser = argparse.ArgumentParser(
        description="Animate a contribution grid as a snowy traversal GIF"
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)
    _build_fetch_parser(sub)
    _build_render_parser(sub)
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    if args.verbose:
        logging.getLogger("snowtrail").setLevel(logging.DEBUG)

    try:
        args.func(args)
    except SnowtrailError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
