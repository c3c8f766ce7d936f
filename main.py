"""
Sigil sketch runner.

Usage:
    python main.py list
    python main.py run inscribed_square [--fps 60] [--frames N]
    python main.py export inscribed_square out/inscribed_square.gif [--extra 60]

Keys while running:
    - any key: restart the sequence
    - ESC: quit
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from sigil.assets import AssetServer
from sigil.core.application import Application, AppSettings
from sigil.export.gif import DEFAULT_EXTRA_FRAMES, export_gif
from sketches import registry

ASSET_ROOT = Path(".") / "assets"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sigil", description=__doc__.split("\n")[1])
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List available sketches")

    run = sub.add_parser("run", help="Open a window and play a sketch")
    run.add_argument("name")
    run.add_argument("--fps", type=int, default=60)
    run.add_argument(
        "--frames", type=int, default=None, help="Stop after N frames"
    )

    export = sub.add_parser("export", help="Render one loop to an animated GIF")
    export.add_argument("name")
    export.add_argument("out", type=Path)
    export.add_argument("--fps", type=int, default=60)
    export.add_argument("--extra", type=int, default=DEFAULT_EXTRA_FRAMES)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    if args.command == "list":
        for name, sketch_cls in registry.items():
            meta = sketch_cls.meta
            print(f"{name:<20} {meta.title}: {meta.description}")
        return 0

    try:
        sketch_cls = registry.get(args.name)
    except KeyError as e:
        print(e.args[0], file=sys.stderr)
        return 2

    if args.command == "run":
        settings = AppSettings(
            fps=args.fps, asset_root=ASSET_ROOT, max_frames=args.frames
        )
        Application(settings).run(sketch_cls)
        return 0

    assets = AssetServer(asset_root=ASSET_ROOT)
    try:
        export_gif(
            sketch_cls,
            args.out,
            extra_frames=args.extra,
            fps=args.fps,
            assets=assets,
        )
    except ValueError as e:
        print(f"[export] {e}", file=sys.stderr)
        return 1
    finally:
        assets.shutdown()
    return 0


if __name__ == "__main__":
    sys.exit(main())
