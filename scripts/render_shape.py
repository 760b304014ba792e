#!/usr/bin/env python3
"""
CLI: render shapes from the catalogue and print the markup.
Usage:
  python scripts/render_shape.py                       # one random shape
  python scripts/render_shape.py --id 3 --color red --size 24
  python scripts/render_shape.py --gradient --start red --stop yellow
  python scripts/render_shape.py --all --seed 7 > shapes.html
"""
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import argparse
import logging

from shapegen.catalogue import load_catalogue
from shapegen.config import load_config
from shapegen.errors import ShapegenError
from shapegen.renderer import Renderer


def main() -> int:
    parser = argparse.ArgumentParser(description="Render catalogue shapes as SVG markup.")
    which = parser.add_mutually_exclusive_group()
    which.add_argument("--id", type=str, default=None, help="Catalogue id (1-based).")
    which.add_argument("--all", action="store_true", help="Render every shape, one per line.")
    parser.add_argument("--color", type=str, default=None, help="Fill color (e.g. red, #ff0000).")
    parser.add_argument("--size", type=float, default=None, help="Width and height (default: 16).")
    parser.add_argument("--gradient", action="store_true", default=None, help="Fill with a gradient.")
    parser.add_argument("--start", type=str, default=None, help="Gradient start color.")
    parser.add_argument("--stop", type=str, default=None, help="Gradient stop color.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for random picks.")
    parser.add_argument("--catalogue", type=Path, default=None, help="Catalogue JSON (default: packaged).")
    parser.add_argument("--config", type=Path, default=None, help="Config YAML (default: config/default.yaml).")
    args = parser.parse_args()

    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    options = {
        "color": args.color,
        "size": args.size,
        "gradient": args.gradient,
        "gradient_start_color": args.start,
        "gradient_stop_color": args.stop,
    }
    try:
        renderer = Renderer(
            load_catalogue(args.catalogue),
            seed=args.seed,
            config=load_config(args.config),
        )
        if args.all:
            for markup in renderer.render_all(options):
                print(markup)
        elif args.id is not None:
            print(renderer.render_by_id(options, id=args.id))
        else:
            print(renderer.render_random(options))
    except ShapegenError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
