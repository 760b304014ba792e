#!/usr/bin/env python3
"""
Build step: read every template in the shapes directory and write the catalogue artifact
(shapegen/data/catalogue.json) that the renderer loads at startup.
Usage:
  python scripts/build_catalogue.py
  python scripts/build_catalogue.py --source shapes --output shapegen/data/catalogue.json
  python scripts/build_catalogue.py --dry-run -v
"""
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import argparse
import logging

from shapegen.catalogue import build_catalogue, list_template_files, write_catalogue
from shapegen.catalogue.store import Catalogue
from shapegen.config import get_catalogue_paths, load_config
from shapegen.errors import CatalogueBuildError, ShapegenError


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Generate the shape catalogue from a directory of SVG templates."
    )
    parser.add_argument(
        "--source",
        "-s",
        type=Path,
        default=None,
        help="Template directory (default: catalogue.source_dir from config).",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Catalogue JSON path (default: catalogue.output from config).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Config YAML (default: config/default.yaml).",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="List the templates and their ids; do not write anything.",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Debug logging.",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)
    source_dir, output_path, extension = get_catalogue_paths(config)
    source_dir = args.source or source_dir
    output_path = args.output or output_path

    try:
        if args.dry_run:
            files = list_template_files(source_dir, extension)
            print(f"Would write {len(files)} templates to {output_path}")
            for i, path in enumerate(files):
                print(f"  {i + 1}: {path.name}")
            return 0

        mapping = build_catalogue(source_dir, extension)
        # Parse everything before writing so a malformed template never reaches the artifact
        Catalogue.from_texts(mapping)
        write_catalogue(mapping, output_path, source=source_dir.name)
    except CatalogueBuildError as e:
        print(f"Error: catalogue build failed: {e}", file=sys.stderr)
        return 1
    except ShapegenError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Catalogue: {len(mapping)} templates -> {output_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
