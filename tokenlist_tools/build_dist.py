#!/usr/bin/env python3
"""Assemble the distribution tree.

Produces (under paths.dist, default ``dist/``):
  - tokenlist.json                 byte copy of the curated list
  - schema/tokenlist.schema.json   the JSON schema only
  - images/...                     recursive copy of the image directory, if any

The output directory is removed first, so repeated builds are identical.
Nothing is validated here; run tokenlist-validate (or tokenlist-release) first.

Usage:
  tokenlist-build [--root DIR]
"""

from __future__ import annotations

import argparse
import shutil
import sys
from pathlib import Path

from tokenlist_tools.config import Config, config_from_args
from tokenlist_tools.report import info, warn


def copy_file(src: Path, dst: Path):
    dst.parent.mkdir(parents=True, exist_ok=True)
    shutil.copy2(src, dst)


def build_dist(config: Config) -> Path:
    """Rebuild the distribution tree for ``config`` and return its path.

    I/O failures (missing list or schema, permissions) propagate.
    """
    dist = config.dist_path
    if dist.resolve() == config.root.resolve():
        raise ValueError(f"Refusing to use the repo root as the dist directory: {dist}")

    if dist.exists():
        shutil.rmtree(dist)
    dist.mkdir(parents=True)

    copy_file(config.list_file, dist / config.dist_list_filename)

    schema_dir = dist / "schema"
    copy_file(config.schema_file, schema_dir / config.schema_file.name)

    images = config.images_path
    if images.is_dir():
        shutil.copytree(images, dist / "images")
    else:
        warn(f"No images directory found at {images}, skipping.")

    return dist


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Build the token list distribution tree.")
    parser.add_argument("--root", help="Repo root (default: discovered from the current directory)")
    args = parser.parse_args(argv)

    config = config_from_args(args.root)
    dist = build_dist(config)
    info(f"✓ Build completed: {dist}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
