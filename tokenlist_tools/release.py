#!/usr/bin/env python3
"""Pre-publish gate: validate the token list, then build dist/ only if it passes.

This script is meant to become CI.
Exit codes: 0 built, 1 validation failed (dist/ untouched), 2 input unreadable.
"""

from __future__ import annotations

import argparse
import json
import sys

from jsonschema import SchemaError

from tokenlist_tools.build_dist import build_dist
from tokenlist_tools.config import config_from_args
from tokenlist_tools.errors import ConfigError
from tokenlist_tools.report import error_line, info
from tokenlist_tools.validate_list import run_validation


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Validate the token list and build the distribution tree.")
    parser.add_argument("--root", help="Repo root (default: discovered from the current directory)")
    args = parser.parse_args(argv)

    try:
        config = config_from_args(args.root)
    except ConfigError as e:
        error_line(str(e))
        return 2

    info(f"\n=== VALIDATE: {config.list_file} ===")
    try:
        result = run_validation(config.list_file, config)
    except (OSError, json.JSONDecodeError, SchemaError) as e:
        error_line(f"Cannot load token list or schema: {e}")
        return 2

    if not result.print_summary():
        error_line("Validation failed; dist/ was not rebuilt")
        return 1

    info(f"\n=== BUILD: {config.dist_path} ===")
    build_dist(config)
    info("✓ Release artifacts ready")
    return 0


if __name__ == "__main__":
    sys.exit(main())
