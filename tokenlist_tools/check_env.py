#!/usr/bin/env python3
"""Token list tools environment sanity-check.

Checks:
- Python version (>= 3.11)
- Required dependencies importable (jsonschema, PyYAML, eth-utils, Pillow)
- EIP-55 checksumming works (eth-utils needs an eth-hash backend)
- Repository root discovery (run from anywhere)
"""

from __future__ import annotations

import argparse
import importlib
import platform
import sys
from pathlib import Path

from tokenlist_tools.config import find_repo_root, load_config
from tokenlist_tools.errors import ConfigError

MIN_PY = (3, 11)

REQUIRED_MODULES = [
    ("jsonschema", "jsonschema"),
    ("yaml", "PyYAML"),
    ("eth_utils", "eth-utils"),
    ("PIL", "Pillow"),
]

# Known EIP-55 vector (USDC on Ethereum mainnet)
CHECKSUM_PROBE = "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"


def check_python_version(version_info=None) -> list[str]:
    vi = version_info or sys.version_info
    issues: list[str] = []
    if tuple(vi[:2]) < MIN_PY:
        issues.append(
            f"Python >= {MIN_PY[0]}.{MIN_PY[1]} required; found {vi[0]}.{vi[1]}."
        )
    return issues


def check_import(module: str, pip_name: str) -> tuple[bool, str | None]:
    try:
        importlib.import_module(module)
        return True, None
    except ImportError as e:
        return False, f"Missing module '{module}'. Install '{pip_name}' (pip install -e .). ({e})"


def check_checksum_backend() -> str | None:
    try:
        from eth_utils import to_checksum_address

        if to_checksum_address(CHECKSUM_PROBE.lower()) != CHECKSUM_PROBE:
            return "eth-utils returned an unexpected EIP-55 checksum."
    except Exception as e:
        return f"EIP-55 checksumming unavailable (install 'eth-hash[pycryptodome]'): {e}"
    return None


def collect_issues(root_arg: str | None = None) -> tuple[list[str], Path | None]:
    issues: list[str] = []
    issues.extend(check_python_version())

    missing = False
    for mod, pip_name in REQUIRED_MODULES:
        ok, msg = check_import(mod, pip_name)
        if not ok and msg:
            issues.append(msg)
            missing = missing or mod == "eth_utils"
    if not missing:
        msg = check_checksum_backend()
        if msg:
            issues.append(msg)

    repo = None
    try:
        repo = Path(root_arg).resolve() if root_arg else find_repo_root(Path.cwd())
        cfg = load_config(repo)
        if not cfg.schema_file.is_file():
            issues.append(f"Schema file not found: {cfg.schema_file}")
    except ConfigError as e:
        issues.append(str(e))
    return issues, repo


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Check the token list tooling environment.")
    ap.add_argument("--root", default=None, help="Path to the token list repo root")
    args = ap.parse_args(argv)

    issues, repo = collect_issues(args.root)

    print("Token list environment check")
    print("-" * 72)
    print(f"Repo root: {repo or '<not found>'}")
    print(f"Python: {sys.executable}")
    print(f"Python version: {sys.version.splitlines()[0]}")
    print(f"OS: {platform.system()} {platform.release()}")

    print("\nResult:")
    if issues:
        print("ENV CHECK: FAIL")
        for i in issues:
            print(f"- {i}")
        print("\nFix:")
        print("  python -m venv .venv")
        if platform.system().lower().startswith("win"):
            print("  .\\.venv\\Scripts\\Activate.ps1")
        else:
            print("  source .venv/bin/activate")
        print("  python -m pip install -e '.[test]'")
        return 2

    print("ENV CHECK: PASS")
    print("Next:")
    print("  tokenlist-release")
    return 0


if __name__ == "__main__":
    sys.exit(main())
