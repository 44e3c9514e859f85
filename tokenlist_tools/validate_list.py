#!/usr/bin/env python3
"""Validate the token list against the JSON schema and the domain rules.

Checks:
  1. Schema compliance (all structural errors reported together)
  2. Per token, in document order, stopping at the token's first failure:
     a. chainId is a positive integer
     b. address is a valid hex address equal to its EIP-55 checksum form
     c. (chainId, address) not seen on an earlier token
     d. (chainId, SYMBOL) not seen on an earlier token (case-insensitive)
     e. every tag id is declared under the top-level 'tags'
     f. logo policy (see logo_check.py), when 'image' is set

Domain checks only run on a structurally valid document. Every token is
checked and all violations are reported; any violation fails the run.

Usage:
  tokenlist-validate                          # checks data/tokenlist.json
  tokenlist-validate some/file.json [--report report.json]
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Optional

from eth_utils import is_hex_address, to_checksum_address
from jsonschema import SchemaError

from tokenlist_tools.config import Config, config_from_args
from tokenlist_tools.errors import ConfigError, DomainRuleError
from tokenlist_tools.logo_check import check_logo
from tokenlist_tools.report import ValidationResult, error_line, info
from tokenlist_tools.validate_schema import load_schema, validate_structure


def checksum_address(address, label: str, chain_id: int) -> str:
    """Return the EIP-55 form of ``address``; it must already be in that form."""
    if not isinstance(address, str) or not address.startswith("0x") or not is_hex_address(address):
        raise DomainRuleError(f"Invalid address for {label} on chain {chain_id}: {address!r}")
    checksum = to_checksum_address(address)
    if address != checksum:
        raise DomainRuleError(
            f"Address not checksummed for {label} on chain {chain_id}: {address} (expected {checksum})"
        )
    return checksum


class ValidationContext:
    """State for a single validation run.

    The duplicate sets grow in document order, so the earlier of two clashing
    tokens is accepted and the later one is reported.
    """

    def __init__(self, root: Path, tags: Optional[dict] = None, size_limits: Optional[dict[str, int]] = None):
        self.root = Path(root)
        self.allowed_tags = set(tags or {})
        self.size_limits = size_limits
        self.seen_contracts: set[str] = set()  # "<chainId>:<checksum>"
        self.seen_symbols: set[str] = set()    # "<chainId>:<SYMBOL>"

    def check_token(self, token: dict):
        """Run the rule chain for one token. Raises DomainRuleError on the first failure."""
        chain_id = token.get("chainId")
        label = token.get("symbol") or token.get("address") or "<unnamed token>"

        if isinstance(chain_id, bool) or not isinstance(chain_id, int) or chain_id <= 0:
            raise DomainRuleError(f"Invalid chainId for {label}: {chain_id!r}")

        checksum = checksum_address(token.get("address"), label, chain_id)

        addr_key = f"{chain_id}:{checksum}"
        if addr_key in self.seen_contracts:
            raise DomainRuleError(f"Duplicate contract: {addr_key} ({label})")
        self.seen_contracts.add(addr_key)

        sym = str(token.get("symbol", "")).upper()
        sym_key = f"{chain_id}:{sym}"
        if sym_key in self.seen_symbols:
            raise DomainRuleError(f"Duplicate symbol '{sym}' on chain {chain_id} ({sym_key}, address {checksum})")
        self.seen_symbols.add(sym_key)

        for tag_id in token.get("tags") or []:
            if tag_id not in self.allowed_tags:
                raise DomainRuleError(
                    f"Unknown tag '{tag_id}' on token {sym} (chain {chain_id}). "
                    f"Define it under top-level 'tags' in the token list."
                )

        image = token.get("image")
        if image:
            check_logo(image, chain_id, checksum, sym, self.root, self.size_limits)


def validate_domain(data: dict, ctx: ValidationContext, result: ValidationResult):
    """Check every token's rule chain, recording one error per failing token."""
    for token in data.get("tokens", []):
        try:
            ctx.check_token(token)
        except DomainRuleError as e:
            result.error(str(e))
            continue
        if not token.get("image") and not token.get("logoURI"):
            result.warn(f"Token {token.get('symbol')} (chain {token.get('chainId')}) has no logo (no image or logoURI)")


def validate_document(data, schema: dict, config: Config, result: Optional[ValidationResult] = None) -> ValidationResult:
    """Structural pass, then (only if clean) the domain pass."""
    if result is None:
        result = ValidationResult()
    if isinstance(data, dict) and isinstance(data.get("tokens"), list):
        result.token_count = len(data["tokens"])

    violations = validate_structure(data, schema)
    if violations:
        for v in violations:
            result.error(f"Schema: {v}")
        return result

    ctx = ValidationContext(config.root, data.get("tags"), config.logo_max_bytes)
    validate_domain(data, ctx, result)
    return result


def run_validation(list_path: Path, config: Config) -> ValidationResult:
    """Load the list and schema from disk and validate.

    I/O and JSON parse errors propagate to the caller.
    """
    with open(list_path, encoding="utf-8") as f:
        data = json.load(f)
    schema = load_schema(config.schema_file)
    return validate_document(data, schema, config)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Validate the token list (schema + domain rules).")
    parser.add_argument("path", nargs="?", help="Token list JSON (default: paths.list from tokenlist.yaml)")
    parser.add_argument("--root", help="Repo root (default: discovered from the current directory)")
    parser.add_argument("--report", help="Write validation report JSON to this path")
    args = parser.parse_args(argv)

    try:
        config = config_from_args(args.root)
    except ConfigError as e:
        error_line(str(e))
        return 2

    list_path = Path(args.path).resolve() if args.path else config.list_file
    info(f"Validating: {list_path}")

    loaded = {}
    for label, path in (("token list", list_path), ("schema", config.schema_file)):
        try:
            with open(path, encoding="utf-8") as f:
                loaded[label] = json.load(f)
        except json.JSONDecodeError as e:
            error_line(f"Malformed JSON in {label} {path}: {e}")
            return 2
        except OSError as e:
            error_line(f"Cannot read {label} {path}: {e}")
            return 2

    try:
        result = validate_document(loaded["token list"], loaded["schema"], config)
    except SchemaError as e:
        error_line(f"Invalid JSON schema {config.schema_file}: {e.message}")
        return 2

    result.print_summary()

    if args.report:
        result.write_report(args.report)
        info(f"Report written to {args.report}")

    return 0 if result.ok else 1


if __name__ == "__main__":
    sys.exit(main())
