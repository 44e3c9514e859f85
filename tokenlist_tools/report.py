"""Console helpers and the validation result collector shared by the CLI tools."""

from __future__ import annotations

import json
import sys
from dataclasses import asdict, dataclass, field


# ─── Console ────────────────────────────────────────────────────────────────

def error_line(msg):
    """Print error to stderr without exiting."""
    print(f"ERROR: {msg}", file=sys.stderr)


def warn(msg):
    """Print warning to stderr."""
    print(f"WARNING: {msg}", file=sys.stderr)


def info(msg):
    """Print info to stdout."""
    print(msg)


# ─── Result collector ───────────────────────────────────────────────────────

@dataclass
class ValidationResult:
    """Violations and warnings from one validation run over a token list.

    Errors fail the run; warnings are reported but never change the exit code.
    """

    token_count: int = 0
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def error(self, msg: str):
        self.errors.append(msg)

    def warn(self, msg: str):
        self.warnings.append(msg)

    @property
    def ok(self) -> bool:
        return not self.errors

    def summary(self) -> str:
        noun = "token" if self.token_count == 1 else "tokens"
        lines = [f"Checked {self.token_count} {noun}"]
        lines += [f"  ✗ {e}" for e in self.errors]
        lines += [f"  ⚠ {w}" for w in self.warnings]
        if self.errors:
            lines.append(f"✗ Token list invalid: {len(self.errors)} errors, {len(self.warnings)} warnings")
        elif self.warnings:
            lines.append(f"✓ No errors ({len(self.warnings)} warnings)")
        else:
            lines.append("✓ Token list valid, all checks passed")
        return "\n".join(lines)

    def print_summary(self) -> bool:
        """Errors go to stderr, a clean pass to stdout. Returns ``ok``."""
        stream = sys.stdout if self.ok else sys.stderr
        print(self.summary(), file=stream)
        return self.ok

    def to_dict(self) -> dict:
        return {"valid": self.ok, **asdict(self)}

    def write_report(self, path: str):
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, ensure_ascii=False, indent=2)
