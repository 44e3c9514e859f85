"""Structural validation of the token list against its JSON schema.

Every applicable constraint is checked in one pass so a curator sees all
structural problems at once. The schema may carry the ``markdownDescription``
editor annotation; it has no validation meaning and is accepted as a no-op.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from jsonschema import Draft7Validator, FormatChecker, validators

# Annotation keywords that carry documentation only.
ANNOTATION_KEYWORDS = ("markdownDescription",)


def _annotation_only(validator, value, instance, schema):
    return iter(())


TokenListValidator = validators.extend(
    Draft7Validator,
    {kw: _annotation_only for kw in ANNOTATION_KEYWORDS},
)


@dataclass(frozen=True)
class SchemaViolation:
    location: str  # JSON pointer into the document, "" for the root
    message: str

    def __str__(self) -> str:
        return f"{self.location or '/'}: {self.message}"


def load_schema(path) -> dict:
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def _pointer(path) -> str:
    return "".join("/" + str(p).replace("~", "~0").replace("/", "~1") for p in path)


def _sort_key(error):
    # Array indexes sort numerically, object keys lexically.
    path = tuple((0, p, "") if isinstance(p, int) else (1, 0, str(p)) for p in error.absolute_path)
    return path, error.message


def build_validator(schema: dict) -> Draft7Validator:
    """Compile ``schema``; a broken schema raises jsonschema.SchemaError."""
    TokenListValidator.check_schema(schema)
    return TokenListValidator(schema, format_checker=FormatChecker())


def validate_structure(data, schema: dict) -> list[SchemaViolation]:
    """Return every structural violation of ``data``, ordered by document path."""
    validator = build_validator(schema)
    errors = sorted(validator.iter_errors(data), key=_sort_key)
    return [SchemaViolation(_pointer(e.absolute_path), e.message) for e in errors]


def validate_structure_file(list_path: Path, schema_path: Path) -> list[SchemaViolation]:
    with open(list_path, encoding="utf-8") as f:
        data = json.load(f)
    return validate_structure(data, load_schema(schema_path))
