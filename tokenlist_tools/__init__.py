"""Validation, packaging and lookup tools for a curated token list."""

from tokenlist_tools.models import (
    Attribute,
    License,
    NumberValue,
    Source,
    SourceType,
    TagDefinition,
    TextValue,
    TokenInfo,
    TokenListFile,
    Verification,
    Version,
    load_token_list,
)
from tokenlist_tools.sdk import (
    get_logo_uri,
    get_token_by_address,
    get_token_by_symbol,
    get_tokens_by_chain,
    get_tokens_by_tag,
)

__version__ = "0.1.0"
