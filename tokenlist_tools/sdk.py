"""Lookup helpers over a loaded token list.

All functions are pure: they read a TokenListFile (see models.load_token_list)
and never touch the filesystem or network.
"""

from __future__ import annotations

from typing import Optional

from tokenlist_tools.config import DEFAULT_CDN_PACKAGE, DEFAULT_CDN_VERSION
from tokenlist_tools.models import TokenInfo, TokenListFile

JSDELIVR_NPM_BASE = "https://cdn.jsdelivr.net/npm"


def get_tokens_by_chain(token_list: TokenListFile, chain_id: int) -> list[TokenInfo]:
    """All tokens on ``chain_id``, in list order."""
    return [t for t in token_list.tokens if t.chain_id == chain_id]


def get_token_by_address(token_list: TokenListFile, chain_id: int, address: str) -> Optional[TokenInfo]:
    """Find a token by address (case-insensitive) on a given chain."""
    addr_lower = address.lower()
    for t in token_list.tokens:
        if t.chain_id == chain_id and t.address.lower() == addr_lower:
            return t
    return None


def get_token_by_symbol(token_list: TokenListFile, chain_id: int, symbol: str) -> Optional[TokenInfo]:
    """Find a token by symbol (case-insensitive) on a given chain.

    The validator enforces per-chain uniqueness; the first match is returned.
    """
    sym_upper = symbol.upper()
    for t in token_list.tokens:
        if t.chain_id == chain_id and t.symbol.upper() == sym_upper:
            return t
    return None


def get_tokens_by_tag(token_list: TokenListFile, tag_id: str) -> list[TokenInfo]:
    """Tokens carrying ``tag_id`` (e.g. "stablecoin")."""
    return [t for t in token_list.tokens if t.tags and tag_id in t.tags]


def get_logo_uri(
    token: TokenInfo,
    package_name: str = DEFAULT_CDN_PACKAGE,
    version: str = DEFAULT_CDN_VERSION,
    base_uri_override: Optional[str] = None,
) -> Optional[str]:
    """Resolvable logo URI for ``token``.

    An explicit ``logoURI`` wins. Otherwise the repo-relative ``image`` path
    is joined onto ``base_uri_override`` or, by default, the jsDelivr npm URL
    for ``package_name@version``. Returns None when the token has neither.
    """
    if token.logo_uri:
        return token.logo_uri
    if not token.image:
        return None

    image_path = token.image[1:] if token.image.startswith("/") else token.image

    if base_uri_override:
        return f"{base_uri_override.rstrip('/')}/{image_path}"
    return f"{JSDELIVR_NPM_BASE}/{package_name}@{version}/{image_path}"


def configured_logo_uri(token: TokenInfo, config) -> Optional[str]:
    """get_logo_uri with the CDN package and version from tokenlist.yaml."""
    return get_logo_uri(token, package_name=config.cdn_package_name, version=config.cdn_version)
