"""Exception types raised by the token list tools."""


class TokenListError(Exception):
    """Base class for token list tool errors."""


class ConfigError(TokenListError):
    """tokenlist.yaml is malformed or names unsupported values."""


class DomainRuleError(TokenListError):
    """A token breaks a cross-record rule (chain id, address, symbol, tags)."""


class LogoPolicyError(DomainRuleError):
    """A token's logo breaks the image policy (path, type, size, shape, content)."""
