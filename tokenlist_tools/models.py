"""Typed model of the token list document.

The JSON schema (schema/tokenlist.schema.json) is the structural contract;
these dataclasses are the in-memory view used by the accessor helpers. Every
class round-trips through ``from_dict`` / ``to_dict`` and omits optional
fields that were absent in the source JSON.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Optional, Union

# Free-form extension values: str | int | float | bool | None | list | dict
JSONValue = Any


# ---------------------------------------------------------------------------
# Attribute values (tagged variant)
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TextValue:
    value: str
    kind: ClassVar[str] = "string"


@dataclass(frozen=True)
class NumberValue:
    value: Union[int, float]
    kind: ClassVar[str] = "number"


AttributeValue = Union[TextValue, NumberValue]


def attribute_value_from_json(raw: JSONValue) -> AttributeValue:
    if isinstance(raw, str):
        return TextValue(raw)
    # bool is an int subclass; JSON true/false is not a number here
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return NumberValue(raw)
    raise ValueError(f"attribute value must be a string or number, got {raw!r}")


def _drop_none(d: dict) -> dict:
    return {k: v for k, v in d.items() if v is not None}


# ---------------------------------------------------------------------------
# Token entry
# ---------------------------------------------------------------------------

@dataclass
class Attribute:
    value: AttributeValue
    trait_type: Optional[str] = None
    display_type: Optional[str] = None

    @classmethod
    def from_dict(cls, d: dict) -> "Attribute":
        return cls(
            value=attribute_value_from_json(d["value"]),
            trait_type=d.get("trait_type"),
            display_type=d.get("display_type"),
        )

    def to_dict(self) -> dict:
        return _drop_none({
            "trait_type": self.trait_type,
            "value": self.value.value,
            "display_type": self.display_type,
        })


@dataclass
class TokenInfo:
    address: str
    chain_id: int
    symbol: str
    decimals: int
    name: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    external_url: Optional[str] = None
    attributes: Optional[list[Attribute]] = None
    background_color: Optional[str] = None
    animation_url: Optional[str] = None
    youtube_url: Optional[str] = None
    extensions: Optional[dict[str, JSONValue]] = None
    tags: Optional[list[str]] = None
    logo_uri: Optional[str] = None
    total_supply: Optional[str] = None

    @classmethod
    def from_dict(cls, d: dict) -> "TokenInfo":
        attrs = d.get("attributes")
        return cls(
            address=d["address"],
            chain_id=d["chainId"],
            symbol=d["symbol"],
            decimals=d["decimals"],
            name=d.get("name"),
            description=d.get("description"),
            image=d.get("image"),
            external_url=d.get("external_url"),
            attributes=[Attribute.from_dict(a) for a in attrs] if attrs is not None else None,
            background_color=d.get("background_color"),
            animation_url=d.get("animation_url"),
            youtube_url=d.get("youtube_url"),
            extensions=d.get("extensions"),
            tags=list(d["tags"]) if d.get("tags") is not None else None,
            logo_uri=d.get("logoURI"),
            total_supply=d.get("totalSupply"),
        )

    def to_dict(self) -> dict:
        return _drop_none({
            "address": self.address,
            "chainId": self.chain_id,
            "symbol": self.symbol,
            "decimals": self.decimals,
            "name": self.name,
            "description": self.description,
            "image": self.image,
            "external_url": self.external_url,
            "attributes": [a.to_dict() for a in self.attributes] if self.attributes is not None else None,
            "background_color": self.background_color,
            "animation_url": self.animation_url,
            "youtube_url": self.youtube_url,
            "extensions": self.extensions,
            "tags": self.tags,
            "logoURI": self.logo_uri,
            "totalSupply": self.total_supply,
        })


# ---------------------------------------------------------------------------
# Root document metadata
# ---------------------------------------------------------------------------

class SourceType(str, Enum):
    COINGECKO = "coingecko"
    CMC = "cmc"
    PROJECT = "project"
    EXPLORER = "explorer"
    MANUAL = "manual"
    OTHER = "other"


@dataclass
class TagDefinition:
    name: str
    description: Optional[str] = None

    @classmethod
    def from_dict(cls, d: dict) -> "TagDefinition":
        return cls(name=d["name"], description=d.get("description"))

    def to_dict(self) -> dict:
        return _drop_none({"name": self.name, "description": self.description})


@dataclass
class License:
    name: str
    url: Optional[str] = None

    @classmethod
    def from_dict(cls, d: dict) -> "License":
        return cls(name=d["name"], url=d.get("url"))

    def to_dict(self) -> dict:
        return _drop_none({"name": self.name, "url": self.url})


@dataclass
class Source:
    name: str
    url: Optional[str] = None
    type: Optional[SourceType] = None
    extra: dict[str, JSONValue] = field(default_factory=dict)

    KNOWN_KEYS: ClassVar[tuple[str, ...]] = ("name", "url", "type")

    @classmethod
    def from_dict(cls, d: dict) -> "Source":
        return cls(
            name=d["name"],
            url=d.get("url"),
            type=SourceType(d["type"]) if d.get("type") is not None else None,
            extra={k: v for k, v in d.items() if k not in cls.KNOWN_KEYS},
        )

    def to_dict(self) -> dict:
        out = _drop_none({
            "name": self.name,
            "url": self.url,
            "type": self.type.value if self.type else None,
        })
        out.update(self.extra)
        return out


@dataclass
class Verification:
    policy: Optional[str] = None
    last_audit: Optional[str] = None
    auditor: Optional[str] = None
    extra: dict[str, JSONValue] = field(default_factory=dict)

    KNOWN_KEYS: ClassVar[tuple[str, ...]] = ("policy", "lastAudit", "auditor")

    @classmethod
    def from_dict(cls, d: dict) -> "Verification":
        return cls(
            policy=d.get("policy"),
            last_audit=d.get("lastAudit"),
            auditor=d.get("auditor"),
            extra={k: v for k, v in d.items() if k not in cls.KNOWN_KEYS},
        )

    def to_dict(self) -> dict:
        out = _drop_none({
            "policy": self.policy,
            "lastAudit": self.last_audit,
            "auditor": self.auditor,
        })
        out.update(self.extra)
        return out


@dataclass
class Version:
    major: int
    minor: int
    patch: int

    @classmethod
    def from_dict(cls, d: dict) -> "Version":
        return cls(major=d["major"], minor=d["minor"], patch=d["patch"])

    def to_dict(self) -> dict:
        return {"major": self.major, "minor": self.minor, "patch": self.patch}

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


@dataclass
class TokenListFile:
    tokens: list[TokenInfo]
    name: Optional[str] = None
    timestamp: Optional[str] = None
    version: Optional[Version] = None
    logo_uri: Optional[str] = None
    keywords: Optional[list[str]] = None
    license: Optional[License] = None
    tags: Optional[dict[str, TagDefinition]] = None
    sources: Optional[list[Source]] = None
    verification: Optional[Verification] = None

    @classmethod
    def from_dict(cls, d: dict) -> "TokenListFile":
        tags = d.get("tags")
        sources = d.get("sources")
        return cls(
            tokens=[TokenInfo.from_dict(t) for t in d["tokens"]],
            name=d.get("name"),
            timestamp=d.get("timestamp"),
            version=Version.from_dict(d["version"]) if d.get("version") is not None else None,
            logo_uri=d.get("logoURI"),
            keywords=list(d["keywords"]) if d.get("keywords") is not None else None,
            license=License.from_dict(d["license"]) if d.get("license") is not None else None,
            tags={k: TagDefinition.from_dict(v) for k, v in tags.items()} if tags is not None else None,
            sources=[Source.from_dict(s) for s in sources] if sources is not None else None,
            verification=Verification.from_dict(d["verification"]) if d.get("verification") is not None else None,
        )

    def to_dict(self) -> dict:
        return _drop_none({
            "name": self.name,
            "timestamp": self.timestamp,
            "version": self.version.to_dict() if self.version is not None else None,
            "logoURI": self.logo_uri,
            "keywords": self.keywords,
            "license": self.license.to_dict() if self.license is not None else None,
            "tags": {k: v.to_dict() for k, v in self.tags.items()} if self.tags is not None else None,
            "sources": [s.to_dict() for s in self.sources] if self.sources is not None else None,
            "verification": self.verification.to_dict() if self.verification is not None else None,
            "tokens": [t.to_dict() for t in self.tokens],
        })


def load_token_list(path) -> TokenListFile:
    with open(path, encoding="utf-8") as f:
        return TokenListFile.from_dict(json.load(f))
