"""Repository layout and tunables, read from ``tokenlist.yaml`` at the repo root.

Every key in the YAML file is optional; anything missing falls back to the
defaults below. The file itself is optional too.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from tokenlist_tools.errors import ConfigError

# ─── Constants ──────────────────────────────────────────────────────────────

CONFIG_FILENAME = "tokenlist.yaml"
DEFAULT_LIST_PATH = "data/tokenlist.json"
DEFAULT_SCHEMA_PATH = "schema/tokenlist.schema.json"
DEFAULT_IMAGES_DIR = "images"
DEFAULT_DIST_DIR = "dist"
DIST_LIST_FILENAME = "tokenlist.json"

ALLOWED_LOGO_EXTS = (".png", ".svg", ".jpg", ".jpeg")
RASTER_LOGO_EXTS = (".png", ".jpg", ".jpeg")
LOGO_SIZE_LIMITS = {
    "png": 50 * 1024,
    "svg": 25 * 1024,
    "jpg": 35 * 1024,
    "jpeg": 35 * 1024,
}

DEFAULT_CDN_PACKAGE = "token-list"
DEFAULT_CDN_VERSION = "latest"


@dataclass
class Config:
    root: Path
    list_path: str = DEFAULT_LIST_PATH
    schema_path: str = DEFAULT_SCHEMA_PATH
    images_dir: str = DEFAULT_IMAGES_DIR
    dist_dir: str = DEFAULT_DIST_DIR
    dist_list_filename: str = DIST_LIST_FILENAME
    logo_max_bytes: dict[str, int] = field(default_factory=lambda: dict(LOGO_SIZE_LIMITS))
    cdn_package_name: str = DEFAULT_CDN_PACKAGE
    cdn_version: str = DEFAULT_CDN_VERSION

    def resolve(self, rel: str) -> Path:
        """Resolve a repo-relative path (absolute paths pass through)."""
        p = Path(rel)
        return p if p.is_absolute() else self.root / p

    @property
    def list_file(self) -> Path:
        return self.resolve(self.list_path)

    @property
    def schema_file(self) -> Path:
        return self.resolve(self.schema_path)

    @property
    def images_path(self) -> Path:
        return self.resolve(self.images_dir)

    @property
    def dist_path(self) -> Path:
        return self.resolve(self.dist_dir)


def find_repo_root(start: Path) -> Path:
    """Find the token list repo root by walking parents.

    Repo root is the first folder containing either:
      - tokenlist.yaml
      - schema/tokenlist.schema.json
    """
    cur = start.resolve()
    for _ in range(8):
        if (cur / CONFIG_FILENAME).is_file() or (cur / DEFAULT_SCHEMA_PATH).is_file():
            return cur
        if cur.parent == cur:
            break
        cur = cur.parent
    raise ConfigError(
        f"Could not find token list repo root from {start}. Run from the repo "
        f"(contains {CONFIG_FILENAME} or {DEFAULT_SCHEMA_PATH}), or pass --root."
    )


def _section(raw: dict, name: str) -> dict:
    value = raw.get(name) or {}
    if not isinstance(value, dict):
        raise ConfigError(f"{CONFIG_FILENAME}: '{name}' must be a mapping, got {type(value).__name__}")
    return value


def load_config(root: Path) -> Config:
    """Build a Config for ``root``, overlaying tokenlist.yaml when present."""
    root = Path(root).resolve()
    cfg = Config(root=root)
    path = root / CONFIG_FILENAME
    if not path.exists():
        return cfg

    with open(path, encoding="utf-8") as f:
        try:
            raw = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"{path}: invalid YAML: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigError(f"{path}: top level must be a mapping")

    paths = _section(raw, "paths")
    cfg.list_path = str(paths.get("list", cfg.list_path))
    cfg.schema_path = str(paths.get("schema", cfg.schema_path))
    cfg.images_dir = str(paths.get("images", cfg.images_dir))
    cfg.dist_dir = str(paths.get("dist", cfg.dist_dir))

    dist = _section(raw, "dist")
    cfg.dist_list_filename = str(dist.get("list_filename", cfg.dist_list_filename))

    logos = _section(raw, "logos")
    for ext, limit in (logos.get("max_bytes") or {}).items():
        key = str(ext).lower().lstrip(".")
        if key not in LOGO_SIZE_LIMITS:
            raise ConfigError(
                f"{CONFIG_FILENAME}: logos.max_bytes has unknown extension '{ext}' "
                f"(allowed: {', '.join(LOGO_SIZE_LIMITS)})"
            )
        if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
            raise ConfigError(f"{CONFIG_FILENAME}: logos.max_bytes.{key} must be a positive integer")
        cfg.logo_max_bytes[key] = limit

    cdn = _section(raw, "cdn")
    cfg.cdn_package_name = str(cdn.get("package_name", cfg.cdn_package_name))
    cfg.cdn_version = str(cdn.get("version", cfg.cdn_version))
    return cfg


def config_from_args(root_arg: Optional[str]) -> Config:
    """Resolve the repo root from a --root argument (or the CWD) and load its config."""
    root = Path(root_arg).resolve() if root_arg else find_repo_root(Path.cwd())
    return load_config(root)
