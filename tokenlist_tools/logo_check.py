"""Logo asset policy for token images.

A token's ``image`` must point at ``images/<chainId>/<checksum>.<ext>`` inside
the repo. The file must be a png/svg/jpg/jpeg under the per-extension size cap.
Raster files must be square. SVG markup must carry no active or
exfiltrating content. Checks run in that order and the first failure raises
LogoPolicyError.
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Optional

from PIL import Image, UnidentifiedImageError

from tokenlist_tools.config import ALLOWED_LOGO_EXTS, LOGO_SIZE_LIMITS, RASTER_LOGO_EXTS
from tokenlist_tools.errors import LogoPolicyError

_LEADING_DOT_SLASH = re.compile(r"^\.?/")

# (pattern, rule description) pairs, checked in order against raw SVG text
SVG_FORBIDDEN = [
    (re.compile(r"<script[\s>/]", re.IGNORECASE), "must not contain <script> tags"),
    (re.compile(r"\bon[a-z]+\s*=", re.IGNORECASE), "must not contain inline event handlers (on* attributes)"),
    (re.compile(r"<(?:animate|animateTransform|animateMotion|set)\b", re.IGNORECASE), "must not be animated"),
    (re.compile(r"data:image/[^;\"'\s]+;base64,", re.IGNORECASE), "must not embed base64 images"),
    (re.compile(r"<image[^>]+(?:xlink:href|href)\s*=\s*[\"']http", re.IGNORECASE),
     "must not load external HTTP(S) images"),
]


def normalize_image_path(image: str) -> str:
    """Strip a leading ``./`` or ``/`` from a repo-relative image path."""
    return _LEADING_DOT_SLASH.sub("", image, count=1)


def expected_logo_path(chain_id: int, checksum: str) -> str:
    exts = "|".join(e.lstrip(".") for e in ALLOWED_LOGO_EXTS)
    return f"images/{chain_id}/{checksum}.<{exts}>"


def check_svg_content(text: str, rel: str):
    for pattern, rule in SVG_FORBIDDEN:
        if pattern.search(text):
            raise LogoPolicyError(f"SVG logo {rel} {rule}")


def read_dimensions(path: Path) -> tuple[int, int]:
    with Image.open(path) as img:
        return img.size


def check_logo(
    image: str,
    chain_id: int,
    checksum: str,
    symbol: str,
    root: Path,
    size_limits: Optional[dict[str, int]] = None,
):
    """Validate one token's logo. Raises LogoPolicyError on the first failed rule."""
    limits = size_limits or LOGO_SIZE_LIMITS
    rel = normalize_image_path(image)
    expected = expected_logo_path(chain_id, checksum)

    expected_dir = f"images/{chain_id}/"
    if not rel.startswith(expected_dir):
        raise LogoPolicyError(
            f"Logo for {symbol} (chain {chain_id}) must live in '{expected_dir}', "
            f"expected {expected} (got '{image}')"
        )

    stem, ext = os.path.splitext(os.path.basename(rel))
    ext = ext.lower()
    if ext not in ALLOWED_LOGO_EXTS:
        raise LogoPolicyError(
            f"Logo for {symbol} (chain {chain_id}) must be one of: {', '.join(ALLOWED_LOGO_EXTS)} "
            f"(got '{ext or '<none>'}'), expected {expected}"
        )

    if stem.lower() != checksum.lower():
        raise LogoPolicyError(
            f"Logo file name for {symbol} (chain {chain_id}) must match checksummed address, "
            f"expected {expected} (got '{rel}')"
        )

    local_path = root / rel
    if not local_path.resolve().is_relative_to((root / expected_dir).resolve()):
        raise LogoPolicyError(
            f"Logo for {symbol} (chain {chain_id}) resolves outside '{expected_dir}', "
            f"expected {expected} (got '{image}')"
        )
    try:
        size = local_path.stat().st_size
    except OSError:
        raise LogoPolicyError(f"Logo file for {symbol} (chain {chain_id}) not found: {rel}") from None
    if not local_path.is_file() or not os.access(local_path, os.R_OK):
        raise LogoPolicyError(f"Logo file for {symbol} (chain {chain_id}) is not a readable file: {rel}")

    limit = limits[ext.lstrip(".")]
    if size > limit:
        raise LogoPolicyError(f"Logo {rel} exceeds {round(limit / 1024)} KiB ({size} bytes)")

    if ext in RASTER_LOGO_EXTS:
        try:
            width, height = read_dimensions(local_path)
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
            raise LogoPolicyError(f"Could not read dimensions for logo {rel}: {e}") from e
        if not width or not height:
            raise LogoPolicyError(f"Could not read dimensions for logo {rel}")
        if width != height:
            raise LogoPolicyError(f"Logo {rel} must be square (got {width}x{height})")
    else:
        try:
            text = local_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise LogoPolicyError(f"SVG logo {rel} is not valid UTF-8 text: {e}") from e
        check_svg_content(text, rel)
