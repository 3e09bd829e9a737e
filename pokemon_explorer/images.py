"""Image load verification used by the fallback chain."""

from __future__ import annotations

import logging
from typing import Optional

import requests
from filetype import guess

from .config import ExplorerSettings

logger = logging.getLogger("pokemon_explorer.images")

MAX_IMAGE_BYTES = 10 * 1024 * 1024
SVG_CONTENT_TYPE = "image/svg+xml"


def is_svg_payload(data: bytes, content_type: Optional[str] = None) -> bool:
    """SVG is text, so filetype has no signature for it."""
    if content_type and content_type.split(";")[0].strip().lower() == SVG_CONTENT_TYPE:
        return True
    head = data[:1024].lstrip().lower()
    return head.startswith(b"<svg") or (head.startswith(b"<?xml") and b"<svg" in head)


def is_image_payload(data: bytes, content_type: Optional[str] = None) -> bool:
    """True when the bytes carry a recognised image signature or are SVG markup."""
    kind = guess(data)
    if kind and kind.mime.startswith("image/"):
        return True
    return is_svg_payload(data, content_type)


class ImageVerifier:
    """Loads a candidate URL and reports whether it produced a usable image.

    Callable so it can be handed straight to ``resolve_image``. Every failure
    mode (transport error, bad status, oversized or non-image body) is a plain
    ``False``; nothing is raised and nothing is cached.
    """

    def __init__(
        self,
        settings: Optional[ExplorerSettings] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.settings = settings or ExplorerSettings()
        self.session = session or requests.Session()

    def __call__(self, url: str) -> bool:
        try:
            resp = self.session.get(url, timeout=self.settings.image_timeout)
            resp.raise_for_status()
        except requests.RequestException as exc:
            logger.debug("Failed to fetch image %s: %s", url, exc)
            return False

        data = resp.content
        if not data:
            logger.debug("Skipping %s: empty response", url)
            return False
        if len(data) > MAX_IMAGE_BYTES:
            logger.debug("Skipping %s: image larger than %s bytes", url, MAX_IMAGE_BYTES)
            return False
        content_type = resp.headers.get("Content-Type", "")
        if not is_image_payload(data, content_type):
            logger.debug("Skipping %s: unsupported image type (Content-Type=%s)", url, content_type)
            return False
        return True
