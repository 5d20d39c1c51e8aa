"""Domain service deciding which keys to try when an image is missing."""

from __future__ import annotations

import re

# A four digit segment bounded on the left by "/" or the start of the key and
# on the right by "/" or the end of the key.
YEAR_SEGMENT = re.compile(r"(^|/)[0-9]{4}(/|$)")


def strip_year_segment(key: str) -> str | None:
    """Remove the first year-like path segment from ``key``.

    The left delimiter is kept, so ``photos/2023/a.jpg`` becomes
    ``photos/a.jpg`` and ``2023/a.jpg`` becomes ``a.jpg``.

    Returns:
        The rewritten key, or None when ``key`` has no year segment.

    """
    if not YEAR_SEGMENT.search(key):
        return None
    return YEAR_SEGMENT.sub(r"\1", key, count=1)


class ImageFallbackPolicy:
    """Build the ordered list of keys tried for a "with default" lookup.

    The order is significant: the exact key, then its year-stripped variant
    (when one exists), then the named default image, then the global default.
    Duplicates are kept so every attempt is a separate store read.
    """

    def __init__(
        self,
        prefix: str = "def",
        global_default: str = "default",
        extension: str = ".webp",
    ) -> None:
        self.prefix = prefix
        self.global_default = global_default
        self.extension = extension

    def default_key(self, name: str) -> str:
        return f"{self.prefix}/{name}{self.extension}"

    def candidates(self, image_path: str, default_image: str) -> list[str]:
        keys = [image_path]

        stripped = strip_year_segment(image_path)
        if stripped is not None:
            keys.append(stripped)

        keys.append(self.default_key(default_image))
        keys.append(self.default_key(self.global_default))
        return keys
