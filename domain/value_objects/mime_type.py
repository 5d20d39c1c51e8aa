from __future__ import annotations

from enum import Enum

OCTET_STREAM = "application/octet-stream"


class ImageMimeType(str, Enum):
    """Represent the image MIME types the gateway can label."""

    WEBP = "image/webp"
    JPEG = "image/jpeg"
    PNG = "image/png"
    GIF = "image/gif"
    SVG = "image/svg+xml"
    ICO = "image/x-icon"

    @classmethod
    def from_key(cls, key: str) -> ImageMimeType | None:
        """Guess the MIME type from the text after the last dot in ``key``.

        A key without a dot is looked up as a whole, so it only matches if the
        entire key happens to be a known extension.
        """
        extension = key.rsplit(".", 1)[-1].lower()
        return _EXTENSIONS.get(extension)


_EXTENSIONS: dict[str, ImageMimeType] = {
    "webp": ImageMimeType.WEBP,
    "jpg": ImageMimeType.JPEG,
    "jpeg": ImageMimeType.JPEG,
    "png": ImageMimeType.PNG,
    "gif": ImageMimeType.GIF,
    "svg": ImageMimeType.SVG,
    "ico": ImageMimeType.ICO,
}


def content_type_for(key: str) -> str:
    mime_type = ImageMimeType.from_key(key)
    return mime_type.value if mime_type else OCTET_STREAM
