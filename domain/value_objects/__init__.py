from .mime_type import OCTET_STREAM, ImageMimeType, content_type_for

__all__ = ["OCTET_STREAM", "ImageMimeType", "content_type_for"]
