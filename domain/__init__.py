"""Domain layer exports."""

from domain.exceptions import BlobNotFoundError, DomainError, InfrastructureError
from domain.services.fallback_policy import ImageFallbackPolicy, strip_year_segment
from domain.value_objects import OCTET_STREAM, ImageMimeType, content_type_for

__all__ = [
    "OCTET_STREAM",
    "BlobNotFoundError",
    "DomainError",
    "ImageFallbackPolicy",
    "ImageMimeType",
    "InfrastructureError",
    "content_type_for",
    "strip_year_segment",
]
