"""Domain exceptions for image lookup failures."""


class DomainError(Exception):
    """Base exception for domain layer."""


class BlobNotFoundError(DomainError):
    """Raised when a key is absent from the blob store."""


class InfrastructureError(DomainError):
    """Raised when infrastructure operations fail (storage, network, etc.)."""
