from __future__ import annotations

import fsspec

from application.ports.blob_store import BlobStore
from domain.exceptions import BlobNotFoundError, InfrastructureError


class FsspecBlobStore(BlobStore):
    """Read-only blob store over any fsspec filesystem (file, memory, s3, ...)."""

    def __init__(self, base_url: str, *, storage_options: dict | None = None) -> None:
        self.base_url = base_url.rstrip("/")
        self.storage_options = storage_options or {}

    def _url(self, key: str) -> str:
        # Keys are otherwise passed through untouched; ".." would escape a file:// bucket.
        if not key or ".." in key.split("/"):
            msg = f"Invalid blob key: {key!r}"
            raise BlobNotFoundError(msg)
        return f"{self.base_url}/{key}"

    def get_bytes(self, key: str) -> bytes:
        url = self._url(key)
        try:
            with fsspec.open(url, "rb", **self.storage_options) as f:
                return f.read()
        except (FileNotFoundError, IsADirectoryError) as e:
            # a directory is only a key prefix, not a blob
            msg = f"No blob stored under {key!r}"
            raise BlobNotFoundError(msg) from e
        except OSError as e:
            msg = f"Failed to read blob {key!r}: {e!s}"
            raise InfrastructureError(msg) from e

