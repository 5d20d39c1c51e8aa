from __future__ import annotations

from typing import Protocol


class BlobStore(Protocol):
    def get_bytes(self, key: str) -> bytes:
        """Return the blob stored under ``key``.

        Raises:
            BlobNotFoundError: If no blob exists under ``key``
            Exception: Any other error reading from the underlying storage

        """
        ...
