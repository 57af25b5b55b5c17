"""Port for file uploads."""

from typing import Protocol


class BlobStorePort(Protocol):
    """Port storing files and returning a public URL."""

    def upload(self, path: str, content: bytes) -> str:
        """Store ``content`` under ``path`` and return its public URL."""


__all__ = ["BlobStorePort"]
