"""Filesystem blob store serving uploads through Streamlit static files."""

from pathlib import Path, PurePosixPath

from src.application.ports.blob_store import BlobStorePort
from src.domain.errors import TransientError, ValidationError
from src.infrastructure.logging.logger import get_app_logger


class FileSystemBlobStore(BlobStorePort):
    """Write blobs under a root directory published at ``base_url``."""

    def __init__(self, root_dir: Path, base_url: str, logger=None) -> None:
        """Initialize the store.

        Args:
            root_dir: Directory receiving the files.
            base_url: Public URL prefix mapped to ``root_dir``.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._root_dir = Path(root_dir)
        self._base_url = base_url.rstrip("/")
        self._logger = logger or get_app_logger()

    def upload(self, path: str, content: bytes) -> str:
        """Write ``content`` to ``path`` and return its public URL.

        Raises:
            ValidationError: If ``path`` escapes the root directory.
            TransientError: If the file cannot be written.
        """
        relative = PurePosixPath(path)
        if relative.is_absolute() or ".." in relative.parts:
            raise ValidationError(f"Invalid blob path: {path}")
        target = self._root_dir.joinpath(*relative.parts)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(content)
        except OSError as exc:
            self._logger.error(f"Writing blob {path} failed: {exc}")
            raise TransientError(f"Could not store {path}") from exc
        return f"{self._base_url}/{relative.as_posix()}"


__all__ = ["FileSystemBlobStore"]
