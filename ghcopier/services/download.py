"""
Local filesystem writes for materialized content.
"""

from pathlib import Path

from ..infrastructure.error_handler import handle_filesystem_error
from ..infrastructure.logger import logger


class DownloadService:
    """Creates directories and writes file bytes, wrapping OS errors."""

    @staticmethod
    @handle_filesystem_error("create directory")
    def ensure_directory(path: Path) -> bool:
        """
        Create ``path`` and any missing parents.

        Returns:
            True if the directory did not exist before
        """

        if path.is_dir():
            return False
        path.mkdir(parents=True, exist_ok=True)
        logger.debug(f"Created directory {path}")
        return True

    @staticmethod
    @handle_filesystem_error("write")
    def save_content(path: Path, content: bytes) -> int:
        """
        Write ``content`` to ``path`` verbatim, replacing any existing file.

        Parent directories are created as needed.

        Returns:
            Number of bytes written
        """

        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
        logger.debug(f"Wrote {len(content)} bytes to {path}")
        return len(content)


__all__ = ["DownloadService"]
