"""
Python API for copying GitHub files and folders.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from ..core.parser import parse
from ..core.materializer import ContentMaterializer
from ..models import CopierConfig, GitHubReference, MaterializeResult
from ..services import GitHubAPIService, DownloadService
from ..infrastructure.logger import logger


PathLike = Union[str, Path]


class GitHubCopier:
    """
    High-level entry point.

    Example::

        copier = GitHubCopier()
        copier.copy("https://github.com/owner/repo/tree/main/docs")
    """

    def __init__(self, config: Optional[CopierConfig] = None, verbose: bool = False):
        self.config = config or CopierConfig()
        self.download_service = DownloadService()
        self.verbose = verbose
        self.set_verbose(verbose)

    def set_verbose(self, verbose: bool) -> None:
        """Switch package logging between DEBUG and INFO."""

        self.verbose = verbose
        logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    @staticmethod
    def resolve_destination(
        reference: GitHubReference,
        destination: Optional[PathLike] = None
    ) -> Path:
        """
        Work out where ``reference`` should be written.

        Without a destination the reference's own name is used in the current
        directory. Whether a file lands inside an existing directory depends
        on what GitHub serves, so the materializer makes that call.
        """

        if destination is None or str(destination) == "":
            return Path(reference.name)
        return Path(destination)

    def copy(self, url: str, destination: Optional[PathLike] = None) -> MaterializeResult:
        """
        Copy the file or folder behind ``url``.

        Args:
            url: GitHub blob, tree or raw URL
            destination: Optional local path

        Returns:
            MaterializeResult for the finished copy

        Raises:
            CopierError: On any failure; the URL is validated before any request
        """

        reference = parse(url)
        target = self.resolve_destination(reference, destination)
        logger.debug(f"Copying {reference.web_url} to {target}")

        with GitHubAPIService(self.config) as github_service:
            materializer = ContentMaterializer(github_service, self.download_service, self.config)
            return materializer.materialize(reference, target)


__all__ = ["GitHubCopier"]
