"""
Materializer that copies a GitHub file or folder onto the local filesystem,
one request at a time.
"""

from pathlib import Path
from typing import List, Optional

from ..models import (
    ContentEntry, ContentKind, CopierConfig, GitHubReference, MaterializeResult
)
from ..services import GitHubAPIService, DownloadService
from ..infrastructure.error_handler import CopierError, DecodeError, ParseError
from .decoder import ResponseShape, decode_content, read_response
from .endpoints import build_raw_url

from ghcopier.infrastructure.logger import logger


UNSAFE_NAMES = frozenset({"", ".", ".."})


####
##      CONTENT MATERIALIZER
#####
class ContentMaterializer:
    """
    Walks a GitHub reference depth-first and writes what it finds.

    Directory entries are processed in listing order. The first failure
    aborts the whole walk and is re-raised unchanged; whatever was written
    before it stays on disk.
    """

    def __init__(
        self,
        github_service: GitHubAPIService,
        download_service: Optional[DownloadService] = None,
        config: Optional[CopierConfig] = None
    ):
        self.github_service = github_service
        self.download_service = download_service or DownloadService()
        self.config = config or github_service.config

    def materialize(self, reference: GitHubReference, destination: Path) -> MaterializeResult:
        """
        Copy ``reference`` to ``destination``.

        Args:
            reference: File or folder to copy
            destination: Target file path (file) or directory (folder)

        Returns:
            MaterializeResult describing what was written

        Raises:
            CopierError: On the first network, decode, parse or filesystem failure
        """

        logger.debug(f"Materializing {reference.display_name} into {destination}")
        result = MaterializeResult(reference=reference, destination=Path(destination))
        requests_before = self.github_service.requests_made

        try:
            self._materialize(reference, Path(destination), result)
        except CopierError as e:
            logger.error(f"Copy of {reference.display_name} failed: {e}")
            raise
        finally:
            result.requests_made = self.github_service.requests_made - requests_before

        result.mark_completed()
        logger.info(
            f"Downloaded {result.file_count} files ({result.bytes_written} bytes) "
            f"to {destination}"
        )
        return result

    def _materialize(
        self,
        reference: GitHubReference,
        destination: Path,
        result: MaterializeResult
    ) -> None:
        response = self.github_service.get_contents(reference)
        shape, entries = read_response(response.body)

        if shape is ResponseShape.OBJECT:
            entry = entries[0]
            if reference.kind is ContentKind.DIR:
                logger.debug(f"{reference.display_name} is a file, copying it as one")
            if reference == result.reference and destination.is_dir():
                # A file copied onto an existing directory lands inside it
                destination = destination / _entry_name(entry, reference)
                result.destination = destination
            self._write_file(reference, entry, destination, result)
        else:
            if reference.kind is ContentKind.FILE:
                logger.debug(f"{reference.display_name} is a folder, copying it as one")
            self._write_directory(reference, entries, destination, result)

    def _write_directory(
        self,
        reference: GitHubReference,
        entries: List[ContentEntry],
        destination: Path,
        result: MaterializeResult
    ) -> None:
        if self.download_service.ensure_directory(destination):
            result.directories_created.append(destination)

        for entry in entries:
            name = _entry_name(entry, reference)
            target = destination / name

            if entry.entry_type is ContentKind.FILE:
                logger.debug(f"Copying file {entry.path or name}")
                self._write_file(reference.child(name, ContentKind.FILE), entry, target, result)
            elif entry.entry_type is ContentKind.DIR:
                logger.debug(f"Descending into {entry.path or name}")
                self._materialize(reference.child(name, ContentKind.DIR), target, result)
            else:
                skipped = entry.path or name
                logger.warning(f"Skipping {skipped}: unsupported entry type '{entry.raw_type}'")
                result.skipped_entries.append(skipped)

    def _write_file(
        self,
        reference: GitHubReference,
        entry: ContentEntry,
        destination: Path,
        result: MaterializeResult
    ) -> None:
        content = self._file_bytes(reference, entry)
        size = self.download_service.save_content(destination, content)
        result.record_file(destination, size)

    def _file_bytes(self, reference: GitHubReference, entry: ContentEntry) -> bytes:
        """Inline content first, then ``download_url``, then the raw host."""

        if entry.has_inline_content:
            try:
                return decode_content(entry.content)
            except DecodeError as e:
                if not entry.download_url:
                    raise
                logger.warning(
                    f"Inline content of {reference.path} did not decode ({e}), "
                    "fetching download_url instead"
                )

        if entry.download_url:
            return self.github_service.get_raw(entry.download_url)

        raw_url = build_raw_url(reference, reference.path, self.config.raw_base_url)
        return self.github_service.get_raw(raw_url)


def _entry_name(entry: ContentEntry, parent: GitHubReference) -> str:
    name = entry.name
    if name is None:
        raise ParseError(f"Entry without a name in listing of {parent.display_name}")
    if name in UNSAFE_NAMES or "/" in name or "\\" in name:
        raise ParseError(f"Refusing unsafe entry name {name!r} in {parent.display_name}")
    if any(_unwritable(char) for char in name):
        raise ParseError(f"Refusing unwritable entry name {name!r} in {parent.display_name}")
    return name


def _unwritable(char: str) -> bool:
    # NUL and lone surrogates cannot be part of a filesystem path
    return char == "\x00" or "\ud800" <= char <= "\udfff"


__all__ = ["ContentMaterializer"]
