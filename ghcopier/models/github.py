"""
GitHub domain models for ghcopier.

This module contains strongly typed data classes and enums representing
GitHub content references and the entries returned by the contents API.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional
from urllib.parse import quote

from ..infrastructure.error_handler import InvalidUrlError


class ContentKind(Enum):
    """Kind of content node a reference or entry points at."""

    FILE = "file"
    DIR = "dir"

    @classmethod
    def from_api_type(cls, value: Optional[str]) -> Optional["ContentKind"]:
        """Map the contents API ``type`` string; symlinks and submodules map to None."""

        if value == "file":
            return cls.FILE
        if value == "dir":
            return cls.DIR
        return None


@dataclass(frozen=True)
class GitHubReference:
    """Immutable, fully resolved pointer at one node of a GitHub tree."""

    owner: str
    repo: str
    git_ref: str
    path: str
    kind: ContentKind

    def __post_init__(self) -> None:
        if not self.owner or not self.repo:
            raise InvalidUrlError(self.web_url, "repository owner and name are required")
        if not self.git_ref:
            raise InvalidUrlError(self.web_url, "a branch, tag or commit is required")
        if not self.path and self.kind is not ContentKind.DIR:
            raise InvalidUrlError(self.web_url, "a file reference needs a path")

    @property
    def is_root(self) -> bool:
        return not self.path

    @property
    def name(self) -> str:
        """Final path segment, or the repository name at the root."""

        if self.is_root:
            return self.repo
        return self.path.rsplit("/", 1)[-1]

    @property
    def display_name(self) -> str:
        return f"{self.owner}/{self.repo}@{self.git_ref}:{self.path or '/'}"

    @property
    def web_url(self) -> str:
        marker = "tree" if self.kind is ContentKind.DIR else "blob"
        url = f"https://github.com/{self.owner}/{self.repo}/{marker}/{self.git_ref}"
        if self.path:
            url += f"/{self.path}"
        return url

    def child(self, name: str, kind: ContentKind = ContentKind.DIR) -> "GitHubReference":
        """
        Reference to ``name`` directly below this one.

        ``name`` is a decoded entry name from a listing; it is percent-encoded
        so that characters such as ``#``, ``?`` or ``%`` stay inside the path
        of URLs built from the reference.
        """

        segment = quote(name, safe="")
        path = f"{self.path}/{segment}" if self.path else segment
        return replace(self, path=path, kind=kind)


@dataclass
class ContentEntry:
    """
    One element of a contents API response.

    Every field is optional: a key that is missing, ``null`` or empty in the
    response is represented as None and left for the caller to judge.
    """

    name: Optional[str] = None
    path: Optional[str] = None
    entry_type: Optional[ContentKind] = None
    download_url: Optional[str] = None
    content: Optional[str] = None
    encoding: Optional[str] = None
    raw_type: Optional[str] = None

    @property
    def has_inline_content(self) -> bool:
        # GitHub reports encoding "none" with empty content for large files
        return self.content is not None and self.encoding != "none"


__all__ = [
    "ContentKind",
    "GitHubReference",
    "ContentEntry",
]
