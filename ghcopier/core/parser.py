"""
Parsing of GitHub web and raw URLs into ``GitHubReference`` values.
"""

from typing import List
from urllib.parse import urlsplit

from ..models import ContentKind, GitHubReference
from ..infrastructure.error_handler import InvalidUrlError
from ..infrastructure.logger import logger


GITHUB_HOSTS = frozenset({"github.com", "www.github.com"})
RAW_HOST = "raw.githubusercontent.com"

MARKERS = {
    "blob": ContentKind.FILE,
    "tree": ContentKind.DIR,
}


def parse(url: str) -> GitHubReference:
    """
    Turn a GitHub URL into a structured reference.

    Supported shapes::

        https://github.com/{owner}/{repo}/blob/{ref}/{path...}
        https://github.com/{owner}/{repo}/tree/{ref}/{path...}
        https://raw.githubusercontent.com/{owner}/{repo}/{ref}/{path...}

    Path segments are kept exactly as written; percent-encoded characters are
    not decoded.

    Args:
        url: URL as typed by the user

    Returns:
        The parsed GitHubReference

    Raises:
        InvalidUrlError: If the host, layout or ref is not supported
    """

    original = url
    url = url.strip()

    try:
        parts = urlsplit(url)
        host = (parts.hostname or "").lower()
    except ValueError as e:
        raise InvalidUrlError(original, str(e)) from e

    if parts.scheme not in ("https", "http"):
        raise InvalidUrlError(original, "only http(s) URLs are supported")

    segments = _split_path(parts.path)

    if host in GITHUB_HOSTS:
        reference = _parse_web(original, segments)
    elif host == RAW_HOST:
        reference = _parse_raw(original, segments)
    else:
        raise InvalidUrlError(original, "only github.com and raw.githubusercontent.com are supported")

    logger.debug(f"Parsed {original} as {reference.kind.value} {reference.display_name}")
    return reference


def _split_path(path: str) -> List[str]:
    # Empty segments come from leading, trailing or doubled slashes
    return [segment for segment in path.split("/") if segment]


def _parse_web(url: str, segments: List[str]) -> GitHubReference:
    if len(segments) < 2:
        raise InvalidUrlError(url, "missing repository owner or name")
    if len(segments) < 4:
        raise InvalidUrlError(url, "expected /blob/<ref>/ or /tree/<ref>/ after the repository")

    owner, repo, marker, git_ref = segments[:4]
    kind = MARKERS.get(marker)
    if kind is None:
        raise InvalidUrlError(url, f"unsupported URL type '{marker}'")

    path = "/".join(segments[4:])
    if kind is ContentKind.FILE and not path:
        raise InvalidUrlError(url, "blob URL does not name a file")

    return _build(url, owner, repo, git_ref, path, kind)


def _parse_raw(url: str, segments: List[str]) -> GitHubReference:
    if len(segments) < 3:
        raise InvalidUrlError(url, "expected /<owner>/<repo>/<ref>/<path>")

    owner, repo, git_ref = segments[:3]
    path = "/".join(segments[3:])
    if not path:
        raise InvalidUrlError(url, "raw URL does not name a file")

    return _build(url, owner, repo, git_ref, path, ContentKind.FILE)


def _build(
    url: str,
    owner: str,
    repo: str,
    git_ref: str,
    path: str,
    kind: ContentKind
) -> GitHubReference:
    if repo.endswith(".git"):
        repo = repo[:-4]
    try:
        return GitHubReference(owner=owner, repo=repo, git_ref=git_ref, path=path, kind=kind)
    except InvalidUrlError as e:
        # Report the URL the user typed rather than the rebuilt one
        raise InvalidUrlError(url, e.reason) from e


__all__ = ["parse", "GITHUB_HOSTS", "RAW_HOST"]
