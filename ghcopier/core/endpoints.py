"""
URL construction for the GitHub contents API and raw content host.
"""

from ..models import GitHubReference
from ..models.config import DEFAULT_API_BASE_URL, DEFAULT_RAW_BASE_URL


def build_api_url(ref: GitHubReference, api_base_url: str = DEFAULT_API_BASE_URL) -> str:
    """Contents API endpoint for ``ref``; an empty path lists the repository root."""

    return (
        f"{api_base_url}/repos/{ref.owner}/{ref.repo}"
        f"/contents/{ref.path}?ref={ref.git_ref}"
    )


def build_raw_url(
    ref: GitHubReference,
    entry_path: str,
    raw_base_url: str = DEFAULT_RAW_BASE_URL
) -> str:
    """Raw download URL for ``entry_path`` at the reference's ref."""

    return f"{raw_base_url}/{ref.owner}/{ref.repo}/{ref.git_ref}/{entry_path.lstrip('/')}"


__all__ = ["build_api_url", "build_raw_url"]
