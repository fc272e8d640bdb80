"""
Service layer: network fetches and filesystem writes.
"""

from .github_api import GitHubAPIService, FetchResponse
from .download import DownloadService

__all__ = ["GitHubAPIService", "FetchResponse", "DownloadService"]
