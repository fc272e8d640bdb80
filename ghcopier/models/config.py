"""
Configuration models for ghcopier.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..version import __version__


DEFAULT_API_BASE_URL = "https://api.github.com"
DEFAULT_RAW_BASE_URL = "https://raw.githubusercontent.com"


@dataclass
class CopierConfig:
    """
    Settings shared by the fetcher and the materializer.

    Only public repositories are supported, so there is no token here.
    """

    # Network settings
    timeout: float = 30.0
    user_agent: str = f"ghcopier/{__version__}"

    # Endpoints, overridable for GitHub-compatible mirrors and tests
    api_base_url: str = DEFAULT_API_BASE_URL
    raw_base_url: str = DEFAULT_RAW_BASE_URL

    def __post_init__(self) -> None:
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")
        if not self.user_agent:
            raise ValueError("user_agent is required")
        self.api_base_url = self.api_base_url.rstrip("/")
        self.raw_base_url = self.raw_base_url.rstrip("/")


__all__ = [
    "CopierConfig",
    "DEFAULT_API_BASE_URL",
    "DEFAULT_RAW_BASE_URL",
]
