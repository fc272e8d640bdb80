"""
ghcopier - copy files and folders out of public GitHub repositories.
"""

from .version import __version__
from .core import parse
from .interfaces.api import GitHubCopier
from .models import ContentKind, CopierConfig, GitHubReference, MaterializeResult
from .infrastructure.error_handler import (
    CopierError,
    InvalidUrlError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    ParseError,
    DecodeError,
    FileSystemError,
)

__all__ = [
    "__version__",
    "parse",
    "GitHubCopier",
    "ContentKind",
    "CopierConfig",
    "GitHubReference",
    "MaterializeResult",
    "CopierError",
    "InvalidUrlError",
    "NetworkError",
    "NotFoundError",
    "RateLimitError",
    "ParseError",
    "DecodeError",
    "FileSystemError",
]
