"""
Cross-cutting infrastructure: error taxonomy and logging.
"""

from .error_handler import (
    CopierError,
    InvalidUrlError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    ParseError,
    DecodeError,
    FileSystemError,
)
from .logger import logger

__all__ = [
    "CopierError",
    "InvalidUrlError",
    "NetworkError",
    "NotFoundError",
    "RateLimitError",
    "ParseError",
    "DecodeError",
    "FileSystemError",
    "logger",
]
