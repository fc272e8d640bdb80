"""
Error taxonomy and error-translation helpers for ghcopier.

Every failure the copier can report derives from ``CopierError``. Lower
layers raise these directly; the decorators below translate third-party and
OS exceptions at the boundaries where they occur.
"""

from __future__ import annotations

import functools
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Optional, TypeVar, Union

import httpx


F = TypeVar("F", bound=Callable[..., Any])


####
##      EXCEPTION CLASSES
#####
class CopierError(Exception):
    """Base exception for all copy operations."""

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        self.message = message
        self.original_error = original_error
        super().__init__(self._format())

    def _format(self) -> str:
        if self.original_error is not None:
            return f"{self.message} (Original: {self.original_error})"
        return self.message


class InvalidUrlError(CopierError):
    """Raised when a URL is not a supported GitHub file or folder URL."""

    def __init__(self, url: str, reason: str = "not a GitHub blob, tree or raw URL"):
        self.url = url
        self.reason = reason
        super().__init__(f"Invalid URL: {url} ({reason})")


class NetworkError(CopierError):
    """Raised on transport failures and unexpected HTTP statuses."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        url: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.status_code = status_code
        self.url = url
        super().__init__(message, original_error)


class NotFoundError(CopierError):
    """Raised when GitHub answers 404 for a reference."""

    def __init__(self, url: str):
        self.url = url
        self.status_code = 404
        super().__init__(f"Not found: {url}")


class RateLimitError(CopierError):
    """Raised when GitHub refuses a request with 403 or 429."""

    def __init__(self, url: str, status_code: int, reset_at: Optional[datetime] = None):
        self.url = url
        self.status_code = status_code
        self.reset_at = reset_at
        message = f"Rate limited by GitHub (HTTP {status_code}): {url}"
        if reset_at is not None:
            message += f"; limit resets at {reset_at.isoformat(sep=' ', timespec='seconds')}"
        super().__init__(message)


class ParseError(CopierError):
    """Raised when an API response does not have the expected shape."""


class DecodeError(CopierError):
    """Raised when base64 file content cannot be decoded."""


class FileSystemError(CopierError):
    """Raised when a local directory or file cannot be created or written."""

    def __init__(
        self,
        path: Union[str, Path],
        original_error: OSError,
        action: str = "write",
    ):
        self.path = Path(path)
        self.action = action
        super().__init__(f"Cannot {action} {self.path}", original_error)


####
##      DECORATORS
#####
def handle_transport_error(func: F) -> F:
    """
    Translate ``httpx`` transport failures into ``NetworkError``.

    The wrapped callable's first positional argument after ``self`` is
    expected to be the URL being fetched; it is attached to the error.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except httpx.TimeoutException as e:
            url = _url_from(args, kwargs)
            raise NetworkError(f"Request timed out: {url}", url=url, original_error=e) from e
        except httpx.TransportError as e:
            url = _url_from(args, kwargs)
            raise NetworkError(f"Request failed: {url}", url=url, original_error=e) from e

    return wrapper  # type: ignore[return-value]


def handle_filesystem_error(action: str) -> Callable[[F], F]:
    """
    Translate ``OSError`` raised by filesystem helpers into ``FileSystemError``.

    The wrapped callable's first positional argument is taken as the path;
    ``action`` names what was attempted on it ("write", "create directory").
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return func(*args, **kwargs)
            except OSError as e:
                path = kwargs.get("path", args[0] if args else getattr(e, "filename", ""))
                raise FileSystemError(path, e, action) from e

        return wrapper  # type: ignore[return-value]

    return decorator


def _url_from(args: tuple, kwargs: dict) -> Optional[str]:
    if "url" in kwargs:
        return str(kwargs["url"])
    # Bound methods receive self first
    for arg in args:
        if isinstance(arg, (str, httpx.URL)):
            return str(arg)
    return None


__all__ = [
    "CopierError",
    "InvalidUrlError",
    "NetworkError",
    "NotFoundError",
    "RateLimitError",
    "ParseError",
    "DecodeError",
    "FileSystemError",
    "handle_transport_error",
    "handle_filesystem_error",
]
