"""
Core logic: URL parsing, endpoint construction and response decoding.

The materializer lives in ``ghcopier.core.materializer`` and is imported
from there directly.
"""

from .parser import parse
from .endpoints import build_api_url, build_raw_url
from .decoder import (
    ResponseShape, response_shape, read_response, extract_entries, decode_content
)

__all__ = [
    "parse",
    "build_api_url",
    "build_raw_url",
    "ResponseShape",
    "response_shape",
    "read_response",
    "extract_entries",
    "decode_content",
]
