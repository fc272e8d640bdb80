"""
Field-targeted reader for GitHub contents API responses.

The contents endpoint answers with either a single object (a file) or an
array of objects (a directory listing). Only a handful of top-level string
fields are needed, so instead of building a full document tree the scanner
walks the body once, keeps the known fields of each object and skips
everything else, nested values included.
"""

from __future__ import annotations

import base64
import binascii
import re
from enum import Enum
from typing import Dict, List, Tuple, Union

from ..models import ContentEntry, ContentKind
from ..infrastructure.error_handler import DecodeError, ParseError


KNOWN_FIELDS = frozenset({"name", "path", "type", "content", "download_url", "encoding"})

_STRING_CHUNK = re.compile(r'[^"\\]*')
_SCALAR = re.compile(r'[^\s,\]}]+')
_BASE64_NOISE = re.compile(r"\s+|\\[nr]")

_ESCAPES = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}


class ResponseShape(Enum):
    """Top-level shape of a contents API response."""

    OBJECT = "object"
    ARRAY = "array"


def response_shape(body: Union[str, bytes]) -> ResponseShape:
    """
    Classify a response body by its first non-whitespace character.

    Raises:
        ParseError: If the body is empty or starts with anything but ``{``/``[``
    """

    return _shape_of(_as_text(body))


def read_response(body: Union[str, bytes]) -> Tuple[ResponseShape, List[ContentEntry]]:
    """
    Classify and scan a contents API response in one pass.

    Returns:
        The response shape and its entries, as ``response_shape`` and
        ``extract_entries`` would report them

    Raises:
        ParseError: If the body is not an object or an array of objects
    """

    text = _as_text(body)
    shape = _shape_of(text)
    scanner = _FieldScanner(text)

    if shape is ResponseShape.OBJECT:
        records = [scanner.read_object()]
    else:
        records = scanner.read_object_array()
    scanner.expect_end()

    return shape, [_to_entry(fields) for fields in records]


def _shape_of(text: str) -> ResponseShape:
    text = text.lstrip()
    if not text:
        raise ParseError("Empty response body")
    if text[0] == "{":
        return ResponseShape.OBJECT
    if text[0] == "[":
        return ResponseShape.ARRAY
    raise ParseError(f"Expected a JSON object or array, got {text[:20]!r}")


def extract_entries(body: Union[str, bytes]) -> List[ContentEntry]:
    """
    Extract content entries from a contents API response.

    A single-object response yields one entry; an array yields one entry per
    element, in array order. Fields that are missing, ``null``, empty or not
    strings come back as None.

    Args:
        body: Raw response body (bytes are decoded as UTF-8)

    Returns:
        Ordered list of ContentEntry

    Raises:
        ParseError: If the body is not an object or an array of objects
    """

    return read_response(body)[1]


def decode_content(raw: str) -> bytes:
    """
    Decode base64 ``content`` as served by GitHub.

    GitHub wraps the payload every 60 characters; all whitespace is removed
    before decoding and missing ``=`` padding is restored.

    Raises:
        DecodeError: If the payload is not valid base64
    """

    cleaned = _BASE64_NOISE.sub("", raw)
    if len(cleaned) % 4 == 1:
        raise DecodeError(f"Invalid base64 length ({len(cleaned)} characters)")
    cleaned += "=" * (-len(cleaned) % 4)

    try:
        return base64.b64decode(cleaned, validate=True)
    except (binascii.Error, ValueError) as e:
        raise DecodeError("Invalid base64 content", e) from e


def _as_text(body: Union[str, bytes]) -> str:
    if isinstance(body, str):
        return body
    try:
        return body.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ParseError("Response body is not valid UTF-8", e) from e


def _to_entry(fields: Dict[str, str]) -> ContentEntry:
    raw_type = fields.get("type")
    return ContentEntry(
        name=fields.get("name"),
        path=fields.get("path"),
        entry_type=ContentKind.from_api_type(raw_type),
        download_url=fields.get("download_url"),
        content=fields.get("content"),
        encoding=fields.get("encoding"),
        raw_type=raw_type,
    )


####
##      SCANNER
#####
class _FieldScanner:
    """Single-pass cursor over a response body."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def read_object_array(self) -> List[Dict[str, str]]:
        self._expect("[")
        records: List[Dict[str, str]] = []
        if self._peek() == "]":
            self.pos += 1
            return records

        while True:
            if self._peek() != "{":
                raise ParseError(f"Array element at offset {self.pos} is not an object")
            records.append(self.read_object())
            if not self._next_item("]"):
                return records

    def read_object(self) -> Dict[str, str]:
        self._expect("{")
        fields: Dict[str, str] = {}
        if self._peek() == "}":
            self.pos += 1
            return fields

        while True:
            if self._peek() != '"':
                raise ParseError(f"Expected a field name at offset {self.pos}")
            key = self._read_string()
            self._expect(":")

            if self._peek() == '"':
                value = self._read_string()
                if key in KNOWN_FIELDS and value:
                    fields.setdefault(key, value)
            else:
                self._skip_value()

            if not self._next_item("}"):
                return fields

    def expect_end(self) -> None:
        self._skip_ws()
        if self.pos != len(self.text):
            raise ParseError(f"Unexpected data after offset {self.pos}")

    def _next_item(self, closer: str) -> bool:
        """Consume a separator; False once ``closer`` has been consumed."""

        char = self._peek()
        self.pos += 1
        if char == ",":
            return True
        if char == closer:
            return False
        if char == "":
            raise ParseError("Unexpected end of response body")
        raise ParseError(f"Expected ',' or '{closer}' at offset {self.pos - 1}")

    def _read_string(self) -> str:
        # Cursor sits on the opening quote
        self.pos += 1
        chunks: List[str] = []
        text = self.text

        while True:
            match = _STRING_CHUNK.match(text, self.pos)
            chunks.append(match.group())
            self.pos = match.end()

            if self.pos >= len(text):
                raise ParseError("Unterminated string in response body")
            if text[self.pos] == '"':
                self.pos += 1
                return "".join(chunks)

            chunks.append(self._read_escape())

    def _read_escape(self) -> str:
        # Cursor sits on the backslash
        code = self.text[self.pos + 1:self.pos + 2]
        if code in _ESCAPES:
            self.pos += 2
            return _ESCAPES[code]
        if code != "u":
            raise ParseError(f"Invalid escape sequence at offset {self.pos}")

        unit = self._read_code_unit()
        if 0xD800 <= unit < 0xDC00 and self.text.startswith("\\u", self.pos):
            low = self._read_code_unit()
            if 0xDC00 <= low < 0xE000:
                return chr(0x10000 + ((unit - 0xD800) << 10) + (low - 0xDC00))
            return chr(unit) + chr(low)
        return chr(unit)

    def _read_code_unit(self) -> int:
        digits = self.text[self.pos + 2:self.pos + 6]
        try:
            if len(digits) != 4:
                raise ValueError(digits)
            unit = int(digits, 16)
        except ValueError as e:
            raise ParseError(f"Invalid unicode escape at offset {self.pos}", e) from e
        self.pos += 6
        return unit

    def _skip_value(self) -> None:
        char = self._peek()
        if char == '"':
            self._read_string()
        elif char in ("{", "["):
            self._skip_container()
        else:
            match = _SCALAR.match(self.text, self.pos)
            if match is None:
                raise ParseError(f"Missing value at offset {self.pos}")
            self.pos = match.end()

    def _skip_container(self) -> None:
        depth = 0
        text = self.text
        while self.pos < len(text):
            char = text[self.pos]
            if char == '"':
                self._read_string()
                continue
            if char in "{[":
                depth += 1
            elif char in "}]":
                depth -= 1
            self.pos += 1
            if depth == 0:
                return
        raise ParseError("Unbalanced brackets in response body")

    def _expect(self, char: str) -> None:
        if self._peek() != char:
            raise ParseError(f"Expected '{char}' at offset {self.pos}")
        self.pos += 1

    def _peek(self) -> str:
        """Skip whitespace and return the next character, or '' at the end."""

        self._skip_ws()
        return self.text[self.pos:self.pos + 1]

    def _skip_ws(self) -> None:
        text = self.text
        while self.pos < len(text) and text[self.pos] in " \t\r\n":
            self.pos += 1


__all__ = [
    "ResponseShape",
    "response_shape",
    "read_response",
    "extract_entries",
    "decode_content",
    "KNOWN_FIELDS",
]
