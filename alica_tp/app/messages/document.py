"""
Document parsing for ALICA message validation.

Turns a raw byte buffer into a generic JSON document whose root is an
object. Parsing is all-or-nothing: either the caller receives the complete
document or a DocumentError carrying a single InvalidFormat failure.

Nested documents are handed between validators as bytes, never as parsed
structures. ``dump_element`` produces those bytes from a located element.
"""

from __future__ import annotations

import json
from typing import Any, Dict, NoReturn

from alica_tp.app.messages.outcome import InvalidFormat


INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

# Longest decimal literal that can still fit a signed 64-bit integer
_INT64_DIGITS = 19


class DocumentError(ValueError):
    """Raised when a byte buffer cannot be parsed into an object document."""

    def __init__(self, failure: InvalidFormat) -> None:
        super().__init__(failure.description)
        self.failure = failure


def _reject_constant(name: str) -> NoReturn:
    # json accepts NaN / Infinity by default; they are not JSON.
    raise ValueError(f"Non-standard JSON constant: {name}")


def _parse_int(literal: str) -> int:
    # Literals too long for int64 are clamped just past its range, keeping
    # them out of the interpreter's int conversion limit.
    if len(literal.lstrip("-")) > _INT64_DIGITS:
        return INT64_MIN - 1 if literal.startswith("-") else INT64_MAX + 1
    return int(literal)


def parse_object(data: bytes) -> Dict[str, Any]:
    """
    Parse a byte buffer into an object document.

    Raises:
        TypeError: if ``data`` is not a bytes-like object.
        DocumentError: if the bytes are not UTF-8, not JSON, or the root
            value is not an object.
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(
            "parse_object expects bytes, "
            f"got {type(data).__name__}"
        )

    try:
        text = bytes(data).decode("utf-8")
    except UnicodeDecodeError:
        raise DocumentError(
            InvalidFormat(description="Message is not a UTF-8 string")
        ) from None

    try:
        root = json.loads(
            text,
            parse_constant=_reject_constant,
            parse_int=_parse_int,
        )
    except ValueError:
        raise DocumentError(
            InvalidFormat(description="Message is not a JSON document")
        ) from None
    except RecursionError:
        raise DocumentError(
            InvalidFormat(description="Message is nested too deeply")
        ) from None

    if not isinstance(root, dict):
        raise DocumentError(
            InvalidFormat(description="Root of message is not an object")
        )

    return root


def dump_element(element: Any) -> bytes:
    """Re-serialize a parsed element to the bytes a nested validator expects."""
    return json.dumps(
        element,
        separators=(",", ":"),
    ).encode("utf-8")
