"""Tagged-union view of decoded JSON documents.

A quote document is whatever ``json.loads`` returns: None, bool, int/float,
str, list or dict, nested arbitrarily.  ``value_kind`` classifies a value into
exactly one ValueKind so traversal code can branch on an explicit tag instead
of probing types ad hoc.  Note that ``bool`` must be tested before numbers,
since ``bool`` is a subclass of ``int``.
"""

import json
import logging
import math
import re
from enum import Enum
from typing import Any

from rate_inference.config import MAX_DOCUMENT_BYTES
from rate_inference.errors import DocumentParseError, DocumentTooLargeError

logger = logging.getLogger(__name__)

# Leading numeric prefix, after optional whitespace ("32.50", " 4 dias", "-1.5")
_NUMERIC_PREFIX_RE = re.compile(r"^\s*([-+]?(?:\d+\.?\d*|\.\d+))")
_INT_PREFIX_RE = re.compile(r"^\s*([-+]?\d+)")


class ValueKind(str, Enum):
    """The six shapes a decoded document value can take."""

    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


def value_kind(value: Any) -> ValueKind:
    """Classify a decoded JSON value.

    Raises:
        TypeError: *value* is not something ``json.loads`` can produce.
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, list):
        return ValueKind.ARRAY
    if isinstance(value, dict):
        return ValueKind.OBJECT
    raise TypeError(f"Not a document value: {type(value).__name__}")


def is_record(value: Any) -> bool:
    """True for an object (a record-shaped element of an options array)."""
    return value_kind(value) is ValueKind.OBJECT


def is_numeric_like(value: Any) -> bool:
    """True for numbers and for strings that start with a number ("32.50", "4 dias")."""
    kind = value_kind(value)
    if kind is ValueKind.NUMBER:
        return True
    return kind is ValueKind.STRING and _NUMERIC_PREFIX_RE.match(value) is not None


# ─── Coercion ─────────────────────────────────────────────────────────────────


def coerce_float(value: Any) -> float:
    """Read a price-like value: numbers as-is, strings by leading numeric prefix, anything else 0."""
    kind = value_kind(value)
    if kind is ValueKind.NUMBER:
        try:
            number = float(value)
        except OverflowError:
            return 0.0
        return number if math.isfinite(number) else 0.0
    if kind is ValueKind.STRING:
        match = _NUMERIC_PREFIX_RE.match(value)
        return float(match.group(1)) if match else 0.0
    return 0.0


def coerce_int(value: Any) -> int:
    """Read a day-count value: numbers truncated toward zero, strings by leading integer prefix, anything else 0."""
    kind = value_kind(value)
    if kind is ValueKind.NUMBER:
        if isinstance(value, int):
            return value
        return int(value) if math.isfinite(value) else 0
    if kind is ValueKind.STRING:
        match = _INT_PREFIX_RE.match(value)
        return int(match.group(1)) if match else 0
    return 0


def display_text(value: Any, default: str) -> str:
    """Render a truthy value as display text; falsy values (None, "", 0, false) give *default*."""
    if not value:
        return default
    kind = value_kind(value)
    if kind is ValueKind.BOOLEAN:
        return "true"
    if kind is ValueKind.NUMBER:
        if isinstance(value, int):
            return str(value)
        if value.is_integer():
            return str(int(value))
    if kind in (ValueKind.ARRAY, ValueKind.OBJECT):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


# ─── Parsing ──────────────────────────────────────────────────────────────────


def parse_document(text: str, max_bytes: int = MAX_DOCUMENT_BYTES) -> Any:
    """Decode quote-document *text* (JSON) into a document value.

    Raises:
        DocumentTooLargeError: the UTF-8 encoded text exceeds *max_bytes*.
        DocumentParseError: the text is not valid JSON; carries the decoder's message and position.
    """
    size = len(text.encode("utf-8"))
    if size > max_bytes:
        raise DocumentTooLargeError(f"Document too large ({size} bytes, max {max_bytes})")

    try:
        document = json.loads(text.removeprefix("\ufeff"))
    except json.JSONDecodeError as exc:
        logger.debug("JSON decode failed at line %d col %d: %s", exc.lineno, exc.colno, exc.msg)
        raise DocumentParseError(f"Invalid JSON: {exc}", parser_message=str(exc), line=exc.lineno, column=exc.colno) from exc
    except ValueError as exc:
        # Valid syntax the decoder still rejects, e.g. integers past the digit limit
        logger.debug("JSON decode failed: %s", exc)
        raise DocumentParseError(f"Invalid JSON: {exc}", parser_message=str(exc)) from exc

    logger.debug("Parsed document (%d bytes), root kind %s", size, value_kind(document).value)
    return document
