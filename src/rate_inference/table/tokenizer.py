"""Delimiter detection and quote-aware tokenizing of delimited rate tables.

Carrier exports arrive as comma-, semicolon- or tab-separated text, usually
from spreadsheet "Save as CSV" with whatever locale the operator had.  Only the
header line is used to pick the separator.
"""

import logging
import re

from rate_inference.errors import FormatError
from rate_inference.table.schema import RawTable

logger = logging.getLogger(__name__)

_LINE_BREAK_RE = re.compile(r"\r?\n")

BOM = "\ufeff"


# ─── Delimiter Detection ──────────────────────────────────────────────────────


def detect_delimiter(text: str) -> str:
    """Pick the most likely field separator from the first line of *text*.

    Tab wins when present and at least as frequent as both commas and
    semicolons; otherwise semicolon wins if it outnumbers commas; otherwise
    comma.  Never fails.
    """
    first_line = text.split("\n", 1)[0]
    tabs = first_line.count("\t")
    commas = first_line.count(",")
    semicolons = first_line.count(";")
    if tabs > 0 and tabs >= commas and tabs >= semicolons:
        return "\t"
    if semicolons > commas:
        return ";"
    return ","


# ─── Line Tokenizing ──────────────────────────────────────────────────────────


def tokenize_line(line: str, delimiter: str) -> list[str]:
    """Split one line into trimmed cells, honouring double-quoted fields and ``""`` escapes."""
    cells: list[str] = []
    current: list[str] = []
    in_quotes = False
    i = 0
    while i < len(line):
        ch = line[i]
        if ch == '"':
            if in_quotes and i + 1 < len(line) and line[i + 1] == '"':
                current.append('"')
                i += 1  # skip the escaped quote
            else:
                in_quotes = not in_quotes
        elif ch == delimiter and not in_quotes:
            cells.append("".join(current).strip())
            current = []
        else:
            current.append(ch)
        i += 1
    cells.append("".join(current).strip())
    return cells


def parse_table(text: str, delimiter: str | None = None) -> RawTable:
    """Tokenize delimited *text* into a RawTable.

    A leading byte-order mark is stripped and surrounding whitespace trimmed;
    blank lines are discarded.  The delimiter is auto-detected unless given.

    Raises:
        FormatError: fewer than two non-blank lines, or a header with fewer than two columns.
    """
    clean = text.removeprefix(BOM).strip()
    if delimiter is None:
        delimiter = detect_delimiter(clean)

    lines = [line for line in _LINE_BREAK_RE.split(clean) if line.strip()]
    if len(lines) < 2:
        raise FormatError("Invalid file: expected a header line and at least one data line")

    headers = tokenize_line(lines[0], delimiter)
    if len(headers) < 2:
        raise FormatError(f"Invalid file: header has {len(headers)} column(s), expected at least 2")

    rows = [tokenize_line(line, delimiter) for line in lines[1:]]

    logger.debug("Tokenized table: %d headers, %d rows, delimiter=%r", len(headers), len(rows), delimiter)
    return RawTable(headers=tuple(headers), rows=tuple(tuple(r) for r in rows), delimiter=delimiter)
