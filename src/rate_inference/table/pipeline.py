"""Rate-table ingest pipeline.

Text ingest runs in two stages, matching the operator workflow:

  1. ``ingest_table`` tokenizes the text, auto-detects the ColumnMapping and
     picks the decimal separator.  The operator may now edit the mapping.
  2. ``build_rate_rows`` applies the (possibly edited) mapping to every row and
     produces NormalizedRateRow values.  ``preview_rate_rows`` is the capped
     variant used while the operator is still editing.

``normalize_table`` chains both stages for unattended imports.
"""

import logging

from rate_inference.config import TABLE_PREVIEW_ROWS
from rate_inference.errors import EmptyInputError, MappingError
from rate_inference.table.mapper import auto_map_columns
from rate_inference.table.numbers import digits_only, pad_cep, parse_int, parse_number
from rate_inference.table.schema import UNBOUNDED_WEIGHT, ColumnMapping, NormalizedRateRow, RawTable, TableIngestResult
from rate_inference.table.tokenizer import parse_table

logger = logging.getLogger(__name__)


def detect_decimal_separator(delimiter: str) -> str:
    """Semicolon-delimited exports come from comma-decimal locales; everything else uses a dot."""
    return "," if delimiter == ";" else "."


def ingest_table(text: str, decimal_separator: str | None = None) -> TableIngestResult:
    """Tokenize *text* and auto-detect its column mapping.

    *decimal_separator* is the operator's declared hint (``"."`` or ``","``);
    when omitted it is inferred from the delimiter.

    Raises:
        FormatError: propagated from the tokenizer.
        MappingError: *decimal_separator* is neither ``"."`` nor ``","``.
    """
    if decimal_separator not in (None, ".", ","):
        raise MappingError(f"Unsupported decimal separator {decimal_separator!r}; use '.' or ','")

    table = parse_table(text)
    mapping = auto_map_columns(table.headers)
    separator = decimal_separator or detect_decimal_separator(table.delimiter)
    logger.info(
        "Ingested table: %d rows, %d columns, delimiter=%r, decimal=%r",
        len(table.rows),
        len(table.headers),
        table.delimiter,
        separator,
    )
    return TableIngestResult(table=table, mapping=mapping, decimal_separator=separator)


def _cell(row: tuple[str, ...], index: int | None) -> str | None:
    """Return the cell at *index*, or None when unbound or past the end of a short row."""
    if index is None or index >= len(row):
        return None
    return row[index]


def _normalize_row(row: tuple[str, ...], mapping: ColumnMapping, decimal_separator: str) -> NormalizedRateRow | None:
    """Build one NormalizedRateRow, or None when either CEP endpoint has no digits."""
    start = digits_only(_cell(row, mapping.range_start))
    end = digits_only(_cell(row, mapping.range_end))
    if not start or not end:
        return None

    return NormalizedRateRow(
        range_start=pad_cep(start),
        range_end=pad_cep(end),
        weight_min=parse_number(_cell(row, mapping.weight_min), decimal_separator) if mapping.weight_min is not None else 0.0,
        weight_max=(
            parse_number(_cell(row, mapping.weight_max), decimal_separator) if mapping.weight_max is not None else UNBOUNDED_WEIGHT
        ),
        price=parse_number(_cell(row, mapping.price), decimal_separator) if mapping.price is not None else 0.0,
        lead_time_days=parse_int(_cell(row, mapping.lead_time), decimal_separator) if mapping.lead_time is not None else 0,
    )


def build_rate_rows(
    table: RawTable,
    mapping: ColumnMapping,
    decimal_separator: str = ".",
    limit: int | None = None,
) -> list[NormalizedRateRow]:
    """Apply *mapping* to the rows of *table* (the first *limit* rows when given).

    Rows whose CEP range is empty are dropped.  A mapping without both range
    columns yields no rows at all.
    """
    if not mapping.has_range():
        logger.debug("Mapping has no CEP range columns bound; no rows built")
        return []

    source_rows = table.rows if limit is None else table.rows[:limit]
    rows: list[NormalizedRateRow] = []
    for row in source_rows:
        normalized = _normalize_row(row, mapping, decimal_separator)
        if normalized is not None:
            rows.append(normalized)

    logger.debug("Built %d rate rows from %d source rows", len(rows), len(source_rows))
    return rows


def preview_rate_rows(table: RawTable, mapping: ColumnMapping, decimal_separator: str = ".") -> list[NormalizedRateRow]:
    """Build rows from at most TABLE_PREVIEW_ROWS source rows, for interactive mapping review."""
    return build_rate_rows(table, mapping, decimal_separator, limit=TABLE_PREVIEW_ROWS)


def normalize_table(
    text: str,
    decimal_separator: str | None = None,
    mapping: ColumnMapping | None = None,
) -> list[NormalizedRateRow]:
    """Ingest *text* and build every normalized rate row in one step.

    *mapping* overrides the auto-detected one (e.g. an operator-edited mapping).

    Raises:
        FormatError: malformed text.
        MappingError: the CEP range columns are not both bound.
        EmptyInputError: every row was discarded for lacking a CEP range.
    """
    result = ingest_table(text, decimal_separator)
    applied = mapping or result.mapping
    if not applied.has_range():
        raise MappingError("Map both CEP range columns (range_start and range_end) before importing")

    rows = build_rate_rows(result.table, applied, result.decimal_separator)
    if not rows:
        raise EmptyInputError("No valid rows to import; check the column mapping")

    logger.info("Normalized %d of %d rows", len(rows), len(result.table.rows))
    return rows
