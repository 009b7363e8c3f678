"""Header-to-field binding for rate tables.

Each semantic field is bound independently to the first header (left to right)
whose normalized form is the field name or one of its aliases.  When neither
CEP range column is found, a positional fallback binds the first two headers
that look like postal-range columns ("faixa1", "faixa2", "zip a", ...).
"""

import logging

from rate_inference.normalize import normalize_header
from rate_inference.table.patterns import COLUMN_ALIASES, POSTAL_RANGE_TERMS, RANGE_END, RANGE_START, RATE_FIELDS
from rate_inference.table.schema import ColumnMapping

logger = logging.getLogger(__name__)


def _matches_field(normalized: str, field: str) -> bool:
    """Return True if a normalized header names *field* directly or via an alias."""
    return normalized in (field, field.replace("_", "")) or normalized in COLUMN_ALIASES[field]


def _positional_range_fallback(normalized: list[str], bindings: dict[str, int]) -> None:
    """Bind the first two postal-range-looking headers to range_start / range_end, in order."""
    for i, header in enumerate(normalized):
        if not any(term in header for term in POSTAL_RANGE_TERMS):
            continue
        if RANGE_START not in bindings:
            bindings[RANGE_START] = i
        elif RANGE_END not in bindings:
            bindings[RANGE_END] = i
            break


def auto_map_columns(headers: list[str] | tuple[str, ...]) -> ColumnMapping:
    """Detect a ColumnMapping from raw *headers*.

    Fields with no matching header are left unbound.
    """
    normalized = [normalize_header(h) for h in headers]
    bindings: dict[str, int] = {}

    for field in RATE_FIELDS:
        for i, header in enumerate(normalized):
            if _matches_field(header, field):
                bindings[field] = i
                break

    if RANGE_START not in bindings and RANGE_END not in bindings and len(headers) >= 2:
        _positional_range_fallback(normalized, bindings)
        if RANGE_START in bindings:
            logger.debug("No range aliases matched; positional fallback bound %s", bindings)

    logger.info("Auto-mapped %d/%d fields from %d headers", len(bindings), len(RATE_FIELDS), len(headers))
    return ColumnMapping(**bindings)
