"""Recursive discovery of record arrays in quote documents.

Quoting services nest their options list under unpredictable names and
depths (``options``, ``data.quotes``, ``packages[].quotations`` ...).  The
walker visits every object entry and the entries of the first few elements of
every array, down to MAX_DEPTH, and reports each array that holds at least one
record as an ArrayCandidate.

Path notation: object entries are joined with ``.``; descending into the
elements of an array appends ``[]`` to the array's segment, so the
``quotations`` arrays inside each element of a root ``packages`` array are
reported at ``packages[].quotations``.
"""

import logging
from typing import Any

from rate_inference.document.classifiers import detect_field_role
from rate_inference.document.patterns import (
    ARRAY_FANOUT,
    CARRIER_NAME,
    CARRIER_NAME_BONUS,
    DISTINCT_ROLE_WEIGHT,
    MAX_DEPTH,
    MULTI_RECORD_BONUS,
    PRICE,
    PRICE_BONUS,
)
from rate_inference.document.schema import ArrayCandidate, FieldDescriptor
from rate_inference.document.values import ValueKind, is_record, value_kind

logger = logging.getLogger(__name__)


def _join(parent: str, key: str) -> str:
    return f"{parent}.{key}" if parent else key


# ─── Scoring ──────────────────────────────────────────────────────────────────


def score_candidate(fields: tuple[FieldDescriptor, ...] | list[FieldDescriptor], length: int) -> int:
    """Score how likely a record array is to be the shipping options list."""
    roles = {f.detected_role for f in fields if f.detected_role}
    score = len(roles) * DISTINCT_ROLE_WEIGHT
    if PRICE in roles:
        score += PRICE_BONUS
    if CARRIER_NAME in roles:
        score += CARRIER_NAME_BONUS
    if length > 1:
        score += MULTI_RECORD_BONUS
    return score


def rank_candidates(candidates: list[ArrayCandidate]) -> list[ArrayCandidate]:
    """Order candidates by descending score; ties keep discovery order."""
    return sorted(candidates, key=lambda c: c.score, reverse=True)


# ─── Candidate Construction ───────────────────────────────────────────────────


def _describe_fields(record: dict[str, Any], path: str, depth: int) -> list[FieldDescriptor]:
    """Build a FieldDescriptor (with detected role) for every entry of the representative record."""
    fields: list[FieldDescriptor] = []
    for key, value in record.items():
        match = detect_field_role(key, value)
        fields.append(
            FieldDescriptor(
                path=_join(path, key),
                key=key,
                value_kind=value_kind(value),
                sample_value=value,
                depth=depth + 1,
                detected_role=match.role,
                confidence=match.confidence,
            )
        )
    return fields


def _build_candidate(array: list[Any], path: str, depth: int) -> ArrayCandidate | None:
    """Return an ArrayCandidate for *array*, or None when it holds no records."""
    records = [item for item in array if is_record(item)]
    if not records:
        return None
    fields = _describe_fields(records[0], path, depth)
    score = score_candidate(fields, len(records))
    logger.debug("Candidate at %r: %d records, %d fields, score %d", path, len(records), len(fields), score)
    return ArrayCandidate(path=path, length=len(records), fields=tuple(fields), score=score)


# ─── Recursive Walk ───────────────────────────────────────────────────────────


def _walk(value: Any, path: str, depth: int, found: dict[str, ArrayCandidate]) -> None:
    """Collect candidates under *value* into *found* (keyed by path, first discovery wins)."""
    if depth > MAX_DEPTH:
        return

    kind = value_kind(value)
    if kind is ValueKind.OBJECT:
        for key, child in value.items():
            _walk(child, _join(path, key), depth + 1, found)
    elif kind is ValueKind.ARRAY:
        if path not in found:
            candidate = _build_candidate(value, path, depth)
            if candidate is not None:
                found[path] = candidate
        element_path = f"{path}[]"
        for item in value[:ARRAY_FANOUT]:
            item_kind = value_kind(item)
            if item_kind is ValueKind.OBJECT:
                for key, child in item.items():
                    _walk(child, _join(element_path, key), depth + 1, found)
            elif item_kind is ValueKind.ARRAY:
                _walk(item, element_path, depth + 1, found)
    # null / boolean / number / string: leaves, nothing to discover


def find_array_candidates(document: Any) -> list[ArrayCandidate]:
    """Return every record array in *document* (up to MAX_DEPTH), in discovery order."""
    found: dict[str, ArrayCandidate] = {}
    _walk(document, "", 0, found)
    logger.info("Discovered %d array candidate(s)", len(found))
    return list(found.values())
