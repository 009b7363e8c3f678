"""Field-mapping construction, path resolution and preview building.

A FieldMapping is built once from the best candidate of a sample document,
may be edited by the operator one slot at a time, and is then persisted and
applied to live documents.  Every function here is a pure derivation from its
arguments: an operator override produces a new mapping and a freshly computed
preview rather than patching either in place.
"""

import logging
from types import MappingProxyType
from typing import Any

from rate_inference.config import DOCUMENT_PREVIEW_OPTIONS
from rate_inference.document.patterns import CARRIER_ID, CARRIER_NAME, DELIVERY_DAYS, ERROR, PLACEHOLDER, PRICE
from rate_inference.document.schema import ArrayCandidate, FieldMapping, NormalizedOption
from rate_inference.document.values import ValueKind, coerce_float, coerce_int, display_text, value_kind
from rate_inference.errors import MappingError

logger = logging.getLogger(__name__)

# Role -> FieldMapping attribute holding that role's key
ROLE_SLOTS = MappingProxyType(
    {
        CARRIER_NAME: "carrier_name",
        PRICE: "price",
        DELIVERY_DAYS: "delivery_days",
        CARRIER_ID: "carrier_id",
        ERROR: "error_field",
    }
)


# ─── Mapping Builder ──────────────────────────────────────────────────────────


def build_field_mapping(candidate: ArrayCandidate) -> FieldMapping:
    """Assemble a FieldMapping from the first field detected for each role (in field order)."""
    slots: dict[str, str] = {}
    for field in candidate.fields:
        if field.detected_role is None:
            continue
        slot = ROLE_SLOTS[field.detected_role]
        slots.setdefault(slot, field.key)
    mapping = FieldMapping(options_path=candidate.path, **slots)
    logger.debug("Built mapping %s", mapping.to_config())
    return mapping


# ─── Path Resolution ──────────────────────────────────────────────────────────


def _step(value: Any, segment: str) -> Any:
    """Descend one segment: an object key, or a numeric index into an array."""
    kind = value_kind(value)
    if kind is ValueKind.OBJECT:
        return value.get(segment)
    if kind is ValueKind.ARRAY and segment.isdigit():
        index = int(segment)
        return value[index] if index < len(value) else None
    return None


def _resolve(value: Any, segments: list[str]) -> Any:
    if not segments:
        return value
    head, rest = segments[0], segments[1:]
    if not head.endswith("[]"):
        return _resolve(_step(value, head), rest)

    # "key[]": map the remaining path over every element of the array at key
    items = _step(value, head[:-2]) if head[:-2] else value
    if value_kind(items) is not ValueKind.ARRAY:
        return None
    collected: list[Any] = []
    for item in items:
        resolved = _resolve(item, rest)
        if isinstance(resolved, list):
            collected.extend(resolved)
        elif resolved is not None:
            collected.append(resolved)
    return collected


def resolve_path(document: Any, path: str) -> Any:
    """Resolve a dot path against *document*; an empty path is the document itself.

    Segments ending in ``[]`` fan out over an array and concatenate the
    results.  Returns None when any segment cannot be followed.
    """
    if not path:
        return document
    return _resolve(document, path.split("."))


def get_field(item: Any, key: str | None) -> Any:
    """Look up a mapped field on one option element.

    A key present on the element is used as-is (keys may legitimately contain
    dots); otherwise a dotted key is resolved as a nested path.
    """
    if not key:
        return None
    if value_kind(item) is ValueKind.OBJECT and key in item:
        return item[key]
    if "." in key:
        return resolve_path(item, key)
    return None


def resolve_options(document: Any, options_path: str) -> list[Any] | None:
    """Return the options array at *options_path*, or None when it is missing or not an array."""
    resolved = resolve_path(document, options_path)
    return resolved if value_kind(resolved) is ValueKind.ARRAY else None


# ─── Preview ──────────────────────────────────────────────────────────────────


def to_option(item: Any, mapping: FieldMapping) -> NormalizedOption:
    """Read one option element through *mapping*, defaulting unmapped or missing fields."""
    return NormalizedOption(
        carrier_name=display_text(get_field(item, mapping.carrier_name), PLACEHOLDER),
        price=coerce_float(get_field(item, mapping.price)),
        delivery_days=coerce_int(get_field(item, mapping.delivery_days)),
        carrier_id=display_text(get_field(item, mapping.carrier_id), PLACEHOLDER),
    )


def build_preview(document: Any, mapping: FieldMapping, limit: int = DOCUMENT_PREVIEW_OPTIONS) -> list[NormalizedOption]:
    """Apply *mapping* to the first *limit* elements of the document's options array.

    An unresolvable options path yields an empty preview.
    """
    options = resolve_options(document, mapping.options_path)
    if options is None:
        logger.debug("Options path %r did not resolve to an array", mapping.options_path)
        return []
    return [to_option(item, mapping) for item in options[:limit]]


# ─── Operator Override ────────────────────────────────────────────────────────


def _slot_for(name: str) -> str:
    """Accept either a role name ("error") or a mapping attribute ("error_field")."""
    if name in ROLE_SLOTS:
        return ROLE_SLOTS[name]
    if name in ROLE_SLOTS.values():
        return name
    raise MappingError(f"Unknown mapping role {name!r}; expected one of {', '.join(ROLE_SLOTS)}")


def override_mapping(
    mapping: FieldMapping,
    reassignment: dict[str, str | None],
    document: Any,
    limit: int = DOCUMENT_PREVIEW_OPTIONS,
) -> tuple[FieldMapping, list[NormalizedOption]]:
    """Reassign role slots of *mapping* and recompute the preview from the sample *document*.

    A value of None or "" unmaps the role.  Returns the new mapping and its
    preview; *mapping* itself is not modified.
    """
    updates = {_slot_for(name): (key or None) for name, key in reassignment.items()}
    updated = mapping.model_copy(update=updates)
    logger.info("Mapping override %s -> %s", updates, updated.to_config())
    return updated, build_preview(document, updated, limit)
