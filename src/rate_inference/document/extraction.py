"""Apply a persisted FieldMapping to a live quote document.

Unlike the preview, live extraction processes every element, drops the
options a provider flagged as errors or returned without a price or a
deadline, and reports why each raw item was skipped so the operator can
debug a mapping against real responses.  Slots left unmapped are read from
conventional keys (FALLBACK_KEYS) so a partial mapping still yields options.
"""

import json
import logging
from types import MappingProxyType
from typing import Any

from rate_inference.document.mapping import get_field, resolve_options
from rate_inference.document.schema import ExtractionResult, FieldMapping, QuoteOption
from rate_inference.document.values import ValueKind, coerce_float, coerce_int, display_text, value_kind

logger = logging.getLogger(__name__)

DEFAULT_CARRIER_NAME = "Frete"
PENDING_DELIVERY_TEXT = "A consultar"

# Maximum characters of a raw item echoed into a skip reason
_RAW_ECHO_CHARS = 200

# Conventional keys read when a slot is unmapped, first truthy value wins
FALLBACK_KEYS = MappingProxyType(
    {
        "carrier_name": ("carrierName", "name"),
        "price": ("price",),
        "delivery_days": ("deliveryDays", "delivery_days"),
        "carrier_id": ("carrierId", "id"),
    }
)


def delivery_text(days: int) -> str:
    """Customer-facing deadline text ("até 5 dias úteis", or "A consultar" when unknown)."""
    return f"até {days} dias úteis" if days else PENDING_DELIVERY_TEXT


def _read_slot(item: Any, mapping: FieldMapping, slot: str) -> Any:
    """Read *slot* through its mapped key, or through FALLBACK_KEYS when the slot is unmapped."""
    key = getattr(mapping, slot)
    if key:
        return get_field(item, key)
    for fallback in FALLBACK_KEYS[slot]:
        value = get_field(item, fallback)
        if value:
            return value
    return None


def _locate_options(document: Any, mapping: FieldMapping) -> tuple[list[Any], str | None]:
    """Find the raw options array; returns (items, reason) where reason is set when nothing was found."""
    if mapping.options_path:
        options = resolve_options(document, mapping.options_path)
        if options is None:
            return [], f"Path {mapping.options_path!r} did not resolve to an array"
        return options, None

    kind = value_kind(document)
    if kind is ValueKind.ARRAY:
        return document, None
    if kind is ValueKind.OBJECT and value_kind(document.get("options")) is ValueKind.ARRAY:
        logger.debug("No options path mapped; falling back to root 'options' key")
        return document["options"], None
    return [], "No array found in document; configure the options path in the mapping"


def extract_options(document: Any, mapping: FieldMapping) -> ExtractionResult:
    """Extract every valid shipping option from a live *document* using *mapping*."""
    items, reason = _locate_options(document, mapping)
    skipped: list[str] = [reason] if reason else []
    options: list[QuoteOption] = []

    for idx, item in enumerate(items):
        if mapping.error_field:
            error_value = get_field(item, mapping.error_field)
            if error_value:
                skipped.append(f"Item {idx}: flagged by {mapping.error_field!r} = {json.dumps(error_value, ensure_ascii=False)}")
                continue

        price = coerce_float(_read_slot(item, mapping, "price"))
        days = coerce_int(_read_slot(item, mapping, "delivery_days"))
        if price == 0 and days == 0:
            raw = json.dumps(item, ensure_ascii=False)[:_RAW_ECHO_CHARS]
            skipped.append(f"Item {idx}: price=0 and delivery_days=0. Raw: {raw}")
            continue

        options.append(
            QuoteOption(
                carrier_id=display_text(_read_slot(item, mapping, "carrier_id"), f"custom_{idx}"),
                carrier_name=display_text(_read_slot(item, mapping, "carrier_name"), DEFAULT_CARRIER_NAME),
                price=price,
                delivery_days=days,
                delivery_text=delivery_text(days),
            )
        )

    logger.info("Extracted %d option(s) from %d raw item(s), %d skipped", len(options), len(items), len(skipped))
    return ExtractionResult(options=tuple(options), raw_count=len(items), skipped=tuple(skipped))
