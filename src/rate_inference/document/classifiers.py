"""Field-role detection for quote-document keys.

Each function takes a record key (and its sample value) and decides which
shipping-option role, if any, that key plays.
"""

from typing import Any, NamedTuple

from rate_inference.document.patterns import EXACT_CONFIDENCE, ROLE_PATTERNS, SUBSTRING_CONFIDENCE
from rate_inference.document.values import ValueKind, is_numeric_like, value_kind
from rate_inference.normalize import normalize_header


class RoleMatch(NamedTuple):
    role: str | None
    confidence: float


NO_ROLE = RoleMatch(None, 0.0)


def value_fits(expected: str, value: Any) -> bool:
    """Return True if *value* satisfies a role's expected kind ("string", "number" or "any")."""
    if expected == "any":
        return True
    if expected == "number":
        return is_numeric_like(value)
    return value_kind(value) is ValueKind.STRING


def detect_field_role(key: str, value: Any) -> RoleMatch:
    """Classify a record key into a role using the ordered pattern groups.

    Exact-tier matches are accepted whatever the sample value; substring-tier
    matches only when the value fits the role's expected kind, otherwise the
    search moves on.
    """
    normalized = normalize_header(key)
    for pattern in ROLE_PATTERNS:
        for tier, regex in enumerate(pattern.tiers):
            if not regex.search(normalized):
                continue
            if tier == 0:
                return RoleMatch(pattern.role, EXACT_CONFIDENCE)
            if value_fits(pattern.expected, value):
                return RoleMatch(pattern.role, SUBSTRING_CONFIDENCE)
    return NO_ROLE
