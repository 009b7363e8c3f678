"""Role pattern groups and tuning constants for quote-document discovery.

ROLE_PATTERNS is order-sensitive: detection walks the groups top to bottom and
each group's tiers in order, so e.g. ``service_code`` resolves to carrier_name
(substring "servic") before carrier_id is ever tried.  Keys are matched after
``normalize_header``, so patterns only need lowercase ASCII and underscores.
"""

import re
from typing import NamedTuple

# ─── Roles ────────────────────────────────────────────────────────────────────

CARRIER_NAME = "carrier_name"
PRICE = "price"
DELIVERY_DAYS = "delivery_days"
CARRIER_ID = "carrier_id"
ERROR = "error"

ROLES = (CARRIER_NAME, PRICE, DELIVERY_DAYS, CARRIER_ID, ERROR)


class RolePattern(NamedTuple):
    """One role's pattern group: tier 0 is exact, tier 1 (when present) is substring."""

    role: str
    expected: str  # "string" | "number" | "any"
    tiers: tuple[re.Pattern, ...]


ROLE_PATTERNS: tuple[RolePattern, ...] = (
    RolePattern(
        CARRIER_NAME,
        "string",
        (
            re.compile(r"^(carrier_?name|nome|name|servico|service|descri|description|company|transportadora|carrier|label|titulo)$"),
            re.compile(r"(nome|name|descri|servic|carrier|company|transp|titulo)"),
        ),
    ),
    RolePattern(
        PRICE,
        "number",
        (
            re.compile(r"^(price|preco|valor|value|custo|cost|custom_?price|shipping_?price|vl_?frete|frete|amount|total)$"),
            re.compile(r"(price|preco|valor|custo|cost|frete|amount)"),
        ),
    ),
    RolePattern(
        DELIVERY_DAYS,
        "number",
        (
            re.compile(r"^(delivery_?days|delivery_?time|prazo|dias|days|tempo|lead_?time|custom_?delivery)$"),
            re.compile(r"(delivery|prazo|dias|days|tempo|lead_?time)"),
        ),
    ),
    RolePattern(
        CARRIER_ID,
        "any",
        (
            re.compile(r"^(carrier_?id|id|code|codigo|service_?code|cod)$"),
            re.compile(r"(^id$|carrier_?id|code|codigo)"),
        ),
    ),
    RolePattern(
        ERROR,
        "any",
        (re.compile(r"^(error|erro|err|has_?error|msg_?erro)$"),),
    ),
)

EXACT_CONFIDENCE = 0.95
SUBSTRING_CONFIDENCE = 0.6


# ─── Candidate Scoring ────────────────────────────────────────────────────────

# Empirical weights; kept exactly for compatibility with existing mappings
DISTINCT_ROLE_WEIGHT = 2
PRICE_BONUS = 3
CARRIER_NAME_BONUS = 2
MULTI_RECORD_BONUS = 1


# ─── Traversal Bounds ─────────────────────────────────────────────────────────

MAX_DEPTH = 5
ARRAY_FANOUT = 3

# Display value for an unmapped or missing text field in previews
PLACEHOLDER = "—"
