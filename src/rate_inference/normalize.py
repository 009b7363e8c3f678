"""Header and key canonicalisation shared by the table and document paths."""

import re
import unicodedata

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")


def normalize_header(raw: str) -> str:
    """Canonicalise a header or document key into a comparison key.

    Lowercases, strips diacritical marks, collapses every run of
    non-alphanumeric characters into a single underscore and trims underscores
    from both ends: ``"CEP Início"`` -> ``"cep_inicio"``.
    """
    decomposed = unicodedata.normalize("NFD", raw.lower())
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return _NON_ALNUM_RE.sub("_", stripped).strip("_")
