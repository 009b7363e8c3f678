"""Locale-aware numeric coercion and CEP formatting for table cells.

Coercion never raises: a cell that cannot be read as a number yields 0, the
same value an empty cell gets.
"""

from rate_inference.table.patterns import CEP_WIDTH, LEADING_FLOAT_RE, LEADING_INT_RE, NON_DIGIT_RE, NON_NUMERIC_RE


def _cleanse(value: str, decimal_separator: str) -> str:
    """Strip currency symbols/spaces and rewrite a comma-decimal number into dot form."""
    cleaned = NON_NUMERIC_RE.sub("", value.strip())
    if decimal_separator == ",":
        # "1.234,56" -> "1234.56"
        cleaned = cleaned.replace(".", "").replace(",", ".", 1)
    return cleaned


def parse_number(value: str | None, decimal_separator: str = ".") -> float:
    """Convert a cell such as ``"R$ 1.234,56"`` to a float using *decimal_separator*; 0.0 on failure."""
    if not value or not value.strip():
        return 0.0
    match = LEADING_FLOAT_RE.match(_cleanse(value, decimal_separator))
    return float(match.group(0)) if match else 0.0


def parse_int(value: str | None, decimal_separator: str = ".") -> int:
    """Convert a cell such as ``"5 dias"`` to an int (leading integer part); 0 on failure."""
    if not value or not value.strip():
        return 0
    match = LEADING_INT_RE.match(_cleanse(value, decimal_separator))
    return int(match.group(0)) if match else 0


def digits_only(value: str | None) -> str:
    """Return *value* with every non-digit removed (``"01000-000"`` -> ``"01000000"``)."""
    return NON_DIGIT_RE.sub("", value or "")


def pad_cep(value: str | None) -> str:
    """Normalize a CEP to its fixed 8-digit form, left-padding with zeros and truncating overflow."""
    return digits_only(value).rjust(CEP_WIDTH, "0")[:CEP_WIDTH]


def format_cep(value: str | None) -> str:
    """Render a CEP for display as ``NNNNN-NNN``."""
    padded = pad_cep(value)
    return f"{padded[:5]}-{padded[5:]}"
