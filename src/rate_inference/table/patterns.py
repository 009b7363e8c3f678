"""Static alias data and compiled regexes for rate-table ingest.

The alias table covers the header spellings seen across Brazilian carriers'
exports (Portuguese, abbreviated, and English variants).  All values are
normalized with ``normalize_header`` before comparison, so entries here must
already be in that form.
"""

import re
from types import MappingProxyType

# ─── Semantic Field Vocabulary ────────────────────────────────────────────────

RANGE_START = "range_start"
RANGE_END = "range_end"
WEIGHT_MIN = "weight_min"
WEIGHT_MAX = "weight_max"
PRICE = "price"
LEAD_TIME = "lead_time"

RATE_FIELDS = (RANGE_START, RANGE_END, WEIGHT_MIN, WEIGHT_MAX, PRICE, LEAD_TIME)


# ─── Header Aliases ───────────────────────────────────────────────────────────

# Alias sets are pairwise disjoint, so one header never binds two fields
COLUMN_ALIASES = MappingProxyType(
    {
        RANGE_START: frozenset(
            {
                "cep_inicio",
                "cepinicio",
                "cep_de",
                "cep_inicial",
                "faixa_inicio",
                "faixa_cep_inicio",
                "de",
                "cep_from",
                "zip_from",
                "zip_start",
                "inicio",
                "inicial",
                "from",
                "start",
            }
        ),
        RANGE_END: frozenset(
            {
                "cep_fim",
                "cepfim",
                "cep_ate",
                "cep_final",
                "faixa_fim",
                "faixa_cep_fim",
                "ate",
                "cep_to",
                "zip_to",
                "zip_end",
                "fim",
                "final",
                "to",
                "end",
            }
        ),
        WEIGHT_MIN: frozenset({"peso_min", "pesomin", "peso_de", "weight_min", "peso_minimo", "kg_min", "de_kg", "min_weight"}),
        WEIGHT_MAX: frozenset({"peso_max", "pesomax", "peso_ate", "weight_max", "peso_maximo", "kg_max", "ate_kg", "kg", "max_weight"}),
        PRICE: frozenset({"valor", "preco", "frete", "price", "value", "vl_frete", "valor_frete", "custo", "cost"}),
        LEAD_TIME: frozenset(
            {"prazo", "prazo_dias", "dias", "delivery", "days", "delivery_days", "prazo_entrega", "tempo", "lead_time_days"}
        ),
    }
)

# Substrings that mark a header as a postal-range column (positional fallback)
POSTAL_RANGE_TERMS = ("cep", "faixa", "zip")


# ─── Cell Cleansing ───────────────────────────────────────────────────────────

# Everything that cannot be part of a number in either locale
NON_NUMERIC_RE = re.compile(r"[^\d.,\-]")

# Leading float / integer prefix of an already-cleansed cell
LEADING_FLOAT_RE = re.compile(r"^[-+]?(?:\d+\.?\d*|\.\d+)")
LEADING_INT_RE = re.compile(r"^[-+]?\d+")

NON_DIGIT_RE = re.compile(r"\D")

# Fixed CEP width (Brazilian postal codes are 8 digits)
CEP_WIDTH = 8
