"""Pydantic models for the rate-table ingest path.

RawTable is what the tokenizer produces; ColumnMapping binds semantic fields to
column indices (auto-detected, then optionally edited by the operator); and
NormalizedRateRow is one CEP-range / weight-band rate record ready for storage.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from rate_inference.table.patterns import RATE_FIELDS

# Sentinel for "no upper weight bound" when a table has no weight-max column
UNBOUNDED_WEIGHT = 9999.0


class RawTable(BaseModel):
    """Tokenized delimited text: headers as authored plus one string list per data row.

    The tokenizer neither pads nor truncates, so a ragged source produces ragged
    rows here and consumers must handle short rows.
    """

    model_config = ConfigDict(frozen=True)

    headers: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...]
    delimiter: str = Field(min_length=1, max_length=1)


class ColumnMapping(BaseModel):
    """Semantic field -> zero-based column index.

    Unset fields are unbound.  Two fields may point at the same column when the
    operator does so explicitly; auto-detection never produces that.
    """

    model_config = ConfigDict(extra="forbid")

    range_start: int | None = Field(default=None, ge=0)
    range_end: int | None = Field(default=None, ge=0)
    weight_min: int | None = Field(default=None, ge=0)
    weight_max: int | None = Field(default=None, ge=0)
    price: int | None = Field(default=None, ge=0)
    lead_time: int | None = Field(default=None, ge=0)

    def bound(self) -> dict[str, int]:
        """Return only the bound fields, in vocabulary order."""
        return {name: getattr(self, name) for name in RATE_FIELDS if getattr(self, name) is not None}

    def has_range(self) -> bool:
        """True when both CEP range columns are bound (required to build rows)."""
        return self.range_start is not None and self.range_end is not None


class NormalizedRateRow(BaseModel):
    """One normalized rate record: a CEP range, a weight band, a price and a lead time."""

    model_config = ConfigDict(frozen=True)

    range_start: str
    range_end: str
    weight_min: float = 0.0
    weight_max: float = UNBOUNDED_WEIGHT
    price: float = 0.0
    lead_time_days: int = 0

    @model_validator(mode="after")
    def validate_range_digits(self) -> "NormalizedRateRow":
        """Ensure both range endpoints are non-empty digit strings."""
        for name in ("range_start", "range_end"):
            value = getattr(self, name)
            if not value or not value.isdigit():
                raise ValueError(f"{name} must be a non-empty digit string, got {value!r}")
        return self


class TableIngestResult(BaseModel):
    """Outcome of a text ingest: the tokenized table, the auto-detected mapping and the decimal separator in force."""

    model_config = ConfigDict(frozen=True)

    table: RawTable
    mapping: ColumnMapping
    decimal_separator: Literal[".", ","]

    @property
    def headers(self) -> tuple[str, ...]:
        return self.table.headers
