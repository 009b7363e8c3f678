"""Pydantic models for quote-document analysis.

FieldMapping doubles as the persisted configuration record.  Its camelCase
aliases match the stored shape::

    {"optionsPath": "...", "carrierName": "...", "price": "...",
     "deliveryDays": "...", "carrierId": "...", "errorField": "..."}
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from rate_inference.document.values import ValueKind
from rate_inference.errors import NoCandidateFoundError


class FieldDescriptor(BaseModel):
    """One entry of a candidate's representative record, with its detected role."""

    model_config = ConfigDict(frozen=True)

    path: str
    key: str
    value_kind: ValueKind
    sample_value: Any = None
    depth: int = 0
    detected_role: str | None = None
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)


class ArrayCandidate(BaseModel):
    """An array of records somewhere in a document that could hold the shipping options."""

    model_config = ConfigDict(frozen=True)

    path: str
    length: int = Field(ge=1)
    fields: tuple[FieldDescriptor, ...]
    score: int = 0

    def field_keys(self) -> list[str]:
        return [f.key for f in self.fields]


class FieldMapping(BaseModel):
    """Where to find the options array and each option field in a quote document.

    Unset slots are None.  ``to_config`` / ``from_config`` convert to and from
    the persisted camelCase record.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    options_path: str = Field(default="", alias="optionsPath")
    carrier_name: str | None = Field(default=None, alias="carrierName")
    price: str | None = None
    delivery_days: str | None = Field(default=None, alias="deliveryDays")
    carrier_id: str | None = Field(default=None, alias="carrierId")
    error_field: str | None = Field(default=None, alias="errorField")

    def to_config(self) -> dict[str, str]:
        return self.model_dump(by_alias=True, exclude_none=True)

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> "FieldMapping":
        # Stored configs may carry "" for unmapped slots
        cleaned = {k: v for k, v in config.items() if v != "" or k in ("optionsPath", "options_path")}
        return cls.model_validate(cleaned)


class NormalizedOption(BaseModel):
    """One shipping option read from a document through a FieldMapping."""

    model_config = ConfigDict(frozen=True)

    carrier_name: str
    price: float = 0.0
    delivery_days: int = 0
    carrier_id: str


class QuoteOption(NormalizedOption):
    """A live-extracted option, with the customer-facing delivery text."""

    delivery_text: str


class DocumentAnalysis(BaseModel):
    """Everything discovered about a sample document, plus the suggested mapping and its preview."""

    model_config = ConfigDict(frozen=True)

    root_kind: ValueKind
    candidates: tuple[ArrayCandidate, ...] = ()
    best: ArrayCandidate | None = None
    suggested_mapping: FieldMapping | None = None
    preview: tuple[NormalizedOption, ...] = ()
    warning: str | None = None

    def require_mapping(self) -> FieldMapping:
        """Return the suggested mapping, or raise NoCandidateFoundError when there is none."""
        if self.suggested_mapping is None:
            raise NoCandidateFoundError(self.warning or "No array of records found in document")
        return self.suggested_mapping


class ExtractionResult(BaseModel):
    """Options extracted from a live document, with one reason per skipped raw item."""

    model_config = ConfigDict(frozen=True)

    options: tuple[QuoteOption, ...] = ()
    raw_count: int = 0
    skipped: tuple[str, ...] = ()
