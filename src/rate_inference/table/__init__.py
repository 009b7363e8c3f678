"""Delimited rate-table ingest.

Submodules:
  patterns   -- alias table, postal-range terms, numeric cleansing regexes
  schema     -- RawTable, ColumnMapping, NormalizedRateRow Pydantic models
  tokenizer  -- delimiter detection and quote-aware row tokenizing
  mapper     -- header-to-field binding (alias match + positional fallback)
  numbers    -- locale-aware numeric coercion and CEP formatting
  pipeline   -- ingest_table / build_rate_rows / normalize_table entry points
"""
