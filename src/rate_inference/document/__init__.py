"""Quote-document structure discovery and field mapping.

Submodules:
  values       -- ValueKind tagged union over decoded JSON, coercion helpers, parse_document
  patterns     -- ordered role pattern groups and scoring/traversal constants
  schema       -- FieldDescriptor, ArrayCandidate, FieldMapping, NormalizedOption Pydantic models
  classifiers  -- field-role detection for a single key/sample value
  discovery    -- recursive array-candidate search and scoring
  mapping      -- mapping builder, path resolution, preview and override
  extraction   -- apply a persisted mapping to a live quote document
  pipeline     -- analyze_document / analyze_document_text entry points
"""
