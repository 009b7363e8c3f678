"""Schema inference for carrier rate tables and shipping quote payloads.

Subpackages:
  table     -- delimited text: delimiter detection, tokenizing, header aliasing, numeric coercion
  document  -- parsed JSON documents: array discovery, field-role detection, mapping, preview, extraction

Modules:
  config     -- environment-driven limits (preview sizes, document size cap)
  errors     -- exception hierarchy shared by both ingest paths
  normalize  -- header/key canonicalisation used by both paths
  cli        -- ``rate-inference`` command-line entry point
"""
