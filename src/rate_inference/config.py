"""Shared configuration for the rate inference engine.

Operational limits can be overridden from the environment (or a ``.env`` file
at the project root).  Behavioural constants of the inference rules themselves
(recursion depth, scoring weights, sentinels) live next to the code that uses
them and are deliberately not configurable here.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).parent.parent.parent.resolve()
load_dotenv(ROOT / ".env")

# Largest quote document accepted by parse_document (bytes, UTF-8 encoded)
MAX_DOCUMENT_BYTES = int(os.getenv("RATE_INFERENCE_MAX_DOCUMENT_BYTES", str(5 * 1024 * 1024)))

# Number of normalized rate rows shown when previewing a table import
TABLE_PREVIEW_ROWS = int(os.getenv("RATE_INFERENCE_TABLE_PREVIEW_ROWS", "500"))

# Number of options shown when previewing a document mapping
DOCUMENT_PREVIEW_OPTIONS = int(os.getenv("RATE_INFERENCE_DOCUMENT_PREVIEW_OPTIONS", "10"))

# Log level used by the command-line entry point
LOG_LEVEL = os.getenv("RATE_INFERENCE_LOG_LEVEL", "INFO").upper()
